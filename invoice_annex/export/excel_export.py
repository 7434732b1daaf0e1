"""Excel export of invoice records with a grand total row."""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import pandas as pd

from ..models.invoice_record import coerce_records, grand_total

logger = logging.getLogger(__name__)

SHEET_NAME = "Invoice Data"
GRAND_TOTAL_LABEL = "GRAND TOTAL"

# Column name -> width in characters
COLUMN_WIDTHS = {
    "Invoice Date": 12,
    "Supplier Name": 20,
    "Description": 40,
    "Quantity": 10,
    "Amount": 12,
    "VAT": 12,
    "Total": 12,
}
MONEY_COLUMNS = ("Amount", "VAT", "Total")


def default_excel_filename(today: Optional[date] = None) -> str:
    """Default export name, e.g. "invoice-data-2025-06-14.xlsx"."""
    today = today if today is not None else date.today()
    return f"invoice-data-{today.isoformat()}.xlsx"


def export_records_to_excel(
    records: Iterable[Any],
    output_path: Union[str, Path],
) -> str:
    """Export invoice records to an Excel file.
    
    Args:
        records: InvoiceRecord objects or mappings with record keys
        output_path: Path to output Excel file
        
    Returns:
        Path to created Excel file
        
    Raises:
        ValueError: If there are no records
        
    Excel structure:
    - One row per record: Invoice Date, Supplier Name, Description,
      Quantity, Amount, VAT, Total (missing numbers as 0)
    - A final GRAND TOTAL row with the sum of Total
    """
    records = coerce_records(records)
    if not records:
        raise ValueError("Cannot export empty invoice records list")
    
    rows = []
    for record in records:
        rows.append({
            "Invoice Date": record.date or "",
            "Supplier Name": record.supplier_name or "",
            "Description": record.description or "",
            "Quantity": record.quantity or 0,
            "Amount": record.amount or 0,
            "VAT": record.vat or 0,
            "Total": record.total or 0,
        })
    rows.append({
        "Invoice Date": "",
        "Supplier Name": "",
        "Description": GRAND_TOTAL_LABEL,
        "Quantity": 0,
        "Amount": 0,
        "VAT": 0,
        "Total": grand_total(records),
    })
    
    df = pd.DataFrame(rows, columns=list(COLUMN_WIDTHS))
    
    output_path_obj = Path(output_path)
    output_path_obj.parent.mkdir(parents=True, exist_ok=True)
    
    with pd.ExcelWriter(output_path_obj, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
        worksheet = writer.sheets[SHEET_NAME]
        
        from openpyxl.styles.numbers import FORMAT_NUMBER_00
        from openpyxl.utils import get_column_letter
        
        for idx, (name, width) in enumerate(COLUMN_WIDTHS.items(), start=1):
            worksheet.column_dimensions[get_column_letter(idx)].width = width
        
        money_idx = [df.columns.get_loc(name) for name in MONEY_COLUMNS]
        for row in worksheet.iter_rows(min_row=2, max_row=worksheet.max_row):
            for i in money_idx:
                row[i].number_format = FORMAT_NUMBER_00
    
    logger.info(f"Exported {len(records)} record(s) to {output_path_obj}")
    return str(output_path_obj)
