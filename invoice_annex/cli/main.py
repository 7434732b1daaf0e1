"""CLI interface: generate the merged summary report from extracted records."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import get_app_name, get_app_version, get_default_output_dir, get_log_level
from ..errors import InvoiceAnnexError
from ..export.excel_export import default_excel_filename, export_records_to_excel
from ..models.invoice_record import InvoiceRecord
from ..pipeline.image_source import load_source_bytes
from ..report import generate_report

logger = logging.getLogger(__name__)


def load_records(path: str) -> List[InvoiceRecord]:
    """Read records from a JSON file holding a list of objects (or one object).

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the file is not valid JSON of the expected shape
    """
    records_path = Path(path)
    if not records_path.is_file():
        raise FileNotFoundError(f"Records file not found: {records_path}")
    try:
        with open(records_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Records file is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError("Records file must contain a JSON object or a list of objects")
    return [InvoiceRecord.from_dict(item) for item in data]


def run(
    records_path: str,
    source_path: str,
    output_dir: str,
    excel: bool = False,
) -> dict:
    """Generate the report (and optionally the Excel export) into output_dir.

    Returns:
        Dict with keys: report_path, excel_path (or None), page_count
    """
    records = load_records(records_path)
    source_bytes = load_source_bytes(source_path)

    report = generate_report(records, source_bytes)
    report_path = report.save(output_dir)

    excel_path = None
    if excel and records:
        excel_path = export_records_to_excel(records, Path(output_dir) / default_excel_filename())
    elif excel:
        logger.warning("No records; skipping Excel export")

    return {
        "report_path": str(report_path),
        "excel_path": excel_path,
        "page_count": report.page_count,
        "summary_page_count": report.summary_page_count,
        "grand_total": report.grand_total,
    }


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="invoice-annex",
        description=f"{get_app_name()} - Build a credit sales summary PDF and append the scanned invoice"
    )

    parser.add_argument(
        "--records",
        required=True,
        help="JSON file with extracted invoice records"
    )

    parser.add_argument(
        "--source",
        required=True,
        help="Original invoice to append (PDF, PNG or JPEG)"
    )

    parser.add_argument(
        "--output",
        required=False,
        help="Output directory (default: INVOICE_ANNEX_OUTPUT_DIR or ./out)"
    )

    parser.add_argument(
        "--excel",
        action="store_true",
        help="Also write the records to an Excel file"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {get_app_version()}"
    )

    args = parser.parse_args(argv)

    level = logging.INFO if args.verbose else getattr(logging, get_log_level())
    logging.basicConfig(level=level, format="%(message)s")

    output_dir = args.output
    if not output_dir:
        output_dir = str(get_default_output_dir())
        print(f"Using default output directory: {output_dir}")

    try:
        result = run(args.records, args.source, output_dir, excel=args.excel)
    except (InvoiceAnnexError, OSError, ValueError) as e:
        logger.debug("Report generation failed", exc_info=True)
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    print(f"Report: {result['report_path']} ({result['page_count']} pages)")
    if result["excel_path"]:
        print(f"Excel: {result['excel_path']}")
    sys.exit(0)


if __name__ == "__main__":
    main()
