"""Generate the merged credit sales report: summary pages + source annex."""

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from .export.filename import suggested_filename
from .layout.engine import layout_summary
from .models.invoice_record import coerce_records
from .pipeline.compositor import merge
from .pipeline.pdf_writer import render_document
from .pipeline.reader import describe_pdf

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedReport:
    """A merged report ready for download.
    
    Attributes:
        content: Merged PDF bytes
        filename: Suggested download filename
        summary_page_count: Number of generated summary pages
        source_page_count: Number of appended source pages
        grand_total: Sum of record totals
    """
    content: bytes
    filename: str
    summary_page_count: int
    source_page_count: int
    grand_total: float
    
    @property
    def page_count(self) -> int:
        return self.summary_page_count + self.source_page_count
    
    def save(self, output_dir: Union[str, Path]) -> Path:
        """Write the report into output_dir under its suggested filename."""
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)
        report_path = output_path / self.filename
        report_path.write_bytes(self.content)
        return report_path


def generate_report(
    records: Iterable[Any],
    source_bytes: bytes,
    today: Optional[date] = None,
) -> GeneratedReport:
    """Compose the summary for `records` and append the source document.
    
    Args:
        records: Ordered InvoiceRecord objects (or mappings)
        source_bytes: PDF content of the originally scanned invoice
        today: Generation date (default: date.today())
        
    Returns:
        GeneratedReport
        
    Raises:
        DecodeError: If the source is not a readable PDF
        EncodeError: If the summary or the merged document cannot be written
    """
    records = coerce_records(records)
    today = today if today is not None else date.today()
    
    layout = layout_summary(records, today=today)
    summary_bytes = render_document(layout.document)
    content = merge(summary_bytes, source_bytes)
    merged_pages = len(describe_pdf(content, "merged"))
    
    supplier = records[0].supplier_name if records else None
    report = GeneratedReport(
        content=content,
        filename=suggested_filename(supplier, today=today),
        summary_page_count=layout.page_count,
        source_page_count=merged_pages - layout.page_count,
        grand_total=layout.grand_total,
    )
    logger.info(f"Generated {report.filename}: {report.page_count} page(s)")
    return report

