"""Invoice Annex: credit sales summary PDFs merged with the scanned invoice."""

from .errors import DecodeError, EmptyInputWarning, EncodeError, InvoiceAnnexError
from .layout.engine import compose, layout_summary
from .models.invoice_record import InvoiceRecord
from .pipeline.compositor import merge
from .report import GeneratedReport, generate_report

__all__ = [
    "DecodeError",
    "EmptyInputWarning",
    "EncodeError",
    "GeneratedReport",
    "InvoiceAnnexError",
    "InvoiceRecord",
    "compose",
    "generate_report",
    "layout_summary",
    "merge",
]
