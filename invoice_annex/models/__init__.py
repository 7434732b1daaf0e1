"""Data models for invoice records and generated summary documents."""

from .document import DEFAULT_FONTS, Document
from .draw_ops import BLACK, DrawOp, FilledRect, FontFace, Line, TextRun
from .invoice_record import InvoiceRecord, coerce_records, grand_total
from .page import Page

__all__ = [
    "BLACK",
    "DEFAULT_FONTS",
    "Document",
    "DrawOp",
    "FilledRect",
    "FontFace",
    "InvoiceRecord",
    "Line",
    "Page",
    "TextRun",
    "coerce_records",
    "grand_total",
]
