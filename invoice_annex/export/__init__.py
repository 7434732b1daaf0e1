"""Report outputs: download filename and spreadsheet export."""

from .excel_export import default_excel_filename, export_records_to_excel
from .filename import sanitize_filename_part, suggested_filename

__all__ = [
    "default_excel_filename",
    "export_records_to_excel",
    "sanitize_filename_part",
    "suggested_filename",
]
