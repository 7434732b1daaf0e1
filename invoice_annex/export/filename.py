"""Suggested download filename for a generated report."""

import re
from datetime import date
from typing import Optional

from ..layout.periods import filename_period_label

_DISALLOWED = re.compile(r"[^A-Za-z0-9_\-\s]")
_WHITESPACE = re.compile(r"\s+")

UNKNOWN_SUPPLIER = "Unknown"


def sanitize_filename_part(text: str) -> str:
    """Keep only [A-Za-z0-9_-], joining whitespace-separated words with "_".
    
    Disallowed characters are stripped first, so "ABC Corp / Ltd." becomes
    "ABC_Corp_Ltd" rather than "ABC_Corp__Ltd".
    """
    cleaned = _DISALLOWED.sub("", text)
    cleaned = _WHITESPACE.sub("_", cleaned.strip())
    return cleaned.strip("_")


def suggested_filename(
    supplier_name: Optional[str],
    today: Optional[date] = None,
    extension: str = "pdf",
) -> str:
    """Build "{supplier}_{Mon}_{YYYY}.{extension}" for the previous month.
    
    Args:
        supplier_name: Supplier of the first record (None/empty -> "Unknown")
        today: Generation date (default: date.today())
        extension: File extension without the dot
        
    Returns:
        Filename, e.g. "ABC_Corp_Ltd_May_2025.pdf"
    """
    supplier = sanitize_filename_part(supplier_name or "") or UNKNOWN_SUPPLIER
    period = sanitize_filename_part(filename_period_label(today))
    return f"{supplier}_{period}.{extension.lstrip('.')}"
