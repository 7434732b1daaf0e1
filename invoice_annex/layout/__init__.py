"""Layout engine for the paginated credit sales summary."""

from .cursor import Cursor
from .engine import SummaryLayout, compose, format_money, format_quantity, layout_summary
from .template import DEFAULT_TEMPLATE, SummaryTemplate

__all__ = [
    "Cursor",
    "DEFAULT_TEMPLATE",
    "SummaryLayout",
    "SummaryTemplate",
    "compose",
    "format_money",
    "format_quantity",
    "layout_summary",
]
