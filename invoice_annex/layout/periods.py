"""Billing period helpers derived from the generation date."""

from datetime import date, timedelta
from typing import Optional

# English abbreviations, independent of the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _today(today: Optional[date]) -> date:
    return today if today is not None else date.today()


def previous_month(today: Optional[date] = None) -> date:
    """First day of the month before `today`'s month."""
    return last_day_of_previous_month(today).replace(day=1)


def last_day_of_previous_month(today: Optional[date] = None) -> date:
    """Last calendar day of the month before `today`'s month."""
    return _today(today).replace(day=1) - timedelta(days=1)


def format_statement_date(today: Optional[date] = None) -> str:
    """Statement date as DD/MM/YYYY, e.g. "31/05/2025"."""
    return last_day_of_previous_month(today).strftime("%d/%m/%Y")


def billing_period_label(today: Optional[date] = None) -> str:
    """Previous month with a two-digit year, e.g. "May 25"."""
    month = previous_month(today)
    return f"{MONTH_ABBREVIATIONS[month.month - 1]} {month.year % 100:02d}"


def filename_period_label(today: Optional[date] = None) -> str:
    """Previous month with the full year, e.g. "May 2025"."""
    month = previous_month(today)
    return f"{MONTH_ABBREVIATIONS[month.month - 1]} {month.year}"
