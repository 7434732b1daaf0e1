"""Unit tests for billing period helpers."""

from datetime import date

import pytest

from invoice_annex.layout.periods import (
    billing_period_label,
    filename_period_label,
    format_statement_date,
    last_day_of_previous_month,
    previous_month,
)


@pytest.mark.parametrize("today, expected", [
    (date(2025, 6, 14), date(2025, 5, 31)),
    (date(2025, 6, 1), date(2025, 5, 31)),
    (date(2025, 1, 31), date(2024, 12, 31)),
    (date(2024, 3, 15), date(2024, 2, 29)),
    (date(2025, 3, 1), date(2025, 2, 28)),
    (date(2025, 5, 20), date(2025, 4, 30)),
])
def test_last_day_of_previous_month(today, expected):
    assert last_day_of_previous_month(today) == expected


def test_previous_month_is_first_day():
    assert previous_month(date(2025, 1, 10)) == date(2024, 12, 1)


def test_format_statement_date():
    assert format_statement_date(date(2025, 6, 14)) == "31/05/2025"
    assert format_statement_date(date(2024, 3, 2)) == "29/02/2024"


def test_billing_period_label_two_digit_year():
    assert billing_period_label(date(2025, 6, 14)) == "May 25"
    assert billing_period_label(date(2025, 1, 3)) == "Dec 24"
    assert billing_period_label(date(2009, 11, 3)) == "Oct 09"


def test_filename_period_label_full_year():
    assert filename_period_label(date(2025, 6, 14)) == "May 2025"
    assert filename_period_label(date(2025, 1, 3)) == "Dec 2024"


def test_defaults_to_today():
    assert last_day_of_previous_month() == last_day_of_previous_month(date.today())
