"""Unit tests for the layout cursor and its page-break primitive."""

import pytest

from invoice_annex.layout.cursor import Cursor
from invoice_annex.models.document import Document
from invoice_annex.models.draw_ops import TextRun


def _cursor(on_page_start=None):
    return Cursor(
        document=Document(),
        page_width=595,
        page_height=842,
        margin=40,
        line_height=18,
        on_page_start=on_page_start,
    )


def test_start_page_resets_to_top_margin():
    cursor = _cursor()
    page = cursor.start_page()
    
    assert page.page_number == 1
    assert cursor.page is page
    assert cursor.y == 802
    assert cursor.top == 802


def test_start_page_runs_hook_at_top():
    seen = []
    
    def hook(c):
        seen.append((c.page.page_number, c.y))
        c.draw(TextRun(text="header", x=40, y=c.y, size=10))
        c.advance()
    
    cursor = _cursor(hook)
    cursor.start_page()
    
    assert seen == [(1, 802)]
    assert cursor.page.texts() == ["header"]
    assert cursor.y == 784


def test_ensure_space_without_break():
    cursor = _cursor()
    cursor.start_page()
    cursor.y = 58  # 58 - 18 == margin, still fits
    
    assert cursor.ensure_space(18) is False
    assert cursor.document.page_count == 1
    assert cursor.y == 58


def test_ensure_space_breaks_page():
    pages_started = []
    cursor = _cursor(lambda c: pages_started.append(c.page.page_number))
    first = cursor.start_page()
    cursor.y = 57.5
    
    assert cursor.ensure_space(18) is True
    
    assert cursor.document.page_count == 2
    assert first.closed is True
    assert cursor.page.page_number == 2
    assert cursor.y == 802
    assert pages_started == [1, 2]


def test_ensure_space_starts_first_page():
    cursor = _cursor()
    assert cursor.ensure_space(18) is True
    assert cursor.document.page_count == 1


def test_space_checks_counted():
    cursor = _cursor()
    cursor.start_page()
    for _ in range(5):
        cursor.ensure_space(18)
        cursor.advance()
    assert cursor.space_checks == 5


def test_advance_by_fraction_of_line():
    cursor = _cursor()
    cursor.start_page()
    cursor.advance(1.5)
    assert cursor.y == pytest.approx(775)


def test_draw_without_page_raises():
    cursor = _cursor()
    with pytest.raises(ValueError, match="No active page"):
        cursor.draw(TextRun(text="x", x=0, y=0, size=10))
