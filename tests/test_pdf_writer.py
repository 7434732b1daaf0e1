"""Unit tests for rendering Document models to PDF."""

from datetime import date

import fitz
import pytest

from invoice_annex.errors import EncodeError
from invoice_annex.layout.engine import layout_summary
from invoice_annex.models.document import Document
from invoice_annex.models.draw_ops import FilledRect, TextRun
from invoice_annex.models.invoice_record import InvoiceRecord
from invoice_annex.pipeline.pdf_writer import render_document

TODAY = date(2025, 6, 14)


def _layout(n):
    records = [
        InvoiceRecord(invoice_number=f"INV-{i:04d}", supplier_name="ACME", total=float(i))
        for i in range(n)
    ]
    return layout_summary(records, today=TODAY)


def test_render_page_count_and_size():
    layout = _layout(40)
    data = render_document(layout.document)
    
    with fitz.open(stream=data, filetype="pdf") as pdf:
        assert pdf.page_count == layout.page_count
        for page in pdf:
            assert page.rect.width == pytest.approx(595)
            assert page.rect.height == pytest.approx(842)


def test_render_text_content():
    layout = _layout(3)
    data = render_document(layout.document)
    
    with fitz.open(stream=data, filetype="pdf") as pdf:
        text = pdf[0].get_text()
    assert "THE MAURITIUS POST LTD." in text
    assert "CLIENT : ACME" in text
    assert "INV-0002" in text
    assert "Head of Finance" in text


def test_text_placed_from_bottom_left_origin():
    """A run near the top in PDF user space lands near the top of the page."""
    doc = Document()
    page = doc.add_page(200, 100)
    page.draw(TextRun(text="Hello", x=10, y=80, size=10))
    
    with fitz.open(stream=render_document(doc), filetype="pdf") as pdf:
        rects = pdf[0].search_for("Hello")
    
    assert len(rects) == 1
    assert rects[0].x0 == pytest.approx(10, abs=1)
    assert rects[0].y1 < 50


def test_filled_rect_rendered():
    doc = Document()
    page = doc.add_page(200, 100)
    page.draw(FilledRect(x=10, y=10, width=50, height=20, color=(0.95, 0.95, 0.95)))
    
    with fitz.open(stream=render_document(doc), filetype="pdf") as pdf:
        drawings = pdf[0].get_drawings()
    
    fills = [d for d in drawings if d.get("fill")]
    assert len(fills) == 1
    assert fills[0]["fill"] == pytest.approx((0.95, 0.95, 0.95), abs=0.01)
    assert fills[0]["rect"].y1 == pytest.approx(90)


def test_metadata_title():
    layout = _layout(1)
    data = render_document(layout.document)
    
    with fitz.open(stream=data, filetype="pdf") as pdf:
        assert pdf.metadata["title"] == "Credit Sales - May 25"
        assert pdf.metadata["creator"] == "Invoice Annex"


def test_render_empty_document_fails():
    with pytest.raises(EncodeError, match="without pages"):
        render_document(Document())


def test_render_unknown_font_fails():
    doc = Document(fonts={})
    page = doc.add_page(200, 100)
    page.draw(TextRun(text="x", x=10, y=10, size=10))
    
    with pytest.raises(EncodeError):
        render_document(doc)
