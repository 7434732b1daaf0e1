"""Tests for merged report generation."""

from datetime import date

import fitz  # pymupdf
import pytest

from invoice_annex.errors import DecodeError, EmptyInputWarning
from invoice_annex.models.invoice_record import InvoiceRecord
from invoice_annex.report import generate_report

TODAY = date(2025, 6, 14)


@pytest.fixture
def source_pdf():
    """Two page scanned invoice stand-in."""
    doc = fitz.open()
    for n in range(2):
        page = doc.new_page(width=612, height=792)
        page.insert_text((72, 72), f"Scan page {n + 1}", fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data


def _records(n):
    return [
        InvoiceRecord(
            invoice_number=f"INV-{i}",
            supplier_name="ABC Corp / Ltd.",
            description="Parcel",
            total=10.0,
        )
        for i in range(n)
    ]


def test_generate_report_counts_pages(source_pdf):
    report = generate_report(_records(3), source_pdf, today=TODAY)
    
    assert report.summary_page_count == 1
    assert report.source_page_count == 2
    assert report.page_count == 3
    assert report.grand_total == pytest.approx(30.0)
    assert report.content.startswith(b"%PDF")


def test_generate_report_filename(source_pdf):
    report = generate_report(_records(1), source_pdf, today=TODAY)
    assert report.filename == "ABC_Corp_Ltd_May_2025.pdf"


def test_generate_report_summary_first(source_pdf):
    report = generate_report(_records(40), source_pdf, today=TODAY)
    
    with fitz.open(stream=report.content, filetype="pdf") as merged:
        assert len(merged) == report.summary_page_count + 2
        assert "THE MAURITIUS POST LTD." in merged[0].get_text()
        assert "Scan page 1" in merged[report.summary_page_count].get_text()
        assert "Scan page 2" in merged[-1].get_text()


def test_generate_report_without_records(source_pdf):
    with pytest.warns(EmptyInputWarning):
        report = generate_report([], source_pdf, today=TODAY)
    
    assert report.filename == "Unknown_May_2025.pdf"
    assert report.summary_page_count == 1


def test_generate_report_bad_source():
    with pytest.raises(DecodeError) as exc_info:
        generate_report(_records(1), b"not a pdf", today=TODAY)
    assert exc_info.value.label == "source"


def test_report_save(source_pdf, tmp_path):
    report = generate_report(_records(1), source_pdf, today=TODAY)
    
    path = report.save(tmp_path / "reports")
    
    assert path == tmp_path / "reports" / report.filename
    assert path.read_bytes() == report.content
