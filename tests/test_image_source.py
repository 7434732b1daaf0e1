"""Unit tests for converting source files to PDF bytes."""

import fitz
import pytest

from invoice_annex.errors import DecodeError
from invoice_annex.pipeline.image_source import image_to_pdf, load_source_bytes, source_to_pdf_bytes
from invoice_annex.pipeline.reader import describe_pdf


def _png_bytes(width=60, height=40):
    pix = fitz.Pixmap(fitz.csRGB, fitz.IRect(0, 0, width, height), False)
    pix.set_rect(pix.irect, (200, 30, 30))
    return pix.tobytes("png")


def test_image_to_pdf_single_page():
    data = image_to_pdf(_png_bytes(), "png")
    
    pages = describe_pdf(data)
    assert len(pages) == 1
    assert pages[0].width > 0
    assert pages[0].width > pages[0].height


def test_image_to_pdf_corrupt_image():
    with pytest.raises(DecodeError):
        image_to_pdf(b"\x89PNG\r\n\x1a\nbroken", "png")


def test_image_to_pdf_empty():
    with pytest.raises(DecodeError, match="empty"):
        image_to_pdf(b"", "png")


def test_pdf_source_returned_unchanged():
    data = b"%PDF-1.7 whatever"
    assert source_to_pdf_bytes(data, "Scan.PDF") is data


def test_image_source_converted():
    data = source_to_pdf_bytes(_png_bytes(), "scan.png")
    assert data.startswith(b"%PDF")


@pytest.mark.parametrize("filename", ["scan.gif", "notes.txt", "no_extension"])
def test_unsupported_source_type(filename):
    with pytest.raises(DecodeError, match="Unsupported source file type"):
        source_to_pdf_bytes(b"data", filename)


def test_load_source_bytes_from_disk(tmp_path):
    image_path = tmp_path / "scan.png"
    image_path.write_bytes(_png_bytes())
    
    data = load_source_bytes(image_path)
    
    assert len(describe_pdf(data)) == 1


def test_load_source_bytes_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_source_bytes(tmp_path / "missing.pdf")
