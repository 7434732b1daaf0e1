"""Decoding and inspection of PDF byte streams."""

import logging
from dataclasses import dataclass
from typing import List

import fitz  # pymupdf

from ..errors import DecodeError, EncodeError
from .pdf_writer import SAVE_OPTIONS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageInfo:
    """Dimensions of one page of a decoded PDF.
    
    Attributes:
        page_number: Page number (starts at 1)
        width: Page width in points
        height: Page height in points
    """
    page_number: int
    width: float
    height: float


def decode_pdf(data: bytes, label: str = "document") -> fitz.Document:
    """Open PDF bytes as a PyMuPDF document.
    
    The caller owns the returned document and must close it.
    
    Args:
        data: PDF file content
        label: Name of the input used in error messages ("summary", "source")
        
    Returns:
        Opened fitz.Document with at least one page
        
    Raises:
        DecodeError: If data is empty, not a PDF, damaged (MuPDF had to repair
            it), password protected, or has no pages
    """
    if not data:
        raise DecodeError(f"The {label} document is empty", label)
    
    try:
        doc = fitz.open(stream=bytes(data), filetype="pdf")
    except Exception as e:
        raise DecodeError(f"Failed to decode {label} document: {str(e)}", label) from e
    
    try:
        if doc.is_repaired:
            raise DecodeError(f"The {label} document is damaged or truncated", label)
        if doc.needs_pass:
            raise DecodeError(f"The {label} document is password protected", label)
        if doc.page_count == 0:
            raise DecodeError(f"The {label} document has no pages", label)
        # Load every page once so broken page objects fail here, not mid-merge
        for page in doc:
            page.rect
    except DecodeError:
        doc.close()
        raise
    except Exception as e:
        doc.close()
        raise DecodeError(f"Failed to decode {label} document: {str(e)}", label) from e
    
    logger.debug(f"Decoded {label} document: {doc.page_count} page(s)")
    return doc


def describe_pdf(data: bytes, label: str = "document") -> List[PageInfo]:
    """Page numbers and dimensions of a PDF.
    
    Raises:
        DecodeError: If data is not a readable PDF
    """
    with decode_pdf(data, label) as doc:
        return [
            PageInfo(page_number=page.number + 1, width=page.rect.width, height=page.rect.height)
            for page in doc
        ]


def reserialize(data: bytes, label: str = "document") -> bytes:
    """Decode a PDF and save it again without modification.
    
    Raises:
        DecodeError: If data is not a readable PDF
        EncodeError: If saving fails
    """
    with decode_pdf(data, label) as doc:
        try:
            return doc.tobytes(**SAVE_OPTIONS)
        except Exception as e:
            raise EncodeError(f"Failed to serialize {label} document: {str(e)}") from e
