"""Merge a generated summary with an externally supplied source PDF."""

import logging

import fitz  # pymupdf

from ..errors import EncodeError
from .pdf_writer import SAVE_OPTIONS
from .reader import decode_pdf

logger = logging.getLogger(__name__)


def merge(summary_bytes: bytes, source_bytes: bytes) -> bytes:
    """Concatenate summary pages and source pages into one PDF.
    
    Summary pages come first, then source pages, each in their original
    order. Pages are copied with their content and dimensions, not
    re-rendered; neither input is modified.
    
    Args:
        summary_bytes: PDF produced by the layout engine
        source_bytes: Externally supplied PDF (any page count and page sizes)
        
    Returns:
        Merged PDF content with pages(summary) + pages(source) pages
        
    Raises:
        DecodeError: If either input is not a readable PDF (summary checked first)
        EncodeError: If copying pages or saving the merged document fails
    """
    with decode_pdf(summary_bytes, "summary") as summary, \
            decode_pdf(source_bytes, "source") as source:
        expected_pages = summary.page_count + source.page_count
        
        merged = fitz.open()
        try:
            merged.insert_pdf(summary)
            merged.insert_pdf(source)
            if merged.page_count != expected_pages:
                raise EncodeError(
                    f"Merged page count mismatch: expected {expected_pages}, "
                    f"got {merged.page_count}"
                )
            content = merged.tobytes(**SAVE_OPTIONS)
        except EncodeError:
            raise
        except Exception as e:
            raise EncodeError(f"Failed to build merged document: {str(e)}") from e
        finally:
            merged.close()
        
        logger.info(
            f"Merged {summary.page_count} summary page(s) with "
            f"{source.page_count} source page(s)"
        )
    
    return content
