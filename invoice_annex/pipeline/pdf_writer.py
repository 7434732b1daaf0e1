"""Render Document models to PDF bytes with PyMuPDF."""

import logging

import fitz  # pymupdf

from ..config import get_app_name
from ..errors import EncodeError
from ..models.document import Document
from ..models.draw_ops import DrawOp, FilledRect, Line, TextRun

logger = logging.getLogger(__name__)

# Options for every PDF this package writes
SAVE_OPTIONS = {"garbage": 3, "deflate": True}


def _to_fitz_point(x: float, y: float, page_height: float) -> fitz.Point:
    """PDF user space (origin bottom-left) -> PyMuPDF space (origin top-left)."""
    return fitz.Point(x, page_height - y)


def _draw(fitz_page: fitz.Page, op: DrawOp, document: Document, page_height: float) -> None:
    if isinstance(op, TextRun):
        fitz_page.insert_text(
            _to_fitz_point(op.x, op.y, page_height),
            op.text,
            fontname=document.font_name(op.font),
            fontsize=op.size,
            color=op.color,
        )
    elif isinstance(op, Line):
        fitz_page.draw_line(
            _to_fitz_point(op.x1, op.y1, page_height),
            _to_fitz_point(op.x2, op.y2, page_height),
            color=op.color,
            width=op.thickness,
        )
    elif isinstance(op, FilledRect):
        rect = fitz.Rect(
            op.x,
            page_height - (op.y + op.height),
            op.x + op.width,
            page_height - op.y,
        )
        fitz_page.draw_rect(rect, color=None, fill=op.color, width=0)
    else:
        raise TypeError(f"Unsupported draw operation: {type(op).__name__}")


def render_document(document: Document) -> bytes:
    """Serialize a Document model to PDF bytes.
    
    Each model page becomes one PDF page with the same dimensions; its draw
    operations are replayed in order.
    
    Args:
        document: Laid out Document
        
    Returns:
        PDF file content
        
    Raises:
        EncodeError: If the document has no pages or cannot be written
    """
    if not document.pages:
        raise EncodeError("Cannot serialize a document without pages")
    
    pdf = fitz.open()
    try:
        for page in document.pages:
            fitz_page = pdf.new_page(width=page.width, height=page.height)
            for op in page.operations:
                _draw(fitz_page, op, document, page.height)
        
        metadata = {"creator": get_app_name(), "producer": get_app_name()}
        metadata.update(document.metadata)
        pdf.set_metadata(metadata)
        
        content = pdf.tobytes(**SAVE_OPTIONS)
    except Exception as e:
        raise EncodeError(f"Failed to serialize summary document: {str(e)}") from e
    finally:
        pdf.close()
    
    logger.debug(f"Rendered {document.page_count} page(s), {len(content)} bytes")
    return content
