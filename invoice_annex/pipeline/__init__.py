"""PDF stages: rendering, decoding, merging and source conversion."""

from .compositor import merge
from .image_source import image_to_pdf, load_source_bytes, source_to_pdf_bytes
from .pdf_writer import render_document
from .reader import PageInfo, decode_pdf, describe_pdf, reserialize

__all__ = [
    "PageInfo",
    "decode_pdf",
    "describe_pdf",
    "image_to_pdf",
    "load_source_bytes",
    "merge",
    "render_document",
    "reserialize",
    "source_to_pdf_bytes",
]
