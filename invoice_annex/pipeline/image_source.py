"""Turn a selected source file (PDF or scanned image) into PDF bytes."""

import logging
from pathlib import Path
from typing import Union

import fitz  # pymupdf

from ..errors import DecodeError

logger = logging.getLogger(__name__)

# File suffix -> PyMuPDF image type (same types the upload form accepts)
IMAGE_TYPES = {
    ".png": "png",
    ".jpg": "jpeg",
    ".jpeg": "jpeg",
}


def image_to_pdf(image_bytes: bytes, filetype: str) -> bytes:
    """Convert an image to a one-page PDF sized to the image.
    
    Raises:
        DecodeError: If the image is empty or cannot be decoded
    """
    if not image_bytes:
        raise DecodeError("The source image is empty", "source")
    try:
        with fitz.open(stream=bytes(image_bytes), filetype=filetype) as image_doc:
            return image_doc.convert_to_pdf()
    except Exception as e:
        raise DecodeError(f"Failed to convert {filetype} image to PDF: {str(e)}", "source") from e


def source_to_pdf_bytes(data: bytes, filename: str) -> bytes:
    """PDF bytes for an uploaded source file, chosen by its extension.
    
    PDF content is returned as is; PNG and JPEG images are converted.
    
    Raises:
        DecodeError: If the extension is not supported or conversion fails
    """
    suffix = Path(filename).suffix.lower()
    if suffix == ".pdf":
        return data
    if suffix in IMAGE_TYPES:
        logger.info(f"Converting image source {filename} to PDF")
        return image_to_pdf(data, IMAGE_TYPES[suffix])
    raise DecodeError(
        f"Unsupported source file type '{suffix or filename}' (expected PDF, PNG or JPEG)",
        "source",
    )


def load_source_bytes(path: Union[str, Path]) -> bytes:
    """Read a source file from disk as PDF bytes.
    
    Raises:
        FileNotFoundError: If path does not exist
        DecodeError: If the file type is not supported or conversion fails
    """
    source_path = Path(path)
    if not source_path.is_file():
        raise FileNotFoundError(f"Source file not found: {source_path}")
    return source_to_pdf_bytes(source_path.read_bytes(), source_path.name)
