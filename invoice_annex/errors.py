"""Exceptions and warnings raised by the summary and merge engine."""

from typing import Optional


class InvoiceAnnexError(Exception):
    """Base exception for invoice annex errors."""
    pass


class DecodeError(InvoiceAnnexError):
    """Raised when input document bytes are not a readable PDF.
    
    Attributes:
        label: Which input failed ("summary", "source", ...)
    """
    
    def __init__(self, message: str, label: Optional[str] = None):
        self.label = label
        super().__init__(message)


class EncodeError(InvoiceAnnexError):
    """Raised when a document cannot be serialized to PDF bytes."""
    pass


class EmptyInputWarning(UserWarning):
    """Emitted when a summary is composed from zero records.
    
    Not a failure: the summary then holds only the header and footer regions.
    """
    pass
