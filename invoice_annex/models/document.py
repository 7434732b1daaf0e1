"""Document data model representing a generated summary PDF."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .draw_ops import FontFace
from .page import Page

# PDF base-14 fonts as named by PyMuPDF
DEFAULT_FONTS: Dict[FontFace, str] = {
    FontFace.REGULAR: "helv",  # Helvetica
    FontFace.BOLD: "hebo",  # Helvetica-Bold
}


@dataclass
class Document:
    """Represents a summary document under construction.
    
    Pages are only appended, never removed or reordered. Starting a new
    page closes the previous one.
    
    Attributes:
        pages: List of Page objects
        fonts: Font face -> PDF font name
        metadata: Optional document metadata (title, author, ...)
    """
    
    pages: List[Page] = field(default_factory=list)
    fonts: Dict[FontFace, str] = field(default_factory=lambda: dict(DEFAULT_FONTS))
    metadata: Dict[str, str] = field(default_factory=dict)
    
    @property
    def page_count(self) -> int:
        return len(self.pages)
    
    def add_page(self, width: float, height: float) -> Page:
        """Close the current last page and append a new one."""
        if self.pages:
            self.pages[-1].closed = True
        page = Page(page_number=len(self.pages) + 1, width=width, height=height)
        self.pages.append(page)
        return page
    
    def font_name(self, face: FontFace) -> str:
        """PDF font name for a face."""
        return self.fonts[face]
