"""Layout cursor: the active page and vertical write position."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..models.document import Document
from ..models.draw_ops import DrawOp
from ..models.page import Page

logger = logging.getLogger(__name__)

PageStartHook = Callable[["Cursor"], None]


@dataclass
class Cursor:
    """Transient layout state for one compose run.
    
    Every unit of content that needs vertical space must go through
    ensure_space() before it is drawn; that is the only place page breaks
    happen.
    
    Attributes:
        document: Document being built
        page_width: Width of new pages in points
        page_height: Height of new pages in points
        margin: Top and bottom margin in points
        line_height: Height of one text line in points
        on_page_start: Called after each new page is added, with the cursor
            at the top margin (draws the repeated per-page regions)
        page: Active page (None until start_page() is called)
        y: Current vertical offset (PDF user space, decreases downward)
        space_checks: Number of ensure_space() calls
    """
    
    document: Document
    page_width: float
    page_height: float
    margin: float
    line_height: float
    on_page_start: Optional[PageStartHook] = None
    page: Optional[Page] = None
    y: float = 0.0
    space_checks: int = field(default=0)
    
    @property
    def top(self) -> float:
        return self.page_height - self.margin
    
    def start_page(self) -> Page:
        """Add a new page, reset y to the top margin and run the page hook."""
        self.page = self.document.add_page(self.page_width, self.page_height)
        self.y = self.top
        logger.debug(f"Started page {self.page.page_number}")
        if self.on_page_start is not None:
            self.on_page_start(self)
        return self.page
    
    def ensure_space(self, height: float) -> bool:
        """Make sure a unit of `height` fits above the bottom margin.
        
        Starts a new page (with its repeated regions) when it does not.
        
        Returns:
            True if a page break happened
        """
        self.space_checks += 1
        if self.page is None:
            self.start_page()
            return True
        if self.y - height < self.margin:
            self.start_page()
            return True
        return False
    
    def advance(self, lines: float = 1.0) -> None:
        """Move the cursor down by a number of line heights."""
        self.y -= self.line_height * lines
    
    def draw(self, op: DrawOp) -> None:
        """Draw on the active page."""
        if self.page is None:
            raise ValueError("No active page; call start_page() first")
        self.page.draw(op)
