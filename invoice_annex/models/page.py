"""Page data model representing a single summary page being laid out."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .draw_ops import DrawOp, TextRun


@dataclass
class Page:
    """Represents a single page of a generated summary document.
    
    Attributes:
        page_number: Page number (starts at 1)
        width: Page width in points
        height: Page height in points
        operations: Ordered draw operations
        closed: True once a following page has been started
    """
    
    page_number: int
    width: float
    height: float
    operations: List[DrawOp] = field(default_factory=list)
    closed: bool = False
    
    def __post_init__(self):
        """Validate page number and dimensions."""
        if self.page_number < 1:
            raise ValueError(f"Page number must be >= 1, got {self.page_number}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Page dimensions must be positive, got {self.width}x{self.height}")
    
    def draw(self, op: DrawOp) -> None:
        """Append a draw operation; closed pages accept no more operations."""
        if self.closed:
            raise ValueError(f"Page {self.page_number} is closed")
        self.operations.append(op)
    
    def texts(self) -> List[str]:
        """Text of all text runs in drawing order."""
        return [op.text for op in self.operations if isinstance(op, TextRun)]
