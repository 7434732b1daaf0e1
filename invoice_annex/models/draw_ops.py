"""Draw operations recorded on a summary page.

Coordinates are PDF user space: origin at the bottom-left corner, y grows
upward, and the y of a text run is its baseline.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

Color = Tuple[float, float, float]

BLACK: Color = (0.0, 0.0, 0.0)


class FontFace(str, Enum):
    """Font faces embedded in every summary document."""
    REGULAR = "regular"
    BOLD = "bold"


@dataclass(frozen=True)
class TextRun:
    """A single line of text drawn at a baseline position."""
    text: str
    x: float
    y: float
    size: float
    font: FontFace = FontFace.REGULAR
    color: Color = BLACK


@dataclass(frozen=True)
class Line:
    """A straight stroked line."""
    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float = 1.0
    color: Color = BLACK


@dataclass(frozen=True)
class FilledRect:
    """A filled rectangle; (x, y) is its bottom-left corner."""
    x: float
    y: float
    width: float
    height: float
    color: Color = BLACK


DrawOp = Union[TextRun, Line, FilledRect]
