"""Fixed layout description of the credit sales summary.

All offsets are in points, PDF user space (origin bottom-left).
"""

from dataclasses import dataclass
from typing import Tuple

from ..models.draw_ops import Color

DARK_BLUE: Color = (0.0, 0.0, 0.5)
ROW_SHADE: Color = (0.95, 0.95, 0.95)

# Column label -> x offset; also the order of the values in a body row
COLUMNS: Tuple[Tuple[str, float], ...] = (
    ("Invoice No.", 40),
    ("Date", 100),
    ("Description", 160),
    ("Amount", 320),
    ("Qty", 380),
    ("Fees", 420),
    ("Total", 460),
)

FOOTER_LINES: Tuple[str, ...] = (
    "FOR FURTHER DETAILS, CONTACT MS TRISHALA ON 208 2851, EXT 109",
    "",
    "NOTE",
    "a) Payment should be effected within one week from date of receipt of this Invoice.",
    "b) Cheque to be drawn in favour of 'THE MAURITIUS POST LTD' and addressed to:",
    "   Finance Department, The Mauritius Post Ltd, 1, Sir William Newton, Port Louis 11328, together with a copy",
    "   of this invoice.",
    "c) However, if amount is settled through bank transfer as per details below:",
    "",
    "Bank Name         : MauBank Ltd",
    "Bank Address      : 25, Bank Street, Ebene 72201",
    "Bank a/c no       : 011000593450MUR",
    "IBAN No           : MU34MPCB1215011000593450000MUR",
    "",
    "kindly submit detail of payment on the following email addresses:",
    "   dmooteea@mauritiuspost.mu",
    "   finance@mauritiuspost.mu",
    "   rauckloo@mauritiuspost.mu",
    "",
    "Signature. ................................",
    "",
    "Head of Finance",
)


@dataclass(frozen=True)
class SummaryTemplate:
    """Page geometry, typography and literal text of the summary."""
    
    page_width: float = 595  # A4
    page_height: float = 842
    margin: float = 40
    line_height: float = 18
    
    font_size: float = 10
    title_font_size: float = 18
    section_font_size: float = 12
    client_font_size: float = 12
    
    organization_name: str = "THE MAURITIUS POST LTD."
    contact_line: str = "Tel 208-2851/55 Fax 211-2262/210-2581"
    section_label: str = "Credit Sales"
    client_label: str = "CLIENT"
    client_placeholder: str = "N/A"
    invoice_number_placeholder: str = "MIN_NO"
    registration_line: str = "Business Registration Number : C07027647"
    
    columns: Tuple[Tuple[str, float], ...] = COLUMNS
    footer_lines: Tuple[str, ...] = FOOTER_LINES
    
    title_color: Color = DARK_BLUE
    row_shade: Color = ROW_SHADE
    rule_thickness: float = 1.0
    underline_offset: float = 2  # below the baseline
    row_shade_offset: float = 3  # shading starts this far below the baseline
    
    @property
    def top(self) -> float:
        """Cursor position at the top margin."""
        return self.page_height - self.margin
    
    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin
    
    def column_offsets(self) -> Tuple[float, ...]:
        return tuple(x for _, x in self.columns)
    
    def column_labels(self) -> Tuple[str, ...]:
        return tuple(label for label, _ in self.columns)


DEFAULT_TEMPLATE = SummaryTemplate()
