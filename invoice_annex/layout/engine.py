"""Summary layout engine: header, paginated table body and footer.

The engine builds a Document model page by page with a Cursor. Every table
row and footer line asks Cursor.ensure_space() for one line height first, so
a row is never split across pages and every page starts with the header and
the column labels.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, List, Optional

import fitz  # pymupdf

from ..errors import EmptyInputWarning
from ..models.document import Document
from ..models.draw_ops import FilledRect, FontFace, Line, TextRun
from ..models.invoice_record import InvoiceRecord, coerce_records, grand_total
from ..pipeline.pdf_writer import render_document
from .cursor import Cursor
from .periods import billing_period_label, format_statement_date
from .template import DEFAULT_TEMPLATE, SummaryTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderFields:
    """Values printed in the header region of every page."""
    client_name: str
    statement_date: str
    billing_period: str


@dataclass
class SummaryLayout:
    """Result of laying out a summary.

    Attributes:
        document: Laid out Document model
        header: Header values used on every page
        row_count: Number of table rows drawn
        grand_total: Sum of record totals (informational)
        space_checks: Number of space checks made (rows + footer lines)
    """
    document: Document
    header: HeaderFields
    row_count: int
    grand_total: float
    space_checks: int

    @property
    def page_count(self) -> int:
        return self.document.page_count


def format_money(value: Any) -> str:
    """Two decimals, no currency symbol, no thousands separator."""
    return f"{_as_number(value):.2f}"


def format_quantity(value: Any) -> str:
    """Plain number without rounding; whole floats print without ".0"."""
    number = _as_number(value)
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def _as_number(value: Any):
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def text_width(text: str, document: Document, face: FontFace, size: float) -> float:
    """Width of `text` in points for a document font."""
    return fitz.get_text_length(text, fontname=document.font_name(face), fontsize=size)


def _draw_centered(cursor: Cursor, text: str, size: float, face: FontFace, color) -> None:
    width = text_width(text, cursor.document, face, size)
    x = (cursor.page_width - width) / 2
    cursor.draw(TextRun(text=text, x=x, y=cursor.y, size=size, font=face, color=color))


def draw_header(cursor: Cursor, template: SummaryTemplate, header: HeaderFields) -> None:
    """Draw the header region starting at the top margin."""
    cursor.advance()
    _draw_centered(cursor, template.organization_name, template.title_font_size,
                   FontFace.BOLD, template.title_color)
    cursor.advance()
    _draw_centered(cursor, template.contact_line, template.font_size,
                   FontFace.REGULAR, template.title_color)
    cursor.advance()
    cursor.advance()  # blank line

    cursor.draw(TextRun(
        text=template.section_label, x=template.margin, y=cursor.y,
        size=template.section_font_size, font=FontFace.BOLD,
    ))
    cursor.advance()

    client_text = f"{template.client_label} : {header.client_name}"
    cursor.draw(TextRun(
        text=client_text, x=template.margin, y=cursor.y,
        size=template.client_font_size, font=FontFace.BOLD,
    ))
    underline_y = cursor.y - template.underline_offset
    client_width = text_width(client_text, cursor.document, FontFace.BOLD, template.client_font_size)
    cursor.draw(Line(
        x1=template.margin, y1=underline_y,
        x2=template.margin + client_width, y2=underline_y,
        thickness=template.rule_thickness,
    ))
    cursor.advance(1.2)

    cursor.draw(TextRun(
        text=f"Invoice Number : {template.invoice_number_placeholder}",
        x=template.margin, y=cursor.y, size=template.font_size,
    ))
    cursor.draw(TextRun(
        text=f"Date : {header.statement_date}",
        x=template.page_width / 2, y=cursor.y, size=template.font_size,
    ))
    cursor.advance()

    cursor.draw(TextRun(
        text=f"Postage Due for period : {header.billing_period}",
        x=template.margin, y=cursor.y, size=template.font_size,
    ))
    cursor.advance()

    cursor.draw(TextRun(
        text=template.registration_line,
        x=template.margin, y=cursor.y, size=template.font_size,
    ))
    cursor.advance(2)  # space before the table


def draw_table_header(cursor: Cursor, template: SummaryTemplate) -> None:
    """Draw the column labels and the rule beneath them."""
    for label, x in template.columns:
        cursor.draw(TextRun(text=label, x=x, y=cursor.y, size=template.font_size, font=FontFace.BOLD))
    rule_y = cursor.y - template.underline_offset
    cursor.draw(Line(
        x1=template.margin, y1=rule_y,
        x2=template.page_width - template.margin, y2=rule_y,
        thickness=template.rule_thickness,
    ))
    cursor.advance()


def row_values(record: InvoiceRecord) -> List[str]:
    """Cell texts of a table row, in column order."""
    return [
        _as_text(record.invoice_number),
        _as_text(record.date),
        _as_text(record.description),
        format_money(record.amount),
        format_quantity(record.quantity),
        format_money(record.vat),
        format_money(record.total),
    ]


def draw_row(cursor: Cursor, template: SummaryTemplate, record: InvoiceRecord, index: int) -> None:
    """Draw one table row; even-indexed rows are shaded."""
    if index % 2 == 0:
        cursor.draw(FilledRect(
            x=template.margin, y=cursor.y - template.row_shade_offset,
            width=template.content_width, height=template.line_height,
            color=template.row_shade,
        ))
    for value, x in zip(row_values(record), template.column_offsets()):
        cursor.draw(TextRun(text=value, x=x, y=cursor.y, size=template.font_size))
    cursor.advance()


def draw_footer_line(cursor: Cursor, template: SummaryTemplate, text: str) -> None:
    """Draw one footer line; blank lines only advance the cursor."""
    if text:
        cursor.draw(TextRun(text=text, x=template.margin, y=cursor.y, size=template.font_size))
    cursor.advance()


def layout_summary(
    records: Iterable[Any],
    today: Optional[date] = None,
    template: SummaryTemplate = DEFAULT_TEMPLATE,
) -> SummaryLayout:
    """Lay out the summary document for `records`.

    Args:
        records: Ordered InvoiceRecord objects (or mappings with record keys)
        today: Generation date used for the statement date and billing period
            (default: date.today())
        template: Fixed layout description

    Returns:
        SummaryLayout with the Document model
    """
    records = coerce_records(records)
    if not records:
        warnings.warn(
            "No invoice records; the summary holds only header and footer",
            EmptyInputWarning,
            stacklevel=2,
        )

    client_name = template.client_placeholder
    if records:
        client_name = _as_text(records[0].supplier_name)
    header = HeaderFields(
        client_name=client_name,
        statement_date=format_statement_date(today),
        billing_period=billing_period_label(today),
    )

    def start_of_page(c: Cursor) -> None:
        draw_header(c, template, header)
        draw_table_header(c, template)

    document = Document(metadata={"title": f"{template.section_label} - {header.billing_period}"})
    cursor = Cursor(
        document=document,
        page_width=template.page_width,
        page_height=template.page_height,
        margin=template.margin,
        line_height=template.line_height,
        on_page_start=start_of_page,
    )
    cursor.start_page()

    for index, record in enumerate(records):
        cursor.ensure_space(template.line_height)
        draw_row(cursor, template, record, index)

    cursor.advance(2)

    for text in template.footer_lines:
        cursor.ensure_space(template.line_height)
        draw_footer_line(cursor, template, text)

    total = grand_total(records)
    logger.info(
        f"Laid out summary: {len(records)} rows on {document.page_count} page(s), "
        f"grand total {total:.2f}"
    )
    return SummaryLayout(
        document=document,
        header=header,
        row_count=len(records),
        grand_total=total,
        space_checks=cursor.space_checks,
    )


def compose(
    records: Iterable[Any],
    today: Optional[date] = None,
    template: SummaryTemplate = DEFAULT_TEMPLATE,
) -> bytes:
    """Lay out the summary for `records` and serialize it to PDF bytes.

    Raises:
        EncodeError: If the laid out document cannot be serialized
    """
    layout = layout_summary(records, today=today, template=template)
    return render_document(layout.document)
