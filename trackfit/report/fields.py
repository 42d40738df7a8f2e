"""Label/value rows."""

from enum import Enum
from typing import Any

from trackfit.report.page import PageManager
from trackfit.report.text import wrap_text

PLACEHOLDER = "—"

FIELD_FONT = "Helvetica"
FIELD_FONT_SIZE = 11
COLON_OFFSET = 120
VALUE_OFFSET = 140
LINE_HEIGHT = 14
MIN_ROW_HEIGHT = 18
ROW_PADDING = 10


def format_value(value: Any) -> str:
    """Display string for a field; None and "" become the em-dash placeholder."""
    if value is None or value == "":
        return PLACEHOLDER
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class FieldWriter:
    """Writes ``label : value`` rows at the page cursor."""

    def __init__(self, pages: PageManager):
        self.pages = pages

    @property
    def value_width(self) -> float:
        return self.pages.layout.content_width - VALUE_OFFSET

    def row_lines(self, value: Any) -> list[str]:
        return wrap_text(format_value(value), self.value_width, FIELD_FONT_SIZE, FIELD_FONT)

    def write(self, label: str, value: Any) -> float:
        """Draw one row and return its height.

        A row that fits on one page is never split. A row taller than a
        whole page starts at the cursor and continues line by line onto as
        many new pages as it needs.
        """
        lines = self.row_lines(value)
        row_height = max(MIN_ROW_HEIGHT, len(lines) * LINE_HEIGHT)
        fits_on_page = row_height <= self.pages.layout.content_height
        self.pages.ensure_space(row_height + ROW_PADDING if fits_on_page else MIN_ROW_HEIGHT + ROW_PADDING)

        c = self.pages.canvas
        x = self.pages.layout.margin_x
        c.setFont(FIELD_FONT, FIELD_FONT_SIZE)
        c.drawString(x, self.pages.to_canvas_y(), label)
        c.drawString(x + COLON_OFFSET, self.pages.to_canvas_y(), ": ")

        if fits_on_page:
            for i, line in enumerate(lines):
                c.drawString(x + VALUE_OFFSET, self.pages.to_canvas_y(self.pages.y + i * LINE_HEIGHT), line)
            self.pages.advance(row_height)
            return row_height

        for line in lines:
            if self.pages.remaining < LINE_HEIGHT:
                self.pages.new_page()
                c.setFont(FIELD_FONT, FIELD_FONT_SIZE)
            c.drawString(x + VALUE_OFFSET, self.pages.to_canvas_y(), line)
            self.pages.advance(LINE_HEIGHT)
        return row_height
