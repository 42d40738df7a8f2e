"""Page geometry and the vertical cursor shared by everything drawn on a report."""

from dataclasses import dataclass

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen.canvas import Canvas

BORDER_INSET = 20
BORDER_GRAY = 50
BORDER_LINE_WIDTH = 1.2
HEADER_RULE_GRAY = 80


@dataclass(frozen=True)
class PageLayout:
    """Page size and margins in points; y runs downward from the top edge."""

    page_width: float = A4[0]
    page_height: float = A4[1]
    margin_x: float = 40
    top_margin: float = 40
    bottom_margin: float = 60

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin_x

    @property
    def content_height(self) -> float:
        return self.page_height - self.top_margin - self.bottom_margin


class PageManager:
    """Owns the cursor ``y`` and page breaks for one canvas.

    ``y`` is the distance from the top edge of the current page to the
    next baseline. Callers must ``ensure_space`` before any block whose
    height they know, so that a block never straddles two pages.
    """

    def __init__(self, canvas: Canvas, layout: PageLayout | None = None):
        self.canvas = canvas
        self.layout = layout or PageLayout()
        self.y = self.layout.top_margin
        self.page_count = 1

    @property
    def remaining(self) -> float:
        return self.layout.page_height - self.layout.bottom_margin - self.y

    def to_canvas_y(self, y: float | None = None) -> float:
        """Convert a top-down position to reportlab's bottom-up coordinate."""
        return self.layout.page_height - (self.y if y is None else y)

    def advance(self, dy: float) -> None:
        self.y += dy

    def draw_border(self) -> None:
        lay = self.layout
        c = self.canvas
        c.saveState()
        c.setStrokeGray(BORDER_GRAY / 255)
        c.setLineWidth(BORDER_LINE_WIDTH)
        c.rect(
            BORDER_INSET,
            BORDER_INSET,
            lay.page_width - 2 * BORDER_INSET,
            lay.page_height - 2 * BORDER_INSET,
        )
        c.restoreState()

    def rule(self, gray: int) -> None:
        """Horizontal line across the content width at the cursor."""
        lay = self.layout
        c = self.canvas
        c.saveState()
        c.setStrokeGray(gray / 255)
        c.setLineWidth(1)
        y = self.to_canvas_y()
        c.line(lay.margin_x, y, lay.page_width - lay.margin_x, y)
        c.restoreState()

    def new_page(self) -> None:
        self.canvas.showPage()
        self.page_count += 1
        self.draw_border()
        self.y = self.layout.top_margin

    def ensure_space(self, min_height: float = 40) -> bool:
        """Start a new page unless *min_height* points fit above the bottom margin.

        Returns True when a page break happened. A fresh page is never
        broken again, even if the block is taller than the page itself.
        """
        if self.remaining >= min_height or self.y <= self.layout.top_margin:
            return False
        self.new_page()
        return True

    def section_header(self, title: str) -> None:
        self.ensure_space(60)
        self.advance(5)
        self.canvas.setFont("Helvetica-Bold", 14)
        self.canvas.drawString(self.layout.margin_x, self.to_canvas_y(), title)
        self.advance(8)
        self.rule(HEADER_RULE_GRAY)
        self.advance(12)
