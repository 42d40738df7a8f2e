"""PDF material report: bordered A4 pages, logo band, four fixed sections."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen.canvas import Canvas

from trackfit.config import Settings, get_settings
from trackfit.report.assets import load_logos
from trackfit.report.fields import FieldWriter
from trackfit.report.page import PageLayout, PageManager
from trackfit.report.sections import REPORT_SECTIONS
from trackfit.schemas.models import MaterialRecord

logger = logging.getLogger(__name__)

TITLE = "INDIAN RAILWAYS – MATERIAL RECORD"
SUBTITLE = "Issued by: Materials & Track Maintenance Division"
FOOTER = "This document is system-generated and valid for official Railways use."
FALLBACK_NAME = "MATERIAL"

LOGO_SIZE = 60
LOGO_INSET = 60
LOGO_BAND_HEIGHT = 80


@dataclass
class RenderedReport:
    filename: str
    content: bytes
    page_count: int
    media_type: str = "application/pdf"


def report_filename(record: MaterialRecord, override: str | None = None) -> str:
    """``<materialId>_Railway_Report.pdf``, or the MATERIAL fallback when the id is blank."""
    if override:
        return override
    return f"{record.material_id or FALLBACK_NAME}_Railway_Report.pdf"


def _draw_logo_band(pages: PageManager, logos: Sequence[ImageReader | None]) -> None:
    lay = pages.layout
    xs = (
        LOGO_INSET,
        lay.page_width / 2 - LOGO_SIZE / 2,
        lay.page_width - LOGO_INSET - LOGO_SIZE,
    )
    bottom = pages.to_canvas_y(pages.y + LOGO_SIZE)
    for x, logo in zip(xs, logos):
        if logo is None:
            continue
        pages.canvas.drawImage(
            logo, x, bottom, LOGO_SIZE, LOGO_SIZE,
            preserveAspectRatio=True, anchor="c", mask="auto",
        )
    pages.advance(LOGO_BAND_HEIGHT)


def _draw_title_block(pages: PageManager) -> None:
    c = pages.canvas
    center = pages.layout.page_width / 2
    c.setFont("Helvetica-Bold", 18)
    c.drawCentredString(center, pages.to_canvas_y(), TITLE)
    pages.advance(25)
    c.setFont("Helvetica-Bold", 12)
    c.drawCentredString(center, pages.to_canvas_y(), SUBTITLE)
    pages.advance(20)
    pages.rule(180)
    pages.advance(20)


def _draw_footer(pages: PageManager) -> None:
    pages.ensure_space(40)
    c = pages.canvas
    c.setFont("Helvetica-Oblique", 10)
    c.drawCentredString(pages.layout.page_width / 2, 40, FOOTER)


def render_material_pdf(
    record: MaterialRecord,
    logos: Sequence[ImageReader | None] = (),
    filename: str | None = None,
    layout: PageLayout | None = None,
) -> RenderedReport:
    """Compose the report for *record* entirely in memory.

    *logos* are the left, centre and right header images; missing entries
    leave their slot blank. Exceptions from reportlab propagate.
    """
    layout = layout or PageLayout()
    buffer = BytesIO()
    canvas = Canvas(buffer, pagesize=(layout.page_width, layout.page_height))
    name = report_filename(record, filename)
    canvas.setTitle(name.removesuffix(".pdf"))
    canvas.setAuthor("Materials & Track Maintenance Division")

    pages = PageManager(canvas, layout)
    pages.draw_border()
    _draw_logo_band(pages, logos)
    _draw_title_block(pages)

    writer = FieldWriter(pages)
    for section in REPORT_SECTIONS:
        pages.section_header(section.title)
        for label, value in section.values(record):
            writer.write(label, value)

    _draw_footer(pages)
    canvas.save()
    pdf_bytes = buffer.getvalue()
    buffer.close()

    logger.info("Rendered %s (%d page(s), %d bytes)", name, pages.page_count, len(pdf_bytes))
    return RenderedReport(filename=name, content=pdf_bytes, page_count=pages.page_count)


async def generate_material_pdf(
    record: MaterialRecord,
    filename: str | None = None,
    settings: Settings | None = None,
) -> RenderedReport:
    """Load the header logos, then render. Logo failures never fail the report."""
    settings = settings or get_settings()
    logos = await load_logos(
        settings.logo_sources,
        timeout=settings.trackfit_logo_timeout,
        base_dir=settings.assets_dir,
    )
    return render_material_pdf(record, logos=logos, filename=filename)


def write_material_pdf(report: RenderedReport, out_dir: str | Path) -> Path:
    """Write a rendered report into *out_dir* under its own filename.

    Directory parts of the filename are dropped, so the file always lands
    directly inside *out_dir*.
    """
    name = Path(report.filename).name
    if name in ("", ".", ".."):
        raise ValueError(f"Invalid report filename: {report.filename!r}")
    path = Path(out_dir) / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(report.content)
    return path
