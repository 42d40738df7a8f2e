"""Material report assembly (PDF, Markdown, and HTML)."""

from trackfit.report.html import render_html_material, write_html_material
from trackfit.report.markdown import render_markdown_material, write_markdown_material
from trackfit.report.pdf import (
    RenderedReport,
    generate_material_pdf,
    render_material_pdf,
    report_filename,
    write_material_pdf,
)

__all__ = [
    "RenderedReport",
    "generate_material_pdf",
    "render_html_material",
    "render_markdown_material",
    "render_material_pdf",
    "report_filename",
    "write_html_material",
    "write_markdown_material",
    "write_material_pdf",
]
