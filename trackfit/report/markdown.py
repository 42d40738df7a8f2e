"""Markdown material view: the same sections and placeholder as the PDF."""

import re
from html import escape
from pathlib import Path

from trackfit.report.fields import format_value
from trackfit.report.sections import REPORT_SECTIONS
from trackfit.schemas.models import MaterialRecord

# inline syntax that would turn a value into a link, image, code span or emphasis
_MD_INLINE = re.compile(r"([\\`*_\[\]()!])")


def _text(value: object, escape_html: bool) -> str:
    text = format_value(value)
    if not escape_html:
        return text
    return _MD_INLINE.sub(r"\\\1", escape(text, quote=False))


def _cell(value: object, escape_html: bool) -> str:
    # keep table rows on one line and pipes out of the cell
    return _text(value, escape_html).replace("|", "\\|").replace("\n", "<br>")


def render_markdown_material(record: MaterialRecord, escape_html: bool = False) -> str:
    """Assemble a Markdown page with one Field/Value table per section.

    Set *escape_html* when the result is headed for an HTML page, so that
    record values cannot inject markup.
    """
    sections: list[str] = []

    sections.append(f"# {_text(record.fitting_type, escape_html)} – Details\n")
    sections.append(f"**Material ID:** {_text(record.material_id, escape_html)}\n")
    sections.append("---\n")

    for section in REPORT_SECTIONS:
        sections.append(f"## {_text(section.title, escape_html)}\n")
        rows = ["| Field | Value |", "|-------|-------|"]
        rows += [
            f"| {label} | {_cell(value, escape_html)} |"
            for label, value in section.values(record)
        ]
        sections.append("\n".join(rows) + "\n")

    return "\n".join(sections)


def write_markdown_material(output_path: str | Path, content: str) -> None:
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    Path(output_path).write_text(content, encoding="utf-8")
