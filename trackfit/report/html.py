"""HTML material view: wrap the Markdown view in a styled page."""

from html import escape
from pathlib import Path

import markdown

from trackfit.report.markdown import render_markdown_material
from trackfit.schemas.models import MaterialRecord


HTML_WRAPPER = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8"/>
<meta name="viewport" content="width=device-width, initial-scale=1"/>
<title>{title}</title>
<style>
body {{ font-family: system-ui, sans-serif; max-width: 640px; margin: 0 auto; padding: 1rem; line-height: 1.5; background: #F7E8FF; }}
main {{ background: #fff; border-radius: 1.5rem; padding: 1.5rem; }}
h1 {{ color: #A259FF; font-size: 1.3rem; }}
h2 {{ margin-top: 1.5rem; color: #A259FF; font-size: 0.85rem; text-transform: uppercase; letter-spacing: 0.05em; }}
table {{ border-collapse: collapse; width: 100%; font-size: 0.8rem; }}
th, td {{ border-bottom: 1px solid #e5e5e5; padding: 0.4rem; text-align: left; word-break: break-word; }}
td:last-child {{ font-weight: 600; text-align: right; }}
a.download {{ display: block; margin-top: 1.5rem; padding: 0.75rem; text-align: center; background: #A259FF; color: #fff; border-radius: 0.75rem; text-decoration: none; font-weight: 600; }}
</style>
</head>
<body>
<main>
{body}
</main>
</body>
</html>
"""


def render_html_material(record: MaterialRecord, report_url: str | None = None) -> str:
    """Render the Markdown view to HTML, optionally with a PDF download link."""
    md = render_markdown_material(record, escape_html=True)
    body = markdown.markdown(md, extensions=["tables"])
    if report_url:
        body += f'\n<a class="download" href="{escape(report_url)}">Download Report (PDF)</a>'
    title = f"Material {record.material_id}" if record.material_id else "Material"
    return HTML_WRAPPER.format(title=escape(title), body=body)


def write_html_material(output_path: str | Path, content: str) -> None:
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    Path(output_path).write_text(content, encoding="utf-8")
