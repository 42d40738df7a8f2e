"""CLI entry-point: material reports, QR codes, and the local material store."""

import asyncio
import json
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from trackfit.config import get_settings
from trackfit.qr import QRPayloadError, build_qr_png, build_qr_svg
from trackfit.report.fields import format_value
from trackfit.report.html import render_html_material, write_html_material
from trackfit.report.markdown import render_markdown_material, write_markdown_material
from trackfit.report.pdf import generate_material_pdf, write_material_pdf
from trackfit.report.sections import REPORT_SECTIONS
from trackfit.schemas.loading import RecordFileError, load_material_record
from trackfit.schemas.models import MaterialRecord
from trackfit.store import InvalidMaterialIdError, get_material_store

app = typer.Typer(help="Railway track-fitting material reports")


def _load_or_exit(console: Console, record_path: str) -> MaterialRecord:
    try:
        return load_material_record(record_path)
    except (FileNotFoundError, RecordFileError, ValidationError, json.JSONDecodeError, yaml.YAMLError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def report(
    record_path: str = typer.Argument(..., help="Material record (.json, .yaml or .yml)"),
    output: str = typer.Option(None, help="Output directory (default from TRACKFIT_OUTPUT_DIR or <data>/output)"),
    filename: str = typer.Option(None, help="PDF filename (default <materialId>_Railway_Report.pdf)"),
    format: str = typer.Option("pdf", help="Formats: pdf, md, html, or a comma list"),
):
    """Generate the material report for one record file."""
    console = Console()
    settings = get_settings()
    out_dir = Path(output) if output else settings.output_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    formats = [f.strip().lower() for f in format.split(",") if f.strip()]
    if filename is not None and (Path(filename).name != filename or filename in (".", "..")):
        console.print(f"[red]Error: --filename must be a plain file name, got '{filename}'[/red]")
        raise typer.Exit(1)

    record = _load_or_exit(console, record_path)
    stem = Path(record.material_id or "MATERIAL").name or "MATERIAL"

    if "pdf" in formats:
        console.print("Rendering PDF...")
        try:
            rendered = asyncio.run(generate_material_pdf(record, filename=filename, settings=settings))
        except Exception as e:
            console.print(f"[red]PDF generation failed: {e}[/red]")
            raise typer.Exit(1)
        path = write_material_pdf(rendered, out_dir)
        console.print(f"Wrote {path} ({rendered.page_count} page(s))")
    if "md" in formats:
        md_path = out_dir / f"{stem}_details.md"
        write_markdown_material(md_path, render_markdown_material(record))
        console.print(f"Wrote {md_path}")
    if "html" in formats:
        html_path = out_dir / f"{stem}_details.html"
        write_html_material(html_path, render_html_material(record))
        console.print(f"Wrote {html_path}")
    console.print("[green]Done.[/green]")


@app.command()
def qr(
    material_id: str = typer.Argument(..., help="Material ID to encode"),
    output: str = typer.Option(None, help="Output directory"),
    format: str = typer.Option("svg", help="svg or png"),
):
    """Write a QR code that encodes only the material id."""
    console = Console()
    settings = get_settings()
    out_dir = Path(output) if output else settings.output_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    kind = format.strip().lower()
    if kind not in ("svg", "png"):
        console.print(f"[red]Error: unsupported format '{format}' (use svg or png)[/red]")
        raise typer.Exit(1)

    try:
        if kind == "svg":
            path = out_dir / f"{Path(material_id).name}_qr.svg"
            path.write_text(build_qr_svg(material_id), encoding="utf-8")
        else:
            path = out_dir / f"{Path(material_id).name}_qr.png"
            path.write_bytes(build_qr_png(material_id))
    except QRPayloadError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    console.print(f"Wrote {path}")


@app.command("import")
def import_record(
    record_path: str = typer.Argument(..., help="Material record (.json, .yaml or .yml)"),
):
    """Save a record file into the material store."""
    console = Console()
    record = _load_or_exit(console, record_path)
    try:
        get_material_store().save(record)
    except InvalidMaterialIdError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Stored material {record.material_id}[/green]")


@app.command()
def show(
    material_id: str = typer.Argument(..., help="Material ID to look up"),
):
    """Print a stored record, section by section."""
    console = Console()
    try:
        record = get_material_store().get(material_id)
    except InvalidMaterialIdError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    if record is None:
        console.print(f"[red]Material not found: {material_id}[/red]")
        raise typer.Exit(1)

    for section in REPORT_SECTIONS:
        table = Table(title=section.title, title_justify="left", show_header=False)
        table.add_column("Field", style="dim")
        table.add_column("Value")
        for label, value in section.values(record):
            table.add_row(label, format_value(value))
        console.print(table)


if __name__ == "__main__":
    app()
