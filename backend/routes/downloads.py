"""Download routes: the material report PDF and QR images."""

import logging
import re

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from trackfit.config import Settings, get_settings
from trackfit.qr import QRPayloadError, build_qr_png, build_qr_svg
from trackfit.report.pdf import RenderedReport, generate_material_pdf
from trackfit.schemas.models import MaterialRecord
from trackfit.store import MaterialStore, get_material_store

from backend.routes.materials import load_material

logger = logging.getLogger(__name__)
router = APIRouter()


def _attachment(report: RenderedReport) -> Response:
    # header values must stay ASCII and quote-free
    safe_name = re.sub(r"[^A-Za-z0-9._-]", "_", report.filename)
    return Response(
        content=report.content,
        media_type=report.media_type,
        headers={"Content-Disposition": f'attachment; filename="{safe_name}"'},
    )


async def _render(record: MaterialRecord, settings: Settings) -> RenderedReport:
    try:
        return await generate_material_pdf(record, settings=settings)
    except Exception as e:
        logger.exception("PDF generation failed for %s", record.material_id)
        raise HTTPException(status_code=500, detail=f"PDF generation failed: {str(e)[:300]}")


@router.get("/download/{material_id}/report")
async def download_report(
    material_id: str,
    store: MaterialStore = Depends(get_material_store),
    settings: Settings = Depends(get_settings),
):
    """Report PDF for a stored material, as a browser download."""
    record = load_material(material_id, store)
    return _attachment(await _render(record, settings))


@router.post("/download/report")
async def download_report_for_record(
    record: MaterialRecord,
    settings: Settings = Depends(get_settings),
):
    """Report PDF for a record posted in the body (nothing is stored)."""
    return _attachment(await _render(record, settings))


@router.get("/download/{material_id}/qr.{kind}")
async def download_qr(material_id: str, kind: str):
    """QR code that encodes the material id, as SVG or PNG."""
    try:
        if kind == "svg":
            return Response(content=build_qr_svg(material_id), media_type="image/svg+xml")
        if kind == "png":
            return Response(content=build_qr_png(material_id), media_type="image/png")
    except QRPayloadError as e:
        raise HTTPException(status_code=400, detail=str(e))
    raise HTTPException(status_code=400, detail=f"Unknown QR format: {kind}")
