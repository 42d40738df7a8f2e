"""Material record routes and the public material page a scanned QR code opens."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from trackfit.report.html import render_html_material
from trackfit.schemas.models import MaterialRecord
from trackfit.store import InvalidMaterialIdError, MaterialStore, get_material_store

logger = logging.getLogger(__name__)
router = APIRouter()
public_router = APIRouter()


def load_material(material_id: str, store: MaterialStore) -> MaterialRecord:
    """Fetch a record or raise the matching HTTP error."""
    try:
        record = store.get(material_id)
    except InvalidMaterialIdError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if record is None:
        raise HTTPException(status_code=404, detail=f"Material not found: {material_id}")
    return record


@router.get("/materials", response_model=list[str])
async def list_materials(store: MaterialStore = Depends(get_material_store)):
    """IDs of every stored material."""
    return store.list_ids()


@router.get(
    "/materials/{material_id}",
    response_model=MaterialRecord,
    response_model_exclude_none=True,
)
async def get_material(material_id: str, store: MaterialStore = Depends(get_material_store)):
    return load_material(material_id, store)


@router.put(
    "/materials/{material_id}",
    response_model=MaterialRecord,
    response_model_exclude_none=True,
)
async def put_material(
    material_id: str,
    record: MaterialRecord,
    store: MaterialStore = Depends(get_material_store),
):
    """Create or replace a record; the path id wins over any id in the body."""
    record = record.model_copy(update={"material_id": material_id})
    try:
        return store.save(record)
    except InvalidMaterialIdError as e:
        raise HTTPException(status_code=400, detail=str(e))


@public_router.get("/materials/{material_id}", response_class=HTMLResponse)
async def material_page(material_id: str, store: MaterialStore = Depends(get_material_store)):
    """Read-only detail page with a link to the PDF report."""
    record = load_material(material_id, store)
    return HTMLResponse(
        render_html_material(record, report_url=f"/api/download/{material_id}/report")
    )
