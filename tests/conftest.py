"""Pytest configuration and shared fixtures."""

from io import BytesIO

import pdfplumber
import pytest

from trackfit.report.assets import clear_logo_cache
from trackfit.schemas.models import MaterialRecord
from trackfit.store.materials import reset_material_store

LOGO_NAMES = ("g20.png", "railway.png", "tourism.png")

FULL_RECORD = {
    "materialId": "ABC1234",
    "manufacturerId": "MFR0001",
    "manufacturerName": "Northern Rail Castings",
    "fittingType": "Elastic Rail Clip",
    "drawingNumber": "RDSO/T-3701",
    "materialSpec": "Spring steel 55Si7",
    "weightKg": "0.9",
    "boardGauge": "Broad Gauge",
    "manufacturingDate": "2025-01-14",
    "expectedLifeYears": 12,
    "purchaseOrderNumber": "PO-2025-1187",
    "batchNumber": "B-0425",
    "depotCode": "DEP-NDLS",
    "depotEntryDate": "2025-02-02",
    "udmLotNumber": "UDM-77812",
    "inspectionOfficer": "R. Sharma",
    "tmsTrackId": "TMS-DLI-UP-114",
    "gpsLocation": "28.6430, 77.2194",
    "installationStatus": "Installed",
    "dispatchDate": "2025-02-20",
    "warrantyExpiry": "2030-01-14",
    "failureCount": 0,
    "lastMaintenanceDate": "2025-09-30",
}


def _png_bytes(color: str) -> bytes:
    from PIL import Image

    buf = BytesIO()
    Image.new("RGB", (32, 32), color).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture(autouse=True)
def _fresh_caches():
    clear_logo_cache()
    reset_material_store()
    yield
    clear_logo_cache()
    reset_material_store()


@pytest.fixture
def full_record() -> MaterialRecord:
    return MaterialRecord.model_validate(FULL_RECORD)


@pytest.fixture
def png_bytes():
    return _png_bytes


@pytest.fixture
def assets_dir(tmp_path):
    """Assets directory holding the three header logos."""
    d = tmp_path / "static"
    d.mkdir()
    for name, color in zip(LOGO_NAMES, ("orange", "navy", "green")):
        (d / name).write_bytes(_png_bytes(color))
    return d


@pytest.fixture
def env_dirs(tmp_path, monkeypatch, assets_dir):
    """Point settings at temporary data and asset directories."""
    data = tmp_path / "data"
    monkeypatch.setenv("TRACKFIT_DATA_DIR", str(data))
    monkeypatch.setenv("TRACKFIT_ASSETS_DIR", str(assets_dir))
    monkeypatch.delenv("TRACKFIT_OUTPUT_DIR", raising=False)
    monkeypatch.delenv("TRACKFIT_LOGOS", raising=False)
    return data


def _pdf_text_pages(content: bytes) -> list[str]:
    with pdfplumber.open(BytesIO(content)) as pdf:
        return [page.extract_text() or "" for page in pdf.pages]


def _pdf_image_counts(content: bytes) -> list[int]:
    with pdfplumber.open(BytesIO(content)) as pdf:
        return [len(page.images) for page in pdf.pages]


@pytest.fixture
def pdf_text():
    """Per-page extracted text of PDF bytes."""
    return _pdf_text_pages


@pytest.fixture
def pdf_images():
    """Per-page image counts of PDF bytes."""
    return _pdf_image_counts
