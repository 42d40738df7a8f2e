"""Pydantic models: single source of truth for all data shapes."""

from trackfit.schemas.loading import RecordFileError, load_material_record
from trackfit.schemas.models import InstallationStatus, MaterialRecord

__all__ = [
    "InstallationStatus",
    "MaterialRecord",
    "RecordFileError",
    "load_material_record",
]
