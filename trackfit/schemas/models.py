"""Pydantic models for the material record as stored in the materials collection."""

from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class InstallationStatus(str, Enum):
    INSTALLED = "Installed"
    NOT_INSTALLED = "Not Installed"


class MaterialRecord(BaseModel):
    """One track-fitting component tracked from manufacture to maintenance.

    Every field is optional. Keys use the camelCase names of the materials
    collection (``materialId``, ``tmsTrackId`` ...); snake_case attribute
    names are accepted too. Unknown keys are dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    # Identity
    material_id: str | None = None
    manufacturer_id: str | None = None
    manufacturer_name: str | None = None

    # Technical
    fitting_type: str | None = None
    drawing_number: str | None = None
    material_spec: str | None = None
    weight_kg: int | float | str | None = None
    board_gauge: str | None = None
    manufacturing_date: str | None = None
    expected_life_years: int | float | str | None = None

    # Logistics (UDM / purchase)
    purchase_order_number: str | None = None
    batch_number: str | None = None
    depot_code: str | None = None
    depot_entry_date: str | None = None
    udm_lot_number: str | None = None
    inspection_officer: str | None = None

    # Lifecycle (TMS)
    tms_track_id: str | None = None
    gps_location: str | None = None
    installation_status: InstallationStatus | None = None
    dispatch_date: str | None = None
    warranty_expiry: str | None = None
    failure_count: int | float | str | None = None
    last_maintenance_date: str | None = None
    maintenance_notes: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _dates_to_iso(cls, v: Any) -> Any:
        # YAML and some database clients hand back date objects
        if isinstance(v, (date, datetime)):
            return v.isoformat()
        return v

    @field_validator("installation_status", mode="before")
    @classmethod
    def _blank_status_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_document(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
