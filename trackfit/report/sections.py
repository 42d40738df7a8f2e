"""Fixed section and row order shared by the PDF and the Markdown/HTML views."""

from dataclasses import dataclass
from typing import Any, Callable

from trackfit.report.fields import PLACEHOLDER
from trackfit.schemas.models import MaterialRecord


@dataclass(frozen=True)
class Row:
    label: str
    value: Callable[[MaterialRecord], Any]


@dataclass(frozen=True)
class Section:
    title: str
    rows: tuple[Row, ...]

    def values(self, record: MaterialRecord) -> list[tuple[str, Any]]:
        return [(row.label, row.value(record)) for row in self.rows]


def _attr(name: str) -> Callable[[MaterialRecord], Any]:
    return lambda record: getattr(record, name)


def _service_life(record: MaterialRecord) -> str:
    years = record.expected_life_years
    return f"{years} years" if years else PLACEHOLDER


REPORT_SECTIONS: tuple[Section, ...] = (
    Section("1. Core Details", (
        Row("Material ID", _attr("material_id")),
        Row("Manufacturer ID", _attr("manufacturer_id")),
        Row("Manufacturer Name", _attr("manufacturer_name")),
    )),
    Section("2. Technical Specifications", (
        Row("Fitting Type", _attr("fitting_type")),
        Row("Drawing Number", _attr("drawing_number")),
        Row("Material Specification", _attr("material_spec")),
        Row("Weight (kg)", _attr("weight_kg")),
        Row("Board Gauge", _attr("board_gauge")),
        Row("Manufacturing Date", _attr("manufacturing_date")),
        Row("Expected Service Life", _service_life),
    )),
    Section("3. UDM & Purchase Details", (
        Row("PO Number", _attr("purchase_order_number")),
        Row("Batch Number", _attr("batch_number")),
        Row("Depot Code", _attr("depot_code")),
        Row("Depot Entry Date", _attr("depot_entry_date")),
        Row("UDM Lot Number", _attr("udm_lot_number")),
        Row("Inspection Officer", _attr("inspection_officer")),
    )),
    Section("4. TMS & Lifecycle Information", (
        Row("TMS Track ID", _attr("tms_track_id")),
        Row("GPS Location", _attr("gps_location")),
        Row("Installation Status", _attr("installation_status")),
        Row("Dispatch Date", _attr("dispatch_date")),
        Row("Warranty Expiry", _attr("warranty_expiry")),
        Row("Failure Count", _attr("failure_count")),
        Row("Last Maintenance Date", _attr("last_maintenance_date")),
        Row("Maintenance Notes", _attr("maintenance_notes")),
    )),
)
