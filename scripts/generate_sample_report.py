"""Generate a sample material report for the demo. Project-owned sample data."""

import asyncio
from pathlib import Path

from trackfit.config import get_settings
from trackfit.report.pdf import generate_material_pdf, write_material_pdf
from trackfit.schemas.models import MaterialRecord

SAMPLE = {
    "materialId": "ERC0042",
    "manufacturerId": "MFR0007",
    "manufacturerName": "Sample Rail Fittings Pvt Ltd",
    "fittingType": "Elastic Rail Clip",
    "drawingNumber": "RDSO/T-3701",
    "materialSpec": "Spring steel 55Si7",
    "weightKg": 0.9,
    "boardGauge": "Broad Gauge (1676 mm)",
    "manufacturingDate": "2025-01-14",
    "expectedLifeYears": 12,
    "purchaseOrderNumber": "PO-2025-1187",
    "batchNumber": "B-0425",
    "depotCode": "DEP-NDLS",
    "depotEntryDate": "2025-02-02",
    "udmLotNumber": "UDM-77812",
    "inspectionOfficer": "Depot Inspection Officer",
    "tmsTrackId": "TMS-DLI-UP-114",
    "gpsLocation": "28.6430, 77.2194",
    "installationStatus": "Installed",
    "dispatchDate": "2025-02-20",
    "warrantyExpiry": "2030-01-14",
    "failureCount": 1,
    "lastMaintenanceDate": "2025-09-30",
    "maintenanceNotes": "Clip reseated after toe-load check; no cracks observed at the heel.",
}


def main() -> None:
    root = Path(__file__).resolve().parent.parent
    out = root / "sample"
    record = MaterialRecord.model_validate(SAMPLE)
    rendered = asyncio.run(generate_material_pdf(record, settings=get_settings()))
    path = write_material_pdf(rendered, out)
    print(f"Wrote {path}")


if __name__ == "__main__":
    main()
