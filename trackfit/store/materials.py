"""Material record storage: one JSON document per material id."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Protocol

from trackfit.config import get_settings
from trackfit.schemas.models import MaterialRecord

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class InvalidMaterialIdError(ValueError):
    """Material id missing or not usable as a document key."""


def validate_material_id(material_id: str | None) -> str:
    if not material_id or not _ID_RE.match(material_id):
        raise InvalidMaterialIdError(f"Invalid material id: {material_id!r}")
    return material_id


class MaterialStore(Protocol):
    def get(self, material_id: str) -> MaterialRecord | None: ...
    def save(self, record: MaterialRecord) -> MaterialRecord: ...
    def list_ids(self) -> list[str]: ...


class FileMaterialStore:
    """Persist records as JSON files under ``<data_dir>/materials``."""

    def __init__(self, data_dir: Path):
        self._dir = Path(data_dir) / "materials"
        self._dir.mkdir(parents=True, exist_ok=True)

    def _path(self, material_id: str) -> Path:
        return self._dir / f"{validate_material_id(material_id)}.json"

    def get(self, material_id: str) -> MaterialRecord | None:
        path = self._path(material_id)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return MaterialRecord.model_validate(data)

    def save(self, record: MaterialRecord) -> MaterialRecord:
        path = self._path(record.material_id)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(record.to_document(), f, indent=2, ensure_ascii=False)
        logger.info("Saved material %s", record.material_id)
        return record

    def list_ids(self) -> list[str]:
        return sorted(p.stem for p in self._dir.glob("*.json"))


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

_store: MaterialStore | None = None


def get_material_store() -> MaterialStore:
    """Return singleton material store rooted at the configured data dir."""
    global _store
    if _store is None:
        settings = get_settings()
        _store = FileMaterialStore(settings.data_dir)
        logger.info("Using file-based material store (%s)", settings.materials_dir)
    return _store


def reset_material_store() -> None:
    global _store
    _store = None
