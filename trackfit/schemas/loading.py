"""Read material records from JSON or YAML files."""

import json
from pathlib import Path

import yaml

from trackfit.schemas.models import MaterialRecord


class RecordFileError(ValueError):
    """The file is not a single JSON/YAML mapping."""


def load_material_record(path: str | Path) -> MaterialRecord:
    """Load one record; ``.yaml``/``.yml`` go through PyYAML, anything else is JSON.

    Raises FileNotFoundError, RecordFileError, or pydantic's ValidationError.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Record file not found: {p}")
    with open(p, "r", encoding="utf-8") as f:
        if p.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    if not isinstance(data, dict):
        raise RecordFileError(f"{p.name}: expected a mapping of fields, got {type(data).__name__}")
    return MaterialRecord.model_validate(data)
