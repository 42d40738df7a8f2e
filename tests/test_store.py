"""Tests for the file-based material store."""

import json

import pytest

from trackfit.schemas.models import MaterialRecord
from trackfit.store import FileMaterialStore, InvalidMaterialIdError, get_material_store


@pytest.fixture
def store(tmp_path):
    return FileMaterialStore(tmp_path)


def test_save_and_get(store, full_record):
    store.save(full_record)
    assert store.get("ABC1234") == full_record


def test_documents_use_wire_names(store, tmp_path, full_record):
    store.save(full_record)
    data = json.loads((tmp_path / "materials" / "ABC1234.json").read_text(encoding="utf-8"))
    assert data["materialId"] == "ABC1234"
    assert data["fittingType"] == "Elastic Rail Clip"


def test_unknown_id_is_none(store):
    assert store.get("NOPE000") is None


def test_list_ids_sorted(store):
    for mid in ("ZZZ0001", "AAA0001"):
        store.save(MaterialRecord(material_id=mid))
    assert store.list_ids() == ["AAA0001", "ZZZ0001"]


@pytest.mark.parametrize("material_id", ["../etc/passwd", "a/b", "a.b", ""])
def test_path_like_ids_rejected(store, material_id):
    with pytest.raises(InvalidMaterialIdError):
        store.get(material_id)


def test_save_without_id_rejected(store):
    with pytest.raises(InvalidMaterialIdError):
        store.save(MaterialRecord(fitting_type="Liner"))


def test_get_material_store_uses_settings(env_dirs):
    store = get_material_store()
    assert store is get_material_store()
    store.save(MaterialRecord(material_id="ABC1234"))
    assert (env_dirs / "materials" / "ABC1234.json").exists()
