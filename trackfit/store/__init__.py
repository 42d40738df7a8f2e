"""Material record storage and retrieval."""

from trackfit.store.materials import (
    FileMaterialStore,
    InvalidMaterialIdError,
    MaterialStore,
    get_material_store,
)

__all__ = ["FileMaterialStore", "InvalidMaterialIdError", "MaterialStore", "get_material_store"]
