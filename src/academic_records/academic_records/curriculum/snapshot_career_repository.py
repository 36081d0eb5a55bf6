from __future__ import annotations

from functools import partial
from typing import Optional, Sequence

from ..store.snapshot import SnapshotStore, load_valid
from .model import Career, CatalogModule
from .repository import CareerRepository


class SnapshotCareerRepository(CareerRepository):
    def __init__(self, store: SnapshotStore):
        self._store = store

    def get_by_name(self, name: str) -> Optional[Career]:
        careers = load_valid(self._store.documents("careers"), Career.from_document, "careers")
        return next((c for c in careers if c.name == name), None)

    def list_general_modules(self) -> Sequence[CatalogModule]:
        factory = partial(CatalogModule.from_document, is_general=True)
        return load_valid(self._store.documents("general_modules"), factory, "general_modules")
