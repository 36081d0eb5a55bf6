from __future__ import annotations

from typing import Sequence

from ..store.snapshot import SnapshotStore, load_valid
from .model import GradeEntry
from .repository import GradeRepository


class SnapshotGradeRepository(GradeRepository):
    def __init__(self, store: SnapshotStore):
        self._store = store

    def _all(self) -> list[GradeEntry]:
        return load_valid(self._store.documents("grades"), GradeEntry.from_document, "grades")

    def list_for_student(self, student_id: str) -> Sequence[GradeEntry]:
        return [g for g in self._all() if g.student_id == student_id]

    def list_for_module(self, module_name: str) -> Sequence[GradeEntry]:
        return [g for g in self._all() if g.module_name == module_name]
