from __future__ import annotations

from typing import Sequence

from ..store.snapshot import SnapshotStore, load_valid
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .rollup import filter_records


class SnapshotAttendanceRepository(AttendanceRepository):
    """Records come back in export order, which is the merge order of the roll-up."""

    def __init__(self, store: SnapshotStore):
        self._store = store

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        records = load_valid(self._store.documents("attendance"), AttendanceRecord.from_document, "attendance")
        return filter_records(records, student_id)
