from __future__ import annotations

from typing import Optional, Sequence

from ..store.snapshot import SnapshotStore, load_valid
from .model import Student
from .repository import StudentRepository


class SnapshotStudentRepository(StudentRepository):
    def __init__(self, store: SnapshotStore):
        self._store = store

    def list_all(self) -> Sequence[Student]:
        return load_valid(self._store.documents("students"), Student.from_document, "students")

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return next((s for s in self.list_all() if s.student_id == student_id), None)

    def get_by_email(self, email: str) -> Optional[Student]:
        wanted = (email or "").strip().lower()
        if not wanted:
            return None
        return next((s for s in self.list_all() if s.email and s.email.lower() == wanted), None)
