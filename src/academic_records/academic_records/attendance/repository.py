from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
