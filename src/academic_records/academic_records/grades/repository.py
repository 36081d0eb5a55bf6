from __future__ import annotations

from typing import Protocol, Sequence

from .model import GradeEntry


class GradeRepository(Protocol):
    def list_for_student(self, student_id: str) -> Sequence[GradeEntry]:
        raise NotImplementedError

    def list_for_module(self, module_name: str) -> Sequence[GradeEntry]:
        raise NotImplementedError
