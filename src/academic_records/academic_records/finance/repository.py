from __future__ import annotations

from typing import Protocol, Sequence

from .model import Payment


class PaymentRepository(Protocol):
    def list_for_student(self, student_id: str) -> Sequence[Payment]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Payment]:
        raise NotImplementedError
