from __future__ import annotations

from typing import Sequence

from ..store.snapshot import SnapshotStore, load_valid
from .model import Payment
from .repository import PaymentRepository


class SnapshotPaymentRepository(PaymentRepository):
    def __init__(self, store: SnapshotStore):
        self._store = store

    def list_all(self) -> Sequence[Payment]:
        return load_valid(self._store.documents("payments"), Payment.from_document, "payments")

    def list_for_student(self, student_id: str) -> Sequence[Payment]:
        return [p for p in self.list_all() if p.student_id == student_id]
