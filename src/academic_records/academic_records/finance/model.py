from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..common.validators import optional_str, to_decimal


@dataclass(frozen=True)
class Payment:
    """Domain entity: a payment movement (student fee, teacher payment, income...)."""

    payment_id: Optional[str]
    amount: Decimal
    status: str
    category: Optional[str] = None
    type: Optional[str] = None
    student_id: Optional[str] = None
    teacher_id: Optional[str] = None
    date: Optional[date] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Payment":
        return cls(
            payment_id=optional_str(doc.get("id")),
            amount=to_decimal(doc.get("amount"), "El monto"),
            status=optional_str(doc.get("status")) or "pending",
            category=optional_str(doc.get("category")),
            type=optional_str(doc.get("type")),
            student_id=optional_str(doc.get("studentId")),
            teacher_id=optional_str(doc.get("teacherId")),
            date=coerce_date(doc.get("date")),
        )


@dataclass(frozen=True)
class StudentBalance:
    """Read-model: what a student owes for the semester."""

    semester_fee: Decimal
    discount: Decimal
    fee_with_discount: Decimal
    paid: Decimal
    pending: Decimal
