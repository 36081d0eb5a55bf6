from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from ...core.constants import DEFAULT_SEMESTER_FEE, MODULE_PAYMENT_CATEGORY
from ...core.enums import PaymentStatus
from ..model import Payment, StudentBalance
from .base import BalanceCalculator


class StandardBalanceCalculator(BalanceCalculator):
    """Standard rule: fee - discount% - completed module payments, not below 0."""

    def __init__(self, semester_fee: Decimal = DEFAULT_SEMESTER_FEE):
        self._fee = Decimal(semester_fee)

    def balance(self, *, discount: Decimal, payments: Iterable[Payment]) -> StudentBalance:
        fee_with_discount = self._fee - self._fee * Decimal(discount) / 100
        paid = sum(
            (
                p.amount
                for p in payments
                if p.category == MODULE_PAYMENT_CATEGORY and p.status == PaymentStatus.COMPLETED.value
            ),
            Decimal("0"),
        )
        return StudentBalance(
            semester_fee=self._fee,
            discount=Decimal(discount),
            fee_with_discount=fee_with_discount,
            paid=paid,
            pending=max(Decimal("0"), fee_with_discount - paid),
        )
