from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..core.constants import INCOME_PAYMENT_TYPE
from ..core.enums import PaymentStatus
from ..students.model import Student
from .calculator.base import BalanceCalculator
from .calculator.standard_calculator import StandardBalanceCalculator
from .model import StudentBalance
from .repository import PaymentRepository


class FinanceService:
    def __init__(self, payments: PaymentRepository, *, calculator: Optional[BalanceCalculator] = None):
        self._payments = payments
        self._calculator = calculator or StandardBalanceCalculator()

    def student_balance(self, student: Student) -> StudentBalance:
        payments = self._payments.list_for_student(student.student_id)
        return self._calculator.balance(discount=student.discount, payments=payments)

    def total_income(self) -> Decimal:
        """Completed income movements only."""
        return sum(
            (
                p.amount
                for p in self._payments.list_all()
                if p.type == INCOME_PAYMENT_TYPE and p.status == PaymentStatus.COMPLETED.value
            ),
            Decimal("0"),
        )
