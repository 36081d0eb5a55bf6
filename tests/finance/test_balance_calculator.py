from __future__ import annotations

from decimal import Decimal

from academic_records.finance.calculator.standard_calculator import StandardBalanceCalculator
from academic_records.finance.model import Payment
from academic_records.finance.service import FinanceService


def _pay(amount: str, *, status="completed", category="Pago de módulo", type=None, student_id="s1") -> Payment:
    return Payment(payment_id=None, amount=Decimal(amount), status=status, category=category, type=type, student_id=student_id)


def test_balance_applies_discount_and_completed_module_payments():
    payments = [
        _pay("50000"),
        _pay("30000", status="pending"),
        _pay("20000", category="Pago a profesor"),
    ]

    balance = StandardBalanceCalculator().balance(discount=Decimal("25"), payments=payments)

    assert balance.fee_with_discount == Decimal("150000")
    assert balance.paid == Decimal("50000")
    assert balance.pending == Decimal("100000")


def test_balance_never_negative():
    balance = StandardBalanceCalculator(Decimal("100000")).balance(discount=Decimal("0"), payments=[_pay("150000")])

    assert balance.pending == Decimal("0")


class FakePayments:
    def __init__(self, payments):
        self._payments = payments

    def list_all(self):
        return self._payments

    def list_for_student(self, student_id):
        return [p for p in self._payments if p.student_id == student_id]


def test_total_income_counts_completed_income_only():
    svc = FinanceService(
        FakePayments(
            [
                _pay("300000", type="income", category=None),
                _pay("999", type="income", category=None, status="cancelled"),
                _pay("100000"),
            ]
        )
    )

    assert svc.total_income() == Decimal("300000")
