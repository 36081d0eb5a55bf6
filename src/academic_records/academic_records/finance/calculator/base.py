from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable

from ..model import Payment, StudentBalance


class BalanceCalculator(ABC):
    """Calculator interface (Strategy Pattern for student balances)."""

    @abstractmethod
    def balance(self, *, discount: Decimal, payments: Iterable[Payment]) -> StudentBalance:
        raise NotImplementedError
