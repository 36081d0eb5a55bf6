from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable

from ..model import GradeEntry


class GradeCalculator(ABC):
    """Calculator interface (Strategy Pattern for final scores)."""

    @abstractmethod
    def final_score(self, entries: Iterable[GradeEntry]) -> Decimal:
        raise NotImplementedError
