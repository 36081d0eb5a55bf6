from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from ...core.constants import GROUP_WEIGHTS, SCORE_QUANTUM
from ...core.enums import GradeGroup
from ..model import GradeEntry
from .base import GradeCalculator


def group_entries(entries: Iterable[GradeEntry]) -> dict[GradeGroup, list[GradeEntry]]:
    """Bucket entries by group; the three weighted groups and ``Otro`` are always present."""
    buckets: dict[GradeGroup, list[GradeEntry]] = {group: [] for group in GradeGroup}
    for entry in entries:
        buckets[entry.group].append(entry)
    return buckets


def mean(values: Sequence[Decimal]) -> Optional[Decimal]:
    if not values:
        return None
    return sum(values, Decimal("0")) / len(values)


def missing_groups(entries: Iterable[GradeEntry]) -> tuple[GradeGroup, ...]:
    buckets = group_entries(entries)
    return tuple(g for g in GradeGroup.weighted() if not buckets[g])


class WeightedGradeCalculator(GradeCalculator):
    """Standard rule: 0.3 * ACTIVIDADES_1 + 0.3 * ACTIVIDADES_2 + 0.4 * EVALUACION_FINAL.

    Each group contributes the mean of its grades. An empty group contributes
    0, so an ungraded final evaluation scores like a failed one. Entries of any
    other group are ignored. The result is rounded half-up to 2 decimals.
    """

    def __init__(self, weights: Optional[dict[str, Decimal]] = None):
        self._weights = {GradeGroup(k): Decimal(v) for k, v in (weights or GROUP_WEIGHTS).items()}

    def final_score(self, entries: Iterable[GradeEntry]) -> Decimal:
        buckets = group_entries(entries)
        total = Decimal("0")
        for group, weight in self._weights.items():
            avg = mean([e.grade for e in buckets[group]])
            total += weight * (avg if avg is not None else Decimal("0"))
        return total.quantize(SCORE_QUANTUM, rounding=ROUND_HALF_UP)
