from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.enums import ItemStatus
from ..curriculum.model import ModuleAssignment
from .strategies.base import SummaryStrategy
from .strategies.best_in_progress_strategy import BestInProgressStrategy
from .strategies.last_approved_strategy import LastApprovedStrategy


@dataclass
class SummaryStrategyFactory:
    """Factory Pattern: choose the attendance-tile strategy from the student's assignments."""

    def for_assignments(self, assignments: Sequence[ModuleAssignment]) -> SummaryStrategy:
        if any(a.status == ItemStatus.IN_PROGRESS for a in assignments):
            return BestInProgressStrategy()
        return LastApprovedStrategy()
