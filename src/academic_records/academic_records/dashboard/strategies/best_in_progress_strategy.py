from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...core.enums import ItemStatus
from ...curriculum.model import CatalogModule, ModuleAssignment
from .base import AttendanceSummary, SummaryStrategy, summarize


class BestInProgressStrategy(SummaryStrategy):
    """Highest attendance among in-progress modules; ties keep the first one."""

    def select(
        self,
        *,
        assignments: Sequence[ModuleAssignment],
        records: Sequence[AttendanceRecord],
        catalog: Mapping[str, CatalogModule],
    ) -> Optional[AttendanceSummary]:
        best: Optional[AttendanceSummary] = None
        for a in assignments:
            if a.status != ItemStatus.IN_PROGRESS:
                continue
            current = summarize(a, records, catalog)
            if best is None or current.percentage > best.percentage:
                best = current
        return best
