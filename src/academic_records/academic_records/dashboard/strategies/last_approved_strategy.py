from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...core.enums import ItemStatus
from ...curriculum.model import CatalogModule, ModuleAssignment
from .base import AttendanceSummary, SummaryStrategy, summarize


class LastApprovedStrategy(SummaryStrategy):
    """No module in progress: show the last approved one (by assignment order)."""

    def select(
        self,
        *,
        assignments: Sequence[ModuleAssignment],
        records: Sequence[AttendanceRecord],
        catalog: Mapping[str, CatalogModule],
    ) -> Optional[AttendanceSummary]:
        approved = [a for a in assignments if a.status == ItemStatus.APPROVED]
        if not approved:
            return None
        return summarize(approved[-1], records, catalog)
