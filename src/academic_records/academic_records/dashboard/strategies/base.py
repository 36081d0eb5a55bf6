from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...attendance.rollup import attendance_percentage, merge_attendance
from ...core.constants import FALLBACK_MODULE_NAME
from ...curriculum.model import CatalogModule, ModuleAssignment


@dataclass(frozen=True)
class AttendanceSummary:
    """The 'attendance per module' tile: one module and its percentage."""

    module_name: str
    percentage: int
    total: int = 0
    attended: int = 0


def records_for_assignment(
    assignment: ModuleAssignment,
    records: Sequence[AttendanceRecord],
    catalog: Mapping[str, CatalogModule],
) -> list[AttendanceRecord]:
    """Records matching the assignment by module id, by its own name or by the catalog name."""
    module = catalog.get(assignment.module_id)
    names = {n for n in (assignment.name, module.name if module else None) if n}
    return [r for r in records if r.module_id == assignment.module_id or r.module_name in names]


def summarize(
    assignment: ModuleAssignment,
    records: Sequence[AttendanceRecord],
    catalog: Mapping[str, CatalogModule],
) -> AttendanceSummary:
    matched = records_for_assignment(assignment, records, catalog)
    merged = merge_attendance(matched)
    attended = sum(1 for v in merged.values() if v)

    if matched:
        name = matched[0].module_name
    else:
        module = catalog.get(assignment.module_id)
        name = module.name if module else FALLBACK_MODULE_NAME

    return AttendanceSummary(
        module_name=name,
        percentage=attendance_percentage(attended, len(merged)),
        total=len(merged),
        attended=attended,
    )


class SummaryStrategy(ABC):
    """Strategy Pattern: decide which module feeds the attendance tile."""

    @abstractmethod
    def select(
        self,
        *,
        assignments: Sequence[ModuleAssignment],
        records: Sequence[AttendanceRecord],
        catalog: Mapping[str, CatalogModule],
    ) -> Optional[AttendanceSummary]:
        raise NotImplementedError
