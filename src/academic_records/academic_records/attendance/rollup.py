"""Attendance roll-up over already fetched records.

Records of the same student/module may come from several registration
sessions. They are merged by date key: when two records carry the same date,
the record that comes later in iteration order wins. There is no timestamp
tie-break, so callers that care must pass records in write order.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from .model import AttendanceRecord, ModuleAttendance


def filter_records(
    records: Iterable[AttendanceRecord],
    student_id: str,
    *,
    module_id: Optional[str] = None,
    module_name: Optional[str] = None,
) -> list[AttendanceRecord]:
    out = []
    for r in records:
        if r.student_id != student_id:
            continue
        if module_id is not None and r.module_id != module_id:
            continue
        if module_name is not None and r.module_name != module_name:
            continue
        out.append(r)
    return out


def merge_attendance(records: Iterable[AttendanceRecord]) -> dict[str, bool]:
    merged: dict[str, bool] = {}
    for r in records:
        merged.update(r.attendance)
    return merged


def tally(module_name: str, records: Iterable[AttendanceRecord]) -> ModuleAttendance:
    merged = merge_attendance(records)
    attended = sum(1 for v in merged.values() if v)
    return ModuleAttendance(
        module_name=module_name,
        total=len(merged),
        attended=attended,
        percentage=attendance_percentage(attended, len(merged)),
        dates=dict(sorted(merged.items())),
    )


def roll_up_by_module(records: Iterable[AttendanceRecord]) -> dict[str, ModuleAttendance]:
    """Group by module name (historical records may lack a stable module id)."""
    grouped: dict[str, list[AttendanceRecord]] = {}
    for r in records:
        grouped.setdefault(r.module_name, []).append(r)
    return {name: tally(name, items) for name, items in grouped.items()}


def attendance_percentage(attended: int, total: int) -> int:
    """Attended share as a whole percentage (half-up); 0 when nothing was recorded."""
    if total <= 0:
        return 0
    pct = Decimal(attended) * 100 / Decimal(total)
    return int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
