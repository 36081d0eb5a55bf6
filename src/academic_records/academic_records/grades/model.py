from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..common.validators import first_present, optional_str, require_grade, require_non_empty
from ..core.enums import GradeGroup


@dataclass(frozen=True)
class GradeEntry:
    """Entidad de dominio: nota de una actividad de un estudiante en un módulo."""

    student_id: str
    module_id: Optional[str]
    module_name: str
    group_label: str
    activity_name: str
    grade: Decimal
    date: Optional[date] = None
    teacher_name: Optional[str] = None
    student_name: Optional[str] = None
    entry_id: Optional[str] = None

    @property
    def group(self) -> GradeGroup:
        return GradeGroup.from_label(self.group_label)

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "GradeEntry":
        """Validation boundary for documents of the ``grades`` collection.

        Rejects a missing student, a missing module name and grades outside
        [0, 5]. The group label prefers ``groupName`` over ``groupId``.
        """
        return cls(
            entry_id=optional_str(doc.get("id")),
            student_id=require_non_empty(doc.get("studentId"), "El estudiante"),
            module_id=optional_str(doc.get("moduleId")),
            module_name=require_non_empty(first_present(doc, "moduleName", "modulo"), "El módulo"),
            group_label=optional_str(first_present(doc, "groupName", "groupId")) or GradeGroup.OTRO.value,
            activity_name=optional_str(first_present(doc, "activityName", "description")) or "Actividad",
            grade=require_grade(doc.get("grade")),
            date=coerce_date(doc.get("date")),
            teacher_name=optional_str(doc.get("teacherName")),
            student_name=optional_str(doc.get("studentName")),
        )


@dataclass(frozen=True)
class GradeStats:
    """Read-model: general stats of a set of grades."""

    average: Decimal
    max_grade: Decimal
    min_grade: Decimal
    total: int


@dataclass(frozen=True)
class ModuleGrades:
    """Read-model: final score and detail of one (student, module) pair."""

    module_name: str
    final_score: Decimal
    groups: dict[GradeGroup, list[GradeEntry]] = field(default_factory=dict)
    missing_groups: tuple[GradeGroup, ...] = ()

    @property
    def is_complete(self) -> bool:
        return not self.missing_groups


@dataclass(frozen=True)
class StudentGradeRow:
    student_id: str
    student_name: str
    stats: GradeStats
    final_score: Decimal
    entries: tuple[GradeEntry, ...] = ()


@dataclass(frozen=True)
class ModuleGradeReport:
    """Read-model for the per-module grade report."""

    module_name: str
    total_students: int
    stats: GradeStats
    students: tuple[StudentGradeRow, ...] = ()
