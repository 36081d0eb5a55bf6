from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import ModuleAttendance
from ..attendance.repository import AttendanceRepository
from ..attendance.rollup import roll_up_by_module
from ..core.enums import ItemStatus
from ..core.exceptions import NotFoundError
from ..curriculum.model import ResolvedItem
from ..curriculum.resolver import (
    in_progress_names,
    recognition_count,
    resolve_catalog_modules,
    resolve_modules,
    resolve_seminars,
    with_status,
)
from ..curriculum.service import CurriculumService
from ..finance.model import StudentBalance
from ..finance.service import FinanceService
from ..grades.model import ModuleGrades
from ..grades.service import GradeReportService
from ..students.model import Student
from ..students.repository import StudentRepository
from .factory import SummaryStrategyFactory
from .strategies.base import AttendanceSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentDashboard:
    student: Student
    grades: list[ModuleGrades]
    attendance: dict[str, ModuleAttendance]
    attendance_summary: Optional[AttendanceSummary]
    modules: list[ResolvedItem]
    career_modules: list[ResolvedItem]
    seminars: list[ResolvedItem]
    in_progress: list[str]
    recognitions: int
    balance: StudentBalance
    approved: list[str] = field(default_factory=list)


class StudentDashboardService:
    """Use case: everything the student panel shows, computed from fetched documents.

    Each call re-reads the repositories and recomputes from scratch; nothing is
    cached between calls.
    """

    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        *,
        grades: GradeReportService,
        curriculum: CurriculumService,
        finance: FinanceService,
        strategy_factory: Optional[SummaryStrategyFactory] = None,
    ):
        self._students = students
        self._attendance = attendance
        self._grades = grades
        self._curriculum = curriculum
        self._finance = finance
        self._factory = strategy_factory or SummaryStrategyFactory()

    def get_student(self, student_id: str) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError(f"Estudiante no encontrado: {student_id}")
        return student

    def for_email(self, email: str) -> StudentDashboard:
        email = (email or "").strip()
        if not email:
            raise NotFoundError("Estudiante no encontrado: correo vacío")
        student = self._students.get_by_email(email)
        if not student:
            raise NotFoundError(f"Estudiante no encontrado: {email}")
        return self.build(student)

    def for_student(self, student_id: str) -> StudentDashboard:
        return self.build(self.get_student(student_id))

    def build(self, student: Student) -> StudentDashboard:
        records = list(self._attendance.list_for_student(student.student_id))
        career = self._curriculum.career_of(student)
        catalog = self._curriculum.catalog_of(career)

        modules = resolve_modules(student.assignments, catalog)
        career_modules = resolve_catalog_modules(career.modules if career else (), student.assignments)
        seminars = resolve_seminars(career.seminars if career else (), student.seminar_overrides)

        strategy = self._factory.for_assignments(student.assignments)
        summary = strategy.select(assignments=student.assignments, records=records, catalog=catalog)

        approved = [i.name for i in with_status(modules, ItemStatus.APPROVED)]
        approved += [i.name for i in with_status(seminars, ItemStatus.APPROVED)]

        logger.debug(
            "Dashboard for %s: %d modules, %d seminars, %d attendance records",
            student.student_id,
            len(modules),
            len(seminars),
            len(records),
        )
        return StudentDashboard(
            student=student,
            grades=self._grades.student_modules(student.student_id),
            attendance=roll_up_by_module(records),
            attendance_summary=summary,
            modules=modules,
            career_modules=career_modules,
            seminars=seminars,
            in_progress=in_progress_names(modules),
            recognitions=recognition_count(modules, seminars),
            balance=self._finance.student_balance(student),
            approved=approved,
        )


def to_ui(d: StudentDashboard) -> dict:
    """Plain JSON-ready dict of a dashboard (Decimal -> str, enums -> value)."""

    def _item(i: ResolvedItem) -> dict:
        return {
            "id": i.item_id,
            "name": i.name,
            "status": i.status.value,
            "semester": i.semester,
            "teacher": i.teacher,
            "hours": i.hours,
        }

    summary = d.attendance_summary
    return {
        "student": {
            "id": d.student.student_id,
            "name": d.student.full_name,
            "career": d.student.career,
            "period": d.student.period,
        },
        "grades": [module_grades_to_ui(g) for g in d.grades],
        "attendance": {
            name: {"total": m.total, "attended": m.attended, "percentage": m.percentage, "dates": dict(m.dates)}
            for name, m in d.attendance.items()
        },
        "attendance_summary": (
            {"module": summary.module_name, "percentage": summary.percentage} if summary else None
        ),
        "modules": [_item(i) for i in d.modules],
        "career_modules": [_item(i) for i in d.career_modules],
        "seminars": [_item(i) for i in d.seminars],
        "in_progress": d.in_progress,
        "recognitions": d.recognitions,
        "approved": d.approved,
        "balance": {
            "semester_fee": str(d.balance.semester_fee),
            "discount": str(d.balance.discount),
            "fee_with_discount": str(d.balance.fee_with_discount),
            "paid": str(d.balance.paid),
            "pending": str(d.balance.pending),
        },
    }


def module_grades_to_ui(g: ModuleGrades) -> dict:
    return {
        "module": g.module_name,
        "final_score": str(g.final_score),
        "complete": g.is_complete,
        "missing_groups": [grp.value for grp in g.missing_groups],
        "groups": {
            grp.value: [
                {
                    "activity": e.activity_name,
                    "grade": str(e.grade),
                    "date": e.date.strftime("%Y-%m-%d") if e.date else None,
                    "teacher": e.teacher_name,
                }
                for e in entries
            ]
            for grp, entries in g.groups.items()
        },
    }
