from __future__ import annotations

import io
import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

import pandas as pd

from ..core.constants import SCORE_QUANTUM, STAT_QUANTUM
from ..core.exceptions import NotFoundError
from .calculator.base import GradeCalculator
from .calculator.weighted_calculator import WeightedGradeCalculator, group_entries, mean, missing_groups
from .model import GradeEntry, GradeStats, ModuleGradeReport, ModuleGrades, StudentGradeRow
from .repository import GradeRepository

logger = logging.getLogger(__name__)


def grade_stats(entries: Sequence[GradeEntry]) -> GradeStats:
    """Plain (unweighted) average with max/min, as shown on the grade report."""
    if not entries:
        return GradeStats(average=Decimal("0.00"), max_grade=Decimal("0.0"), min_grade=Decimal("0.0"), total=0)

    grades = [e.grade for e in entries]
    return GradeStats(
        average=mean(grades).quantize(SCORE_QUANTUM, rounding=ROUND_HALF_UP),
        max_grade=max(grades).quantize(STAT_QUANTUM, rounding=ROUND_HALF_UP),
        min_grade=min(grades).quantize(STAT_QUANTUM, rounding=ROUND_HALF_UP),
        total=len(grades),
    )


def group_by_module(entries: Iterable[GradeEntry]) -> dict[str, list[GradeEntry]]:
    """Group by module name, in order of first appearance."""
    out: dict[str, list[GradeEntry]] = {}
    for e in entries:
        out.setdefault(e.module_name, []).append(e)
    return out


def build_module_grades(module_name: str, entries: Sequence[GradeEntry], calculator: GradeCalculator) -> ModuleGrades:
    return ModuleGrades(
        module_name=module_name,
        final_score=calculator.final_score(entries),
        groups=group_entries(entries),
        missing_groups=missing_groups(entries),
    )


class GradeReportService:
    """Use cases: per-student module scores and the per-module grade report."""

    def __init__(self, grades: GradeRepository, *, calculator: Optional[GradeCalculator] = None):
        self._grades = grades
        self._calculator = calculator or WeightedGradeCalculator()

    @property
    def calculator(self) -> GradeCalculator:
        return self._calculator

    def student_modules(self, student_id: str) -> list[ModuleGrades]:
        entries = self._grades.list_for_student(student_id)
        return [
            build_module_grades(name, items, self._calculator)
            for name, items in group_by_module(entries).items()
        ]

    def module_report(self, module_name: str) -> ModuleGradeReport:
        entries = list(self._grades.list_for_module(module_name))
        if not entries:
            raise NotFoundError(f"No hay notas registradas para el módulo: {module_name}")

        per_student: dict[str, list[GradeEntry]] = {}
        for e in entries:
            per_student.setdefault(e.student_id, []).append(e)

        rows = []
        for student_id, items in per_student.items():
            name = next((e.student_name for e in items if e.student_name), "")
            rows.append(
                StudentGradeRow(
                    student_id=student_id,
                    student_name=name,
                    stats=grade_stats(items),
                    final_score=self._calculator.final_score(items),
                    entries=tuple(items),
                )
            )

        logger.debug("Grade report for %s: %d entries, %d students", module_name, len(entries), len(rows))
        return ModuleGradeReport(
            module_name=module_name,
            total_students=len(rows),
            stats=grade_stats(entries),
            students=tuple(rows),
        )

    def export_module_report(self, module_name: str) -> bytes:
        """Excel workbook with one row per graded activity plus the student's final score."""
        report = self.module_report(module_name)

        records = []
        for row in report.students:
            for e in row.entries:
                records.append(
                    {
                        "Estudiante": row.student_name or row.student_id,
                        "Actividad": e.activity_name,
                        "Grupo": e.group_label,
                        "Nota": float(e.grade),
                        "Fecha": e.date.strftime("%Y-%m-%d") if e.date else "",
                        "Profesor": e.teacher_name or "",
                        "Promedio final": float(row.final_score),
                    }
                )

        df = pd.DataFrame(
            records,
            columns=["Estudiante", "Actividad", "Grupo", "Nota", "Fecha", "Profesor", "Promedio final"],
        )
        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Notas")
        return out.getvalue()
