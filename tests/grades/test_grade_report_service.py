from __future__ import annotations

from decimal import Decimal

import pytest

from academic_records.core.enums import GradeGroup
from academic_records.core.exceptions import NotFoundError
from academic_records.grades.model import GradeEntry
from academic_records.grades.service import GradeReportService, grade_stats


class FakeGradeRepo:
    def __init__(self, entries):
        self._entries = entries

    def list_for_student(self, student_id: str):
        return [e for e in self._entries if e.student_id == student_id]

    def list_for_module(self, module_name: str):
        return [e for e in self._entries if e.module_name == module_name]


def _entry(student_id: str, module: str, group: str, grade: str, name: str = "") -> GradeEntry:
    return GradeEntry(
        student_id=student_id,
        module_id=None,
        module_name=module,
        group_label=group,
        activity_name="Actividad",
        grade=Decimal(grade),
        student_name=name or None,
    )


ENTRIES = [
    _entry("s1", "Programación I", "ACTIVIDADES_1", "4.0", "Ana"),
    _entry("s1", "Programación I", "ACTIVIDADES_1", "5.0", "Ana"),
    _entry("s1", "Programación I", "ACTIVIDADES_2", "3.0", "Ana"),
    _entry("s1", "Programación I", "EVALUACION_FINAL", "4.5", "Ana"),
    _entry("s2", "Programación I", "EVALUACION_FINAL", "3.0", "Luis"),
    _entry("s1", "Redes", "EVALUACION_FINAL", "5.0", "Ana"),
]


def test_grade_stats_empty():
    stats = grade_stats([])

    assert stats.total == 0
    assert str(stats.average) == "0.00"
    assert str(stats.max_grade) == "0.0"


def test_module_report_stats():
    report = GradeReportService(FakeGradeRepo(ENTRIES)).module_report("Programación I")

    assert report.total_students == 2
    assert str(report.stats.average) == "3.90"
    assert str(report.stats.max_grade) == "5.0"
    assert str(report.stats.min_grade) == "3.0"
    assert report.stats.total == 5

    by_id = {row.student_id: row for row in report.students}
    assert by_id["s1"].final_score == Decimal("4.05")
    assert by_id["s2"].final_score == Decimal("1.20")
    assert by_id["s2"].student_name == "Luis"


def test_student_modules_grouped_by_name():
    modules = GradeReportService(FakeGradeRepo(ENTRIES)).student_modules("s1")

    assert [m.module_name for m in modules] == ["Programación I", "Redes"]
    assert modules[0].final_score == Decimal("4.05")
    assert modules[0].is_complete
    assert modules[1].final_score == Decimal("2.00")
    assert modules[1].missing_groups == (GradeGroup.ACTIVIDADES_1, GradeGroup.ACTIVIDADES_2)


def test_export_module_report_is_xlsx():
    content = GradeReportService(FakeGradeRepo(ENTRIES)).export_module_report("Programación I")

    assert content[:2] == b"PK"


def test_module_without_grades_raises():
    with pytest.raises(NotFoundError):
        GradeReportService(FakeGradeRepo(ENTRIES)).module_report("No Existe")
