from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from academic_records.core.enums import GradeGroup
from academic_records.core.exceptions import ValidationError
from academic_records.grades.model import GradeEntry


def test_from_document_maps_fields():
    entry = GradeEntry.from_document(
        {
            "id": "n1",
            "studentId": "s1",
            "moduleId": "m1",
            "moduleName": "Programación I",
            "groupId": "ACTIVIDADES_2",
            "activityName": "Taller",
            "grade": "3.5",
            "date": {"seconds": 1738368000},
            "teacherName": "María García",
        }
    )

    assert entry.entry_id == "n1"
    assert entry.grade == Decimal("3.5")
    assert entry.group == GradeGroup.ACTIVIDADES_2
    assert entry.date == date(2025, 2, 1)
    assert entry.teacher_name == "María García"


def test_missing_group_defaults_to_other():
    entry = GradeEntry.from_document({"studentId": "s1", "moduleName": "Redes", "grade": 2})

    assert entry.group_label == "Otro"
    assert entry.group == GradeGroup.OTRO
    assert entry.activity_name == "Actividad"


@pytest.mark.parametrize("grade", [None, "", "abc", 5.5, -1, True, "NaN"])
def test_invalid_grade_is_rejected(grade):
    with pytest.raises(ValidationError):
        GradeEntry.from_document({"studentId": "s1", "moduleName": "Redes", "grade": grade})


def test_missing_student_is_rejected():
    with pytest.raises(ValidationError):
        GradeEntry.from_document({"moduleName": "Redes", "grade": 3})
