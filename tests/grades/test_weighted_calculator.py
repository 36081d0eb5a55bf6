from __future__ import annotations

from decimal import Decimal

import pytest

from academic_records.core.enums import GradeGroup
from academic_records.grades.calculator.weighted_calculator import WeightedGradeCalculator, group_entries, missing_groups
from academic_records.grades.model import GradeEntry


def _entry(group: str, grade: str, activity: str = "Actividad") -> GradeEntry:
    return GradeEntry(
        student_id="s1",
        module_id="m1",
        module_name="Programación I",
        group_label=group,
        activity_name=activity,
        grade=Decimal(grade),
    )


def test_weighted_average_example():
    entries = [
        _entry("ACTIVIDADES_1", "4.0"),
        _entry("ACTIVIDADES_1", "5.0"),
        _entry("ACTIVIDADES_2", "3.0"),
        _entry("EVALUACION_FINAL", "4.5"),
    ]

    assert WeightedGradeCalculator().final_score(entries) == Decimal("4.05")
    assert str(WeightedGradeCalculator().final_score(entries)) == "4.05"


def test_no_entries_scores_zero():
    score = WeightedGradeCalculator().final_score([])

    assert str(score) == "0.00"


def test_missing_group_pulls_average_down():
    entries = [_entry("ACTIVIDADES_1", "5.0"), _entry("ACTIVIDADES_2", "5.0")]

    assert WeightedGradeCalculator().final_score(entries) == Decimal("3.00")
    assert missing_groups(entries) == (GradeGroup.EVALUACION_FINAL,)


def test_other_groups_are_ignored_in_score_but_kept_for_display():
    entries = [_entry("EVALUACION_FINAL", "5.0"), _entry("Quiz extra", "1.0")]

    assert WeightedGradeCalculator().final_score(entries) == Decimal("2.00")
    buckets = group_entries(entries)
    assert [e.grade for e in buckets[GradeGroup.OTRO]] == [Decimal("1.0")]
    assert set(buckets) == set(GradeGroup)


def test_score_is_order_independent():
    entries = [
        _entry("ACTIVIDADES_1", "4.1"),
        _entry("ACTIVIDADES_1", "3.3"),
        _entry("ACTIVIDADES_1", "2.9"),
        _entry("ACTIVIDADES_2", "3.7"),
        _entry("EVALUACION_FINAL", "4.6"),
        _entry("EVALUACION_FINAL", "1.8"),
    ]
    calc = WeightedGradeCalculator()

    assert calc.final_score(entries) == calc.final_score(list(reversed(entries)))
    assert calc.final_score(entries) == calc.final_score(entries[3:] + entries[:3])


@pytest.mark.parametrize(
    "grades",
    [
        ["0", "0", "0"],
        ["5", "5", "5"],
        ["4.3", "2.7", "3.33"],
        ["1.15", "0.05", "4.99"],
    ],
)
def test_score_stays_in_range_with_two_decimals(grades):
    entries = [
        _entry("ACTIVIDADES_1", grades[0]),
        _entry("ACTIVIDADES_2", grades[1]),
        _entry("EVALUACION_FINAL", grades[2]),
    ]
    score = WeightedGradeCalculator().final_score(entries)

    assert Decimal("0") <= score <= Decimal("5")
    assert score.as_tuple().exponent == -2


def test_group_label_matches_group_id_or_name():
    entry = GradeEntry.from_document(
        {"studentId": "s1", "moduleName": "Redes", "groupId": "x", "groupName": "EVALUACION_FINAL", "grade": "4"}
    )

    assert entry.group == GradeGroup.EVALUACION_FINAL
    assert WeightedGradeCalculator().final_score([entry]) == Decimal("1.60")
