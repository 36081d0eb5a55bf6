from __future__ import annotations

import json

from academic_records.grades.snapshot_grade_repository import SnapshotGradeRepository
from academic_records.store.snapshot import SnapshotConfig, SnapshotStore


def test_collections_exported_as_mapping_get_ids(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(
        json.dumps(
            {
                "grades": {
                    "n1": {"studentId": "s1", "moduleName": "Redes", "groupId": "EVALUACION_FINAL", "grade": 5},
                    "n2": {"studentId": "s1", "moduleName": "Redes", "grade": "x"},
                }
            }
        ),
        encoding="utf-8",
    )

    store = SnapshotStore.from_file(path)
    grades = SnapshotGradeRepository(store).list_for_student("s1")

    assert [g.entry_id for g in grades] == ["n1"]


def test_missing_file_gives_empty_collections(tmp_path):
    store = SnapshotStore.from_file(tmp_path / "nope.json")

    assert store.documents("students") == []


def test_shared_instance_reloads_for_another_path(tmp_path, monkeypatch):
    monkeypatch.setattr(SnapshotStore, "_instance", None)
    first = tmp_path / "a.json"
    second = tmp_path / "b.json"
    first.write_text(json.dumps({"students": [{"id": "s1"}]}), encoding="utf-8")
    second.write_text(json.dumps({"students": [{"id": "s2"}]}), encoding="utf-8")

    a = SnapshotStore.get_instance(SnapshotConfig(path=first))
    assert SnapshotStore.get_instance(SnapshotConfig(path=first)) is a

    b = SnapshotStore.get_instance(SnapshotConfig(path=second))
    assert [d["id"] for d in b.documents("students")] == ["s2"]
