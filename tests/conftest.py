from __future__ import annotations

import copy

import pytest

SNAPSHOT = {
    "careers": [
        {
            "id": "c1",
            "nombre": "Técnico en Sistemas",
            "modules": [
                {"id": "m1", "nombre": "Programación I", "semestre": 1},
                {"id": "m2", "nombre": "Bases de Datos", "semestre": 1},
                {"id": "m3", "nombre": "Redes", "semestre": 2},
            ],
            "seminarios": [
                {"nombre": "Ética", "semestre": 1, "estado": "pendiente"},
                {"nombre": "Emprendimiento", "semestre": 2},
            ],
        }
    ],
    "general_modules": [{"id": "g1", "nombre": "Inglés Técnico"}],
    "students": [
        {
            "id": "s1",
            "name": "Ana",
            "lastName": "Pérez",
            "email": "ana@example.com",
            "career": "Técnico en Sistemas",
            "period": "2025-1",
            "descuento": 10,
            "modulosAsignados": [
                {"id": "m1", "estado": "aprobado"},
                {"id": "m2", "estado": "cursando"},
                {"id": "g1", "estado": "cursando"},
                {"id": "gone", "estado": "aprobado"},
            ],
            "seminarios": [{"id": "seminario1", "estado": "aprobado"}],
        },
        {
            "id": "s2",
            "name": "Luis",
            "lastName": "Gómez",
            "email": "luis@example.com",
            "career": "Técnico en Sistemas",
            "period": "2024-2",
            "modulosAsignados": [{"id": "m1", "estado": "cursando"}],
        },
    ],
    "grades": [
        {"id": "n1", "studentId": "s1", "studentName": "Ana Pérez", "moduleName": "Programación I", "groupId": "ACTIVIDADES_1", "activityName": "Taller 1", "grade": 4.0, "date": "2025-02-10"},
        {"id": "n2", "studentId": "s1", "studentName": "Ana Pérez", "moduleName": "Programación I", "groupId": "ACTIVIDADES_1", "activityName": "Taller 2", "grade": 5.0},
        {"id": "n3", "studentId": "s1", "studentName": "Ana Pérez", "moduleName": "Programación I", "groupId": "ACTIVIDADES_2", "activityName": "Quiz", "grade": 3.0},
        {"id": "n4", "studentId": "s1", "studentName": "Ana Pérez", "moduleName": "Programación I", "groupId": "EVALUACION_FINAL", "activityName": "Examen", "grade": 4.5},
        {"id": "n5", "studentId": "s2", "studentName": "Luis Gómez", "moduleName": "Programación I", "groupId": "EVALUACION_FINAL", "activityName": "Examen", "grade": 3.0},
        {"id": "bad", "studentId": "s2", "moduleName": "Programación I", "groupId": "ACTIVIDADES_1", "grade": 7},
    ],
    "attendance": [
        {"id": "a1", "studentId": "s1", "moduleName": "Bases de Datos", "attendance": {"2025-02-01": True, "2025-02-08": True}},
        {"id": "a2", "studentId": "s1", "moduleName": "Bases de Datos", "attendance": {"2025-02-15": True, "2025-02-22": False}},
        {"id": "a3", "studentId": "s1", "moduleName": "Inglés Técnico", "moduleId": "g1", "attendance": {"2025-03-01": True, "2025-03-08": False}},
        {"id": "a4", "studentId": "s2", "moduleName": "Programación I", "attendance": {"2025-03-01": True}},
    ],
    "payments": [
        {"id": "p1", "studentId": "s1", "category": "Pago de módulo", "status": "completed", "amount": 100000},
        {"id": "p2", "studentId": "s1", "category": "Pago de módulo", "status": "pending", "amount": 50000},
        {"id": "p3", "type": "income", "status": "completed", "amount": 300000},
        {"id": "p4", "type": "income", "status": "cancelled", "amount": 999},
    ],
}


@pytest.fixture
def snapshot_data():
    return copy.deepcopy(SNAPSHOT)


@pytest.fixture
def store(snapshot_data):
    from academic_records.store.snapshot import SnapshotStore

    return SnapshotStore(snapshot_data)


@pytest.fixture
def container(store):
    from academic_records.container import build_container

    return build_container(store=store)
