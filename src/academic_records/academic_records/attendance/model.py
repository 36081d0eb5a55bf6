from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..common.validators import first_present, optional_str, require_non_empty


@dataclass(frozen=True)
class AttendanceRecord:
    """Entidad de dominio: una sesión de registro de asistencia (fecha -> asistió)."""

    student_id: str
    module_name: str
    module_id: Optional[str] = None
    period: Optional[str] = None
    semester: Optional[str] = None
    attendance: Mapping[str, bool] = field(default_factory=dict)
    record_id: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "AttendanceRecord":
        """Validation boundary for documents of the ``attendance`` collection.

        Only a literal ``true`` counts as attended; a missing map is empty.
        """
        raw = doc.get("attendance") or {}
        if not isinstance(raw, Mapping):
            raw = {}
        semester = first_present(doc, "semester", "semestre")
        return cls(
            record_id=optional_str(doc.get("id")),
            student_id=require_non_empty(doc.get("studentId"), "El estudiante"),
            module_name=require_non_empty(first_present(doc, "moduleName", "modulo"), "El módulo"),
            module_id=optional_str(doc.get("moduleId")),
            period=optional_str(first_present(doc, "period", "periodo")),
            semester=optional_str(semester),
            attendance={str(k): v is True for k, v in raw.items()},
        )


@dataclass(frozen=True)
class ModuleAttendance:
    """Read-model: merged attendance of one student in one module."""

    module_name: str
    total: int
    attended: int
    percentage: int = 0
    dates: Mapping[str, bool] = field(default_factory=dict)
