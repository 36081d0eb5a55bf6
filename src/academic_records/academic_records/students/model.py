from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.validators import first_present, optional_str, require_non_empty, to_percentage
from ..core.enums import Scope
from ..core.exceptions import ValidationError
from ..curriculum.model import ModuleAssignment, SeminarOverride

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Student:
    """Entidad de dominio: Estudiante.

    Note: plain data object; assignments are unique by module id.
    """

    student_id: str
    name: str
    last_name: str = ""
    email: Optional[str] = None
    career: Optional[str] = None
    period: Optional[str] = None
    scope: Scope = Scope.CAREER
    discount: Decimal = Decimal("0")
    assignments: tuple[ModuleAssignment, ...] = ()
    seminar_overrides: tuple[SeminarOverride, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.last_name}".strip()

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Student":
        assignments: list[ModuleAssignment] = []
        seen: set[str] = set()
        for raw in doc.get("modulosAsignados") or []:
            try:
                a = ModuleAssignment.from_document(raw)
            except ValidationError as e:
                logger.warning("Skipping module assignment of student %s: %s", doc.get("id"), e)
                continue
            if a.module_id in seen:
                continue
            seen.add(a.module_id)
            assignments.append(a)

        scope = optional_str(first_present(doc, "ambito", "scope"))
        return cls(
            student_id=require_non_empty(doc.get("id"), "El estudiante"),
            name=optional_str(doc.get("name")) or "",
            last_name=optional_str(doc.get("lastName")) or "",
            email=optional_str(doc.get("email")),
            career=optional_str(first_present(doc, "career", "carrera")),
            period=optional_str(first_present(doc, "period", "periodo")),
            scope=Scope.COURSE if scope == Scope.COURSE.value else Scope.CAREER,
            discount=to_percentage(first_present(doc, "descuento", "discount"), "El descuento"),
            assignments=tuple(assignments),
            seminar_overrides=tuple(SeminarOverride.from_document(s) for s in doc.get("seminarios") or []),
        )
