from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.enums import ItemStatus
from ..core.exceptions import NotFoundError
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import Career, CatalogModule
from .repository import CareerRepository
from .resolver import build_catalog, collective_status, find_override

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogItemOverview:
    """Read-model: a catalog item with its status across the students assigned to it."""

    item_id: str
    name: str
    kind: str
    status: ItemStatus
    students: int


class CurriculumService:
    """Use cases around a career's catalog (teacher/coordinator view)."""

    def __init__(self, careers: CareerRepository, students: StudentRepository):
        self._careers = careers
        self._students = students

    def find_career(self, name: str) -> Optional[Career]:
        return self._careers.get_by_name(name)

    def get_career(self, name: str) -> Career:
        career = self.find_career(name)
        if not career:
            raise NotFoundError(f"Carrera no encontrada: {name}")
        return career

    def career_of(self, student: Student) -> Optional[Career]:
        if not student.career:
            return None
        career = self.find_career(student.career)
        if not career:
            logger.warning("Career %r not found, using general modules only", student.career)
        return career

    def catalog_for(self, career_name: str | None) -> dict[str, CatalogModule]:
        career = self.find_career(career_name) if career_name else None
        if career_name and not career:
            logger.warning("Career %r not found, using general modules only", career_name)
        return self.catalog_of(career)

    def catalog_of(self, career: Optional[Career]) -> dict[str, CatalogModule]:
        """Career modules plus the general ones, for an already fetched career."""
        return build_catalog(career.modules if career else (), self._careers.list_general_modules())

    def career_overview(self, career_name: str) -> list[CatalogItemOverview]:
        career = self.get_career(career_name)
        students: Sequence[Student] = [s for s in self._students.list_all() if s.career == career.name]

        out = []
        for module in career.modules:
            statuses = [a.status for s in students for a in s.assignments if a.module_id == module.module_id]
            out.append(
                CatalogItemOverview(
                    item_id=module.module_id,
                    name=module.name,
                    kind="module",
                    status=collective_status(statuses),
                    students=len(statuses),
                )
            )

        for seminar in career.seminars:
            statuses = []
            for s in students:
                override = find_override(seminar, s.seminar_overrides)
                if override is not None:
                    statuses.append(override.status or seminar.status or ItemStatus.PENDING)
            out.append(
                CatalogItemOverview(
                    item_id=seminar.seminar_id,
                    name=seminar.name,
                    kind="seminar",
                    status=collective_status(statuses),
                    students=len(statuses),
                )
            )
        return out
