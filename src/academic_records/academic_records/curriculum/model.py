from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import first_present, optional_str, require_non_empty
from ..core.enums import ItemStatus
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _semester(value: Any) -> Optional[str]:
    # Stored as number or string depending on the screen that wrote it.
    return optional_str(value)


@dataclass(frozen=True)
class CatalogModule:
    """Domain entity: a module of a career's curriculum (or a shared general module)."""

    module_id: str
    name: str
    semester: Optional[str] = None
    teacher: Optional[str] = None
    hours: Optional[str] = None
    is_general: bool = False

    @classmethod
    def from_document(cls, doc: Mapping[str, Any], *, is_general: bool = False) -> "CatalogModule":
        return cls(
            module_id=require_non_empty(doc.get("id"), "El módulo"),
            name=require_non_empty(first_present(doc, "nombre", "name"), "El nombre del módulo"),
            semester=_semester(first_present(doc, "semestre", "semester")),
            teacher=optional_str(first_present(doc, "profesor", "teacher")),
            hours=optional_str(first_present(doc, "horas", "hours")),
            is_general=is_general,
        )


@dataclass(frozen=True)
class SeminarRecord:
    """Domain entity: a career-wide seminar with its default status."""

    seminar_id: str
    name: str
    teacher: Optional[str] = None
    hours: Optional[str] = None
    semester: Optional[str] = None
    status: Optional[ItemStatus] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any], *, position: int) -> "SeminarRecord":
        """``position`` is 1-based; seminars stored without id get ``seminario<position>``."""
        raw_status = first_present(doc, "estado", "status")
        return cls(
            seminar_id=optional_str(doc.get("id")) or f"seminario{position}",
            name=optional_str(first_present(doc, "nombre", "name")) or f"Seminario {position}",
            teacher=optional_str(first_present(doc, "profesor", "teacher")),
            hours=optional_str(first_present(doc, "horas", "hours")),
            semester=_semester(first_present(doc, "semestre", "semester")),
            status=ItemStatus.parse(raw_status) if raw_status else None,
        )


@dataclass(frozen=True)
class SeminarOverride:
    """A student's personal entry for a seminar; any field may be missing."""

    seminar_id: Optional[str] = None
    name: Optional[str] = None
    teacher: Optional[str] = None
    hours: Optional[str] = None
    semester: Optional[str] = None
    status: Optional[ItemStatus] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "SeminarOverride":
        raw_status = first_present(doc, "estado", "status")
        return cls(
            seminar_id=optional_str(doc.get("id")),
            name=optional_str(first_present(doc, "nombre", "name")),
            teacher=optional_str(first_present(doc, "profesor", "teacher")),
            hours=optional_str(first_present(doc, "horas", "hours")),
            semester=_semester(first_present(doc, "semestre", "semester")),
            status=ItemStatus.parse(raw_status) if raw_status else None,
        )


@dataclass(frozen=True)
class ModuleAssignment:
    """A module assigned to a student with its current status."""

    module_id: str
    status: ItemStatus = ItemStatus.PENDING
    name: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "ModuleAssignment":
        return cls(
            module_id=require_non_empty(first_present(doc, "id", "moduleId"), "El módulo asignado"),
            status=ItemStatus.parse(first_present(doc, "estado", "status")),
            name=optional_str(first_present(doc, "nombre", "name")),
        )


def _valid_modules(doc: Mapping[str, Any]) -> list[CatalogModule]:
    out = []
    for raw in doc.get("modules") or []:
        try:
            out.append(CatalogModule.from_document(raw))
        except ValidationError as e:
            logger.warning("Skipping module of career %s: %s", doc.get("id"), e)
    return out


@dataclass(frozen=True)
class Career:
    career_id: str
    name: str
    modules: tuple[CatalogModule, ...] = ()
    seminars: tuple[SeminarRecord, ...] = ()

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Career":
        return cls(
            career_id=require_non_empty(doc.get("id"), "La carrera"),
            name=require_non_empty(first_present(doc, "nombre", "name"), "El nombre de la carrera"),
            modules=tuple(_valid_modules(doc)),
            seminars=tuple(
                SeminarRecord.from_document(s, position=i)
                for i, s in enumerate(doc.get("seminarios") or [], start=1)
            ),
        )


@dataclass(frozen=True)
class ResolvedItem:
    """Read-model: a module or seminar with its display name and effective status."""

    item_id: str
    name: str
    status: ItemStatus
    kind: str
    semester: Optional[str] = None
    teacher: Optional[str] = None
    hours: Optional[str] = None
