from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class ItemStatus(str, Enum):
    """Estado de un módulo o seminario para un estudiante."""

    PENDING = "pendiente"
    IN_PROGRESS = "cursando"
    APPROVED = "aprobado"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ItemStatus":
        """Accept stored Spanish values and English names; unknown -> pending."""
        if value is None or value == "":
            return cls.PENDING
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        found = _STATUS_ALIASES.get(key)
        if found is None:
            logger.warning("Unknown item status %r, defaulting to %s", value, cls.PENDING.value)
            return cls.PENDING
        return found


_STATUS_ALIASES = {
    "pendiente": ItemStatus.PENDING,
    "pending": ItemStatus.PENDING,
    "cursando": ItemStatus.IN_PROGRESS,
    "in-progress": ItemStatus.IN_PROGRESS,
    "in_progress": ItemStatus.IN_PROGRESS,
    "aprobado": ItemStatus.APPROVED,
    "approved": ItemStatus.APPROVED,
}


class GradeGroup(str, Enum):
    """Grupo de actividad de una nota."""

    ACTIVIDADES_1 = "ACTIVIDADES_1"
    ACTIVIDADES_2 = "ACTIVIDADES_2"
    EVALUACION_FINAL = "EVALUACION_FINAL"
    OTRO = "Otro"

    @classmethod
    def weighted(cls) -> tuple["GradeGroup", ...]:
        return (cls.ACTIVIDADES_1, cls.ACTIVIDADES_2, cls.EVALUACION_FINAL)

    @classmethod
    def from_label(cls, label: Optional[str]) -> "GradeGroup":
        for group in cls.weighted():
            if label == group.value:
                return group
        return cls.OTRO


class Scope(str, Enum):
    """Ámbito: carrera o curso independiente."""

    CAREER = "carrera"
    COURSE = "curso"


class PaymentStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    CANCELLED = "cancelled"
