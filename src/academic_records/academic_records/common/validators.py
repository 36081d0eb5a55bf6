from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from ..core.constants import GRADE_MAX, GRADE_MIN
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} no es válido")
    return str(value).strip()


def optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def first_present(doc: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-empty value among ``keys`` (documents mix Spanish and English names)."""
    for key in keys:
        value = doc.get(key)
        if value is not None and value != "":
            return value
    return None


def to_decimal(value: Any, field_name: str) -> Decimal:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} no es un número válido")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} no es un número válido")
    if not result.is_finite():
        raise ValidationError(f"{field_name} no es un número válido")
    return result


def require_grade(value: Any) -> Decimal:
    grade = to_decimal(value, "La nota")
    if grade < GRADE_MIN or grade > GRADE_MAX:
        raise ValidationError(f"La nota debe estar entre {GRADE_MIN} y {GRADE_MAX}")
    return grade


def to_percentage(value: Any, field_name: str) -> Decimal:
    """Discount-like percentages: missing -> 0, must stay in [0, 100]."""
    if value is None or value == "":
        return Decimal("0")
    pct = to_decimal(value, field_name)
    if pct < 0 or pct > 100:
        raise ValidationError(f"{field_name} debe estar entre 0 y 100")
    return pct
