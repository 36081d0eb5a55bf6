from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Iterable, Optional, Union


def coerce_date(value: Any) -> Optional[date]:
    """Best-effort conversion of stored date values.

    Documents carry dates as ISO strings, ``date``/``datetime`` objects or
    exported timestamps (``{"seconds": ...}``). Anything else -> None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, dict) and "seconds" in value:
        return datetime.fromtimestamp(int(value["seconds"]), tz=timezone.utc).date()
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None


def calculate_period(value: Union[date, str, None]) -> str:
    """Academic period for a date: ``YYYY-1`` (Jan-Jun) or ``YYYY-2`` (Jul-Dec).

    Returns an empty string when there is no usable date.
    """
    day = coerce_date(value)
    if day is None:
        return ""
    half = 1 if day.month <= 6 else 2
    return f"{day.year}-{half}"


def unique_periods(students: Iterable[Any]) -> list[str]:
    """Distinct non-empty periods of ``students``, most recent first."""
    periods = {s.period for s in students if getattr(s, "period", None)}
    return sorted(periods, reverse=True)
