"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

GRADE_MIN = Decimal("0")
GRADE_MAX = Decimal("5")

# Weighted final score: 30% / 30% / 40%
GROUP_WEIGHTS = {
    "ACTIVIDADES_1": Decimal("0.3"),
    "ACTIVIDADES_2": Decimal("0.3"),
    "EVALUACION_FINAL": Decimal("0.4"),
}

SCORE_QUANTUM = Decimal("0.01")
STAT_QUANTUM = Decimal("0.1")

DEFAULT_PERIOD = "2025-1"
DEFAULT_SEMESTER_FEE = Decimal("200000")
MODULE_PAYMENT_CATEGORY = "Pago de módulo"
INCOME_PAYMENT_TYPE = "income"

FALLBACK_MODULE_NAME = "Módulo"
