"""
DeliveryPilot Enumerations

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from datetime import date
from enum import Enum


# =============================================================================
# Weekdays
# =============================================================================

class Weekday(str, Enum):
    """Weekday names as stored in closed-day and courier-day settings."""
    SUN = "sun"
    MON = "mon"
    TUE = "tue"
    WED = "wed"
    THU = "thu"
    FRI = "fri"
    SAT = "sat"

    @classmethod
    def of(cls, d: date) -> "Weekday":
        """Weekday of a calendar date."""
        return _BY_PYTHON_WEEKDAY[d.weekday()]

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SAT, Weekday.SUN)


# date.weekday() is Monday-based
_BY_PYTHON_WEEKDAY = (
    Weekday.MON,
    Weekday.TUE,
    Weekday.WED,
    Weekday.THU,
    Weekday.FRI,
    Weekday.SAT,
    Weekday.SUN,
)

WEEKDAY_NAMES = frozenset(w.value for w in Weekday)


# =============================================================================
# Free Delivery
# =============================================================================

class FreeDeliveryState(str, Enum):
    """Which free-delivery message applies to the current cart."""
    EXCLUDED = "excluded"    # Cart holds a product excluded from the offer
    EMPTY = "empty"          # Nothing in the cart yet
    UNLOCKED = "unlocked"    # Threshold reached
    PROGRESS = "progress"    # Below threshold


# =============================================================================
# ETA Timeline
# =============================================================================

class EtaStageKind(str, Enum):
    """Stages of the product-page ETA timeline."""
    ORDER = "order"
    SHIPPING = "shipping"
    DELIVERY = "delivery"
