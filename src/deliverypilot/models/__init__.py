"""
DeliveryPilot Models

Domain models for the delivery-schedule engine:

    from deliverypilot.models import (
        # Enums
        Weekday, FreeDeliveryState, EtaStageKind,
        # Settings
        GlobalSettings, CustomHoliday,
        # Rules
        Rule, RuleMatch, RuleSettings,
        # Output
        ComputedSchedule, EtaStage,
    )
"""
from __future__ import annotations

# =============================================================================
# Enums
# =============================================================================
from .enums import (
    WEEKDAY_NAMES,
    EtaStageKind,
    FreeDeliveryState,
    Weekday,
)

# =============================================================================
# Settings
# =============================================================================
from .settings import (
    DEFAULT_COURIER_NO_DELIVERY_DAYS,
    DEFAULT_CUTOFF_TIME,
    CustomHoliday,
    GlobalSettings,
    parse_weekday_set,
)

# =============================================================================
# Rules
# =============================================================================
from .rule import (
    DEFAULT_ETA_DAYS_MAX,
    DEFAULT_ETA_DAYS_MIN,
    Rule,
    RuleMatch,
    RuleSettings,
)

# =============================================================================
# Schedule
# =============================================================================
from .schedule import (
    ComputedSchedule,
    EtaStage,
)

__all__ = [
    # Enums
    "Weekday",
    "WEEKDAY_NAMES",
    "FreeDeliveryState",
    "EtaStageKind",
    # Settings
    "GlobalSettings",
    "CustomHoliday",
    "DEFAULT_CUTOFF_TIME",
    "DEFAULT_COURIER_NO_DELIVERY_DAYS",
    "parse_weekday_set",
    # Rules
    "Rule",
    "RuleMatch",
    "RuleSettings",
    "DEFAULT_ETA_DAYS_MIN",
    "DEFAULT_ETA_DAYS_MAX",
    # Schedule
    "ComputedSchedule",
    "EtaStage",
]
