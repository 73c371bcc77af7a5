"""
DeliveryPilot Engine

Core services for delivery-schedule computation.

Services:
- Clock: local now, cutoff resolution, non-operating days
- Walker: bounded business-day advancement
- Overrides: per-category merge of shop settings and rule overrides
- ScheduleEngine: shipping date, delivery window, express date
- RuleMatcher: rule selection by product handle and tags

Usage:
    from deliverypilot.engine import ScheduleEngine, format_delivery_window

    schedule = ScheduleEngine().compute(settings, rule)
    format_delivery_window(schedule.delivery_date_min, schedule.delivery_date_max)
"""
from __future__ import annotations

from .clock import (
    ExclusionTest,
    HolidayLookup,
    exclusion_test,
    format_remaining,
    is_before_cutoff,
    is_non_operating,
    local_now,
    parse_time_of_day,
    resolve_cutoff,
    resolve_zone,
    time_until,
    to_local,
    utc_instant,
)
from .overrides import (
    EffectiveParameters,
    resolve_parameters,
)
from .rule_matcher import (
    RuleMatcher,
    find_matching_rule,
    rule_matches,
)
from .schedule_engine import (
    ScheduleEngine,
    build_eta_timeline,
    compute_schedule,
    format_delivery_window,
    format_express_date,
    format_short_date,
)
from .walker import (
    MAX_ATTEMPTS,
    WalkResult,
    advance,
    walk,
)

__all__ = [
    # Clock
    "ExclusionTest",
    "HolidayLookup",
    "exclusion_test",
    "format_remaining",
    "is_before_cutoff",
    "is_non_operating",
    "local_now",
    "parse_time_of_day",
    "resolve_cutoff",
    "resolve_zone",
    "time_until",
    "to_local",
    "utc_instant",
    # Walker
    "MAX_ATTEMPTS",
    "WalkResult",
    "advance",
    "walk",
    # Overrides
    "EffectiveParameters",
    "resolve_parameters",
    # Schedule
    "ScheduleEngine",
    "build_eta_timeline",
    "compute_schedule",
    "format_delivery_window",
    "format_express_date",
    "format_short_date",
    # Rules
    "RuleMatcher",
    "find_matching_rule",
    "rule_matches",
]
