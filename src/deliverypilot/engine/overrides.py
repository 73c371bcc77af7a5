"""
DeliveryPilot Override Resolver

Merges shop-wide settings with a rule's overrides. Each category is resolved
on its own:

    effective = rule value  if rule.override_<category> and the value is present
                global value otherwise

"Present" means a non-blank string, a non-None number, or a non-None weekday
set (an empty set is present: "closed on no days").

Weekend cutoffs differ: under an active cutoff override a blank rule-local
Saturday/Sunday value means "no weekend cutoff", not "use the shop's".
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..models import GlobalSettings, Rule, RuleSettings

MAX_LEAD_TIME = 30


@dataclass(frozen=True)
class EffectiveParameters:
    """
    Dispatch parameters after override resolution.

    Attributes:
        cutoff_time: Weekday cutoff (HH:MM, may be malformed)
        cutoff_time_sat: Saturday cutoff, None when not set
        cutoff_time_sun: Sunday cutoff, None when not set
        fallback_cutoff_time: Shop cutoff, used when the effective one is
            malformed
        lead_time: Extra dispatch days
        closed_days: Weekdays excluded from dispatch
        courier_no_delivery_days: Weekdays excluded from delivery
    """
    cutoff_time: str
    cutoff_time_sat: Optional[str]
    cutoff_time_sun: Optional[str]
    fallback_cutoff_time: str
    lead_time: int
    closed_days: frozenset[str]
    courier_no_delivery_days: frozenset[str]


def _present(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def resolve_parameters(settings: GlobalSettings, rule: Optional[Rule] = None) -> EffectiveParameters:
    """
    Resolve the four override categories for a rule.

    Args:
        settings: Shop-wide settings
        rule: The matched rule; None means "no overrides"
    """
    local = rule.settings if rule is not None else RuleSettings()

    # Cutoff times
    if local.override_cutoff_times:
        cutoff = local.cutoff_time if _present(local.cutoff_time) else settings.cutoff_time
        cutoff_sat = local.cutoff_time_sat if _present(local.cutoff_time_sat) else None
        cutoff_sun = local.cutoff_time_sun if _present(local.cutoff_time_sun) else None
    else:
        cutoff = settings.cutoff_time
        cutoff_sat = settings.cutoff_time_sat
        cutoff_sun = settings.cutoff_time_sun

    # Lead time
    if local.override_lead_time and local.lead_time is not None:
        lead_time = local.lead_time
    else:
        lead_time = settings.lead_time
    lead_time = min(max(lead_time, 0), MAX_LEAD_TIME)

    # Closed days
    if local.override_closed_days and local.closed_days is not None:
        closed_days = local.closed_days
    else:
        closed_days = settings.closed_days

    # Courier days
    if local.override_courier_no_delivery_days and local.courier_no_delivery_days is not None:
        courier_days = local.courier_no_delivery_days
    else:
        courier_days = settings.courier_no_delivery_days

    return EffectiveParameters(
        cutoff_time=cutoff,
        cutoff_time_sat=cutoff_sat,
        cutoff_time_sun=cutoff_sun,
        fallback_cutoff_time=settings.cutoff_time,
        lead_time=lead_time,
        closed_days=frozenset(closed_days),
        courier_no_delivery_days=frozenset(courier_days),
    )
