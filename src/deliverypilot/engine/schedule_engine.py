"""
DeliveryPilot Schedule Engine

Computes when an order placed "now" ships and when it arrives.

Evaluation steps:
1. Resolve local now, effective parameters and the holiday lookup
2. Shipping date: today if before cutoff and today is a dispatch day,
   otherwise the next dispatch day
3. Lead time: advance the shipping date by N dispatch days
4. Delivery window: advance from the shipping date by the rule's min and
   max courier days, independently
5. Express date: one courier day after the shipping date

Dispatch days exclude closed weekdays and holidays. Courier days exclude
courier no-delivery weekdays and holidays. The two are never mixed.

The engine never raises for configuration content: every step has a
fallback, and a day search that cannot be satisfied ends at the walker's
bound with ``ComputedSchedule.degraded`` set.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..logging_config import get_logger
from ..models import (
    DEFAULT_ETA_DAYS_MAX,
    DEFAULT_ETA_DAYS_MIN,
    ComputedSchedule,
    EtaStage,
    EtaStageKind,
    GlobalSettings,
    Rule,
    Weekday,
)
from .clock import (
    HolidayLookup,
    exclusion_test,
    is_before_cutoff,
    resolve_cutoff,
    resolve_zone,
    time_until,
    to_local,
    utc_instant,
)
from .overrides import resolve_parameters
from .walker import MAX_ATTEMPTS, walk

logger = get_logger("engine.schedule")

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
# Monday-based, matching date.weekday()
WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

RANGE_SEPARATOR = "–"

DEFAULT_ETA_LABELS = {
    EtaStageKind.ORDER: "Ordered",
    EtaStageKind.SHIPPING: "Shipped",
    EtaStageKind.DELIVERY: "Delivered",
}


# =============================================================================
# Formatting
# =============================================================================

def format_short_date(d: date) -> str:
    """Month and day, e.g. Feb 6 (locale-independent)."""
    return f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.day}"


def format_express_date(d: date) -> str:
    """Weekday, month and day, e.g. Thu, Feb 6."""
    return f"{WEEKDAY_ABBREVIATIONS[d.weekday()]}, {format_short_date(d)}"


def format_delivery_window(earliest: date, latest: date) -> str:
    """
    Render an arrival window.

    - Same date: "Feb 12"
    - Same month: "Feb 12–14"
    - Otherwise: "Jan 30–Feb 3"
    """
    if earliest == latest:
        return format_short_date(earliest)
    if (earliest.year, earliest.month) == (latest.year, latest.month):
        return f"{format_short_date(earliest)}{RANGE_SEPARATOR}{latest.day}"
    return f"{format_short_date(earliest)}{RANGE_SEPARATOR}{format_short_date(latest)}"


# =============================================================================
# Schedule Engine
# =============================================================================

@dataclass
class ScheduleEngine:
    """
    Stateless schedule calculator.

    Usage:
        engine = ScheduleEngine()
        schedule = engine.compute(settings, rule, now=datetime.now(timezone.utc))
        print(format_delivery_window(schedule.delivery_date_min,
                                     schedule.delivery_date_max))
    """

    # Calendar days a single day search may examine
    max_attempts: int = MAX_ATTEMPTS

    def compute(
        self,
        settings: GlobalSettings,
        rule: Optional[Rule] = None,
        now: Optional[datetime] = None,
        timezone_name: Optional[str] = None,
    ) -> ComputedSchedule:
        """
        Compute the schedule for an order placed at ``now``.

        Args:
            settings: Shop-wide settings
            rule: Matched rule (overrides and delivery window); None uses
                shop settings and the default 3 to 5 day window
            now: Evaluation instant; defaults to the real current time
            timezone_name: Overrides ``settings.preview_timezone``

        Returns:
            A fresh ComputedSchedule
        """
        rule_id = rule.id if rule is not None else None
        instant = utc_instant(now)
        zone = resolve_zone(timezone_name or settings.preview_timezone)
        current = to_local(instant, zone)
        today = current.date()

        params = resolve_parameters(settings, rule)
        holidays = HolidayLookup(
            country_code=settings.bank_holiday_country,
            custom_dates=settings.custom_holiday_dates,
        )
        is_dispatch_excluded = exclusion_test(params.closed_days, holidays)
        is_delivery_excluded = exclusion_test(params.courier_no_delivery_days, holidays)

        degraded = False

        # Shipping date
        cutoff = resolve_cutoff(
            Weekday.of(today),
            params.cutoff_time,
            params.cutoff_time_sat,
            params.cutoff_time_sun,
            fallback=params.fallback_cutoff_time,
        )
        cutoff_at: Optional[datetime] = None
        cutoff_remaining = None
        if is_before_cutoff(current, cutoff) and not is_dispatch_excluded(today):
            shipping_date = today
            cutoff_at = datetime.combine(today, cutoff)
            cutoff_remaining = time_until(instant, cutoff_at, zone)
        else:
            result = walk(today, is_dispatch_excluded, 1, self.max_attempts)
            shipping_date = result.date
            degraded |= result.exhausted

        # Lead time
        if params.lead_time > 0:
            result = walk(shipping_date, is_dispatch_excluded, params.lead_time, self.max_attempts)
            shipping_date = result.date
            degraded |= result.exhausted

        # Delivery window
        eta_min, eta_max = self._delivery_window_days(rule)
        earliest = walk(shipping_date, is_delivery_excluded, eta_min, self.max_attempts)
        latest = walk(shipping_date, is_delivery_excluded, eta_max, self.max_attempts)
        express = walk(shipping_date, is_delivery_excluded, 1, self.max_attempts)
        degraded |= earliest.exhausted or latest.exhausted or express.exhausted

        logger.debug(
            "Computed schedule: ships %s, arrives %s..%s",
            shipping_date.isoformat(),
            earliest.date.isoformat(),
            latest.date.isoformat(),
            extra={"rule_id": rule_id, "country": settings.bank_holiday_country},
        )

        return ComputedSchedule(
            shipping_date=shipping_date,
            delivery_date_min=earliest.date,
            delivery_date_max=latest.date,
            express_date=express.date,
            order_date=today,
            local_now=current,
            cutoff_at=cutoff_at,
            cutoff_remaining=cutoff_remaining,
            degraded=degraded,
        )

    def _delivery_window_days(self, rule: Optional[Rule]) -> tuple[int, int]:
        if rule is None:
            return DEFAULT_ETA_DAYS_MIN, DEFAULT_ETA_DAYS_MAX

        eta_min = rule.settings.eta_delivery_days_min
        eta_max = rule.settings.eta_delivery_days_max
        if eta_min > eta_max:
            logger.warning(
                "Delivery window min %s exceeds max %s; swapping",
                eta_min,
                eta_max,
                extra={"rule_id": rule.id},
            )
            eta_min, eta_max = eta_max, eta_min
        return eta_min, eta_max


def compute_schedule(
    settings: GlobalSettings,
    rule: Optional[Rule] = None,
    now: Optional[datetime] = None,
) -> ComputedSchedule:
    """Convenience wrapper around ``ScheduleEngine().compute``."""
    return ScheduleEngine().compute(settings, rule, now=now)


# =============================================================================
# ETA Timeline
# =============================================================================

def build_eta_timeline(schedule: ComputedSchedule, rule: Optional[Rule] = None) -> list[EtaStage]:
    """
    Ordered / Shipped / Delivered stages for the product-page timeline.

    Labels come from the rule when set, otherwise the defaults.
    """
    labels = dict(DEFAULT_ETA_LABELS)
    if rule is not None:
        custom = {
            EtaStageKind.ORDER: rule.settings.eta_label_order,
            EtaStageKind.SHIPPING: rule.settings.eta_label_shipping,
            EtaStageKind.DELIVERY: rule.settings.eta_label_delivery,
        }
        labels.update({kind: label for kind, label in custom.items() if label})

    return [
        EtaStage(
            kind=EtaStageKind.ORDER,
            label=labels[EtaStageKind.ORDER],
            date_text=format_short_date(schedule.order_date),
        ),
        EtaStage(
            kind=EtaStageKind.SHIPPING,
            label=labels[EtaStageKind.SHIPPING],
            date_text=format_short_date(schedule.shipping_date),
        ),
        EtaStage(
            kind=EtaStageKind.DELIVERY,
            label=labels[EtaStageKind.DELIVERY],
            date_text=format_delivery_window(schedule.delivery_date_min, schedule.delivery_date_max),
        ),
    ]
