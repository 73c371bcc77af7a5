"""
DeliveryPilot Business Day Clock

Answers the two questions the schedule engine asks about "today":

- Is it still before today's cutoff?
- Is a given date a non-operating day?

"Local now" is the wall-clock time in the shop's configured IANA timezone,
so that the day boundary follows the merchant rather than the server. When
the timezone cannot be resolved the evaluator's own local time is used.

All datetimes returned here are naive shop-local wall-clock values.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Iterable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..calendars import get_holidays_for_year
from ..logging_config import get_logger
from ..models import DEFAULT_CUTOFF_TIME, Weekday

logger = get_logger("engine.clock")

ExclusionTest = Callable[[date], bool]

_TIME_PATTERN = re.compile(r"^\s*(\d{1,2})\s*:\s*(\d{1,2})")


# =============================================================================
# Local Now
# =============================================================================

def utc_instant(instant: Optional[datetime] = None) -> datetime:
    """Aware evaluation instant; naive values are taken as UTC, None is now."""
    if instant is None:
        return datetime.now(timezone.utc)
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant


def resolve_zone(timezone_name: Optional[str]) -> Optional[ZoneInfo]:
    """
    Look up an IANA zone, or None when it cannot be resolved.

    Region prefixes such as "Europe" name a tzdata directory rather than a
    zone and fail with an OSError, as do over-long names.
    """
    if not timezone_name:
        return None
    try:
        return ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        logger.warning(
            "Unknown timezone %r, using server local time: %s",
            timezone_name,
            exc,
            extra={"timezone": timezone_name},
        )
        return None


def to_local(instant: datetime, zone: Optional[ZoneInfo] = None) -> datetime:
    """Naive wall-clock time of an aware instant in ``zone`` (server local when None)."""
    try:
        return instant.astimezone(zone).replace(tzinfo=None)
    except OverflowError:
        logger.warning("Instant %s is out of range for local time; keeping its own offset", instant.isoformat())
        return instant.replace(tzinfo=None)


def local_now(instant: Optional[datetime] = None, timezone_name: Optional[str] = None) -> datetime:
    """
    Reinterpret an instant as shop-local wall-clock time.

    Args:
        instant: The evaluation instant; naive values are taken as UTC.
            Defaults to the real current time.
        timezone_name: IANA zone, e.g. "Europe/London"

    Returns:
        Naive datetime carrying the local year/month/day/hour/minute/second
    """
    return to_local(utc_instant(instant), resolve_zone(timezone_name))


def time_until(instant: datetime, wall_clock: datetime, zone: Optional[ZoneInfo] = None) -> timedelta:
    """
    Elapsed time from an aware instant to a naive wall-clock time in ``zone``.

    The difference is taken between real instants, so a DST change between
    the two is accounted for.
    """
    if zone is not None:
        return wall_clock.replace(tzinfo=zone) - instant
    try:
        return wall_clock.astimezone() - instant
    except OverflowError:
        return wall_clock - to_local(instant)


# =============================================================================
# Cutoff
# =============================================================================

def _parse_hh_mm(value: Optional[str]) -> Optional[time]:
    if not isinstance(value, str):
        return None
    match = _TIME_PATTERN.match(value)
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)


def parse_time_of_day(value: Optional[str], fallback: Optional[str] = None) -> time:
    """
    Parse an HH:MM cutoff.

    Malformed or blank values fall back to ``fallback`` (the shop's global
    cutoff) and then to 14:00. Never raises.
    """
    parsed = _parse_hh_mm(value)
    if parsed is not None:
        return parsed

    if isinstance(value, str) and value.strip():
        logger.debug("Malformed cutoff %r, falling back to %r", value, fallback)

    parsed = _parse_hh_mm(fallback)
    if parsed is not None:
        return parsed
    return _parse_hh_mm(DEFAULT_CUTOFF_TIME)


def resolve_cutoff(
    weekday: Weekday,
    cutoff_time: Optional[str],
    cutoff_time_sat: Optional[str] = None,
    cutoff_time_sun: Optional[str] = None,
    fallback: Optional[str] = None,
) -> time:
    """
    Cutoff for a given weekday.

    The weekday cutoff applies unless the day is Saturday or Sunday and the
    matching weekend cutoff is non-blank.

    Args:
        weekday: Day being evaluated
        cutoff_time: Effective weekday cutoff
        cutoff_time_sat: Effective Saturday cutoff, if any
        cutoff_time_sun: Effective Sunday cutoff, if any
        fallback: Cutoff used when the chosen value is malformed
    """
    chosen = cutoff_time
    if weekday == Weekday.SAT and cutoff_time_sat and cutoff_time_sat.strip():
        chosen = cutoff_time_sat
    elif weekday == Weekday.SUN and cutoff_time_sun and cutoff_time_sun.strip():
        chosen = cutoff_time_sun
    return parse_time_of_day(chosen, fallback=fallback)


def is_before_cutoff(now: datetime, cutoff: time) -> bool:
    """Strictly earlier than the cutoff on the same calendar day."""
    return now < datetime.combine(now.date(), cutoff)


def format_remaining(delta: timedelta) -> str:
    """
    Countdown snapshot text.

    "2h 34m" with hours, "34m" under an hour, "" once the target has passed.
    """
    total_seconds = int(delta.total_seconds())
    if total_seconds <= 0:
        return ""
    hours, remainder = divmod(total_seconds, 3600)
    minutes = remainder // 60
    if hours:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


# =============================================================================
# Non-operating Days
# =============================================================================

@dataclass
class HolidayLookup:
    """
    Union of merchant custom holidays and a country's public holidays.

    Country lists are generated once per year per lookup instance; an
    instance lives for a single evaluation.
    """
    country_code: Optional[str] = None
    custom_dates: frozenset[str] = frozenset()
    _by_year: dict[int, frozenset[str]] = field(default_factory=dict, repr=False)

    def _country_holidays(self, year: int) -> frozenset[str]:
        if year not in self._by_year:
            self._by_year[year] = frozenset(get_holidays_for_year(self.country_code, year))
        return self._by_year[year]

    def is_holiday(self, d: date) -> bool:
        key = d.isoformat()
        if key in self.custom_dates:
            return True
        if self.country_code:
            return key in self._country_holidays(d.year)
        return False

    def __contains__(self, d: date) -> bool:
        return self.is_holiday(d)


def is_non_operating(d: date, excluded_weekdays: Iterable[str], holidays: HolidayLookup) -> bool:
    """True when the date's weekday is excluded or the date is a holiday."""
    return Weekday.of(d).value in excluded_weekdays or holidays.is_holiday(d)


def exclusion_test(excluded_weekdays: frozenset[str], holidays: HolidayLookup) -> ExclusionTest:
    """Bind a weekday set and holiday lookup into a walker predicate."""

    def test(d: date) -> bool:
        return is_non_operating(d, excluded_weekdays, holidays)

    return test
