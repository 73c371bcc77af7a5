"""
DeliveryPilot Holiday Calendar Base

Calendar arithmetic shared by every country generator:

- Gregorian and Orthodox Easter
- Nth weekday of a month (including "last")
- Fixed-range Saturday finders (Midsummer, All Saints)
- The CountryHolidayDefinition record used by the registry

Weekday numbers in this module are Sunday-based (0=Sunday, 6=Saturday) and
months passed to ``nth_weekday_of_month`` are zero-based (0=January), which
is how merchants' holiday rules are written down ("month 4, weekday 1, n=-1"
is the last Monday of May).
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable

from ..logging_config import get_logger

logger = get_logger("calendars")

# Sunday-based weekday numbers
SUNDAY = 0
MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6

# Julian to Gregorian offset, correct for 1900-03-01 .. 2100-02-28
JULIAN_GREGORIAN_OFFSET_DAYS = 13
ORTHODOX_VALID_YEARS = range(1900, 2100)


def day_of_week(d: date) -> int:
    """Sunday-based weekday number of a date (0=Sunday)."""
    return (d.weekday() + 1) % 7


def iso(d: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return d.isoformat()


def add_days(d: date, days: int) -> date:
    """Shift a date by a (possibly negative) number of days."""
    return d + timedelta(days=days)


# =============================================================================
# Easter
# =============================================================================

def easter_sunday(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian algorithm.

    This is the standard algorithm for calculating Easter in Western Christianity.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def orthodox_easter(year: int) -> date:
    """
    Calculate Orthodox Easter Sunday as a Gregorian date.

    Computes the Julian-calendar date (Meeus Julian algorithm) and shifts it by
    the fixed 13-day Julian/Gregorian offset. The offset is only correct for
    1900-2099; outside that window the same shift is applied and a warning is
    logged rather than generalizing the conversion.
    """
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month = (d + e + 114) // 31
    day = ((d + e + 114) % 31) + 1

    if year not in ORTHODOX_VALID_YEARS:
        logger.warning(
            "Orthodox Easter for %s is outside the 1900-2099 offset window",
            year,
        )

    julian = date(year, month, day)
    return julian + timedelta(days=JULIAN_GREGORIAN_OFFSET_DAYS)


# =============================================================================
# Weekday Rules
# =============================================================================

def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """
    Get the nth occurrence of a weekday in a month.

    Args:
        year: Year
        month: Zero-based month (0=January, 11=December)
        weekday: Sunday-based day of week (0=Sunday, 6=Saturday)
        n: Which occurrence (1=first, 2=second, ..., -1=last)

    Returns:
        The date of the nth weekday
    """
    month1 = month + 1
    if n == -1:
        last_day = date(year, month1, calendar.monthrange(year, month1)[1])
        diff = (day_of_week(last_day) - weekday) % 7
        return last_day - timedelta(days=diff)

    first_day = date(year, month1, 1)
    diff = (weekday - day_of_week(first_day)) % 7
    return first_day + timedelta(days=diff + (n - 1) * 7)


def weekday_on_or_before(d: date, weekday: int) -> date:
    """Walk backward from a date to the nearest matching weekday (inclusive)."""
    return d - timedelta(days=(day_of_week(d) - weekday) % 7)


def _first_matching(days: list[date], weekday: int, default: date) -> date:
    for d in days:
        if day_of_week(d) == weekday:
            return d
    return default


def midsummer_saturday(year: int) -> date:
    """Saturday between June 20 and June 26 (Midsummer Day)."""
    days = [date(year, 6, d) for d in range(20, 27)]
    return _first_matching(days, SATURDAY, date(year, 6, 20))


def all_saints_saturday(year: int) -> date:
    """Saturday between October 31 and November 6 (All Saints' Day)."""
    days = [date(year, 10, 31)] + [date(year, 11, d) for d in range(1, 7)]
    return _first_matching(days, SATURDAY, date(year, 11, 1))


# =============================================================================
# Country Definition
# =============================================================================

HolidayGenerator = Callable[[int], list[str]]


@dataclass(frozen=True)
class CountryHolidayDefinition:
    """
    A supported holiday jurisdiction.

    Attributes:
        code: ISO 3166-1 alpha-2 country code
        name: Display name for country-selection controls
        generator: Pure function of year returning ISO date strings
            (unsorted, may contain duplicates)
    """
    code: str
    name: str
    generator: HolidayGenerator

    def holidays(self, year: int) -> list[str]:
        """Sorted, duplicate-free holiday dates for a year."""
        return sorted(set(self.generator(year)))


def fixed(year: int, month: int, day: int) -> str:
    """ISO string of a fixed calendar date."""
    return iso(date(year, month, day))


def christmas_substitutes(year: int) -> list[str]:
    """
    Substitute days when Christmas falls on a weekend.

    Shared by IE, AU and NZ: Christmas on Sunday adds Dec 27; Christmas on
    Saturday adds Dec 27 and Dec 28.
    """
    christmas = day_of_week(date(year, 12, 25))
    if christmas == SUNDAY:
        return [fixed(year, 12, 27)]
    if christmas == SATURDAY:
        return [fixed(year, 12, 27), fixed(year, 12, 28)]
    return []
