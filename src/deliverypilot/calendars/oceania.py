"""
Oceania Holiday Calendars (Australia, New Zealand).
"""
from __future__ import annotations

from datetime import date

from .base import (
    MONDAY,
    SATURDAY,
    SUNDAY,
    CountryHolidayDefinition,
    add_days,
    christmas_substitutes,
    day_of_week,
    easter_sunday,
    fixed,
    iso,
    nth_weekday_of_month,
)

# Matariki follows the Māori lunar calendar and is gazetted per year.
# Years outside the table fall back to June 20.
MATARIKI_DATES: dict[int, str] = {
    2024: "2024-06-28",
    2025: "2025-06-20",
    2026: "2026-07-10",
    2027: "2027-06-25",
    2028: "2028-07-14",
    2029: "2029-07-06",
    2030: "2030-06-21",
}


def australia(year: int) -> list[str]:
    """
    Australian national public holidays.

    Australia Day moves to Monday when Jan 26 falls on a weekend. Anzac Day
    has no weekend substitute.
    """
    easter = easter_sunday(year)

    australia_day = date(year, 1, 26)
    if day_of_week(australia_day) == SUNDAY:
        australia_day = date(year, 1, 27)
    elif day_of_week(australia_day) == SATURDAY:
        australia_day = date(year, 1, 28)

    return [
        fixed(year, 1, 1),
        iso(australia_day),
        iso(add_days(easter, -2)),
        iso(add_days(easter, 1)),
        fixed(year, 4, 25),                              # Anzac Day
        iso(nth_weekday_of_month(year, 5, MONDAY, 2)),   # King's Birthday
        fixed(year, 12, 25),
        fixed(year, 12, 26),
        *christmas_substitutes(year),
    ]


def new_zealand(year: int) -> list[str]:
    easter = easter_sunday(year)
    return [
        fixed(year, 1, 1),
        fixed(year, 1, 2),
        fixed(year, 2, 6),                               # Waitangi Day
        iso(add_days(easter, -2)),
        iso(add_days(easter, 1)),
        fixed(year, 4, 25),
        iso(nth_weekday_of_month(year, 5, MONDAY, 1)),   # King's Birthday
        MATARIKI_DATES.get(year, fixed(year, 6, 20)),
        iso(nth_weekday_of_month(year, 9, MONDAY, 4)),   # Labour Day
        fixed(year, 12, 25),
        fixed(year, 12, 26),
        *christmas_substitutes(year),
    ]


OCEANIA: tuple[CountryHolidayDefinition, ...] = (
    CountryHolidayDefinition("AU", "Australia", australia),
    CountryHolidayDefinition("NZ", "New Zealand", new_zealand),
)
