"""
North American Holiday Calendars

Federal holidays only. Canadian provincial holidays other than Family Day
and the Civic Holiday, and US state holidays, are left to custom holidays.
"""
from __future__ import annotations

from datetime import date

from .base import (
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    CountryHolidayDefinition,
    add_days,
    day_of_week,
    easter_sunday,
    fixed,
    iso,
    nth_weekday_of_month,
    weekday_on_or_before,
)


def canada(year: int) -> list[str]:
    """
    Canadian statutory holidays.

    Victoria Day is the Monday on or before May 24. When Canada Day falls
    on a Sunday, July 2 is observed as well.
    """
    easter = easter_sunday(year)
    holidays = [
        fixed(year, 1, 1),                                   # New Year's Day
        iso(nth_weekday_of_month(year, 1, MONDAY, 3)),       # Family Day
        iso(add_days(easter, -2)),                           # Good Friday
        iso(weekday_on_or_before(date(year, 5, 24), MONDAY)),  # Victoria Day
        fixed(year, 7, 1),                                   # Canada Day
        iso(nth_weekday_of_month(year, 7, MONDAY, 1)),       # Civic Holiday
        iso(nth_weekday_of_month(year, 8, MONDAY, 1)),       # Labour Day
        iso(nth_weekday_of_month(year, 9, MONDAY, 2)),       # Thanksgiving
        fixed(year, 11, 11),                                 # Remembrance Day
        fixed(year, 12, 25),
        fixed(year, 12, 26),                                 # Boxing Day
    ]

    if day_of_week(date(year, 7, 1)) == SUNDAY:
        holidays.append(fixed(year, 7, 2))

    return holidays


def united_states(year: int) -> list[str]:
    """
    US federal holidays.

    Independence Day is observed on Friday July 3 when it falls on a
    Saturday, and on Monday July 5 when it falls on a Sunday.
    """
    holidays = [
        fixed(year, 1, 1),
        iso(nth_weekday_of_month(year, 0, MONDAY, 3)),     # MLK Day
        iso(nth_weekday_of_month(year, 1, MONDAY, 3)),     # Presidents Day
        iso(nth_weekday_of_month(year, 4, MONDAY, -1)),    # Memorial Day
        fixed(year, 6, 19),                                # Juneteenth
        fixed(year, 7, 4),                                 # Independence Day
        iso(nth_weekday_of_month(year, 8, MONDAY, 1)),     # Labor Day
        iso(nth_weekday_of_month(year, 9, MONDAY, 2)),     # Columbus Day
        fixed(year, 11, 11),                               # Veterans Day
        iso(nth_weekday_of_month(year, 10, THURSDAY, 4)),  # Thanksgiving
        fixed(year, 12, 25),
    ]

    independence_day = day_of_week(date(year, 7, 4))
    if independence_day == SATURDAY:
        holidays.append(fixed(year, 7, 3))
    elif independence_day == SUNDAY:
        holidays.append(fixed(year, 7, 5))

    return holidays


AMERICAS: tuple[CountryHolidayDefinition, ...] = (
    CountryHolidayDefinition("CA", "Canada", canada),
    CountryHolidayDefinition("US", "United States", united_states),
)
