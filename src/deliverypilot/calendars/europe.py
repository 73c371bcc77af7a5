"""
European Holiday Calendars

National public holidays for the European jurisdictions supported by the
bank-holiday selector. Regional holidays (German Länder, Swiss cantons,
Spanish autonomous communities) are not included; merchants add those as
custom holidays.

Movable feasts are offsets from Easter Sunday:
- Carnival: -47
- Maundy Thursday: -3
- Good Friday: -2
- Easter Monday: +1
- Great Prayer Day (DK): +26
- Ascension Day: +39
- Whit Sunday: +49
- Whit Monday: +50
- Corpus Christi: +60

Greece and Romania use Orthodox Easter.
"""
from __future__ import annotations

from datetime import date

from .base import (
    MONDAY,
    SUNDAY,
    SATURDAY,
    CountryHolidayDefinition,
    add_days,
    all_saints_saturday,
    day_of_week,
    easter_sunday,
    fixed,
    christmas_substitutes,
    iso,
    midsummer_saturday,
    nth_weekday_of_month,
    orthodox_easter,
)


def _easter(year: int, *offsets: int) -> list[str]:
    """ISO dates at the given day offsets from Gregorian Easter."""
    easter = easter_sunday(year)
    return [iso(add_days(easter, n)) for n in offsets]


def _orthodox(year: int, *offsets: int) -> list[str]:
    """ISO dates at the given day offsets from Orthodox Easter."""
    easter = orthodox_easter(year)
    return [iso(add_days(easter, n)) for n in offsets]


def austria(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),    # New Year's Day
        fixed(year, 1, 6),    # Epiphany
        *_easter(year, 1),    # Easter Monday
        fixed(year, 5, 1),    # Labour Day
        *_easter(year, 39, 50, 60),  # Ascension, Whit Monday, Corpus Christi
        fixed(year, 8, 15),   # Assumption
        fixed(year, 10, 26),  # National Day
        fixed(year, 11, 1),   # All Saints
        fixed(year, 12, 8),   # Immaculate Conception
        fixed(year, 12, 25),  # Christmas
        fixed(year, 12, 26),  # St. Stephen's Day
    ]


def belgium(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        *_easter(year, 1),
        fixed(year, 5, 1),
        *_easter(year, 39, 50),
        fixed(year, 7, 21),   # National Day
        fixed(year, 8, 15),
        fixed(year, 11, 1),
        fixed(year, 11, 11),  # Armistice Day
        fixed(year, 12, 25),
    ]


def switzerland(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        fixed(year, 1, 2),    # Berchtold's Day
        *_easter(year, -2, 1, 39, 50),
        fixed(year, 8, 1),    # Swiss National Day
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def czech_republic(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        *_easter(year, -2, 1),
        fixed(year, 5, 1),
        fixed(year, 5, 8),    # Liberation Day
        fixed(year, 7, 5),    # Saints Cyril and Methodius
        fixed(year, 7, 6),    # Jan Hus Day
        fixed(year, 9, 28),   # Statehood Day
        fixed(year, 10, 28),  # Independence Day
        fixed(year, 11, 17),  # Struggle for Freedom Day
        fixed(year, 12, 24),
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def germany(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        *_easter(year, -2, 1),
        fixed(year, 5, 1),
        *_easter(year, 39, 50),
        fixed(year, 10, 3),   # German Unity Day
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def denmark(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        *_easter(year, -3, -2, 1, 26, 39),
        fixed(year, 6, 5),    # Constitution Day
        *_easter(year, 50),
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def spain(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        fixed(year, 1, 6),
        *_easter(year, -2),
        fixed(year, 5, 1),
        fixed(year, 8, 15),
        fixed(year, 10, 12),  # Hispanic Day
        fixed(year, 11, 1),
        fixed(year, 12, 6),   # Constitution Day
        fixed(year, 12, 8),
        fixed(year, 12, 25),
    ]


def finland(year: int) -> list[str]:
    midsummer = midsummer_saturday(year)
    return [
        fixed(year, 1, 1),
        fixed(year, 1, 6),
        *_easter(year, -2, 1),
        fixed(year, 5, 1),    # May Day
        *_easter(year, 39),
        iso(add_days(midsummer, -1)),  # Midsummer Eve
        iso(midsummer),
        iso(all_saints_saturday(year)),
        fixed(year, 12, 6),   # Independence Day
        fixed(year, 12, 24),
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def france(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        *_easter(year, 1),
        fixed(year, 5, 1),
        fixed(year, 5, 8),    # Victory in Europe Day
        *_easter(year, 39, 50),
        fixed(year, 7, 14),   # Bastille Day
        fixed(year, 8, 15),
        fixed(year, 11, 1),
        fixed(year, 11, 11),
        fixed(year, 12, 25),
    ]


def united_kingdom(year: int) -> list[str]:
    """
    UK bank holidays (England and Wales).

    Substitute days:
    - Christmas on Sunday: Dec 27
    - Christmas on Saturday: Dec 27 and Dec 28
    - Boxing Day on Sunday: Dec 28
    """
    holidays = [
        fixed(year, 1, 1),
        *_easter(year, -2, 1),
        iso(nth_weekday_of_month(year, 4, MONDAY, 1)),   # Early May
        iso(nth_weekday_of_month(year, 4, MONDAY, -1)),  # Spring
        iso(nth_weekday_of_month(year, 7, MONDAY, -1)),  # Summer
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]

    christmas = day_of_week(date(year, 12, 25))
    boxing_day = day_of_week(date(year, 12, 26))
    if christmas == SUNDAY:
        holidays.append(fixed(year, 12, 27))
    elif christmas == SATURDAY:
        holidays.append(fixed(year, 12, 27))
        holidays.append(fixed(year, 12, 28))
    if boxing_day == SUNDAY:
        holidays.append(fixed(year, 12, 28))

    return holidays


def greece(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        fixed(year, 1, 6),
        *_orthodox(year, -48),  # Clean Monday
        fixed(year, 3, 25),   # Independence Day
        *_orthodox(year, -2, 0, 1),
        fixed(year, 5, 1),
        *_orthodox(year, 50),
        fixed(year, 8, 15),
        fixed(year, 10, 28),  # Ochi Day
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def hungary(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        fixed(year, 3, 15),   # National Day
        *_easter(year, -2, 1),
        fixed(year, 5, 1),
        *_easter(year, 49, 50),
        fixed(year, 8, 20),   # St. Stephen's Day
        fixed(year, 10, 23),  # Republic Day
        fixed(year, 11, 1),
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def ireland(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        iso(nth_weekday_of_month(year, 1, MONDAY, 1)),   # St. Brigid's Day
        fixed(year, 3, 17),   # St. Patrick's Day
        *_easter(year, 1),
        iso(nth_weekday_of_month(year, 4, MONDAY, 1)),   # May
        iso(nth_weekday_of_month(year, 5, MONDAY, 1)),   # June
        iso(nth_weekday_of_month(year, 7, MONDAY, 1)),   # August
        iso(nth_weekday_of_month(year, 9, MONDAY, -1)),  # October
        fixed(year, 12, 25),
        fixed(year, 12, 26),
        *christmas_substitutes(year),
    ]


def italy(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        fixed(year, 1, 6),
        *_easter(year, 0, 1),
        fixed(year, 4, 25),   # Liberation Day
        fixed(year, 5, 1),
        fixed(year, 6, 2),    # Republic Day
        fixed(year, 8, 15),
        fixed(year, 11, 1),
        fixed(year, 12, 8),
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def luxembourg(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        *_easter(year, 1),
        fixed(year, 5, 1),
        fixed(year, 5, 9),    # Europe Day
        *_easter(year, 39, 50),
        fixed(year, 6, 23),   # National Day
        fixed(year, 8, 15),
        fixed(year, 11, 1),
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def netherlands(year: int) -> list[str]:
    # King's Day moves to the 26th when the 27th is a Sunday
    kings_day = date(year, 4, 27)
    if day_of_week(kings_day) == SUNDAY:
        kings_day = date(year, 4, 26)

    return [
        fixed(year, 1, 1),
        *_easter(year, -2, 1),
        iso(kings_day),
        fixed(year, 5, 5),    # Liberation Day
        *_easter(year, 39, 50),
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def norway(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        *_easter(year, -3, -2, 1),
        fixed(year, 5, 1),
        fixed(year, 5, 17),   # Constitution Day
        *_easter(year, 39, 50),
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def poland(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        fixed(year, 1, 6),
        *_easter(year, 0, 1),
        fixed(year, 5, 1),
        fixed(year, 5, 3),    # Constitution Day
        *_easter(year, 49, 60),
        fixed(year, 8, 15),
        fixed(year, 11, 1),
        fixed(year, 11, 11),  # Independence Day
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def portugal(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        *_easter(year, -47, -2, 0),
        fixed(year, 4, 25),   # Freedom Day
        fixed(year, 5, 1),
        *_easter(year, 60),
        fixed(year, 6, 10),   # Portugal Day
        fixed(year, 8, 15),
        fixed(year, 10, 5),   # Republic Day
        fixed(year, 11, 1),
        fixed(year, 12, 1),   # Restoration of Independence
        fixed(year, 12, 8),
        fixed(year, 12, 25),
    ]


def romania(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        fixed(year, 1, 2),
        fixed(year, 1, 24),   # Unification Day
        *_orthodox(year, -2, 0, 1),
        fixed(year, 5, 1),
        *_orthodox(year, 49, 50),
        fixed(year, 6, 1),    # Children's Day
        fixed(year, 8, 15),
        fixed(year, 11, 30),  # St. Andrew's Day
        fixed(year, 12, 1),   # National Day
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def sweden(year: int) -> list[str]:
    midsummer = midsummer_saturday(year)
    return [
        fixed(year, 1, 1),
        fixed(year, 1, 6),
        *_easter(year, -2, 1),
        fixed(year, 5, 1),
        *_easter(year, 39),
        fixed(year, 6, 6),    # National Day
        iso(add_days(midsummer, -1)),
        iso(midsummer),
        iso(all_saints_saturday(year)),
        fixed(year, 12, 24),
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


def slovakia(year: int) -> list[str]:
    return [
        fixed(year, 1, 1),
        fixed(year, 1, 6),
        *_easter(year, -2, 1),
        fixed(year, 5, 1),
        fixed(year, 5, 8),    # Victory Day
        fixed(year, 7, 5),
        fixed(year, 8, 29),   # Slovak National Uprising
        fixed(year, 9, 1),    # Constitution Day
        fixed(year, 9, 15),   # Our Lady of Sorrows
        fixed(year, 11, 1),
        fixed(year, 11, 17),
        fixed(year, 12, 24),
        fixed(year, 12, 25),
        fixed(year, 12, 26),
    ]


EUROPE: tuple[CountryHolidayDefinition, ...] = (
    CountryHolidayDefinition("AT", "Austria", austria),
    CountryHolidayDefinition("BE", "Belgium", belgium),
    CountryHolidayDefinition("CH", "Switzerland", switzerland),
    CountryHolidayDefinition("CZ", "Czech Republic", czech_republic),
    CountryHolidayDefinition("DE", "Germany", germany),
    CountryHolidayDefinition("DK", "Denmark", denmark),
    CountryHolidayDefinition("ES", "Spain", spain),
    CountryHolidayDefinition("FI", "Finland", finland),
    CountryHolidayDefinition("FR", "France", france),
    CountryHolidayDefinition("GB", "United Kingdom", united_kingdom),
    CountryHolidayDefinition("GR", "Greece", greece),
    CountryHolidayDefinition("HU", "Hungary", hungary),
    CountryHolidayDefinition("IE", "Ireland", ireland),
    CountryHolidayDefinition("IT", "Italy", italy),
    CountryHolidayDefinition("LU", "Luxembourg", luxembourg),
    CountryHolidayDefinition("NL", "Netherlands", netherlands),
    CountryHolidayDefinition("NO", "Norway", norway),
    CountryHolidayDefinition("PL", "Poland", poland),
    CountryHolidayDefinition("PT", "Portugal", portugal),
    CountryHolidayDefinition("RO", "Romania", romania),
    CountryHolidayDefinition("SE", "Sweden", sweden),
    CountryHolidayDefinition("SK", "Slovakia", slovakia),
)
