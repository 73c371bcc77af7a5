"""
DeliveryPilot Calendars

Public-holiday generation for the bank-holiday selector.

Provides:
- Gregorian and Orthodox Easter
- Nth-weekday and fixed-range Saturday helpers
- Per-country holiday generators (Europe, North America, Oceania)
- The country registry used by the schedule engine

Usage:
    from deliverypilot.calendars import get_holidays_for_year

    get_holidays_for_year("GB", 2025)
    # ['2025-01-01', '2025-04-18', '2025-04-21', ...]
"""
from __future__ import annotations

from .base import (
    CountryHolidayDefinition,
    all_saints_saturday,
    day_of_week,
    easter_sunday,
    midsummer_saturday,
    nth_weekday_of_month,
    orthodox_easter,
)
from .registry import (
    HOLIDAY_DEFINITIONS,
    get_definition,
    get_holidays_for_year,
    supported_countries,
)

__all__ = [
    # Algorithms
    "easter_sunday",
    "orthodox_easter",
    "nth_weekday_of_month",
    "midsummer_saturday",
    "all_saints_saturday",
    "day_of_week",
    # Registry
    "CountryHolidayDefinition",
    "HOLIDAY_DEFINITIONS",
    "get_definition",
    "get_holidays_for_year",
    "supported_countries",
]
