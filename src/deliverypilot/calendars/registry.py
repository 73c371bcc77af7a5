"""
Country Holiday Registry

Data-driven mapping from ISO country code to holiday definition. This is the
only module-level state in the engine and it is never mutated after import.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ..logging_config import get_logger
from .americas import AMERICAS
from .base import CountryHolidayDefinition
from .europe import EUROPE
from .oceania import OCEANIA

logger = get_logger("calendars")

# datetime.date supports years 1..9999; generators build dates directly
MIN_YEAR = 1
MAX_YEAR = 9999

HOLIDAY_DEFINITIONS: Mapping[str, CountryHolidayDefinition] = MappingProxyType(
    {definition.code: definition for definition in (*EUROPE, *AMERICAS, *OCEANIA)}
)


def get_definition(country_code: Optional[str]) -> Optional[CountryHolidayDefinition]:
    """Look up a country definition; codes are matched case-insensitively."""
    if not country_code:
        return None
    return HOLIDAY_DEFINITIONS.get(country_code.strip().upper())


def get_holidays_for_year(country_code: Optional[str], year: int) -> list[str]:
    """
    Public holidays for a country and year.

    Args:
        country_code: ISO 3166-1 alpha-2 code (e.g. "GB")
        year: Calendar year

    Returns:
        Sorted, duplicate-free ISO dates. Unknown or empty codes, and years
        outside the representable range, yield an empty list.
    """
    definition = get_definition(country_code)
    if definition is None:
        return []
    if not MIN_YEAR <= year <= MAX_YEAR:
        logger.debug("Holiday year %s out of range for %s", year, definition.code)
        return []
    # Lenten offsets in year 1 fall before date.min
    try:
        return definition.holidays(year)
    except (ValueError, OverflowError):
        logger.debug("Holiday year %s not computable for %s", year, definition.code)
        return []


def supported_countries() -> dict[str, str]:
    """Ordered ``{code: name}`` map for country-selection controls."""
    return {code: definition.name for code, definition in HOLIDAY_DEFINITIONS.items()}
