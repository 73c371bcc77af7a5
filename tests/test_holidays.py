"""
Tests for holiday calendars.

Tests cover:
- Easter algorithms (Gregorian and Orthodox)
- Weekday rules
- Substitute-day logic per country
- Registry lookups and degenerate inputs
"""
import pytest
from datetime import date, timedelta

from deliverypilot.calendars import (
    HOLIDAY_DEFINITIONS,
    all_saints_saturday,
    easter_sunday,
    get_definition,
    get_holidays_for_year,
    midsummer_saturday,
    nth_weekday_of_month,
    orthodox_easter,
    supported_countries,
)
from deliverypilot.calendars.base import (
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    christmas_substitutes,
    day_of_week,
)


# =============================================================================
# Easter
# =============================================================================

class TestEaster:
    """Tests for Easter calculations."""

    @pytest.mark.parametrize("year,expected", [
        (2019, date(2019, 4, 21)),
        (2024, date(2024, 3, 31)),
        (2025, date(2025, 4, 20)),
        (2026, date(2026, 4, 5)),
    ])
    def test_gregorian_easter(self, year, expected):
        assert easter_sunday(year) == expected

    @pytest.mark.parametrize("year,expected", [
        (2023, date(2023, 4, 16)),
        (2024, date(2024, 5, 5)),
        (2025, date(2025, 4, 20)),
    ])
    def test_orthodox_easter(self, year, expected):
        assert orthodox_easter(year) == expected

    @pytest.mark.parametrize("year", range(1990, 2040))
    def test_both_easters_fall_on_sunday(self, year):
        assert day_of_week(easter_sunday(year)) == SUNDAY
        assert day_of_week(orthodox_easter(year)) == SUNDAY

    def test_orthodox_outside_offset_window_still_returns(self):
        """Years outside 1900-2099 use the same fixed offset."""
        assert isinstance(orthodox_easter(2150), date)


# =============================================================================
# Weekday Rules
# =============================================================================

class TestWeekdayRules:
    """Tests for nth-weekday and Saturday-range helpers."""

    def test_first_monday_of_may(self):
        # Month is zero-based
        assert nth_weekday_of_month(2024, 4, MONDAY, 1) == date(2024, 5, 6)

    def test_last_monday_of_august(self):
        assert nth_weekday_of_month(2024, 7, MONDAY, -1) == date(2024, 8, 26)

    def test_fourth_thursday_of_november(self):
        assert nth_weekday_of_month(2025, 10, THURSDAY, 4) == date(2025, 11, 27)

    def test_midsummer_saturday(self):
        result = midsummer_saturday(2025)
        assert result == date(2025, 6, 21)
        assert day_of_week(result) == SATURDAY

    def test_all_saints_saturday(self):
        assert all_saints_saturday(2025) == date(2025, 11, 1)
        assert all_saints_saturday(2026) == date(2026, 10, 31)

    def test_christmas_substitutes(self):
        assert christmas_substitutes(2022) == ["2022-12-27"]
        assert christmas_substitutes(2021) == ["2021-12-27", "2021-12-28"]
        assert christmas_substitutes(2024) == []


# =============================================================================
# Country Rules
# =============================================================================

class TestUnitedKingdom:
    """GB bank holidays and substitute days."""

    def test_2024_has_no_substitutes(self):
        """Christmas and Boxing Day 2024 fall on Wednesday and Thursday."""
        assert get_holidays_for_year("GB", 2024) == [
            "2024-01-01",
            "2024-03-29",
            "2024-04-01",
            "2024-05-06",
            "2024-05-27",
            "2024-08-26",
            "2024-12-25",
            "2024-12-26",
        ]

    def test_christmas_on_sunday(self):
        holidays = get_holidays_for_year("GB", 2022)
        assert "2022-12-27" in holidays
        assert "2022-12-28" not in holidays

    def test_christmas_on_saturday_boxing_day_on_sunday(self):
        """Both rules add Dec 28; it appears once."""
        holidays = get_holidays_for_year("GB", 2021)
        assert "2021-12-27" in holidays
        assert holidays.count("2021-12-28") == 1


class TestOtherCountries:
    """Spot checks of country-specific rules."""

    def test_netherlands_kings_day_moves_off_sunday(self):
        assert "2025-04-26" in get_holidays_for_year("NL", 2025)
        assert "2025-04-27" not in get_holidays_for_year("NL", 2025)
        assert "2024-04-27" in get_holidays_for_year("NL", 2024)

    def test_us_independence_day_on_saturday(self):
        holidays = get_holidays_for_year("US", 2026)
        assert "2026-07-03" in holidays
        assert "2026-07-04" in holidays

    def test_us_thanksgiving(self):
        assert "2025-11-27" in get_holidays_for_year("US", 2025)

    def test_canada_victoria_day(self):
        """Monday on or before May 24."""
        assert "2025-05-19" in get_holidays_for_year("CA", 2025)

    def test_greece_uses_orthodox_easter(self):
        holidays = get_holidays_for_year("GR", 2024)
        assert "2024-05-03" in holidays  # Good Friday
        assert "2024-05-06" in holidays  # Easter Monday

    def test_germany_uses_gregorian_easter(self):
        holidays = get_holidays_for_year("DE", 2024)
        assert "2024-03-29" in holidays
        assert "2024-04-01" in holidays

    def test_canada_day_on_sunday(self):
        assert "2029-07-02" in get_holidays_for_year("CA", 2029)
        assert "2024-07-02" not in get_holidays_for_year("CA", 2024)


class TestAustralia:
    """Australia Day and Christmas substitutes."""

    def test_australia_day_on_weekday(self):
        assert "2024-01-26" in get_holidays_for_year("AU", 2024)

    def test_australia_day_on_sunday(self):
        holidays = get_holidays_for_year("AU", 2025)
        assert "2025-01-27" in holidays
        assert "2025-01-26" not in holidays

    def test_australia_day_on_saturday(self):
        holidays = get_holidays_for_year("AU", 2030)
        assert "2030-01-28" in holidays
        assert "2030-01-26" not in holidays


class TestChristmasSubstitutes:
    """IE, AU and NZ observe weekend Christmas on following weekdays."""

    @pytest.mark.parametrize("code", ["IE", "AU", "NZ"])
    def test_christmas_on_sunday(self, code):
        holidays = get_holidays_for_year(code, 2022)
        assert "2022-12-27" in holidays
        assert "2022-12-28" not in holidays

    @pytest.mark.parametrize("code", ["IE", "AU", "NZ"])
    def test_christmas_on_saturday(self, code):
        holidays = get_holidays_for_year(code, 2021)
        assert {"2021-12-27", "2021-12-28"} <= set(holidays)

    @pytest.mark.parametrize("code", ["IE", "AU", "NZ"])
    def test_christmas_on_weekday(self, code):
        holidays = get_holidays_for_year(code, 2024)
        assert "2024-12-27" not in holidays


class TestNewZealand:
    """Matariki dates."""

    def test_matariki_from_table(self):
        holidays = get_holidays_for_year("NZ", 2024)
        assert "2024-06-28" in holidays
        assert "2024-06-20" not in holidays

    def test_matariki_outside_table(self):
        assert "2031-06-20" in get_holidays_for_year("NZ", 2031)


# Days relative to Easter Sunday for every Easter-based calendar
EASTER_OFFSETS = {
    "AT": (1, 39, 50, 60),
    "AU": (-2, 1),
    "BE": (1, 39, 50),
    "CA": (-2,),
    "CH": (-2, 1, 39, 50),
    "CZ": (-2, 1),
    "DE": (-2, 1, 39, 50),
    "DK": (-3, -2, 1, 26, 39, 50),
    "ES": (-2,),
    "FI": (-2, 1, 39),
    "FR": (1, 39, 50),
    "GB": (-2, 1),
    "HU": (-2, 1, 49, 50),
    "IE": (1,),
    "IT": (0, 1),
    "LU": (1, 39, 50),
    "NL": (-2, 1, 39, 50),
    "NO": (-3, -2, 1, 39, 50),
    "NZ": (-2, 1),
    "PL": (0, 1, 49, 60),
    "PT": (-47, -2, 0, 60),
    "SE": (-2, 1, 39),
    "SK": (-2, 1),
}

ORTHODOX_EASTER_OFFSETS = {
    "GR": (-48, -2, 0, 1, 50),
    "RO": (-2, 0, 1, 49, 50),
}


class TestEasterOffsets:
    """Easter-relative holidays sit at fixed offsets from Easter Sunday."""

    @pytest.mark.parametrize("year", [2024, 2025, 2038])
    @pytest.mark.parametrize("code,offsets", sorted(EASTER_OFFSETS.items()))
    def test_gregorian(self, code, offsets, year):
        holidays = get_holidays_for_year(code, year)
        easter = easter_sunday(year)
        for offset in offsets:
            assert (easter + timedelta(days=offset)).isoformat() in holidays

    @pytest.mark.parametrize("year", [2024, 2025, 2038])
    @pytest.mark.parametrize("code,offsets", sorted(ORTHODOX_EASTER_OFFSETS.items()))
    def test_orthodox(self, code, offsets, year):
        holidays = get_holidays_for_year(code, year)
        easter = orthodox_easter(year)
        for offset in offsets:
            assert (easter + timedelta(days=offset)).isoformat() in holidays

    def test_every_easter_country_is_covered(self):
        covered = set(EASTER_OFFSETS) | set(ORTHODOX_EASTER_OFFSETS)
        assert set(HOLIDAY_DEFINITIONS) - covered == {"US"}


# =============================================================================
# Registry
# =============================================================================

class TestRegistry:
    """Tests for the country registry."""

    def test_supported_countries(self):
        countries = supported_countries()
        assert len(countries) == 26
        assert countries["GB"] == "United Kingdom"
        assert set(countries) == set(HOLIDAY_DEFINITIONS)

    def test_lookup_is_case_insensitive(self):
        assert get_definition("gb") is get_definition("GB")
        assert get_holidays_for_year("gb", 2024) == get_holidays_for_year("GB", 2024)

    @pytest.mark.parametrize("code", ["", None, "XX", "ZZ"])
    def test_unknown_country_is_empty(self, code):
        assert get_holidays_for_year(code, 2024) == []

    @pytest.mark.parametrize("year", [0, -5, 10000])
    def test_unrepresentable_year_is_empty(self, year):
        assert get_holidays_for_year("GB", year) == []

    @pytest.mark.parametrize("code", sorted(HOLIDAY_DEFINITIONS))
    def test_lists_sorted_and_unique(self, code):
        for year in (2021, 2024, 2025, 2030):
            holidays = get_holidays_for_year(code, year)
            assert holidays == sorted(set(holidays))
            assert all(h.startswith(str(year)) for h in holidays)

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            HOLIDAY_DEFINITIONS["XX"] = HOLIDAY_DEFINITIONS["GB"]
