"""
Tests for override resolution and the schedule engine.

Tests cover:
- Per-category override independence
- Shipping date: cutoff, closed days, holidays, lead time
- Delivery window and express date
- Window formatting
- ETA timeline
- Degraded configurations
"""
import pytest
from datetime import date, datetime, timedelta, timezone

from deliverypilot.engine import (
    ScheduleEngine,
    build_eta_timeline,
    compute_schedule,
    format_delivery_window,
    format_express_date,
    format_short_date,
    resolve_parameters,
)
from deliverypilot.models import EtaStageKind
from deliverypilot.rendering import countdown_text

from tests.conftest import make_rule, make_settings, utc


# =============================================================================
# Override Resolution
# =============================================================================

class TestOverrides:
    """Tests for merging shop settings with rule overrides."""

    def test_no_rule_uses_shop_settings(self):
        settings = make_settings(cutoff_time="12:00", lead_time=2, closed_days=["sun"])
        params = resolve_parameters(settings)
        assert params.cutoff_time == "12:00"
        assert params.lead_time == 2
        assert params.closed_days == frozenset({"sun"})
        assert params.courier_no_delivery_days == frozenset({"sat", "sun"})

    def test_flag_without_value_uses_shop_value(self):
        settings = make_settings(lead_time=2)
        rule = make_rule(override_lead_time=True)
        assert resolve_parameters(settings, rule).lead_time == 2

    def test_value_without_flag_is_ignored(self):
        settings = make_settings(lead_time=2)
        rule = make_rule(lead_time=5)
        assert resolve_parameters(settings, rule).lead_time == 2

    def test_categories_are_independent(self):
        """Overriding cutoff does not touch lead time or closed days."""
        settings = make_settings(cutoff_time="14:00", lead_time=1, closed_days=["sat", "sun"])
        rule = make_rule(
            override_cutoff_times=True,
            cutoff_time="16:00",
            lead_time=9,
            closed_days=["mon"],
        )
        params = resolve_parameters(settings, rule)
        assert params.cutoff_time == "16:00"
        assert params.lead_time == 1
        assert params.closed_days == frozenset({"sat", "sun"})

    def test_string_flags(self):
        rule = make_rule(override_closed_days="true", closed_days="mon, tue")
        params = resolve_parameters(make_settings(), rule)
        assert params.closed_days == frozenset({"mon", "tue"})

    def test_empty_list_overrides_to_open_every_day(self):
        settings = make_settings(closed_days=["sat", "sun"])
        rule = make_rule(override_closed_days=True, closed_days=[])
        assert resolve_parameters(settings, rule).closed_days == frozenset()

    def test_courier_override(self):
        rule = make_rule(override_courier_no_delivery_days=True, courier_no_delivery_days=["sun"])
        params = resolve_parameters(make_settings(), rule)
        assert params.courier_no_delivery_days == frozenset({"sun"})

    def test_blank_weekend_cutoff_under_override_clears_shop_value(self):
        settings = make_settings(cutoff_time_sat="10:00")
        rule = make_rule(override_cutoff_times=True, cutoff_time="15:00", cutoff_time_sat="")
        params = resolve_parameters(settings, rule)
        assert params.cutoff_time == "15:00"
        assert params.cutoff_time_sat is None

    def test_blank_weekday_cutoff_under_override_uses_shop_value(self):
        settings = make_settings(cutoff_time="13:00")
        rule = make_rule(override_cutoff_times=True, cutoff_time="  ")
        assert resolve_parameters(settings, rule).cutoff_time == "13:00"

    def test_lead_time_is_clamped(self):
        rule = make_rule(override_lead_time=True, lead_time=99)
        assert resolve_parameters(make_settings(), rule).lead_time == 30

    def test_inputs_are_not_mutated(self):
        settings = make_settings(closed_days=["sat"])
        rule = make_rule(override_closed_days=True, closed_days=["mon"])
        resolve_parameters(settings, rule)
        assert settings.closed_days == frozenset({"sat"})
        assert rule.settings.closed_days == frozenset({"mon"})


# =============================================================================
# Shipping Date
# =============================================================================

class TestShippingDate:
    """Tests for dispatch date calculation."""

    def test_before_cutoff_ships_today(self, settings, monday_before_cutoff):
        schedule = compute_schedule(settings, now=monday_before_cutoff)
        assert schedule.shipping_date == date(2025, 2, 3)
        assert schedule.ships_today
        assert schedule.cutoff_at == datetime(2025, 2, 3, 14, 0)

    def test_after_cutoff_ships_next_day(self, settings, monday_after_cutoff):
        """Monday 15:00 against a 14:00 cutoff ships Tuesday."""
        schedule = compute_schedule(settings, now=monday_after_cutoff)
        assert schedule.order_date == date(2025, 2, 3)
        assert schedule.shipping_date == date(2025, 2, 4)
        assert not schedule.ships_today
        assert schedule.cutoff_at is None

    def test_exactly_at_cutoff_ships_next_day(self, settings):
        schedule = compute_schedule(settings, now=utc(2025, 2, 3, 14, 0))
        assert schedule.shipping_date == date(2025, 2, 4)

    def test_closed_today_ships_next_open_day(self):
        settings = make_settings(closed_days=["sat", "sun"])
        schedule = compute_schedule(settings, now=utc(2025, 2, 8, 9, 0))
        assert schedule.shipping_date == date(2025, 2, 10)

    def test_friday_after_cutoff_skips_weekend(self):
        settings = make_settings(closed_days=["sat", "sun"])
        schedule = compute_schedule(settings, now=utc(2025, 2, 7, 16, 0))
        assert schedule.shipping_date == date(2025, 2, 10)

    def test_bank_holidays_are_skipped(self):
        """Easter 2024: Good Friday and Easter Monday are GB holidays."""
        settings = make_settings(closed_days=["sat", "sun"], bank_holiday_country="GB")
        schedule = compute_schedule(settings, now=utc(2024, 3, 28, 15, 0))
        assert schedule.shipping_date == date(2024, 4, 2)

    def test_custom_holiday_today(self, monday_before_cutoff):
        settings = make_settings(custom_holidays=[{"date": "2025-02-03", "label": "Stocktake"}])
        schedule = compute_schedule(settings, now=monday_before_cutoff)
        assert schedule.shipping_date == date(2025, 2, 4)
        assert schedule.cutoff_at is None

    def test_saturday_cutoff(self):
        early = make_settings(cutoff_time_sat="10:00")
        late = make_settings(cutoff_time_sat="12:00")
        now = utc(2025, 2, 8, 11, 0)
        assert compute_schedule(early, now=now).shipping_date == date(2025, 2, 9)
        assert compute_schedule(late, now=now).shipping_date == date(2025, 2, 8)

    def test_lead_time(self, monday_before_cutoff):
        settings = make_settings(lead_time=2)
        schedule = compute_schedule(settings, now=monday_before_cutoff)
        assert schedule.shipping_date == date(2025, 2, 5)

    def test_lead_time_skips_closed_days(self):
        settings = make_settings(lead_time=1, closed_days=["sat", "sun"])
        schedule = compute_schedule(settings, now=utc(2025, 2, 7, 10, 0))
        assert schedule.shipping_date == date(2025, 2, 10)

    def test_rule_cutoff_override(self, settings, monday_after_cutoff):
        rule = make_rule(override_cutoff_times=True, cutoff_time="16:00")
        schedule = compute_schedule(settings, rule, now=monday_after_cutoff)
        assert schedule.shipping_date == date(2025, 2, 3)

    def test_malformed_rule_cutoff_falls_back_to_shop(self, monday_after_cutoff):
        settings = make_settings(cutoff_time="16:00")
        rule = make_rule(override_cutoff_times=True, cutoff_time="late afternoon")
        schedule = compute_schedule(settings, rule, now=monday_after_cutoff)
        assert schedule.shipping_date == date(2025, 2, 3)

    def test_shop_timezone_decides_the_day(self):
        """23:30 UTC Monday is already Tuesday morning in Sydney."""
        settings = make_settings(preview_timezone="Australia/Sydney")
        schedule = compute_schedule(settings, now=utc(2025, 2, 3, 23, 30))
        assert schedule.order_date == date(2025, 2, 4)
        assert schedule.shipping_date == date(2025, 2, 4)

    def test_timezone_argument_overrides_settings(self):
        engine = ScheduleEngine()
        schedule = engine.compute(make_settings(), now=utc(2025, 2, 3, 23, 30), timezone_name="Australia/Sydney")
        assert schedule.order_date == date(2025, 2, 4)


# =============================================================================
# Delivery Window
# =============================================================================

class TestDeliveryWindow:
    """Tests for delivery window and express date."""

    def test_default_window_skips_courier_days(self, settings, monday_after_cutoff):
        schedule = compute_schedule(settings, now=monday_after_cutoff)
        assert schedule.delivery_date_min == date(2025, 2, 7)
        assert schedule.delivery_date_max == date(2025, 2, 11)
        assert schedule.express_date == date(2025, 2, 5)

    def test_rule_window(self, settings, monday_before_cutoff):
        rule = make_rule(eta_delivery_days_min=1, eta_delivery_days_max=2)
        schedule = compute_schedule(settings, rule, now=monday_before_cutoff)
        assert schedule.delivery_date_min == date(2025, 2, 4)
        assert schedule.delivery_date_max == date(2025, 2, 5)

    def test_inverted_window_is_swapped(self, settings, monday_before_cutoff):
        rule = make_rule(eta_delivery_days_min=5, eta_delivery_days_max=3)
        schedule = compute_schedule(settings, rule, now=monday_before_cutoff)
        assert schedule.delivery_date_min < schedule.delivery_date_max
        assert schedule.delivery_date_min == date(2025, 2, 6)

    def test_zero_day_window(self, settings, monday_before_cutoff):
        rule = make_rule(eta_delivery_days_min=0, eta_delivery_days_max=0)
        schedule = compute_schedule(settings, rule, now=monday_before_cutoff)
        assert schedule.delivery_date_min == schedule.shipping_date
        assert schedule.is_single_day_window

    def test_courier_days_override(self, settings):
        """Friday shipment with Saturday deliveries allowed."""
        rule = make_rule(
            override_courier_no_delivery_days=True,
            courier_no_delivery_days=["sun"],
            eta_delivery_days_min=1,
            eta_delivery_days_max=1,
        )
        schedule = compute_schedule(settings, rule, now=utc(2025, 2, 7, 10, 0))
        assert schedule.delivery_date_min == date(2025, 2, 8)

    def test_window_is_ordered(self, settings):
        for day in range(1, 28):
            schedule = compute_schedule(settings, now=utc(2025, 2, day, 12, 0))
            assert schedule.shipping_date <= schedule.delivery_date_min <= schedule.delivery_date_max

    def test_all_days_closed_is_degraded(self, monday_before_cutoff):
        settings = make_settings(closed_days=["sun", "mon", "tue", "wed", "thu", "fri", "sat"])
        schedule = compute_schedule(settings, now=monday_before_cutoff)
        assert schedule.degraded
        assert schedule.shipping_date == date(2025, 4, 4)

    def test_normal_schedule_is_not_degraded(self, settings, monday_before_cutoff):
        assert not compute_schedule(settings, now=monday_before_cutoff).degraded

    @pytest.mark.parametrize("zone", ["UTC", "Pacific/Auckland"])
    def test_last_representable_day_is_degraded(self, zone):
        settings = make_settings(preview_timezone=zone)
        schedule = compute_schedule(settings, now=datetime(9999, 12, 31, 20, 0, tzinfo=timezone.utc))
        assert schedule.degraded
        assert schedule.shipping_date == date.max
        assert schedule.delivery_date_max == date.max


# =============================================================================
# Countdown
# =============================================================================

class TestCutoffCountdown:
    """Tests for the time left before today's cutoff."""

    def test_remaining_time(self, settings, monday_before_cutoff):
        schedule = compute_schedule(settings, now=monday_before_cutoff)
        assert schedule.cutoff_remaining == timedelta(hours=4)
        assert countdown_text(schedule) == "4h 0m"

    def test_no_countdown_after_cutoff(self, settings, monday_after_cutoff):
        assert compute_schedule(settings, now=monday_after_cutoff).cutoff_remaining is None

    def test_daylight_saving_day(self):
        """The hour lost when London clocks go forward is not counted."""
        settings = make_settings(preview_timezone="Europe/London")
        schedule = compute_schedule(settings, now=utc(2025, 3, 30, 0, 30))
        assert schedule.ships_today
        assert schedule.cutoff_remaining == timedelta(hours=12, minutes=30)
        assert countdown_text(schedule) == "12h 30m"


# =============================================================================
# Formatting
# =============================================================================

class TestFormatting:
    """Tests for date labels."""

    def test_short_date(self):
        assert format_short_date(date(2025, 2, 6)) == "Feb 6"

    def test_express_date(self):
        assert format_express_date(date(2025, 2, 6)) == "Thu, Feb 6"

    def test_single_day(self):
        assert format_delivery_window(date(2025, 2, 12), date(2025, 2, 12)) == "Feb 12"

    def test_same_month(self):
        assert format_delivery_window(date(2025, 2, 12), date(2025, 2, 14)) == "Feb 12–14"

    def test_cross_month(self):
        assert format_delivery_window(date(2025, 1, 30), date(2025, 2, 3)) == "Jan 30–Feb 3"

    def test_same_month_different_year(self):
        assert format_delivery_window(date(2024, 12, 30), date(2025, 12, 2)) == "Dec 30–Dec 2"

    def test_window_across_month_boundary(self, settings):
        """Shipping Jan 27 with a 3 to 5 day window spans into February."""
        schedule = compute_schedule(settings, now=utc(2025, 1, 27, 10, 0))
        window = format_delivery_window(schedule.delivery_date_min, schedule.delivery_date_max)
        assert window == "Jan 30–Feb 3"


# =============================================================================
# ETA Timeline
# =============================================================================

class TestEtaTimeline:
    """Tests for the ordered/shipped/delivered stages."""

    def test_default_labels(self, settings, monday_after_cutoff):
        schedule = compute_schedule(settings, now=monday_after_cutoff)
        stages = build_eta_timeline(schedule)
        assert [s.kind for s in stages] == [
            EtaStageKind.ORDER,
            EtaStageKind.SHIPPING,
            EtaStageKind.DELIVERY,
        ]
        assert [s.label for s in stages] == ["Ordered", "Shipped", "Delivered"]
        assert [s.date_text for s in stages] == ["Feb 3", "Feb 4", "Feb 7–11"]

    def test_rule_labels(self, settings, monday_after_cutoff):
        rule = make_rule(eta_label_shipping="Dispatched", eta_label_delivery="")
        schedule = compute_schedule(settings, rule, now=monday_after_cutoff)
        stages = build_eta_timeline(schedule, rule)
        assert [s.label for s in stages] == ["Ordered", "Dispatched", "Delivered"]
