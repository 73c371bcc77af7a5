"""
Pytest configuration and fixtures for DeliveryPilot tests.

Provides helper factories and common fixtures matching actual model definitions.
"""
import pytest
from datetime import datetime, timezone
from typing import Any, Optional

from deliverypilot.models import GlobalSettings, Rule


# =============================================================================
# Factory Helpers
# =============================================================================

def make_settings(**overrides: Any) -> GlobalSettings:
    """
    Create GlobalSettings evaluated in UTC with no closures by default.

    Keyword arguments use the raw configuration field names.
    """
    data: dict[str, Any] = {
        "cutoff_time": "14:00",
        "closed_days": [],
        "preview_timezone": "UTC",
    }
    data.update(overrides)
    return GlobalSettings.from_dict(data)


def make_rule(
    id: str = "rule-1",
    name: str = "Test Rule",
    handles: Optional[list[str]] = None,
    tags: Optional[list[str]] = None,
    is_fallback: bool = False,
    **settings: Any,
) -> Rule:
    """Create a Rule; extra keyword arguments become rule settings."""
    return Rule.from_dict({
        "id": id,
        "name": name,
        "match": {
            "product_handles": handles or [],
            "tags": tags or [],
            "is_fallback": is_fallback,
        },
        "settings": settings,
    })


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    """An aware UTC instant."""
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


SHOP_CONFIG_YAML = """
shop: example.myshopify.com
settings:
  cutoff_time: "14:00"
  closed_days: [sat, sun]
  bank_holiday_country: GB
  preview_timezone: Europe/London
  fd_enabled: true
  fd_threshold: 5000
  fd_message_progress: "Spend {remaining} more for free delivery"
  fd_message_unlocked: "You've unlocked **free delivery**"
  fd_exclude_tags: [oversized]
  currency: GBP
config:
  version: 2
  activeProfileId: winter
  profiles:
    - id: summer
      name: Summer
      rules: []
    - id: winter
      name: Winter
      rules:
        - id: express-shirts
          name: Shirts
          match:
            product_handles: [linen-shirt]
          settings:
            message_line_1: "Order within **{countdown}**"
            message_line_2: "Arrives {arrival}"
            eta_delivery_days_min: 1
            eta_delivery_days_max: 2
        - id: default
          name: Everything else
          match:
            is_fallback: true
          settings:
            message_line_1: "Arrives {arrival}"
"""


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings() -> GlobalSettings:
    return make_settings()


@pytest.fixture
def monday_after_cutoff() -> datetime:
    """Monday 2025-02-03, 15:00 UTC."""
    return utc(2025, 2, 3, 15, 0)


@pytest.fixture
def monday_before_cutoff() -> datetime:
    """Monday 2025-02-03, 10:00 UTC."""
    return utc(2025, 2, 3, 10, 0)
