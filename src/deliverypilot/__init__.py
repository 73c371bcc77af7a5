"""
DeliveryPilot - Delivery Schedule Engine for Storefront Messaging

DeliveryPilot answers "when will this ship, and when will it arrive?" for a
product page, given the shop's business-operation settings and the rule
that applies to the product.

Key Features:
- Same-day dispatch cutoffs with weekday, Saturday and Sunday times
- Lead time, closed days and courier no-delivery days
- Public holidays for 26 countries plus merchant one-off closures
- Per-rule overrides of each dispatch setting, independently
- Message templates with date, countdown and money placeholders
- Free-delivery threshold progress

Quick Start:
    from deliverypilot import GlobalSettings, Rule, ScheduleEngine, TemplateRenderer

    settings = GlobalSettings.from_dict({"cutoff_time": "14:00", "bank_holiday_country": "GB"})
    rule = Rule.from_dict({"id": "default", "match": {"is_fallback": True}})

    schedule = ScheduleEngine().compute(settings, rule)
    message = TemplateRenderer(settings, rule).render("Arrives **{arrival}**")
    message.to_html()

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "DeliveryPilot Team"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    ComputedSchedule,
    CustomHoliday,
    EtaStage,
    EtaStageKind,
    FreeDeliveryState,
    GlobalSettings,
    Rule,
    RuleMatch,
    RuleSettings,
    Weekday,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    RuleMatcher,
    ScheduleEngine,
    build_eta_timeline,
    compute_schedule,
    find_matching_rule,
    format_delivery_window,
    format_express_date,
)

# =============================================================================
# Rendering
# =============================================================================
from .rendering import (
    FreeDeliveryProgress,
    RenderedMessage,
    TemplateRenderer,
    format_money,
)

# =============================================================================
# Calendars
# =============================================================================
from .calendars import (
    get_holidays_for_year,
    supported_countries,
)

# =============================================================================
# Configuration
# =============================================================================
from .config import (
    ConfigLoader,
    ShopConfig,
    load_shop_config,
    load_shop_config_from_string,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    ConfigLoadError,
    ConfigValidationError,
    DeliveryPilotError,
    RuleNotFoundError,
)

__all__ = [
    "__version__",
    # Models
    "ComputedSchedule",
    "CustomHoliday",
    "EtaStage",
    "EtaStageKind",
    "FreeDeliveryState",
    "GlobalSettings",
    "Rule",
    "RuleMatch",
    "RuleSettings",
    "Weekday",
    # Engine
    "RuleMatcher",
    "ScheduleEngine",
    "build_eta_timeline",
    "compute_schedule",
    "find_matching_rule",
    "format_delivery_window",
    "format_express_date",
    # Rendering
    "FreeDeliveryProgress",
    "RenderedMessage",
    "TemplateRenderer",
    "format_money",
    # Calendars
    "get_holidays_for_year",
    "supported_countries",
    # Configuration
    "ConfigLoader",
    "ShopConfig",
    "load_shop_config",
    "load_shop_config_from_string",
    # Exceptions
    "DeliveryPilotError",
    "ConfigLoadError",
    "ConfigValidationError",
    "RuleNotFoundError",
]
