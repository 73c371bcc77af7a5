"""
DeliveryPilot Configuration

Shop configuration documents: schema validation and loading.

Usage:
    from deliverypilot.config import load_shop_config

    config = load_shop_config("shops/example.yaml")
    config.settings.cutoff_time
"""
from __future__ import annotations

from .loader import (
    ConfigLoader,
    ShopConfig,
    check_rule_integrity,
    load_shop_config,
    load_shop_config_from_string,
)
from .schema import (
    ConfigV1Schema,
    ConfigV2Schema,
    CustomHolidaySchema,
    ProfileSchema,
    RuleMatchSchema,
    RuleSchema,
    RuleSettingsSchema,
    SettingsSchema,
    ShopConfigSchema,
    validate_rule,
    validate_settings,
    validate_shop_config,
)

__all__ = [
    # Loader
    "ConfigLoader",
    "ShopConfig",
    "check_rule_integrity",
    "load_shop_config",
    "load_shop_config_from_string",
    # Schema
    "ConfigV1Schema",
    "ConfigV2Schema",
    "CustomHolidaySchema",
    "ProfileSchema",
    "RuleMatchSchema",
    "RuleSchema",
    "RuleSettingsSchema",
    "SettingsSchema",
    "ShopConfigSchema",
    "validate_rule",
    "validate_settings",
    "validate_shop_config",
]
