"""
DeliveryPilot Configuration Schemas

Pydantic models for validating shop configuration documents (YAML/JSON).

A document carries the shop-wide settings and the rule configuration:

    shop: example.myshopify.com
    settings:
      cutoff_time: "14:00"
      closed_days: [sat, sun]
      bank_holiday_country: GB
    config:
      version: 2
      activeProfileId: default
      profiles:
        - id: default
          name: Default
          rules: [...]

Rule configuration comes in two shapes, both accepted as-is:
- version 1: ``{version: 1, rules: [...]}``
- version 2: ``{version: 2, profiles: [...], activeProfileId: ...}``

Unknown fields (styling, fonts, icons) pass through untouched.
"""
from __future__ import annotations

from datetime import date
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import WEEKDAY_NAMES


# =============================================================================
# Field Types
# =============================================================================

WeekdaySet = Optional[Union[list[str], str]]


def _check_time(value: Optional[str]) -> Optional[str]:
    # Unparseable times are kept; evaluation falls back to the global cutoff
    return value.strip() if value is not None else value


def _check_weekdays(value: Any) -> Any:
    if value is None:
        return value
    items = value.split(",") if isinstance(value, str) else value
    names = [str(v).strip().lower() for v in items if str(v).strip()]
    unknown = [n for n in names if n not in WEEKDAY_NAMES]
    if unknown:
        raise ValueError(f"unknown weekday(s): {', '.join(unknown)}")
    return names


# =============================================================================
# Settings
# =============================================================================

class CustomHolidaySchema(BaseModel):
    """Merchant one-off closure."""
    date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    label: Optional[str] = None

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        date.fromisoformat(v.strip())
        return v.strip()


class SettingsSchema(BaseModel):
    """Shop-wide settings relevant to scheduling and messaging."""
    # Business hours
    cutoff_time: Optional[str] = Field(None, description="Weekday cutoff, HH:MM")
    cutoff_time_sat: Optional[str] = None
    cutoff_time_sun: Optional[str] = None
    lead_time: Optional[int] = Field(None, ge=0, le=30, description="Extra dispatch days")

    # Closures
    closed_days: WeekdaySet = None
    courier_no_delivery_days: WeekdaySet = None
    bank_holiday_country: Optional[str] = Field(None, description="ISO 3166-1 alpha-2")
    custom_holidays: list[CustomHolidaySchema] = Field(default_factory=list)
    preview_timezone: Optional[str] = Field(None, description="IANA timezone")

    # Free delivery
    fd_enabled: Optional[bool] = None
    fd_threshold: Optional[int] = Field(None, ge=0, description="Minor currency units")
    fd_message_progress: Optional[str] = None
    fd_message_unlocked: Optional[str] = None
    fd_message_empty: Optional[str] = None
    fd_message_excluded: Optional[str] = None
    fd_exclude_tags: list[str] = Field(default_factory=list)
    fd_exclude_handles: list[str] = Field(default_factory=list)

    # Money
    currency: Optional[str] = None
    money_format: Optional[str] = None

    @field_validator("cutoff_time", "cutoff_time_sat", "cutoff_time_sun")
    @classmethod
    def validate_times(cls, v: Optional[str]) -> Optional[str]:
        return _check_time(v)

    @field_validator("closed_days", "courier_no_delivery_days")
    @classmethod
    def validate_weekdays(cls, v: Any) -> Any:
        return _check_weekdays(v)

    model_config = ConfigDict(extra="allow")


# =============================================================================
# Rules
# =============================================================================

class RuleMatchSchema(BaseModel):
    """Product-match criteria."""
    product_handles: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    stock_status: Optional[str] = None
    is_fallback: Union[bool, Literal["true", "false"]] = False

    model_config = ConfigDict(extra="allow")


class RuleSettingsSchema(BaseModel):
    """Rule settings: dispatch overrides, delivery window, messages."""
    # Messages
    message_line_1: Optional[str] = None
    message_line_2: Optional[str] = None

    # Dispatch overrides
    override_cutoff_times: Optional[bool] = None
    override_lead_time: Optional[bool] = None
    override_closed_days: Optional[bool] = None
    override_courier_no_delivery_days: Optional[bool] = None
    cutoff_time: Optional[str] = None
    cutoff_time_sat: Optional[str] = None
    cutoff_time_sun: Optional[str] = None
    lead_time: Optional[int] = Field(None, ge=0, le=30)
    closed_days: WeekdaySet = None
    courier_no_delivery_days: WeekdaySet = None

    # ETA timeline
    eta_delivery_days_min: Optional[int] = Field(None, ge=0)
    eta_delivery_days_max: Optional[int] = Field(None, ge=0)
    eta_label_order: Optional[str] = None
    eta_label_shipping: Optional[str] = None
    eta_label_delivery: Optional[str] = None

    @field_validator("cutoff_time", "cutoff_time_sat", "cutoff_time_sun")
    @classmethod
    def validate_times(cls, v: Optional[str]) -> Optional[str]:
        return _check_time(v)

    @field_validator("closed_days", "courier_no_delivery_days")
    @classmethod
    def validate_weekdays(cls, v: Any) -> Any:
        return _check_weekdays(v)

    model_config = ConfigDict(extra="allow")


class RuleSchema(BaseModel):
    """A single rule."""
    id: str
    name: str
    match: RuleMatchSchema = Field(default_factory=RuleMatchSchema)
    settings: RuleSettingsSchema = Field(default_factory=RuleSettingsSchema)


class ProfileSchema(BaseModel):
    """A named rule set (version 2 configurations)."""
    id: str
    name: str
    rules: list[RuleSchema]


class ConfigV1Schema(BaseModel):
    """Legacy single rule list."""
    version: Literal[1]
    rules: list[RuleSchema]

    def active_rules(self) -> list[RuleSchema]:
        return self.rules


class ConfigV2Schema(BaseModel):
    """Profiles with one active profile."""
    version: Literal[2]
    profiles: list[ProfileSchema] = Field(..., min_length=1)
    active_profile_id: str = Field(..., alias="activeProfileId")

    model_config = ConfigDict(populate_by_name=True)

    def active_profile(self) -> ProfileSchema:
        """The profile named by ``activeProfileId``, else the first profile."""
        for profile in self.profiles:
            if profile.id == self.active_profile_id:
                return profile
        return self.profiles[0]

    def active_rules(self) -> list[RuleSchema]:
        return self.active_profile().rules


# =============================================================================
# Document
# =============================================================================

class ShopConfigSchema(BaseModel):
    """Top-level configuration document."""
    shop: Optional[str] = Field(None, description="Shop domain")
    settings: SettingsSchema = Field(default_factory=SettingsSchema)
    config: Union[ConfigV1Schema, ConfigV2Schema] = Field(
        default_factory=lambda: ConfigV1Schema(version=1, rules=[])
    )

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_shop_config(data: dict[str, Any]) -> ShopConfigSchema:
    """
    Validate a configuration document.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return ShopConfigSchema.model_validate(data)


def validate_settings(data: dict[str, Any]) -> SettingsSchema:
    """Validate a settings mapping on its own."""
    return SettingsSchema.model_validate(data)


def validate_rule(data: dict[str, Any]) -> RuleSchema:
    """Validate a single rule mapping."""
    return RuleSchema.model_validate(data)
