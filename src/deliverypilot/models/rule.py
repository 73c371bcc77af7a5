"""
DeliveryPilot Rule Models

A rule pairs product-match criteria with display settings and optional
per-category overrides of the shop's dispatch settings.

Override categories are independent: each has its own flag and its own
rule-local value(s).

| Flag                              | Rule-local values                      |
|-----------------------------------|----------------------------------------|
| override_cutoff_times             | cutoff_time, cutoff_time_sat/_sun      |
| override_lead_time                | lead_time                              |
| override_closed_days              | closed_days                            |
| override_courier_no_delivery_days | courier_no_delivery_days               |
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .settings import (
    parse_string_list,
    blank_to_none,
    coerce_bool,
    coerce_int,
    parse_weekday_set,
)

DEFAULT_ETA_DAYS_MIN = 3
DEFAULT_ETA_DAYS_MAX = 5


@dataclass(frozen=True)
class RuleMatch:
    """
    Product-match criteria.

    A fallback rule has no criteria of its own and applies to any product
    no other rule matched.
    """
    product_handles: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    is_fallback: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "RuleMatch":
        data = data or {}
        return cls(
            product_handles=parse_string_list(data.get("product_handles")),
            tags=parse_string_list(data.get("tags")),
            is_fallback=coerce_bool(data.get("is_fallback")),
        )


@dataclass(frozen=True)
class RuleSettings:
    """
    Rule-level settings relevant to scheduling and messaging.

    Rule-local override values are kept as given (None when absent or
    blank); whether they apply is decided by the override resolver.
    """
    # Cutoff times
    override_cutoff_times: bool = False
    cutoff_time: Optional[str] = None
    cutoff_time_sat: Optional[str] = None
    cutoff_time_sun: Optional[str] = None

    # Lead time
    override_lead_time: bool = False
    lead_time: Optional[int] = None

    # Closed days
    override_closed_days: bool = False
    closed_days: Optional[frozenset[str]] = None

    # Courier days
    override_courier_no_delivery_days: bool = False
    courier_no_delivery_days: Optional[frozenset[str]] = None

    # Delivery window, in courier days after shipping
    eta_delivery_days_min: int = DEFAULT_ETA_DAYS_MIN
    eta_delivery_days_max: int = DEFAULT_ETA_DAYS_MAX

    # Messaging
    message_line_1: Optional[str] = None
    message_line_2: Optional[str] = None
    eta_label_order: Optional[str] = None
    eta_label_shipping: Optional[str] = None
    eta_label_delivery: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "RuleSettings":
        data = data or {}
        eta_min = coerce_int(data.get("eta_delivery_days_min"), DEFAULT_ETA_DAYS_MIN)
        eta_max = coerce_int(data.get("eta_delivery_days_max"), DEFAULT_ETA_DAYS_MAX)
        return cls(
            override_cutoff_times=coerce_bool(data.get("override_cutoff_times")),
            cutoff_time=blank_to_none(data.get("cutoff_time")),
            cutoff_time_sat=blank_to_none(data.get("cutoff_time_sat")),
            cutoff_time_sun=blank_to_none(data.get("cutoff_time_sun")),
            override_lead_time=coerce_bool(data.get("override_lead_time")),
            lead_time=coerce_int(data.get("lead_time")),
            override_closed_days=coerce_bool(data.get("override_closed_days")),
            closed_days=parse_weekday_set(data.get("closed_days")),
            override_courier_no_delivery_days=coerce_bool(
                data.get("override_courier_no_delivery_days")
            ),
            courier_no_delivery_days=parse_weekday_set(data.get("courier_no_delivery_days")),
            eta_delivery_days_min=max(0, eta_min or 0),
            eta_delivery_days_max=max(0, eta_max or 0),
            message_line_1=data.get("message_line_1") or None,
            message_line_2=data.get("message_line_2") or None,
            eta_label_order=blank_to_none(data.get("eta_label_order")),
            eta_label_shipping=blank_to_none(data.get("eta_label_shipping")),
            eta_label_delivery=blank_to_none(data.get("eta_label_delivery")),
        )


@dataclass(frozen=True)
class Rule:
    """
    A delivery-messaging rule.

    Attributes:
        id: Stable rule identifier
        name: Merchant-facing name
        match: Product-match criteria
        settings: Scheduling overrides and message templates
    """
    id: str
    name: str = ""
    match: RuleMatch = field(default_factory=RuleMatch)
    settings: RuleSettings = field(default_factory=RuleSettings)

    @property
    def is_fallback(self) -> bool:
        return self.match.is_fallback

    @property
    def message_templates(self) -> list[str]:
        """Non-empty message lines in display order."""
        lines = (self.settings.message_line_1, self.settings.message_line_2)
        return [line for line in lines if line]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Rule":
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name") or ""),
            match=RuleMatch.from_dict(data.get("match")),
            settings=RuleSettings.from_dict(data.get("settings")),
        )
