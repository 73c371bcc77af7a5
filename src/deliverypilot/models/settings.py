"""
DeliveryPilot Settings Models

Shop-wide business-operation settings and the helpers that normalize the
loosely-typed values merchants' configuration records carry (weekday sets
stored as lists or comma-separated strings, blank strings for "unset",
numbers stored as strings).

All models are frozen: the engine reads them, never writes them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from ..logging_config import get_logger
from .enums import WEEKDAY_NAMES

logger = get_logger("models")

DEFAULT_CUTOFF_TIME = "14:00"
DEFAULT_COURIER_NO_DELIVERY_DAYS: frozenset[str] = frozenset({"sat", "sun"})
DEFAULT_CURRENCY = "USD"


# =============================================================================
# Value Normalization
# =============================================================================

def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty after stripping."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def blank_to_none(value: Any) -> Optional[str]:
    """Strip a string value, mapping blank to None."""
    if is_blank(value):
        return None
    return str(value).strip()


def parse_weekday_set(value: Any) -> Optional[frozenset[str]]:
    """
    Normalize a weekday set.

    Accepts a list/tuple/set of names or a comma-separated string. Names are
    lowercased and truncated to three letters, so "Saturday" reads as "sat".
    Unknown names are dropped.

    Returns:
        The set, or None when the value is absent (None or a blank string).
        An explicitly empty list yields an empty set, not None.
    """
    if is_blank(value):
        return None
    if isinstance(value, str):
        items: Iterable[Any] = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = value
    else:
        logger.debug("Ignoring weekday set of type %s", type(value).__name__)
        return None

    days = set()
    for item in items:
        name = str(item).strip().lower()[:3]
        if name in WEEKDAY_NAMES:
            days.add(name)
        elif name:
            logger.debug("Ignoring unknown weekday %r", item)
    return frozenset(days)


def coerce_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    """Read an integer from an int, float or numeric string."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str) and value.strip():
        try:
            return int(float(value.strip()))
        except ValueError:
            logger.debug("Ignoring non-numeric value %r", value)
    return default


def coerce_bool(value: Any) -> bool:
    """Override flags arrive as booleans or as the string "true"."""
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return value is True


def parse_string_list(value: Any) -> tuple[str, ...]:
    if is_blank(value):
        return ()
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple, set, frozenset)):
        return ()
    return tuple(s for s in (str(v).strip() for v in value) if s)


# =============================================================================
# Custom Holidays
# =============================================================================

@dataclass(frozen=True)
class CustomHoliday:
    """
    A merchant-entered one-off non-operating day.

    Attributes:
        date: ISO date string (YYYY-MM-DD)
        label: Optional display label (e.g. "Stocktake")
    """
    date: str
    label: Optional[str] = None

    @classmethod
    def from_value(cls, value: Any) -> Optional["CustomHoliday"]:
        """Read either a bare ISO string or a ``{date, label}`` mapping."""
        if isinstance(value, str):
            return cls(date=value.strip()) if value.strip() else None
        if isinstance(value, Mapping) and not is_blank(value.get("date")):
            return cls(date=str(value["date"]).strip(), label=blank_to_none(value.get("label")))
        return None


# =============================================================================
# Global Settings
# =============================================================================

@dataclass(frozen=True)
class GlobalSettings:
    """
    Shop-wide business-operation settings.

    Attributes:
        cutoff_time: Latest HH:MM for same-day dispatch
        cutoff_time_sat: Saturday cutoff, when different
        cutoff_time_sun: Sunday cutoff, when different
        lead_time: Extra dispatch days before shipping (0 to 30)
        closed_days: Weekdays the business does not dispatch
        courier_no_delivery_days: Weekdays the courier does not deliver
        bank_holiday_country: ISO country code for public holidays
        custom_holidays: Merchant one-off closures
        preview_timezone: IANA zone used for "local now"
        fd_*: Free-delivery threshold (minor currency units) and messages
        currency: ISO currency code used for money placeholders
        money_format: Shop money format, e.g. "${{amount}}"
    """
    cutoff_time: str = DEFAULT_CUTOFF_TIME
    cutoff_time_sat: Optional[str] = None
    cutoff_time_sun: Optional[str] = None
    lead_time: int = 0
    closed_days: frozenset[str] = frozenset()
    courier_no_delivery_days: frozenset[str] = DEFAULT_COURIER_NO_DELIVERY_DAYS
    bank_holiday_country: Optional[str] = None
    custom_holidays: tuple[CustomHoliday, ...] = ()
    preview_timezone: Optional[str] = None

    # Free delivery
    fd_enabled: bool = False
    fd_threshold: int = 0
    fd_message_progress: Optional[str] = None
    fd_message_unlocked: Optional[str] = None
    fd_message_empty: Optional[str] = None
    fd_message_excluded: Optional[str] = None
    fd_exclude_tags: tuple[str, ...] = ()
    fd_exclude_handles: tuple[str, ...] = ()

    # Money
    currency: str = DEFAULT_CURRENCY
    money_format: Optional[str] = None

    # Fields the engine does not interpret (styling, fonts, ...)
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def custom_holiday_dates(self) -> frozenset[str]:
        return frozenset(h.date for h in self.custom_holidays)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "GlobalSettings":
        """
        Build settings from a raw configuration mapping.

        Missing and blank fields take their defaults. The mapping is not
        modified.
        """
        data = data or {}
        known = {f for f in cls.__dataclass_fields__ if f != "extra"}

        holidays = data.get("custom_holidays") or []
        if not isinstance(holidays, (list, tuple)):
            holidays = []
        custom = tuple(
            h for h in (CustomHoliday.from_value(v) for v in holidays) if h is not None
        )

        closed = parse_weekday_set(data.get("closed_days"))
        courier = parse_weekday_set(data.get("courier_no_delivery_days"))
        country = blank_to_none(data.get("bank_holiday_country"))

        return cls(
            cutoff_time=blank_to_none(data.get("cutoff_time")) or DEFAULT_CUTOFF_TIME,
            cutoff_time_sat=blank_to_none(data.get("cutoff_time_sat")),
            cutoff_time_sun=blank_to_none(data.get("cutoff_time_sun")),
            lead_time=max(0, coerce_int(data.get("lead_time"), 0) or 0),
            closed_days=closed if closed is not None else frozenset(),
            courier_no_delivery_days=(
                courier if courier is not None else DEFAULT_COURIER_NO_DELIVERY_DAYS
            ),
            bank_holiday_country=country.upper() if country else None,
            custom_holidays=custom,
            preview_timezone=blank_to_none(data.get("preview_timezone")),
            fd_enabled=coerce_bool(data.get("fd_enabled")),
            fd_threshold=max(0, coerce_int(data.get("fd_threshold"), 0) or 0),
            fd_message_progress=blank_to_none(data.get("fd_message_progress")),
            fd_message_unlocked=blank_to_none(data.get("fd_message_unlocked")),
            fd_message_empty=blank_to_none(data.get("fd_message_empty")),
            fd_message_excluded=blank_to_none(data.get("fd_message_excluded")),
            fd_exclude_tags=parse_string_list(data.get("fd_exclude_tags")),
            fd_exclude_handles=parse_string_list(data.get("fd_exclude_handles")),
            currency=(blank_to_none(data.get("currency")) or DEFAULT_CURRENCY).upper(),
            money_format=blank_to_none(data.get("money_format")),
            extra={k: v for k, v in data.items() if k not in known},
        )
