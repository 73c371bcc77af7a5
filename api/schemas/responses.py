"""Response schemas for the API."""

from pydantic import BaseModel
from typing import Optional


class ScheduleResult(BaseModel):
    """Computed shipping and delivery dates."""
    order_date: str
    shipping_date: str
    delivery_date_min: str
    delivery_date_max: str
    express_date: str
    delivery_window: str  # e.g. "Feb 12–14"
    express_label: str  # e.g. "Thu, Feb 6"
    ships_today: bool
    cutoff_at: Optional[str] = None
    countdown: str = ""
    degraded: bool = False


class EtaStageResult(BaseModel):
    """One stage of the ETA timeline."""
    kind: str  # order|shipping|delivery
    label: str
    date: str


class MessageResult(BaseModel):
    """A rendered template."""
    html: str
    text: str
    lines: list[list[dict]]  # [[{"text": ..., "bold": ...}]]


class FreeDeliveryResult(BaseModel):
    """Cart position against the free-delivery threshold."""
    state: str  # excluded|empty|unlocked|progress
    threshold: int
    cart_total: int
    remaining: int
    percent: int
    message: Optional[MessageResult] = None


class MessagesResponse(BaseModel):
    """Schedule, timeline and rendered messages for one product."""
    shop: Optional[str] = None
    rule_id: Optional[str] = None
    rule_name: Optional[str] = None
    schedule: ScheduleResult
    timeline: list[EtaStageResult]
    messages: list[MessageResult]
    extra_messages: list[MessageResult] = []
    free_delivery: Optional[FreeDeliveryResult] = None


class CountrySummary(BaseModel):
    """A supported bank-holiday country."""
    code: str
    name: str


class HolidayList(BaseModel):
    """Public holidays of one country and year."""
    code: str
    name: str
    year: int
    holidays: list[str]
