"""
DeliveryPilot Schedule Models

Output of a single schedule evaluation. Produced fresh per request and
never cached or mutated.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from .enums import EtaStageKind


@dataclass(frozen=True)
class ComputedSchedule:
    """
    When an order placed "now" ships and arrives.

    Attributes:
        shipping_date: Dispatch date after cutoff, closures and lead time
        delivery_date_min: Earliest arrival
        delivery_date_max: Latest arrival
        express_date: Arrival with next-courier-day delivery
        order_date: Local calendar date of the evaluation
        local_now: Wall-clock time the evaluation used (naive, shop-local)
        cutoff_at: Today's cutoff when an order placed now still ships
            today, else None. This is the live-countdown target.
        cutoff_remaining: Real time left until ``cutoff_at`` at evaluation,
            measured across any DST change
        degraded: True when a day search hit its iteration bound
    """
    shipping_date: date
    delivery_date_min: date
    delivery_date_max: date
    express_date: date
    order_date: date
    local_now: datetime
    cutoff_at: Optional[datetime] = None
    cutoff_remaining: Optional[timedelta] = None
    degraded: bool = False

    @property
    def ships_today(self) -> bool:
        return self.shipping_date == self.order_date

    @property
    def is_single_day_window(self) -> bool:
        return self.delivery_date_min == self.delivery_date_max


@dataclass(frozen=True)
class EtaStage:
    """One stage of the ETA timeline (Ordered, Shipped, Delivered)."""
    kind: EtaStageKind
    label: str
    date_text: str
