"""
Free-delivery progress.

Works out where a cart stands against the shop's free-delivery threshold and
which message template applies. Precedence:

1. excluded: the cart holds a product excluded from the offer
2. empty: nothing in the cart
3. unlocked: cart total reached the threshold
4. progress: otherwise
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..models import FreeDeliveryState, GlobalSettings


@dataclass(frozen=True)
class FreeDeliveryProgress:
    """
    Cart position relative to the free-delivery threshold.

    All amounts are minor currency units.
    """
    threshold: int
    cart_total: int
    excluded: bool = False

    @classmethod
    def from_cart(cls, threshold: int, cart_total: int, excluded: bool = False) -> "FreeDeliveryProgress":
        return cls(threshold=max(int(threshold), 0), cart_total=max(int(cart_total), 0), excluded=excluded)

    @property
    def remaining(self) -> int:
        return max(self.threshold - self.cart_total, 0)

    @property
    def empty(self) -> bool:
        return self.cart_total == 0

    @property
    def unlocked(self) -> bool:
        return self.cart_total >= self.threshold

    @property
    def percent(self) -> int:
        """Progress bar fill, 0 to 100."""
        if self.threshold <= 0:
            return 100
        return min(100, self.cart_total * 100 // self.threshold)

    @property
    def state(self) -> FreeDeliveryState:
        if self.excluded:
            return FreeDeliveryState.EXCLUDED
        if self.empty:
            return FreeDeliveryState.EMPTY
        if self.unlocked:
            return FreeDeliveryState.UNLOCKED
        return FreeDeliveryState.PROGRESS

    def message_template(self, settings: GlobalSettings) -> Optional[str]:
        """
        The shop's template for the current state.

        A blank template means "show nothing" for that state.
        """
        return {
            FreeDeliveryState.EXCLUDED: settings.fd_message_excluded,
            FreeDeliveryState.EMPTY: settings.fd_message_empty,
            FreeDeliveryState.UNLOCKED: settings.fd_message_unlocked,
            FreeDeliveryState.PROGRESS: settings.fd_message_progress,
        }[self.state]


def is_excluded_product(settings: GlobalSettings, handle: Optional[str], tags: Iterable[str] = ()) -> bool:
    """True when the product's handle or any tag is on the shop's exclusion lists."""
    if handle and handle in settings.fd_exclude_handles:
        return True
    excluded_tags = set(settings.fd_exclude_tags)
    return any(tag.strip() in excluded_tags for tag in tags if tag)
