"""
DeliveryPilot Rendering

Template substitution, money formatting and free-delivery progress.
"""
from __future__ import annotations

from .free_delivery import FreeDeliveryProgress, is_excluded_product
from .money import default_money_format, format_money
from .template import (
    RenderedMessage,
    Span,
    TemplateRenderer,
    countdown_text,
    parse_bold,
    split_lines,
    substitute_currency,
    substitute_dates,
)

__all__ = [
    "FreeDeliveryProgress",
    "is_excluded_product",
    "format_money",
    "default_money_format",
    "TemplateRenderer",
    "RenderedMessage",
    "Span",
    "countdown_text",
    "parse_bold",
    "split_lines",
    "substitute_currency",
    "substitute_dates",
]
