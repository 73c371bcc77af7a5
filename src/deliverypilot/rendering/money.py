"""
Money formatting for currency placeholders.

Amounts are integers in minor units (cents). Shop money formats use the
Liquid-style tokens storefront themes use:

    {{amount}}                                  1,134.65
    {{amount_no_decimals}}                      1,135
    {{amount_with_comma_separator}}             1.134,65
    {{amount_no_decimals_with_comma_separator}} 1.135
    {{amount_with_apostrophe_separator}}        1'134.65
"""
from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

_TOKEN = re.compile(r"\{\{\s*(\w+)\s*\}\}")

DEFAULT_MONEY_FORMATS = {
    "USD": "${{amount}}",
    "CAD": "${{amount}}",
    "AUD": "${{amount}}",
    "NZD": "${{amount}}",
    "GBP": "£{{amount}}",
    "EUR": "€{{amount_with_comma_separator}}",
    "CHF": "CHF {{amount}}",
    "JPY": "¥{{amount_no_decimals}}",
    "SEK": "{{amount_with_comma_separator}} kr",
    "NOK": "{{amount_with_comma_separator}} kr",
    "DKK": "{{amount_with_comma_separator}} kr.",
    "PLN": "{{amount_with_comma_separator}} zł",
}


def _to_major(cents: int, places: int) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return (Decimal(int(cents)) / 100).quantize(quantum, rounding=ROUND_HALF_UP)


def _group(value: Decimal, places: int, thousands: str, decimal: str) -> str:
    text = f"{value:,.{places}f}"
    return text.replace(",", "\0").replace(".", decimal).replace("\0", thousands)


def _render_token(token: str, cents: int) -> str:
    if token == "amount_no_decimals":
        return _group(_to_major(cents, 0), 0, ",", ".")
    if token == "amount_with_comma_separator":
        return _group(_to_major(cents, 2), 2, ".", ",")
    if token == "amount_no_decimals_with_comma_separator":
        return _group(_to_major(cents, 0), 0, ".", ",")
    if token == "amount_with_apostrophe_separator":
        return _group(_to_major(cents, 2), 2, "'", ".")
    return _group(_to_major(cents, 2), 2, ",", ".")


def default_money_format(currency: str) -> str:
    """Money format for a currency when the shop has none configured."""
    code = (currency or "").upper()
    return DEFAULT_MONEY_FORMATS.get(code, "{{amount}} " + code if code else "{{amount}}")


def format_money(cents: int, currency: str = "USD", money_format: Optional[str] = None) -> str:
    """
    Format an amount in minor units.

    Args:
        cents: Amount in minor units; negative amounts format as zero
        currency: ISO currency code, used to pick a default format
        money_format: Shop money format; overrides the currency default

    Returns:
        e.g. "$12.50", "€1.134,65"
    """
    cents = max(int(cents), 0)
    template = money_format or default_money_format(currency)
    return _TOKEN.sub(lambda m: _render_token(m.group(1), cents), template)
