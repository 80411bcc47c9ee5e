"""pt-BR number parsing and currency formatting for the calculator form."""

from __future__ import annotations

import math
import re
from typing import Optional, Union

DISPLAY_EPSILON = 1e-8
CURRENCY_SYMBOL = "R$"

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_WHITESPACE = re.compile(r"\s+")

NumberInput = Union[str, float, int, None]


def parse_number(value: NumberInput) -> float:
    """Read a user-typed number, accepting both ``1.234,56`` and ``1234.56``.

    When both separators appear the dot is taken as the thousands separator.
    Currency symbols and other decorations are dropped. Returns ``nan`` when
    nothing numeric is left.
    """
    if value is None or value == "":
        return math.nan
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)

    normalized = _WHITESPACE.sub("", str(value).strip())
    has_comma = "," in normalized
    has_dot = "." in normalized
    if has_comma and has_dot:
        normalized = normalized.replace(".", "").replace(",", ".")
    elif has_comma:
        normalized = normalized.replace(",", ".")
    normalized = _NON_NUMERIC.sub("", normalized)

    try:
        return float(normalized)
    except ValueError:
        return math.nan


def parse_period_count(value: NumberInput) -> Optional[int]:
    """Return the number of periods, or ``None`` if it is not a whole number."""
    number = parse_number(value)
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def format_currency(value: float) -> str:
    """Format as Brazilian reais, e.g. ``R$ 1.234,56`` (non-breaking space)."""
    if abs(value) < DISPLAY_EPSILON:
        value = 0.0
    grouped = f"{abs(value):,.2f}".translate(str.maketrans(",.", ".,"))
    sign = "-" if value < 0 and grouped != "0,00" else ""
    return f"{sign}{CURRENCY_SYMBOL}\u00a0{grouped}"


def format_percent(fraction: float, digits: int = 4) -> str:
    """Format a periodic rate fraction as a percentage with a decimal comma."""
    return f"{fraction * 100:.{digits}f}".replace(".", ",") + "%"
