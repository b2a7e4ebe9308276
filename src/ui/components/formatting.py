"""
Display strings for stat widgets: counts, compact money amounts, percentages
and tab titles.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

EMPTY_VALUE = "–"

COMPACT_SUFFIXES = (
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def _compact(amount: float) -> Tuple[float, str]:
    for threshold, suffix in COMPACT_SUFFIXES:
        if abs(amount) >= threshold:
            return amount / threshold, suffix
    return amount, ""


def format_money(amount: Optional[float], symbol: str = "$") -> str:
    """17800 -> "$17.8K". Amounts under a thousand show whole units."""
    if amount is None:
        return EMPTY_VALUE
    scaled, suffix = _compact(float(amount))
    digits = f"{scaled:,.1f}" if suffix else f"{scaled:,.0f}"
    return f"{symbol}{digits}{suffix}"


def format_percent(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return EMPTY_VALUE
    return f"{value:.{decimals}f}%"


def format_stat(value: Union[str, int, float, None]) -> str:
    """Counts get thousands separators; preformatted strings pass through."""
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, str):
        return value
    return f"{value:,.0f}"


def title_from_id(tab_id: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in tab_id.split("-"))
