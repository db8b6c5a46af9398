"""Numeric parsing and canonical number formatting."""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple

_THOUSANDS_SEPARATOR = re.compile(r"(?<=\d),(?=\d{3}(?:\D|$))")
_MIXED_NUMBER = re.compile(r"^(-?\d+)\s+(\d+)/(\d+)$")
_SIMPLE_FRACTION = re.compile(r"^(-?\d+)/(\d+)$")
_QUANTITY = re.compile(r"^(?P<amount>-?[\d.][\d\s/.,]*?)\s*(?P<unit>[^\d\s/.,-].*)$")

_MAX_FRACTION_DIGITS = 3


def parse_number(text: str) -> float:
    """Parse integers, decimals, fractions (``1/3``) and mixed numbers (``4 1/2``).

    Returns ``nan`` when the text is not numeric or a denominator is zero; callers
    decide whether that is fatal.
    """

    cleaned = _THOUSANDS_SEPARATOR.sub("", text)
    cleaned = re.sub(r"\s+", " ", cleaned.replace(",", " ")).strip()
    if not cleaned:
        return math.nan

    mixed = _MIXED_NUMBER.match(cleaned)
    if mixed:
        whole, numerator, denominator = (int(part) for part in mixed.groups())
        if denominator == 0:
            return math.nan
        return whole + numerator / denominator

    fraction = _SIMPLE_FRACTION.match(cleaned)
    if fraction:
        numerator, denominator = (int(part) for part in fraction.groups())
        if denominator == 0:
            return math.nan
        return numerator / denominator

    try:
        return float(cleaned)
    except ValueError:
        return math.nan


def format_number(value: float) -> str:
    """Render ``value`` without a needless decimal part (``3.0`` -> ``3``, ``0.3333`` -> ``0.333``)."""

    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite number {value!r}")
    if float(value).is_integer():
        return str(int(value))
    rendered = f"{value:.{_MAX_FRACTION_DIGITS}f}".rstrip("0").rstrip(".")
    if rendered in {"", "-", "-0"}:
        return "0"
    return rendered


def split_quantity(text: str) -> Optional[Tuple[str, str]]:
    """Split ``"4 1/2 cups"`` into ``("4 1/2", "cups")``; ``None`` when either part is missing."""

    match = _QUANTITY.match(text.strip())
    if not match:
        return None
    return match.group("amount").strip(), match.group("unit").strip()


__all__ = ["parse_number", "format_number", "split_quantity"]
