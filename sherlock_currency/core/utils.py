"""Utility helpers for Sherlock Currency.

Normalisation of currency codes and fixed-precision number formatting.
"""

from __future__ import annotations

AMOUNT_DECIMALS = 2
RATE_DECIMALS = 6


def normalize_code(code: str) -> str:
    """Normalize currency code to uppercase trimmed string."""
    return (code or "").strip().upper()


def same_currency(a: str, b: str) -> bool:
    return normalize_code(a) == normalize_code(b)


def compute_value(amount: float, rate: float) -> float:
    """Return amount * rate (helper for conversions)."""
    return float(amount) * float(rate)


def format_amount(value: float) -> str:
    """Format monetary value with two decimals and no grouping."""
    return f"{float(value):.{AMOUNT_DECIMALS}f}"


def format_rate(value: float) -> str:
    return f"{float(value):.{RATE_DECIMALS}f}"
