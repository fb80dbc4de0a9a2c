"""Locale-aware rendering of engine outputs."""

from __future__ import annotations

import math
from typing import Optional

CURRENCY_SYMBOLS = {"EUR": "€", "USD": "$", "GBP": "£"}

# (thousands separator, decimal separator, symbol after amount)
_LOCALES = {
    "en": (",", ".", False),
    "nl": (".", ",", False),
    "de": (".", ",", True),
}


def _locale(locale: str) -> tuple[str, str, bool]:
    key = locale.split("-")[0].split("_")[0].lower()
    if key not in _LOCALES:
        raise ValueError(f"Unsupported locale {locale!r}; choose from {sorted(_LOCALES)}")
    return _LOCALES[key]


def _finite(value: Optional[float]) -> float:
    if value is None or not math.isfinite(value):
        return 0.0
    return value


def _group(value: float, decimals: int, locale: str) -> str:
    thousands, decimal, _ = _locale(locale)
    rounded = round(value, decimals)
    text = f"{abs(rounded):,.{decimals}f}"
    text = text.translate(str.maketrans({",": thousands, ".": decimal}))
    return f"-{text}" if rounded < 0 else text


def format_number(value: Optional[float], locale: str = "en", decimals: int = 0) -> str:
    """1234567 -> '1,234,567' (en) or '1.234.567' (nl/de)."""
    return _group(_finite(value), decimals, locale)


def format_currency(
    value: Optional[float],
    currency: str = "EUR",
    locale: str = "en",
    decimals: int = 0,
) -> str:
    """12500 -> '€12,500' (en), '€ 12.500' (nl) or '12.500 €' (de)."""
    amount = _finite(value)
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), currency.upper())
    body = _group(abs(amount), decimals, locale)
    sign = "-" if round(amount, decimals) < 0 else ""
    _, _, symbol_after = _locale(locale)
    if symbol_after:
        return f"{sign}{body} {symbol}"
    if locale.lower().startswith("nl"):
        return f"{symbol} {sign}{body}"
    return f"{sign}{symbol}{body}"


def format_percentage(value: Optional[float], decimals: int = 0) -> str:
    """76.67 -> '77%'."""
    return f"{round(_finite(value), decimals):.{decimals}f}%"


def format_ratio(value: Optional[float], decimals: int = 1) -> str:
    """4.2 -> '4.2:1'."""
    return f"{_finite(value):.{decimals}f}:1"


def format_months(value: Optional[float], not_applicable: str = "n/a") -> str:
    """Break-even months; None (no break-even) renders as ``not_applicable``."""
    if value is None or not math.isfinite(value):
        return not_applicable
    if value < 0.05:
        return "immediate"
    unit = "month" if value == 1 else "months"
    return f"{value:.1f} {unit}"
