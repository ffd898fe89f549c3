"""Currency utilities for subscription plan pricing.

Internal storage unit: minor units (paise, cents, kobo; 100 minor = 1 major).
Display unit: whole major units, no fractional digits, grouped and symbolised
per the display locale (en_IN by default, so ₹1,50,000 rather than ₹150,000).

Conversion chain
----------------
Major × 100 → Minor
Minor ÷ 100 → Major (truncated toward zero for display)
"""

from __future__ import annotations

from babel.numbers import format_decimal, get_currency_symbol

# ─── constants ───────────────────────────────────────────────────────────────

MINOR_PER_MAJOR: int = 100

DISPLAY_LOCALE: str = "en_IN"


# ─── conversion helpers ───────────────────────────────────────────────────────


def major_to_minor(major: float) -> int:
    """Convert major units to minor units (round half-up). 1 major = 100 minor."""
    return round(major * MINOR_PER_MAJOR)


def minor_to_major(minor: int) -> float:
    """Convert minor units to major units. 100 minor = 1 major."""
    return minor / MINOR_PER_MAJOR


def minor_to_whole_major(minor: int) -> int:
    """Whole major units, dropping any fractional remainder (toward zero)."""
    whole = abs(minor) // MINOR_PER_MAJOR
    return -whole if minor < 0 else whole


# ─── display ─────────────────────────────────────────────────────────────────


def currency_symbol(currency: str, locale: str = DISPLAY_LOCALE) -> str:
    """Locale symbol for an ISO code, or the code plus a space when it has none."""
    code = (currency or "").strip().upper()
    if not code:
        return ""
    symbol = get_currency_symbol(code, locale=locale)
    return f"{code} " if symbol == code else symbol


def format_minor_amount(
    minor: int, currency: str, locale: str = DISPLAY_LOCALE
) -> str:
    """Render minor units as a grouped, zero-decimal major amount.

    The remainder below one major unit is dropped, so 150050 INR paise
    displays as ₹1,500 and 15000000 as ₹1,50,000.
    """
    whole = minor_to_whole_major(minor)
    sign = "-" if whole < 0 else ""
    digits = format_decimal(abs(whole), locale=locale)
    return f"{sign}{currency_symbol(currency, locale)}{digits}"
