# This file collects small formatting helpers used across dashboard pages.
# It exists so prices, metrics, and counts read the same way on every card and chart caption.
# The functions return plain strings that Streamlit can display directly.

from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"[^0-9]")


def digits_only(value: str | None) -> str:
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)


def format_price(value: float | int | None) -> str:
    if value is None:
        return "-"
    return f"${float(value):,.2f}"


def format_currency_metric(value: float | int | None) -> str:
    return format_price(value)


def format_r2(value: float | int | None) -> str:
    if value is None:
        return "-"
    return f"{float(value):.4f}"


def format_count(value: int | float | None) -> str:
    if value is None:
        return "0"
    return f"{int(value):,}"


def format_miles(value: int | float | None) -> str:
    if value is None:
        return "-"
    return f"{int(value):,} miles"
