"""Helper functions exposed to every template as filters and globals."""

from __future__ import annotations

import calendar
from collections.abc import Callable
from datetime import date, datetime
from typing import Any


def format_time(value: date | datetime, fmt: str | None = None) -> str:
    if fmt is None:
        return f"{value:%B} {value.day}, {value.year}"
    return value.strftime(fmt)


def month_name(month: int) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")
    return calendar.month_name[month]


def number_with_delimiter(value: int, delimiter: str = ",") -> str:
    return f"{value:,}".replace(",", delimiter)


def round_to_string(value: float) -> str:
    """Drop the decimal part for values of 10 and above, keep one digit below."""

    if value < 10:
        return f"{value:.1f}"
    return f"{value:.0f}"


FUNC_MAP: dict[str, Callable[..., Any]] = {
    "format_time": format_time,
    "month_name": month_name,
    "number_with_delimiter": number_with_delimiter,
    "round_to_string": round_to_string,
}
