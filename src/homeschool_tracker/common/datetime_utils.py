from __future__ import annotations

from datetime import date, datetime
from typing import Union

from ..core.exceptions import ValidationError

DateLike = Union[date, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_date(value: DateLike, field_name: str = "date") -> date:
    """Normalize a date or ISO string, raising ValidationError on bad input."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be an ISO date (YYYY-MM-DD)")
    try:
        return parse_iso_date(value.strip())
    except ValueError as e:
        raise ValidationError(f"{field_name} must be an ISO date (YYYY-MM-DD)") from e


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def format_display_date(value: date) -> str:
    """Format like 'Sep 03, 2024' for printed reports."""
    return value.strftime("%b %d, %Y")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def now_local() -> datetime:
    return datetime.now()
