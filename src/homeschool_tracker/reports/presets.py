from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..school_year.model import SchoolYear
from ..store.seeding import default_school_year


@dataclass(frozen=True)
class DateRangePreset:
    label: str
    start: date
    end: date

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "start": self.start.strftime("%Y-%m-%d"),
            "end": self.end.strftime("%Y-%m-%d"),
            "days": days_in_range(self.start, self.end),
        }


def days_in_range(start: date, end: date) -> int:
    """Inclusive day count (Sep 1 - Sep 1 is one day)."""
    return (end - start).days + 1


def last_n_days(today: date, days: int) -> tuple[date, date]:
    return today - timedelta(days=days), today


def preset_ranges(today: date, *, school_year: Optional[SchoolYear] = None) -> list[DateRangePreset]:
    """Quick picks for the reports page.

    The configured school year is used when given, otherwise the Sep 1 - Jun 30
    window starting in today's calendar year.
    """
    year = school_year or default_school_year(today)
    last_day = calendar.monthrange(today.year, today.month)[1]

    return [
        DateRangePreset("Current School Year", year.start_date, year.end_date),
        DateRangePreset("Last 30 Days", *last_n_days(today, 30)),
        DateRangePreset("Last 90 Days", *last_n_days(today, 90)),
        DateRangePreset("This Month", today.replace(day=1), today.replace(day=last_day)),
    ]
