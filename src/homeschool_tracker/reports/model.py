from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from ..roster.model import Subject


@dataclass(frozen=True)
class ChildSummary:
    """Aggregated attendance for one child over a date range.

    `subject_totals` holds an entry for every live subject, zero included.
    """

    child_id: str
    child_name: str
    total_days: int
    subject_totals: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "child_id": self.child_id,
            "child_name": self.child_name,
            "total_days": self.total_days,
            "subject_totals": dict(self.subject_totals),
        }


@dataclass(frozen=True)
class SubjectSummaryRow:
    subject_id: str
    subject_name: str
    counts: list[int]
    total: int


@dataclass(frozen=True)
class SubjectSummary:
    child_names: list[str]
    rows: list[SubjectSummaryRow]
    total_school_days: int
    average_days_per_child: float


@dataclass(frozen=True)
class ReportDocument:
    """Everything an exporter needs; exporters do layout only."""

    title: str
    start_date: date
    end_date: date
    exported_at: datetime
    summaries: list[ChildSummary]
    subjects: list[Subject]
