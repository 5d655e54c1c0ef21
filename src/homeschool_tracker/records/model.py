from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import NamedTuple


def _percent(part: int, whole: int) -> int:
    # Half rounds up (12.5 -> 13), unlike round()'s banker's rounding
    return int(part * 100 / whole + 0.5)


class RecordKey(NamedTuple):
    """Composite identity of an attendance record."""

    record_date: date
    child_id: str
    subject_id: str


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: child X completed subject Y on a given date.

    Presence of a completed record is the signal; a row persisted with
    `completed=False` means the same thing as no row at all.
    """

    record_date: date
    child_id: str
    subject_id: str
    completed: bool = True

    @property
    def key(self) -> RecordKey:
        return RecordKey(self.record_date, self.child_id, self.subject_id)

    def to_dict(self) -> dict:
        return {
            "date": self.record_date.strftime("%Y-%m-%d"),
            "child_id": self.child_id,
            "subject_id": self.subject_id,
            "completed": self.completed,
        }


@dataclass(frozen=True)
class ChildDayStatus:
    """Read-model for one child's checklist on one date."""

    child_id: str
    child_name: str
    completed_subject_ids: tuple[str, ...]
    total_subjects: int

    @property
    def completed_count(self) -> int:
        return len(self.completed_subject_ids)

    @property
    def progress_percent(self) -> int:
        if self.total_subjects <= 0:
            return 0
        return _percent(self.completed_count, self.total_subjects)

    @property
    def present(self) -> bool:
        return self.completed_count > 0


@dataclass(frozen=True)
class DayOverview:
    record_date: date
    children: list[ChildDayStatus]
    total_subjects: int

    @property
    def children_active(self) -> int:
        return sum(1 for c in self.children if c.present)

    @property
    def total_completed(self) -> int:
        return sum(c.completed_count for c in self.children)

    @property
    def completion_percent(self) -> int:
        cells = len(self.children) * self.total_subjects
        if cells <= 0:
            return 0
        return _percent(self.total_completed, cells)
