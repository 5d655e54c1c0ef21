from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import DateLike, to_date
from ..common.validators import require_date_order
from ..roster.model import Subject
from ..store.entity_store import EntityStore
from .model import ChildSummary, SubjectSummary, SubjectSummaryRow


class AttendanceSummaryService:
    """Use case: fold a date range of records into per-child / per-subject totals."""

    def __init__(self, store: EntityStore):
        self._store = store

    def summarize(self, start: DateLike, end: DateLike) -> list[ChildSummary]:
        """One ChildSummary per live child, in child order.

        `total_days` counts distinct dates with any completed subject; records
        pointing at children or subjects that no longer exist are skipped.
        """
        start_d = to_date(start, "start")
        end_d = to_date(end, "end")
        require_date_order(start_d, end_d)

        records = self._store.get_records_by_date_range(start_d, end_d)
        children = self._store.list_children()
        subjects = self._store.list_subjects()

        totals: dict[str, dict[str, int]] = {c.id: {s.id: 0 for s in subjects} for c in children}
        attended: dict[str, set] = {c.id: set() for c in children}

        for r in records:
            if not r.completed:
                continue
            child_totals = totals.get(r.child_id)
            if child_totals is None or r.subject_id not in child_totals:
                continue
            child_totals[r.subject_id] += 1
            attended[r.child_id].add(r.record_date)

        return [
            ChildSummary(
                child_id=c.id,
                child_name=c.name,
                total_days=len(attended[c.id]),
                subject_totals=totals[c.id],
            )
            for c in children
        ]


def build_subject_summary(summaries: Sequence[ChildSummary], subjects: Sequence[Subject]) -> SubjectSummary:
    """Pivot child summaries into one row per subject (counts per child + total)."""
    rows: list[SubjectSummaryRow] = []
    for s in subjects:
        counts = [int(cs.subject_totals.get(s.id, 0)) for cs in summaries]
        rows.append(SubjectSummaryRow(subject_id=s.id, subject_name=s.name, counts=counts, total=sum(counts)))

    total_days = sum(cs.total_days for cs in summaries)
    average = total_days / len(summaries) if summaries else 0.0

    return SubjectSummary(
        child_names=[cs.child_name for cs in summaries],
        rows=rows,
        total_school_days=total_days,
        average_days_per_child=average,
    )
