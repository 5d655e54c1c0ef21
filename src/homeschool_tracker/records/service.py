from __future__ import annotations

from ..common.datetime_utils import DateLike, to_date
from ..store.entity_store import EntityStore
from .model import ChildDayStatus, DayOverview


class DailyProgressService:
    """Use case: the per-day checklist shown on the dashboard."""

    def __init__(self, store: EntityStore):
        self._store = store

    def day_overview(self, record_date: DateLike) -> DayOverview:
        day = to_date(record_date)
        children = self._store.list_children()
        subjects = self._store.list_subjects()
        subject_ids = [s.id for s in subjects]

        done: dict[str, set[str]] = {c.id: set() for c in children}
        for r in self._store.get_records_by_date(day):
            if r.completed and r.child_id in done:
                done[r.child_id].add(r.subject_id)

        statuses = [
            ChildDayStatus(
                child_id=c.id,
                child_name=c.name,
                # subject listing order, live subjects only
                completed_subject_ids=tuple(sid for sid in subject_ids if sid in done[c.id]),
                total_subjects=len(subjects),
            )
            for c in children
        ]
        return DayOverview(record_date=day, children=statuses, total_subjects=len(subjects))

    def toggle(self, record_date: DateLike, child_id: str, subject_id: str) -> bool:
        return self._store.toggle_record(record_date, child_id, subject_id)
