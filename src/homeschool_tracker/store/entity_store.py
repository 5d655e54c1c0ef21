from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import DateLike, to_date
from ..common.validators import require_date_order, require_int, require_non_empty
from ..core.constants import CHILD_ID_PREFIX, SUBJECT_ID_PREFIX
from ..core.exceptions import NotFoundError
from ..records.model import AttendanceRecord, RecordKey
from ..roster.model import Child, RosterEntry, Subject
from ..roster.repository import RosterRepository
from ..school_year.model import SchoolYear
from .backend import StorageBackend
from .ids import TimeBasedIdFactory
from .seeding import DefaultSeedingPolicy, SeedResult

logger = logging.getLogger(__name__)


def _sorted_by_order(entries: Sequence[RosterEntry]) -> list:
    # sorted() is stable: equal orders keep the repository's insertion order.
    return sorted(entries, key=lambda e: e.order)


class EntityStore:
    """Single source of truth for children, subjects, records and the school year.

    All mutations go straight to the backend repositories; there is no cache.
    Deleting a child or subject removes every record that references it.
    """

    def __init__(
        self,
        backend: StorageBackend,
        *,
        seeding: Optional[DefaultSeedingPolicy] = None,
        id_factory: Optional[Callable[[str], str]] = None,
    ):
        self._backend = backend
        self._seeding = seeding or DefaultSeedingPolicy()
        self._new_id = id_factory or TimeBasedIdFactory()

    def initialize(self) -> SeedResult:
        return self.ensure_defaults()

    def ensure_defaults(self) -> SeedResult:
        return self._seeding.ensure_defaults(self._backend)

    # ----- children / subjects -----

    def list_children(self) -> list[Child]:
        return _sorted_by_order(self._backend.children.list_all())

    def list_subjects(self) -> list[Subject]:
        return _sorted_by_order(self._backend.subjects.list_all())

    def get_child(self, child_id: str) -> Child:
        child = self._backend.children.get_by_id(child_id)
        if not child:
            raise NotFoundError(f"Child {child_id!r} does not exist")
        return child

    def get_subject(self, subject_id: str) -> Subject:
        subject = self._backend.subjects.get_by_id(subject_id)
        if not subject:
            raise NotFoundError(f"Subject {subject_id!r} does not exist")
        return subject

    def add_child(self, name: str) -> str:
        return self._add(self._backend.children, Child, CHILD_ID_PREFIX, require_non_empty(name, "Child name"))

    def add_subject(self, name: str) -> str:
        return self._add(self._backend.subjects, Subject, SUBJECT_ID_PREFIX, require_non_empty(name, "Subject name"))

    def update_child(self, child: Child) -> None:
        self._update(self._backend.children, Child, child, label="Child")

    def update_subject(self, subject: Subject) -> None:
        self._update(self._backend.subjects, Subject, subject, label="Subject")

    def delete_child(self, child_id: str) -> None:
        if not self._backend.children.delete(child_id):
            raise NotFoundError(f"Child {child_id!r} does not exist")
        removed = self._backend.records.delete_by_child(child_id)
        logger.info("Deleted child %s and %d record(s)", child_id, removed)

    def delete_subject(self, subject_id: str) -> None:
        if not self._backend.subjects.delete(subject_id):
            raise NotFoundError(f"Subject {subject_id!r} does not exist")
        removed = self._backend.records.delete_by_subject(subject_id)
        logger.info("Deleted subject %s and %d record(s)", subject_id, removed)

    def _add(self, repo: RosterRepository, entity_cls, prefix: str, name: str) -> str:
        entry_id = self._new_id(prefix)
        while repo.get_by_id(entry_id) is not None:
            entry_id = self._new_id(prefix)
        repo.insert(entity_cls(id=entry_id, name=name, order=repo.count()))
        logger.info("Added %s %s (%s)", prefix, entry_id, name)
        return entry_id

    def _update(self, repo: RosterRepository, entity_cls, entry: RosterEntry, *, label: str) -> None:
        name = require_non_empty(entry.name, f"{label} name")
        order = require_int(entry.order, f"{label} order")
        if repo.get_by_id(entry.id) is None:
            raise NotFoundError(f"{label} {entry.id!r} does not exist")
        # Existence is checked above; MySQL reports 0 affected rows for a no-op update.
        repo.update(entity_cls(id=entry.id, name=name, order=order))

    # ----- records -----

    def get_records_by_date(self, record_date: DateLike) -> list[AttendanceRecord]:
        return list(self._backend.records.list_by_date(to_date(record_date)))

    def get_records_by_date_range(self, start: DateLike, end: DateLike) -> list[AttendanceRecord]:
        start_d = to_date(start, "start")
        end_d = to_date(end, "end")
        require_date_order(start_d, end_d)
        return list(self._backend.records.list_by_date_range(start=start_d, end=end_d))

    def get_records_by_child(self, child_id: str) -> list[AttendanceRecord]:
        return list(self._backend.records.list_by_child(child_id))

    def get_records_by_subject(self, subject_id: str) -> list[AttendanceRecord]:
        return list(self._backend.records.list_by_subject(subject_id))

    def get_records_by_date_and_child(self, record_date: DateLike, child_id: str) -> list[AttendanceRecord]:
        return list(self._backend.records.list_by_date_and_child(record_date=to_date(record_date), child_id=child_id))

    def is_record_completed(self, record_date: DateLike, child_id: str, subject_id: str) -> bool:
        record = self._backend.records.get(RecordKey(to_date(record_date), child_id, subject_id))
        return bool(record and record.completed)

    def toggle_record(self, record_date: DateLike, child_id: str, subject_id: str) -> bool:
        """Flip completion for (date, child, subject) and return the new state.

        Storage errors from the existence check propagate; nothing is written then.
        """
        key = RecordKey(to_date(record_date), child_id, subject_id)
        self.get_child(child_id)
        self.get_subject(subject_id)

        existing = self._backend.records.get(key)
        if existing is not None and existing.completed:
            self._backend.records.delete(key)
            logger.debug("Toggled %s -> not completed", key)
            return False

        # A stored completed=False row counts as absent and is overwritten.
        self._backend.records.put(AttendanceRecord(*key, completed=True))
        logger.debug("Toggled %s -> completed", key)
        return True

    # ----- school year -----

    def get_school_year(self) -> Optional[SchoolYear]:
        return self._backend.school_year.get()

    def update_school_year(self, school_year: SchoolYear) -> None:
        start = to_date(school_year.start_date, "start_date")
        end = to_date(school_year.end_date, "end_date")
        require_date_order(start, end)
        self._backend.school_year.upsert(SchoolYear(start_date=start, end_date=end))

    # ----- maintenance -----

    def clear(self) -> SeedResult:
        """Remove everything, then re-seed so the store is never left empty."""
        self._backend.records.clear()
        self._backend.children.clear()
        self._backend.subjects.clear()
        self._backend.school_year.clear()
        logger.info("Cleared all data")
        return self.ensure_defaults()
