"""Process-local repositories.

Used for the `memory` storage backend (demo/dev runs without MySQL) and by the
test-suite. Dicts keep insertion order, which gives the stable tie-break the
roster ordering relies on.
"""
from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..records.model import AttendanceRecord, RecordKey
from ..roster.model import RosterEntry
from ..school_year.model import SchoolYear


class InMemoryRosterRepository:
    def __init__(self):
        self._items: dict[str, RosterEntry] = {}

    def list_all(self) -> Sequence[RosterEntry]:
        return list(self._items.values())

    def get_by_id(self, entry_id: str) -> Optional[RosterEntry]:
        return self._items.get(entry_id)

    def insert(self, entry: RosterEntry) -> None:
        self._items[entry.id] = entry

    def update(self, entry: RosterEntry) -> bool:
        if entry.id not in self._items:
            return False
        self._items[entry.id] = entry
        return True

    def delete(self, entry_id: str) -> bool:
        return self._items.pop(entry_id, None) is not None

    def count(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()


class InMemoryRecordRepository:
    def __init__(self):
        self._by_key: dict[RecordKey, AttendanceRecord] = {}

    def _where(self, predicate) -> list[AttendanceRecord]:
        items = [r for r in self._by_key.values() if predicate(r)]
        items.sort(key=lambda r: (r.record_date, r.child_id, r.subject_id))
        return items

    def get(self, key: RecordKey) -> Optional[AttendanceRecord]:
        return self._by_key.get(key)

    def put(self, record: AttendanceRecord) -> None:
        self._by_key[record.key] = record

    def delete(self, key: RecordKey) -> bool:
        return self._by_key.pop(key, None) is not None

    def list_by_date(self, record_date: date) -> Sequence[AttendanceRecord]:
        return self._where(lambda r: r.record_date == record_date)

    def list_by_date_range(self, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        return self._where(lambda r: start <= r.record_date <= end)

    def list_by_child(self, child_id: str) -> Sequence[AttendanceRecord]:
        return self._where(lambda r: r.child_id == child_id)

    def list_by_subject(self, subject_id: str) -> Sequence[AttendanceRecord]:
        return self._where(lambda r: r.subject_id == subject_id)

    def list_by_date_and_child(self, *, record_date: date, child_id: str) -> Sequence[AttendanceRecord]:
        return self._where(lambda r: r.record_date == record_date and r.child_id == child_id)

    def delete_by_child(self, child_id: str) -> int:
        doomed = [k for k in self._by_key if k.child_id == child_id]
        for k in doomed:
            del self._by_key[k]
        return len(doomed)

    def delete_by_subject(self, subject_id: str) -> int:
        doomed = [k for k in self._by_key if k.subject_id == subject_id]
        for k in doomed:
            del self._by_key[k]
        return len(doomed)

    def count(self) -> int:
        return len(self._by_key)

    def clear(self) -> None:
        self._by_key.clear()


class InMemorySchoolYearRepository:
    def __init__(self):
        self._current: Optional[SchoolYear] = None

    def get(self) -> Optional[SchoolYear]:
        return self._current

    def upsert(self, school_year: SchoolYear) -> None:
        self._current = school_year

    def count(self) -> int:
        return 0 if self._current is None else 1

    def clear(self) -> None:
        self._current = None
