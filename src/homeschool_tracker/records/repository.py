from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, RecordKey


class RecordRepository(Protocol):
    def get(self, key: RecordKey) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def put(self, record: AttendanceRecord) -> None:
        """Insert or replace the record stored under `record.key`."""

        raise NotImplementedError

    def delete(self, key: RecordKey) -> bool:
        raise NotImplementedError

    def list_by_date(self, record_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_date_range(self, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        """Records with start <= date <= end (inclusive on both ends)."""

        raise NotImplementedError

    def list_by_child(self, child_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_subject(self, subject_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_date_and_child(self, *, record_date: date, child_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def delete_by_child(self, child_id: str) -> int:
        raise NotImplementedError

    def delete_by_subject(self, subject_id: str) -> int:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError
