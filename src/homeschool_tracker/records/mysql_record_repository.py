from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, RecordKey
from .repository import RecordRepository

_COLUMNS = "record_date, child_id, subject_id, completed"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_date=r["record_date"],
        child_id=str(r["child_id"]),
        subject_id=str(r["subject_id"]),
        completed=bool(r["completed"]),
    )


class MySQLRecordRepository(RecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, where: str, params: tuple) -> list[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE {where}
                ORDER BY record_date ASC, child_id ASC, subject_id ASC
                """,
                params,
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get(self, key: RecordKey) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE record_date=%s AND child_id=%s AND subject_id=%s
                """,
                (key.record_date, key.child_id, key.subject_id),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def put(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO attendance_records({_COLUMNS})
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE completed=VALUES(completed)
                """,
                (record.record_date, record.child_id, record.subject_id, int(record.completed)),
            )

    def delete(self, key: RecordKey) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance_records WHERE record_date=%s AND child_id=%s AND subject_id=%s",
                (key.record_date, key.child_id, key.subject_id),
            )
            return cur.rowcount > 0

    def list_by_date(self, record_date: date) -> Sequence[AttendanceRecord]:
        return self._select("record_date=%s", (record_date,))

    def list_by_date_range(self, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        return self._select("record_date BETWEEN %s AND %s", (start, end))

    def list_by_child(self, child_id: str) -> Sequence[AttendanceRecord]:
        return self._select("child_id=%s", (child_id,))

    def list_by_subject(self, subject_id: str) -> Sequence[AttendanceRecord]:
        return self._select("subject_id=%s", (subject_id,))

    def list_by_date_and_child(self, *, record_date: date, child_id: str) -> Sequence[AttendanceRecord]:
        return self._select("record_date=%s AND child_id=%s", (record_date, child_id))

    def delete_by_child(self, child_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE child_id=%s", (child_id,))
            return int(cur.rowcount or 0)

    def delete_by_subject(self, subject_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE subject_id=%s", (subject_id,))
            return int(cur.rowcount or 0)

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM attendance_records")
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def clear(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records")
