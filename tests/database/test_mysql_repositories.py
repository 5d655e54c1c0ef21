from __future__ import annotations

from datetime import date

import mysql.connector
import pytest

from homeschool_tracker.core.exceptions import StorageError
from homeschool_tracker.records.model import AttendanceRecord, RecordKey
from homeschool_tracker.records.mysql_record_repository import MySQLRecordRepository
from homeschool_tracker.roster.model import Child, Subject
from homeschool_tracker.roster.mysql_roster_repository import MySQLChildRepository, MySQLSubjectRepository
from homeschool_tracker.school_year.model import SchoolYear
from homeschool_tracker.school_year.mysql_school_year_repository import MySQLSchoolYearRepository


def test_child_repository_maps_rows_in_insertion_order(make_conn):
    conn = make_conn(
        [
            {"child_id": "child-a", "name": "Child A", "sort_order": 0},
            {"child_id": "child-b", "name": "Child B", "sort_order": 1},
        ]
    )

    children = MySQLChildRepository(conn).list_all()

    assert children == [Child("child-a", "Child A", 0), Child("child-b", "Child B", 1)]
    assert conn.executed[0][0] == "SELECT child_id, name, sort_order FROM children ORDER BY seq ASC"
    assert conn.commits == 1 and conn.closed == 1


def test_subject_repository_uses_subject_table(make_conn):
    conn = make_conn([{"subject_id": "math", "name": "Math", "sort_order": 0}])

    subject = MySQLSubjectRepository(conn).get_by_id("math")

    assert subject == Subject("math", "Math", 0)
    assert isinstance(subject, Subject)
    assert conn.executed[0] == ("SELECT subject_id, name, sort_order FROM subjects WHERE subject_id=%s", ("math",))


def test_roster_delete_reports_missing_rows(make_conn):
    conn = make_conn(rowcount=0)
    assert MySQLChildRepository(conn).delete("ghost") is False


def test_record_put_is_an_upsert(make_conn):
    conn = make_conn()

    MySQLRecordRepository(conn).put(AttendanceRecord(date(2024, 9, 3), "child-a", "math"))

    sql, params = conn.executed[0]
    assert sql.startswith("INSERT INTO attendance_records(record_date, child_id, subject_id, completed)")
    assert "ON DUPLICATE KEY UPDATE completed=VALUES(completed)" in sql
    assert params == (date(2024, 9, 3), "child-a", "math", 1)


def test_record_get_uses_composite_key(make_conn):
    conn = make_conn(
        [{"record_date": date(2024, 9, 3), "child_id": "child-a", "subject_id": "math", "completed": 0}]
    )

    record = MySQLRecordRepository(conn).get(RecordKey(date(2024, 9, 3), "child-a", "math"))

    assert record == AttendanceRecord(date(2024, 9, 3), "child-a", "math", completed=False)
    assert conn.executed[0][1] == (date(2024, 9, 3), "child-a", "math")


def test_record_range_query_is_inclusive_between(make_conn):
    conn = make_conn([])

    assert MySQLRecordRepository(conn).list_by_date_range(start=date(2024, 9, 1), end=date(2024, 9, 30)) == []

    sql, params = conn.executed[0]
    assert "WHERE record_date BETWEEN %s AND %s" in sql
    assert params == (date(2024, 9, 1), date(2024, 9, 30))


def test_record_cascade_returns_deleted_count(make_conn):
    conn = make_conn(rowcount=4)

    assert MySQLRecordRepository(conn).delete_by_subject("math") == 4
    assert conn.executed[0] == ("DELETE FROM attendance_records WHERE subject_id=%s", ("math",))


def test_school_year_round_trips_singleton_row(make_conn):
    conn = make_conn([{"start_date": date(2024, 9, 1), "end_date": date(2025, 6, 30)}])
    repo = MySQLSchoolYearRepository(conn)

    assert repo.get() == SchoolYear(date(2024, 9, 1), date(2025, 6, 30))
    repo.upsert(SchoolYear(date(2024, 8, 15), date(2025, 5, 30)))

    assert conn.executed[1][1] == ("current", date(2024, 8, 15), date(2025, 5, 30))


def test_driver_errors_become_storage_errors_and_roll_back(make_conn):
    conn = make_conn(error=mysql.connector.Error("table missing"))

    with pytest.raises(StorageError):
        MySQLRecordRepository(conn).count()
    assert conn.rollbacks == 1
    assert conn.commits == 0
    assert conn.closed == 1


def test_connect_failure_becomes_storage_error(make_conn):
    conn = make_conn()
    conn.connect_error = mysql.connector.Error("refused")

    with pytest.raises(StorageError):
        MySQLChildRepository(conn).count()
