from __future__ import annotations

from homeschool_tracker.database.bootstrap import SCHEMA_PATH, _strip_comments, _strip_create_db_and_use, iter_sql_statements


def test_iter_sql_statements_respects_quotes():
    sql = "INSERT INTO t VALUES('a;b'); SELECT \"x;y\";\n\nSELECT 1"
    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES('a;b')", 'SELECT "x;y"', "SELECT 1"]


def test_create_database_and_use_lines_are_dropped():
    sql = "CREATE DATABASE foo;\nUSE foo;\n-- comment; here\nCREATE TABLE t (id INT);"
    cleaned = _strip_create_db_and_use(_strip_comments(sql))
    assert list(iter_sql_statements(cleaned)) == ["CREATE TABLE t (id INT)"]


def test_bundled_schema_creates_every_table():
    sql = _strip_create_db_and_use(_strip_comments(SCHEMA_PATH.read_text(encoding="utf-8")))
    statements = list(iter_sql_statements(sql))

    for table in ("children", "subjects", "attendance_records", "school_year"):
        assert any(f"CREATE TABLE IF NOT EXISTS {table}" in s for s in statements), table
