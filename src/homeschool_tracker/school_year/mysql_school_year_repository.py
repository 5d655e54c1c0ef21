from __future__ import annotations

from typing import Optional

from ..core.constants import SCHOOL_YEAR_KEY
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import SchoolYear
from .repository import SchoolYearRepository


class MySQLSchoolYearRepository(SchoolYearRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[SchoolYear]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT start_date, end_date FROM school_year WHERE year_key=%s", (SCHOOL_YEAR_KEY,))
            r = fetchone(cur)
            if not r:
                return None
            return SchoolYear(start_date=r["start_date"], end_date=r["end_date"])

    def upsert(self, school_year: SchoolYear) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO school_year(year_key, start_date, end_date)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE start_date=VALUES(start_date), end_date=VALUES(end_date)
                """,
                (SCHOOL_YEAR_KEY, school_year.start_date, school_year.end_date),
            )

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM school_year")
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def clear(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM school_year")
