from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Child, RosterEntry, Subject
from .repository import RosterRepository


class MySQLRosterRepository(RosterRepository):
    """Children and subjects share one table shape; subclasses pick the table."""

    table = ""
    id_column = ""
    entity_cls: type[RosterEntry] = RosterEntry

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _to_entity(self, r: dict) -> RosterEntry:
        return self.entity_cls(id=str(r[self.id_column]), name=r["name"], order=int(r["sort_order"]))

    def list_all(self) -> Sequence[RosterEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {self.id_column}, name, sort_order FROM {self.table} ORDER BY seq ASC")
            return [self._to_entity(r) for r in fetchall(cur)]

    def get_by_id(self, entry_id: str) -> Optional[RosterEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {self.id_column}, name, sort_order FROM {self.table} WHERE {self.id_column}=%s",
                (entry_id,),
            )
            r = fetchone(cur)
            return self._to_entity(r) if r else None

    def insert(self, entry: RosterEntry) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO {self.table}({self.id_column}, name, sort_order) VALUES(%s,%s,%s)",
                (entry.id, entry.name, int(entry.order)),
            )

    def update(self, entry: RosterEntry) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE {self.table} SET name=%s, sort_order=%s WHERE {self.id_column}=%s",
                (entry.name, int(entry.order), entry.id),
            )
            return cur.rowcount > 0

    def delete(self, entry_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self.table} WHERE {self.id_column}=%s", (entry_id,))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS n FROM {self.table}")
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def clear(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self.table}")


class MySQLChildRepository(MySQLRosterRepository):
    table = "children"
    id_column = "child_id"
    entity_cls = Child


class MySQLSubjectRepository(MySQLRosterRepository):
    table = "subjects"
    id_column = "subject_id"
    entity_cls = Subject
