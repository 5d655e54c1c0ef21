from __future__ import annotations

import pytest


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.rowcount = 0
        self._rows: list = []

    def execute(self, sql, params=None):
        if self._conn.error is not None:
            raise self._conn.error
        self._conn.executed.append((" ".join(sql.split()), params))
        self._rows = self._conn.results.pop(0) if self._conn.results else []
        self.rowcount = self._conn.rowcount

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, owner):
        self._owner = owner

    def cursor(self, dictionary=False):
        return FakeCursor(self._owner)

    def commit(self):
        self._owner.commits += 1

    def rollback(self):
        self._owner.rollbacks += 1

    def close(self):
        self._owner.closed += 1


class FakeConnectionFactory:
    """Stands in for DatabaseConnection; queues result sets and captures SQL."""

    def __init__(self, *results, rowcount: int = 1, error: Exception | None = None):
        self.results = list(results)
        self.rowcount = rowcount
        self.error = error
        self.connect_error: Exception | None = None
        self.executed: list[tuple[str, object]] = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = 0

    def connect(self):
        if self.connect_error is not None:
            raise self.connect_error
        return FakeConnection(self)


@pytest.fixture
def make_conn():
    return FakeConnectionFactory
