from __future__ import annotations

from dataclasses import dataclass

from ..database.connection import DatabaseConnection
from ..records.mysql_record_repository import MySQLRecordRepository
from ..records.repository import RecordRepository
from ..roster.mysql_roster_repository import MySQLChildRepository, MySQLSubjectRepository
from ..roster.repository import RosterRepository
from ..school_year.mysql_school_year_repository import MySQLSchoolYearRepository
from ..school_year.repository import SchoolYearRepository
from .memory import InMemoryRecordRepository, InMemoryRosterRepository, InMemorySchoolYearRepository


@dataclass(frozen=True)
class StorageBackend:
    """The four persisted collections the store reads and writes."""

    children: RosterRepository
    subjects: RosterRepository
    records: RecordRepository
    school_year: SchoolYearRepository


def build_mysql_backend(conn: DatabaseConnection) -> StorageBackend:
    return StorageBackend(
        children=MySQLChildRepository(conn),
        subjects=MySQLSubjectRepository(conn),
        records=MySQLRecordRepository(conn),
        school_year=MySQLSchoolYearRepository(conn),
    )


def build_memory_backend() -> StorageBackend:
    return StorageBackend(
        children=InMemoryRosterRepository(),
        subjects=InMemoryRosterRepository(),
        records=InMemoryRecordRepository(),
        school_year=InMemorySchoolYearRepository(),
    )
