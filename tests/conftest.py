from __future__ import annotations

from datetime import date, datetime

import pytest

from homeschool_tracker.reports.service import AttendanceSummaryService
from homeschool_tracker.store.backend import build_memory_backend
from homeschool_tracker.store.entity_store import EntityStore
from homeschool_tracker.store.seeding import DefaultSeedingPolicy


class CountingIds:
    """Deterministic id factory: child-1, child-2, subject-3, ..."""

    def __init__(self):
        self.n = 0

    def __call__(self, prefix: str) -> str:
        self.n += 1
        return f"{prefix}-{self.n}"


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 9, 15)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 9, 15, 14, 30)


@pytest.fixture
def backend():
    return build_memory_backend()


@pytest.fixture
def store(backend, fixed_today) -> EntityStore:
    s = EntityStore(
        backend,
        seeding=DefaultSeedingPolicy(today=lambda: fixed_today),
        id_factory=CountingIds(),
    )
    s.initialize()
    return s


@pytest.fixture
def summary_service(store) -> AttendanceSummaryService:
    return AttendanceSummaryService(store)
