from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Sequence

from .core.exceptions import ValidationError
from .database.connection import DBConfig, DatabaseConnection
from .records.service import DailyProgressService
from .reports.export_service import ReportExportService
from .reports.service import AttendanceSummaryService
from .store.backend import StorageBackend, build_memory_backend, build_mysql_backend
from .store.entity_store import EntityStore
from .store.seeding import DefaultSeedingPolicy, subjects_from_names


@dataclass(frozen=True)
class Container:
    backend: StorageBackend

    store: EntityStore
    daily_progress_service: DailyProgressService
    summary_service: AttendanceSummaryService
    export_service: ReportExportService


def build_container(
    *,
    db_config: Optional[dict] = None,
    storage_backend: str = "mysql",
    default_subjects: Sequence[str] = (),
    today: Optional[Callable[[], date]] = None,
    backend: Optional[StorageBackend] = None,
) -> Container:
    """Wire repositories and services, then seed defaults into empty collections."""
    if backend is None:
        if storage_backend == "memory":
            backend = build_memory_backend()
        elif storage_backend == "mysql":
            if db_config is None:
                raise ValidationError("db_config is required for the mysql backend")
            backend = build_mysql_backend(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
        else:
            raise ValidationError(f"Unknown storage backend {storage_backend!r}")

    seeding_kwargs: dict = {"today": today}
    if default_subjects:
        seeding_kwargs["subjects"] = subjects_from_names(default_subjects)

    store = EntityStore(backend, seeding=DefaultSeedingPolicy(**seeding_kwargs))
    store.initialize()

    summary_service = AttendanceSummaryService(store)

    return Container(
        backend=backend,
        store=store,
        daily_progress_service=DailyProgressService(store),
        summary_service=summary_service,
        export_service=ReportExportService(store, summary_service),
    )
