from __future__ import annotations

from datetime import datetime

import pytest

import homeschool_tracker.records.controller as records_controller
import homeschool_tracker.reports.controller as reports_controller
from homeschool_tracker.container import build_container
from homeschool_tracker.main import create_app


@pytest.fixture
def container(fixed_today):
    return build_container(storage_backend="memory", today=lambda: fixed_today)


@pytest.fixture
def client(container, fixed_today, monkeypatch):
    monkeypatch.setattr(records_controller, "today_local", lambda: fixed_today)
    monkeypatch.setattr(reports_controller, "today_local", lambda: fixed_today)
    monkeypatch.setattr(container.export_service, "_now", lambda: datetime(2024, 9, 15, 14, 30))
    app = create_app(container, settings_module="homeschool_tracker.config.testing")
    return app.test_client()
