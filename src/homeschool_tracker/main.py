from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_REPORT_DAYS
from .database.bootstrap import apply_schema, list_tables
from .records.controller import register as register_records
from .reports.controller import register as register_reports
from .roster.controller import register as register_roster
from .school_year.controller import register as register_school_year

logger = logging.getLogger(__name__)

def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["REPORT_DEFAULT_DAYS"] = int(getattr(settings, "REPORT_DEFAULT_DAYS", DEFAULT_REPORT_DAYS))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        storage_backend = str(getattr(settings, "STORAGE_BACKEND", "mysql"))
        db_config = getattr(settings, "DB_CONFIG", None)
        logger.info("settings=%s backend=%s", settings_module, storage_backend)

        if storage_backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            storage_backend=storage_backend,
            default_subjects=getattr(settings, "DEFAULT_SUBJECTS", ()),
        )

    register_roster(app, container)
    register_records(app, container)
    register_school_year(app, container)
    register_reports(app, container)

    return app
