from __future__ import annotations

import importlib

from dotenv import load_dotenv

from homeschool_tracker.config import get_settings_module
from homeschool_tracker.container import build_container


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    container = build_container(
        db_config=db_config,
        storage_backend="mysql",
        default_subjects=getattr(settings, "DEFAULT_SUBJECTS", ()),
    )
    store = container.store

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(children={len(store.list_children())}, subjects={len(store.list_subjects())})"
    )


if __name__ == "__main__":
    main()
