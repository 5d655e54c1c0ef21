import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module; development is the default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "homeschool_tracker.config.production"

    if env in {"test", "testing"}:
        return "homeschool_tracker.config.testing"

    return "homeschool_tracker.config.development"


def parse_name_list(value: str) -> tuple[str, ...]:
    """Split a comma-separated env value, dropping blanks."""
    return tuple(part.strip() for part in (value or "").split(",") if part.strip())
