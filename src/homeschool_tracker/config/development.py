import os

from ..core.constants import DEFAULT_REPORT_DAYS
from . import parse_name_list

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "homeschool_tracker"),
}

DEBUG = True

# "mysql" (durable) or "memory" (process-local, for demos)
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql").lower()

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Optional override of the seeded subject list, e.g. "Math,Reading,Art"
DEFAULT_SUBJECTS = parse_name_list(os.getenv("HST_DEFAULT_SUBJECTS", ""))

REPORT_DEFAULT_DAYS = int(os.getenv("REPORT_DEFAULT_DAYS", str(DEFAULT_REPORT_DAYS)))
