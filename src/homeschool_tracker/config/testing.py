import os

from ..core.constants import DEFAULT_REPORT_DAYS

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "homeschool_tracker_test"),
}

DEBUG = False
TESTING = True

STORAGE_BACKEND = "memory"

AUTO_INIT_DB = False

DEFAULT_SUBJECTS = ()

REPORT_DEFAULT_DAYS = DEFAULT_REPORT_DAYS
