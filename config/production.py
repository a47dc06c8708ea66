import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_db"),
    "connection_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "10")),
}

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "1")))

BURNOUT_DEFAULT_PERIOD_DAYS = int(os.getenv("BURNOUT_DEFAULT_PERIOD_DAYS", "30"))
BURNOUT_MAX_PERIOD_DAYS = int(os.getenv("BURNOUT_MAX_PERIOD_DAYS", "3650"))
BURNOUT_MAX_WORKERS = int(os.getenv("BURNOUT_MAX_WORKERS", "4"))
