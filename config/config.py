import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # DB settings
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "attendance_analytics")

    # Analytics
    ATTENDANCE_TIMEZONE = os.environ.get("ATTENDANCE_TIMEZONE", "UTC")
    ATTENDANCE_WINDOW_DAYS = int(os.environ.get("ATTENDANCE_WINDOW_DAYS", "90"))
    # "empty" (all-zero heatmap) or "sampled" (random days weighted by overall %)
    FALLBACK_HEATMAP = os.environ.get("FALLBACK_HEATMAP", "empty")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Dev helpers
    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))
    AUTO_SEED_DB = bool(int(os.environ.get("AUTO_SEED_DB", "0")))


SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}

ATTENDANCE_TIMEZONE = Config.ATTENDANCE_TIMEZONE
ATTENDANCE_WINDOW_DAYS = Config.ATTENDANCE_WINDOW_DAYS
FALLBACK_HEATMAP = Config.FALLBACK_HEATMAP
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = Config.AUTO_INIT_DB
AUTO_SEED_DB = Config.AUTO_SEED_DB
