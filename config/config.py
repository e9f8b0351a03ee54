"""Defaults shared by the per-environment settings modules."""

import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


JWT_EXPIRES_HOURS = int(os.getenv("JWT_EXPIRES_HOURS", "24"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_app"),
    # connection ceiling; requests beyond it wait up to pool_timeout seconds
    "pool_size": int(os.getenv("DB_POOL_SIZE", "30")),
    "pool_timeout": float(os.getenv("DB_POOL_TIMEOUT", "60")),
}

# IANA zone used for "today" and stored check-in times; empty = server local time
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "") or None

ENFORCE_GEOFENCE = env_flag("ENFORCE_GEOFENCE", "0")
OFFICE_ADDRESS = os.getenv("OFFICE_ADDRESS", "Residencial Monte Real, La Ceiba")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", "8000"))
