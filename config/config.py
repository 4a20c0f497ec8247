"""Shared helpers for the per-environment settings modules."""

from __future__ import annotations

import os


def env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, "1" if default else "0").strip().lower() in {"1", "true", "yes", "on"}


def env_center(name: str) -> tuple[float, float] | None:
    # "lat,lng"; unset means the app default
    raw = os.getenv(name)
    if not raw:
        return None
    lat, lng = raw.split(",", 1)
    return float(lat), float(lng)


def db_config_from_env(default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "fieldforce_db"),
    }
