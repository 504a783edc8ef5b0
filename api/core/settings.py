"""
Environment-driven settings.
"""

from __future__ import annotations

import logging
import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def airtable_base_url() -> str:
    return os.environ.get("AIRTABLE_BASE_URL", "https://api.airtable.com/v0").strip() or "https://api.airtable.com/v0"


def airtable_api_key() -> str:
    return os.environ.get("AIRTABLE_API_KEY", "").strip()


def airtable_base_id() -> str:
    return os.environ.get("AIRTABLE_BASE_ID", "").strip()


def airtable_table() -> str:
    return os.environ.get("AIRTABLE_TABLE", "Items").strip() or "Items"


def airtable_timeout_s() -> float:
    return _env_float("AIRTABLE_TIMEOUT_S", 30.0)


def item_stats_window_minutes() -> int:
    return _env_int("ITEM_STATS_WINDOW_MIN", 60)


def log_level() -> str:
    level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    # getLevelName returns an int only for registered level names.
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
