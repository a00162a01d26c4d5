"""
Environment value helpers.
"""

from __future__ import annotations

import os
from typing import Iterable, List

TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def sanitize_env_value(raw: str | None, fallback: str = "") -> str:
    value = (raw if raw is not None else fallback).strip()
    if len(value) >= 2 and ((value[0] == '"' and value[-1] == '"') or (value[0] == "'" and value[-1] == "'")):
        value = value[1:-1]
    # Some env providers leak literal escaped newlines into values.
    return value.replace("\\n", "").replace("\\r", "").strip()


def env_str(name: str, default: str = "") -> str:
    return sanitize_env_value(os.getenv(name), default)


def env_int(name: str, default: int) -> int:
    value = env_str(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def env_flag(name: str, default: bool = False) -> bool:
    value = env_str(name).lower()
    if not value:
        return default
    return value in TRUE_VALUES


def env_list(name: str, default: Iterable[str] = ()) -> List[str]:
    """Comma-separated list; falls back to ``default`` when unset or empty."""
    items = [item.strip() for item in env_str(name).split(',') if item.strip()]
    return items or list(default)
