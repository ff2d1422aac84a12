"""
Environment value helpers.
"""

from __future__ import annotations

TRUTHY_VALUES = {'1', 'true', 'yes', 'on'}
FALSY_VALUES = {'0', 'false', 'no', 'off'}


def sanitize_env_value(raw: str | None, fallback: str = "") -> str:
    value = (raw if raw is not None else fallback).strip()
    if len(value) >= 2 and ((value[0] == '"' and value[-1] == '"') or (value[0] == "'" and value[-1] == "'")):
        value = value[1:-1]
    # Guard against literal escaped control chars leaked by some env providers.
    return value.replace("\\n", "").replace("\\r", "").strip()


def env_flag(raw: str | None, default: bool = False) -> bool:
    """Read a boolean switch; anything unrecognised keeps the default."""
    value = sanitize_env_value(raw).lower()
    if value in TRUTHY_VALUES:
        return True
    if value in FALSY_VALUES:
        return False
    return default


def env_int(raw: str | None, default: int) -> int:
    try:
        return int(sanitize_env_value(raw))
    except ValueError:
        return default
