from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_RECURSION_LIMIT = 10_000
_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_recursion_limit() -> int:
    # Never below the interpreter's usual default
    return max(int_from_env('NANO_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT), 1000)


def get_log_level() -> str:
    raw = (os.environ.get('NANO_LOG_LEVEL') or '').strip().upper()
    # getLevelName maps known names to ints and unknown ones to "Level X"
    if raw and isinstance(logging.getLevelName(raw), int):
        return raw
    return _DEFAULT_LOG_LEVEL
