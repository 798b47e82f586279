from __future__ import annotations
import logging
import os

_FALSY = {'0', 'false', 'no', 'off', ''}

# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSY


def get_log_level() -> int:
    raw = os.environ.get('GLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns 'Level X' for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_print_readably() -> bool:
    return flag_from_env('GLISP_PRINT_READABLY', True)
