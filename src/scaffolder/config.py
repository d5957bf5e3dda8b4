from __future__ import annotations

import logging
import os
from pathlib import Path

_DEFAULT_MAX_WORKERS = 4


def _env_str(name: str) -> str:
    return str(os.environ.get(name) or "").strip()


def _env_int(name: str, *, default: int) -> int:
    raw = _env_str(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def scaffold_root_dir() -> Path:
    # Targets are relative; resolve them against the working directory unless overridden.
    raw = _env_str("SCAFFOLD_ROOT_DIR")
    return Path(raw) if raw else Path.cwd()


def scaffold_max_workers() -> int:
    return max(1, _env_int("SCAFFOLD_MAX_WORKERS", default=_DEFAULT_MAX_WORKERS))


def scaffold_log_level() -> int:
    name = (_env_str("SCAFFOLD_LOG_LEVEL") or "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
