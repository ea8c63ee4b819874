"""Runtime settings read from environment variables.

The task file location is fixed (see storage.TASK_FILE); only terminal
behaviour and log verbosity are configurable.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    """
    Env vars:
    - TODO_ALT_SCREEN: use the terminal's alternate screen buffer (default on;
      0/false/no/off disables)
    - TODO_LOG_LEVEL: logging level name written to stderr (default WARNING)
    """

    alt_screen: bool
    log_level: int


def truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def _parse_log_level(value: Optional[str]) -> int:
    name = (value or "").strip().upper()
    if name not in _LOG_LEVELS:
        return logging.WARNING
    return getattr(logging, name)


def get_settings() -> Settings:
    return Settings(
        alt_screen=truthy_env(os.getenv("TODO_ALT_SCREEN"), True),
        log_level=_parse_log_level(os.getenv("TODO_LOG_LEVEL")),
    )
