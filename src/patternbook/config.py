"""Lightweight application configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if level not in logging.getLevelNamesMapping():
        logger.warning("Ignoring unknown %s=%r; using %s", name, raw, default)
        return default
    return level


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables.

    Unknown log levels fall back to the default rather than failing every command.
    """

    environment: str = "development"
    log_level: str = "WARNING"
    echo_construction: bool = True
    default_bread: str = "plain"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("PATTERNBOOK_ENV", cls.environment),
            log_level=_env_log_level("PATTERNBOOK_LOG_LEVEL", cls.log_level),
            echo_construction=_env_bool("PATTERNBOOK_ECHO_CONSTRUCTION", True),
            default_bread=os.getenv("PATTERNBOOK_DEFAULT_BREAD", cls.default_bread),
        )


__all__ = ["AppSettings"]
