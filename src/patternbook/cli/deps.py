"""Container lookup shared by the CLI commands."""

from __future__ import annotations

from functools import lru_cache

from patternbook.config import AppSettings
from patternbook.container import ServiceContainer, build_container


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """Build the container once per process from ``PATTERNBOOK_*`` variables."""

    return build_container(AppSettings.from_env())


def reset_container() -> None:
    """Forget the cached container so changed environment variables are re-read."""

    get_container.cache_clear()


__all__ = ["get_container", "reset_container"]
