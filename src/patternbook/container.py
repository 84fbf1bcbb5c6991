"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from patternbook.config import AppSettings
from patternbook.domain import HotDog
from patternbook.prototypes import PrototypeRegistry, default_registry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates the settings and services shared by CLI commands."""

    settings: AppSettings
    prototype_registry: PrototypeRegistry


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    # Process-wide switch read by every HotDog at creation.
    HotDog.echo_construction = resolved_settings.echo_construction

    registry = default_registry()
    logger.debug("Registered prototypes: %s", ", ".join(registry.names()))

    return ServiceContainer(
        settings=resolved_settings,
        prototype_registry=registry,
    )


__all__ = ["ServiceContainer", "build_container"]
