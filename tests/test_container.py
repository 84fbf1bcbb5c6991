from __future__ import annotations

import pytest

from patternbook.config import AppSettings
from patternbook.container import ServiceContainer, build_container
from patternbook.domain import HotDog
from patternbook.prototypes import BENCH


def test_build_container_wires_registry_and_echo(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(HotDog, "echo_construction", True)
    settings = AppSettings(environment="test", echo_construction=False)

    container = build_container(settings)

    assert container.settings is settings
    assert BENCH in container.prototype_registry
    assert HotDog.echo_construction is False


def test_container_holds_only_settings_and_registry() -> None:
    container = build_container(AppSettings(environment="test"))

    assert set(ServiceContainer.__slots__) == {"settings", "prototype_registry"}
    assert container.prototype_registry.names()
