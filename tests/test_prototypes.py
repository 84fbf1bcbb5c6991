from __future__ import annotations

import pytest

from patternbook.domain import PrototypeNotFoundError, Workout
from patternbook.prototypes import (
    BENCH,
    INCLINE_BENCH,
    WORKOUT,
    PrototypeRegistry,
    default_registry,
)


def test_default_registry_mirrors_illustration() -> None:
    registry = default_registry()

    assert registry.names() == (WORKOUT, BENCH, INCLINE_BENCH)
    assert registry.get(WORKOUT).name is None
    assert registry.get(BENCH).name == "barbell bench"
    incline = registry.get(INCLINE_BENCH)
    assert incline.name == "barbell bench"
    assert incline.incline is True


def test_clone_applies_overlay_and_keeps_prototype() -> None:
    registry = default_registry()
    clone = registry.clone(BENCH, notes=("5x5",))

    assert clone.notes == ("5x5",)
    assert clone.name == "barbell bench"
    assert registry.get(BENCH).notes == ()


def test_register_rejects_duplicates_without_override() -> None:
    registry = PrototypeRegistry()
    registry.register("squat", Workout(name="squat"))

    with pytest.raises(ValueError):
        registry.register("squat", Workout(name="front squat"))

    registry.register("squat", Workout(name="front squat"), override=True)
    assert registry.get("squat").name == "front squat"
    assert len(registry) == 1
    assert "squat" in registry


def test_register_rejects_blank_name() -> None:
    with pytest.raises(ValueError):
        PrototypeRegistry().register("  ", Workout())


def test_unknown_prototype_raises() -> None:
    registry = PrototypeRegistry()
    with pytest.raises(PrototypeNotFoundError):
        registry.get("deadlift")
    with pytest.raises(KeyError):
        registry.clone("deadlift", incline=True)


def test_lookup_and_membership_ignore_surrounding_whitespace() -> None:
    registry = default_registry()

    assert " bench " in registry
    assert registry.get(" bench ").name == "barbell bench"
    assert "deadlift" not in registry


def test_unknown_prototype_message_is_unquoted() -> None:
    with pytest.raises(KeyError) as excinfo:
        PrototypeRegistry().get("deadlift")
    assert str(excinfo.value) == "Unknown prototype 'deadlift'"
