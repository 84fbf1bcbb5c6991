"""Default prototypes shipped with the workout illustration."""

from __future__ import annotations

from patternbook.domain import Workout

from .registry import PrototypeRegistry

WORKOUT = "workout"
BENCH = "bench"
INCLINE_BENCH = "incline bench"


def default_registry() -> PrototypeRegistry:
    """Registry holding a bare workout, a bench derived from it and an incline bench."""

    registry = PrototypeRegistry()
    workout = Workout()
    bench = workout.derive(name="barbell bench")
    registry.register(WORKOUT, workout)
    registry.register(BENCH, bench)
    registry.register(INCLINE_BENCH, bench.derive(incline=True))
    return registry


__all__ = ["BENCH", "INCLINE_BENCH", "WORKOUT", "default_registry"]
