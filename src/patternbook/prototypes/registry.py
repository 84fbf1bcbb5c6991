"""Named prototype registry."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from patternbook.domain import PrototypeNotFoundError, Workout


@dataclass(slots=True)
class PrototypeRegistry:
    """Runtime registry mapping names to workout prototypes."""

    _prototypes: dict[str, Workout] = field(default_factory=dict)

    def register(self, name: str, prototype: Workout, *, override: bool = False) -> None:
        key = name.strip()
        if not key:
            msg = "Prototype name must not be blank"
            raise ValueError(msg)
        if not override and key in self._prototypes:
            msg = f"Prototype {key!r} already registered"
            raise ValueError(msg)
        self._prototypes[key] = prototype

    def get(self, name: str) -> Workout:
        try:
            return self._prototypes[name.strip()]
        except KeyError as exc:
            msg = f"Unknown prototype {name!r}"
            raise PrototypeNotFoundError(msg) from exc

    def clone(self, name: str, **overlay: Any) -> Workout:
        return self.get(name).derive(**overlay)

    def names(self) -> tuple[str, ...]:
        return tuple(self._prototypes)

    def items(self) -> Iterable[tuple[str, Workout]]:
        return tuple(self._prototypes.items())

    def __contains__(self, name: object) -> bool:
        if isinstance(name, str):
            name = name.strip()
        return name in self._prototypes

    def __len__(self) -> int:
        return len(self._prototypes)


__all__ = ["PrototypeRegistry"]
