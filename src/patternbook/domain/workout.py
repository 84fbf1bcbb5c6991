"""Prototype-style workout records."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, field_validator

from .base import DomainModel


class Workout(DomainModel):
    """Workout that new workouts are cloned from instead of subclassed."""

    name: Annotated[str | None, Field(min_length=1)] = None
    incline: bool = False
    notes: tuple[str, ...] = ()

    @field_validator("notes")
    @classmethod
    def strip_notes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(note.strip() for note in value if note.strip())

    def start_workout(self) -> str:
        return "Start Workout"

    def derive(self, **overlay: Any) -> Workout:
        """Return a validated copy of this workout with ``overlay`` applied on top.

        The receiver is left untouched. Unknown attribute names are rejected.
        """

        data = self.model_dump()
        data.update(overlay)
        return type(self).model_validate(data)


__all__ = ["Workout"]
