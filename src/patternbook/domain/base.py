"""Pydantic bases for patternbook records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen record; prototypes derive copies instead of mutating."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)


class MutableDomainModel(BaseModel):
    """Record changed in place by chained builder steps.

    Assignments are still validated, so per-field ``frozen`` and strict types hold.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


__all__ = ["DomainModel", "MutableDomainModel"]
