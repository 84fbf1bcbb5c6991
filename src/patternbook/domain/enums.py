"""Enumerations used across the patternbook domain layer."""

from __future__ import annotations

from enum import StrEnum


class Topping(StrEnum):
    """Optional hot dog toppings, valued by the attribute they switch on."""

    KETCHUP = "ketchup"
    MUSTARD = "mustard"
    KRAUT = "kraut"
