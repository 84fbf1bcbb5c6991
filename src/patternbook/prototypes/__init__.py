"""Prototype registry exports."""

from .catalog import BENCH, INCLINE_BENCH, WORKOUT, default_registry
from .registry import PrototypeRegistry

__all__ = ["BENCH", "INCLINE_BENCH", "WORKOUT", "PrototypeRegistry", "default_registry"]
