"""Domain layer exports."""

from .base import DomainModel, MutableDomainModel
from .enums import Topping
from .exceptions import (
    MissingAttributeError,
    PatternError,
    PrototypeNotFoundError,
    ToppingResetError,
)
from .hotdog import HotDog
from .workout import Workout

__all__ = [
    "DomainModel",
    "HotDog",
    "MissingAttributeError",
    "MutableDomainModel",
    "PatternError",
    "PrototypeNotFoundError",
    "Topping",
    "ToppingResetError",
    "Workout",
]
