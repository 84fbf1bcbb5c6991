"""Domain-level exceptions."""

from __future__ import annotations


class PatternError(RuntimeError):
    """Base class for patternbook domain failures."""


class MissingAttributeError(PatternError, ValueError):
    """Raised when a required attribute is absent or blank at creation."""


class ToppingResetError(PatternError):
    """Raised when a topping that is already on is switched back off."""


class PrototypeNotFoundError(PatternError, KeyError):
    """Raised when a prototype name is not registered."""

    def __str__(self) -> str:
        # KeyError would repr-quote the message.
        return str(self.args[0]) if self.args else ""
