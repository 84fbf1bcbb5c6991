"""Step-wise hot dog builder."""

from __future__ import annotations

import logging
from typing import Annotated, Any, ClassVar, Self

from pydantic import Field, StrictBool, field_validator

from .base import MutableDomainModel
from .enums import Topping
from .exceptions import MissingAttributeError, ToppingResetError

logger = logging.getLogger(__name__)

_TOPPING_FIELDS = frozenset(topping.value for topping in Topping)


class HotDog(MutableDomainModel):
    """Hot dog assembled through chained ``add_*`` calls.

    The bread is fixed at creation. Toppings start off and can only be switched on;
    every ``add_*`` call returns the same instance so calls can be chained::

        lunch = HotDog.create("gluten free").add_ketchup().add_mustard()
    """

    echo_construction: ClassVar[bool] = True

    bread: Annotated[str, Field(min_length=1, frozen=True)]
    ketchup: StrictBool = False
    mustard: StrictBool = False
    kraut: StrictBool = False

    @field_validator("bread")
    @classmethod
    def ensure_bread(cls, value: str) -> str:
        if not value.strip():
            msg = "bread is a required attribute"
            raise ValueError(msg)
        return value

    @classmethod
    def create(cls, bread: str | None) -> Self:
        """Start a hot dog on ``bread`` with no toppings."""

        if bread is None or not bread.strip():
            msg = "bread is a required attribute"
            raise MissingAttributeError(msg)
        return cls(bread=bread)

    def model_post_init(self, context: Any, /) -> None:
        if self.echo_construction:
            logger.info("Bread: %s", self.bread)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _TOPPING_FIELDS and getattr(self, name, False) and value is not True:
            msg = f"Topping {name!r} is already on and cannot be removed"
            raise ToppingResetError(msg)
        super().__setattr__(name, value)

    def add_ketchup(self) -> Self:
        return self.add_topping(Topping.KETCHUP)

    def add_mustard(self) -> Self:
        return self.add_topping(Topping.MUSTARD)

    def add_kraut(self) -> Self:
        return self.add_topping(Topping.KRAUT)

    def add_topping(self, topping: Topping | str) -> Self:
        """Switch on ``topping``; unknown names raise ``ValueError``."""

        resolved = Topping(topping)
        setattr(self, resolved.value, True)
        return self

    def toppings(self) -> tuple[Topping, ...]:
        return tuple(topping for topping in Topping if getattr(self, topping.value))

    def snapshot(self) -> dict[str, Any]:
        return self.model_dump()


__all__ = ["HotDog"]
