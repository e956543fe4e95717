"""Insect -- armored units on the board, and the Bee attacker.

Every insect has integer armor that only ever goes down.  When armor
reaches zero the insect removes itself from its place and is gone for
good; nothing else holds on to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar

from loguru import logger

if TYPE_CHECKING:
    from antsvsbees.colony.ants import Ant
    from antsvsbees.world.place import Place


class BeeStatus(Enum):
    """One-turn status effect applied to a bee by a boosted throw."""

    NONE = auto()
    STUCK = auto()  # cannot move this turn
    COLD = auto()  # cannot sting this turn


@dataclass(eq=False)
class Insect:
    """Base for ants and bees.

    Attributes:
        armor: Remaining armor; the insect expires at 0 or below.
        place: Where the insect currently sits (None when off the board).
    """

    name: ClassVar[str] = "Insect"

    armor: int
    place: Place | None = field(default=None, repr=False)

    @property
    def is_alive(self) -> bool:
        """Return True while the insect still has armor."""
        return self.armor > 0

    def reduce_armor(self, amount: int) -> bool:
        """Apply ``amount`` damage.

        Args:
            amount: Armor to subtract.

        Returns:
            True if the insect expired from this damage.
        """
        self.armor -= amount
        if self.armor <= 0:
            self._expire()
            return True
        return False

    def _expire(self) -> None:
        logger.info(f"{self} ran out of armor and expired")
        if self.place is not None:
            self.place.remove_insect(self)

    def __str__(self) -> str:
        where = self.place.name if self.place is not None else ""
        return f"{self.name}({where})"


@dataclass(eq=False)
class Bee(Insect):
    """An attacker that stings whatever defends its place, or moves on.

    Attributes:
        damage: Armor removed from an ant per sting.
        status: Effect applied this turn; reset after the bee acts.
    """

    name: ClassVar[str] = "Bee"

    damage: int = 1
    status: BeeStatus = BeeStatus.NONE

    def sting(self, ant: Ant) -> bool:
        """Sting ``ant``.

        Returns:
            True if the ant expired.
        """
        logger.info(f"{self} stings {ant}!")
        return ant.reduce_armor(self.damage)

    def is_blocked(self) -> bool:
        """Return True if an ant defends this bee's place."""
        return self.place is not None and self.place.ant is not None

    def act(self) -> None:
        """Sting the defender here, or advance toward the queen.

        A cold bee skips its sting and a stuck bee stays put.  The status
        is cleared whichever branch runs.
        """
        if self.is_blocked():
            if self.status is not BeeStatus.COLD:
                self.sting(self.place.ant)  # type: ignore[union-attr, arg-type]
        elif self.is_alive and self.place is not None:
            if self.status is not BeeStatus.STUCK:
                self.place.exit_bee(self)
        self.status = BeeStatus.NONE
