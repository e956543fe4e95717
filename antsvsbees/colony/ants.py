"""Ants -- the colony's stationary defenders.

Each variant is a small dataclass with its own armor, food cost and
``act`` behaviour:

- **Grower**: rolls once per turn for food or a boost.
- **Thrower**: throws a leaf at the nearest bee within range.  Boosts
  extend the range, stick or chill the target, or turn the throw into a
  point-blank bug spray that also kills the thrower.
- **Scuba**: a thrower that survives flooded places.
- **Eater**: swallows a bee on its own place and digests it over three
  more turns.  Hurting the eater on the turn after it swallows makes it
  cough the bee back up.
- **Guard**: sits in a second slot on top of another ant and takes
  every sting aimed at that place.  It never acts itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from loguru import logger

from antsvsbees.colony.insect import Bee, BeeStatus, Insect

if TYPE_CHECKING:
    from numpy.random import Generator

    from antsvsbees.colony.colony import AntColony

# -- Constants ---------------------------------------------------------------

_THROW_DAMAGE = 1
_THROW_RANGE = 3
_FLYING_LEAF_RANGE = 5
_BUG_SPRAY_DAMAGE = 10
_DIGEST_TURNS = 3  # turns an eater holds a bee after swallowing it

# Grower roll bands, checked in order; anything at or above the last
# bound produces nothing.
_FOOD_BAND = 0.6


class Boost(Enum):
    """Modifiers a player can hand to an ant for its next action."""

    FLYING_LEAF = "FlyingLeaf"  # longer throw
    STICKY_LEAF = "StickyLeaf"  # target cannot move next turn
    ICY_LEAF = "IcyLeaf"  # target cannot sting next turn
    BUG_SPRAY = "BugSpray"  # kill every bee here, and the thrower


_GROWER_BOOST_BANDS: tuple[tuple[float, Boost], ...] = (
    (0.7, Boost.FLYING_LEAF),
    (0.8, Boost.STICKY_LEAF),
    (0.9, Boost.ICY_LEAF),
    (0.95, Boost.BUG_SPRAY),
)


@dataclass(eq=False)
class Ant(Insect):
    """Base class for defenders.

    Attributes:
        food_cost: Food debited when the ant is deployed.
        boost: Modifier applied to the ant's next action, if any.
    """

    name: ClassVar[str] = "Ant"
    waterproof: ClassVar[bool] = False
    is_guard: ClassVar[bool] = False

    food_cost: int = 0
    boost: Boost | None = None

    def set_boost(self, boost: Boost) -> None:
        """Give this ant a boost for its next action."""
        self.boost = boost
        logger.info(f"{self} is given a {boost.value}")

    def act(self, colony: AntColony, rng: Generator) -> None:
        """Perform this ant's turn.  The base ant does nothing."""


@dataclass(eq=False)
class GrowerAnt(Ant):
    """Cheap ant that produces food and, occasionally, boosts."""

    name: ClassVar[str] = "Grower"

    armor: int = 1
    food_cost: int = 1

    def act(self, colony: AntColony, rng: Generator) -> None:
        """Roll once and add food or a boost to the colony."""
        roll = float(rng.random())
        if roll < _FOOD_BAND:
            colony.increase_food(1)
            return
        for bound, boost in _GROWER_BOOST_BANDS:
            if roll < bound:
                colony.add_boost(boost.value)
                return


@dataclass(eq=False)
class ThrowerAnt(Ant):
    """Ranged attacker that throws leaves toward the hive."""

    name: ClassVar[str] = "Thrower"

    armor: int = 1
    food_cost: int = 4
    damage: int = _THROW_DAMAGE

    def act(self, colony: AntColony, rng: Generator) -> None:
        """Throw a leaf, or spray if holding bug spray."""
        if self.boost is Boost.BUG_SPRAY:
            self._spray()
        else:
            self._throw()

    def _throw(self) -> None:
        if self.place is None:
            return
        reach = _FLYING_LEAF_RANGE if self.boost is Boost.FLYING_LEAF else _THROW_RANGE
        target = self.place.closest_bee(reach)
        if target is None:
            return

        logger.info(f"{self} throws a leaf at {target}")
        target.reduce_armor(self.damage)
        match self.boost:
            case Boost.STICKY_LEAF:
                target.status = BeeStatus.STUCK
                logger.info(f"{target} is stuck!")
            case Boost.ICY_LEAF:
                target.status = BeeStatus.COLD
                logger.info(f"{target} is cold!")
        self.boost = None

    def _spray(self) -> None:
        # Boost stays set; the self-damage below always expires the thrower.
        if self.place is None:
            return
        logger.info(f"{self} sprays bug repellant everywhere!")
        target = self.place.closest_bee(0)
        while target is not None:
            target.reduce_armor(_BUG_SPRAY_DAMAGE)
            target = self.place.closest_bee(0)
        self.reduce_armor(_BUG_SPRAY_DAMAGE)


@dataclass(eq=False)
class ScubaAnt(ThrowerAnt):
    """A thrower that can be deployed on, and survives, water."""

    name: ClassVar[str] = "Scuba"
    waterproof: ClassVar[bool] = True

    armor: int = 1
    food_cost: int = 5


@dataclass(eq=False)
class EaterAnt(Ant):
    """Swallows a bee on its own place and digests it.

    Attributes:
        turns_eating: 0 when idle, 1-3 while digesting.
        stomach: The bee currently being digested.
    """

    name: ClassVar[str] = "Eater"

    armor: int = 2
    food_cost: int = 4
    turns_eating: int = 0
    stomach: Bee | None = None

    def is_full(self) -> bool:
        """Return True if a bee is being digested."""
        return self.stomach is not None

    def act(self, colony: AntColony, rng: Generator) -> None:
        """Swallow a bee when idle, otherwise keep digesting."""
        logger.debug(f"{self} eating: {self.turns_eating}")
        if self.turns_eating == 0:
            self._swallow()
        elif self.turns_eating < _DIGEST_TURNS:
            self.turns_eating += 1
        else:
            if self.stomach is not None:
                logger.info(f"{self} finishes digesting a bee")
            self.stomach = None
            self.turns_eating = 0

    def _swallow(self) -> None:
        if self.place is None:
            return
        target = self.place.closest_bee(0)
        if target is None:
            return
        logger.info(f"{self} eats {target}!")
        self.place.remove_bee(target)
        self.stomach = target
        self.turns_eating = 1

    def _cough_up(self) -> None:
        if self.stomach is None or self.place is None:
            return
        eaten, self.stomach = self.stomach, None
        self.place.add_bee(eaten)
        logger.info(f"{self} coughs up {eaten}!")

    def reduce_armor(self, amount: int) -> bool:
        """Take damage, releasing the swallowed bee if it is still whole.

        Surviving a hit on the first digesting turn coughs the bee back
        up and skips straight to the last digesting turn.  A lethal hit
        during the first two digesting turns releases the bee before the
        eater expires.
        """
        self.armor -= amount
        logger.debug(f"{self} armor reduced to: {self.armor}")
        if self.armor > 0:
            if self.turns_eating == 1:
                self._cough_up()
                self.turns_eating = _DIGEST_TURNS
            return False

        if 0 < self.turns_eating < _DIGEST_TURNS:
            self._cough_up()
        self._expire()
        return True


@dataclass(eq=False)
class GuardAnt(Ant):
    """Shields the ant beneath it; takes stings meant for that place."""

    name: ClassVar[str] = "Guard"
    is_guard: ClassVar[bool] = True

    armor: int = 2
    food_cost: int = 4

    @property
    def guarded(self) -> Ant | None:
        """Return the regular ant this guard stands over."""
        if self.place is None:
            return None
        return self.place.guarded_ant


ANT_TYPES: dict[str, type[Ant]] = {
    "grower": GrowerAnt,
    "thrower": ThrowerAnt,
    "eater": EaterAnt,
    "scuba": ScubaAnt,
    "guard": GuardAnt,
}
