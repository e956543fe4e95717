"""AntColony -- aggregate state for the defending colony.

The colony owns the tunnel grid, the queen's place, the food store and
the boost inventory.  All mutation of food and boosts goes through its
methods.  It also runs the three in-colony phases of a turn: ants act,
bees act, places act.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

from antsvsbees.colony.ants import Ant, Boost, GuardAnt
from antsvsbees.errors import (
    DepletedReward,
    InsufficientFood,
    InvalidLocation,
    LocationOccupied,
    NoDefenderPresent,
    UnknownReward,
)
from antsvsbees.world.place import Place

if TYPE_CHECKING:
    from numpy.random import Generator

    from antsvsbees.colony.insect import Bee


def _starting_boosts() -> dict[str, int]:
    return {
        Boost.FLYING_LEAF.value: 1,
        Boost.STICKY_LEAF.value: 1,
        Boost.ICY_LEAF.value: 1,
        Boost.BUG_SPRAY.value: 0,
    }


@dataclass
class AntColony:
    """The defending colony and its tunnels.

    Tunnels are built from the queen outward: ``places[t][0]`` is next
    to the queen and ``places[t][-1]`` is the bee entrance of tunnel
    ``t``.  When ``moat_frequency`` is non-zero every
    ``moat_frequency``-th step of each tunnel is water.

    Attributes:
        food: Food available for deploying ants.
        num_tunnels: Number of parallel tunnels.
        tunnel_length: Places per tunnel.
        moat_frequency: Spacing of water places (0 for none).
        consume_boosts: Whether applying a boost uses one up.
        boosts: Inventory of boost name to count.
        places: Grid of places indexed ``[tunnel][step]``.
        bee_entrances: Hive-facing end of each tunnel.
        queen_place: The goal; bees that reach it win the game.
    """

    food: int
    num_tunnels: int
    tunnel_length: int
    moat_frequency: int = 0
    consume_boosts: bool = False
    boosts: dict[str, int] = field(default_factory=_starting_boosts)
    places: list[list[Place]] = field(init=False, repr=False)
    bee_entrances: list[Place] = field(init=False, repr=False)
    queen_place: Place = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Lay out the tunnels from the queen toward the hive."""
        self.queen_place = Place("Ant Queen")
        self.places = []
        self.bee_entrances = []
        for tunnel in range(self.num_tunnels):
            row: list[Place] = []
            prev = self.queen_place
            for step in range(self.tunnel_length):
                water = self.moat_frequency != 0 and (step + 1) % self.moat_frequency == 0
                kind = "water" if water else "tunnel"
                curr = Place(f"{kind}[{tunnel},{step}]", water=water, exit=prev)
                prev.entrance = curr
                row.append(curr)
                prev = curr
            self.places.append(row)
            if row:
                self.bee_entrances.append(row[-1])

    # -- Food & boosts --

    def increase_food(self, amount: int) -> None:
        """Add ``amount`` to the food store."""
        self.food += amount

    def add_boost(self, boost: str) -> None:
        """Add one ``boost`` to the inventory."""
        self.boosts[boost] = self.boosts.get(boost, 0) + 1
        logger.info(f"Found a {boost}!")

    def boost_names(self) -> list[str]:
        """Return the names of boosts with at least one available."""
        return [name for name, count in self.boosts.items() if count > 0]

    # -- Placement --

    def place_at(self, tunnel: int, step: int) -> Place:
        """Return the place at ``(tunnel, step)``.

        Raises:
            InvalidLocation: If either index is out of range.
        """
        if not (0 <= tunnel < len(self.places) and 0 <= step < len(self.places[tunnel])):
            raise InvalidLocation
        return self.places[tunnel][step]

    def deploy_ant(self, ant: Ant, place: Place) -> None:
        """Station ``ant`` at ``place`` and pay for it.

        Raises:
            InsufficientFood: If the colony cannot afford the ant.
            LocationOccupied: If the slot the ant needs is taken.
        """
        if self.food < ant.food_cost:
            raise InsufficientFood
        if not place.add_ant(ant):
            raise LocationOccupied
        self.food -= ant.food_cost
        logger.info(f"Deployed {ant}")

    def remove_ant(self, place: Place) -> Ant | None:
        """Remove the top ant at ``place`` (the guard, if any)."""
        removed = place.remove_ant()
        if removed is not None:
            logger.info(f"Removed {removed.name} from {place}")
        return removed

    def apply_boost(self, boost: str, place: Place) -> None:
        """Give the ant defending ``place`` the named boost.

        Raises:
            UnknownReward: If the boost is not in the inventory.
            DepletedReward: If none of that boost remain.
            NoDefenderPresent: If no ant is at ``place``.
        """
        if boost not in self.boosts:
            raise UnknownReward
        if self.boosts[boost] < 1:
            raise DepletedReward(boost)
        ant = place.ant
        if ant is None:
            raise NoDefenderPresent
        try:
            kind = Boost(boost)
        except ValueError as e:
            raise UnknownReward from e
        ant.set_boost(kind)
        if self.consume_boosts:
            self.boosts[boost] -= 1

    # -- Queries --

    def all_places(self) -> list[Place]:
        """Return every tunnel place, tunnel by tunnel."""
        return [place for row in self.places for place in row]

    def get_all_ants(self) -> list[Ant]:
        """Return the effective defender of every occupied place."""
        return [place.ant for place in self.all_places() if place.ant is not None]

    def get_all_bees(self) -> list[Bee]:
        """Return every bee inside the tunnels."""
        return [bee for place in self.all_places() for bee in place.bees]

    def queen_has_bees(self) -> bool:
        """Return True if any bee has reached the queen."""
        return bool(self.queen_place.bees)

    # -- Turn phases --

    def ants_act(self, rng: Generator) -> None:
        """Let every ant act; a guard's charge acts before the guard."""
        for ant in self.get_all_ants():
            if isinstance(ant, GuardAnt) and ant.guarded is not None:
                ant.guarded.act(self, rng)
            ant.act(self, rng)

    def bees_act(self) -> None:
        """Let every bee in the tunnels act once."""
        for bee in self.get_all_bees():
            bee.act()

    def places_act(self) -> None:
        """Apply place effects such as flooding."""
        for place in self.all_places():
            place.act()
