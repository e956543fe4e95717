"""AntGame -- the turn loop and the command surface.

Owns the colony, the hive and the random generator, and advances the
game in the fixed turn order:

1. Ants act (growers, throwers, eaters; a guard's charge acts for it)
2. Bees act (sting or advance)
3. Places act (flooding)
4. The hive releases the wave scheduled for the turn just played

Commands (deploy, remove, boost) are meant to be issued between turns.
They never raise for rule violations; they return the error message, or
None on success.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from loguru import logger
from numpy.random import Generator

from antsvsbees.colony.ants import ANT_TYPES
from antsvsbees.colony.colony import AntColony
from antsvsbees.errors import GameError, InvalidLocation, UnknownAntType
from antsvsbees.simulation.config import GameConfig
from antsvsbees.world.hive import Hive
from antsvsbees.world.place import Place


@dataclass
class AntGame:
    """Drives a game forward turn by turn.

    Attributes:
        colony: The defending colony.
        hive: The attacking hive.
        rng: Random generator for grower rolls and hive entrances.
        turn: Number of turns played so far.
    """

    colony: AntColony
    hive: Hive
    rng: Generator = field(default_factory=np.random.default_rng)
    turn: int = 0

    @classmethod
    def from_config(cls, config: GameConfig) -> AntGame:
        """Build a colony, a hive and a seeded generator from ``config``."""
        colony = AntColony(
            food=config.starting_food,
            num_tunnels=config.num_tunnels,
            tunnel_length=config.tunnel_length,
            moat_frequency=config.moat_frequency,
            consume_boosts=config.consume_boosts,
        )
        hive = Hive(bee_armor=config.bee_armor, bee_damage=config.bee_damage)
        for wave in config.waves:
            hive.add_wave(wave.turn, wave.bees)
        return cls(colony=colony, hive=hive, rng=np.random.default_rng(config.seed))

    # -- Turn loop --

    def take_turn(self) -> None:
        """Play one full turn in the canonical order."""
        logger.debug(f"-- turn {self.turn} --")
        self.colony.ants_act(self.rng)
        self.colony.bees_act()
        self.colony.places_act()
        self.hive.invade(self.colony, self.turn, self.rng)
        self.turn += 1

    def run(self, turns: int) -> None:
        """Play a fixed number of turns.

        Args:
            turns: Number of turns to advance.
        """
        for _ in range(turns):
            self.take_turn()

    def game_is_won(self) -> bool | None:
        """Return the outcome so far.

        Returns:
            False once a bee reaches the queen, True once every bee is
            dead, otherwise None.
        """
        if self.colony.queen_has_bees():
            return False
        if not self.colony.get_all_bees() and not self.hive.bees:
            return True
        return None

    # -- Commands --

    def deploy_ant(self, ant_type: str, place_coordinates: str) -> str | None:
        """Deploy a new ant of ``ant_type`` at ``"tunnel,step"``.

        Returns:
            None on success, otherwise the reason it failed.
        """
        try:
            kind = ANT_TYPES.get(ant_type.lower())
            if kind is None:
                raise UnknownAntType
            place = self._parse_place(place_coordinates)
            self.colony.deploy_ant(kind(), place)
        except GameError as e:
            return str(e)
        return None

    def remove_ant(self, place_coordinates: str) -> str | None:
        """Remove the top ant at ``"tunnel,step"``."""
        try:
            place = self._parse_place(place_coordinates)
        except GameError as e:
            return str(e)
        self.colony.remove_ant(place)
        return None

    def boost_ant(self, boost_type: str, place_coordinates: str) -> str | None:
        """Give the ant at ``"tunnel,step"`` the named boost."""
        try:
            place = self._parse_place(place_coordinates)
            self.colony.apply_boost(boost_type, place)
        except GameError as e:
            return str(e)
        return None

    def _parse_place(self, place_coordinates: str) -> Place:
        parts = place_coordinates.split(",")
        if len(parts) != 2:
            raise InvalidLocation
        try:
            tunnel, step = (int(p.strip()) for p in parts)
        except ValueError as e:
            raise InvalidLocation from e
        return self.colony.place_at(tunnel, step)

    # -- Snapshots --

    def get_places(self) -> list[list[Place]]:
        """Return the tunnel grid for rendering."""
        return self.colony.places

    def get_food(self) -> int:
        """Return the colony's food."""
        return self.colony.food

    def get_hive_bees_count(self) -> int:
        """Return how many bees are still waiting in the hive."""
        return len(self.hive.bees)

    def get_boost_names(self) -> list[str]:
        """Return the boosts currently available to apply."""
        return self.colony.boost_names()
