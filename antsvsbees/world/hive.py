"""Hive -- holds bees until their scheduled wave flies into the colony."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

from antsvsbees.colony.insect import Bee
from antsvsbees.world.place import Place

if TYPE_CHECKING:
    from numpy.random import Generator

    from antsvsbees.colony.colony import AntColony


@dataclass(eq=False)
class Hive(Place):
    """A place off the board where waiting bees live.

    Attributes:
        bee_armor: Armor given to every bee this hive creates.
        bee_damage: Sting damage of every bee this hive creates.
        waves: Bees scheduled per turn number.
    """

    name: str = "Hive"
    bee_armor: int = 3
    bee_damage: int = 1
    waves: dict[int, list[Bee]] = field(default_factory=dict, repr=False)

    def add_wave(self, attack_turn: int, num_bees: int) -> Hive:
        """Schedule ``num_bees`` new bees to attack on ``attack_turn``.

        Adding a second wave for the same turn enlarges that wave.

        Returns:
            This hive, so waves can be chained.
        """
        wave = self.waves.setdefault(attack_turn, [])
        for _ in range(num_bees):
            bee = Bee(armor=self.bee_armor, damage=self.bee_damage)
            self.add_bee(bee)
            wave.append(bee)
        return self

    def invade(self, colony: AntColony, current_turn: int, rng: Generator) -> list[Bee]:
        """Release the wave scheduled for ``current_turn``.

        Each bee enters the colony at a uniformly random bee entrance.

        Args:
            colony: Colony being invaded.
            current_turn: Turn whose wave should fly.
            rng: Seeded random generator.

        Returns:
            The bees released.  Empty if no wave is due, or if the colony
            has no entrances, in which case the wave stays in the hive.
        """
        entrances = colony.bee_entrances
        if not entrances:
            return []
        wave = self.waves.pop(current_turn, None)
        if not wave:
            return []
        for bee in wave:
            self.remove_bee(bee)
            entrance = entrances[int(rng.integers(len(entrances)))]
            entrance.add_bee(bee)
        logger.info(f"{len(wave)} bees fly out of the hive on turn {current_turn}")
        return wave
