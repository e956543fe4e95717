"""Shared fixtures for the Ants vs. Bees test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from antsvsbees.colony.colony import AntColony
from antsvsbees.simulation.config import GameConfig
from antsvsbees.simulation.engine import AntGame
from antsvsbees.world.hive import Hive


class FixedRolls:
    """Stand-in generator that replays scripted ``random()`` draws."""

    def __init__(self, *rolls: float) -> None:
        self._rolls = list(rolls)

    def random(self) -> float:
        return self._rolls.pop(0)

    def integers(self, high: int) -> int:
        return 0


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def fixed_rolls() -> type[FixedRolls]:
    """Factory for scripted generators, e.g. ``fixed_rolls(0.65)``."""
    return FixedRolls


@pytest.fixture
def colony() -> AntColony:
    """One tunnel of length 3 with 10 food."""
    return AntColony(food=10, num_tunnels=1, tunnel_length=3)


@pytest.fixture
def wide_colony() -> AntColony:
    """Three tunnels of length 8, every third place flooded."""
    return AntColony(food=50, num_tunnels=3, tunnel_length=8, moat_frequency=3)


@pytest.fixture
def default_config() -> GameConfig:
    """Default game config (no YAML file needed)."""
    return GameConfig()


@pytest.fixture
def small_game(colony: AntColony, rng: Generator) -> AntGame:
    """A one-tunnel game with a turn-0 wave of two weak bees."""
    hive = Hive(bee_armor=1, bee_damage=1).add_wave(0, 2)
    return AntGame(colony=colony, hive=hive, rng=rng)
