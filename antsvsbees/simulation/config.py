"""Config -- load game setup from YAML files.

Board size, starting food, bee strength and the wave schedule live in
YAML and are parsed into typed dataclasses here, so different game
setups need no code changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class WaveConfig:
    """One scheduled wave.

    Attributes:
        turn: Turn after which the wave enters the colony.
        bees: Number of bees in the wave.
    """

    turn: int
    bees: int


@dataclass
class GameConfig:
    """Top-level game configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        starting_food: Food the colony starts with.
        num_tunnels: Number of parallel tunnels.
        tunnel_length: Places per tunnel.
        moat_frequency: Every n-th place is water (0 for none).
        bee_armor: Armor of every hive bee.
        bee_damage: Sting damage of every hive bee.
        consume_boosts: Whether applying a boost uses it up.
        waves: Wave schedule.
    """

    seed: int = 42
    starting_food: int = 2
    num_tunnels: int = 3
    tunnel_length: int = 8
    moat_frequency: int = 0
    bee_armor: int = 3
    bee_damage: int = 1
    consume_boosts: bool = False
    waves: list[WaveConfig] = field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated GameConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a wave entry or a numeric setting is malformed.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        waves = []
        for entry in data.get("waves") or []:
            try:
                waves.append(WaveConfig(turn=int(entry["turn"]), bees=int(entry["bees"])))
            except (KeyError, TypeError, ValueError) as e:
                msg = f"bad wave entry in {path}: {entry!r}"
                raise ValueError(msg) from e

        def number(key: str) -> int:
            value = data.get(key, getattr(cls, key))
            try:
                return int(value)
            except (TypeError, ValueError) as e:
                msg = f"bad value for {key} in {path}: {value!r}"
                raise ValueError(msg) from e

        return cls(
            seed=number("seed"),
            starting_food=number("starting_food"),
            num_tunnels=number("num_tunnels"),
            tunnel_length=number("tunnel_length"),
            moat_frequency=number("moat_frequency"),
            bee_armor=number("bee_armor"),
            bee_damage=number("bee_damage"),
            consume_boosts=bool(data.get("consume_boosts", cls.consume_boosts)),
            waves=waves,
        )
