"""Entry point for ``python -m antsvsbees``.

Loads the default YAML game setup, builds the game, and opens a text
client in the terminal.
"""

from __future__ import annotations

import argparse
import pathlib
import sys

from loguru import logger

from antsvsbees.simulation.config import GameConfig
from antsvsbees.simulation.engine import AntGame
from antsvsbees.ui.text_client import TextClient

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main() -> None:
    """Parse CLI args, create the game, launch the text client."""
    parser = argparse.ArgumentParser(
        prog="antsvsbees",
        description="Ants vs. Bees - turn-based tunnel defense",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the RNG seed from the config",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log state-machine detail",
    )
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO", format="{message}")

    config = GameConfig.from_yaml(args.config)
    if args.seed is not None:
        config.seed = args.seed
    game = AntGame.from_config(config)

    TextClient(game).run()


if __name__ == "__main__":
    main()
