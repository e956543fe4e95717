"""Text client for playing Ants vs. Bees in a terminal.

Draws each tunnel as a row of cells (queen on the left, hive side on the
right) and reads one command per line.  The client only talks to the
game through its command methods and read-only snapshots.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from loguru import logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from antsvsbees.simulation.engine import AntGame
    from antsvsbees.world.place import Place

# Glyph per ant kind; a guard on top of another ant shows both
_ANT_GLYPHS: dict[str, str] = {
    "Grower": "G",
    "Thrower": "T",
    "Eater": "E",
    "Scuba": "S",
    "Guard": "x",
}
_EMPTY = "."
_WATER = "~"
_CELL_WIDTH = 5

_HELP = """\
commands:
  deploy <type> <tunnel,step>   grower | thrower | eater | scuba | guard
  remove <tunnel,step>
  boost <name> <tunnel,step>
  turn [n]                      play n turns (default 1)
  help
  quit"""


class TextClient:
    """Renders an AntGame as text and runs a command loop.

    Attributes:
        game: The game being played.
        running: False once the player quits or the game is decided.
    """

    _COMMANDS: ClassVar[tuple[str, ...]] = ("deploy", "remove", "boost", "turn", "help", "quit")

    def __init__(
        self,
        game: AntGame,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        """Initialise the client.

        Args:
            game: The game to play.
            read: Prompt-and-read function (``input`` by default).
            write: Output function (``print`` by default).
        """
        self.game = game
        self._read = read
        self._write = write
        self.running = True

    def run(self) -> None:
        """Main loop: draw, read a command, apply it."""
        self._write(self.render())
        while self.running:
            try:
                line = self._read("> ")
            except EOFError:
                break
            message = self.handle(line)
            if message:
                self._write(message)
            self._check_outcome()

    def handle(self, line: str) -> str | None:
        """Apply one command line and return any text to show."""
        words = line.split()
        if not words:
            return None
        command, args = words[0].lower(), words[1:]
        if command not in self._COMMANDS:
            return f"unknown command: {command}"

        match command, args:
            case "deploy", [ant_type, coords]:
                return self.game.deploy_ant(ant_type, coords) or self.render()
            case "remove", [coords]:
                return self.game.remove_ant(coords) or self.render()
            case "boost", [boost, coords]:
                return self.game.boost_ant(boost, coords) or self.render()
            case "turn", []:
                self.game.take_turn()
                return self.render()
            case "turn", [count] if count.isdigit():
                self.game.run(int(count))
                return self.render()
            case "help", _:
                return _HELP
            case "quit", _:
                self.running = False
                return None
        return f"usage error: {line.strip()}\n{_HELP}"

    def _check_outcome(self) -> None:
        outcome = self.game.game_is_won()
        if outcome is None:
            return
        self._write("The colony survives!" if outcome else "The bees reached the queen.")
        logger.info(f"Game over after {self.game.turn} turns (won={outcome})")
        self.running = False

    # -- Rendering --

    def render(self) -> str:
        """Return the whole board and status panel as text."""
        lines = [self._draw_status(), ""]
        for tunnel, row in enumerate(self.game.get_places()):
            lines.append(self._draw_tunnel(tunnel, row))
        return "\n".join(lines)

    def _draw_status(self) -> str:
        boosts = ", ".join(self.game.get_boost_names()) or "none"
        return (
            f"Turn: {self.game.turn}  Food: {self.game.get_food()}  "
            f"Hive: {self.game.get_hive_bees_count()}  Boosts: {boosts}"
        )

    def _draw_tunnel(self, tunnel: int, row: list[Place]) -> str:
        cells = "".join(self._draw_cell(place) for place in row)
        return f"{tunnel}: Q {cells} < Hive"

    @staticmethod
    def _draw_cell(place: Place) -> str:
        text = _WATER if place.water else _EMPTY
        if place.guarded_ant is not None:
            text = _ANT_GLYPHS.get(place.guarded_ant.name, "?")
        if place.guard is not None:
            text = _ANT_GLYPHS["Guard"] + (text if place.guarded_ant is not None else "")
        if place.bees:
            text += f"B{len(place.bees)}"
        return f"[{text:^{_CELL_WIDTH}}]"
