"""Place -- a single cell in a tunnel.

Places are chained into tunnels: ``exit`` points one step toward the
queen and ``entrance`` one step toward the hive.  Each place holds at
most one regular ant, at most one guard stacked on top of it, and any
number of bees in arrival order.

Ownership runs one way: the place holds its occupants, and each insect
keeps a non-owning ``place`` reference used only for queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from antsvsbees.colony.ants import Ant
    from antsvsbees.colony.insect import Bee, Insect


@dataclass(eq=False)
class Place:
    """One cell of a tunnel.

    Attributes:
        name: Display name, e.g. ``tunnel[0,2]``.
        water: Whether the place is flooded.  Fixed at construction.
        exit: Next place toward the queen (``None`` at the queen).
        entrance: Next place toward the hive (``None`` at the far end).
        bees: Bees currently here, oldest arrival first.
    """

    name: str
    water: bool = False
    exit: Place | None = field(default=None, repr=False)
    entrance: Place | None = field(default=None, repr=False)
    bees: list[Bee] = field(default_factory=list, repr=False)
    _ant: Ant | None = field(default=None, repr=False)
    _guard: Ant | None = field(default=None, repr=False)

    @property
    def ant(self) -> Ant | None:
        """Return the effective defender: the guard if any, else the ant."""
        if self._guard is not None:
            return self._guard
        return self._ant

    @property
    def guarded_ant(self) -> Ant | None:
        """Return the regular ant, ignoring any guard on top of it."""
        return self._ant

    @property
    def guard(self) -> Ant | None:
        """Return the guard, if one is stationed here."""
        return self._guard

    # -- Ants --

    def add_ant(self, ant: Ant) -> bool:
        """Station ``ant`` here.

        Guards take the guard slot, every other ant the regular slot.

        Returns:
            False if the required slot is already occupied.
        """
        if ant.is_guard:
            if self._guard is not None:
                return False
            self._guard = ant
        else:
            if self._ant is not None:
                return False
            self._ant = ant
        ant.place = self
        return True

    def remove_ant(self) -> Ant | None:
        """Remove the guard if present, otherwise the regular ant.

        Returns:
            The removed ant, or None if the place was empty.
        """
        if self._guard is not None:
            removed, self._guard = self._guard, None
        else:
            removed, self._ant = self._ant, None
        if removed is not None:
            removed.place = None
        return removed

    # -- Bees --

    def add_bee(self, bee: Bee) -> None:
        """Append ``bee`` to this place's arrivals."""
        self.bees.append(bee)
        bee.place = self

    def remove_bee(self, bee: Bee) -> None:
        """Remove ``bee`` by identity; no-op if it is not here."""
        for index, present in enumerate(self.bees):
            if present is bee:
                del self.bees[index]
                bee.place = None
                return

    def remove_all_bees(self) -> None:
        """Clear every bee from this place."""
        for bee in self.bees:
            bee.place = None
        self.bees = []

    def exit_bee(self, bee: Bee) -> None:
        """Move ``bee`` one step toward the queen.

        A bee at a place without an exit stays where it is.
        """
        if self.exit is None:
            return
        self.remove_bee(bee)
        self.exit.add_bee(bee)

    def remove_insect(self, insect: Insect) -> None:
        """Remove an expiring insect, whichever slot it occupies."""
        if insect in self.bees:
            self.remove_bee(insect)  # type: ignore[arg-type]
        elif insect is self._guard:
            self._guard = None
            insect.place = None
        elif insect is self._ant:
            self._ant = None
            insect.place = None

    # -- Queries --

    def closest_bee(self, max_distance: int, min_distance: int = 0) -> Bee | None:
        """Find the nearest bee walking outward toward the hive.

        Distance 0 is this place, 1 its entrance, and so on.

        Args:
            max_distance: Furthest distance to look (inclusive).
            min_distance: Nearest distance to consider (inclusive).

        Returns:
            The oldest bee at the first occupied place in range, or None.
        """
        place: Place | None = self
        distance = 0
        while place is not None and distance <= max_distance:
            if distance >= min_distance and place.bees:
                return place.bees[0]
            place = place.entrance
            distance += 1
        return None

    def act(self) -> None:
        """Flood out ants that cannot swim.

        Guards are always washed away; the regular ant survives only if
        it is waterproof.
        """
        if not self.water:
            return
        if self._guard is not None:
            self.remove_ant()
        if self._ant is not None and not self._ant.waterproof:
            self.remove_ant()

    def __str__(self) -> str:
        return self.name
