"""Errors raised by colony operations.

Every error carries the user-facing message as its string form.  The
game-level command methods in ``AntGame`` catch ``GameError`` and hand
that message back to the caller instead of raising.
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for recoverable rule violations."""

    message = "game error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidLocation(GameError):
    """Coordinates are malformed or outside the colony."""

    message = "illegal location"


class UnknownAntType(GameError):
    """The requested ant type does not exist."""

    message = "unknown ant type"


class InsufficientFood(GameError):
    """The colony cannot afford the ant."""

    message = "not enough food"


class LocationOccupied(GameError):
    """The slot the ant needs is already taken."""

    message = "tunnel already occupied"


class RewardUnavailable(GameError):
    """A boost cannot be handed out."""

    message = "no such boost"


class UnknownReward(RewardUnavailable):
    """The boost name is not in the colony's inventory."""


class DepletedReward(RewardUnavailable):
    """The boost is known but none are left."""

    def __init__(self, boost: str) -> None:
        super().__init__(f"no {boost} boosts left")
        self.boost = boost


class NoDefenderPresent(GameError):
    """There is no ant at the place to receive a boost."""

    message = "no Ant at location"
