"""Move validation failures.

Every error is recoverable: a rejected move leaves the board it was tried on
untouched, and the caller decides whether the failure ends the game.
"""

from __future__ import annotations


class MoveError(ValueError):
    """Base class for all rejected moves."""


class OutOfBoundsError(MoveError):
    """Origin or destination lies outside the 8x8 grid."""


class EmptyOriginError(MoveError):
    """There is no piece on the origin square."""


class WrongMoverError(MoveError):
    """The piece on the origin square belongs to the other player."""


class FriendlyFireError(MoveError):
    """The destination holds a piece of the mover's own color."""


class UnreachableDestinationError(MoveError):
    """The destination is outside the piece's attacking region."""


class UnresolvedCheckError(MoveError):
    """The mover was in check and still is after the move."""


class SelfExposedCheckError(MoveError):
    """The move puts the mover's own king in check."""
