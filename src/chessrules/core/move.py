"""Player move value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from chessrules.core.enums import Color
from chessrules.core.types import Coordinate


@dataclass(frozen=True, slots=True)
class PlayerMove:
    """Immutable request to move whatever stands on ``from_coord``."""

    from_coord: Coordinate
    to_coord: Coordinate

    def reversed_by_y(self) -> PlayerMove:
        """The same move seen from the other side of the board."""
        return PlayerMove(self.from_coord.reversed_by_y(), self.to_coord.reversed_by_y())

    def __str__(self) -> str:
        return f"{self.from_coord}{self.to_coord}"


class Mover(Protocol):
    """Anything that moves pieces on behalf of one color."""

    @property
    def color(self) -> Color: ...
