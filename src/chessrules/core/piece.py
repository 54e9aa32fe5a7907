"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import (
    SelfExposedCheckError,
    UnreachableDestinationError,
    UnresolvedCheckError,
)
from chessrules.core.geometry import ATTACKING_REGIONS, reachable
from chessrules.core.types import Coordinate

if TYPE_CHECKING:
    from chessrules.core.board import Board

_TYPE_CHARS: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}
_CHARS: dict[PieceType, str] = {v: k for k, v in _TYPE_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece tagged with its kind, color and current coordinate."""

    piece_type: PieceType
    color: Color
    coordinate: Coordinate

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """Letter symbol (uppercase = white, lowercase = black)."""
        char = _CHARS[self.piece_type]
        return char.upper() if self.color == Color.WHITE else char

    @classmethod
    def from_char(cls, char: str, coordinate: Coordinate) -> Piece:
        """Create piece from a letter, e.g. ``'N'`` -> white knight."""
        try:
            ptype = _TYPE_CHARS[char.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(ptype, color, coordinate)

    def __str__(self) -> str:
        return f"{self.color.title} {self.piece_type.name.lower()} {self.coordinate}"

    # ── Geometry ─────────────────────────────────────────────────────────

    def attacking_region(self, board: Board) -> set[Coordinate]:
        """Squares this piece threatens, before any check considerations."""
        return ATTACKING_REGIONS[self.piece_type](self, board)

    def find_attacking_region(self, board: Board) -> frozenset[Coordinate]:
        """Legal destinations ignoring check: never includes own pieces."""
        return frozenset(reachable(self.attacking_region(board), self.color, board))

    def moved_to(self, coordinate: Coordinate) -> Piece:
        return replace(self, coordinate=coordinate)

    # ── Moving ───────────────────────────────────────────────────────────

    def move(self, to: Coordinate, board: Board, *, search_checkmate: bool = True) -> Board:
        """Move this piece to *to* on *board* and return the resulting board.

        Only the mover's own king gates the move: a move that leaves it in
        check raises :class:`UnresolvedCheckError`, one that newly exposes it
        raises :class:`SelfExposedCheckError`. Giving check to the opponent is
        always allowed.

        With ``search_checkmate=False`` the new board defers its checkmate
        search until :attr:`Board.is_checkmate` is first read.
        """
        if to not in self.find_attacking_region(board):
            raise UnreachableDestinationError(f"{self} is not able to reach {to}")

        board_after = board.with_move(self, to, search_checkmate=search_checkmate)

        was_in_check = board.in_check(self.color)
        if board_after.in_check(self.color):
            if was_in_check:
                raise UnresolvedCheckError(
                    f"Moving {self} to {to} does not resolve the check on the {self.color} king"
                )
            raise SelfExposedCheckError(
                f"Moving {self} to {to} exposes the {self.color} king to check"
            )
        return board_after
