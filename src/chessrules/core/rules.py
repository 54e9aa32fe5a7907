"""Check and checkmate rules.

The checkmate search is brute force: every destination of every piece of the
checked side is tried on a fresh board, and the position is mate only if none
of those moves gets the king out of check. It looks a single ply deep and
keeps no transposition table.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol

from chessrules.core.enums import Color
from chessrules.core.errors import MoveError
from chessrules.core.move import PlayerMove

if TYPE_CHECKING:
    from chessrules.core.board import Board


class CheckmateChecker(Protocol):
    """Strategy deciding whether *color* is checkmated on *board*."""

    def is_checkmate(self, color: Color, board: Board) -> bool: ...


def _iter_escapes(color: Color, board: Board) -> Iterator[PlayerMove]:
    for piece in board.pieces_of(color):
        for to in piece.find_attacking_region(board):
            try:
                board_after = piece.move(to, board, search_checkmate=False)
            except MoveError:
                continue
            if not board_after.in_check(color):
                yield PlayerMove(piece.coordinate, to)


class SimpleCheckmateChecker:
    """Simulates every possible move of the checked side."""

    def is_checkmate(self, color: Color, board: Board) -> bool:
        if not board.in_check(color):
            return False
        return next(_iter_escapes(color, board), None) is None


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_in_check(color: Color, board: Board) -> bool:
        return board.in_check(color)

    @staticmethod
    def is_checkmate(color: Color, board: Board) -> bool:
        return board.checker.is_checkmate(color, board)

    @staticmethod
    def escaping_moves(color: Color, board: Board) -> list[PlayerMove]:
        """All moves that take *color* out of check, in board order.

        Empty when *color* is not in check.
        """
        if not board.in_check(color):
            return []
        return sorted(
            _iter_escapes(color, board),
            key=lambda m: (m.from_coord.y, m.from_coord.x, m.to_coord.y, m.to_coord.x),
        )
