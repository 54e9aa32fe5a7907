"""Piece movement geometry: offset tables and attacking-region dispatch."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Coordinate

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece

RegionFunc = Callable[["Piece", "Board"], "set[Coordinate]"]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


# -- Shared helpers ---------------------------------------------------------


def reachable(coordinates: Iterable[Coordinate], color: Color, board: Board) -> set[Coordinate]:
    """Drop coordinates that are off the board or hold a *color* piece."""
    region: set[Coordinate] = set()
    for c in coordinates:
        if not c.in_bounds:
            continue
        target = board.at_coordinate(c)
        if target is not None and target.color == color:
            continue
        region.add(c)
    return region


def _ray(start: Coordinate, direction: tuple[int, int], color: Color, board: Board) -> Iterator[Coordinate]:
    dx, dy = direction
    cur = start.shifted(dx, dy)
    while cur.in_bounds:
        target = board.at_coordinate(cur)
        if target is None:
            yield cur
        else:
            if target.color != color:
                yield cur
            return
        cur = cur.shifted(dx, dy)


def _sliding(directions: tuple[tuple[int, int], ...]) -> RegionFunc:
    def region(piece: Piece, board: Board) -> set[Coordinate]:
        found: set[Coordinate] = set()
        for direction in directions:
            found.update(_ray(piece.coordinate, direction, piece.color, board))
        return found

    return region


def _stepping(offsets: tuple[tuple[int, int], ...]) -> RegionFunc:
    def region(piece: Piece, board: Board) -> set[Coordinate]:
        c = piece.coordinate
        return reachable((c.shifted(dx, dy) for dx, dy in offsets), piece.color, board)

    return region


# -- Per-type regions -------------------------------------------------------


def _pawn_region(piece: Piece, board: Board) -> set[Coordinate]:
    c = piece.coordinate
    if piece.color == Color.WHITE:
        forward = c.up
        double = c.up.up
        diagonals = (c.left_up, c.right_up)
    else:
        forward = c.down
        double = c.down.down
        diagonals = (c.left_down, c.right_down)

    candidates = {forward}
    # Diagonals are gated by "enemy or empty", so a pawn may also step
    # diagonally onto an empty square.
    candidates.update(d for d in diagonals if board.is_enemy_or_empty_at(d, piece.color))
    if c.y == PAWN_START_RANK[piece.color]:
        candidates.add(double)
    return reachable(candidates, piece.color, board)


ATTACKING_REGIONS: dict[PieceType, RegionFunc] = {
    PieceType.PAWN: _pawn_region,
    PieceType.KNIGHT: _stepping(KNIGHT_OFFSETS),
    PieceType.BISHOP: _sliding(BISHOP_DIRS),
    PieceType.ROOK: _sliding(ROOK_DIRS),
    PieceType.QUEEN: _sliding(QUEEN_DIRS),
    PieceType.KING: _stepping(KING_OFFSETS),
}
