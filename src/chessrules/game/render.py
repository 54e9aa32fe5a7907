"""Text rendering of boards and attacking regions."""

from __future__ import annotations

from chessrules.core.board import Board, Square
from chessrules.core.piece import Piece
from chessrules.core.types import FILES, Coordinate

_HEADER = f"  {' '.join(FILES)}"


def render_board(board: Board) -> str:
    """Diagram with rank 8 on top, followed by check/checkmate notes."""
    lines = [_HEADER, *board.rank_lines()]

    for color in (board.last_mover, board.side_to_move):
        king = board.king_of(color)
        if king is not None and board.in_check(color):
            lines.append(f"{color.title} king [{king.coordinate}] is under attack, check!")

    if board.is_checkmate:
        lines.append(
            f"{board.last_mover.title} set checkmate to {board.side_to_move.title}. Game is finished!"
        )
    return "\n".join(lines)


def render_attacking_region(piece: Piece, board: Board) -> str:
    """Diagram marking every square of *piece*'s attacking region with ``x``."""
    region = piece.find_attacking_region(board)

    def cell(coordinate: Coordinate, square: Square) -> str:
        if coordinate == piece.coordinate:
            return piece.symbol
        return "x" if coordinate in region else "."

    return "\n".join([f"Attacking region of {piece}", _HEADER, *board.rank_lines(cell)])
