"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, Coordinate, PlayerMove

    board = Board.initial()
    board = board.apply_move(player, PlayerMove(Coordinate.parse("e2"), Coordinate.parse("e4")))
    board.in_check(Color.BLACK), board.is_checkmate
"""

from chessrules.core.board import Board, Square, apply_move
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import (
    EmptyOriginError,
    FriendlyFireError,
    MoveError,
    OutOfBoundsError,
    SelfExposedCheckError,
    UnreachableDestinationError,
    UnresolvedCheckError,
    WrongMoverError,
)
from chessrules.core.move import Mover, PlayerMove
from chessrules.core.piece import Piece
from chessrules.core.rules import CheckmateChecker, Rules, SimpleCheckmateChecker
from chessrules.core.types import BOARD_SIZE, Coordinate

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types
    "BOARD_SIZE",
    "Coordinate",
    "Square",
    # Domain objects
    "Board",
    "Mover",
    "Piece",
    "PlayerMove",
    "apply_move",
    # Rules
    "CheckmateChecker",
    "Rules",
    "SimpleCheckmateChecker",
    # Errors
    "EmptyOriginError",
    "FriendlyFireError",
    "MoveError",
    "OutOfBoundsError",
    "SelfExposedCheckError",
    "UnreachableDestinationError",
    "UnresolvedCheckError",
    "WrongMoverError",
]
