"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.piece import Piece
from chessrules.core.types import Coordinate
from chessrules.game.player import Player

BoardFactory = Callable[..., Board]


@pytest.fixture
def white() -> Player:
    return Player("A", Color.WHITE)


@pytest.fixture
def black() -> Player:
    return Player("B", Color.BLACK)


@pytest.fixture
def make_board() -> BoardFactory:
    """Build a board from ``{"e1": "K", "e8": "k"}``-style layouts."""

    def _make(layout: dict[str, str], last_mover: Color = Color.BLACK) -> Board:
        pieces = (Piece.from_char(char, Coordinate.parse(name)) for name, char in layout.items())
        return Board.from_pieces(pieces, last_mover)

    return _make
