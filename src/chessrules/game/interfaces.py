"""Abstract interfaces for the game layer.

The game loop depends on these ABCs, not on concrete move readers or
storage back ends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.move import PlayerMove


class GameSaveError(RuntimeError):
    """A board could not be saved or loaded."""


class IMoveSource(ABC):
    """Supplies moves one at a time, in playing order."""

    @abstractmethod
    def next_move(self) -> PlayerMove | None:
        """Return the next move, or ``None`` when the source is exhausted.

        Raises:
            MoveParseError: The next entry cannot be read as a move.
        """


class IGameSaver(ABC):
    """Persists boards between sessions.

    No storage format ships with the package; implementations choose their
    own and report failures as :class:`GameSaveError`.
    """

    @abstractmethod
    def save_board(self, board: Board) -> None:
        """Store *board*."""

    @abstractmethod
    def load_board(self) -> Board:
        """Return the most recently stored board."""
