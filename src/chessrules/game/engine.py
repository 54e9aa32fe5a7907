"""GameEngine — plays a sequence of moves from a move source.

Players alternate starting with the side to move; the game stops at the
first rejected move, at checkmate, at unreadable move text, or when the
source runs dry.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.errors import MoveError
from chessrules.core.move import PlayerMove
from chessrules.game.interfaces import IMoveSource
from chessrules.game.move_source import MoveParseError
from chessrules.game.player import Player
from chessrules.game.render import render_attacking_region, render_board
from chessrules.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class GameOutcome:
    """Result of :meth:`GameEngine.play`."""

    board: Board
    moves_played: int
    error: MoveError | None = None
    parse_error: MoveParseError | None = None

    @property
    def winner(self) -> Color | None:
        """The color that delivered checkmate, if any."""
        return self.board.last_mover if self.board.is_checkmate else None

    @property
    def finished_cleanly(self) -> bool:
        return self.error is None and self.parse_error is None


class GameEngine:
    """Drives a game from an :class:`IMoveSource`.

    Args:
        move_source: Where moves come from.
        settings: Player names, pacing and orientation options.
        board: Starting board; the standard initial position by default.
        sleep: Pause function used for pacing between turns.
    """

    __slots__ = ("_source", "_settings", "_start", "_sleep")

    def __init__(
        self,
        move_source: IMoveSource,
        settings: GameSettings | None = None,
        board: Board | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._source = move_source
        self._settings = settings if settings is not None else GameSettings()
        self._start = board if board is not None else Board.initial()
        self._sleep = sleep

    @property
    def settings(self) -> GameSettings:
        return self._settings

    def players(self) -> deque[Player]:
        """Turn queue, side to move first."""
        s = self._settings
        white = Player(s.white_name, Color.WHITE)
        black = Player(s.black_name, Color.BLACK)
        if self._start.side_to_move == Color.WHITE:
            return deque([white, black])
        return deque([black, white])

    def play(self) -> GameOutcome:
        board = self._start
        players = self.players()
        moves: deque[PlayerMove] = deque()

        mirror = False
        parse_error: MoveParseError | None = None
        try:
            first = self._source.next_move()
        except MoveParseError as exc:
            _LOGGER.warning("Cannot read move: %s", exc)
            first, parse_error = None, exc
        if first is not None:
            mirror = self._settings.auto_orient and self._needs_mirroring(first, board)
            if mirror:
                _LOGGER.info("First move does not start on a %s piece; mirroring moves", board.side_to_move)
            moves.append(first.reversed_by_y() if mirror else first)

        moves_played = 0
        error: MoveError | None = None
        while moves and not board.is_checkmate:
            if self._settings.move_delay_seconds > 0:
                self._sleep(self._settings.move_delay_seconds)

            player = players.popleft()
            move = moves.popleft()
            _LOGGER.info("Turn %d | %s | %s", moves_played + 1, player, move)
            if self._settings.show_attacking_region:
                self._log_attacking_region(move, board)

            try:
                board = board.apply_move(player, move)
            except MoveError as exc:
                _LOGGER.warning("Move %s by %s rejected: %s", move, player, exc)
                error = exc
                break

            moves_played += 1
            players.append(player)
            _LOGGER.debug("Board after move:\n%s", render_board(board))

            try:
                upcoming = self._source.next_move()
            except MoveParseError as exc:
                # No further moves are read; the outcome keeps the board so far.
                _LOGGER.warning("Cannot read move: %s", exc)
                parse_error = exc
                continue
            if upcoming is not None:
                moves.append(upcoming.reversed_by_y() if mirror else upcoming)

        if error is None and parse_error is None:
            _LOGGER.info("Game has been finished successfully after %d moves", moves_played)
        else:
            _LOGGER.info("Game has been finished with error: %s", error or parse_error)
        return GameOutcome(board, moves_played, error, parse_error)

    @staticmethod
    def _needs_mirroring(move: PlayerMove, board: Board) -> bool:
        if not move.from_coord.in_bounds:
            return False
        piece = board.at_coordinate(move.from_coord)
        return piece is None or piece.color != board.side_to_move

    @staticmethod
    def _log_attacking_region(move: PlayerMove, board: Board) -> None:
        if not _LOGGER.isEnabledFor(logging.DEBUG) or not move.from_coord.in_bounds:
            return
        piece = board.at_coordinate(move.from_coord)
        if piece is not None:
            _LOGGER.debug("%s", render_attacking_region(piece, board))
