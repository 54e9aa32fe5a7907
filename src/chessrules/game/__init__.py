"""Game layer — move sources, game loop, rendering and persistence contract.

Quick start::

    from chessrules.game import FileMoveSource, GameEngine

    outcome = GameEngine(FileMoveSource("moves.txt")).play()
    outcome.winner, outcome.error
"""

from chessrules.game.engine import GameEngine, GameOutcome
from chessrules.game.interfaces import GameSaveError, IGameSaver, IMoveSource
from chessrules.game.move_source import (
    FileMoveSource,
    MoveParseError,
    TextMoveSource,
    parse_move,
)
from chessrules.game.player import Player
from chessrules.game.render import render_attacking_region, render_board
from chessrules.game.settings import GameSettings

__all__ = [
    # Interfaces
    "GameSaveError",
    "IGameSaver",
    "IMoveSource",
    # Concrete
    "FileMoveSource",
    "GameEngine",
    "GameOutcome",
    "GameSettings",
    "MoveParseError",
    "Player",
    "TextMoveSource",
    "parse_move",
    # Rendering
    "render_attacking_region",
    "render_board",
]
