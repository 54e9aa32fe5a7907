"""Application entry point: play a file of moves from the initial position."""

from __future__ import annotations

import argparse
import logging
import sys

from chessrules.game.engine import GameEngine
from chessrules.game.move_source import FileMoveSource
from chessrules.game.render import render_board
from chessrules.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessrules",
        description="Validate a sequence of chess moves and report check/checkmate.",
    )
    parser.add_argument("moves", help="text file with one move per line, e.g. 'e2e4'")
    parser.add_argument("--white", default="A", help="White player's name")
    parser.add_argument("--black", default="B", help="Black player's name")
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="seconds to pause before each turn",
    )
    parser.add_argument(
        "--no-orient",
        action="store_true",
        help="never mirror moves, even when the first one is not White's",
    )
    parser.add_argument(
        "--no-region",
        action="store_true",
        help="do not log the attacking region of each moved piece",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool. Returns the process exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = GameSettings(
        white_name=args.white,
        black_name=args.black,
        move_delay_seconds=args.delay,
        auto_orient=not args.no_orient,
        show_attacking_region=not args.no_region,
    )

    try:
        outcome = GameEngine(FileMoveSource(args.moves), settings).play()
    except OSError as exc:
        _LOGGER.error("Cannot read moves file: %s", exc)
        return 2

    print(render_board(outcome.board))
    if outcome.parse_error is not None:
        print(f"Game has been stopped after {outcome.moves_played} moves: {outcome.parse_error}")
        return 2
    if outcome.error is not None:
        print(f"Game has been finished with error: {outcome.error}")
        return 1
    print(f"Game has been finished successfully after {outcome.moves_played} moves")
    return 0


if __name__ == "__main__":
    sys.exit(main())
