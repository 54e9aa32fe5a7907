"""Move sources: text parsing plus list- and file-backed readers.

Accepted move formats, one per line::

    e2e4          algebraic squares
    e2 e4 / e2-e4 algebraic squares with a separator
    4 1 4 3       raw x1 y1 x2 y2 grid coordinates

Blank lines and lines starting with ``#`` are skipped.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from chessrules.core.move import PlayerMove
from chessrules.core.types import Coordinate
from chessrules.game.interfaces import IMoveSource

_ALGEBRAIC_RE = re.compile(r"^([a-h][1-8])\s*[-\s]?\s*([a-h][1-8])$")
_NUMERIC_RE = re.compile(r"^(-?\d+)[\s,]+(-?\d+)[\s,]+(-?\d+)[\s,]+(-?\d+)$")


class MoveParseError(ValueError):
    """Move text could not be understood."""


def parse_move(text: str) -> PlayerMove:
    """Parse a single move, e.g. ``'e2e4'`` or ``'4 1 4 3'``.

    Numeric coordinates are not range-checked; the board rejects them.
    """
    stripped = text.strip().lower()
    if m := _ALGEBRAIC_RE.match(stripped):
        return PlayerMove(Coordinate.parse(m.group(1)), Coordinate.parse(m.group(2)))
    if m := _NUMERIC_RE.match(stripped):
        x1, y1, x2, y2 = (int(g) for g in m.groups())
        return PlayerMove(Coordinate(x1, y1), Coordinate(x2, y2))
    raise MoveParseError(f"Cannot parse move: {text!r}")


class TextMoveSource(IMoveSource):
    """Reads moves from an iterable of text lines."""

    __slots__ = ("_lines", "_line_no")

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._line_no = 0

    def next_move(self) -> PlayerMove | None:
        for line in self._lines:
            self._line_no += 1
            content = line.strip()
            if not content or content.startswith("#"):
                continue
            try:
                return parse_move(content)
            except MoveParseError as exc:
                raise MoveParseError(f"Line {self._line_no}: {exc}") from exc
        return None


class FileMoveSource(TextMoveSource):
    """Reads moves from a text file."""

    __slots__ = ("path",)

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(self.path.read_text(encoding="utf-8").splitlines())
