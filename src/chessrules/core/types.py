"""Coordinate value type and square-name helpers.

Board layout (White's perspective)::

    x = file, 0..7 -> a..h
    y = rank, 0..7 -> 1..8

White starts on ranks 1-2 (y = 0..1), Black on ranks 7-8 (y = 6..7).
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable grid position.

    Offsets never check bounds; the board rejects off-board coordinates at
    lookup time.
    """

    x: int
    y: int

    # ── Offsets ──────────────────────────────────────────────────────────

    def shifted(self, dx: int, dy: int) -> Coordinate:
        return Coordinate(self.x + dx, self.y + dy)

    @property
    def left(self) -> Coordinate:
        return Coordinate(self.x - 1, self.y)

    @property
    def right(self) -> Coordinate:
        return Coordinate(self.x + 1, self.y)

    @property
    def up(self) -> Coordinate:
        return Coordinate(self.x, self.y + 1)

    @property
    def down(self) -> Coordinate:
        return Coordinate(self.x, self.y - 1)

    @property
    def left_up(self) -> Coordinate:
        return Coordinate(self.x - 1, self.y + 1)

    @property
    def right_up(self) -> Coordinate:
        return Coordinate(self.x + 1, self.y + 1)

    @property
    def left_down(self) -> Coordinate:
        return Coordinate(self.x - 1, self.y - 1)

    @property
    def right_down(self) -> Coordinate:
        return Coordinate(self.x + 1, self.y - 1)

    # ── Mirroring ────────────────────────────────────────────────────────

    def reversed(self) -> Coordinate:
        """Point mirror through the board centre."""
        return Coordinate(BOARD_SIZE - 1 - self.x, BOARD_SIZE - 1 - self.y)

    def reversed_by_y(self) -> Coordinate:
        """Rank-only mirror: flips the board between the two players' views."""
        return Coordinate(self.x, BOARD_SIZE - 1 - self.y)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def in_bounds(self) -> bool:
        return 0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``Coordinate(4, 3)`` -> ``'e4'``.

        Off-board coordinates fall back to ``'(x,y)'``.
        """
        if not self.in_bounds:
            return f"({self.x},{self.y})"
        return FILES[self.x] + RANKS[self.y]

    @classmethod
    def parse(cls, name: str) -> Coordinate:
        """Parse square name, e.g. ``'e4'`` -> ``Coordinate(4, 3)``."""
        if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(FILES.index(name[0]), RANKS.index(name[1]))

    def __str__(self) -> str:
        return self.name
