"""Board - immutable 8x8 snapshot with derived check/checkmate state."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cache
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import (
    EmptyOriginError,
    FriendlyFireError,
    OutOfBoundsError,
    WrongMoverError,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import SimpleCheckmateChecker
from chessrules.core.types import BOARD_SIZE, FILES, Coordinate

if TYPE_CHECKING:
    from chessrules.core.move import Mover, PlayerMove
    from chessrules.core.rules import CheckmateChecker

Square = Piece | None

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable board.

    Everything derived from the grid (piece sets, control regions, check
    flags and the checkmate flag) is computed once in the constructor. A move
    never touches an existing board; it builds a new one.

    Args:
        squares: 8 rows of 8 squares, indexed ``squares[y][x]``.
        last_mover: Color that produced this position. Checkmate is evaluated
            for the opposite color, the one about to move.
        checker: Checkmate search strategy.
        search_checkmate: When False the checkmate search is deferred until
            :attr:`is_checkmate` is first read.
    """

    __slots__ = (
        "_squares",
        "_last_mover",
        "_checker",
        "_pieces",
        "_kings",
        "_control",
        "_in_check",
        "_checkmate",
    )

    def __init__(
        self,
        squares: Iterable[Iterable[Square]],
        last_mover: Color = Color.BLACK,
        *,
        checker: CheckmateChecker | None = None,
        search_checkmate: bool = True,
    ) -> None:
        self._squares: tuple[tuple[Square, ...], ...] = tuple(tuple(row) for row in squares)
        self._last_mover = last_mover
        self._checker: CheckmateChecker = checker if checker is not None else SimpleCheckmateChecker()
        self._validate()

        pieces: dict[Color, set[Piece]] = {Color.WHITE: set(), Color.BLACK: set()}
        self._kings: dict[Color, Piece] = {}
        for row in self._squares:
            for square in row:
                if square is None:
                    continue
                pieces[square.color].add(square)
                if square.piece_type == PieceType.KING:
                    self._kings[square.color] = square
        self._pieces: dict[Color, frozenset[Piece]] = {
            color: frozenset(found) for color, found in pieces.items()
        }

        self._control: dict[Color, frozenset[Coordinate]] = {}
        for color, own in self._pieces.items():
            region: set[Coordinate] = set()
            for piece in own:
                region |= piece.find_attacking_region(self)
            self._control[color] = frozenset(region)

        self._in_check: dict[Color, bool] = {
            color: color in self._kings
            and self._kings[color].coordinate in self._control[color.opposite]
            for color in Color
        }

        self._checkmate: bool | None = None
        if search_checkmate:
            self._checkmate = self._checker.is_checkmate(last_mover.opposite, self)

    def _validate(self) -> None:
        if len(self._squares) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self._squares):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        for y, row in enumerate(self._squares):
            for x, square in enumerate(row):
                if square is not None and square.coordinate != Coordinate(x, y):
                    raise ValueError(f"{square} stored on square {Coordinate(x, y)}")

    # -- Factories ----------------------------------------------------------

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece], last_mover: Color = Color.BLACK) -> Board:
        """Build a board holding exactly *pieces*."""
        rows: list[list[Square]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for piece in pieces:
            c = piece.coordinate
            if not c.in_bounds:
                raise ValueError(f"{piece} is off the board")
            if rows[c.y][c.x] is not None:
                raise ValueError(f"Square {c} is occupied twice")
            rows[c.y][c.x] = piece
        return cls(rows, last_mover)

    @classmethod
    @cache
    def initial(cls) -> Board:
        """Standard starting position. White moves first."""
        pieces: list[Piece] = []
        for x, piece_type in enumerate(_BACK_RANK):
            pieces.append(Piece(piece_type, Color.WHITE, Coordinate(x, 0)))
            pieces.append(Piece(PieceType.PAWN, Color.WHITE, Coordinate(x, 1)))
            pieces.append(Piece(PieceType.PAWN, Color.BLACK, Coordinate(x, 6)))
            pieces.append(Piece(piece_type, Color.BLACK, Coordinate(x, 7)))
        return cls.from_pieces(pieces, Color.BLACK)

    # -- Element access -----------------------------------------------------

    @property
    def squares(self) -> tuple[tuple[Square, ...], ...]:
        return self._squares

    @property
    def last_mover(self) -> Color:
        return self._last_mover

    @property
    def side_to_move(self) -> Color:
        return self._last_mover.opposite

    @property
    def checker(self) -> CheckmateChecker:
        return self._checker

    @staticmethod
    def contains(coordinate: Coordinate) -> bool:
        return coordinate.in_bounds

    def at_coordinate(self, coordinate: Coordinate) -> Square:
        """Square at *coordinate*; ``None`` when empty."""
        if not coordinate.in_bounds:
            raise OutOfBoundsError(f"There is no square {coordinate} on the board")
        return self._squares[coordinate.y][coordinate.x]

    def is_enemy_or_empty_at(self, coordinate: Coordinate, color: Color) -> bool:
        """False only when *coordinate* holds a *color* piece."""
        if not coordinate.in_bounds:
            return True
        square = self._squares[coordinate.y][coordinate.x]
        return square is None or square.color != color

    # -- Derived state ------------------------------------------------------

    def pieces_of(self, color: Color) -> frozenset[Piece]:
        return self._pieces[color]

    def king_of(self, color: Color) -> Piece | None:
        return self._kings.get(color)

    def control_region(self, color: Color) -> frozenset[Coordinate]:
        """Union of the attacking regions of all *color* pieces."""
        return self._control[color]

    def in_check(self, color: Color) -> bool:
        return self._in_check[color]

    @property
    def is_checkmate(self) -> bool:
        """Whether the side to move is checkmated."""
        if self._checkmate is None:
            self._checkmate = self._checker.is_checkmate(self.side_to_move, self)
        return self._checkmate

    # -- Moves --------------------------------------------------------------

    def with_move(self, piece: Piece, to: Coordinate, *, search_checkmate: bool = True) -> Board:
        """New board with *piece* lifted from its square and placed on *to*.

        No rule checking happens here; see :meth:`apply_move`.
        """
        rows = [list(row) for row in self._squares]
        origin = piece.coordinate
        rows[origin.y][origin.x] = None
        rows[to.y][to.x] = piece.moved_to(to)
        return Board(rows, piece.color, checker=self._checker, search_checkmate=search_checkmate)

    def apply_move(self, player: Mover, move: PlayerMove) -> Board:
        """Validate *move* for *player* and return the board after it.

        Raises a :class:`~chessrules.core.errors.MoveError` subclass when the
        move is rejected; this board is left untouched either way.
        """
        from_coord, to_coord = move.from_coord, move.to_coord
        if not from_coord.in_bounds:
            raise OutOfBoundsError(f"Illegal move, there is no square {from_coord} on the board")
        if not to_coord.in_bounds:
            raise OutOfBoundsError(f"Illegal move, there is no square {to_coord} on the board")

        attacker = self.at_coordinate(from_coord)
        if attacker is None:
            raise EmptyOriginError(f"There is no piece on {from_coord}")
        if attacker.color != player.color:
            raise WrongMoverError(f"Illegal move, {player.color} cannot move {attacker}")

        attacked = self.at_coordinate(to_coord)
        if attacked is not None and attacked.color == attacker.color:
            raise FriendlyFireError(f"Illegal move, {attacker} cannot attack allied {attacked}")

        return attacker.move(to_coord, self)

    # -- Rendering ----------------------------------------------------------

    def rank_lines(self, cell: Callable[[Coordinate, Square], str] | None = None) -> list[str]:
        """Diagram rows, rank 8 first, e.g. ``'8 r n b q k b n r'``.

        *cell* maps a coordinate and its square to the character shown;
        piece symbols and ``'.'`` for empty squares by default.
        """
        rows: list[str] = []
        for y in range(BOARD_SIZE - 1, -1, -1):
            if cell is None:
                chars = [square.symbol if square else "." for square in self._squares[y]]
            else:
                chars = [cell(Coordinate(x, y), square) for x, square in enumerate(self._squares[y])]
            rows.append(f"{y + 1} {' '.join(chars)}")
        return rows

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares and self._last_mover == other._last_mover

    def __hash__(self) -> int:
        return hash((self._squares, self._last_mover))

    def __repr__(self) -> str:
        return "\n".join([*self.rank_lines(), f"  {' '.join(FILES)}"])


def apply_move(player: Mover, move: PlayerMove, board: Board) -> Board:
    """Function form of :meth:`Board.apply_move`."""
    return board.apply_move(player, move)
