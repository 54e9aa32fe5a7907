"""Tests for Piece attacking regions and moves."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import (
    SelfExposedCheckError,
    UnreachableDestinationError,
    UnresolvedCheckError,
)
from chessrules.core.piece import Piece
from chessrules.core.types import Coordinate


def sq(name: str) -> Coordinate:
    return Coordinate.parse(name)


def squares(*names: str) -> frozenset[Coordinate]:
    return frozenset(sq(n) for n in names)


class TestPieceValue:
    def test_symbol(self) -> None:
        assert Piece(PieceType.KNIGHT, Color.WHITE, sq("b1")).symbol == "N"
        assert Piece(PieceType.KNIGHT, Color.BLACK, sq("b8")).symbol == "n"

    def test_from_char(self) -> None:
        piece = Piece.from_char("q", sq("d8"))
        assert piece == Piece(PieceType.QUEEN, Color.BLACK, sq("d8"))

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x", sq("a1"))

    def test_moved_to_keeps_kind_and_color(self) -> None:
        piece = Piece(PieceType.ROOK, Color.WHITE, sq("a1"))
        moved = piece.moved_to(sq("a5"))
        assert moved == Piece(PieceType.ROOK, Color.WHITE, sq("a5"))
        assert piece.coordinate == sq("a1")


class TestPawnRegion:
    def test_white_start_rank(self) -> None:
        board = Board.initial()
        pawn = board.at_coordinate(sq("e2"))
        assert pawn is not None
        # Diagonals onto empty squares are part of the region.
        assert pawn.find_attacking_region(board) == squares("e3", "e4", "d3", "f3")

    def test_black_start_rank(self) -> None:
        board = Board.initial()
        pawn = board.at_coordinate(sq("d7"))
        assert pawn is not None
        assert pawn.find_attacking_region(board) == squares("d6", "d5", "c6", "e6")

    def test_edge_file(self) -> None:
        board = Board.initial()
        pawn = board.at_coordinate(sq("a2"))
        assert pawn is not None
        assert pawn.find_attacking_region(board) == squares("a3", "a4", "b3")

    def test_double_step_ignores_blocked_middle_square(self, make_board) -> None:
        board = make_board({"e2": "P", "e3": "n"})
        pawn = board.at_coordinate(sq("e2"))
        assert sq("e4") in pawn.find_attacking_region(board)
        assert sq("e3") in pawn.find_attacking_region(board)

    def test_no_double_step_off_start_rank(self, make_board) -> None:
        board = make_board({"e3": "P"})
        pawn = board.at_coordinate(sq("e3"))
        assert pawn.find_attacking_region(board) == squares("e4", "d4", "f4")

    def test_diagonal_capture(self, make_board) -> None:
        board = make_board({"e4": "P", "d5": "p", "f5": "N"})
        pawn = board.at_coordinate(sq("e4"))
        assert pawn.find_attacking_region(board) == squares("e5", "d5")

    def test_forward_square_only_filters_own_pieces(self, make_board) -> None:
        board = make_board({"e4": "P", "e5": "p"})
        pawn = board.at_coordinate(sq("e4"))
        assert sq("e5") in pawn.find_attacking_region(board)

    def test_last_rank_has_no_forward_square(self, make_board) -> None:
        board = make_board({"c8": "P"})
        pawn = board.at_coordinate(sq("c8"))
        assert pawn.find_attacking_region(board) == frozenset()


class TestSlidingRegions:
    def test_rook_on_empty_board(self, make_board) -> None:
        board = make_board({"d4": "R"})
        assert len(board.at_coordinate(sq("d4")).find_attacking_region(board)) == 14

    def test_bishop_on_empty_board(self, make_board) -> None:
        board = make_board({"d4": "B"})
        assert len(board.at_coordinate(sq("d4")).find_attacking_region(board)) == 13

    def test_queen_on_empty_board(self, make_board) -> None:
        board = make_board({"d4": "Q"})
        assert len(board.at_coordinate(sq("d4")).find_attacking_region(board)) == 27

    def test_rook_ray_stops_at_blockers(self, make_board) -> None:
        board = make_board({"a1": "R", "a3": "p", "c1": "N"})
        rook = board.at_coordinate(sq("a1"))
        # Enemy blocker included, own blocker excluded.
        assert rook.find_attacking_region(board) == squares("a2", "a3", "b1")

    def test_bishop_boxed_in_on_initial_board(self) -> None:
        board = Board.initial()
        bishop = board.at_coordinate(sq("c1"))
        assert bishop.find_attacking_region(board) == frozenset()


class TestSteppingRegions:
    def test_knight_initial(self) -> None:
        board = Board.initial()
        knight = board.at_coordinate(sq("b1"))
        assert knight.find_attacking_region(board) == squares("a3", "c3")

    def test_knight_centre(self, make_board) -> None:
        board = make_board({"d4": "N"})
        assert board.at_coordinate(sq("d4")).find_attacking_region(board) == squares(
            "b3", "b5", "c2", "c6", "e2", "e6", "f3", "f5"
        )

    def test_king_corner(self, make_board) -> None:
        board = make_board({"a1": "K"})
        assert board.at_coordinate(sq("a1")).find_attacking_region(board) == squares(
            "a2", "b1", "b2"
        )

    def test_king_boxed_in_on_initial_board(self) -> None:
        board = Board.initial()
        assert board.at_coordinate(sq("e1")).find_attacking_region(board) == frozenset()


class TestRegionNeverHoldsOwnPieces:
    def test_initial_board(self) -> None:
        board = Board.initial()
        for color in Color:
            for piece in board.pieces_of(color):
                for c in piece.find_attacking_region(board):
                    target = board.at_coordinate(c)
                    assert target is None or target.color != piece.color

    def test_crowded_position(self, make_board) -> None:
        board = make_board(
            {
                "e1": "K", "d1": "Q", "d2": "P", "e2": "B", "f2": "N", "c3": "R",
                "e8": "k", "d8": "q", "d7": "p", "e7": "b", "f6": "n", "c6": "r",
            }
        )
        for color in Color:
            for piece in board.pieces_of(color):
                region = piece.find_attacking_region(board)
                assert all(c.in_bounds for c in region)
                assert not region & {p.coordinate for p in board.pieces_of(color)}


class TestMove:
    def test_unreachable(self) -> None:
        board = Board.initial()
        pawn = board.at_coordinate(sq("e2"))
        with pytest.raises(UnreachableDestinationError, match="not able to reach e5"):
            pawn.move(sq("e5"), board)

    def test_move_rebuilds_board(self) -> None:
        board = Board.initial()
        pawn = board.at_coordinate(sq("e2"))
        after = pawn.move(sq("e4"), board)
        assert after.at_coordinate(sq("e2")) is None
        assert after.at_coordinate(sq("e4")) == pawn.moved_to(sq("e4"))
        assert after.last_mover == Color.WHITE
        assert board == Board.initial()

    def test_pinned_piece_exposes_king(self, make_board) -> None:
        board = make_board({"e1": "K", "e2": "B", "e8": "r", "a8": "k"})
        bishop = board.at_coordinate(sq("e2"))
        with pytest.raises(SelfExposedCheckError):
            bishop.move(sq("d3"), board)

    def test_check_not_resolved(self, make_board) -> None:
        board = make_board({"e1": "K", "a2": "R", "e8": "r", "h8": "k"})
        assert board.in_check(Color.WHITE)
        rook = board.at_coordinate(sq("a2"))
        with pytest.raises(UnresolvedCheckError):
            rook.move(sq("a3"), board)

    def test_block_resolves_check(self, make_board) -> None:
        board = make_board({"e1": "K", "a2": "R", "e8": "r", "h8": "k"})
        after = board.at_coordinate(sq("a2")).move(sq("e2"), board)
        assert not after.in_check(Color.WHITE)

    def test_giving_check_is_allowed(self, make_board) -> None:
        board = make_board({"a1": "K", "h2": "R", "e8": "k"})
        after = board.at_coordinate(sq("h2")).move(sq("h8"), board)
        assert after.in_check(Color.BLACK)
        assert not after.is_checkmate
