"""Tests for move parsing and move sources."""

from pathlib import Path

import pytest

from chessrules.core.move import PlayerMove
from chessrules.core.types import Coordinate
from chessrules.game.move_source import (
    FileMoveSource,
    MoveParseError,
    TextMoveSource,
    parse_move,
)

E2E4 = PlayerMove(Coordinate(4, 1), Coordinate(4, 3))


class TestParseMove:
    @pytest.mark.parametrize("text", ["e2e4", "e2 e4", "e2-e4", "  E2E4  ", "4 1 4 3", "4,1,4,3"])
    def test_formats(self, text: str) -> None:
        assert parse_move(text) == E2E4

    def test_numeric_out_of_range_is_kept(self) -> None:
        assert parse_move("8 0 -1 2") == PlayerMove(Coordinate(8, 0), Coordinate(-1, 2))

    @pytest.mark.parametrize("text", ["", "e2", "e9e4", "i2i4", "1 2 3", "castle"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(MoveParseError, match="Cannot parse move"):
            parse_move(text)


class TestTextMoveSource:
    def test_yields_moves_in_order(self) -> None:
        source = TextMoveSource(["e2e4", "e7e5"])
        assert source.next_move() == E2E4
        assert source.next_move() == PlayerMove(Coordinate(4, 6), Coordinate(4, 4))
        assert source.next_move() is None
        assert source.next_move() is None

    def test_skips_blank_lines_and_comments(self) -> None:
        source = TextMoveSource(["# opening", "", "   ", "e2e4"])
        assert source.next_move() == E2E4
        assert source.next_move() is None

    def test_error_reports_line_number(self) -> None:
        source = TextMoveSource(["e2e4", "", "nonsense"])
        source.next_move()
        with pytest.raises(MoveParseError, match="Line 3"):
            source.next_move()


class TestFileMoveSource:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "moves.txt"
        path.write_text("e2e4\n# reply\ne7e5\n", encoding="utf-8")
        source = FileMoveSource(path)
        assert source.path == path
        assert source.next_move() == E2E4
        assert source.next_move() is not None
        assert source.next_move() is None

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            FileMoveSource(tmp_path / "missing.txt")
