"""Tests for Position and ChessPosition."""

import pytest

from xadrez.core.errors import ChessError, InvalidCoordinate
from xadrez.core.types import ChessPosition, Position


class TestPosition:
    def test_value_equality(self) -> None:
        assert Position(3, 4) == Position(3, 4)
        assert Position(3, 4) != Position(4, 3)

    def test_hashable(self) -> None:
        assert len({Position(1, 1), Position(1, 1), Position(2, 1)}) == 2

    def test_immutable(self) -> None:
        p = Position(0, 0)
        with pytest.raises(AttributeError):
            p.row = 1  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Position(6, 4)) == "(6, 4)"


class TestChessPositionMapping:
    def test_e1(self) -> None:
        assert ChessPosition("e", 1).to_position() == Position(7, 4)

    def test_a8_is_origin(self) -> None:
        assert ChessPosition("a", 8).to_position() == Position(0, 0)

    def test_h1_is_last_cell(self) -> None:
        assert ChessPosition("h", 1).to_position() == Position(7, 7)

    def test_from_position(self) -> None:
        assert ChessPosition.from_position(Position(6, 4)) == ChessPosition("e", 2)

    def test_round_trip_every_square(self) -> None:
        for column in "abcdefgh":
            for row in range(1, 9):
                cp = ChessPosition(column, row)
                position = cp.to_position()
                assert ChessPosition.from_position(position) == cp
                assert ChessPosition.from_position(position).to_position() == position

    def test_from_position_outside_board(self) -> None:
        with pytest.raises(InvalidCoordinate):
            ChessPosition.from_position(Position(8, 0))
        with pytest.raises(InvalidCoordinate):
            ChessPosition.from_position(Position(0, -1))

    def test_str(self) -> None:
        assert str(ChessPosition("g", 7)) == "g7"


class TestChessPositionValidation:
    @pytest.mark.parametrize(
        ("column", "row"),
        [("i", 1), ("a", 0), ("a", 9), ("A", 1), ("ab", 1), ("", 3)],
    )
    def test_invalid_range(self, column: str, row: int) -> None:
        with pytest.raises(InvalidCoordinate):
            ChessPosition(column, row)

    def test_invalid_coordinate_is_rule_violation(self) -> None:
        with pytest.raises(ChessError):
            ChessPosition("z", 1)


class TestChessPositionParse:
    def test_parse(self) -> None:
        assert ChessPosition.parse("e4") == ChessPosition("e", 4)
        assert ChessPosition.parse("h8") == ChessPosition("h", 8)

    @pytest.mark.parametrize("text", ["E4", " e4", "e4 ", "e", "e10", "e0", "", "4e"])
    def test_rejects(self, text: str) -> None:
        with pytest.raises(InvalidCoordinate):
            ChessPosition.parse(text)
