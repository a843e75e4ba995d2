"""Tests for Color and PieceKind."""

from xadrez.core.enums import Color, PieceKind


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_text_forms_use_name(self) -> None:
        assert str(Color.BLACK) == "BLACK"
        assert f"{Color.WHITE}" == "WHITE"
        assert f"{Color.WHITE:>6}" == " WHITE"


class TestPieceKind:
    def test_six_kinds(self) -> None:
        assert len(PieceKind) == 6
        assert {k.name for k in PieceKind} == {
            "PAWN",
            "KNIGHT",
            "BISHOP",
            "ROOK",
            "QUEEN",
            "KING",
        }
