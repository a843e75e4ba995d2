"""Tests for starting layouts and the FEN placement field."""

import pytest

from xadrez.core.enums import Color, PieceKind
from xadrez.core.layouts import (
    STANDARD_FEN,
    Placement,
    demo_layout,
    grid_to_fen,
    layout_from_fen,
    resolve_layout,
    standard_layout,
    validate_layout,
)
from xadrez.core.match import Match
from xadrez.core.piece import PieceInfo
from xadrez.core.types import ChessPosition


class TestPresets:
    def test_standard_has_32_pieces(self) -> None:
        layout = standard_layout()
        assert len(layout) == 32
        assert len({p.square for p in layout}) == 32

    def test_standard_kings(self) -> None:
        kings = {p.square: p.color for p in standard_layout() if p.kind == PieceKind.KING}
        assert kings == {
            ChessPosition("e", 1): Color.WHITE,
            ChessPosition("e", 8): Color.BLACK,
        }

    def test_demo(self) -> None:
        layout = demo_layout()
        assert len(layout) == 5
        assert Placement(PieceKind.KING, Color.BLACK, ChessPosition("a", 8)) in layout

    def test_resolve_named(self) -> None:
        assert resolve_layout("standard") == standard_layout()
        assert resolve_layout("demo") == demo_layout()


class TestValidateLayout:
    def test_presets_are_valid(self) -> None:
        assert validate_layout(standard_layout()) == standard_layout()
        assert validate_layout(iter(demo_layout())) == demo_layout()

    @pytest.mark.parametrize(
        ("fen", "message"),
        [
            ("8/8/8/8/8/8/8/R7", "one WHITE king, found 0"),
            ("4k3/8/8/8/8/8/8/K6K", "one WHITE king, found 2"),
            ("k6k/8/8/8/8/8/8/4K3", "one BLACK king, found 2"),
        ],
    )
    def test_resolve_rejects_bad_king_count(self, fen: str, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            resolve_layout(fen)

    def test_parsing_alone_does_not_count_kings(self) -> None:
        assert len(layout_from_fen("8/8/8/8/8/8/8/R7")) == 1


class TestFen:
    def test_standard_fen_matches_preset(self) -> None:
        assert set(layout_from_fen(STANDARD_FEN)) == set(standard_layout())

    def test_full_fen_string_accepted(self) -> None:
        layout = layout_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert set(layout) == {
            Placement(PieceKind.KING, Color.BLACK, ChessPosition("e", 8)),
            Placement(PieceKind.KING, Color.WHITE, ChessPosition("e", 1)),
        }

    def test_resolve_fen(self) -> None:
        assert len(resolve_layout("7k/6pp/8/8/8/8/8/R5K1")) == 5

    def test_grid_round_trip(self) -> None:
        assert grid_to_fen(Match().piece_grid()) == STANDARD_FEN

    def test_grid_to_fen_after_move(self) -> None:
        match = Match()
        match.perform_move(ChessPosition("e", 2), ChessPosition("e", 4))
        assert grid_to_fen(match.piece_grid()) == (
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"
        )

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8",
            "9/8/8/8/8/8/8/8",
            "0p7/8/8/8/8/8/8/8",
            "ppppppppp/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
            "x7/8/8/8/8/8/8/8",
        ],
    )
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            layout_from_fen(fen)


class TestPieceInfo:
    def test_fen_chars(self) -> None:
        assert PieceInfo(PieceKind.KNIGHT, Color.WHITE).fen_char == "N"
        assert PieceInfo(PieceKind.KNIGHT, Color.BLACK).fen_char == "n"
        assert PieceInfo.from_fen_char("q") == PieceInfo(PieceKind.QUEEN, Color.BLACK)

    def test_glyphs(self) -> None:
        info = PieceInfo(PieceKind.KING, Color.WHITE)
        assert str(info) == "K"
        assert info.symbol == "♔"

    @pytest.mark.parametrize("char", ["x", "", "KK", "1"])
    def test_invalid_char(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            PieceInfo.from_fen_char(char)
