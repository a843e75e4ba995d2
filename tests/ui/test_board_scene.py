"""Tests for BoardScene click handling and drawing."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from xadrez.config import BOARD_THEMES
from xadrez.core.enums import Color
from xadrez.core.layouts import layout_from_fen
from xadrez.core.match import Match
from xadrez.core.types import ChessPosition, Position
from xadrez.ui.board_scene import BoardScene
from xadrez.ui.theme import BoardTheme


def _sq(name: str) -> ChessPosition:
    return ChessPosition.parse(name)


def _scene(fen: str | None = None) -> tuple[BoardScene, Match]:
    match = Match(layout_from_fen(fen)) if fen is not None else Match()
    scene = BoardScene()
    scene.set_match(match)
    return scene, match


def test_initial_scene_draws_every_piece() -> None:
    scene, _ = _scene()
    assert len(scene._square_items) == 64
    assert len(scene._piece_items) == 32
    assert Position(7, 4) in scene._piece_items
    assert scene._check_items == []


def test_pos_to_position_maps_tiles() -> None:
    scene = BoardScene()
    t = BoardScene.TILE
    assert scene._pos_to_position(scene.sceneRect().topLeft()) == Position(0, 0)
    assert scene._pos_to_position(QPointF(t + 1, 7 * t + 1)) == Position(7, 1)
    assert scene._pos_to_position(QPointF(8 * t + 1, 0)) is None
    assert scene._pos_to_position(QPointF(-1, 10)) is None


def test_click_own_piece_selects_and_highlights_candidates() -> None:
    scene, _ = _scene()
    scene.click_square(_sq("e2"))
    assert scene.selected_square == _sq("e2")
    # origin + e3 + e4
    assert len(scene._highlight_items) == 3


def test_hidden_legal_moves_keep_only_origin_highlight() -> None:
    scene, _ = _scene()
    scene.set_show_legal_moves(False)
    scene.click_square(_sq("g1"))
    assert len(scene._highlight_items) == 1


def test_click_candidate_plays_move() -> None:
    scene, match = _scene()
    made: list[tuple[str, str]] = []
    scene.move_made.connect(lambda s, t: made.append((s, t)))

    scene.click_square(_sq("e2"))
    scene.click_square(_sq("e4"))

    assert made == [("e2", "e4")]
    assert match.turn == 2
    assert match.current_player == Color.BLACK
    assert scene.selected_square is None
    assert scene._highlight_items == []
    assert Position(4, 4) in scene._piece_items
    assert Position(6, 4) not in scene._piece_items


def test_click_non_candidate_clears_selection() -> None:
    scene, match = _scene()
    scene.click_square(_sq("e2"))
    scene.click_square(_sq("e5"))
    assert scene.selected_square is None
    assert match.turn == 1


def test_click_opponent_piece_does_not_select() -> None:
    scene, _ = _scene()
    scene.click_square(_sq("e7"))
    assert scene.selected_square is None


def test_blocked_piece_is_rejected() -> None:
    scene, _ = _scene()
    rejected: list[str] = []
    scene.move_rejected.connect(rejected.append)

    scene.click_square(_sq("a1"))

    assert scene.selected_square is None
    assert len(rejected) == 1
    assert "no possible moves" in rejected[0]


def test_self_check_is_rejected_and_board_unchanged() -> None:
    # Bishop on e2 shields the white king from the rook on e8.
    scene, match = _scene("k3r3/8/8/8/8/8/4B3/4K3")
    rejected: list[str] = []
    made: list[tuple[str, str]] = []
    scene.move_rejected.connect(rejected.append)
    scene.move_made.connect(lambda s, t: made.append((s, t)))

    scene.click_square(_sq("e2"))
    scene.click_square(_sq("d3"))

    assert made == []
    assert len(rejected) == 1
    assert "own king in check" in rejected[0]
    assert match.turn == 1
    assert Position(6, 4) in scene._piece_items


def test_checkmate_highlights_losing_king() -> None:
    scene, match = _scene("7k/6pp/8/8/8/8/8/R5K1")
    scene.click_square(_sq("a1"))
    scene.click_square(_sq("a8"))
    assert match.checkmate
    assert len(scene._check_items) == 1
    assert scene._check_items[0].rect().topLeft() == QPointF(7 * BoardScene.TILE, 0)


def test_non_interactive_scene_ignores_clicks() -> None:
    scene, _ = _scene()
    scene.set_interactive(False)
    scene.click_square(_sq("e2"))
    assert scene.selected_square is None


def test_set_theme_redraws_squares() -> None:
    scene, _ = _scene()
    theme = BoardTheme.by_name("Green")
    scene.set_theme(theme)
    light = scene._square_items[Position(0, 0)]
    assert light.brush().color() == theme.light_square
    assert len(scene._square_items) == 64
    assert len(scene._piece_items) == 32


def test_unknown_theme_name_falls_back_to_classic() -> None:
    assert BoardTheme.by_name("Walnut") == BoardTheme.default()
    assert BoardTheme.by_name("Blue").dark_square != BoardTheme.default().dark_square


def test_every_configured_theme_has_its_own_squares() -> None:
    squares = {BoardTheme.by_name(name).dark_square.name() for name in BOARD_THEMES}
    assert len(squares) == len(BOARD_THEMES)
