"""Tests for MainWindow status reporting and new-game handling."""

from __future__ import annotations

from xadrez.config import AppSettings
from xadrez.core.enums import Color
from xadrez.core.types import ChessPosition
from xadrez.ui.main_window import MainWindow


def _play(window: MainWindow, source: str, target: str) -> None:
    scene = window.board_view.board_scene
    scene.click_square(ChessPosition.parse(source))
    scene.click_square(ChessPosition.parse(target))


def test_initial_status() -> None:
    window = MainWindow(AppSettings())
    assert window.status_text() == "Turn: 1 | Waiting player: WHITE"
    assert window.captured_text() == "Captured: White: []  Black: []"
    assert window._status_label.text() == window.status_text()


def test_move_updates_status() -> None:
    window = MainWindow(AppSettings())
    _play(window, "e2", "e4")
    assert window.match.turn == 2
    assert window._status_label.text() == "Turn: 2 | Waiting player: BLACK"


def test_rejected_move_shows_message() -> None:
    window = MainWindow(AppSettings(layout="k3r3/8/8/8/8/8/4B3/4K3"))
    _play(window, "e2", "d3")
    assert "own king in check" in window._message_label.text()
    assert window.match.turn == 1


def test_capture_listed() -> None:
    window = MainWindow(AppSettings(layout="4k3/8/8/8/8/8/p7/R3K3"))
    _play(window, "a1", "a2")
    assert window.captured_text() == "Captured: White: []  Black: [♟]"


def test_check_and_checkmate_status() -> None:
    window = MainWindow(AppSettings(layout="7k/6pp/8/8/8/8/8/R5K1"))
    _play(window, "a1", "a8")
    assert window.match.winner == Color.WHITE
    assert window.status_text() == "Turn: 2 | CHECKMATE! Winner: WHITE"
    assert window.board_view.board_scene._interactive is False


def test_new_game_resets_match() -> None:
    window = MainWindow(AppSettings())
    _play(window, "e2", "e4")
    old_match = window.match

    window.new_game()

    assert window.match is not old_match
    assert window.match.turn == 1
    assert window.status_text() == "Turn: 1 | Waiting player: WHITE"
    assert len(window.board_view.board_scene._piece_items) == 32
