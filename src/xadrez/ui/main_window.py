"""MainWindow — board view plus match status."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from xadrez.config import AppSettings
from xadrez.core.enums import Color
from xadrez.core.layouts import resolve_layout
from xadrez.core.match import Match
from xadrez.ui.board_view import BoardView
from xadrez.ui.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level window: the board, a status line and the captured pieces."""

    def __init__(
        self, settings: AppSettings | None = None, parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else AppSettings()
        self._match = Match(resolve_layout(self._settings.layout))

        self.setWindowTitle("Xadrez")

        self._board_view = BoardView()
        self._status_label = QLabel()
        self._captured_label = QLabel()
        self._message_label = QLabel()

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addWidget(self._board_view, 1)
        layout.addWidget(self._status_label)
        layout.addWidget(self._captured_label)
        layout.addWidget(self._message_label)
        self.setCentralWidget(central)

        new_game = QAction("&New Game", self)
        new_game.setShortcut(QKeySequence.StandardKey.New)
        new_game.triggered.connect(self.new_game)
        menu = self.menuBar()
        assert menu is not None
        game_menu = menu.addMenu("&Game")
        assert game_menu is not None
        game_menu.addAction(new_game)

        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(self._settings.board_theme))
        scene.set_show_legal_moves(self._settings.show_legal_moves)
        self._board_view.move_made.connect(self._on_move_made)
        self._board_view.move_rejected.connect(self._on_move_rejected)

        scene.set_match(self._match)
        self._update_status()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def match(self) -> Match:
        return self._match

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._match = Match(resolve_layout(self._settings.layout))
        self._board_view.board_scene.set_match(self._match)
        self._message_label.clear()
        self._update_status()
        _LOGGER.info("New game with layout %r", self._settings.layout)

    def status_text(self) -> str:
        m = self._match
        text = f"Turn: {m.turn}"
        if m.checkmate:
            return f"{text} | CHECKMATE! Winner: {m.winner}"
        text += f" | Waiting player: {m.current_player}"
        if m.check:
            text += " | CHECK!"
        return text

    def captured_text(self) -> str:
        captured = self._match.captured_pieces()
        parts = []
        for color in (Color.WHITE, Color.BLACK):
            symbols = " ".join(p.symbol for p in captured if p.color == color)
            parts.append(f"{color.name.capitalize()}: [{symbols}]")
        return "Captured: " + "  ".join(parts)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_made(self, source: str, target: str) -> None:
        _LOGGER.debug("Move %s-%s played", source, target)
        self._message_label.clear()
        self._update_status()

    def _on_move_rejected(self, message: str) -> None:
        _LOGGER.debug("Move rejected: %s", message)
        self._message_label.setText(message)

    def _update_status(self) -> None:
        self._status_label.setText(self.status_text())
        self._captured_label.setText(self.captured_text())
        self._board_view.board_scene.set_interactive(not self._match.checkmate)
