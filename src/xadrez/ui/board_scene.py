"""BoardScene — QGraphicsScene that draws a match and takes clicks."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from xadrez.core.enums import Color, PieceKind
from xadrez.core.errors import ChessError
from xadrez.core.match import Match
from xadrez.core.move_generator import Matrix
from xadrez.core.piece import PieceInfo
from xadrez.core.types import BOARD_COLUMNS, BOARD_ROWS, ChessPosition, Position
from xadrez.ui.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights and piece glyphs.

    Click a piece of the player to move to select it and show its candidate
    squares; click a candidate to play the move.

    Signals:
        move_made(str, str): source and target, e.g. ``("e2", "e4")``.
        move_rejected(str): message of the rule violation.
    """

    move_made = pyqtSignal(str, str)
    move_rejected = pyqtSignal(str)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._match: Match | None = None
        self._interactive = True
        self._show_legal_moves = True

        # Interaction state
        self._selected: ChessPosition | None = None
        self._candidates: Matrix | None = None

        # Visual layers
        self._square_items: dict[Position, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Position, QGraphicsSimpleTextItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def selected_square(self) -> ChessPosition | None:
        return self._selected

    def set_match(self, match: Match) -> None:
        """Display *match* (full redraw of pieces)."""
        self._match = match
        self.refresh()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_show_legal_moves(self, visible: bool) -> None:
        self._show_legal_moves = visible
        if self._selected is not None:
            self._select(self._selected)

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def refresh(self) -> None:
        self._clear_selection()
        self._sync_pieces()
        self._highlight_check()

    def click_square(self, square: ChessPosition) -> None:
        """Handle a click on *square*: select, move, or deselect."""
        if not self._interactive or self._match is None:
            return

        if self._selected is not None and self._is_candidate(square):
            source = self._selected
            self._clear_selection()
            try:
                self._match.perform_move(source, square)
            except ChessError as exc:
                self.move_rejected.emit(str(exc))
                return
            self.refresh()
            self.move_made.emit(str(source), str(square))
            return

        position = square.to_position()
        info = self._match.piece_grid()[position.row][position.column]
        if info is not None and info.color == self._match.current_player:
            try:
                self._select(square)
            except ChessError as exc:
                self._clear_selection()
                self.move_rejected.emit(str(exc))
            return

        self._clear_selection()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Sans Serif", max(9, t // 8))

        for r in range(BOARD_ROWS):
            for c in range(BOARD_COLUMNS):
                is_light = (r + c) % 2 == 0
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(c * t, r * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[Position(r, c)] = rect

                text_color = self._theme.coord_dark if is_light else self._theme.coord_light
                if c == 0:
                    self._add_coord(str(BOARD_ROWS - r), font, text_color, 2, r * t + 1)
                if r == BOARD_ROWS - 1:
                    letter = chr(ord("a") + c)
                    self._add_coord(letter, font, text_color, c * t + t - 12, r * t + t - 16)

        self.setSceneRect(0, 0, BOARD_COLUMNS * t, BOARD_ROWS * t)

    def _add_coord(self, text: str, font: QFont, color: QColor, x: float, y: float) -> None:
        item = QGraphicsSimpleTextItem(text)
        item.setFont(font)
        item.setBrush(QBrush(color))
        item.setPos(x, y)
        item.setZValue(0.3)
        self.addItem(item)
        self._coord_items.append(item)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the match grid."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._match is None:
            return

        t = self.TILE
        font = QFont("Sans Serif", int(t * 0.55))
        for r, row in enumerate(self._match.piece_grid()):
            for c, info in enumerate(row):
                if info is None:
                    continue
                item = self._make_piece_item(info, font)
                bounds = item.boundingRect()
                item.setPos(
                    c * t + (t - bounds.width()) / 2,
                    r * t + (t - bounds.height()) / 2,
                )
                item.setZValue(1)
                self.addItem(item)
                self._piece_items[Position(r, c)] = item

    def _make_piece_item(self, info: PieceInfo, font: QFont) -> QGraphicsSimpleTextItem:
        # Filled glyphs for both sides; the brush carries the side colour.
        glyph = PieceInfo(info.kind, Color.BLACK).symbol
        item = QGraphicsSimpleTextItem(glyph)
        item.setFont(font)
        if info.color == Color.WHITE:
            item.setBrush(QBrush(self._theme.white_piece))
            item.setPen(QPen(self._theme.black_piece, 1))
        else:
            item.setBrush(QBrush(self._theme.black_piece))
        return item

    # ── Selection / highlights ───────────────────────────────────────────

    def _select(self, square: ChessPosition) -> None:
        assert self._match is not None
        candidates = self._match.possible_moves(square)
        self._clear_selection()
        self._selected = square
        self._candidates = candidates

        self._highlight_items.append(
            self._make_highlight(square.to_position(), self._theme.highlight_from)
        )
        if self._show_legal_moves:
            for r, row in enumerate(candidates):
                for c, legal in enumerate(row):
                    if legal:
                        self._highlight_items.append(
                            self._make_highlight(Position(r, c), self._theme.highlight_to)
                        )

    def _is_candidate(self, square: ChessPosition) -> bool:
        if self._candidates is None:
            return False
        position = square.to_position()
        return self._candidates[position.row][position.column]

    def _highlight_check(self) -> None:
        self._clear_items(self._check_items)
        if self._match is None or not (self._match.check or self._match.checkmate):
            return
        # After a committed check the side to move is the one in check.
        in_check = self._match.current_player
        for r, row in enumerate(self._match.piece_grid()):
            for c, info in enumerate(row):
                if info == PieceInfo(PieceKind.KING, in_check):
                    rect = self._make_highlight(Position(r, c), self._theme.highlight_check)
                    rect.setZValue(0.6)
                    self._check_items.append(rect)

    def _clear_selection(self) -> None:
        self._selected = None
        self._candidates = None
        self._clear_items(self._highlight_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    def _make_highlight(self, position: Position, color: QColor) -> QGraphicsRectItem:
        t = self.TILE
        rect = QGraphicsRectItem(position.column * t, position.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.5)
        self.addItem(rect)
        return rect

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._match is None or event is None:
            return super().mousePressEvent(event)

        position = self._pos_to_position(event.scenePos())
        if position is None:
            self._clear_selection()
        else:
            self.click_square(ChessPosition.from_position(position))
        super().mousePressEvent(event)

    def _pos_to_position(self, point: QPointF) -> Position | None:
        t = self.TILE
        row = int(point.y() // t)
        column = int(point.x() // t)
        if 0 <= row < BOARD_ROWS and 0 <= column < BOARD_COLUMNS:
            return Position(row, column)
        return None
