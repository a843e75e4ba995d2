"""Match — turn order, move validation and execution, check detection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from xadrez.core.board import Board
from xadrez.core.enums import Color, PieceKind
from xadrez.core.errors import (
    GameOver,
    IllegalTarget,
    MissingKingError,
    NoLegalMoves,
    NoPieceAtSource,
    NotYourPiece,
    SelfCheck,
)
from xadrez.core.layouts import Placement, standard_layout, validate_layout
from xadrez.core.move_generator import Matrix, MoveGenerator
from xadrez.core.piece import Piece, PieceInfo
from xadrez.core.types import ChessPosition, Position

# A captured piece and its former index in the on-board list.
_Capture = tuple[Piece, int]


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single committed move."""

    turn: int
    player: Color
    source: ChessPosition
    target: ChessPosition
    piece: PieceInfo
    captured: PieceInfo | None = None
    was_check: bool = False
    was_checkmate: bool = False

    def __str__(self) -> str:
        sep = "x" if self.captured is not None else "-"
        suffix = "#" if self.was_checkmate else "+" if self.was_check else ""
        return f"{self.piece}{self.source}{sep}{self.target}{suffix}"


class Match:
    """A two-player match on an 8x8 board.

    The match owns its :class:`Board` and two disjoint piece collections:
    pieces on the board and captured pieces (in capture order). Pieces are
    moved between them, never copied. Only :class:`PieceInfo` snapshots are
    handed out.

    Every public mutation either commits completely or raises a
    :class:`~xadrez.core.errors.ChessError` with the match unchanged.
    A layout without exactly one king per side is rejected with
    ``ValueError``.
    """

    __slots__ = (
        "_board",
        "_generator",
        "_turn",
        "_current_player",
        "_check",
        "_checkmate",
        "_pieces_on_board",
        "_captured_pieces",
        "_history",
    )

    def __init__(self, layout: Iterable[Placement] | None = None) -> None:
        self._board = Board()
        self._generator = MoveGenerator(self._board)
        self._turn = 1
        self._current_player = Color.WHITE
        self._check = False
        self._checkmate = False
        self._pieces_on_board: list[Piece] = []
        self._captured_pieces: list[Piece] = []
        self._history: list[MoveRecord] = []

        placements = standard_layout() if layout is None else validate_layout(layout)
        for placement in placements:
            self._place_new_piece(placement)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def turn(self) -> int:
        return self._turn

    @property
    def current_player(self) -> Color:
        return self._current_player

    @property
    def check(self) -> bool:
        """Whether the player to move was put in check by the last move."""
        return self._check

    @property
    def checkmate(self) -> bool:
        return self._checkmate

    @property
    def winner(self) -> Color | None:
        """The player who delivered checkmate, if any."""
        if not self._checkmate:
            return None
        return self._current_player.opposite

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    # ── Board views ──────────────────────────────────────────────────────

    def piece_grid(self) -> list[list[PieceInfo | None]]:
        """Row 0 is rank 8, column 0 is file 'a'."""
        grid: list[list[PieceInfo | None]] = []
        for r in range(self._board.rows):
            row: list[PieceInfo | None] = []
            for c in range(self._board.columns):
                piece = self._board.piece(Position(r, c))
                row.append(piece.info if piece is not None else None)
            grid.append(row)
        return grid

    def captured_pieces(self) -> list[PieceInfo]:
        return [p.info for p in self._captured_pieces]

    def pieces(self, color: Color | None = None) -> list[PieceInfo]:
        """Pieces currently on the board, optionally filtered by *color*."""
        return [
            p.info for p in self._pieces_on_board if color is None or p.color == color
        ]

    # ── Moves ────────────────────────────────────────────────────────────

    def possible_moves(self, source: ChessPosition) -> Matrix:
        """Legality matrix of the current player's piece on *source*."""
        self._ensure_not_over()
        piece = self._validate_source_position(source)
        return self._generator.possible_moves(piece)

    def perform_move(
        self, source: ChessPosition, target: ChessPosition
    ) -> PieceInfo | None:
        """Move the piece on *source* to *target*.

        Returns the captured piece, if any. Raises a rule violation and leaves
        the match untouched when the move is not allowed, including when it
        would leave the mover's own king in check.
        """
        self._ensure_not_over()
        piece = self._validate_source_position(source)
        self._validate_target_position(piece, source, target)

        mover = self._current_player
        opponent = mover.opposite
        from_pos = source.to_position()
        to_pos = target.to_position()

        capture = self._make_move(from_pos, to_pos)
        captured = capture[0] if capture is not None else None
        try:
            if self.is_in_check(mover):
                raise SelfCheck(source, target)
            check = self.is_in_check(opponent)
            checkmate = check and self._test_checkmate(opponent)
        except (SelfCheck, MissingKingError):
            self._undo_move(from_pos, to_pos, capture)
            raise

        self._check = check
        self._checkmate = checkmate
        self._history.append(
            MoveRecord(
                turn=self._turn,
                player=mover,
                source=source,
                target=target,
                piece=piece.info,
                captured=captured.info if captured is not None else None,
                was_check=check,
                was_checkmate=checkmate,
            )
        )
        self._next_turn()
        return captured.info if captured is not None else None

    # ── Check detection ──────────────────────────────────────────────────

    def is_in_check(self, color: Color) -> bool:
        """Whether any opposing piece can currently move onto *color*'s king.

        Raises :class:`MissingKingError` when *color* has no king on the board.
        """
        king_position = self._king(color).position
        assert king_position is not None
        for piece in self._pieces_on_board:
            if piece.color == color:
                continue
            matrix = self._generator.possible_moves(piece)
            if matrix[king_position.row][king_position.column]:
                return True
        return False

    def _test_checkmate(self, color: Color) -> bool:
        """No move by *color* gets its king out of check."""
        defenders = [p for p in self._pieces_on_board if p.color == color]
        for piece in defenders:
            source = piece.position
            assert source is not None
            matrix = self._generator.possible_moves(piece)
            for r, row in enumerate(matrix):
                for c, legal in enumerate(row):
                    if not legal:
                        continue
                    target = Position(r, c)
                    capture = self._make_move(source, target)
                    try:
                        still_in_check = self.is_in_check(color)
                    finally:
                        self._undo_move(source, target, capture)
                    if not still_in_check:
                        return False
        return True

    def _king(self, color: Color) -> Piece:
        for piece in self._pieces_on_board:
            if piece.color == color and piece.kind == PieceKind.KING:
                return piece
        raise MissingKingError(color)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _ensure_not_over(self) -> None:
        if self._checkmate:
            winner = self.winner
            assert winner is not None
            raise GameOver(winner)

    def _validate_source_position(self, source: ChessPosition) -> Piece:
        piece = self._board.piece(source.to_position())
        if piece is None:
            raise NoPieceAtSource(source)
        if not self._generator.has_possible_move(piece):
            raise NoLegalMoves(source)
        if piece.color != self._current_player:
            raise NotYourPiece(source, self._current_player)
        return piece

    def _validate_target_position(
        self, piece: Piece, source: ChessPosition, target: ChessPosition
    ) -> None:
        if not self._generator.is_possible_move(piece, target.to_position()):
            raise IllegalTarget(source, target)

    def _make_move(self, source: Position, target: Position) -> _Capture | None:
        """Execute a move; returns the captured piece and its list index."""
        moved = self._board.remove_piece(source)
        assert moved is not None
        moved.increase_move_count()
        captured = self._board.remove_piece(target)
        self._board.place_piece(moved, target)

        if captured is None:
            return None
        index = self._pieces_on_board.index(captured)
        del self._pieces_on_board[index]
        self._captured_pieces.append(captured)
        return captured, index

    def _undo_move(
        self, source: Position, target: Position, capture: _Capture | None
    ) -> None:
        """Exact inverse of :meth:`_make_move`."""
        moved = self._board.remove_piece(target)
        assert moved is not None
        moved.decrease_move_count()
        self._board.place_piece(moved, source)

        if capture is not None:
            captured, index = capture
            self._board.place_piece(captured, target)
            self._captured_pieces.remove(captured)
            self._pieces_on_board.insert(index, captured)

    def _next_turn(self) -> None:
        self._turn += 1
        self._current_player = self._current_player.opposite

    def _place_new_piece(self, placement: Placement) -> None:
        piece = Piece(placement.kind, placement.color)
        self._board.place_piece(piece, placement.square.to_position())
        self._pieces_on_board.append(piece)

    def __repr__(self) -> str:
        return (
            f"Match(turn={self._turn}, player={self._current_player}, "
            f"check={self._check}, checkmate={self._checkmate})\n{self._board!r}"
        )
