"""Per-piece move geometry: legality matrices."""

from __future__ import annotations

from collections.abc import Callable

from xadrez.core.board import Board
from xadrez.core.enums import Color, PieceKind
from xadrez.core.piece import Piece
from xadrez.core.types import Position

Matrix = list[list[bool]]

# (row delta, column delta)
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# White advances toward row 0 (rank 8), black toward the last row.
_PAWN_FORWARD: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


class MoveGenerator:
    """Computes legality matrices for pieces on a :class:`Board`.

    Every routine is read-only: the board and the pieces are never mutated.
    Squares are always filtered through :meth:`Board.position_exists` before
    any occupancy query.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def possible_moves(self, piece: Piece) -> Matrix:
        """``matrix[r][c]`` is True where *piece* may move right now."""
        origin = piece.position
        if origin is None:
            raise ValueError(f"{piece!r} is not on the board")
        matrix = self._empty_matrix()
        _GEOMETRY[piece.kind](self, piece, origin, matrix)
        return matrix

    def is_possible_move(self, piece: Piece, position: Position) -> bool:
        if not self._board.position_exists(position):
            return False
        return self.possible_moves(piece)[position.row][position.column]

    def has_possible_move(self, piece: Piece) -> bool:
        return any(any(row) for row in self.possible_moves(piece))

    # -- Square helpers -----------------------------------------------------

    def _empty_matrix(self) -> Matrix:
        return [[False] * self._board.columns for _ in range(self._board.rows)]

    def _is_empty(self, position: Position) -> bool:
        return self._board.position_exists(position) and not self._board.there_is_a_piece(
            position
        )

    def _is_opponent(self, position: Position, color: Color) -> bool:
        if not self._board.position_exists(position):
            return False
        other = self._board.piece(position)
        return other is not None and other.color != color

    # -- Geometry (private) -------------------------------------------------

    def _gen_steps(
        self,
        piece: Piece,
        origin: Position,
        matrix: Matrix,
        offsets: tuple[tuple[int, int], ...],
    ) -> None:
        for dr, dc in offsets:
            target = Position(origin.row + dr, origin.column + dc)
            if self._is_empty(target) or self._is_opponent(target, piece.color):
                matrix[target.row][target.column] = True

    def _gen_sliding(
        self,
        piece: Piece,
        origin: Position,
        matrix: Matrix,
        directions: tuple[tuple[int, int], ...],
    ) -> None:
        for dr, dc in directions:
            target = Position(origin.row + dr, origin.column + dc)
            while self._is_empty(target):
                matrix[target.row][target.column] = True
                target = Position(target.row + dr, target.column + dc)
            if self._is_opponent(target, piece.color):
                matrix[target.row][target.column] = True

    def _gen_king(self, piece: Piece, origin: Position, matrix: Matrix) -> None:
        self._gen_steps(piece, origin, matrix, KING_OFFSETS)

    def _gen_knight(self, piece: Piece, origin: Position, matrix: Matrix) -> None:
        self._gen_steps(piece, origin, matrix, KNIGHT_OFFSETS)

    def _gen_rook(self, piece: Piece, origin: Position, matrix: Matrix) -> None:
        self._gen_sliding(piece, origin, matrix, ROOK_DIRS)

    def _gen_bishop(self, piece: Piece, origin: Position, matrix: Matrix) -> None:
        self._gen_sliding(piece, origin, matrix, BISHOP_DIRS)

    def _gen_queen(self, piece: Piece, origin: Position, matrix: Matrix) -> None:
        self._gen_sliding(piece, origin, matrix, QUEEN_DIRS)

    def _gen_pawn(self, piece: Piece, origin: Position, matrix: Matrix) -> None:
        forward = _PAWN_FORWARD[piece.color]

        one_step = Position(origin.row + forward, origin.column)
        if self._is_empty(one_step):
            matrix[one_step.row][one_step.column] = True
            # The intermediate square is one_step, already known empty here.
            two_step = Position(origin.row + 2 * forward, origin.column)
            if piece.move_count == 0 and self._is_empty(two_step):
                matrix[two_step.row][two_step.column] = True

        for dc in (-1, 1):
            diagonal = Position(origin.row + forward, origin.column + dc)
            if self._is_opponent(diagonal, piece.color):
                matrix[diagonal.row][diagonal.column] = True


_GEOMETRY: dict[PieceKind, Callable[[MoveGenerator, Piece, Position, Matrix], None]] = {
    PieceKind.KING: MoveGenerator._gen_king,
    PieceKind.QUEEN: MoveGenerator._gen_queen,
    PieceKind.ROOK: MoveGenerator._gen_rook,
    PieceKind.BISHOP: MoveGenerator._gen_bishop,
    PieceKind.KNIGHT: MoveGenerator._gen_knight,
    PieceKind.PAWN: MoveGenerator._gen_pawn,
}

assert set(_GEOMETRY) == set(PieceKind), "geometry table must cover every kind"
