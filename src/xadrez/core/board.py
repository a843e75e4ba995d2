"""Board - piece placement on a rows x columns grid."""

from __future__ import annotations

from collections.abc import Iterator

from xadrez.core.errors import (
    CellOccupied,
    InvalidBoardSize,
    OutOfBounds,
    PieceAlreadyPlaced,
)
from xadrez.core.piece import Piece
from xadrez.core.types import BOARD_COLUMNS, BOARD_ROWS, Position


class Board:
    """Mutable grid of optional piece references.

    The board owns the placement relation only: removing a piece clears the
    cell and the piece's cached position but the piece object lives on.
    """

    __slots__ = ("_rows", "_columns", "_cells")

    def __init__(self, rows: int = BOARD_ROWS, columns: int = BOARD_COLUMNS) -> None:
        if rows < 1 or columns < 1:
            raise InvalidBoardSize(rows, columns)
        self._rows = rows
        self._columns = columns
        self._cells: list[list[Piece | None]] = [
            [None] * columns for _ in range(rows)
        ]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    # -- Queries ------------------------------------------------------------

    def position_exists(self, position: Position) -> bool:
        return 0 <= position.row < self._rows and 0 <= position.column < self._columns

    def piece(self, position: Position) -> Piece | None:
        if not self.position_exists(position):
            raise OutOfBounds(position)
        return self._cells[position.row][position.column]

    def there_is_a_piece(self, position: Position) -> bool:
        return self.piece(position) is not None

    def pieces(self) -> Iterator[Piece]:
        """Occupied cells in row-major order."""
        for row in self._cells:
            for piece in row:
                if piece is not None:
                    yield piece

    # -- Mutation -----------------------------------------------------------

    def place_piece(self, piece: Piece, position: Position) -> None:
        if self.there_is_a_piece(position):
            raise CellOccupied(position)
        if piece.position is not None:
            raise PieceAlreadyPlaced(piece.position)
        self._cells[position.row][position.column] = piece
        piece._position = position

    def remove_piece(self, position: Position) -> Piece | None:
        piece = self.piece(position)
        if piece is None:
            return None
        piece._position = None
        self._cells[position.row][position.column] = None
        return piece

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        letters = " ".join(chr(ord("a") + c) for c in range(self._columns))
        lines = [f"  {letters}"]
        for r, row in enumerate(self._cells):
            label = self._rows - r
            cells = " ".join(str(p) if p is not None else "-" for p in row)
            lines.append(f"{label} {cells} {label}")
        lines.append(f"  {letters}")
        return "\n".join(lines)
