"""Coordinate value types.

Two coordinate systems are in use:

* :class:`Position` — zero-based ``(row, column)`` grid index. Row 0 is the
  top of the board as printed, i.e. rank 8.
* :class:`ChessPosition` — algebraic coordinate, column ``'a'..'h'`` and
  row ``1..8``.

Mapping::

    row_index    = 8 - row
    column_index = ord(column) - ord('a')
"""

from __future__ import annotations

from dataclasses import dataclass

from xadrez.core.errors import InvalidCoordinate

BOARD_ROWS = 8
BOARD_COLUMNS = 8

COLUMN_LETTERS = "abcdefgh"


@dataclass(frozen=True, slots=True)
class Position:
    """Zero-based grid coordinate."""

    row: int
    column: int

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


@dataclass(frozen=True, slots=True)
class ChessPosition:
    """Algebraic coordinate, e.g. ``ChessPosition("e", 4)``."""

    column: str
    row: int

    def __post_init__(self) -> None:
        if (
            not isinstance(self.column, str)
            or len(self.column) != 1
            or self.column not in COLUMN_LETTERS
            or not isinstance(self.row, int)
            or not 1 <= self.row <= BOARD_ROWS
        ):
            raise InvalidCoordinate(f"{self.column}{self.row}")

    def __str__(self) -> str:
        return f"{self.column}{self.row}"

    def to_position(self) -> Position:
        return Position(BOARD_ROWS - self.row, ord(self.column) - ord("a"))

    @classmethod
    def from_position(cls, position: Position) -> ChessPosition:
        """Inverse of :meth:`to_position`."""
        if not (
            0 <= position.row < BOARD_ROWS and 0 <= position.column < BOARD_COLUMNS
        ):
            raise InvalidCoordinate(str(position))
        return cls(chr(ord("a") + position.column), BOARD_ROWS - position.row)

    @classmethod
    def parse(cls, text: str) -> ChessPosition:
        """Parse exactly ``<letter><digit>``, e.g. ``'e4'``.

        Case and whitespace sensitive: ``'E4'`` and ``' e4'`` are rejected.
        """
        if len(text) != 2 or text[0] not in COLUMN_LETTERS or text[1] not in "12345678":
            raise InvalidCoordinate(text)
        return cls(text[0], int(text[1]))
