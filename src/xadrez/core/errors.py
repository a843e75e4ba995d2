"""Error taxonomy.

Two tiers:

* :class:`ChessError` and its subclasses are rule violations. They are
  expected during play, leave the match untouched, and the caller may retry
  with different input.
* :class:`MissingKingError` is an invariant violation (a corrupted setup).
  It is not a ``ChessError`` so that code catching rule violations never
  swallows it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xadrez.core.enums import Color
    from xadrez.core.types import ChessPosition, Position


class ChessError(ValueError):
    """Base class for recoverable rule violations."""


class InvalidCoordinate(ChessError):
    """A column/row pair outside 'a'..'h' × 1..8, or unparsable text."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Invalid chess position {value!r}: valid values are from a1 to h8"
        )
        self.value = value


class InvalidBoardSize(ChessError):
    def __init__(self, rows: int, columns: int) -> None:
        super().__init__(
            f"Error creating board {rows}x{columns}: "
            "there must be at least 1 row and 1 column"
        )
        self.rows = rows
        self.columns = columns


class OutOfBounds(ChessError):
    def __init__(self, position: Position) -> None:
        super().__init__(f"Position {position} is not on the board")
        self.position = position


class CellOccupied(ChessError):
    def __init__(self, position: Position) -> None:
        super().__init__(f"There is already a piece on position {position}")
        self.position = position


class PieceAlreadyPlaced(ChessError):
    def __init__(self, position: Position) -> None:
        super().__init__(f"Piece is already placed on position {position}")
        self.position = position


class NoPieceAtSource(ChessError):
    def __init__(self, source: ChessPosition) -> None:
        super().__init__(f"There is no piece on source position {source}")
        self.source = source


class NoLegalMoves(ChessError):
    def __init__(self, source: ChessPosition) -> None:
        super().__init__(f"There are no possible moves for the piece on {source}")
        self.source = source


class NotYourPiece(ChessError):
    def __init__(self, source: ChessPosition, player: Color) -> None:
        super().__init__(f"The piece on {source} is not {player}'s")
        self.source = source
        self.player = player


class IllegalTarget(ChessError):
    def __init__(self, source: ChessPosition, target: ChessPosition) -> None:
        super().__init__(f"The piece on {source} can't move to {target}")
        self.source = source
        self.target = target


class SelfCheck(ChessError):
    def __init__(self, source: ChessPosition, target: ChessPosition) -> None:
        super().__init__(
            f"Moving {source} to {target} would put your own king in check"
        )
        self.source = source
        self.target = target


class GameOver(ChessError):
    def __init__(self, winner: Color) -> None:
        super().__init__(f"The match is over: {winner} won by checkmate")
        self.winner = winner


class MissingKingError(RuntimeError):
    """No king of *color* among the pieces on the board."""

    def __init__(self, color: Color) -> None:
        super().__init__(f"No {color} king on board")
        self.color = color
