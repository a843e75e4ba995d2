"""Piece handle and its immutable snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from xadrez.core.enums import Color, PieceKind

if TYPE_CHECKING:
    from xadrez.core.types import Position

_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}

_UNICODE: dict[tuple[Color, PieceKind], str] = {
    (Color.WHITE, PieceKind.PAWN): "♙",
    (Color.WHITE, PieceKind.KNIGHT): "♘",
    (Color.WHITE, PieceKind.BISHOP): "♗",
    (Color.WHITE, PieceKind.ROOK): "♖",
    (Color.WHITE, PieceKind.QUEEN): "♕",
    (Color.WHITE, PieceKind.KING): "♔",
    (Color.BLACK, PieceKind.PAWN): "♟",
    (Color.BLACK, PieceKind.KNIGHT): "♞",
    (Color.BLACK, PieceKind.BISHOP): "♝",
    (Color.BLACK, PieceKind.ROOK): "♜",
    (Color.BLACK, PieceKind.QUEEN): "♛",
    (Color.BLACK, PieceKind.KING): "♚",
}

_KIND_BY_LETTER: dict[str, PieceKind] = {v: k for k, v in _LETTERS.items()}


@dataclass(frozen=True, slots=True)
class PieceInfo:
    """Immutable (kind, color) snapshot handed out by :class:`Match`."""

    kind: PieceKind
    color: Color

    def __str__(self) -> str:
        """Letter glyph, e.g. 'K'."""
        return _LETTERS[self.kind]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.kind)]

    @property
    def fen_char(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.kind]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_fen_char(cls, char: str) -> PieceInfo:
        """Create from a FEN character, e.g. 'n' → black knight."""
        kind = _KIND_BY_LETTER.get(char.upper()) if len(char) == 1 else None
        if kind is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(kind, Color.WHITE if char.isupper() else Color.BLACK)


class Piece:
    """A piece with identity.

    ``position`` is a cached back reference to the cell holding the piece. It
    is written only by :meth:`Board.place_piece` and :meth:`Board.remove_piece`.
    """

    __slots__ = ("kind", "color", "_move_count", "_position")

    def __init__(self, kind: PieceKind, color: Color) -> None:
        self.kind = kind
        self.color = color
        self._move_count = 0
        self._position: Position | None = None

    @property
    def position(self) -> Position | None:
        return self._position

    @property
    def move_count(self) -> int:
        return self._move_count

    def increase_move_count(self) -> None:
        self._move_count += 1

    def decrease_move_count(self) -> None:
        self._move_count -= 1

    @property
    def info(self) -> PieceInfo:
        return PieceInfo(self.kind, self.color)

    @property
    def symbol(self) -> str:
        return _UNICODE[(self.color, self.kind)]

    def __str__(self) -> str:
        return _LETTERS[self.kind]

    def __repr__(self) -> str:
        return (
            f"Piece({self.color.name} {self.kind.name}, "
            f"position={self._position}, moves={self._move_count})"
        )
