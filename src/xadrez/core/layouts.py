"""Starting layouts: placement lists and the FEN piece-placement field."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from xadrez.core.enums import Color, PieceKind
from xadrez.core.piece import PieceInfo
from xadrez.core.types import BOARD_COLUMNS, BOARD_ROWS, COLUMN_LETTERS, ChessPosition

STANDARD_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


@dataclass(frozen=True, slots=True)
class Placement:
    """One piece of a starting layout."""

    kind: PieceKind
    color: Color
    square: ChessPosition


Layout = Sequence[Placement]

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


def standard_layout() -> list[Placement]:
    """Standard chess starting position."""
    placements: list[Placement] = []
    for column, kind in zip(COLUMN_LETTERS, _BACK_RANK):
        placements.append(Placement(kind, Color.WHITE, ChessPosition(column, 1)))
        placements.append(Placement(PieceKind.PAWN, Color.WHITE, ChessPosition(column, 2)))
        placements.append(Placement(PieceKind.PAWN, Color.BLACK, ChessPosition(column, 7)))
        placements.append(Placement(kind, Color.BLACK, ChessPosition(column, 8)))
    return placements


def demo_layout() -> list[Placement]:
    """Rook-and-king drill: white to mate quickly along the back rank."""
    return [
        Placement(PieceKind.ROOK, Color.WHITE, ChessPosition("h", 7)),
        Placement(PieceKind.ROOK, Color.WHITE, ChessPosition("d", 1)),
        Placement(PieceKind.KING, Color.WHITE, ChessPosition("e", 1)),
        Placement(PieceKind.ROOK, Color.BLACK, ChessPosition("b", 8)),
        Placement(PieceKind.KING, Color.BLACK, ChessPosition("a", 8)),
    ]


def layout_from_fen(placement: str) -> list[Placement]:
    """Parse the piece-placement field of a FEN string.

    Only the first whitespace-separated field is read, so full FEN strings
    are accepted too; side to move, castling and clocks are ignored.
    """
    fields = placement.split()
    if not fields:
        raise ValueError(f"Invalid FEN placement (empty): {placement!r}")
    ranks = fields[0].split("/")
    if len(ranks) != BOARD_ROWS:
        raise ValueError(
            f"Invalid FEN placement (must contain {BOARD_ROWS} ranks): {placement!r}"
        )

    placements: list[Placement] = []
    for rank_idx, rank_text in enumerate(ranks):
        row = BOARD_ROWS - rank_idx
        column = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not 1 <= step <= BOARD_COLUMNS:
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                column += step
            else:
                if column >= BOARD_COLUMNS:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                info = PieceInfo.from_fen_char(ch)
                placements.append(
                    Placement(info.kind, info.color, ChessPosition(COLUMN_LETTERS[column], row))
                )
                column += 1
            if column > BOARD_COLUMNS:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if column != BOARD_COLUMNS:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return placements


def grid_to_fen(grid: Sequence[Sequence[PieceInfo | None]]) -> str:
    """Serialise a piece grid (row 0 = rank 8) to a FEN placement field."""
    ranks: list[str] = []
    for row in grid:
        text = ""
        empty = 0
        for info in row:
            if info is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += info.fen_char
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)


def validate_layout(placements: Iterable[Placement]) -> list[Placement]:
    """Check that each side has exactly one king; return the placements.

    Raises ``ValueError`` naming the side and the number of kings found.
    """
    placements = list(placements)
    for color in Color:
        kings = sum(
            1 for p in placements if p.kind == PieceKind.KING and p.color == color
        )
        if kings != 1:
            raise ValueError(
                f"Invalid layout (expected exactly one {color} king, found {kings})"
            )
    return placements


def resolve_layout(name: str) -> list[Placement]:
    """Map a configuration value to a validated layout.

    ``"standard"`` and ``"demo"`` are named presets; anything else is read as
    a FEN placement field.
    """
    if name == "standard":
        return standard_layout()
    if name == "demo":
        return demo_layout()
    return validate_layout(layout_from_fen(name))
