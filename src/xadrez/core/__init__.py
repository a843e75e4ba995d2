"""Core domain layer — chess rules with zero external dependencies.

Quick start::

    from xadrez.core import ChessPosition, Match

    match = Match()
    match.perform_move(ChessPosition("e", 2), ChessPosition("e", 4))
    print(match.current_player, match.turn)
"""

from xadrez.core.board import Board
from xadrez.core.enums import Color, PieceKind
from xadrez.core.errors import (
    CellOccupied,
    ChessError,
    GameOver,
    IllegalTarget,
    InvalidBoardSize,
    InvalidCoordinate,
    MissingKingError,
    NoLegalMoves,
    NoPieceAtSource,
    NotYourPiece,
    OutOfBounds,
    PieceAlreadyPlaced,
    SelfCheck,
)
from xadrez.core.layouts import (
    STANDARD_FEN,
    Placement,
    demo_layout,
    grid_to_fen,
    layout_from_fen,
    resolve_layout,
    standard_layout,
    validate_layout,
)
from xadrez.core.match import Match, MoveRecord
from xadrez.core.move_generator import MoveGenerator
from xadrez.core.piece import Piece, PieceInfo
from xadrez.core.types import ChessPosition, Position

__all__ = [
    # Enums
    "Color",
    "PieceKind",
    # Coordinates
    "ChessPosition",
    "Position",
    # Domain objects
    "Board",
    "Match",
    "MoveGenerator",
    "MoveRecord",
    "Piece",
    "PieceInfo",
    # Layouts
    "Placement",
    "STANDARD_FEN",
    "demo_layout",
    "grid_to_fen",
    "layout_from_fen",
    "resolve_layout",
    "standard_layout",
    "validate_layout",
    # Errors
    "CellOccupied",
    "ChessError",
    "GameOver",
    "IllegalTarget",
    "InvalidBoardSize",
    "InvalidCoordinate",
    "MissingKingError",
    "NoLegalMoves",
    "NoPieceAtSource",
    "NotYourPiece",
    "OutOfBounds",
    "PieceAlreadyPlaced",
    "SelfCheck",
]
