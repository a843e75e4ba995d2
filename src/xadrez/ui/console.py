"""ANSI console front end: board rendering, coordinate input, turn loop."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from xadrez.core.enums import Color
from xadrez.core.errors import ChessError
from xadrez.core.match import Match
from xadrez.core.piece import PieceInfo
from xadrez.core.types import ChessPosition

_LOGGER = logging.getLogger(__name__)

ANSI_RESET = "\033[0m"
ANSI_WHITE = "\033[37m"
ANSI_YELLOW = "\033[33m"
ANSI_BLUE_BACKGROUND = "\033[44m"
CLEAR_SCREEN = "\033[H\033[2J"

_PIECE_COLORS: dict[Color, str] = {Color.WHITE: ANSI_WHITE, Color.BLACK: ANSI_YELLOW}

Grid = Sequence[Sequence[PieceInfo | None]]
InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def read_chess_position(text: str) -> ChessPosition:
    """Parse user input such as ``'e2'``; raises ``InvalidCoordinate``."""
    return ChessPosition.parse(text)


def _paint(text: str, code: str, use_color: bool) -> str:
    return f"{code}{text}{ANSI_RESET}" if use_color else text


def _render_cell(info: PieceInfo | None, highlighted: bool, use_color: bool) -> str:
    if not use_color:
        if info is None:
            return "*" if highlighted else "-"
        return str(info).lower() if highlighted else str(info)
    prefix = ANSI_BLUE_BACKGROUND if highlighted else ""
    if info is None:
        return f"{prefix}-{ANSI_RESET}" if highlighted else "-"
    return f"{prefix}{_PIECE_COLORS[info.color]}{info}{ANSI_RESET}"


def render_board(
    grid: Grid,
    possible: Sequence[Sequence[bool]] | None = None,
    *,
    use_color: bool = True,
) -> str:
    """Draw *grid* with rank and file labels.

    Squares marked in *possible* get a blue background, or without colour an
    empty candidate shows ``*`` and a capturable piece is lowercased.
    """
    letters = " ".join(chr(ord("a") + c) for c in range(len(grid[0])))
    lines = [f"  {letters}"]
    for r, row in enumerate(grid):
        label = len(grid) - r
        cells = [
            _render_cell(info, bool(possible and possible[r][c]), use_color)
            for c, info in enumerate(row)
        ]
        lines.append(f"{label} {' '.join(cells)} {label}")
    lines.append(f"  {letters}")
    return "\n".join(lines)


def render_captured(captured: Sequence[PieceInfo], *, use_color: bool = True) -> str:
    lines = ["Captured pieces:"]
    for color in (Color.WHITE, Color.BLACK):
        names = ", ".join(str(p) for p in captured if p.color == color)
        painted = _paint(f"[{names}]", _PIECE_COLORS[color], use_color)
        lines.append(f"{color.name.capitalize()}: {painted}")
    return "\n".join(lines)


def render_match(match: Match, *, use_color: bool = True) -> str:
    lines = [
        render_board(match.piece_grid(), use_color=use_color),
        "",
        render_captured(match.captured_pieces(), use_color=use_color),
        "",
        f"Turn : {match.turn}",
    ]
    if match.checkmate:
        lines.append("CHECKMATE!")
        lines.append(f"Winner: {match.winner}")
    else:
        lines.append(f"Waiting player: {match.current_player}")
        if match.check:
            lines.append("CHECK!")
    return "\n".join(lines)


def run_console(
    match: Match,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    *,
    use_color: bool = True,
) -> Color | None:
    """Play *match* interactively until checkmate or end of input.

    Returns the winner, or None when input ran out first. Rule violations
    are reported and the player is asked again; anything else propagates.
    """
    clear = CLEAR_SCREEN if use_color else ""
    while not match.checkmate:
        output_fn(clear + render_match(match, use_color=use_color))
        try:
            source = read_chess_position(input_fn("\nSource: "))
            possible = match.possible_moves(source)
            board = render_board(match.piece_grid(), possible, use_color=use_color)
            output_fn(clear + board)
            target = read_chess_position(input_fn("\nTarget: "))
            captured = match.perform_move(source, target)
        except ChessError as exc:
            _LOGGER.debug("Rejected move input: %s", exc)
            output_fn(str(exc))
            continue
        except EOFError:
            _LOGGER.info("Input closed at turn %d", match.turn)
            return None
        if captured is not None:
            _LOGGER.info(
                "%s captured %s on %s",
                match.current_player.opposite,
                captured.kind.name,
                target,
            )

    output_fn(clear + render_match(match, use_color=use_color))
    return match.winner
