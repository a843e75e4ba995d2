"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

# Names accepted for AppSettings.board_theme.
BOARD_THEMES: tuple[str, ...] = ("Classic", "Blue", "Green")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Match
    layout: str = "standard"  # "standard", "demo" or a FEN placement field

    # Front end
    interface: str = "gui"  # "gui" or "console"
    use_color: bool = True  # ANSI colours in the console
    show_legal_moves: bool = True
    board_theme: str = "Classic"

    # Diagnostics
    log_level: str = "WARNING"
