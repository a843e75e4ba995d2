"""Board colour presets for the Qt window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from xadrez.config import BOARD_THEMES

# Overlays shared by every preset.
_SELECTED = QColor(255, 255, 0, 100)
_CANDIDATE = QColor(40, 90, 220, 90)  # blue, like the console highlight
_IN_CHECK = QColor(255, 0, 0, 120)


@dataclass(frozen=True)
class BoardTheme:
    """Square, overlay and piece colours of the board scene."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor
    highlight_to: QColor
    highlight_check: QColor
    coord_light: QColor  # drawn on dark squares
    coord_dark: QColor  # drawn on light squares
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def from_squares(cls, light: QColor, dark: QColor) -> BoardTheme:
        """Build a theme from its two square colours.

        Coordinates are drawn in the colour of the opposite square.
        """
        return cls(
            light_square=light,
            dark_square=dark,
            highlight_from=_SELECTED,
            highlight_to=_CANDIDATE,
            highlight_check=_IN_CHECK,
            coord_light=light,
            coord_dark=dark,
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def default(cls) -> BoardTheme:
        return cls.by_name("Classic")

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Preset for a settings value; unknown names get Classic."""
        light, dark = THEME_SQUARES.get(name, THEME_SQUARES["Classic"])
        return cls.from_squares(QColor(*light), QColor(*dark))


# Preset name -> (light square RGB, dark square RGB)
THEME_SQUARES: dict[str, tuple[tuple[int, int, int], tuple[int, int, int]]] = {
    "Classic": ((240, 217, 181), (181, 136, 99)),
    "Blue": ((222, 227, 230), (140, 162, 173)),
    "Green": ((236, 238, 220), (112, 149, 120)),
}

assert tuple(THEME_SQUARES) == BOARD_THEMES, "every configurable theme needs colours"
