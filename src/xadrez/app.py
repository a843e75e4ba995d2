"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from xadrez.config import BOARD_THEMES, AppSettings
from xadrez.core.layouts import resolve_layout
from xadrez.core.match import Match

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xadrez", description="Two-player chess on one screen."
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="play in the terminal instead of the Qt window",
    )
    parser.add_argument(
        "--layout",
        default=AppSettings.layout,
        help='starting layout: "standard", "demo" or a FEN placement field',
    )
    parser.add_argument(
        "--no-color", action="store_true", help="disable ANSI colours in the console"
    )
    parser.add_argument(
        "--theme",
        default=AppSettings.board_theme,
        choices=BOARD_THEMES,
        help="board colour theme for the Qt window",
    )
    parser.add_argument(
        "--log-level",
        default=AppSettings.log_level,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser


def settings_from_args(argv: list[str] | None = None) -> AppSettings:
    """Parse command-line options into :class:`AppSettings`.

    Exits with a usage error when the layout cannot be resolved.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        resolve_layout(args.layout)
    except ValueError as exc:
        parser.error(str(exc))
    return AppSettings(
        layout=args.layout,
        interface="console" if args.console else "gui",
        use_color=not args.no_color,
        board_theme=args.theme,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None) -> int:
    """Launch Xadrez."""
    settings = settings_from_args(argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGER.debug("Starting with %s", settings)

    if settings.interface == "console":
        from xadrez.ui.console import run_console

        match = Match(resolve_layout(settings.layout))
        run_console(match, use_color=settings.use_color)
        return 0

    from xadrez.ui.bootstrap import run_application

    return run_application(settings, [sys.argv[0]])


if __name__ == "__main__":
    sys.exit(main())
