"""Shared fixtures: a headless QApplication for the board window tests."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest


def _needs_offscreen_platform() -> bool:
    if not sys.platform.startswith("linux"):
        return False
    return not any(
        key in os.environ for key in ("QT_QPA_PLATFORM", "DISPLAY", "WAYLAND_DISPLAY")
    )


if _needs_offscreen_platform():
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> object:
    """The single QApplication of the test session."""
    from PyQt6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def _qt_window_guard(request: pytest.FixtureRequest) -> Iterator[None]:
    """Tests under ``tests/ui`` get a QApplication and leave no window open."""
    if request.node.path.parent.name != "ui":
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
