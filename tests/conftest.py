"""
Shared fixtures for isoview tests.
"""

import os
from pathlib import Path
from typing import Iterator, List, Tuple

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for widget tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def settings(tmp_path: Path):
    """AppSettings backed by a throwaway INI file."""
    from isoview.settings import AppSettings

    return AppSettings(file_path=tmp_path / "isoview.ini")


class RecordingRenderer:
    """TileRenderer that records every call."""

    def __init__(self) -> None:
        self.calls: List[Tuple] = []

    def clear(self) -> None:
        self.calls.append(("clear",))

    def draw_tile(self, viewport_x: float, viewport_y: float, style: str) -> None:
        self.calls.append(("draw_tile", viewport_x, viewport_y, style))

    def draw_grid_lines(
        self, start_cell_x: int, start_cell_y: int, end_cell_x: int, end_cell_y: int
    ) -> None:
        self.calls.append(("draw_grid_lines", start_cell_x, start_cell_y, end_cell_x, end_cell_y))

    def tiles(self) -> Iterator[Tuple]:
        return (call for call in self.calls if call[0] == "draw_tile")


@pytest.fixture
def recorder() -> RecordingRenderer:
    return RecordingRenderer()
