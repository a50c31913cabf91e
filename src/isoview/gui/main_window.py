"""
Main application window for isoview.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import QLabel, QMainWindow, QWidget

from ..settings import AppSettings
from ..view import IsoGridView


class MainWindow(QMainWindow):
    """Window hosting the grid view with a status bar readout."""

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings

        self.setWindowTitle("isoview")

        self.grid_view = IsoGridView(settings, self)
        self.setCentralWidget(self.grid_view)

        self._setup_status_bar()
        self._connect_signals()

        self.resize(1024, 768)
        self.logger.debug("Main window initialized")

    def _setup_status_bar(self) -> None:
        self.cell_label = QLabel("Cell: -")
        self.zoom_label = QLabel()
        self._on_zoom_changed(self.grid_view.controller.camera.get_zoom())

        status_bar = self.statusBar()
        status_bar.addWidget(self.cell_label)
        status_bar.addPermanentWidget(self.zoom_label)

    def _connect_signals(self) -> None:
        self.grid_view.cellHovered.connect(self._on_cell_hovered)
        self.grid_view.zoomChanged.connect(self._on_zoom_changed)

    def _on_cell_hovered(self, cell_x: int, cell_y: int) -> None:
        self.cell_label.setText(f"Cell: {cell_x}, {cell_y}")

    def _on_zoom_changed(self, zoom: float) -> None:
        self.zoom_label.setText(f"Zoom: {zoom * 100:.0f}%")
