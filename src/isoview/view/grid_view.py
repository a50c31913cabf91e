"""Main view widget for grid rendering.

This module provides the IsoGridView widget that hosts a
ViewportController and paints it with a QPainterRenderer.
"""

import logging
from typing import Optional

import qtawesome as qta  # type: ignore
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPainter, QPaintEvent
from PySide6.QtWidgets import QPushButton, QWidget

from isoview.settings import AppSettings

from .controller import ViewportController
from .events import IsoGridViewEventHandlers
from .renderer import QPainterRenderer
from .types import GridCell


class IsoGridView(IsoGridViewEventHandlers, QWidget):
    """Widget displaying an infinite isometric grid.

    Drag with the left or middle mouse button to pan, use the wheel to zoom
    around the cursor, press Home to reset the view.
    """

    cellHovered = Signal(int, int)
    zoomChanged = Signal(float)

    DEFAULT_SIZE = (800, 600)

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None):
        """Initialize the grid view.

        Args:
            settings: Application settings (tile size, zoom range, grid visibility)
            parent: Parent widget
        """
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings

        self._last_hovered: Optional[GridCell] = None

        width, height = self.DEFAULT_SIZE
        self.controller = ViewportController.from_settings(settings, width, height)
        self._setup_center_ui()
        self.resize(width, height)

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self.logger.debug("Grid view initialized")

    def _setup_center_ui(self) -> None:
        """Setup overlay button that resets the view."""
        self.center_button = QPushButton("", self)
        self.center_button.setIcon(qta.icon("mdi.image-filter-center-focus"))  # type: ignore[arg-type]
        self.center_button.setFixedSize(32, 32)
        self.center_button.setFlat(True)
        self.center_button.clicked.connect(self.reset_view)
        self.center_button.setToolTip("Center view [ Home ]")

    def reset_view(self) -> None:
        """Reset zoom and center the grid origin."""
        self.controller.reset_view()
        self.zoomChanged.emit(self.controller.camera.get_zoom())
        self.update()

    def set_grid_visible(self, visible: bool) -> None:
        """Toggle grid lines and persist the choice."""
        self.controller.set_grid_visible(visible)
        self.settings.view.grid_visible = visible
        self.update()

    def _update_hover(self, viewport_x: float, viewport_y: float) -> None:
        """Track hovered cell and emit cellHovered when it changes."""
        cell = self.controller.set_hover(viewport_x, viewport_y)
        if cell != self._last_hovered:
            self._last_hovered = cell
            self.cellHovered.emit(cell.cell_x, cell.cell_y)

    def paintEvent(self, event: QPaintEvent) -> None:
        """Redraw the visible grid."""
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            self.controller.render(QPainterRenderer(painter, self.controller))
        finally:
            painter.end()
