"""Tile rendering for the grid viewport.

This module defines the TileRenderer protocol consumed by
ViewportController.render() and a QPainter implementation of it.
"""

import logging
from typing import TYPE_CHECKING, Protocol

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QPainter, QPen, QPolygonF

if TYPE_CHECKING:
    from .controller import ViewportController


class TileRenderer(Protocol):
    """Drawing collaborator. Receives viewport positions, returns nothing."""

    def clear(self) -> None: ...

    def draw_tile(self, viewport_x: float, viewport_y: float, style: str) -> None: ...

    def draw_grid_lines(
        self, start_cell_x: int, start_cell_y: int, end_cell_x: int, end_cell_y: int
    ) -> None: ...


class QPainterRenderer:
    """Renders diamond tiles and grid lines with a QPainter."""

    BACKGROUND_COLOR = QColor(24, 26, 32)
    STYLE_COLORS = {
        "tile": QColor(70, 110, 70),
        "tile-alt": QColor(62, 100, 62),
        "hover": QColor(200, 180, 90),
    }

    def __init__(self, painter: QPainter, controller: "ViewportController"):
        """Initialize the renderer.

        Args:
            painter: Active painter on the target paint device
            controller: Controller supplying tile size, zoom and grid mapping
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.painter = painter
        self.controller = controller

        self.grid_pen = QPen(Qt.GlobalColor.darkGray, 1, Qt.PenStyle.DotLine)

    def clear(self) -> None:
        """Fill the whole viewport with the background colour."""
        camera = self.controller.camera
        self.painter.fillRect(
            0, 0, int(camera.viewport_width), int(camera.viewport_height), self.BACKGROUND_COLOR
        )

    def draw_tile(self, viewport_x: float, viewport_y: float, style: str) -> None:
        """Draw one diamond whose top vertex is at the given viewport position."""
        color = self.STYLE_COLORS.get(style)
        if color is None:
            self.logger.debug(f"Unknown tile style '{style}', using 'tile'")
            color = self.STYLE_COLORS["tile"]

        zoom = self.controller.camera.get_zoom()
        half_w = self.controller.grid.tile_width / 2 * zoom
        half_h = self.controller.grid.tile_height / 2 * zoom

        # Order: top -> right -> bottom -> left
        diamond = QPolygonF(
            [
                QPointF(viewport_x, viewport_y),
                QPointF(viewport_x + half_w, viewport_y + half_h),
                QPointF(viewport_x, viewport_y + 2 * half_h),
                QPointF(viewport_x - half_w, viewport_y + half_h),
            ]
        )
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(color)
        self.painter.drawPolygon(diamond)

    def draw_grid_lines(
        self, start_cell_x: int, start_cell_y: int, end_cell_x: int, end_cell_y: int
    ) -> None:
        """Draw the boundary lines of an inclusive cell rectangle.

        Lines of constant grid x run from start_cell_y to end_cell_y + 1 and
        lines of constant grid y from start_cell_x to end_cell_x + 1.
        """
        to_viewport = self.controller.grid_to_viewport
        self.painter.setPen(self.grid_pen)

        for grid_x in range(start_cell_x, end_cell_x + 2):
            start = to_viewport(grid_x, start_cell_y)
            end = to_viewport(grid_x, end_cell_y + 1)
            self.painter.drawLine(QPointF(start.x, start.y), QPointF(end.x, end.y))

        for grid_y in range(start_cell_y, end_cell_y + 2):
            start = to_viewport(start_cell_x, grid_y)
            end = to_viewport(end_cell_x + 1, grid_y)
            self.painter.drawLine(QPointF(start.x, start.y), QPointF(end.x, end.y))
