"""Viewport controller.

This module composes GridTransform and Camera to provide:
- Grid cell picking at a viewport position
- Pan gestures (start / update / end) and focal-point zoom
- Enumeration of visible cells for a TileRenderer
"""

import logging
import math
from typing import TYPE_CHECKING, Optional

from .camera import Camera
from .grid_transform import GridTransform
from .renderer import TileRenderer
from .types import (
    CellRange,
    ConfigurationError,
    GestureState,
    GridCell,
    InvalidArgument,
    PanGesture,
    Point,
)

if TYPE_CHECKING:
    from isoview.settings import AppSettings

DEFAULT_ZOOM_STEP = 1.1

STYLE_TILE = "tile"
STYLE_TILE_ALT = "tile-alt"
STYLE_HOVER = "hover"


class ViewportController:
    """Drives a Camera over an infinite isometric grid.

    The controller exclusively owns its Camera; the GridTransform is
    immutable and may be shared.
    """

    def __init__(
        self,
        grid: GridTransform,
        camera: Camera,
        zoom_step: float = DEFAULT_ZOOM_STEP,
        grid_visible: bool = True,
    ):
        """Initialize the controller.

        Args:
            grid: Grid <-> world transform
            camera: Camera owned by this controller
            zoom_step: Multiplicative zoom change per wheel notch (> 1)
            grid_visible: Whether render() draws grid lines
        """
        if not math.isfinite(zoom_step) or zoom_step <= 1:
            raise ConfigurationError(f"Zoom step must be a finite number > 1, got {zoom_step!r}")

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.grid = grid
        self.camera = camera
        self.zoom_step = float(zoom_step)
        self.grid_visible = grid_visible

        self._gesture: Optional[PanGesture] = None
        self._hovered_cell: Optional[GridCell] = None

    @staticmethod
    def from_settings(
        settings: "AppSettings", viewport_width: float, viewport_height: float
    ) -> "ViewportController":
        """Create a controller from view settings.

        Args:
            settings: AppSettings instance
            viewport_width: Initial viewport width in pixels
            viewport_height: Initial viewport height in pixels

        Returns:
            Configured ViewportController with the origin centered
        """
        view = settings.view
        camera = Camera(viewport_width, viewport_height, view.zoom_min, view.zoom_max)
        controller = ViewportController(
            GridTransform.from_settings(settings),
            camera,
            zoom_step=view.zoom_step,
            grid_visible=view.grid_visible,
        )
        controller.center_on(0, 0)
        return controller

    # === PICKING ===

    def get_grid_cell_at(self, viewport_x: float, viewport_y: float) -> GridCell:
        """Get the grid cell under a viewport pixel."""
        world = self.camera.viewport_to_world(viewport_x, viewport_y)
        return self.grid.cell_at(world.x, world.y)

    def grid_to_viewport(self, grid_x: float, grid_y: float) -> Point:
        """Convert grid coordinates straight to viewport pixels."""
        world = self.grid.grid_to_world(grid_x, grid_y)
        return self.camera.world_to_viewport(world.x, world.y)

    # === HOVER ===

    @property
    def hovered_cell(self) -> Optional[GridCell]:
        return self._hovered_cell

    def set_hover(self, viewport_x: float, viewport_y: float) -> GridCell:
        """Mark the cell under a viewport pixel as hovered and return it."""
        self._hovered_cell = self.get_grid_cell_at(viewport_x, viewport_y)
        return self._hovered_cell

    def clear_hover(self) -> None:
        self._hovered_cell = None

    # === PAN GESTURE ===

    @property
    def gesture_state(self) -> GestureState:
        return GestureState.IDLE if self._gesture is None else GestureState.PANNING

    @property
    def is_panning(self) -> bool:
        return self._gesture is not None

    def start_pan(self, viewport_x: float, viewport_y: float) -> None:
        """Begin a pan gesture anchored at a viewport point.

        Starting while already panning restarts the gesture from the new anchor.
        """
        if self._gesture is not None:
            self.logger.debug("Pan restarted without end_pan")
        self._gesture = PanGesture(
            anchor_viewport=Point(float(viewport_x), float(viewport_y)),
            anchor_position=self.camera.get_position(),
        )

    def update_pan(self, viewport_x: float, viewport_y: float) -> None:
        """Move the camera so the anchor world point follows the pointer.

        The delta is always measured from the gesture anchor, not from the
        previous update. No-op when idle.
        """
        gesture = self._gesture
        if gesture is None:
            self.logger.debug("update_pan ignored: no active gesture")
            return

        zoom = self.camera.get_zoom()
        delta_x = (viewport_x - gesture.anchor_viewport.x) / zoom
        delta_y = (viewport_y - gesture.anchor_viewport.y) / zoom
        # Camera moves opposite to the drag
        self.camera.set_position(
            gesture.anchor_position.x - delta_x,
            gesture.anchor_position.y - delta_y,
        )

    def end_pan(self) -> None:
        """Finish the pan gesture. No-op when idle."""
        self._gesture = None

    # === ZOOM ===

    def zoom_factor(self, delta: float) -> float:
        """Map a wheel delta to a multiplicative zoom factor.

        Positive delta zooms out, negative zooms in; only the sign counts.
        """
        if delta > 0:
            return 1 / self.zoom_step
        if delta < 0:
            return self.zoom_step
        return 1.0

    def zoom(self, delta: float, focal_viewport_x: float, focal_viewport_y: float) -> float:
        """Zoom while keeping the world point under the focal pixel fixed.

        Args:
            delta: Wheel delta (positive zooms out)
            focal_viewport_x: Focal point X in viewport pixels
            focal_viewport_y: Focal point Y in viewport pixels

        Returns:
            The new zoom factor

        Raises:
            InvalidArgument: If any argument is non-finite
        """
        if not all(math.isfinite(v) for v in (delta, focal_viewport_x, focal_viewport_y)):
            raise InvalidArgument(
                f"Zoom arguments must be finite: delta={delta!r}, "
                f"focal=({focal_viewport_x!r}, {focal_viewport_y!r})"
            )

        world_focal = self.camera.viewport_to_world(focal_viewport_x, focal_viewport_y)
        old_zoom = self.camera.get_zoom()
        new_zoom = self.camera.set_zoom(old_zoom * self.zoom_factor(delta))

        self.camera.set_position(
            world_focal.x - focal_viewport_x / new_zoom,
            world_focal.y - focal_viewport_y / new_zoom,
        )
        if new_zoom != old_zoom:
            self.logger.debug(f"Zoom {old_zoom:.3f} -> {new_zoom:.3f}")
        return new_zoom

    # === VIEW HELPERS ===

    def center_on(self, grid_x: float, grid_y: float) -> None:
        """Position the camera so a grid point sits in the middle of the viewport."""
        world = self.grid.grid_to_world(grid_x, grid_y)
        zoom = self.camera.get_zoom()
        self.camera.set_position(
            world.x - self.camera.viewport_width / 2 / zoom,
            world.y - self.camera.viewport_height / 2 / zoom,
        )

    def reset_view(self) -> None:
        """Return to zoom 1.0 with the grid origin centered."""
        self._gesture = None
        self.camera.set_zoom(1.0)
        self.center_on(0, 0)
        self.logger.debug("View reset")

    def resize(self, viewport_width: float, viewport_height: float) -> None:
        """Resize the viewport keeping the world point at its center in place."""
        camera = self.camera
        center = camera.viewport_to_world(camera.viewport_width / 2, camera.viewport_height / 2)
        camera.resize(viewport_width, viewport_height)
        zoom = camera.get_zoom()
        camera.set_position(
            center.x - camera.viewport_width / 2 / zoom,
            center.y - camera.viewport_height / 2 / zoom,
        )

    def set_grid_visible(self, visible: bool) -> None:
        self.grid_visible = visible

    # === RENDERING ===

    def visible_cell_range(self) -> CellRange:
        """Get the rectangle of grid cells covering the viewport.

        The grid-space bounding box of the four viewport corners is expanded
        by one cell on every side so partially visible tiles are included.
        """
        width = self.camera.viewport_width
        height = self.camera.viewport_height
        corners = [
            self.camera.viewport_to_world(x, y)
            for x, y in ((0, 0), (width, 0), (0, height), (width, height))
        ]
        grid_corners = [self.grid.world_to_grid(c.x, c.y) for c in corners]

        min_x = min(p.x for p in grid_corners)
        max_x = max(p.x for p in grid_corners)
        min_y = min(p.y for p in grid_corners)
        max_y = max(p.y for p in grid_corners)

        return CellRange(
            start_x=math.floor(min_x) - 1,
            start_y=math.floor(min_y) - 1,
            end_x=math.ceil(max_x) + 1,
            end_y=math.ceil(max_y) + 1,
        )

    def tile_style(self, cell: GridCell) -> str:
        """Get the style identifier for a cell."""
        if cell == self._hovered_cell:
            return STYLE_HOVER
        return STYLE_TILE_ALT if (cell.cell_x + cell.cell_y) % 2 else STYLE_TILE

    def render(self, renderer: TileRenderer) -> int:
        """Draw every cell in the visible range.

        Args:
            renderer: Drawing collaborator

        Returns:
            Number of tiles drawn
        """
        cells = self.visible_cell_range()
        renderer.clear()

        count = 0
        for cell in cells:
            position = self.grid_to_viewport(cell.cell_x, cell.cell_y)
            renderer.draw_tile(position.x, position.y, self.tile_style(cell))
            count += 1

        if self.grid_visible:
            renderer.draw_grid_lines(cells.start_x, cells.start_y, cells.end_x, cells.end_y)

        return count
