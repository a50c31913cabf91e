"""Coordinate transformations between grid and world space.

This module maps fractional grid coordinates onto the unscaled
isometric world plane and back, and resolves world points to cells.
"""

import math
from typing import TYPE_CHECKING

from .types import ConfigurationError, GridCell, Point

if TYPE_CHECKING:
    from isoview.settings import AppSettings


class GridTransform:
    """Handles transformations between grid and world (isometric) spaces.

    A tile is a diamond ``tile_width`` wide and ``tile_height`` tall; grid
    point ``(gx, gy)`` maps to the top vertex of the diamond of cell
    ``(gx, gy)``.
    """

    __slots__ = ("_tile_width", "_tile_height", "_half_width", "_half_height")

    def __init__(self, tile_width: float, tile_height: float):
        """Initialize the grid transform.

        Args:
            tile_width: Width of a single tile in world pixels
            tile_height: Height of a single tile in world pixels

        Raises:
            ConfigurationError: If either dimension is not a positive finite number
        """
        for name, value in (("tile_width", tile_width), ("tile_height", tile_height)):
            if not math.isfinite(value) or value <= 0:
                raise ConfigurationError(
                    f"{name} must be a positive finite number, got {value!r}"
                )

        self._tile_width = float(tile_width)
        self._tile_height = float(tile_height)
        self._half_width = self._tile_width / 2
        self._half_height = self._tile_height / 2

    @staticmethod
    def from_settings(settings: "AppSettings") -> "GridTransform":
        """Create transform from configured tile dimensions.

        Args:
            settings: AppSettings instance

        Returns:
            Configured GridTransform instance
        """
        return GridTransform(settings.view.tile_width, settings.view.tile_height)

    @property
    def tile_width(self) -> float:
        return self._tile_width

    @property
    def tile_height(self) -> float:
        return self._tile_height

    def grid_to_world(self, grid_x: float, grid_y: float) -> Point:
        """Convert grid coordinates to world coordinates.

        Args:
            grid_x: Column in the grid (can be fractional or negative)
            grid_y: Row in the grid (can be fractional or negative)

        Returns:
            Point in world space
        """
        world_x = (grid_x - grid_y) * self._half_width
        world_y = (grid_x + grid_y) * self._half_height
        return Point(world_x, world_y)

    def world_to_grid(self, world_x: float, world_y: float) -> Point:
        """Convert world coordinates back to fractional grid coordinates.

        Exact inverse of grid_to_world.
        """
        along_x = world_x / self._half_width
        along_y = world_y / self._half_height
        return Point((along_x + along_y) / 2, (along_y - along_x) / 2)

    def cell_at(self, world_x: float, world_y: float) -> GridCell:
        """Get the grid cell containing a world point.

        Each component is floored independently, so grid x = -0.3 lies in
        cell -1.

        Args:
            world_x: X coordinate in world space
            world_y: Y coordinate in world space

        Returns:
            GridCell containing the point
        """
        grid = self.world_to_grid(world_x, world_y)
        return GridCell(math.floor(grid.x), math.floor(grid.y))

    def __repr__(self) -> str:
        return f"GridTransform(tile_width={self._tile_width}, tile_height={self._tile_height})"
