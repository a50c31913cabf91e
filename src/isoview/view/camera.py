"""Camera state for the grid viewport.

The camera owns the world-space pan offset and the zoom factor and converts
between world coordinates and on-screen viewport pixels.
"""

import logging
import math

from .types import ConfigurationError, InvalidArgument, Point

DEFAULT_ZOOM_MIN = 0.1
DEFAULT_ZOOM_MAX = 10.0


def _check_dimensions(width: float, height: float) -> None:
    for name, value in (("viewport_width", width), ("viewport_height", height)):
        if not math.isfinite(value) or value <= 0:
            raise ConfigurationError(
                f"{name} must be a positive finite number, got {value!r}"
            )


class Camera:
    """Pannable, zoomable view onto world space.

    ``position`` is the world point shown at the viewport's top-left corner.
    """

    def __init__(
        self,
        viewport_width: float,
        viewport_height: float,
        zoom_min: float = DEFAULT_ZOOM_MIN,
        zoom_max: float = DEFAULT_ZOOM_MAX,
    ):
        """Initialize the camera.

        Args:
            viewport_width: Viewport width in pixels
            viewport_height: Viewport height in pixels
            zoom_min: Lowest accepted zoom factor
            zoom_max: Highest accepted zoom factor

        Raises:
            ConfigurationError: On non-positive or non-finite dimensions, or an
                invalid zoom range
        """
        _check_dimensions(viewport_width, viewport_height)
        if not (math.isfinite(zoom_min) and math.isfinite(zoom_max)):
            raise ConfigurationError(f"Zoom range must be finite: [{zoom_min}, {zoom_max}]")
        if zoom_min <= 0 or zoom_min > zoom_max:
            raise ConfigurationError(
                f"Zoom range must satisfy 0 < zoom_min <= zoom_max: [{zoom_min}, {zoom_max}]"
            )

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._viewport_width = float(viewport_width)
        self._viewport_height = float(viewport_height)
        self._zoom_min = float(zoom_min)
        self._zoom_max = float(zoom_max)
        self._position = Point(0.0, 0.0)
        self._zoom = min(max(1.0, self._zoom_min), self._zoom_max)

    # === VIEWPORT ===

    @property
    def viewport_width(self) -> float:
        return self._viewport_width

    @property
    def viewport_height(self) -> float:
        return self._viewport_height

    def resize(self, viewport_width: float, viewport_height: float) -> None:
        """Change viewport size. Position and zoom are kept."""
        _check_dimensions(viewport_width, viewport_height)
        self._viewport_width = float(viewport_width)
        self._viewport_height = float(viewport_height)
        self.logger.debug(f"Viewport resized to {viewport_width}x{viewport_height}")

    # === ZOOM ===

    @property
    def zoom_min(self) -> float:
        return self._zoom_min

    @property
    def zoom_max(self) -> float:
        return self._zoom_max

    def get_zoom(self) -> float:
        """Get current zoom factor."""
        return self._zoom

    def set_zoom(self, zoom: float) -> float:
        """Set zoom factor, clamped to the camera's zoom range.

        Args:
            zoom: Requested zoom factor

        Returns:
            The zoom factor actually applied

        Raises:
            InvalidArgument: If zoom is non-finite or not positive; the
                current zoom is left unchanged
        """
        if not math.isfinite(zoom) or zoom <= 0:
            raise InvalidArgument(f"Zoom must be a positive finite number, got {zoom!r}")

        self._zoom = min(max(float(zoom), self._zoom_min), self._zoom_max)
        return self._zoom

    # === POSITION ===

    def get_position(self) -> Point:
        """Get world-space offset of the viewport's top-left corner."""
        return self._position

    def set_position(self, x: float, y: float) -> None:
        """Set world-space offset verbatim."""
        self._position = Point(float(x), float(y))

    def pan(self, delta_x: float, delta_y: float) -> None:
        """Move the camera by a world-space delta.

        Panning is cumulative and unbounded; the delta is not scaled by zoom.
        """
        self._position = Point(self._position.x + delta_x, self._position.y + delta_y)

    # === TRANSFORMS ===

    def world_to_viewport(self, world_x: float, world_y: float) -> Point:
        """Convert world coordinates to viewport pixels."""
        return Point(
            (world_x - self._position.x) * self._zoom,
            (world_y - self._position.y) * self._zoom,
        )

    def viewport_to_world(self, viewport_x: float, viewport_y: float) -> Point:
        """Convert viewport pixels to world coordinates.

        Exact inverse of world_to_viewport; zoom is always > 0.
        """
        return Point(
            viewport_x / self._zoom + self._position.x,
            viewport_y / self._zoom + self._position.y,
        )

    def __repr__(self) -> str:
        return (
            f"Camera(viewport={self._viewport_width}x{self._viewport_height}, "
            f"position=({self._position.x}, {self._position.y}), zoom={self._zoom})"
        )
