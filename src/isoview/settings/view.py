"""
Grid view settings for isoview.
"""

import logging
import math
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

DEFAULT_TILE_WIDTH = 64.0
DEFAULT_TILE_HEIGHT = 32.0
DEFAULT_ZOOM_MIN = 0.1
DEFAULT_ZOOM_MAX = 10.0
DEFAULT_ZOOM_STEP = 1.1


class ViewSettings:
    """Manages tile geometry, zoom range and grid display settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _get_float(self, key: str, default: float = 0.0) -> float:
        """Type-safe float retrieval from settings."""
        value = self.settings.value(key, default)
        try:
            if value is None:
                return default
            return float(cast(str | float, value))
        except (ValueError, TypeError):
            return default

    def _set_positive(self, key: str, value: float, current: float) -> None:
        """Store a positive finite value, or keep the current one."""
        if math.isfinite(value) and value > 0:
            self.settings.setValue(key, float(value))
            self.settings.sync()
        else:
            logger.warning(f"Invalid value for {key}: {value}, keeping current: {current}")

    # === TILE GEOMETRY ===

    @property
    def tile_width(self) -> float:
        """Get tile width in world pixels."""
        return self._get_float("view/tile_width", DEFAULT_TILE_WIDTH)

    @tile_width.setter
    def tile_width(self, value: float) -> None:
        self._set_positive("view/tile_width", value, self.tile_width)

    @property
    def tile_height(self) -> float:
        """Get tile height in world pixels."""
        return self._get_float("view/tile_height", DEFAULT_TILE_HEIGHT)

    @tile_height.setter
    def tile_height(self, value: float) -> None:
        self._set_positive("view/tile_height", value, self.tile_height)

    # === ZOOM ===

    @property
    def zoom_min(self) -> float:
        """Get lowest zoom factor."""
        return self._get_float("view/zoom_min", DEFAULT_ZOOM_MIN)

    @zoom_min.setter
    def zoom_min(self, value: float) -> None:
        self._set_positive("view/zoom_min", value, self.zoom_min)

    @property
    def zoom_max(self) -> float:
        """Get highest zoom factor."""
        return self._get_float("view/zoom_max", DEFAULT_ZOOM_MAX)

    @zoom_max.setter
    def zoom_max(self, value: float) -> None:
        self._set_positive("view/zoom_max", value, self.zoom_max)

    @property
    def zoom_step(self) -> float:
        """Get multiplicative zoom change per wheel notch."""
        return self._get_float("view/zoom_step", DEFAULT_ZOOM_STEP)

    @zoom_step.setter
    def zoom_step(self, value: float) -> None:
        if math.isfinite(value) and value > 1:
            self.settings.setValue("view/zoom_step", float(value))
            self.settings.sync()
        else:
            logger.warning(
                f"Invalid zoom step: {value}, keeping current: {self.zoom_step}"
            )

    # === GRID ===

    @property
    def grid_visible(self) -> bool:
        """Check if grid lines should be drawn."""
        return self._get_bool("view/grid_visible", True)

    @grid_visible.setter
    def grid_visible(self, value: bool) -> None:
        """Set grid visibility."""
        self.settings.setValue("view/grid_visible", value)
        self.settings.sync()
