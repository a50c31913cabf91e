"""
Settings validation system for isoview.
"""

import logging
import math
from typing import List, TYPE_CHECKING

from .logging import VALID_LEVELS
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []
        view = self.settings.view

        # Tile geometry
        tile_width = view.tile_width
        tile_height = view.tile_height
        if not (math.isfinite(tile_width) and math.isfinite(tile_height)):
            errors.append(f"Tile size must be finite: {tile_width}x{tile_height}")
        elif tile_width <= 0 or tile_height <= 0:
            errors.append(f"Tile size must be positive: {tile_width}x{tile_height}")
        elif tile_width != 2 * tile_height:
            warnings.append(
                f"Tile size {tile_width}x{tile_height} is not 2:1, tiles will look skewed"
            )

        # Zoom
        zoom_min = view.zoom_min
        zoom_max = view.zoom_max
        if not (math.isfinite(zoom_min) and math.isfinite(zoom_max)):
            errors.append(f"Zoom range must be finite: {zoom_min}..{zoom_max}")
        else:
            if zoom_min <= 0:
                errors.append(f"Minimum zoom must be positive: {zoom_min}")
            if zoom_min > zoom_max:
                errors.append(
                    f"Minimum zoom {zoom_min} is greater than maximum zoom {zoom_max}"
                )
        if not math.isfinite(view.zoom_step) or view.zoom_step <= 1:
            errors.append(f"Zoom step must be a finite number greater than 1: {view.zoom_step}")

        # Logging
        console_level = self.settings.logging.console_log_level
        if console_level.upper() not in VALID_LEVELS:
            warnings.append(f"Unknown console log level '{console_level}', using INFO")

        if errors:
            logger.debug(f"Settings validation found {len(errors)} error(s)")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
