"""
isoview: navigable infinite isometric tile grid.

Coordinate transforms, a pannable/zoomable camera and grid cell picking,
with a PySide6 widget to display them.
"""

__version__ = "0.1.0"

from .settings import AppSettings
from .utils.logging_config import setup_logging
from .view import (
    Camera,
    GridCell,
    GridTransform,
    Point,
    ViewportController,
)

__all__ = [
    # Settings
    "AppSettings",

    # Logging
    "setup_logging",

    # View
    "Camera",
    "GridCell",
    "GridTransform",
    "Point",
    "ViewportController",
]
