"""Grid view package.

This package provides the components for navigating an isometric grid:
- GridTransform: Grid <-> world coordinate conversions
- Camera: World <-> viewport conversions with pan and zoom
- ViewportController: Cell picking, pan gestures, focal zoom, visible cells
- TileRenderer / QPainterRenderer: Drawing collaborator
- IsoGridView: Qt widget hosting the controller
"""

from .types import (
    CellRange,
    ConfigurationError,
    GestureState,
    GridCell,
    InvalidArgument,
    PanGesture,
    Point,
    ViewError,
)
from .grid_transform import GridTransform
from .camera import Camera
from .renderer import QPainterRenderer, TileRenderer
from .controller import ViewportController
from .grid_view import IsoGridView

__all__ = [
    "CellRange",
    "ConfigurationError",
    "GestureState",
    "GridCell",
    "InvalidArgument",
    "PanGesture",
    "Point",
    "ViewError",
    "GridTransform",
    "Camera",
    "QPainterRenderer",
    "TileRenderer",
    "ViewportController",
    "IsoGridView",
]
