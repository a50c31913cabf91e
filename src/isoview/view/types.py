"""
Value types and exceptions shared by the view components.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class ViewError(Exception):
    """Base class for view errors."""
    pass


class ConfigurationError(ViewError, ValueError):
    """Raised when a transform or camera is constructed with invalid dimensions."""
    pass


class InvalidArgument(ViewError, ValueError):
    """Raised when a call receives a value it can never accept (e.g. zoom <= 0)."""
    pass


@dataclass(frozen=True)
class Point:
    """Immutable pair of float coordinates."""
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class GridCell:
    """Integer address of a tile in the grid."""
    cell_x: int
    cell_y: int


@dataclass(frozen=True)
class CellRange:
    """Inclusive rectangle of grid cells.

    Iterates row by row: y is the outer loop, x the inner one.
    """
    start_x: int
    start_y: int
    end_x: int
    end_y: int

    def __iter__(self) -> Iterator[GridCell]:
        for cell_y in range(self.start_y, self.end_y + 1):
            for cell_x in range(self.start_x, self.end_x + 1):
                yield GridCell(cell_x, cell_y)

    def __len__(self) -> int:
        width = max(0, self.end_x - self.start_x + 1)
        height = max(0, self.end_y - self.start_y + 1)
        return width * height


class GestureState(Enum):
    """Pan gesture states."""
    IDLE = "idle"
    PANNING = "panning"


@dataclass(frozen=True)
class PanGesture:
    """State captured when a pan gesture starts.

    Attributes:
        anchor_viewport: Viewport point where the gesture started
        anchor_position: Camera position at the moment the gesture started
    """
    anchor_viewport: Point
    anchor_position: Point
