"""
Geometry value types for the cluster plot pipeline.

Contains: Point, Viewport, Bounds
"""
from __future__ import annotations

import math
import numbers
from typing import NamedTuple

from core.errors import InvalidParameterError, ViewportTooSmallError


# =============================================================================
# Point
# =============================================================================

class Point(NamedTuple):
    """A 2-D point in data space or pixel space."""

    x: float
    y: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


def to_points(pairs) -> list[Point]:
    """Convert an iterable of (x, y) pairs into a list of float64 Points."""
    return [Point(float(x), float(y)) for x, y in pairs]


# =============================================================================
# Viewport
# =============================================================================

class Viewport:
    """Target pixel rectangle, shrunk on each side by ``padding``."""

    def __init__(self, width: int, height: int, padding: int = 0) -> None:
        for name, value in (('width', width), ('height', height), ('padding', padding)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidParameterError(f"Viewport {name} must be an integer, got {value!r}")
            if value < 0:
                raise InvalidParameterError(f"Viewport {name} must be non-negative, got {value}")

        if width <= 2 * padding or height <= 2 * padding:
            raise ViewportTooSmallError(
                f"Viewport {width}x{height} leaves no plot area with padding {padding}"
            )

        self.width = int(width)
        self.height = int(height)
        self.padding = int(padding)

    @property
    def plot_width(self) -> int:
        return self.width - 2 * self.padding

    @property
    def plot_height(self) -> int:
        return self.height - 2 * self.padding

    def to_dict(self) -> dict:
        return {
            'width': self.width, 'height': self.height, 'padding': self.padding,
            'plot_width': self.plot_width, 'plot_height': self.plot_height
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Viewport):
            return NotImplemented
        return (self.width, self.height, self.padding) == (other.width, other.height, other.padding)

    def __hash__(self) -> int:
        return hash((self.width, self.height, self.padding))

    def __repr__(self) -> str:
        return f"Viewport(width={self.width}, height={self.height}, padding={self.padding})"


# =============================================================================
# Bounds
# =============================================================================

class Bounds(NamedTuple):
    """Padded, rounded data extent used to normalize coordinates."""

    x_min: float
    y_min: float
    x_range: float
    y_range: float

    @property
    def x_max(self) -> float:
        return self.x_min + self.x_range

    @property
    def y_max(self) -> float:
        return self.y_min + self.y_range
