"""
Projection helpers: data-space extent and data-to-pixel coordinate mapping.

Contains: round_half_away_from_zero, compute_bounds, project
"""
from __future__ import annotations

import math

import numpy as np

from core.errors import DegenerateRangeError, EmptyDatasetError, InvalidParameterError
from core.geometry import Bounds, Point, Viewport


# Outward margin added to each side of the data extent, in data units.
BOUNDS_MARGIN = 1.0


def round_half_away_from_zero(value: float) -> float:
    """Round to the nearest integer, with halves rounded away from zero."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1.0
    return math.copysign(whole, value)


def compute_bounds(points: list[Point]) -> Bounds:
    """
    Derive the padded, rounded extent of ``points``.

    Each side is pushed outward by one data unit and rounded, so points never
    sit on the plot border. An axis where every point shares one value ends up
    with a range of two units. A range that is still zero (the margin was
    absorbed by float precision) or not finite raises DegenerateRangeError.
    """
    if len(points) == 0:
        raise EmptyDatasetError("Cannot compute bounds of an empty dataset")

    coords = np.asarray(points, dtype=np.float64)
    if not np.all(np.isfinite(coords)):
        raise InvalidParameterError("Point coordinates must be finite")

    x_min, y_min = coords.min(axis=0)
    x_max, y_max = coords.max(axis=0)

    x_low = round_half_away_from_zero(float(x_min) - BOUNDS_MARGIN)
    y_low = round_half_away_from_zero(float(y_min) - BOUNDS_MARGIN)
    x_range = round_half_away_from_zero(float(x_max) + BOUNDS_MARGIN) - x_low
    y_range = round_half_away_from_zero(float(y_max) + BOUNDS_MARGIN) - y_low

    for axis, span in (('x', x_range), ('y', y_range)):
        if not math.isfinite(span) or span <= 0:
            raise DegenerateRangeError(f"Degenerate {axis} range after padding: {span}")

    return Bounds(x_min=x_low, y_min=y_low, x_range=x_range, y_range=y_range)


def project(points: list[Point], bounds: Bounds, viewport: Viewport) -> list[Point]:
    """Map data-space points into pixel space; y grows downward in the output."""
    if len(points) == 0:
        return []

    coords = np.asarray(points, dtype=np.float64)
    if not np.all(np.isfinite(coords)):
        raise InvalidParameterError("Point coordinates must be finite")

    plot_width = viewport.plot_width
    plot_height = viewport.plot_height
    padding = viewport.padding

    xs = (coords[:, 0] - bounds.x_min) / bounds.x_range * plot_width + padding
    ys = (coords[:, 1] - bounds.y_min) / bounds.y_range * (plot_height * -1.0) + (padding + plot_height)

    if not (np.all(np.isfinite(xs)) and np.all(np.isfinite(ys))):
        raise DegenerateRangeError("Coordinate mapping produced non-finite pixel values")

    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]
