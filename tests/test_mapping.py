"""Tests for bounds computation and data-to-pixel coordinate mapping."""

import pytest

from core.errors import (
    DegenerateRangeError, EmptyDatasetError, InvalidParameterError, ViewportTooSmallError,
)
from core.geometry import Bounds, Point, Viewport
from services.mapping import MappingService, map_coordinates
from utils.projection import compute_bounds, project, round_half_away_from_zero
from tests.conftest import CONSTANT_X, SQUARE_POINTS


@pytest.mark.parametrize("value, expected", [
    (0.5, 1.0), (-0.5, -1.0), (2.5, 3.0), (-2.5, -3.0),
    (1.4, 1.0), (-1.6, -2.0), (0.49999999999999994, 0.0), (-0.0, -0.0),
])
def test_round_half_away_from_zero(value, expected):
    assert round_half_away_from_zero(value) == expected


def test_bounds_for_square():
    assert compute_bounds(SQUARE_POINTS) == Bounds(x_min=-1.0, y_min=-1.0, x_range=12.0, y_range=12.0)


def test_bounds_round_outward_padding():
    bounds = compute_bounds([Point(0.3, -2.5), Point(2.6, 4.4)])
    # x: round(-0.7) = -1, round(3.6) = 4; y: round(-3.5) = -4, round(5.4) = 5
    assert bounds == Bounds(x_min=-1.0, y_min=-4.0, x_range=5.0, y_range=9.0)
    assert bounds.x_max == 4.0
    assert bounds.y_max == 5.0


def test_square_corner_maps_to_documented_pixels(viewport):
    path, _ = map_coordinates(SQUARE_POINTS, [], viewport)

    assert path[0].x == pytest.approx(16.6666667)
    assert path[0].y == pytest.approx(83.3333333)
    # (10, 10) sits symmetrically near the top right
    assert path[3].x == pytest.approx(83.3333333)
    assert path[3].y == pytest.approx(16.6666667)


def test_y_axis_is_inverted(viewport):
    path, _ = map_coordinates([Point(0.0, 0.0), Point(0.0, 10.0)], [], viewport)
    assert path[1].y < path[0].y


def test_centroids_do_not_change_bounds(viewport):
    path_alone, _ = map_coordinates(SQUARE_POINTS, [], viewport)
    path, centers = map_coordinates(SQUARE_POINTS, [Point(5.0, 5.0), Point(20.0, 20.0)], viewport)

    assert path == path_alone
    assert centers[0] == Point(50.0, 50.0)
    # A centroid outside the data extent lands outside the plot box
    assert centers[1].x == pytest.approx(21 / 12 * 80 + 10)
    assert centers[1].x > viewport.width


def test_output_order_matches_input(viewport):
    points = list(reversed(SQUARE_POINTS))
    path, _ = map_coordinates(points, [], viewport)
    forward, _ = map_coordinates(SQUARE_POINTS, [], viewport)
    assert path == list(reversed(forward))


def test_mapping_is_idempotent(viewport):
    centroids = [Point(2.5, 7.5)]
    first = map_coordinates(SQUARE_POINTS, centroids, viewport)
    second = map_coordinates(SQUARE_POINTS, centroids, viewport)
    assert first == second


def test_constant_axis_uses_two_unit_range(viewport):
    path, centers = map_coordinates(CONSTANT_X, [Point(5.0, 5.0)], viewport)

    assert compute_bounds(CONSTANT_X).x_range == 2.0
    assert [p.x for p in path] == [50.0, 50.0]
    assert centers[0].x == 50.0


def test_absorbed_margin_is_degenerate(viewport):
    points = [Point(1e17, 0.0), Point(1e17, 10.0)]
    with pytest.raises(DegenerateRangeError):
        map_coordinates(points, [], viewport)


def test_overflowing_range_is_degenerate(viewport):
    points = [Point(-1.7e308, 0.0), Point(1.7e308, 10.0)]
    with pytest.raises(DegenerateRangeError):
        map_coordinates(points, [], viewport)


def test_empty_points(viewport):
    with pytest.raises(EmptyDatasetError):
        map_coordinates([], [Point(1.0, 1.0)], viewport)


def test_non_finite_points(viewport):
    with pytest.raises(InvalidParameterError):
        map_coordinates([Point(float("inf"), 0.0), Point(1.0, 1.0)], [], viewport)


def test_non_finite_centroid(viewport):
    with pytest.raises(InvalidParameterError):
        map_coordinates(SQUARE_POINTS, [Point(float("nan"), 5.0)], viewport)


def test_service_returns_bounds(viewport):
    path, centers, bounds = MappingService().map(SQUARE_POINTS, [Point(5.0, 5.0)], viewport)
    assert len(path) == 4
    assert len(centers) == 1
    assert bounds.x_range == 12.0


def test_project_uses_plot_area():
    bounds = Bounds(x_min=0.0, y_min=0.0, x_range=10.0, y_range=10.0)
    viewport = Viewport(220, 120, 10)
    (low, high) = project([Point(0.0, 0.0), Point(10.0, 10.0)], bounds, viewport)

    assert low == Point(10.0, 110.0)
    assert high == Point(210.0, 10.0)


@pytest.mark.parametrize("width, height, padding", [(20, 100, 10), (100, 20, 10), (10, 10, 5), (0, 0, 0)])
def test_viewport_too_small(width, height, padding):
    with pytest.raises(ViewportTooSmallError):
        Viewport(width, height, padding)


@pytest.mark.parametrize("width, height, padding", [(-100, 100, 0), (100, 100, -1), (100.0, 100, 0), (100, "100", 0)])
def test_viewport_invalid_values(width, height, padding):
    with pytest.raises(InvalidParameterError):
        Viewport(width, height, padding)


def test_viewport_plot_dimensions():
    viewport = Viewport(800, 600, 50)
    assert viewport.plot_width == 700
    assert viewport.plot_height == 500
    assert viewport == Viewport(800, 600, 50)
