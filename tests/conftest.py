"""Shared test fixtures."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from core.geometry import Point, Viewport
from utils.data_generator import DataGenerator


# Corners of a 10x10 square; the documented mapping example.
SQUARE_POINTS = [Point(0.0, 0.0), Point(10.0, 0.0), Point(0.0, 10.0), Point(10.0, 10.0)]

TWO_GROUPS = [Point(0.0, 0.0), Point(0.0, 1.0), Point(10.0, 10.0), Point(10.0, 11.0)]

CONSTANT_X = [Point(5.0, 0.0), Point(5.0, 10.0)]

SQUARE_CSV = b"""x,y
0,0
10,0
0,10
10,10
"""

TWO_GROUPS_CSV = b"""x,y
0,0
0,1
10,10
10,11
"""

BLOB_CENTERS = [(0.0, 0.0), (10.0, 0.0), (5.0, 10.0)]


def make_blobs(n=90, seed=7, spread=0.5):
    df = DataGenerator(centers=BLOB_CENTERS, spread=spread).generate(n=n, seed=seed)
    return [Point(float(x), float(y)) for x, y in zip(df["x"], df["y"])]


def make_config(tmp_path, **overrides):
    values = dict(
        NUM_CLUSTERS=3,
        RANDOM_STATE=42,
        MAX_ITERATIONS=300,
        N_INIT=1,
        WIDTH=400,
        HEIGHT=300,
        PADDING=20,
        TITLE="Test Plot",
        COLOR="#8ff0a4",
        DATA_FILE=str(tmp_path / "missing.csv"),
        NUM_POINTS=60,
        DATA_SEED=3,
        OUTPUT_DIR=str(tmp_path / "out"),
        OUTPUT_FILE="plot.svg",
        VERBOSE=False,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.fixture
def square_points() -> list[Point]:
    return list(SQUARE_POINTS)


@pytest.fixture
def blobs() -> list[Point]:
    return make_blobs()


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(100, 100, 10)


@pytest.fixture
def config(tmp_path):
    return make_config(tmp_path)
