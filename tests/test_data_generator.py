"""Tests for the synthetic point generator."""

from utils.data_generator import DataGenerator


def test_generates_requested_count():
    df = DataGenerator().generate(n=10, seed=0)
    assert len(df) == 10
    assert list(df.columns) == ["x", "y"]


def test_seed_is_reproducible():
    first = DataGenerator().generate(n=20, seed=5)
    second = DataGenerator().generate(n=20, seed=5)
    assert first.equals(second)


def test_points_gather_around_centers():
    generator = DataGenerator(centers=[(100.0, -100.0)], spread=0.1)
    df = generator.generate(n=50, seed=2)
    assert abs(df["x"].mean() - 100.0) < 0.5
    assert abs(df["y"].mean() + 100.0) < 0.5


def test_write_csv(tmp_path):
    generator = DataGenerator()
    path = generator.write_csv(generator.generate(n=4, seed=0), str(tmp_path / "data" / "pts.csv"))
    assert open(path, encoding="utf-8").readline().strip() == "x,y"
