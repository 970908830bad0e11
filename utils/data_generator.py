"""Data Generator - generates synthetic 2-D point clouds for demos and tests."""
import io
import os

import numpy as np
import pandas as pd


DEFAULT_CENTERS = [(2.0, 2.0), (8.0, 3.0), (5.0, 8.0)]


class DataGenerator:
    """Generates Gaussian blobs of points around fixed centers."""

    def __init__(self, centers=None, spread=0.8):
        self.centers = list(centers) if centers is not None else list(DEFAULT_CENTERS)
        self.spread = spread

    def generate(self, n=100, seed=42):
        """
        Generate n random points split evenly across the blob centers.

        Args:
            n: Number of points to generate
            seed: Random seed for reproducibility

        Returns:
            DataFrame with x, y columns
        """
        rng = np.random.default_rng(seed)
        n_centers = len(self.centers)

        xs = []
        ys = []
        for i, (cx, cy) in enumerate(self.centers):
            # Spread the remainder over the first blobs
            count = n // n_centers + (1 if i < n % n_centers else 0)
            xs.append(rng.normal(cx, self.spread, size=count))
            ys.append(rng.normal(cy, self.spread, size=count))

        df = pd.DataFrame({
            "x": np.concatenate(xs) if xs else np.array([]),
            "y": np.concatenate(ys) if ys else np.array([]),
        })

        return df

    @staticmethod
    def to_csv_bytes(df):
        """Serialize a point DataFrame as CSV bytes with a header row."""
        buffer = io.StringIO()
        df.to_csv(buffer, index=False)
        return buffer.getvalue().encode('utf-8')

    def write_csv(self, df, path):
        """Write a point DataFrame to a CSV file."""
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        df.to_csv(path, index=False)
        return path
