"""Dataset Service - reads raw CSV content into an ordered list of 2-D points."""
import io

import numpy as np
import pandas as pd
from core.errors import EmptyDatasetError, MalformedDatasetError
from core.geometry import Point


class DatasetService:
    """Service for turning CSV text into data points."""

    def __init__(self, config=None):
        self.config = config

    def read_points(self, csv_content):
        """
        Parse CSV bytes into points.

        The first row is a header. Every remaining field is parsed as a float,
        the values are flattened row by row and paired consecutively, so
        ``x,y`` rows and wider rows of coordinate pairs both work.

        Args:
            csv_content: Raw CSV as bytes or str

        Returns:
            List of Point in file order
        """
        if isinstance(csv_content, str):
            csv_content = csv_content.encode('utf-8')

        try:
            # The header line fixes the column count, so any wider row is a parse error.
            df = pd.read_csv(
                io.BytesIO(csv_content), header=None, dtype=str, keep_default_na=False
            ).iloc[1:]
        except pd.errors.EmptyDataError as e:
            raise EmptyDatasetError("CSV content is empty") from e
        except pd.errors.ParserError as e:
            raise MalformedDatasetError(f"CSV content could not be parsed: {e}") from e

        return self.points_from_frame(df)

    def read_file(self, path):
        """Read a CSV file from disk into points."""
        with open(path, 'rb') as f:
            return self.read_points(f.read())

    def points_from_frame(self, df):
        """Flatten a DataFrame of numeric fields into consecutive (x, y) points."""
        if df.empty:
            return []

        try:
            values = df.apply(pd.to_numeric, errors='raise').to_numpy(dtype=np.float64).ravel()
        except (ValueError, TypeError) as e:
            raise MalformedDatasetError(f"Non-numeric field in CSV: {e}") from e

        if np.isnan(values).any():
            raise MalformedDatasetError("CSV contains missing fields")

        if len(values) % 2 != 0:
            raise MalformedDatasetError(
                f"CSV holds {len(values)} values, which cannot be paired into points"
            )

        pairs = values.reshape(-1, 2)
        return [Point(float(x), float(y)) for x, y in pairs]
