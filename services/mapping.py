"""Mapping Service - converts data-space points and centroids into pixel coordinates."""
from core.errors import EmptyDatasetError
from utils.projection import compute_bounds, project


def map_coordinates(points, centroids, viewport):
    """
    Map the dataset and its centroids into the viewport.

    Bounds come from ``points`` only, so a centroid outside the data extent
    is placed relative to the data and may land outside the plot box.

    Returns:
        Tuple of (mapped_path, mapped_centers), each in input order
    """
    path, centers, _ = MappingService().map(points, centroids, viewport)
    return path, centers


class MappingService:
    """Service for normalizing data coordinates into a pixel viewport."""

    def __init__(self, config=None):
        self.config = config

    def map(self, points, centroids, viewport):
        """
        Map points and centroids into pixel space.

        Args:
            points: Sequence of data Points; defines the bounds
            centroids: Sequence of centroid Points in the same data space
            viewport: Viewport with width, height and padding

        Returns:
            Tuple of (mapped_path, mapped_centers, bounds)
        """
        if len(points) == 0:
            raise EmptyDatasetError("Cannot map an empty dataset")

        bounds = compute_bounds(points)
        mapped_path = project(points, bounds, viewport)
        mapped_centers = project(centroids, bounds, viewport)

        return mapped_path, mapped_centers, bounds
