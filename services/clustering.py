"""Clustering Service - partitions 2-D points into k clusters and returns their centroids."""
import numbers

import numpy as np
from core.errors import EmptyDatasetError, InvalidParameterError
from core.geometry import Point, to_points
from utils.kmeans import KMeansClusterer


DEFAULT_RANDOM_STATE = 42
DEFAULT_MAX_ITER = 300


def validate_cluster_count(points, k):
    """
    Check the dataset and cluster count before any clustering work.

    Raises:
        EmptyDatasetError: if there are no points
        InvalidParameterError: if k is not an integer in [1, len(points)]
    """
    if len(points) == 0:
        raise EmptyDatasetError("Cannot cluster an empty dataset")

    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise InvalidParameterError(f"Cluster count must be an integer, got {k!r}")
    if k < 1:
        raise InvalidParameterError(f"Cluster count must be at least 1, got {k}")
    if k > len(points):
        raise InvalidParameterError(
            f"Cluster count {k} exceeds the number of points ({len(points)})"
        )

    for point in points:
        if not point.is_finite():
            raise InvalidParameterError(f"Point coordinates must be finite, got {tuple(point)}")


def cluster(points, k, random_state=DEFAULT_RANDOM_STATE, max_iter=DEFAULT_MAX_ITER):
    """
    Run Lloyd's k-means on ``points`` and return exactly ``k`` centroids.

    Centroids come back in initialization order, not sorted by position.
    Hitting ``max_iter`` is not an error; the last centroids are returned.
    """
    return ClusteringService(random_state=random_state, max_iter=max_iter).cluster(points, k)


class ClusteringService:
    """Service for clustering data points into groups."""

    def __init__(self, config=None, random_state=None, max_iter=None, n_init=None):
        self.config = config
        self.random_state = self._setting(random_state, 'RANDOM_STATE', DEFAULT_RANDOM_STATE)
        self.max_iter = self._setting(max_iter, 'MAX_ITERATIONS', DEFAULT_MAX_ITER)
        self.n_init = self._setting(n_init, 'N_INIT', 1)
        self.clusterer = None

    def _setting(self, value, name, default):
        if value is not None:
            return value
        return getattr(self.config, name, default)

    def cluster(self, points, k):
        """
        Cluster points into k groups.

        Args:
            points: Sequence of Point (or (x, y) pairs)
            k: Number of clusters to create

        Returns:
            List of k centroid Points
        """
        points = to_points(points)
        validate_cluster_count(points, k)
        if isinstance(self.max_iter, bool) or not isinstance(self.max_iter, numbers.Integral) \
                or self.max_iter < 1:
            raise InvalidParameterError(f"Iteration cap must be a positive integer, got {self.max_iter!r}")

        self.clusterer = KMeansClusterer(
            n_clusters=int(k),
            random_state=self.random_state,
            max_iter=int(self.max_iter),
            n_init=int(self.n_init)
        )
        coordinates = np.array(points, dtype=np.float64)

        self.clusterer.fit(coordinates)

        return [Point(float(x), float(y)) for x, y in self.clusterer.cluster_centers_]

    def get_stats(self):
        """Return statistics about the last clustering run."""
        if self.clusterer is None or self.clusterer.labels_ is None:
            return {}

        sizes = np.bincount(self.clusterer.labels_, minlength=self.clusterer.n_clusters)
        return {
            'n_clusters': self.clusterer.n_clusters,
            'n_iter': self.clusterer.n_iter_,
            'converged': self.clusterer.converged_,
            'inertia': self.clusterer.inertia_,
            'cluster_sizes': [int(size) for size in sizes],
        }
