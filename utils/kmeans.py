"""KMeans Clusterer - Lloyd's algorithm on 2-D float64 coordinates."""
from __future__ import annotations

import numpy as np


def squared_distances(coordinates: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """Return the (n_samples, n_clusters) matrix of squared Euclidean distances."""
    diff = coordinates[:, None, :] - centers[None, :, :]
    return np.sum(diff * diff, axis=2)


class KMeansClusterer:
    """
    KMeans clustering with seeded initialization and explicit empty-cluster handling.

    Attribute names follow scikit-learn (``cluster_centers_``, ``labels_``,
    ``inertia_``, ``n_iter_``) so callers can swap the two freely.
    """

    def __init__(self, n_clusters: int = 5, random_state: int | None = 42,
                 max_iter: int = 300, n_init: int = 1) -> None:
        self.n_clusters = n_clusters
        self.random_state = random_state
        self.max_iter = max_iter
        self.n_init = n_init
        self.cluster_centers_: np.ndarray | None = None
        self.labels_: np.ndarray | None = None
        self.inertia_: float | None = None
        self.n_iter_: int = 0
        self.converged_: bool = False

    def fit(self, coordinates: np.ndarray) -> KMeansClusterer:
        """
        Fit KMeans model to coordinates.

        Args:
            coordinates: Array of shape (n_samples, 2) with [x, y]

        Returns:
            self
        """
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be at least 1, got {self.max_iter}")

        coordinates = np.asarray(coordinates, dtype=np.float64)
        rng = np.random.default_rng(self.random_state)

        best = None
        for _ in range(max(1, self.n_init)):
            initial = self._init_centers(coordinates, rng)
            run = self._lloyd(coordinates, initial)
            # Strictly lower inertia wins, so the first run is kept on ties.
            if best is None or run[2] < best[2]:
                best = run

        self.cluster_centers_, self.labels_, self.inertia_, self.n_iter_, self.converged_ = best
        return self

    def predict(self, coordinates: np.ndarray) -> np.ndarray:
        """Assign each coordinate to its nearest fitted center (lowest index on ties)."""
        if self.cluster_centers_ is None:
            raise RuntimeError("KMeansClusterer must be fitted before predict()")
        coordinates = np.asarray(coordinates, dtype=np.float64)
        return np.argmin(squared_distances(coordinates, self.cluster_centers_), axis=1)

    def _init_centers(self, coordinates: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        """Pick n_clusters distinct dataset points, preferring distinct coordinates."""
        n_samples = len(coordinates)
        _, first_seen = np.unique(coordinates, axis=0, return_index=True)
        candidates = np.sort(first_seen)

        if len(candidates) >= self.n_clusters:
            chosen = rng.choice(candidates, size=self.n_clusters, replace=False)
        else:
            # Not enough distinct coordinates: use all of them, then fill with duplicates.
            rest = np.setdiff1d(np.arange(n_samples), candidates)
            extra = rng.choice(rest, size=self.n_clusters - len(candidates), replace=False)
            chosen = np.concatenate([candidates, extra])

        return coordinates[chosen].copy()

    def _lloyd(self, coordinates: np.ndarray, centers: np.ndarray):
        labels = None
        converged = False
        n_iter = 0

        for n_iter in range(1, self.max_iter + 1):
            new_labels = np.argmin(squared_distances(coordinates, centers), axis=1)
            new_labels = self._fill_empty_clusters(coordinates, centers, new_labels)

            if labels is not None and np.array_equal(new_labels, labels):
                converged = True
                break

            labels = new_labels
            centers = self._update_centers(coordinates, labels)

        inertia = float(np.sum((coordinates - centers[labels]) ** 2))
        return centers, labels, inertia, n_iter, converged

    def _update_centers(self, coordinates: np.ndarray, labels: np.ndarray) -> np.ndarray:
        centers = np.empty((self.n_clusters, coordinates.shape[1]), dtype=np.float64)
        for k in range(self.n_clusters):
            centers[k] = coordinates[labels == k].mean(axis=0)
        return centers

    def _fill_empty_clusters(self, coordinates: np.ndarray, centers: np.ndarray,
                             labels: np.ndarray) -> np.ndarray:
        """
        Give every empty cluster the point farthest from its own assigned center.

        Only points whose cluster has more than one member can move, so filling
        one cluster never empties another. With n_samples >= n_clusters such a
        point always exists while any cluster is empty.
        """
        counts = np.bincount(labels, minlength=self.n_clusters)
        if np.all(counts > 0):
            return labels

        labels = labels.copy()
        centers = centers.copy()
        for k in np.flatnonzero(counts == 0):
            own_distance = np.sum((coordinates - centers[labels]) ** 2, axis=1)
            movable = counts[labels] > 1
            own_distance[~movable] = -1.0
            donor = int(np.argmax(own_distance))

            counts[labels[donor]] -= 1
            counts[k] += 1
            labels[donor] = k
            centers[k] = coordinates[donor]

        return labels
