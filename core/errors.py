"""Error types raised by the clustering and coordinate-mapping pipeline."""


class ClusterPlotError(ValueError):
    """Base class for all pipeline errors caused by caller input."""


class InvalidParameterError(ClusterPlotError):
    """A caller-supplied parameter violates a precondition (e.g. k == 0 or k > n)."""


class EmptyDatasetError(ClusterPlotError):
    """There are no points to cluster or map."""


class DegenerateRangeError(ClusterPlotError):
    """An axis range collapsed to zero (or overflowed) after padding."""


class ViewportTooSmallError(ClusterPlotError):
    """The padding leaves no usable plot area inside the viewport."""


class MalformedDatasetError(ClusterPlotError):
    """The raw CSV content could not be turned into (x, y) pairs."""
