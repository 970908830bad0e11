"""Graph model - pixel-space geometry and display metadata for one cluster plot."""

DEFAULT_COLOR = "#8ff0a4"


class Graph:
    """A titled scatter plot of mapped points and their cluster centers."""

    def __init__(self, name, viewport, bounds, color=DEFAULT_COLOR):
        self.name = name
        self.color = color
        self.viewport = viewport
        self.bounds = bounds
        self.path = []
        self.centers = []

    def set_geometry(self, path, centers):
        """Set the mapped data points and mapped cluster centers."""
        self.path = list(path)
        self.centers = list(centers)

    def get_point_count(self):
        """Return the number of mapped data points."""
        return len(self.path)

    def get_center_count(self):
        """Return the number of mapped cluster centers."""
        return len(self.centers)

    def get_stats(self):
        """Return statistics about this graph."""
        stats = {
            'name': self.name,
            'color': self.color,
            'n_points': self.get_point_count(),
            'n_centers': self.get_center_count(),
            'x_min': self.bounds.x_min,
            'y_min': self.bounds.y_min,
            'x_range': self.bounds.x_range,
            'y_range': self.bounds.y_range,
        }
        stats.update(self.viewport.to_dict())
        return stats

    def __repr__(self):
        return f"Graph(name={self.name!r}, points={len(self.path)}, centers={len(self.centers)})"

    def __str__(self):
        return f"Graph '{self.name}': {len(self.path)} points, {len(self.centers)} centers"
