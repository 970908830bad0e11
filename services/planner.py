"""Plot Planner - main orchestrator for the cluster plot pipeline."""
import os

from services.dataset import DatasetService
from services.clustering import ClusteringService
from services.mapping import MappingService
from services.visualization import VisualizationService
from core.geometry import Viewport
from core.graph import Graph, DEFAULT_COLOR
from utils.data_generator import DataGenerator


class PlotPlanner:
    """Main orchestrator that coordinates ingestion, clustering, mapping and rendering."""

    def __init__(self, config, verbose=None):
        self.config = config
        self.verbose = getattr(config, 'VERBOSE', True) if verbose is None else verbose

        # Data containers
        self.points = []
        self.centroids = []
        self.graph = None

        # Services
        self.dataset_service = DatasetService(config)
        self.clustering_service = ClusteringService(config)
        self.mapping_service = MappingService(config)
        self.visualization_service = VisualizationService(config)

        # State
        self.stats = {}

    def _print(self, message):
        if self.verbose:
            print(message)

    def load_points(self, csv_content):
        """Parse raw CSV content into data points."""
        self._print("[1] Reading dataset...")
        self.points = self.dataset_service.read_points(csv_content)
        self._print(f"    OK: {len(self.points)} points read")

        return self.points

    def create_clusters(self, num_clusters):
        """Cluster the loaded points and keep the centroids."""
        self._print(f"[2] Creating {num_clusters} clusters...")
        self.centroids = self.clustering_service.cluster(self.points, num_clusters)

        stats = self.clustering_service.get_stats()
        if stats.get('converged'):
            self._print(f"    OK: converged after {stats['n_iter']} iterations")
        else:
            self._print(f"    WARNING: stopped at iteration cap ({stats.get('n_iter')}), "
                        f"returning last centroids")

        return self.centroids

    def map_geometry(self, viewport, title, color=DEFAULT_COLOR):
        """Map points and centroids into the viewport."""
        self._print(f"[3] Mapping coordinates into {viewport.width}x{viewport.height} "
                    f"(padding {viewport.padding})...")
        path, centers, bounds = self.mapping_service.map(self.points, self.centroids, viewport)

        self.graph = Graph(title, viewport, bounds, color=color)
        self.graph.set_geometry(path, centers)
        self._print(f"    OK: x from {bounds.x_min:g} (range {bounds.x_range:g}), "
                    f"y from {bounds.y_min:g} (range {bounds.y_range:g})")

        return self.graph

    def build_graph(self, points, num_clusters, viewport, title, color=DEFAULT_COLOR):
        """Cluster already-parsed points and return the render-ready graph."""
        self.points = list(points)
        self.create_clusters(num_clusters)
        return self.map_geometry(viewport, title, color)

    def render(self):
        """Render the current graph as SVG."""
        self._print("[4] Rendering SVG...")
        svg = self.visualization_service.render_svg(self.graph)
        self._print(f"    OK: {len(svg)} characters")

        return svg

    def fit(self, csv_content, num_clusters):
        """
        Cluster CSV points and return centroids flattened as [x0, y0, x1, y1, ...].

        Args:
            csv_content: Raw CSV bytes with a header row
            num_clusters: Number of clusters to create

        Returns:
            List of floats, two per centroid
        """
        self.load_points(csv_content)
        self.create_clusters(num_clusters)

        flattened = []
        for centroid in self.centroids:
            flattened.extend([centroid.x, centroid.y])
        return flattened

    def fit_draw(self, csv_content, num_clusters, width, height, padding, title,
                 color=DEFAULT_COLOR):
        """
        Run the whole pipeline on CSV content and return SVG markup.

        Args:
            csv_content: Raw CSV bytes with a header row
            num_clusters: Number of clusters to create
            width: Viewport width in pixels
            height: Viewport height in pixels
            padding: Padding on each side in pixels
            title: Plot title
            color: Fill color for the data points

        Returns:
            SVG document as a string
        """
        viewport = Viewport(width, height, padding)

        self.load_points(csv_content)
        self.create_clusters(num_clusters)
        self.map_geometry(viewport, title, color)

        return self.render()

    def load_or_generate_csv(self):
        """Read Config.DATA_FILE, or generate synthetic blobs when it does not exist."""
        data_file = getattr(self.config, 'DATA_FILE', None)
        if data_file and os.path.exists(data_file):
            self._print(f"[0] Loading data file {data_file}...")
            with open(data_file, 'rb') as f:
                return f.read()

        count = getattr(self.config, 'NUM_POINTS', 300)
        seed = getattr(self.config, 'DATA_SEED', 42)
        self._print(f"[0] No data file found, generating {count} synthetic points...")
        generator = DataGenerator()
        df = generator.generate(n=count, seed=seed)
        return generator.to_csv_bytes(df)

    def calculate_statistics(self):
        """Calculate summary statistics."""
        self.stats = {
            'num_points': len(self.points),
            'num_clusters': len(self.centroids),
        }
        self.stats.update(self.clustering_service.get_stats())
        if self.graph:
            self.stats['viewport'] = self.graph.viewport.to_dict()

        return self.stats

    def print_summary(self, output_file=None):
        """Print execution summary."""
        stats = self.calculate_statistics()

        print("\n" + "=" * 50)
        print("                    SUMMARY")
        print("=" * 50)
        print(f"✓ Points: {stats['num_points']}")
        print(f"✓ Clusters: {stats['num_clusters']}")
        print(f"✓ Iterations: {stats.get('n_iter')} (converged: {stats.get('converged')})")
        print(f"✓ Inertia: {stats.get('inertia', 0):.3f}")
        print(f"✓ Cluster sizes: {stats.get('cluster_sizes')}")
        for i, centroid in enumerate(self.centroids):
            print(f"   Center {i}: ({centroid.x:.3f}, {centroid.y:.3f})")
        if output_file:
            print(f"✓ Output: {output_file}")
        print("=" * 50 + "\n")

    def run(self):
        """Execute the full pipeline from Config and write the SVG file."""
        self._print("\n" + "=" * 50)
        self._print("        CLUSTER PLOT")
        self._print("=" * 50)
        self._print(f"   Config: {self.config.NUM_CLUSTERS} clusters, "
                    f"{self.config.WIDTH}x{self.config.HEIGHT} viewport")
        self._print("=" * 50 + "\n")

        csv_content = self.load_or_generate_csv()
        svg = self.fit_draw(
            csv_content,
            self.config.NUM_CLUSTERS,
            self.config.WIDTH,
            self.config.HEIGHT,
            self.config.PADDING,
            self.config.TITLE,
            color=self.config.COLOR
        )

        output_file = self.visualization_service.save_svg(svg)
        self._print(f"[5] Saved {output_file}")

        if self.verbose:
            self.print_summary(output_file)

        return output_file
