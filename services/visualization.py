"""Visualization Service - renders mapped cluster geometry as SVG markup."""
import hashlib
import os
import random

from jinja2 import Environment


GRID_LINES = 5

GRAPH_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="{{ width }}" height="{{ height }}" viewBox="0 0 {{ width }} {{ height }}">
  <title>{{ name }}</title>
  <style>
    .grid line { stroke: #d0d0d0; stroke-width: 1; }
    .axis-label { font-family: sans-serif; font-size: 10px; fill: #555555; }
    .title { font-family: sans-serif; font-size: 14px; font-weight: bold; fill: #222222; }
    .frame { fill: none; stroke: #888888; stroke-width: 1; }
    .center { stroke: #222222; stroke-width: 1.5; }
  </style>
  <rect width="{{ width }}" height="{{ height }}" fill="#ffffff"/>
  <text class="title" x="{{ width / 2 }}" y="{{ padding / 2 }}" text-anchor="middle" dominant-baseline="middle">{{ name }}</text>
  <g class="grid">
{%- for tick in x_ticks %}
    <line x1="{{ tick.position }}" y1="{{ padding }}" x2="{{ tick.position }}" y2="{{ padding + plot_height }}"/>
{%- endfor %}
{%- for tick in y_ticks %}
    <line x1="{{ padding }}" y1="{{ tick.position }}" x2="{{ padding + plot_width }}" y2="{{ tick.position }}"/>
{%- endfor %}
  </g>
  <g class="axis-labels">
{%- for tick in x_ticks %}
    <text class="axis-label" x="{{ tick.position }}" y="{{ padding + plot_height + 12 }}" text-anchor="middle">{{ tick.label }}</text>
{%- endfor %}
{%- for tick in y_ticks %}
    <text class="axis-label" x="{{ padding - 4 }}" y="{{ tick.position }}" text-anchor="end" dominant-baseline="middle">{{ tick.label }}</text>
{%- endfor %}
  </g>
  <rect class="frame" x="{{ padding }}" y="{{ padding }}" width="{{ plot_width }}" height="{{ plot_height }}"/>
  <g class="points" fill="{{ color }}">
{%- for point in path %}
    <circle cx="{{ '%.3f' | format(point.x) }}" cy="{{ '%.3f' | format(point.y) }}" r="3"/>
{%- endfor %}
  </g>
  <g class="centers">
{%- for center in centers %}
    <circle class="center" data-cluster="{{ center.index }}" cx="{{ '%.3f' | format(center.x) }}" cy="{{ '%.3f' | format(center.y) }}" r="6" fill="{{ center.color }}"/>
{%- endfor %}
  </g>
</svg>
"""


def format_tick(value):
    """Format an axis label: whole numbers without decimals, others with two."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


class VisualizationService:
    """Service for creating SVG cluster plots."""

    def __init__(self, config=None):
        self.config = config
        self.cluster_colors = {}
        self.environment = Environment(autoescape=True)
        self.template = self.environment.from_string(GRAPH_SVG)

    def _get_cluster_color(self, cluster_id):
        """Generate a stable color for a cluster index."""
        if cluster_id not in self.cluster_colors:
            seed_str = f"cluster_{cluster_id}_color_seed"
            hash_value = int(hashlib.md5(seed_str.encode()).hexdigest(), 16)
            rng = random.Random(hash_value)

            golden_ratio = 0.618033988749895
            hue = int((cluster_id * golden_ratio * 360) % 360)
            hue = (hue + rng.randint(-30, 30)) % 360
            saturation = rng.randint(65, 95)
            lightness = rng.randint(40, 70)

            self.cluster_colors[cluster_id] = f'hsl({hue}, {saturation}%, {lightness}%)'
        return self.cluster_colors[cluster_id]

    def _build_ticks(self, start, span, offset, length, inverted=False):
        ticks = []
        for i in range(GRID_LINES + 1):
            fraction = i / GRID_LINES
            position = offset + length * (1 - fraction if inverted else fraction)
            ticks.append({
                'position': round(position, 3),
                'label': format_tick(start + span * fraction),
            })
        return ticks

    def render_svg(self, graph):
        """
        Render a graph as SVG markup.

        Args:
            graph: Graph with mapped path, mapped centers and bounds

        Returns:
            SVG document as a string
        """
        viewport = graph.viewport
        bounds = graph.bounds

        centers = [
            {'index': i, 'x': center.x, 'y': center.y, 'color': self._get_cluster_color(i)}
            for i, center in enumerate(graph.centers)
        ]

        return self.template.render(
            name=graph.name,
            color=graph.color,
            width=viewport.width,
            height=viewport.height,
            padding=viewport.padding,
            plot_width=viewport.plot_width,
            plot_height=viewport.plot_height,
            path=graph.path,
            centers=centers,
            x_ticks=self._build_ticks(bounds.x_min, bounds.x_range, viewport.padding, viewport.plot_width),
            y_ticks=self._build_ticks(bounds.y_min, bounds.y_range, viewport.padding, viewport.plot_height,
                                      inverted=True),
        )

    def save_svg(self, svg, filename=None):
        """Write SVG markup under the configured output directory and return its path."""
        output_dir = getattr(self.config, 'OUTPUT_DIR', 'output')
        filename = filename or getattr(self.config, 'OUTPUT_FILE', 'cluster_plot.svg')
        os.makedirs(output_dir, exist_ok=True)

        path = os.path.join(output_dir, filename)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(svg)
        return path
