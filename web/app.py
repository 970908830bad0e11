"""
Flask Web Application for the cluster plot engine.

Provides a small HTTP API around the plot pipeline:
- POST /draw  CSV upload -> SVG cluster plot
- POST /fit   CSV upload -> cluster centers as JSON
- GET  /health
"""
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, Response, jsonify, request
from dotenv import load_dotenv

load_dotenv()

from config import Config
from core.errors import ClusterPlotError, InvalidParameterError
from services.planner import PlotPlanner

app = Flask(__name__)
app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', 'dev-secret-key')


def _new_planner():
    # One planner per request; nothing is shared between calls.
    return PlotPlanner(Config, verbose=False)


def _read_csv_upload():
    upload = request.files.get('csv')
    if upload is not None:
        return upload.read()
    if 'csv' in request.form:
        return request.form['csv'].encode('utf-8')
    raise InvalidParameterError("Missing 'csv' file or field")


def _int_field(name, default):
    raw = request.form.get(name)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidParameterError(f"'{name}' must be an integer, got {raw!r}") from e


@app.errorhandler(ClusterPlotError)
def handle_cluster_plot_error(e):
    return jsonify({'error': str(e), 'kind': type(e).__name__}), 400


# =============================================================================
# REST API
# =============================================================================

@app.route('/health')
def api_health():
    """Liveness check."""
    return jsonify({'status': 'ok'})


@app.route('/draw', methods=['POST'])
def api_draw():
    """Cluster an uploaded CSV and return the plot as SVG."""
    csv_content = _read_csv_upload()
    num_clusters = _int_field('num_clusters', Config.NUM_CLUSTERS)
    width = _int_field('width', Config.WIDTH)
    height = _int_field('height', Config.HEIGHT)
    padding = _int_field('padding', Config.PADDING)
    title = request.form.get('title', Config.TITLE)

    try:
        svg = _new_planner().fit_draw(
            csv_content, num_clusters, width, height, padding, title,
            color=request.form.get('color', Config.COLOR)
        )
    except ClusterPlotError:
        raise
    except Exception as e:
        return jsonify({'error': str(e)}), 500

    return Response(svg, mimetype='image/svg+xml')


@app.route('/fit', methods=['POST'])
def api_fit():
    """Cluster an uploaded CSV and return the centers."""
    csv_content = _read_csv_upload()
    num_clusters = _int_field('num_clusters', Config.NUM_CLUSTERS)

    try:
        planner = _new_planner()
        flattened = planner.fit(csv_content, num_clusters)
    except ClusterPlotError:
        raise
    except Exception as e:
        return jsonify({'error': str(e)}), 500

    centers = [[flattened[i], flattened[i + 1]] for i in range(0, len(flattened), 2)]
    return jsonify({
        'centers': centers,
        'stats': planner.clustering_service.get_stats()
    })


if __name__ == '__main__':
    app.run(host=Config.WEB_HOST, port=Config.WEB_PORT, debug=True)
