"""
Configuration settings for the cluster plot engine.

This module centralizes all configuration parameters for data loading,
clustering, coordinate mapping, and SVG output.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Central configuration for the cluster plot engine."""

    # =========================================================================
    # Viewport Presets
    # =========================================================================
    # "small" (thumbnails), "medium", "large" (full page); empty keeps the values below
    VIEWPORT_PRESET: str = os.getenv("VIEWPORT_PRESET", "")

    # Presets override WIDTH, HEIGHT and PADDING when applied.
    VIEWPORT_PRESETS: dict = {
        "small": {
            "WIDTH": 400,
            "HEIGHT": 300,
            "PADDING": 30,     # pixels
        },
        "medium": {
            "WIDTH": 800,
            "HEIGHT": 600,
            "PADDING": 50,
        },
        "large": {
            "WIDTH": 1200,
            "HEIGHT": 900,
            "PADDING": 70,
        },
    }

    # =========================================================================
    # Input Data
    # =========================================================================
    DATA_FILE: str = os.getenv("DATA_FILE", "data/points.csv")
    NUM_POINTS: int = int(os.getenv("NUM_POINTS", "300"))  # Synthetic points when DATA_FILE is missing
    DATA_SEED: int = int(os.getenv("DATA_SEED", "42"))

    # =========================================================================
    # Clustering
    # =========================================================================
    NUM_CLUSTERS: int = int(os.getenv("NUM_CLUSTERS", "3"))
    RANDOM_STATE: int = int(os.getenv("RANDOM_STATE", "42"))  # Seed for centroid initialization
    MAX_ITERATIONS: int = int(os.getenv("MAX_ITERATIONS", "300"))  # Lloyd iteration cap
    N_INIT: int = int(os.getenv("N_INIT", "1"))

    # =========================================================================
    # Viewport & Display
    # =========================================================================
    WIDTH: int = int(os.getenv("WIDTH", "800"))
    HEIGHT: int = int(os.getenv("HEIGHT", "600"))
    PADDING: int = int(os.getenv("PADDING", "50"))
    TITLE: str = os.getenv("TITLE", "Clusters")
    COLOR: str = os.getenv("COLOR", "#8ff0a4")

    @classmethod
    def apply_viewport_preset(cls, preset: str | None = None) -> None:
        """Apply a viewport preset, overriding WIDTH, HEIGHT and PADDING."""
        preset = (preset or cls.VIEWPORT_PRESET).lower()
        values = cls.VIEWPORT_PRESETS.get(preset)
        if not values:
            return
        cls.VIEWPORT_PRESET = preset
        for key, value in values.items():
            setattr(cls, key, value)

    # =========================================================================
    # Output Paths
    # =========================================================================
    OUTPUT_DIR: str = os.getenv("OUTPUT_DIR", "output")
    OUTPUT_FILE: str = os.getenv("OUTPUT_FILE", "cluster_plot.svg")

    # Print pipeline progress to stdout
    VERBOSE: bool = os.getenv("VERBOSE", "true").lower() == "true"

    # =========================================================================
    # Web Server
    # =========================================================================
    WEB_HOST: str = os.getenv("WEB_HOST", "127.0.0.1")
    WEB_PORT: int = int(os.getenv("WEB_PORT", "5000"))
