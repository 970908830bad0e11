"""Cluster Plot - Main Entry Point"""
from config import Config
from services.planner import PlotPlanner


if __name__ == "__main__":
    Config.apply_viewport_preset()
    planner = PlotPlanner(Config)
    planner.run()
