"""Visualization tools for the stick car."""

from stickcar.visualization.renderer import PygameRenderer, RenderConfig, draw_arrow
from stickcar.visualization.plotter import TrajectoryPlotter

__all__ = [
    "PygameRenderer",
    "RenderConfig",
    "draw_arrow",
    "TrajectoryPlotter",
]
