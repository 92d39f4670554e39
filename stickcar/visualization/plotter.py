"""Matplotlib-based plotting for headless runs.

Provides static plots for:
- Car trajectory on the canvas
- Driver input over frames
"""

from __future__ import annotations
from typing import List, Optional, Tuple

import numpy as np

try:
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False


def _check_matplotlib():
    """Check if matplotlib is available."""
    if not MATPLOTLIB_AVAILABLE:
        raise ImportError(
            "Matplotlib is required for plotting. "
            "Install it with: pip install matplotlib"
        )


class TrajectoryPlotter:
    """Plot car trajectory and inputs."""

    @staticmethod
    def plot_trajectory(
        positions: List[Tuple[float, float]],
        headings: Optional[List[float]] = None,
        ax: Optional[plt.Axes] = None,
        show_direction: bool = True,
        marker_interval: int = 25,
        canvas_size: Optional[Tuple[float, float]] = None
    ) -> plt.Figure:
        """Plot car centroid path.

        Canvas y grows downward, so the y axis is inverted to match the
        on-screen view.

        Args:
            positions: List of (x, y) centroid positions
            headings: Optional list of heading angles (radians)
            ax: Optional axes to plot on
            show_direction: Show heading markers
            marker_interval: Interval between heading markers
            canvas_size: Optional (width, height) to fix the plot limits

        Returns:
            Matplotlib figure
        """
        _check_matplotlib()

        if ax is None:
            fig, ax = plt.subplots(figsize=(8, 10))
        else:
            fig = ax.figure

        if canvas_size is not None:
            ax.set_xlim(0, canvas_size[0])
            ax.set_ylim(0, canvas_size[1])
        if not ax.yaxis_inverted():
            ax.invert_yaxis()

        if not positions:
            return fig

        x = [p[0] for p in positions]
        y = [p[1] for p in positions]

        ax.plot(x, y, 'b-', linewidth=1.5, alpha=0.7)

        ax.plot(x[0], y[0], 'go', markersize=10, label='Start')
        ax.plot(x[-1], y[-1], 'rs', markersize=10, label='End')

        if show_direction and headings and len(headings) == len(positions):
            for i in range(0, len(positions), marker_interval):
                px, py = positions[i]
                dx = np.cos(headings[i]) * 20
                dy = np.sin(headings[i]) * 20
                ax.arrow(px, py, dx, dy, head_width=6, head_length=5,
                         fc='red', ec='red', alpha=0.5)

        ax.set_xlabel('X (px)')
        ax.set_ylabel('Y (px)')
        ax.set_title('Car Trajectory')
        ax.legend()
        ax.grid(True, alpha=0.3)
        ax.set_aspect('equal')

        return fig

    @staticmethod
    def plot_inputs(
        frames: List[int],
        throttle: List[float],
        steering: List[float],
        figsize: Tuple[float, float] = (10, 5)
    ) -> plt.Figure:
        """Plot throttle and steering over frames."""
        _check_matplotlib()

        fig, axes = plt.subplots(2, 1, figsize=figsize, sharex=True)

        axes[0].step(frames, throttle, 'g-', where='post')
        axes[0].set_ylabel('Throttle')
        axes[0].axhline(y=0, color='k', linewidth=0.5)
        axes[0].grid(True, alpha=0.3)

        axes[1].step(frames, steering, 'm-', where='post')
        axes[1].set_ylabel('Steering')
        axes[1].axhline(y=0, color='k', linewidth=0.5)
        axes[1].grid(True, alpha=0.3)

        axes[1].set_xlabel('Frame')
        fig.suptitle('Driver Input')
        fig.tight_layout()

        return fig
