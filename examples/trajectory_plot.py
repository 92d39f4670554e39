#!/usr/bin/env python3
"""Plot the path of a scripted drive.

This example demonstrates:
- Running the simulation headless with World.run
- Chaining constant-input segments into a manoeuvre
- Plotting the centroid path and inputs with matplotlib

Run with: python examples/trajectory_plot.py [output.png]
"""

import sys
import os

# Add parent directory to path for development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def main():
    """Drive a scripted manoeuvre and plot it."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("This example requires matplotlib. Install with: pip install matplotlib")
        return 1

    from stickcar.control.input import InputState
    from stickcar.core.world import World
    from stickcar.vehicle.car import Car, CarConfig
    from stickcar.visualization.plotter import TrajectoryPlotter

    print("Scripted Drive")
    print("=" * 40)

    # (frames, throttle, steering)
    segments = [
        (40, 3, 0),    # Straight
        (30, 2, 1),    # Gentle right-hand differential
        (40, 4, 0),    # Straight
        (25, 0, -2),   # Spin on the spot
        (40, -3, 0),   # Reverse
    ]

    car = Car(CarConfig.default())
    world = World()
    world.add_car(car)

    history = []
    frames, throttle, steering = [], [], []
    for count, t, s in segments:
        start = world.frame
        history.extend(world.run(count, InputState(throttle=t, steering=s)))
        frames.extend(range(start, world.frame))
        throttle.extend([t] * count)
        steering.extend([s] * count)
        centroid = car.centroid()
        print(f"  after frame {world.frame:4d}: centroid=({centroid.x:7.1f}, {centroid.y:7.1f}) "
              f"heading={car.heading():+.3f} rad")

    positions = [s.centroid.as_tuple() for s in history]
    headings = [s.heading for s in history]

    fig = TrajectoryPlotter.plot_trajectory(positions, headings, canvas_size=(800, 1000))
    TrajectoryPlotter.plot_inputs(frames, throttle, steering)

    if len(sys.argv) > 1:
        fig.savefig(sys.argv[1], dpi=150)
        print(f"Saved to: {sys.argv[1]}")
    else:
        plt.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
