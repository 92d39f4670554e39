#!/usr/bin/env python3
"""Interactive stick car demo.

This example demonstrates:
- Building the four-motor stick car
- Feeding arrow-key input through the key-repeat controller
- Using the Pygame renderer for visualization

Run with: python examples/drive_demo.py
"""

import sys
import os

# Add parent directory to path for development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from stickcar.control.input import InputController
from stickcar.core.world import World
from stickcar.vehicle.car import Car, CarConfig


def main():
    """Run interactive demo."""
    try:
        from stickcar.visualization import PygameRenderer
        renderer = PygameRenderer()
    except ImportError:
        print("This demo requires pygame. Install with: pip install pygame")
        return 1

    print("stickcar Drive Demo")
    print("=" * 40)
    print()
    print("Controls:")
    print("  ↑/↓     - Throttle (hold to build up, release to stop)")
    print("  ←/→     - Steer (hold to build up, release to straighten)")
    print("  R       - Reset car")
    print("  V       - Toggle motor speed arrows")
    print("  L       - Toggle stick labels")
    print("  D       - Toggle stick directions")
    print("  T       - Toggle telemetry")
    print("  Esc     - Quit")
    print()

    car = Car(CarConfig.default())
    world = World()
    world.add_car(car)
    controller = InputController()

    renderer.init()

    print("Starting simulation...")
    running = True
    last_input = controller.snapshot()

    try:
        while running:
            flags = renderer.handle_input(controller)

            if flags.get('quit'):
                running = False
                continue

            if flags.get('reset'):
                world.reset()
                continue

            inputs = controller.snapshot()
            renderer.render(car, inputs)
            world.step(inputs)

            # Print input changes
            if inputs != last_input:
                print(f"throttle={inputs.throttle:+.0f} steering={inputs.steering:+.0f}")
                last_input = inputs

    except KeyboardInterrupt:
        pass
    finally:
        renderer.quit()

    print("\nSimulation ended.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
