"""CLI entry point for stickcar.

Run with: python -m stickcar [command]

Commands:
    drive     - Drive the car interactively
    run       - Run headless with constant input
    info      - Show available presets
"""

import sys
import argparse
import logging

from stickcar import __version__

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def run_drive(args):
    """Run the interactive driving session."""
    try:
        from stickcar.visualization import PygameRenderer
        renderer = PygameRenderer()
    except ImportError:
        print("Error: Pygame is required for the driving demo.")
        print("Install it with: pip install pygame")
        return 1

    from stickcar.control.input import InputController
    from stickcar.core.world import World
    from stickcar.vehicle.car import Car
    from stickcar.config.car_presets import get_car_config

    print("stickcar")
    print("=" * 40)
    print(f"Car: {args.preset}")
    print()
    print("Controls:")
    print("  ↑/↓     - Throttle")
    print("  ←/→     - Steer")
    print("  R       - Reset")
    print("  V       - Toggle speed arrows")
    print("  Esc     - Quit")
    print()

    try:
        config = get_car_config(args.preset)
        world = World(steps_per_frame=args.steps_per_frame)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    car = Car(config)
    world.add_car(car)
    controller = InputController()
    renderer.config.show_speed = not args.no_speed_arrows

    try:
        while True:
            flags = renderer.handle_input(controller)

            if flags.get('quit'):
                break

            if flags.get('reset'):
                world.reset()
                continue

            inputs = controller.snapshot()
            renderer.render(car, inputs)
            world.step(inputs)

    except KeyboardInterrupt:
        pass
    finally:
        renderer.quit()

    print(f"Session ended after {world.frame} frames.")
    return 0


def run_headless(args):
    """Run the simulation without a window and report the final state."""
    from stickcar.control.input import InputState
    from stickcar.core.world import World
    from stickcar.vehicle.car import Car
    from stickcar.config.car_presets import get_car_config

    try:
        config = get_car_config(args.preset)
        world = World(steps_per_frame=args.steps_per_frame)
        car = Car(config)
        world.add_car(car)
        history = world.run(args.frames, InputState(args.throttle, args.steering))
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    state = car.get_state()
    print(f"Car: {args.preset}")
    print(f"Frames: {world.frame}  throttle={args.throttle:+g}  steering={args.steering:+g}")
    print()
    print("Motor positions:")
    for i, pos in enumerate(state.motor_positions):
        print(f"  [{i}] ({pos.x:9.2f}, {pos.y:9.2f})")
    print(f"Centroid: ({state.centroid.x:.2f}, {state.centroid.y:.2f})")
    print(f"Heading: {state.heading:.4f} rad")
    print("Body lengths: " + ", ".join(f"{length:.2f}" for length in state.body_lengths))

    if args.plot:
        try:
            import matplotlib.pyplot as plt
            from stickcar.visualization.plotter import TrajectoryPlotter
        except ImportError:
            print("Error: Matplotlib is required for plotting.")
            print("Install it with: pip install matplotlib")
            return 1

        positions = [s.centroid.as_tuple() for s in history]
        headings = [s.heading for s in history]
        fig = TrajectoryPlotter.plot_trajectory(positions, headings)
        fig.savefig(args.plot, dpi=150)
        plt.close(fig)
        print(f"Saved trajectory to: {args.plot}")

    return 0


def show_info(args):
    """Show available presets and information."""
    from stickcar.config.car_presets import CAR_PRESETS

    print(f"stickcar v{__version__}")
    print("=" * 40)
    print()

    print("Car Presets:")
    print("-" * 30)
    for name, info in CAR_PRESETS.items():
        print(f"  {name:15} - {info['description']}")
    print()

    return 0


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="stickcar - Four-motor car built from distance-constrained points",
        prog="stickcar"
    )
    parser.add_argument(
        "--version", action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Drive command
    drive_parser = subparsers.add_parser("drive", help="Drive the car interactively")
    drive_parser.add_argument(
        "-p", "--preset",
        default="default",
        help="Car preset to use (default: default)"
    )
    drive_parser.add_argument(
        "--steps-per-frame",
        type=int, default=1,
        help="Simulation steps per rendered frame (default: 1)"
    )
    drive_parser.add_argument(
        "--no-speed-arrows",
        action="store_true",
        help="Hide motor velocity arrows"
    )

    # Run command
    run_parser = subparsers.add_parser("run", help="Run headless with constant input")
    run_parser.add_argument(
        "-p", "--preset",
        default="default",
        help="Car preset to use (default: default)"
    )
    run_parser.add_argument(
        "-f", "--frames",
        type=int, default=120,
        help="Number of frames to simulate (default: 120)"
    )
    run_parser.add_argument(
        "-t", "--throttle",
        type=float, default=0.0,
        help="Constant throttle (default: 0)"
    )
    run_parser.add_argument(
        "-s", "--steering",
        type=float, default=0.0,
        help="Constant steering (default: 0)"
    )
    run_parser.add_argument(
        "--steps-per-frame",
        type=int, default=1,
        help="Simulation steps per frame (default: 1)"
    )
    run_parser.add_argument(
        "-o", "--plot",
        help="Save a trajectory plot to this file"
    )

    # Info command
    subparsers.add_parser("info", help="Show available presets")

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    if args.command == "drive":
        return run_drive(args)
    elif args.command == "run":
        return run_headless(args)
    elif args.command == "info":
        return show_info(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
