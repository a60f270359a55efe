#!/usr/bin/env python3
"""
Car Simulator Runner

Drive a car around a practice course.

Controls:
    ESC     - Quit
    UP      - Drive forward (hold)
    DOWN    - Reverse (hold)
    LEFT    - Steer one step left
    RIGHT   - Steer one step right
    1       - Load parallel-parking course
    2       - Load right-angle-turn course
"""

import argparse

from simulation import get_map, available_maps
from simulation.visualization import SimulationDisplay
from driving import DriverController
import config


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description='Driving practice simulator')
    ap.add_argument('--map', choices=available_maps(), default='parallel')
    ap.add_argument('--speed', type=float, default=config.SPEED,
                    help='travel speed in m/s while throttle is held')
    ap.add_argument('--scale', type=float, default=config.SCALE,
                    help='pixels per metre')
    return ap.parse_args(argv)


def load_course(name, speed):
    world_map = get_map(name)
    vehicle = world_map.spawn_vehicle()
    print(f"Loaded course: {world_map.name}")
    start = vehicle.position
    print(f"Vehicle spawned at ({start.x:.1f}, {start.y:.1f})")
    return world_map, vehicle, DriverController(vehicle, speed=speed)


def main(argv=None):
    """Main simulation function."""
    args = parse_args(argv)
    display = None

    try:
        print("Starting car simulator")
        print("=" * 50)

        world_map, vehicle, controller = load_course(args.map, args.speed)
        display = SimulationDisplay(scale=args.scale)

        print("-" * 50)
        print("Controls:")
        print("  UP/DOWN    - Hold to drive forward / reverse")
        print("  LEFT/RIGHT - Steer")
        print("  1-2        - Load course (parallel/turn)")
        print("  ESC        - Quit")
        print("-" * 50)

        running = True
        while running:
            elapsed_ns = display.wait_frame()

            running, events = display.handle_events()

            if events['map']:
                world_map, vehicle, controller = load_course(events['map'], args.speed)

            controller.handle_input(events['input'])

            controller.tick(elapsed_ns)
            fps = controller.take_frame_rate()
            if fps is not None:
                print(f"Frame rate: {fps:.1f} fps")

            display.update(world_map, vehicle)

    except KeyboardInterrupt:
        print("\nInterrupted by user.")

    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()

    finally:
        print("\nCleaning up...")

        if display:
            display.cleanup()

        print("Done.")


if __name__ == '__main__':
    main()
