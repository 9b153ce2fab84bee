"""
Boat on Waves
=============

An animated wave surface with a steerable boat and an orbit camera.

Controls:
    - W/S: Drive forward/backward
    - A/D: Steer left/right (while driving)
    - 1: Fixed camera
    - 2: Camera follows the boat
    - Mouse drag: Orbit camera
    - Mouse wheel: Zoom
    - ESC: Quit

Usage:
    python main.py                          # Reference scene
    python main.py --alignment surface      # Tilt the boat with the waves
    python main.py --grid-resolution 200    # Finer water mesh
    python main.py --follow                 # Start with the follow camera
"""

import argparse

from config import scene as config
from core.application import Application
from core.scene import Scene


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Boat on Waves viewer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--alignment", choices=["yaw", "surface"], default=config.BOAT["alignment"],
                        help="How the boat is rotated on the water")
    parser.add_argument("--grid-resolution", type=int, default=config.WATER["resolution"],
                        help="Quads per edge of the water mesh")
    parser.add_argument("--follow", action="store_true", default=config.SIMULATION["follow_camera"],
                        help="Start with the camera following the boat")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    scene = Scene(
        water_config={**config.WATER, "resolution": args.grid_resolution},
        boat_config={**config.BOAT, "alignment": args.alignment},
        simulation_config={**config.SIMULATION, "follow_camera": args.follow},
    )
    app = Application(scene)
    app.run()


if __name__ == "__main__":
    main()
