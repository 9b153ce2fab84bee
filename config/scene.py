"""Configuration for the boat-on-waves scene."""

import math

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "Boat on Waves"
}

CAMERA = {
    "fov": 45.0,               # Vertical field of view in degrees
    "near_clip": 0.01,
    "far_clip": 500.0,
    "initial_position": (10.0, 14.0, 10.0),
    "initial_look_at": (0.0, 4.0, 0.0),
    "min_radius": 1.0,         # Keeps the eye off the look-at point
    "max_radius": 200.0,
    "min_elevation": -89.0,
    "max_elevation": 89.0,
    "mouse_sensitivity": 0.005,  # Radians per pixel of drag
    "zoom_sensitivity": 0.5,     # World units per scroll step
}

WATER = {
    "size": 40.0,              # Edge length of the square water plane
    "resolution": 100,         # Quads per edge
    "probe_offset": 1.0,       # Horizontal distance for surface-frame samples
    # Directional sine components summed into the height field
    "components": [
        {"amplitude": 0.2, "omega": 0.5, "direction": (1.0, 0.0), "phase": 1.0},
        {"amplitude": 0.1, "omega": 0.7, "direction": (1.0, 1.0), "phase": 2.0},
        {"amplitude": 0.05, "omega": 1.1, "direction": (-0.3, 1.0), "phase": 3.0},
    ],
}

BOAT = {
    "speed": 4.0,              # World units per second
    "turn_rate": math.pi / 2.0,  # Radians per second
    "scale": 2.0,
    "draft": 0.0,              # Vertical offset from the water line
    "alignment": "yaw",        # "yaw" or "surface"
}

SIMULATION = {
    "follow_camera": False,    # Start in camera-follow mode
}

COLORS = {
    "background": (135.0 / 255, 206.0 / 255, 235.0 / 255, 1.0),  # Sky blue
    "water": (0.0, 0.0, 0.35),
    "boat_hull": (0.55, 0.35, 0.2),
    "boat_deck": (0.8, 0.7, 0.5),
    "text": (0.1, 0.1, 0.15)
}
