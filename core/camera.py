"""Orbit camera for viewing the water scene."""

import math
import numpy as np
from dataclasses import dataclass, field
from typing import Optional, Tuple

from config import scene as config
from . import transforms


@dataclass
class CameraState:
    """
    Camera placement and projection parameters.

    Attributes:
        position: Eye position in world space
        look_at: Point the camera orbits around and looks at
        fov_y: Vertical field of view in radians
        near: Near clip distance
        far: Far clip distance
        width: Viewport width in pixels
        height: Viewport height in pixels
    """
    position: np.ndarray = field(default_factory=lambda: np.array([10.0, 14.0, 10.0]))
    look_at: np.ndarray = field(default_factory=lambda: np.array([0.0, 4.0, 0.0]))
    fov_y: float = math.radians(45.0)
    near: float = 0.01
    far: float = 500.0
    width: int = 1280
    height: int = 720


class OrbitCamera:
    """Camera on a sphere around its look-at point, driven by drag and scroll."""

    def __init__(self, state: Optional[CameraState] = None, camera_config: Optional[dict] = None):
        cfg = camera_config if camera_config is not None else config.CAMERA
        if state is None:
            state = CameraState(
                position=np.array(cfg["initial_position"], dtype=np.float64),
                look_at=np.array(cfg["initial_look_at"], dtype=np.float64),
                fov_y=math.radians(cfg["fov"]),
                near=cfg["near_clip"],
                far=cfg["far_clip"],
                width=config.WINDOW["width"],
                height=config.WINDOW["height"],
            )
        self.state = state

        self.min_radius = cfg["min_radius"]
        self.max_radius = cfg["max_radius"]
        if not 0 < self.min_radius <= self.max_radius:
            raise ValueError(
                f"Camera radius limits must satisfy 0 < min <= max, "
                f"got {self.min_radius}, {self.max_radius}"
            )
        self.min_elevation = math.radians(cfg["min_elevation"])
        self.max_elevation = math.radians(cfg["max_elevation"])
        self.orbit_sensitivity = cfg["mouse_sensitivity"]
        self.zoom_sensitivity = cfg["zoom_sensitivity"]

    @property
    def aspect(self) -> float:
        return self.state.width / self.state.height

    def get_spherical(self) -> Tuple[float, float, float]:
        """(radius, azimuth, elevation) of the eye relative to look_at."""
        offset = self.state.position - self.state.look_at
        radius = float(np.linalg.norm(offset))
        if radius < 1e-9:
            return 0.0, 0.0, 0.0
        azimuth = math.atan2(offset[0], offset[2])
        elevation = math.asin(max(-1.0, min(1.0, offset[1] / radius)))
        return radius, azimuth, elevation

    def get_radius(self) -> float:
        return self.get_spherical()[0]

    def update_orbit(self, drag: Tuple[float, float] = (0.0, 0.0), zoom: float = 0.0):
        """
        Orbit by a pointer drag (pixels) and zoom by a scroll delta.

        Positive zoom moves the camera toward look_at. The radius is clamped
        to [min_radius, max_radius] and the elevation stays short of the poles.
        """
        dx, dy = drag
        if dx == 0 and dy == 0 and zoom == 0:
            return

        radius, azimuth, elevation = self.get_spherical()

        azimuth -= dx * self.orbit_sensitivity
        elevation = max(
            self.min_elevation,
            min(self.max_elevation, elevation + dy * self.orbit_sensitivity)
        )
        radius = max(
            self.min_radius,
            min(self.max_radius, radius - zoom * self.zoom_sensitivity)
        )

        direction = np.array([
            math.cos(elevation) * math.sin(azimuth),
            math.sin(elevation),
            math.cos(elevation) * math.cos(azimuth),
        ])
        self.state.position = self.state.look_at + radius * direction

    def translate(self, offset):
        """Move eye and look_at together."""
        offset = np.asarray(offset, dtype=np.float64)
        self.state.position = self.state.position + offset
        self.state.look_at = self.state.look_at + offset

    def on_resize(self, width: int, height: int):
        """Update the viewport size; ignored for a minimized window."""
        if width <= 0 or height <= 0:
            return
        self.state.width = width
        self.state.height = height

    def view_matrix(self) -> np.ndarray:
        return transforms.look_at(self.state.position, self.state.look_at)

    def projection_matrix(self) -> np.ndarray:
        s = self.state
        return transforms.perspective(s.fov_y, self.aspect, s.near, s.far)
