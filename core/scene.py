"""Per-frame scene update: waves, surface mesh, boat and camera."""

import math
import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config import scene as config
from boat.controller import AlignmentMode, BoatController
from water.surface import SurfaceSampler, create_grid
from water.wave_field import WaveField
from .camera import OrbitCamera
from .snapshot import InputSnapshot


class CameraMode(Enum):
    FIXED = 1
    FOLLOW = 2


def resolve_camera_mode(current: CameraMode, snapshot: InputSnapshot) -> CameraMode:
    """
    Apply this frame's camera-mode key presses.

    Mode 1 is read before mode 2, so FOLLOW wins if both are pressed.
    """
    mode = current
    if snapshot.camera_mode_1_pressed:
        mode = CameraMode.FIXED
    if snapshot.camera_mode_2_pressed:
        mode = CameraMode.FOLLOW
    return mode


def sanitize_dt(dt: float) -> float:
    """Negative or non-finite steps become 0; valid steps pass through unchanged."""
    if not math.isfinite(dt) or dt < 0:
        print(f"[Scene] Ignoring invalid time step: {dt}")
        return 0.0
    return dt


@dataclass
class RenderFrame:
    """Everything the renderer needs for one frame."""
    time: float
    vertices: np.ndarray
    indices: np.ndarray
    boat_model: np.ndarray
    view: np.ndarray
    projection: np.ndarray
    camera_mode: CameraMode


class Scene:
    """Owns all simulation state and advances it one frame at a time."""

    def __init__(
        self,
        water_config: Optional[dict] = None,
        boat_config: Optional[dict] = None,
        simulation_config: Optional[dict] = None,
        camera: Optional[OrbitCamera] = None
    ):
        water_config = water_config if water_config is not None else config.WATER
        boat_config = boat_config if boat_config is not None else config.BOAT
        simulation_config = simulation_config if simulation_config is not None else config.SIMULATION

        self.field = WaveField.from_config(water_config)
        self.sampler = SurfaceSampler(probe_offset=water_config.get("probe_offset", 1.0))
        self.grid = create_grid(water_config["size"], water_config["resolution"])
        self.boat = BoatController.from_config(self.sampler, boat_config)
        self.camera = camera if camera is not None else OrbitCamera()

        self.camera_mode = (
            CameraMode.FOLLOW if simulation_config.get("follow_camera") else CameraMode.FIXED
        )

        # Put the mesh and boat on the surface before the first frame
        self.sampler.sample_grid(self.field, self.field.time, self.grid.vertices)
        self.boat.update(InputSnapshot(), 0.0, self.field, self.field.time)

    @property
    def alignment(self) -> AlignmentMode:
        return self.boat.alignment

    def update(self, dt: float, snapshot: InputSnapshot) -> float:
        """
        Advance the scene by one frame.

        Returns:
            The sanitized dt that was applied
        """
        dt = sanitize_dt(dt)

        self.field.advance(dt)
        t = self.field.time

        # Mesh and boat share the same t so they never drift apart
        self.sampler.sample_grid(self.field, t, self.grid.vertices)
        dx, dz = self.boat.update(snapshot, dt, self.field, t)

        self.camera_mode = resolve_camera_mode(self.camera_mode, snapshot)
        if self.camera_mode is CameraMode.FOLLOW:
            self.camera.translate((dx, 0.0, dz))

        self.camera.update_orbit(snapshot.pointer_drag, snapshot.scroll)
        return dt

    def on_resize(self, width: int, height: int):
        self.camera.on_resize(width, height)

    def render_frame(self) -> RenderFrame:
        return RenderFrame(
            time=self.field.time,
            vertices=self.grid.vertices,
            indices=self.grid.indices,
            boat_model=self.boat.model_matrix(),
            view=self.camera.view_matrix(),
            projection=self.camera.projection_matrix(),
            camera_mode=self.camera_mode,
        )
