"""Boat steering and floating on the wave surface."""

import math
import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from core.snapshot import InputSnapshot
from core import transforms
from water.surface import SurfaceFrame, SurfaceSampler, heading_forward
from water.wave_field import WaveField


class AlignmentMode(Enum):
    """How the boat rotation is derived each frame."""
    YAW = "yaw"          # Heading only, boat stays upright
    SURFACE = "surface"  # Tilted to follow the local surface frame

    @classmethod
    def parse(cls, name: str) -> "AlignmentMode":
        try:
            return cls(name.lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown alignment mode '{name}' (expected one of: {choices})")


@dataclass
class BoatPose:
    """
    Boat position and heading for the current frame.

    Attributes:
        x: Planar position along world X
        z: Planar position along world Z
        y: Vertical position, the surface height under the boat
        heading: Rotation about +Y in radians; 0 faces -Z
    """
    x: float = 0.0
    z: float = 0.0
    y: float = 0.0
    heading: float = 0.0

    @property
    def planar_position(self) -> Tuple[float, float]:
        return (self.x, self.z)


def wrap_angle(angle: float) -> float:
    """Wrap an angle to (-pi, pi]."""
    wrapped = math.fmod(angle + math.pi, 2.0 * math.pi)
    if wrapped <= 0.0:
        wrapped += 2.0 * math.pi
    return wrapped - math.pi


class BoatController:
    """Integrates keyboard motion and keeps the boat on the water surface."""

    def __init__(
        self,
        sampler: SurfaceSampler,
        speed: float = 4.0,
        turn_rate: float = math.pi / 2.0,
        scale: float = 1.0,
        draft: float = 0.0,
        alignment: AlignmentMode = AlignmentMode.YAW,
        pose: Optional[BoatPose] = None
    ):
        self.sampler = sampler
        self.speed = speed
        self.turn_rate = turn_rate
        self.scale = scale
        self.draft = draft
        self.alignment = alignment
        self.pose = pose if pose is not None else BoatPose()
        self.frame: Optional[SurfaceFrame] = None

    @classmethod
    def from_config(cls, sampler: SurfaceSampler, boat_config: dict) -> "BoatController":
        """Build a controller from a BOAT config dict."""
        return cls(
            sampler,
            speed=boat_config["speed"],
            turn_rate=boat_config["turn_rate"],
            scale=boat_config["scale"],
            draft=boat_config.get("draft", 0.0),
            alignment=AlignmentMode.parse(boat_config.get("alignment", "yaw")),
        )

    @staticmethod
    def drive_direction(snapshot: InputSnapshot) -> int:
        """+1 forward, -1 backward, 0 idle. Forward wins if both are held."""
        if snapshot.forward_held:
            return 1
        if snapshot.backward_held:
            return -1
        return 0

    @staticmethod
    def turn_direction(snapshot: InputSnapshot) -> int:
        """+1 left, -1 right, 0 straight. Left wins if both are held."""
        if snapshot.turn_left_held:
            return 1
        if snapshot.turn_right_held:
            return -1
        return 0

    def update(
        self,
        snapshot: InputSnapshot,
        dt: float,
        field: WaveField,
        t: float
    ) -> Tuple[float, float]:
        """
        Advance the boat by one frame.

        Args:
            snapshot: Held keys for this frame
            dt: Sanitized time step in seconds
            field: Wave field the boat floats on
            t: Simulation time used for the surface this frame

        Returns:
            (dx, dz) planar displacement applied this frame
        """
        pose = self.pose
        drive = self.drive_direction(snapshot)

        # Steering only takes effect while the boat is moving
        if drive != 0:
            turn = self.turn_direction(snapshot)
            pose.heading = wrap_angle(pose.heading + turn * self.turn_rate * dt)

        forward = heading_forward(pose.heading)
        distance = drive * self.speed * dt
        dx = float(forward[0] * distance)
        dz = float(forward[2] * distance)
        pose.x += dx
        pose.z += dz

        pose.y = self.sampler.height(field, t, pose.x, pose.z)

        if self.alignment is AlignmentMode.SURFACE:
            self.frame = self.sampler.estimate_frame(
                field, t, (pose.x, pose.z), pose.heading, previous=self.frame
            )

        return dx, dz

    def rotation_matrix(self) -> np.ndarray:
        """Rotation for the active alignment mode only."""
        if self.alignment is AlignmentMode.SURFACE and self.frame is not None:
            return self.frame.rotation_matrix()
        return transforms.rotation_y(self.pose.heading)

    def model_matrix(self) -> np.ndarray:
        """Model transform: translate to the surface, rotate, then scale."""
        pose = self.pose
        translation = transforms.translation(pose.x, pose.y + self.draft, pose.z)
        scaling = transforms.scale(self.scale, self.scale, self.scale)
        return translation @ self.rotation_matrix() @ scaling
