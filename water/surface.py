"""Surface sampling: grid heights, point queries and local surface frames."""

import math
import numpy as np
from dataclasses import dataclass
from typing import Optional, Tuple

from .wave_field import WaveField


WORLD_UP = np.array([0.0, 1.0, 0.0])
FRAME_EPSILON = 1e-6


@dataclass
class SurfacePoint:
    """A single sampled point on the water surface."""
    position: np.ndarray
    height: float


@dataclass
class SurfaceFrame:
    """
    Local orthonormal basis on the water surface.

    Attributes:
        forward: Direction the floating object faces
        right: forward x up
        up: Surface normal
    """
    forward: np.ndarray
    right: np.ndarray
    up: np.ndarray

    def rotation_matrix(self) -> np.ndarray:
        """
        4x4 rotation mapping local axes onto the frame.

        Local +X maps to right, +Y to up and -Z to forward, so a flat
        frame equals a pure yaw rotation.
        """
        m = np.eye(4, dtype=np.float32)
        m[0:3, 0] = self.right
        m[0:3, 1] = self.up
        m[0:3, 2] = -self.forward
        return m


@dataclass
class SurfaceGrid:
    """Static grid topology with a height column rewritten each frame."""
    vertices: np.ndarray
    indices: np.ndarray
    resolution: int
    size: float

    @property
    def vertex_count(self) -> int:
        return self.vertices.shape[0]


def heading_forward(heading: float) -> np.ndarray:
    """Horizontal forward vector for a heading angle about +Y."""
    return np.array([-math.sin(heading), 0.0, -math.cos(heading)])


def heading_frame(heading: float) -> SurfaceFrame:
    """Frame for a boat on flat water with the given heading."""
    forward = heading_forward(heading)
    up = WORLD_UP.copy()
    return SurfaceFrame(forward=forward, right=np.cross(forward, up), up=up)


def create_grid(size: float, resolution: int) -> SurfaceGrid:
    """
    Build a flat square grid centered on the origin.

    Args:
        size: Edge length of the square in world units
        resolution: Number of quads along each edge

    Returns:
        SurfaceGrid with (resolution + 1)^2 vertices and 2 * resolution^2 triangles
    """
    if resolution < 1:
        raise ValueError(f"Grid resolution must be >= 1, got {resolution}")
    if size <= 0:
        raise ValueError(f"Grid size must be > 0, got {size}")

    n = resolution + 1
    coords = np.linspace(-size / 2.0, size / 2.0, n)
    gx, gz = np.meshgrid(coords, coords, indexing="xy")

    vertices = np.zeros((n * n, 3), dtype=np.float32)
    vertices[:, 0] = gx.ravel()
    vertices[:, 2] = gz.ravel()

    # Two triangles per quad, row-major over z then x
    row = np.arange(resolution)
    i, j = np.meshgrid(row, row, indexing="ij")
    top_left = (i * n + j).ravel()
    top_right = top_left + 1
    bottom_left = top_left + n
    bottom_right = bottom_left + 1

    indices = np.empty((resolution * resolution, 6), dtype=np.uint32)
    indices[:, 0] = top_left
    indices[:, 1] = bottom_left
    indices[:, 2] = top_right
    indices[:, 3] = top_right
    indices[:, 4] = bottom_left
    indices[:, 5] = bottom_right

    return SurfaceGrid(
        vertices=vertices,
        indices=indices.ravel(),
        resolution=resolution,
        size=float(size)
    )


class SurfaceSampler:
    """Evaluates a wave field at grid vertices and single points."""

    def __init__(self, probe_offset: float = 1.0):
        if not probe_offset > 0:
            raise ValueError(f"Probe offset must be > 0, got {probe_offset}")
        self.probe_offset = probe_offset

    def sample_grid(self, field: WaveField, t: float, vertices: np.ndarray) -> np.ndarray:
        """Rewrite the Y column of vertices in place with the surface height."""
        field.heights(vertices[:, 0], vertices[:, 2], t, out=vertices[:, 1])
        return vertices

    def height(self, field: WaveField, t: float, x: float, z: float) -> float:
        return field.height(x, z, t)

    def sample_point(self, field: WaveField, t: float, x: float, z: float) -> SurfacePoint:
        h = field.height(x, z, t)
        return SurfacePoint(position=np.array([x, h, z]), height=h)

    def estimate_frame(
        self,
        field: WaveField,
        t: float,
        center: Tuple[float, float],
        heading: float,
        previous: Optional[SurfaceFrame] = None
    ) -> SurfaceFrame:
        """
        Approximate the tangent plane at center and orient it along heading.

        Heights at center and one probe offset along +X and +Z give two
        tangents whose cross product is the surface normal. The heading
        forward is then orthogonalized against that normal.

        Args:
            field: Wave field to sample
            t: Simulation time shared with the grid this frame
            center: (x, z) of the sample point
            heading: Heading angle in radians about +Y
            previous: Last valid frame, returned if this one degenerates

        Returns:
            An orthonormal SurfaceFrame, never containing NaN
        """
        x, z = center
        d = self.probe_offset

        h0 = field.height(x, z, t)
        hx = field.height(x + d, z, t)
        hz = field.height(x, z + d, t)

        tangent_x = np.array([d, hx - h0, 0.0])
        tangent_z = np.array([0.0, hz - h0, d])

        up = np.cross(tangent_z, tangent_x)
        up_len = np.linalg.norm(up)
        if not up_len > FRAME_EPSILON:
            up = WORLD_UP.copy()
        else:
            up = up / up_len

        # Gram-Schmidt: drop the normal component of the heading direction
        forward = heading_forward(heading)
        forward = forward - np.dot(forward, up) * up
        forward_len = np.linalg.norm(forward)
        if not forward_len > FRAME_EPSILON:
            if previous is not None:
                return previous
            return heading_frame(heading)
        forward = forward / forward_len

        right = np.cross(forward, up)
        right = right / np.linalg.norm(right)

        return SurfaceFrame(forward=forward, right=right, up=up)
