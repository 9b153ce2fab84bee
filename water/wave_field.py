"""Procedural wave field built from directional sine components."""

import math
import numpy as np
from dataclasses import dataclass
from numba import njit, prange
from typing import Optional, Sequence, Tuple


# ============================================================================
# NUMBA JIT-COMPILED WAVE SUM
# ============================================================================

@njit(parallel=True, cache=True)
def sum_waves(
    xs: np.ndarray,
    zs: np.ndarray,
    t: float,
    amplitudes: np.ndarray,
    omegas: np.ndarray,
    directions: np.ndarray,
    phases: np.ndarray,
    out: np.ndarray
):
    """
    Sum every wave component at each (x, z) and write the height to out.

    Each iteration reads only the shared inputs and writes its own slot,
    so the vertex loop is safe to run in parallel.
    """
    num_points = xs.shape[0]
    num_waves = amplitudes.shape[0]

    for i in prange(num_points):
        h = 0.0
        for j in range(num_waves):
            along = directions[j, 0] * xs[i] + directions[j, 1] * zs[i]
            h += amplitudes[j] * math.sin(omegas[j] * along + t * phases[j])
        out[i] = h


@dataclass(frozen=True)
class WaveComponent:
    """
    One sinusoidal term of the wave field.

    Attributes:
        amplitude: Peak height of the wave (>= 0)
        omega: Angular frequency along the travel direction
        direction: Unit 2D travel direction in the (x, z) plane
        phase: Phase speed, multiplied by time
    """
    amplitude: float
    omega: float
    direction: Tuple[float, float]
    phase: float

    def __post_init__(self):
        values = (self.amplitude, self.omega, self.phase, *self.direction)
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"Wave component values must be finite: {values}")
        if self.amplitude < 0:
            raise ValueError(f"Wave amplitude must be >= 0, got {self.amplitude}")

        dx, dz = self.direction
        length = math.hypot(dx, dz)
        if length < 1e-12:
            raise ValueError("Wave direction must have non-zero length")
        # Frozen dataclass: bypass __setattr__ to store the normalized direction
        object.__setattr__(self, "direction", (dx / length, dz / length))


class WaveField:
    """Height field summed from wave components, advanced by the main loop."""

    def __init__(self, components: Sequence[WaveComponent] = ()):
        self.components = tuple(components)
        self.accumulated_time = 0.0

        n = len(self.components)
        self._amplitudes = np.array([c.amplitude for c in self.components], dtype=np.float64)
        self._omegas = np.array([c.omega for c in self.components], dtype=np.float64)
        self._phases = np.array([c.phase for c in self.components], dtype=np.float64)
        self._directions = np.array(
            [c.direction for c in self.components], dtype=np.float64
        ).reshape(n, 2)

        # Scratch buffers for single-point queries
        self._point_x = np.zeros(1, dtype=np.float64)
        self._point_z = np.zeros(1, dtype=np.float64)
        self._point_out = np.zeros(1, dtype=np.float64)

    @classmethod
    def from_config(cls, water_config: dict) -> "WaveField":
        """Build a wave field from a config dict with a "components" list."""
        components = [
            WaveComponent(
                amplitude=float(c["amplitude"]),
                omega=float(c["omega"]),
                direction=tuple(c["direction"]),
                phase=float(c["phase"]),
            )
            for c in water_config.get("components", [])
        ]
        return cls(components)

    @property
    def time(self) -> float:
        """Current accumulated simulation time in seconds."""
        return self.accumulated_time

    def advance(self, dt: float):
        """Advance the wave phase by dt seconds."""
        if not math.isfinite(dt) or dt < 0:
            raise ValueError(f"Time step must be finite and >= 0, got {dt}")
        self.accumulated_time += dt

    def height(self, x: float, z: float, t: Optional[float] = None) -> float:
        """Surface height at (x, z). Uses the accumulated time when t is None."""
        if t is None:
            t = self.accumulated_time
        self._point_x[0] = x
        self._point_z[0] = z
        self._run(self._point_x, self._point_z, t, self._point_out)
        return float(self._point_out[0])

    def heights(
        self,
        xs: np.ndarray,
        zs: np.ndarray,
        t: Optional[float] = None,
        out: Optional[np.ndarray] = None
    ) -> np.ndarray:
        """
        Surface heights for many points at once.

        Args:
            xs: 1D array of x coordinates
            zs: 1D array of z coordinates, same length as xs
            t: Simulation time (defaults to the accumulated time)
            out: Optional 1D array to write into instead of allocating

        Returns:
            The array holding the heights (out, if given)
        """
        if t is None:
            t = self.accumulated_time
        xs = np.asarray(xs)
        zs = np.asarray(zs)
        if xs.shape != zs.shape or xs.ndim != 1:
            raise ValueError("xs and zs must be 1D arrays of equal length")
        if out is None:
            out = np.empty(xs.shape[0], dtype=np.float64)
        self._run(xs, zs, t, out)
        return out

    def _run(self, xs: np.ndarray, zs: np.ndarray, t: float, out: np.ndarray):
        sum_waves(
            xs, zs, float(t),
            self._amplitudes, self._omegas, self._directions, self._phases,
            out
        )
