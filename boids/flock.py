"""Flock management - sequential all-pairs flocking on a sphere with Numba JIT kernels."""

import time
import numpy as np
from numba import njit
from typing import Optional, Tuple

from config import boids as config
from .boid import Boid
from .vector import length3, normalize3, spherical_to_cartesian


# ============================================================================
# NUMBA JIT-COMPILED FLOCKING KERNELS
# ============================================================================

@njit(cache=True)
def apply_rules_numba(
    i: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    alignment_radius: float,
    cohesion_radius: float,
    separation_radius: float,
    alignment_weight: float,
    cohesion_weight: float,
    separation_weight: float,
    num_boids: int
):
    """Blend alignment, cohesion and separation into a unit velocity for boid i."""
    px = positions[i, 0]
    py = positions[i, 1]
    pz = positions[i, 2]

    align_x, align_y, align_z = 0.0, 0.0, 0.0
    coh_x, coh_y, coh_z = 0.0, 0.0, 0.0
    sep_x, sep_y, sep_z = 0.0, 0.0, 0.0

    align_count = 0
    coh_count = 0
    sep_count = 0

    for j in range(num_boids):
        if i == j:
            continue

        dx = px - positions[j, 0]
        dy = py - positions[j, 1]
        dz = pz - positions[j, 2]
        dist = length3(dx, dy, dz)

        if dist < alignment_radius:
            align_x += velocities[j, 0]
            align_y += velocities[j, 1]
            align_z += velocities[j, 2]
            align_count += 1

        if dist < cohesion_radius:
            coh_x += positions[j, 0]
            coh_y += positions[j, 1]
            coh_z += positions[j, 2]
            coh_count += 1

        if dist < separation_radius:
            # Coincident boids still count, but push in no direction
            if dist > 0.0:
                nx, ny, nz = normalize3(dx, dy, dz)
                sep_x += nx / dist
                sep_y += ny / dist
                sep_z += nz / dist
            sep_count += 1

    if align_count > 0:
        align_x, align_y, align_z = normalize3(
            align_x / align_count, align_y / align_count, align_z / align_count
        )
        align_x *= alignment_weight
        align_y *= alignment_weight
        align_z *= alignment_weight

    if coh_count > 0:
        coh_x, coh_y, coh_z = normalize3(
            coh_x / coh_count - px, coh_y / coh_count - py, coh_z / coh_count - pz
        )
        coh_x *= cohesion_weight
        coh_y *= cohesion_weight
        coh_z *= cohesion_weight

    if sep_count > 0:
        sep_x, sep_y, sep_z = normalize3(
            sep_x / sep_count, sep_y / sep_count, sep_z / sep_count
        )
        sep_x *= separation_weight
        sep_y *= separation_weight
        sep_z *= separation_weight

    vx, vy, vz = normalize3(
        velocities[i, 0] + align_x + coh_x + sep_x,
        velocities[i, 1] + align_y + coh_y + sep_y,
        velocities[i, 2] + align_z + coh_z + sep_z,
    )
    velocities[i, 0] = vx
    velocities[i, 1] = vy
    velocities[i, 2] = vz


@njit(cache=True)
def update_flock_numba(
    positions: np.ndarray,
    velocities: np.ndarray,
    radius: float,
    max_velocity: float,
    alignment_radius: float,
    cohesion_radius: float,
    separation_radius: float,
    alignment_weight: float,
    cohesion_weight: float,
    separation_weight: float,
    dt: float,
    num_boids: int
):
    """
    Numba JIT-compiled flock step.

    Boids are updated one at a time and written back immediately, so boid i
    sees the already-updated state of boids 0..i-1 within the same frame.
    Must stay sequential (no prange).
    """
    for i in range(num_boids):
        apply_rules_numba(
            i, positions, velocities,
            alignment_radius, cohesion_radius, separation_radius,
            alignment_weight, cohesion_weight, separation_weight,
            num_boids
        )

        # Integrate, then project back onto the sphere surface
        px, py, pz = normalize3(
            positions[i, 0] + velocities[i, 0] * dt,
            positions[i, 1] + velocities[i, 1] * dt,
            positions[i, 2] + velocities[i, 2] * dt,
        )
        positions[i, 0] = px * radius
        positions[i, 1] = py * radius
        positions[i, 2] = pz * radius

        # Speed clamp
        vx = velocities[i, 0]
        vy = velocities[i, 1]
        vz = velocities[i, 2]
        speed = min(max(length3(vx, vy, vz), 0.0), max_velocity)
        vx, vy, vz = normalize3(vx, vy, vz)
        velocities[i, 0] = vx * speed
        velocities[i, 1] = vy * speed
        velocities[i, 2] = vz * speed


def _clamp(value: float, low: float, high: float = np.inf) -> float:
    return min(max(float(value), low), high)


# ============================================================================
# FLOCK CLASS
# ============================================================================

class Flock:
    """
    Flock of boids glued to the surface of a sphere.

    Per frame every boid scans all other boids (exact O(n^2)), steers by
    alignment, cohesion and separation, moves, is projected back onto the
    sphere and has its speed capped. Parameters are clamped on assignment,
    never rejected.

    Not thread-safe: do not call ``update`` or assign parameters from
    several threads at once.
    """

    _numba_ready = False

    def __init__(
        self,
        num_boids: int = config.BOIDS["count"],
        sphere_radius: float = config.BOIDS["sphere_radius"],
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        radius = float(sphere_radius)
        self._radius = radius if radius > 0.0 else 1.0

        # Injectable random source; wall-clock seeded by default
        if rng is None:
            rng = np.random.default_rng(seed if seed is not None else time.time_ns())
        self.rng = rng

        # Flocking parameters (assigned through the clamping setters)
        self.max_velocity = config.BOIDS["max_velocity"]
        self.alignment_weight = config.BOIDS["alignment_weight"]
        self.cohesion_weight = config.BOIDS["cohesion_weight"]
        self.separation_weight = config.BOIDS["separation_weight"]
        self.alignment_radius = config.BOIDS["alignment_radius"]
        self.cohesion_radius = config.BOIDS["cohesion_radius"]
        self.separation_radius = config.BOIDS["separation_radius"]

        # Boid data
        self.positions, self.velocities = self._seed_boids(max(0, int(num_boids)))

        self._warmup_numba()

    @classmethod
    def from_config(
        cls,
        cfg: dict,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "Flock":
        """Build a flock from a config or preset dict; missing keys use config.BOIDS."""
        num_boids = cfg.get("num_boids", cfg.get("count", config.BOIDS["count"]))
        flock = cls(
            num_boids=num_boids,
            sphere_radius=cfg.get("sphere_radius", config.BOIDS["sphere_radius"]),
            seed=seed,
            rng=rng,
        )
        for key in Flock.PARAMETERS:
            if key in cfg:
                setattr(flock, key, cfg[key])
        return flock

    def _seed_boids(self, count: int) -> Tuple[np.ndarray, np.ndarray]:
        """Scatter boids over the sphere (whole-degree lat/lon) with integer velocities."""
        # Uniform latitude is not area-uniform: density rises toward the poles
        latitude = np.radians(self.rng.integers(0, 180, size=count))
        longitude = np.radians(self.rng.integers(0, 360, size=count))
        positions = spherical_to_cartesian(latitude, longitude, self._radius)
        velocities = self.rng.integers(-10, 10, size=(count, 3))

        positions = np.ascontiguousarray(positions, dtype=np.float64).reshape(count, 3)
        velocities = np.ascontiguousarray(velocities, dtype=np.float64)
        return positions, velocities

    def _warmup_numba(self):
        """Pre-compile Numba functions."""
        if Flock._numba_ready:
            return
        pos = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)
        vel = np.ones((3, 3), dtype=np.float64)
        update_flock_numba(pos, vel, 1.0, 1.0, 2.0, 2.0, 1.0, 1.0, 1.0, 1.0, 0.016, 3)
        Flock._numba_ready = True

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def update(self, dt: float):
        """Advance every boid by one frame of length ``dt``, in place."""
        if self.num_boids == 0:
            return

        update_flock_numba(
            self.positions,
            self.velocities,
            self._radius,
            self._max_velocity,
            self._alignment_radius,
            self._cohesion_radius,
            self._separation_radius,
            self._alignment_weight,
            self._cohesion_weight,
            self._separation_weight,
            float(dt),
            self.num_boids
        )

    def get_boids(self) -> Tuple[Boid, ...]:
        """
        Read-only views of the current boids, in flock order.

        The views share memory with the flock and reflect later updates;
        writing through them raises ValueError. Callers must not re-enable
        ``flags.writeable`` on them; use ``snapshot()`` for arrays to modify.
        """
        return tuple(
            Boid.view_of(self.positions, self.velocities, i)
            for i in range(self.num_boids)
        )

    def snapshot(self) -> Tuple[np.ndarray, np.ndarray]:
        """Copies of the current positions and velocities."""
        return self.positions.copy(), self.velocities.copy()

    def parameters(self) -> dict:
        """Current flocking parameters, keyed like config.BOIDS."""
        params = {key: getattr(self, key) for key in Flock.PARAMETERS}
        params["num_boids"] = self.num_boids
        params["sphere_radius"] = self._radius
        return params

    def __len__(self) -> int:
        return self.num_boids

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    PARAMETERS = (
        "max_velocity",
        "alignment_weight",
        "cohesion_weight",
        "separation_weight",
        "alignment_radius",
        "cohesion_radius",
        "separation_radius",
    )

    @property
    def num_boids(self) -> int:
        return self.positions.shape[0]

    @property
    def radius(self) -> float:
        """Sphere radius (fixed at construction)."""
        return self._radius

    @property
    def max_velocity(self) -> float:
        return self._max_velocity

    @max_velocity.setter
    def max_velocity(self, value: float):
        self._max_velocity = _clamp(value, config.LIMITS["min_velocity"])

    @property
    def alignment_weight(self) -> float:
        return self._alignment_weight

    @alignment_weight.setter
    def alignment_weight(self, value: float):
        self._alignment_weight = _clamp(value, config.LIMITS["min_weight"], config.LIMITS["max_weight"])

    @property
    def cohesion_weight(self) -> float:
        return self._cohesion_weight

    @cohesion_weight.setter
    def cohesion_weight(self, value: float):
        self._cohesion_weight = _clamp(value, config.LIMITS["min_weight"], config.LIMITS["max_weight"])

    @property
    def separation_weight(self) -> float:
        return self._separation_weight

    @separation_weight.setter
    def separation_weight(self, value: float):
        self._separation_weight = _clamp(value, config.LIMITS["min_weight"], config.LIMITS["max_weight"])

    @property
    def alignment_radius(self) -> float:
        return self._alignment_radius

    @alignment_radius.setter
    def alignment_radius(self, value: float):
        self._alignment_radius = _clamp(value, config.LIMITS["min_radius"])

    @property
    def cohesion_radius(self) -> float:
        return self._cohesion_radius

    @cohesion_radius.setter
    def cohesion_radius(self, value: float):
        self._cohesion_radius = _clamp(value, config.LIMITS["min_radius"])

    @property
    def separation_radius(self) -> float:
        return self._separation_radius

    @separation_radius.setter
    def separation_radius(self, value: float):
        self._separation_radius = _clamp(value, config.LIMITS["min_radius"])
