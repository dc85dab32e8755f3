"""Summary statistics over flock snapshots."""

import numpy as np

from .vector import normalize


def mean_position(positions: np.ndarray) -> np.ndarray:
    """Centroid of the flock (zero vector when empty)."""
    if len(positions) == 0:
        return np.zeros(3)
    return positions.mean(axis=0)


def mean_speed(velocities: np.ndarray) -> float:
    if len(velocities) == 0:
        return 0.0
    return float(np.linalg.norm(velocities, axis=1).mean())


def max_speed(velocities: np.ndarray) -> float:
    if len(velocities) == 0:
        return 0.0
    return float(np.linalg.norm(velocities, axis=1).max())


def polarization(velocities: np.ndarray) -> float:
    """
    Vicsek order parameter |mean(v / |v|)|.

    1.0 when every boid heads the same way, near 0.0 for disordered motion.
    Stationary boids contribute a zero heading.
    """
    if len(velocities) == 0:
        return 0.0
    headings = normalize(velocities)
    return float(np.linalg.norm(headings.mean(axis=0)))


def radius_error(positions: np.ndarray, radius: float) -> float:
    """Largest deviation of any boid from the sphere surface."""
    if len(positions) == 0:
        return 0.0
    return float(np.abs(np.linalg.norm(positions, axis=1) - radius).max())


def flock_stats(flock) -> dict:
    """Bundle of the statistics above for a Flock."""
    positions, velocities = flock.positions, flock.velocities
    return {
        "num_boids": flock.num_boids,
        "mean_position": mean_position(positions),
        "mean_speed": mean_speed(velocities),
        "max_speed": max_speed(velocities),
        "polarization": polarization(velocities),
        "radius_error": radius_error(positions, flock.radius),
    }
