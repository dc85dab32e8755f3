"""Vector helpers shared by the flock kernels, metrics and tests."""

import math
import numpy as np
from numba import njit


# ============================================================================
# NUMBA JIT-COMPILED SCALAR HELPERS
# ============================================================================

@njit(cache=True)
def length3(x: float, y: float, z: float) -> float:
    """Euclidean length of (x, y, z)."""
    return math.sqrt(x * x + y * y + z * z)


@njit(cache=True)
def normalize3(x: float, y: float, z: float):
    """Unit vector along (x, y, z); the zero vector only for zero length."""
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0.0:
        return 0.0, 0.0, 0.0
    return x / length, y / length, z / length


# ============================================================================
# NUMPY HELPERS
# ============================================================================

def normalize(v: np.ndarray) -> np.ndarray:
    """
    Normalize vectors along the last axis.

    Zero-length rows come back as zero vectors instead of NaN; any other
    length, however small, is scaled to one.
    """
    v = np.asarray(v, dtype=np.float64)
    length = np.sqrt(np.sum(v * v, axis=-1, keepdims=True))
    safe = np.where(length > 0.0, length, 1.0)
    return np.where(length > 0.0, v / safe, 0.0)


def spherical_to_cartesian(latitude, longitude, radius: float) -> np.ndarray:
    """
    Map latitude/longitude (radians) onto a sphere of the given radius.

    Returns an array of shape (..., 3):
        x = r cos(lat) cos(lon), y = r cos(lat) sin(lon), z = r sin(lat)
    """
    latitude = np.asarray(latitude, dtype=np.float64)
    longitude = np.asarray(longitude, dtype=np.float64)
    cos_lat = np.cos(latitude)
    return np.stack(
        (
            radius * cos_lat * np.cos(longitude),
            radius * cos_lat * np.sin(longitude),
            radius * np.sin(latitude),
        ),
        axis=-1,
    )


def fuzzy_compare(a: float, b: float, rel_tol: float = 1e-5) -> bool:
    """Relative float comparison; exact zero only compares equal to exact zero."""
    return abs(a - b) * (1.0 / rel_tol) <= min(abs(a), abs(b))


def vectors_close(v1, v2, tolerance: float = 1e-3) -> bool:
    """True when every component of v1 and v2 differs by at most tolerance."""
    diff = np.abs(np.asarray(v1, dtype=np.float64) - np.asarray(v2, dtype=np.float64))
    return bool(np.all(diff <= tolerance))
