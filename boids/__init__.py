"""Spherical boids flocking simulation."""

from .boid import Boid
from .flock import Flock
from .metrics import flock_stats

__all__ = ["Boid", "Flock", "flock_stats"]
