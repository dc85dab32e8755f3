"""Read-only view of a single boid in the flock."""

import numpy as np
from dataclasses import dataclass


@dataclass(frozen=True)
class Boid:
    """
    A single boid (bird-oid object) on the sphere.

    Instances handed out by ``Flock.get_boids()`` wrap non-writeable views
    into the flock's live arrays, so they follow the flock as it updates.
    Copy the arrays to keep a frame's values.

    Treat the arrays as read-only. The writeable flag only guards against
    accidental writes: numpy lets a caller set it back, and writes made
    after that land in the flock's state.

    Attributes:
        position: 3D position vector (on the sphere surface)
        velocity: 3D velocity vector
    """
    position: np.ndarray
    velocity: np.ndarray

    @property
    def speed(self) -> float:
        """Velocity magnitude."""
        return float(np.linalg.norm(self.velocity))

    @property
    def altitude(self) -> float:
        """Distance from the sphere center."""
        return float(np.linalg.norm(self.position))

    @classmethod
    def view_of(cls, positions: np.ndarray, velocities: np.ndarray, index: int) -> "Boid":
        """Build a read-only view of row ``index`` of the flock arrays."""
        position = positions[index].view()
        velocity = velocities[index].view()
        position.flags.writeable = False
        velocity.flags.writeable = False
        return cls(position=position, velocity=velocity)
