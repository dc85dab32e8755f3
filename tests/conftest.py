"""Pytest configuration - seeded flock fixtures shared across test modules."""

import numpy as np
import pytest

from boids import Flock

SEED = 1234
RADIUS = 100.0


@pytest.fixture
def flock():
    """Ten boids on a 100-unit sphere with a fixed seed."""
    return Flock(10, RADIUS, seed=SEED)


@pytest.fixture
def single_boid_flock():
    """One boid on a 100-unit sphere with a known tangential velocity."""
    flock = Flock(1, RADIUS, seed=SEED)
    flock.positions[0] = (RADIUS, 0.0, 0.0)
    flock.velocities[0] = (0.0, 3.0, -4.0)
    return flock


@pytest.fixture
def pair_flock():
    """
    Two boids about 10 units apart on the equator, all rule weights zeroed.

    Tests switch on the rule they exercise.
    """
    flock = Flock(2, RADIUS, seed=SEED)
    flock.positions[0] = (RADIUS, 0.0, 0.0)
    flock.positions[1] = np.array([RADIUS, 10.0, 0.0]) / np.linalg.norm([RADIUS, 10.0, 0.0]) * RADIUS
    flock.velocities[0] = (0.0, 0.0, 5.0)
    flock.velocities[1] = (0.0, 3.0, 0.0)
    flock.alignment_weight = 0.0
    flock.cohesion_weight = 0.0
    flock.separation_weight = 0.0
    return flock
