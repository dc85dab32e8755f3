import math
import numpy as np
import pytest

from boids.vector import (
    fuzzy_compare, length3, normalize, normalize3, spherical_to_cartesian, vectors_close
)


def test_normalize3_unit_length():
    x, y, z = normalize3(3.0, 4.0, 0.0)
    assert (x, y, z) == pytest.approx((0.6, 0.8, 0.0))


def test_normalize3_null_vector_is_zero():
    assert normalize3(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)


def test_normalize3_tiny_vector_is_unit_length():
    assert length3(*normalize3(1e-3, 1e-3, 0.0)) == pytest.approx(1.0)
    assert normalize3(0.0, 0.0, -1e-9) == pytest.approx((0.0, 0.0, -1.0))


def test_normalize_tiny_rows_are_unit_length():
    v = np.array([[1e-4, 0.0, 0.0], [0.0, 2e-3, 2e-3]])
    np.testing.assert_allclose(np.linalg.norm(normalize(v), axis=1), 1.0)


def test_length3():
    assert length3(2.0, 3.0, 6.0) == 7.0


def test_normalize_rows():
    v = np.array([[3.0, 4.0, 0.0], [0.0, 0.0, 0.0], [0.0, -2.0, 0.0]])
    np.testing.assert_allclose(normalize(v), [[0.6, 0.8, 0.0], [0.0, 0.0, 0.0], [0.0, -1.0, 0.0]])


def test_normalize_single_vector():
    np.testing.assert_allclose(normalize([0.0, 0.0, -9.0]), [0.0, 0.0, -1.0])
    assert not np.any(np.isnan(normalize([0.0, 0.0, 0.0])))


@pytest.mark.parametrize("lat, lon, expected", [
    (0.0, 0.0, (5.0, 0.0, 0.0)),
    (0.0, math.pi / 2, (0.0, 5.0, 0.0)),
    (math.pi / 2, 0.0, (0.0, 0.0, 5.0)),
    (math.pi, 0.0, (-5.0, 0.0, 0.0)),
])
def test_spherical_to_cartesian(lat, lon, expected):
    np.testing.assert_allclose(spherical_to_cartesian(lat, lon, 5.0), expected, atol=1e-12)


def test_spherical_to_cartesian_vectorized():
    lat = np.radians([10, 45, 170])
    lon = np.radians([0, 200, 359])
    points = spherical_to_cartesian(lat, lon, 3.0)
    assert points.shape == (3, 3)
    np.testing.assert_allclose(np.linalg.norm(points, axis=1), 3.0)


def test_fuzzy_compare():
    assert fuzzy_compare(100.0, 100.0001)
    assert fuzzy_compare(0.0, 0.0)
    assert not fuzzy_compare(1.0, 1.1)
    assert not fuzzy_compare(0.0, 1e-12)


def test_vectors_close():
    assert vectors_close((1.0, 2.0, 3.0), (1.0005, 2.0, 2.9995), 1e-3)
    assert not vectors_close((1.0, 2.0, 3.0), (1.0, 2.01, 3.0), 1e-3)
