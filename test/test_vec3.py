import math

import numpy as np
import pytest

from obbkit.utils import vec3
from obbkit.utils import mat3
from obbkit.utils import aabb3


def test_dot_and_cross():
    assert vec3.dot([1.0, 2.0, 3.0], [4.0, -5.0, 6.0]) == pytest.approx(12.0)
    assert np.allclose(vec3.cross([1.0, 0.0, 0.0], [0.0, 1.0, 0.0]), [0.0, 0.0, 1.0])
    assert np.allclose(vec3.cross([0.0, 0.0, 1.0], [1.0, 0.0, 0.0]), [0.0, 1.0, 0.0])


@pytest.mark.parametrize("dtype", [np.float32, np.float64, np.longdouble])
def test_dot_and_cross_keep_precision(dtype):
    a = np.array([1.0, 2.0, 3.0], dtype=dtype)
    b = np.array([0.5, -1.0, 2.0], dtype=dtype)
    assert vec3.dot(a, b).dtype == dtype
    assert vec3.cross(a, b).dtype == dtype
    assert vec3.dot(a, [1, 0, 0]) == 1.0


def test_normalize_and_norm():
    v = vec3.normalize([3.0, 0.0, 4.0])
    assert np.allclose(v, [0.6, 0.0, 0.8])
    assert vec3.norm(v) == pytest.approx(1.0)


def test_normalize_zero_vector_is_nan():
    v = vec3.normalize([0.0, 0.0, 0.0])
    assert np.all(np.isnan(v))


def test_scale_and_add():
    assert np.allclose(vec3.scale([1.0, 2.0, 3.0], 2.0), [2.0, 4.0, 6.0])
    assert np.allclose(vec3.add([1.0, 2.0, 3.0], [1.0, 1.0, 1.0]), [2.0, 3.0, 4.0])


def test_orthogonalize():
    u = np.array([2.0, 0.0, 0.0])
    v = np.array([3.0, 4.0, 0.0])
    w = vec3.orthogonalize(u, v)
    assert np.allclose(w, [0.0, 4.0, 0.0])
    assert vec3.dot(u, w) == pytest.approx(0.0)


def test_distance():
    assert vec3.distance([0.0, 0.0, 0.0], [1.0, 2.0, 2.0]) == pytest.approx(3.0)


@pytest.mark.parametrize("z", [
    [0.0, 0.0, 1.0],
    [0.0, 0.0, -1.0],
    [1.0, 2.0, 3.0],
    [-0.3, 0.1, -5.0],
])
def test_frame_from_z_vector(z):
    x, y = vec3.frame_from_z_vector(z)
    zn = vec3.normalize(z)
    assert vec3.norm(x) == pytest.approx(1.0)
    assert vec3.norm(y) == pytest.approx(1.0)
    assert vec3.dot(x, y) == pytest.approx(0.0, abs=1e-12)
    assert vec3.dot(x, zn) == pytest.approx(0.0, abs=1e-12)
    assert vec3.dot(y, zn) == pytest.approx(0.0, abs=1e-12)


def test_rotation_around_axis():
    rot = mat3.rotation_around_axis([0.0, 0.0, 2.0], math.pi * 0.5)
    assert np.allclose(mat3.mult_vec(rot, [1.0, 0.0, 0.0]), [0.0, 1.0, 0.0])
    assert np.allclose(rot @ rot.T, np.eye(3))


@pytest.mark.parametrize("v0, v1", [
    ([1.0, 0.0, 0.0], [0.0, 1.0, 0.0]),
    ([1.0, 2.0, 3.0], [-2.0, 0.5, 1.0]),
    ([1.0, 0.0, 0.0], [2.0, 0.0, 0.0]),
    ([0.0, 1.0, 1.0], [0.0, -1.0, -1.0]),
])
def test_minimum_rotation_matrix(v0, v1):
    rot = mat3.minimum_rotation_matrix(v0, v1)
    assert np.allclose(rot @ rot.T, np.eye(3))
    assert np.linalg.det(rot) == pytest.approx(1.0)
    assert np.allclose(rot @ vec3.normalize(v0), vec3.normalize(v1))


def test_minimum_rotation_matrix_keeps_axis():
    v0 = np.array([1.0, 0.0, 0.0])
    v1 = np.array([0.0, 1.0, 0.0])
    rot = mat3.minimum_rotation_matrix(v0, v1)
    assert np.allclose(rot @ np.array([0.0, 0.0, 1.0]), [0.0, 0.0, 1.0])


def test_aabb3_sample_within_bounds():
    rng = np.random.default_rng(11)
    aabb = np.array([-1.0, 2.0, 0.0, 1.0, 3.0, 0.5])
    for _ in range(50):
        p = aabb3.sample(aabb, rng)
        assert np.all(p >= aabb[0:3])
        assert np.all(p <= aabb[3:6])
