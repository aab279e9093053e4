import numpy as np
from scipy.spatial.transform import Rotation

from obbkit.utils.vec3 import as_real, as_point, cross, dot, normalize


def rotation_around_axis(axis, theta) -> np.ndarray:
    """
    Rotation matrix for a right-handed rotation of ``theta`` radians about
    ``axis``. The axis does not need to be unit length.
    """
    axis = as_point(axis)
    rotvec = normalize(axis.astype(np.float64)) * float(theta)
    return Rotation.from_rotvec(rotvec).as_matrix().astype(axis.dtype)


def mult_vec(mat, v) -> np.ndarray:
    mat = as_real(mat).reshape(3, 3)
    v = as_point(v)
    return mat @ v


def minimum_rotation_matrix(v0, v1) -> np.ndarray:
    """
    Smallest rotation that turns the direction of ``v0`` into the direction
    of ``v1``.

    The rotation axis is ``v0 x v1``. Parallel directions give the identity;
    opposite directions give a half turn about an axis orthogonal to ``v0``.
    """
    a = normalize(v0)
    b = normalize(v1)
    one = a.dtype.type(1)
    c = dot(a, b)
    k = cross(a, b)
    eye = np.eye(3, dtype=a.dtype)
    if c <= -one + np.finfo(a.dtype).eps * 16:
        # Half turn: pick the coordinate axis least aligned with ``a``
        helper = np.zeros(3, dtype=a.dtype)
        helper[int(np.argmin(np.abs(a)))] = one
        n = normalize(cross(a, helper))
        return 2.0 * np.outer(n, n) - eye
    kx = np.array([
        [0.0, -k[2], k[1]],
        [k[2], 0.0, -k[0]],
        [-k[1], k[0], 0.0],
    ], dtype=a.dtype)
    return eye + kx + (kx @ kx) * (one / (one + c))
