"""
Oriented bounding boxes in three dimensions.

An oriented bounding box (OBB) is stored as a flat array of twelve scalars

    ``[cx, cy, cz, ux, uy, uz, vx, vy, vz, wx, wy, wz]``

where ``obb[0:3]`` is the center and ``obb[3:6]``, ``obb[6:9]`` and
``obb[9:12]`` are the vectors from the center to the midpoints of three
mutually adjacent faces. The magnitude of each edge vector is the half-extent
of the box along that local direction.

The routines below never validate a box. Callers are responsible for building
boxes whose edge vectors are non-zero and linearly independent (ideally
mutually orthogonal, as produced by :func:`from_random`). A zero-length edge
vector silently produces NaN/inf values.

All routines keep the floating point precision of their inputs.
"""
import numpy as np

from obbkit.utils import aabb3
from obbkit.utils.vec3 import as_real, as_point, cross, dot, orthogonalize


def as_obb(obb) -> np.ndarray:
    arr = as_real(obb)
    if arr.size != 12:
        raise ValueError("Expected an OBB with 12 components, got shape {}.".format(arr.shape))
    return arr.reshape(12)


def make(center, u, v, w) -> np.ndarray:
    """Assemble an OBB from its center and three edge vectors."""
    parts = [as_point(center), as_point(u), as_point(v), as_point(w)]
    return np.concatenate(parts).astype(np.result_type(*parts))


def center(obb) -> np.ndarray:
    return as_obb(obb)[0:3]


def edges(obb):
    obb = as_obb(obb)
    return obb[3:6], obb[6:9], obb[9:12]


def from_random(rng: np.random.Generator, dtype=np.float64) -> np.ndarray:
    """
    Generate a random OBB inside the cube ``[-1, 1]^3``.

    The center and three candidate edge vectors are sampled uniformly in the
    cube. The second edge is orthogonalized against the first and the third
    against both, so the returned box has mutually orthogonal edges.

    Parameters
    ----------
    rng : numpy.random.Generator
        Source of randomness.
    dtype : numpy dtype, optional
        Floating point type of the returned box. Default is float64.

    Returns
    -------
    numpy.ndarray
        A (12,) array.
    """
    aabb_m1p1 = np.array([-1.0, -1.0, -1.0, 1.0, 1.0, 1.0], dtype=dtype)
    c = aabb3.sample(aabb_m1p1, rng)
    u = aabb3.sample(aabb_m1p1, rng)
    v = aabb3.sample(aabb_m1p1, rng)
    v = orthogonalize(u, v)
    w = aabb3.sample(aabb_m1p1, rng)
    w = orthogonalize(u, w)
    w = orthogonalize(v, w)
    return np.concatenate([c, u, v, w])


def is_include_point(obb, point, eps=0.0) -> bool:
    """
    Check if a point lies inside an OBB.

    For each raw edge vector ``e`` the projection ``d = e . (point - center)``
    is compared against the squared edge length ``L = e . e``; the point is
    outside when ``|d| > L * (1 + eps)`` on any axis. This is the same as
    ``|d / L| <= 1`` without taking a square root.

    Parameters
    ----------
    obb : array-like
        (12,) box.
    point : array-like
        (3,) point.
    eps : float
        Relative slack. Zero tests the exact boundary, positive values grow
        the box and negative values shrink it.

    Returns
    -------
    bool
    """
    obb = as_obb(obb)
    point = as_point(point)
    s = obb.dtype.type(1) + obb.dtype.type(eps)
    d = point - obb[0:3]
    for k in range(3):
        e = obb[3 + 3 * k:6 + 3 * k]
        lk = dot(e, e)
        dk = dot(e, d)
        if abs(dk) > lk * s:
            return False
    return True


def unit_axes_and_half_edge_lengths(obb):
    """
    Return the normalized edge vectors of an OBB and their magnitudes.

    Returns
    -------
    axes : numpy.ndarray
        (3, 3) array, one unit axis per row.
    sizes : numpy.ndarray
        (3,) half-edge lengths.
    """
    obb = as_obb(obb)
    e = obb[3:12].reshape(3, 3)
    sizes = np.sqrt(np.einsum('ij,ij->i', e, e))
    # Match the degenerate-box contract: zero-length edges give NaN/inf, not an error
    with np.errstate(invalid='ignore', divide='ignore'):
        inv = obb.dtype.type(1) / sizes
        axes = e * inv.reshape(3, 1)
    return axes, sizes


def range_axis(obb, axis):
    """
    Projection of an OBB onto ``axis``, returned as ``(min, max)``.

    The axis does not need to be unit length; the interval is scaled by its
    magnitude.
    """
    obb = as_obb(obb)
    axis = as_point(axis)
    c = dot(obb[0:3], axis)
    x = abs(dot(obb[3:6], axis))
    y = abs(dot(obb[6:9], axis))
    z = abs(dot(obb[9:12], axis))
    return c - x - y - z, c + x + y + z


def distance_between_two_ranges(a, b):
    """
    Gap between two closed intervals, or ``None`` if they overlap.

    Touching intervals count as overlapping.
    """
    if a[0] > b[1]:
        return a[0] - b[1]
    if b[0] > a[1]:
        return b[0] - a[1]
    return None


def _face_axes(obb_i, obb_j):
    axes_i, _ = unit_axes_and_half_edge_lengths(obb_i)
    axes_j, _ = unit_axes_and_half_edge_lengths(obb_j)
    return [axes_i[0], axes_i[1], axes_i[2], axes_j[0], axes_j[1], axes_j[2]]


def _cross_axes(obb_i, obb_j):
    axes_i, _ = unit_axes_and_half_edge_lengths(obb_i)
    axes_j, _ = unit_axes_and_half_edge_lengths(obb_j)
    planes = []
    for a in axes_i:
        for b in axes_j:
            plane = cross(a, b)
            # Parallel axes give no separating direction
            if not np.any(plane):
                continue
            planes.append(plane)
    return planes


def separating_axes(obb_i, obb_j, cross_axes=False):
    """
    Candidate separating axes for a pair of OBBs.

    The three unit axes of each box are always included. With
    ``cross_axes=True`` the nine pairwise cross products are appended, which
    is the complete candidate set of the separating axis theorem for boxes.
    """
    axes = _face_axes(obb_i, obb_j)
    if cross_axes:
        axes.extend(_cross_axes(obb_i, obb_j))
    return axes


def is_intersect_to_obb3(obb_i, obb_j, cross_axes=False) -> bool:
    """
    Use the separating axis theorem (SAT) to check if two OBBs intersect.

    Parameters
    ----------
    obb_i, obb_j : array-like
        (12,) boxes.
    cross_axes : bool
        When False (default) only the six face-normal axes are tested. This
        misses edge-edge separations, so some disjoint pairs are reported as
        intersecting (never the other way around). When True the nine
        cross-product axes are tested as well and the answer is exact.

    Returns
    -------
    bool
        True if no tested axis separates the boxes.
    """
    obb_i = as_obb(obb_i)
    obb_j = as_obb(obb_j)
    for axis in separating_axes(obb_i, obb_j, cross_axes=cross_axes):
        range_i = range_axis(obb_i, axis)
        range_j = range_axis(obb_j, axis)
        if distance_between_two_ranges(range_i, range_j) is not None:
            return False
    return True


def distance_to_obb3(obb_i, obb_j):
    """
    Lower bound on the distance between two OBBs.

    Every face-normal and cross-product axis is tested; the largest gap
    between the projected intervals is returned, or zero when no axis
    separates the boxes. On face-normal axes the interval of the box owning
    the axis is taken from its center and half-edge length directly.

    Cross-product axes are not normalized, so their gaps are scaled by the
    sine of the angle between the two edges.
    """
    obb_i = as_obb(obb_i)
    obb_j = as_obb(obb_j)
    center_i = obb_i[0:3]
    center_j = obb_j[0:3]
    axes_i, sizes_i = unit_axes_and_half_edge_lengths(obb_i)
    axes_j, sizes_j = unit_axes_and_half_edge_lengths(obb_j)
    max_dist = np.result_type(obb_i, obb_j).type(0)

    for axis_i, lh_i in zip(axes_i, sizes_i):
        c_i = dot(axis_i, center_i)
        range_i = (c_i - lh_i, c_i + lh_i)
        range_j = range_axis(obb_j, axis_i)
        dist = distance_between_two_ranges(range_i, range_j)
        if dist is not None and dist > max_dist:
            max_dist = dist
    for axis_j, lh_j in zip(axes_j, sizes_j):
        c_j = dot(axis_j, center_j)
        range_j = (c_j - lh_j, c_j + lh_j)
        range_i = range_axis(obb_i, axis_j)
        dist = distance_between_two_ranges(range_i, range_j)
        if dist is not None and dist > max_dist:
            max_dist = dist
    for axis_i in axes_i:
        for axis_j in axes_j:
            axis = cross(axis_i, axis_j)
            range_i = range_axis(obb_i, axis)
            range_j = range_axis(obb_j, axis)
            dist = distance_between_two_ranges(range_i, range_j)
            if dist is not None and dist > max_dist:
                max_dist = dist
    return max_dist


def nearest_to_point3(obb, point) -> np.ndarray:
    """
    Closest point of an OBB (interior included) to ``point``.

    Points already inside the box are returned unchanged. Otherwise the
    offset from the center is expressed in the box's unit axes, each
    coordinate is clamped to the half-edge length and the point is rebuilt.
    """
    obb = as_obb(obb)
    point = as_point(point)
    if is_include_point(obb, point, 0.0):
        return point.copy()
    axes, hlen = unit_axes_and_half_edge_lengths(obb)
    d = point - obb[0:3]
    t = np.clip(axes @ d, -hlen, hlen)
    return obb[0:3] + t @ axes


def corner_points(obb) -> np.ndarray:
    """
    The eight corners of an OBB.

    The first four rows are the face on the ``-w`` side, walked in the order
    ``(-u,-v), (+u,-v), (+u,+v), (-u,+v)``; the last four rows repeat that
    walk on the ``+w`` side.

    Returns
    -------
    numpy.ndarray
        (8, 3) array.
    """
    obb = as_obb(obb)
    c = obb[0:3]
    u = obb[3:6]
    v = obb[6:9]
    w = obb[9:12]
    signs = np.array([
        [-1, -1, -1],
        [1, -1, -1],
        [1, 1, -1],
        [-1, 1, -1],
        [-1, -1, 1],
        [1, -1, 1],
        [1, 1, 1],
        [-1, 1, 1],
    ], dtype=obb.dtype)
    return c + signs[:, 0:1] * u + signs[:, 1:2] * v + signs[:, 2:3] * w


def volume(obb):
    """Volume of an OBB, ``8 |u . (v x w)|``."""
    obb = as_obb(obb)
    return obb.dtype.type(8) * abs(dot(obb[3:6], cross(obb[6:9], obb[9:12])))
