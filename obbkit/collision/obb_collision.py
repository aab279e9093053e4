import warnings

import numpy

from obbkit.data.parameters import CollisionParameters
from obbkit.geometry.obb3 import (as_obb, is_intersect_to_obb3, nearest_to_point3,
                                  unit_axes_and_half_edge_lengths)
from obbkit.utils.vec3 import distance


class ConvergenceWarning(UserWarning):
    """Issued when the alternating projection runs out of iterations."""


def inflate(obb, clearance):
    """
    Grow every half-edge length of an OBB by ``clearance``.

    Parameters
    ----------
    obb : numpy.ndarray
        A (12,) box with non-degenerate edges.
    clearance : float
        Distance added along each local axis on both sides of the box.

    Returns
    -------
    numpy.ndarray
        A new (12,) box; the input is left untouched.
    """
    obb = as_obb(obb)
    out = obb.copy()
    if clearance == 0.0:
        return out
    axes, sizes = unit_axes_and_half_edge_lengths(obb)
    out[3:12] = (axes * (sizes + obb.dtype.type(clearance)).reshape(3, 1)).reshape(9)
    return out


def bounding_radius(obb):
    """
    Radius of a sphere about the center that contains every corner of an OBB.

    The sum of the edge lengths bounds ``|u + v + w|`` for any edges, sheared
    or not.
    """
    _, sizes = unit_axes_and_half_edge_lengths(obb)
    return numpy.sum(sizes)


def obb_proximity(obb_i, obb_j, clearance=0.0):
    """
    Check if the bounding spheres of two OBBs overlap.

    This is a cheap pre-check. ``False`` guarantees that the boxes are
    disjoint; ``True`` only means they may intersect.

    Parameters
    ----------
    obb_i, obb_j : numpy.ndarray
        (12,) boxes.
    clearance : float
        Buffer added to both sphere radii.

    Returns
    -------
    bool
    """
    obb_i = as_obb(obb_i)
    obb_j = as_obb(obb_j)
    r0 = bounding_radius(obb_i) + clearance
    r1 = bounding_radius(obb_j) + clearance
    d = numpy.linalg.norm(obb_i[0:3] - obb_j[0:3])
    return bool(d < (r0 + r1))


def obb_collision(obb_i, obb_j, parameters=None, **kwargs):
    """
    Check if two OBBs collide.

    Parameters
    ----------
    obb_i : numpy.ndarray
        A (12,) box.
    obb_j : numpy.ndarray
        A (12,) box.
    parameters : CollisionParameters, optional
        Axis policy and clearance. A default instance is created when omitted.
    **kwargs : dict
        Additional keyword arguments.
        Keyword arguments include:
            clearance : float
                Overrides ``parameters.clearance``. Each box is grown by this
                amount along its local axes before testing.
            cross_axes : bool
                Overrides ``parameters.cross_axes``.
    Returns
    -------
    has_collision : bool
        A boolean that indicates whether the boxes (grown by the clearance)
        intersect.
    """
    if parameters is None:
        parameters = CollisionParameters()
    clearance = kwargs.get('clearance', parameters.clearance)
    cross_axes = kwargs.get('cross_axes', parameters.cross_axes)
    tmp_i = inflate(obb_i, clearance)
    tmp_j = inflate(obb_j, clearance)
    if not obb_proximity(tmp_i, tmp_j):
        return False
    return is_intersect_to_obb3(tmp_i, tmp_j, cross_axes=cross_axes)


def nearest_points(obb_i, obb_j, parameters=None, **kwargs):
    """
    Approximate the closest pair of points between two OBBs by alternating
    projection.

    Starting from the center of ``obb_i`` the iterate is projected onto
    ``obb_j`` and back onto ``obb_i`` until the distance between the two
    projections stops decreasing by more than the convergence tolerance.
    The sequence of distances is non-increasing, and its limit is the
    distance between the boxes (zero when they intersect).

    Parameters
    ----------
    obb_i : numpy.ndarray
        A (12,) box.
    obb_j : numpy.ndarray
        A (12,) box.
    parameters : CollisionParameters, optional
        Supplies ``convergence_tolerance`` and ``max_iterations``.
    **kwargs : dict
        ``tolerance`` and ``max_iterations`` override the parameters.

    Returns
    -------
    point_i : numpy.ndarray
        Point on or inside ``obb_i``.
    point_j : numpy.ndarray
        Point on or inside ``obb_j``.
    dist : float
        Distance between ``point_i`` and ``point_j``.
    converged : bool
        False if the iteration budget was exhausted; a
        :class:`ConvergenceWarning` is issued in that case.
    """
    if parameters is None:
        parameters = CollisionParameters()
    tol = kwargs.get('tolerance', parameters.convergence_tolerance)
    max_iterations = kwargs.get('max_iterations', parameters.max_iterations)
    obb_i = as_obb(obb_i)
    obb_j = as_obb(obb_j)
    point_i = obb_i[0:3].copy()
    point_j = nearest_to_point3(obb_j, point_i)
    point_i = nearest_to_point3(obb_i, point_j)
    dist = distance(point_i, point_j)
    for _ in range(max_iterations):
        if dist == 0.0:
            return point_i, point_j, dist, True
        point_j = nearest_to_point3(obb_j, point_i)
        point_i = nearest_to_point3(obb_i, point_j)
        new_dist = distance(point_i, point_j)
        if dist - new_dist < tol:
            return point_i, point_j, new_dist, True
        dist = new_dist
    warnings.warn(
        "Alternating projection did not converge in {} iterations "
        "(last distance {}).".format(max_iterations, dist),
        ConvergenceWarning,
        stacklevel=2,
    )
    return point_i, point_j, dist, False
