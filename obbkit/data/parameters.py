"""Settings for the pairwise OBB collision routines.

The geometric kernel in :mod:`obbkit.geometry.obb3` takes its options as plain
arguments. :class:`CollisionParameters` collects the options used by
:mod:`obbkit.collision.obb_collision` in one place so they can be passed
around, printed and overridden from the environment.

Environment overrides
---------------------

``OBBKIT_CROSS_AXES``
    Truthy values (``1``, ``true``, ``yes``, ``y``, ``on``) enable the nine
    cross-product axes in the intersection test.
``OBBKIT_CONVERGENCE_TOLERANCE``
    Tolerance of the alternating projection iteration.
``OBBKIT_MAX_ITERATIONS``
    Iteration budget of the alternating projection.

Environment variables are read once, when a :class:`CollisionParameters`
object is created.
"""

from __future__ import annotations

import os
from typing import Optional


class ParameterError(ValueError):
    """Raised when an unknown parameter or an invalid value is supplied."""


def env_flag(name: str, default: bool = False) -> bool:
    val = os.environ.get(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_float(name: str, default: float) -> float:
    val = os.environ.get(name)
    if val is None or not val.strip():
        return default
    try:
        return float(val)
    except ValueError as exc:
        raise ParameterError(f"Environment variable {name}={val!r} is not a number.") from exc


def env_int(name: str, default: int) -> int:
    val = os.environ.get(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError as exc:
        raise ParameterError(f"Environment variable {name}={val!r} is not an integer.") from exc


class CollisionParameters(object):
    """Options that steer pairwise OBB collision queries.

    Attributes
    ----------
    cross_axes : bool
        Test the nine cross-product axes in addition to the six face normals.
        Defaults to False, which may report disjoint boxes as intersecting
        when they are only separated along an edge-edge direction.
    clearance : float
        Extra distance added to each half-edge length before testing.
    convergence_tolerance : float
        Alternating projection stops once the distance between iterates
        decreases by less than this value.
    max_iterations : int
        Iteration budget of the alternating projection.
    """

    _NAMES = ('cross_axes', 'clearance', 'convergence_tolerance', 'max_iterations')

    def __init__(self, *, cross_axes: Optional[bool] = None,
                 convergence_tolerance: Optional[float] = None,
                 max_iterations: Optional[int] = None):
        self.cross_axes = False
        self.clearance = 0.0
        self.convergence_tolerance = 1.0e-4
        self.max_iterations = 100
        self.set('cross_axes', env_flag('OBBKIT_CROSS_AXES', False) if cross_axes is None else cross_axes)
        self.set('convergence_tolerance',
                 env_float('OBBKIT_CONVERGENCE_TOLERANCE', 1.0e-4)
                 if convergence_tolerance is None else convergence_tolerance)
        self.set('max_iterations',
                 env_int('OBBKIT_MAX_ITERATIONS', 100) if max_iterations is None else max_iterations)

    def __str__(self):
        return (
            "Collision Parameters:\n"
            "---------------------\n"
            f"Cross Axes: {self.cross_axes}\n"
            f"Clearance: {self.clearance}\n"
            f"Convergence Tolerance: {self.convergence_tolerance}\n"
            f"Max Iterations: {self.max_iterations}"
        )

    def __repr__(self):
        return self.__str__()

    def set(self, parameter, value):
        """Update a named parameter.

        Parameters
        ----------
        parameter : str
            One of ``{'cross_axes', 'clearance', 'convergence_tolerance',
            'max_iterations'}``.
        value : Any
            New value assigned to the corresponding attribute.
        """
        if parameter == 'cross_axes':
            self.cross_axes = bool(value)
        elif parameter == 'clearance':
            if not value >= 0.0:
                raise ParameterError("Clearance must be non-negative.")
            self.clearance = float(value)
        elif parameter == 'convergence_tolerance':
            if not value > 0.0:
                raise ParameterError("Convergence tolerance must be positive.")
            self.convergence_tolerance = float(value)
        elif parameter == 'max_iterations':
            if int(value) != value or value < 1:
                raise ParameterError("Max iterations must be a positive integer.")
            self.max_iterations = int(value)
        else:
            raise ParameterError("Invalid parameter: {}.".format(parameter))
        return None

    def get(self, parameter):
        if parameter not in self._NAMES:
            raise ParameterError("Invalid parameter: {}.".format(parameter))
        return getattr(self, parameter)

    def copy(self):
        other = CollisionParameters(cross_axes=self.cross_axes,
                                    convergence_tolerance=self.convergence_tolerance,
                                    max_iterations=self.max_iterations)
        other.clearance = self.clearance
        return other
