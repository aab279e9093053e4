import numpy as np

from obbkit.utils.vec3 import as_real


def sample(aabb, rng: np.random.Generator) -> np.ndarray:
    """
    Uniformly sample a point inside an axis-aligned box.

    Parameters
    ----------
    aabb : array-like
        Box bounds ``[xmin, ymin, zmin, xmax, ymax, zmax]``.
    rng : numpy.random.Generator
        Source of randomness.

    Returns
    -------
    numpy.ndarray
        A point with the dtype of ``aabb``.
    """
    aabb = as_real(aabb).reshape(6)
    lo = aabb[0:3]
    hi = aabb[3:6]
    t = rng.random(3).astype(aabb.dtype)
    return lo + (hi - lo) * t
