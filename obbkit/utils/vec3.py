import numpy as np


def as_real(x) -> np.ndarray:
    """
    Return ``x`` as a floating point array.

    Floating dtypes (float32, float64, longdouble) are kept as they are so
    that every routine downstream computes in the precision of its input.
    Integer and object input is promoted to float64.
    """
    arr = np.asarray(x)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    return arr


def as_point(p) -> np.ndarray:
    arr = as_real(p)
    if arr.size != 3:
        raise ValueError("Expected a 3-component vector, got shape {}.".format(arr.shape))
    return arr.reshape(3)


def dot(a, b):
    return np.dot(as_real(a), as_real(b))


def cross(a, b) -> np.ndarray:
    return np.cross(as_real(a), as_real(b))


def squared_norm(a):
    return dot(a, a)


def norm(a):
    return np.sqrt(squared_norm(a))


def scale(a, s) -> np.ndarray:
    a = as_real(a)
    return a * a.dtype.type(s)


def add(a, b) -> np.ndarray:
    return as_real(a) + as_real(b)


def normalize(a) -> np.ndarray:
    # No zero-magnitude check: a zero vector gives NaN, same as the callers expect
    a = as_real(a)
    with np.errstate(invalid='ignore', divide='ignore'):
        return a * (a.dtype.type(1) / norm(a))


def orthogonalize(u, v) -> np.ndarray:
    """
    Remove the component of ``v`` along ``u`` (one Gram-Schmidt step).

    The magnitude of the result is not normalized.
    """
    u = as_real(u)
    v = as_real(v)
    t = dot(u, v) / dot(u, u)
    return v - u * t


def distance(p, q):
    """Euclidean length of the edge from ``p`` to ``q``."""
    return norm(as_real(q) - as_real(p))


def frame_from_z_vector(z):
    """
    Build two unit vectors that complete ``z`` to an orthonormal frame
    ``(x, y, z)``.

    Parameters
    ----------
    z : array-like
        Direction of the frame's z axis. It does not need to be unit length.

    Returns
    -------
    x : numpy.ndarray
    y : numpy.ndarray
    """
    w = normalize(z)
    one = w.dtype.type(1)
    x = np.zeros_like(w)
    y = np.zeros_like(w)
    if w[2] == -one:
        x[0] = -one
        y[1] = -one
        return x, y
    inv = one / (one + w[2])
    x[0] = one - (w[0] ** 2) * inv
    x[1] = -(w[0] * w[1]) * inv
    x[2] = -w[0]
    y[0] = -(w[0] * w[1]) * inv
    y[1] = one - (w[1] ** 2) * inv
    y[2] = -w[1]
    return x, y
