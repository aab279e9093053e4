import numpy as np

from obbkit.utils.mat3 import minimum_rotation_matrix
from obbkit.utils.vec3 import as_real, frame_from_z_vector


def resample(stroke, l):
    """
    Resample a polyline with a constant spacing along its arc length.

    Parameters
    ----------
    stroke : array-like
        (N, D) polyline vertices in any dimension D.
    l : float
        Distance between consecutive output points measured along the
        polyline.

    Returns
    -------
    numpy.ndarray
        (M, D) resampled vertices. The first vertex of ``stroke`` is always
        kept; the tail shorter than ``l`` is dropped. An empty stroke gives an
        empty array.
    """
    if l <= 0:
        raise ValueError("Resampling length must be positive.")
    stroke = as_real(stroke)
    if stroke.shape[0] == 0:
        return stroke.copy()
    out = [stroke[0]]
    l = stroke.dtype.type(l)
    jcur = 0
    rcur = stroke.dtype.type(0)
    lcur = l
    while jcur < stroke.shape[0] - 1:
        lenj = np.linalg.norm(stroke[jcur + 1] - stroke[jcur])
        lenjr = lenj * (1 - rcur)
        if lenjr > lcur:
            # next point lies inside this segment
            rcur += lcur / lenj
            out.append(stroke[jcur] * (1 - rcur) + stroke[jcur + 1] * rcur)
            lcur = l
        else:
            lcur -= lenjr
            rcur = stroke.dtype.type(0)
            jcur += 1
    return np.array(out, dtype=stroke.dtype)


def parallel_transport(vtx2xyz):
    """
    Propagate a frame vector along a closed polyline by parallel transport.

    The vector for the first segment is taken orthogonal to that segment.
    Each following segment receives the previous vector rotated by the
    minimum rotation between the two segment directions. The last segment
    wraps back to the first vertex.

    Parameters
    ----------
    vtx2xyz : array-like
        (N, 3) polyline vertices, N >= 2.

    Returns
    -------
    numpy.ndarray
        (N, 3) array; row ``k`` is the transported vector of the segment
        starting at vertex ``k``.
    """
    vtx2xyz = as_real(vtx2xyz)
    num_vtx = vtx2xyz.shape[0]
    if num_vtx < 2:
        raise ValueError("A polyline needs at least two vertices.")
    vtx2bin = np.zeros((num_vtx, 3), dtype=vtx2xyz.dtype)
    x, _ = frame_from_z_vector(vtx2xyz[1] - vtx2xyz[0])
    vtx2bin[0] = x
    for iseg1 in range(1, num_vtx):
        iv0 = iseg1 - 1
        iv1 = iseg1
        iv2 = (iseg1 + 1) % num_vtx
        v01 = vtx2xyz[iv1] - vtx2xyz[iv0]
        v12 = vtx2xyz[iv2] - vtx2xyz[iv1]
        rot = minimum_rotation_matrix(v01, v12)
        vtx2bin[iseg1] = rot @ vtx2bin[iseg1 - 1]
    return vtx2bin
