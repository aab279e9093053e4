from obbkit.utils.vec3 import as_point


def volume(v1, v2, v3, v4):
    """
    Signed volume of the tetrahedron ``(v1, v2, v3, v4)``.

    Positive when ``v2 - v1``, ``v3 - v1`` and ``v4 - v1`` form a
    right-handed triple.
    """
    v1 = as_point(v1)
    v2 = as_point(v2)
    v3 = as_point(v3)
    v4 = as_point(v4)
    a0 = (v2[0] - v1[0]) * ((v3[1] - v1[1]) * (v4[2] - v1[2]) - (v4[1] - v1[1]) * (v3[2] - v1[2]))
    a1 = -(v2[1] - v1[1]) * ((v3[0] - v1[0]) * (v4[2] - v1[2]) - (v4[0] - v1[0]) * (v3[2] - v1[2]))
    a2 = (v2[2] - v1[2]) * ((v3[0] - v1[0]) * (v4[1] - v1[1]) - (v4[0] - v1[0]) * (v3[1] - v1[1]))
    return (a0 + a1 + a2) / 6
