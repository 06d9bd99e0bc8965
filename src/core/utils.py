# core/utils.py
from core.vector import Vector3

# Offset applied to rays leaving a surface; also the smallest accepted hit distance.
EPSILON = 1e-4

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Mirrors v about the normal n: 2(n.v)n - v.

    Both vectors point away from the surface, so reflecting the direction
    towards a light gives the direction of the specular highlight.
    """
    return n * (2.0 * n.dot(v)) - v
