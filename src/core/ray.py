# core/ray.py
from core.errors import DegenerateGeometryError
from core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction does not have to be unit length.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        if direction.is_zero():
            raise DegenerateGeometryError("Ray direction must be nonzero")
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def offset(self, epsilon: float) -> "Ray":
        """
        Returns a copy of the ray whose origin is pushed `epsilon` along the
        direction, so a ray leaving a surface does not re-hit that surface.
        """
        return Ray(self.at(epsilon), self.direction)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
