# geometry/triangle.py
import math
from typing import Optional
from core.errors import DegenerateGeometryError
from core.vector import Vector3
from core.ray import Ray
from core.utils import EPSILON
from geometry.hittable import Hittable, Hit

# Below this, a ray is considered parallel to the triangle's plane.
PARALLEL_TOLERANCE = 1e-12
# Smallest sine of the angle between the two edges at v0; scale independent.
COLLINEAR_TOLERANCE = 1e-9

class Triangle(Hittable):
    """
    A flat-shaded triangle. The face normal follows the vertex winding:
    normalize((v1 - v0) x (v2 - v0)).
    """
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3, material):
        e1, e2 = v1 - v0, v2 - v0
        face = e1.cross(e2)
        if face.length() <= COLLINEAR_TOLERANCE * e1.length() * e2.length():
            raise DegenerateGeometryError(
                f"Triangle vertices are collinear: {v0}, {v1}, {v2}")
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.normal = face.normalize()
        self.material = material

    @property
    def vertices(self):
        return (self.v0, self.v1, self.v2)

    def contains(self, p: Vector3) -> bool:
        """
        Inside-outside test for a point already lying on the triangle's plane:
        p is inside when it is on the inner side of all three edges.
        """
        n = self.normal
        for a, b in ((self.v0, self.v1), (self.v1, self.v2), (self.v2, self.v0)):
            if (b - a).cross(p - a).dot(n) < 0:
                return False
        return True

    def intersect(self, ray: Ray, t_min: float = EPSILON,
                  t_max: float = math.inf) -> Optional[Hit]:
        denom = self.normal.dot(ray.direction)
        if abs(denom) < PARALLEL_TOLERANCE:
            return None

        t = self.normal.dot(self.v0 - ray.origin) / denom
        if t <= t_min or t > t_max:
            return None

        point = ray.at(t)
        if not self.contains(point):
            return None
        return Hit.from_ray(ray, t, self.normal, self.material)

    def __repr__(self) -> str:
        return f"Triangle({self.v0!r}, {self.v1!r}, {self.v2!r})"
