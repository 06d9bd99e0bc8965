# geometry/sphere.py
import math
from typing import Optional
from core.errors import DegenerateGeometryError
from core.vector import Vector3
from core.ray import Ray
from core.utils import EPSILON
from geometry.hittable import Hittable, Hit

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if not radius > 0:
            raise DegenerateGeometryError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = float(radius)
        self.material = material

    def intersect(self, ray: Ray, t_min: float = EPSILON,
                  t_max: float = math.inf) -> Optional[Hit]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root > t_max:
                return None

        point = ray.at(root)
        outward_normal = ((point - self.center) / self.radius).normalize()
        return Hit.from_ray(ray, root, outward_normal, self.material)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"
