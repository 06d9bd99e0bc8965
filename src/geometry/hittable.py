# geometry/hittable.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.utils import EPSILON

class Hit:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("point", "normal", "distance", "material", "front_face", "view")

    def __init__(self, point: Vector3, normal: Vector3, distance: float,
                 material, front_face: bool = True, view: Vector3 = None):
        self.point = point            # Intersection point
        self.normal = normal          # Unit normal facing the ray's origin side
        self.distance = distance      # Ray parameter at intersection
        self.material = material
        self.front_face = front_face  # Whether the hit was on the outward side
        self.view = view              # Unit vector from the point back along the ray

    @classmethod
    def from_ray(cls, ray: Ray, t: float, outward_normal: Vector3, material) -> "Hit":
        """
        Builds a hit at parameter t, flipping the outward normal so that it
        always points against the ray.
        """
        front_face = ray.direction.dot(outward_normal) < 0
        normal = outward_normal if front_face else -outward_normal
        return cls(ray.at(t), normal, t, material, front_face,
                   (-ray.direction).normalize())

    def __repr__(self) -> str:
        return (f"Hit(point={self.point!r}, normal={self.normal!r}, "
                f"distance={self.distance})")

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def intersect(self, ray: Ray, t_min: float = EPSILON,
                  t_max: float = math.inf) -> Optional[Hit]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")
