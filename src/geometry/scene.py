# geometry/scene.py
import math
from typing import Iterable, List, Optional
from core.ray import Ray
from core.utils import EPSILON
from core.vector import Vector3
from geometry.hittable import Hittable, Hit

class Scene:
    """
    The objects to render and the color seen where rays hit nothing.
    Objects are scanned linearly; lights are not part of the scene.
    """
    def __init__(self, objects: Iterable[Hittable] = (), background: Vector3 = None):
        self.objects: List[Hittable] = list(objects)
        self.background = background if background is not None else Vector3.zero()

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def intersect(self, ray: Ray, t_min: float = EPSILON,
                  t_max: float = math.inf) -> Optional[Hit]:
        """
        Returns the nearest hit over all objects, or None. On equal distances
        the object added first wins.
        """
        hit = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.intersect(ray, t_min, closest_so_far)
            if rec is not None and (hit is None or rec.distance < closest_so_far):
                closest_so_far = rec.distance
                hit = rec
        return hit

    def intersect_bool(self, ray: Ray, t_min: float = EPSILON,
                       t_max: float = math.inf) -> bool:
        """True if any object is hit with t_min < t <= t_max."""
        return any(obj.intersect(ray, t_min, t_max) is not None for obj in self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __repr__(self) -> str:
        return f"Scene({len(self.objects)} objects, background={self.background!r})"
