# camera/camera.py
import math
from core.errors import DegenerateGeometryError
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Pinhole camera looking from `origin` towards `target`.

    The orthonormal basis (forward, right, up) and the image plane extent are
    derived once here; the camera is not modified afterwards.
    """
    def __init__(self, origin: Vector3, target: Vector3, aspect_ratio: float,
                 up: Vector3, vfov: float):
        if not aspect_ratio > 0:
            raise DegenerateGeometryError(f"Aspect ratio must be positive, got {aspect_ratio}")
        if not 0 < vfov < math.pi:
            raise DegenerateGeometryError(f"Vertical field of view must be in (0, pi), got {vfov}")

        self.origin = origin
        self.target = target
        self.aspect_ratio = float(aspect_ratio)
        self.up_hint = up
        self.vfov = float(vfov)

        # Compute forward vector
        view = target - origin
        if view.length() == 0:
            raise DegenerateGeometryError("Camera origin and target coincide")
        self.forward = view.normalize()

        # Compute right and up vectors
        side = self.forward.cross(up)
        if side.length() < 1e-12:
            raise DegenerateGeometryError("Camera up vector is parallel to the view direction")
        self.right = side.normalize()
        self.up = self.right.cross(self.forward)

        # Image plane one unit in front of the origin
        self.half_height = math.tan(self.vfov / 2)
        self.half_width = self.half_height * self.aspect_ratio

    def generate_ray(self, u: float, v: float) -> Ray:
        """
        Ray through the normalized image position (u, v): u runs left to
        right, v runs top to bottom. The direction is not normalized.
        """
        offset_right = (2 * u - 1) * self.half_width
        offset_up = (1 - 2 * v) * self.half_height
        direction = self.forward + self.right * offset_right + self.up * offset_up
        return Ray(self.origin, direction)

    def __repr__(self) -> str:
        return (f"Camera(origin={self.origin!r}, target={self.target!r}, "
                f"aspect_ratio={self.aspect_ratio}, vfov={self.vfov})")
