# lights/light.py
from core.ray import Ray
from core.utils import EPSILON, reflect
from core.vector import Vector3
from geometry.hittable import Hit

class Light:
    """
    Abstract light source. Subclasses must implement illuminate().
    """
    def __init__(self, intensity: Vector3):
        self.intensity = intensity

    def illuminate(self, hit: Hit, scene, epsilon: float = EPSILON) -> Vector3:
        """
        Returns the color this light adds at the hit point. `scene` is used
        for shadow tests.
        """
        raise NotImplementedError("illuminate() must be implemented by subclasses.")

class AmbientLight(Light):
    """
    Uniform environment light, independent of geometry and never shadowed.
    """
    def illuminate(self, hit: Hit, scene, epsilon: float = EPSILON) -> Vector3:
        return hit.material.ambient * self.intensity

    def __repr__(self) -> str:
        return f"AmbientLight(intensity={self.intensity!r})"

class PointLight(Light):
    """
    Light emitted from a single position with no distance falloff.
    Contributes Phong diffuse and specular terms unless something lies
    between the hit point and the light.
    """
    def __init__(self, intensity: Vector3, position: Vector3):
        super().__init__(intensity)
        self.position = position

    def illuminate(self, hit: Hit, scene, epsilon: float = EPSILON) -> Vector3:
        to_light = self.position - hit.point
        distance = to_light.length()
        if distance <= epsilon:
            return Vector3.zero()
        light_dir = to_light / distance

        shadow_ray = Ray(hit.point, light_dir).offset(epsilon)
        if scene.intersect_bool(shadow_ray, epsilon, distance - epsilon):
            return Vector3.zero()

        material = hit.material
        diffuse = max(0.0, hit.normal.dot(light_dir))
        color = material.diffuse * self.intensity * diffuse

        highlight = max(0.0, reflect(light_dir, hit.normal).dot(hit.view))
        specular = highlight ** material.specular_exponent
        return color + material.specular * self.intensity * specular

    def __repr__(self) -> str:
        return f"PointLight(intensity={self.intensity!r}, position={self.position!r})"
