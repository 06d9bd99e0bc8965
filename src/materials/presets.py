# materials/presets.py
from core.vector import Vector3
from materials.material import Material

class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Vector3(0.9, 0.2, 0.2)
    ORANGE = Vector3(0.9, 0.6, 0.1)
    YELLOW = Vector3(0.9, 0.9, 0.1)

    # Cool colors
    BLUE = Vector3(0.2, 0.3, 0.9)
    GREEN = Vector3(0.2, 0.8, 0.2)
    PURPLE = Vector3(0.6, 0.2, 0.8)

    # Neutral colors
    WHITE = Vector3(0.9, 0.9, 0.9)
    GRAY = Vector3(0.5, 0.5, 0.5)
    BLACK = Vector3(0.1, 0.1, 0.1)

class MaterialPresets:
    """Predefined Phong materials."""

    @staticmethod
    def matte(color: Vector3) -> Material:
        """No highlight and no reflection."""
        return Material(color, ambient=color * 0.1)

    @staticmethod
    def plastic(color: Vector3, shininess: float = 32.0) -> Material:
        return Material(color, specular=Vector3(0.5, 0.5, 0.5),
                        specular_exponent=shininess,
                        mirror=Vector3(0.05, 0.05, 0.05), ambient=color * 0.1)

    @staticmethod
    def mirror(tint: Vector3 = None) -> Material:
        if tint is None:
            tint = Vector3(0.9, 0.9, 0.9)
        return Material(Vector3(0.05, 0.05, 0.05), specular=Vector3(0.8, 0.8, 0.8),
                        specular_exponent=200.0, mirror=tint)

    @staticmethod
    def metal(color: Vector3) -> Material:
        """Colored reflection with a broad highlight."""
        return Material(color * 0.3, specular=color, specular_exponent=64.0,
                        mirror=color * 0.6, ambient=color * 0.05)

    @staticmethod
    def gold() -> Material:
        return MaterialPresets.metal(Vector3(1.0, 0.78, 0.34))

    @staticmethod
    def silver() -> Material:
        return MaterialPresets.metal(Vector3(0.95, 0.93, 0.88))
