# materials/material.py
from core.errors import DegenerateGeometryError
from core.vector import Vector3

class Material:
    """
    Phong-style reflectance shared by every object that uses it.

    diffuse, specular, mirror and ambient are RGB reflectances multiplied
    component-wise with incoming light; specular_exponent controls how tight
    the highlight is. A material is never modified once created.
    """
    __slots__ = ("diffuse", "specular", "specular_exponent", "mirror", "ambient")

    def __init__(self, diffuse: Vector3, specular: Vector3 = None,
                 specular_exponent: float = 0.0, mirror: Vector3 = None,
                 ambient: Vector3 = None):
        if specular_exponent < 0:
            raise DegenerateGeometryError(
                f"Specular exponent must be >= 0, got {specular_exponent}")
        self.diffuse = diffuse
        self.specular = specular if specular is not None else Vector3.zero()
        self.specular_exponent = float(specular_exponent)
        self.mirror = mirror if mirror is not None else Vector3.zero()
        self.ambient = ambient if ambient is not None else Vector3.zero()

    @property
    def is_reflective(self) -> bool:
        return not self.mirror.is_zero()

    def __repr__(self) -> str:
        return (f"Material(diffuse={self.diffuse!r}, specular={self.specular!r}, "
                f"specular_exponent={self.specular_exponent}, mirror={self.mirror!r}, "
                f"ambient={self.ambient!r})")
