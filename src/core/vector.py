# core/vector.py
import math
from numbers import Real

class Vector3:
    """
    A 3D vector used both for geometry and for RGB colors.

    Vectors are treated as immutable values: every operation returns a new
    Vector3 and no method mutates its operand.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        # Component-wise product, used for color x reflectance.
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector in the same direction. The zero vector
        normalizes to the zero vector instead of raising.
        """
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def clamp(self, low: float = 0.0, high: float = 1.0) -> "Vector3":
        return Vector3(
            min(max(self.x, low), high),
            min(max(self.y, low), high),
            min(max(self.z, low), high)
        )

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
