"""A three-component vector that satisfies the numeric capabilities."""
import math
from dataclasses import dataclass


@dataclass
class Vector3D:
    """A 3D vector with component-wise arithmetic.

    Vectors are ordered by magnitude, so two distinct vectors of equal
    length are neither `<` nor `>` each other.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: 'Vector3D') -> 'Vector3D':
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: 'Vector3D') -> 'Vector3D':
        if not isinstance(other, Vector3D):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other: 'Vector3D') -> 'Vector3D':
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: 'Vector3D') -> 'Vector3D':
        """Component-wise (Hadamard) product."""
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x * other.x, self.y * other.y, self.z * other.z)

    def __truediv__(self, count: int) -> 'Vector3D':
        return Vector3D(self.x / count, self.y / count, self.z / count)

    def __lt__(self, other: 'Vector3D') -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.magnitude() < other.magnitude()

    def __gt__(self, other: 'Vector3D') -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.magnitude() > other.magnitude()

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def __str__(self):
        return f'({self.x:g},{self.y:g},{self.z:g})'
