"""Vector mathematics for the 2D stick simulation."""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple

EPSILON = 1e-10


@dataclass
class Vector2:
    """2D vector in canvas coordinates (x right, y down)."""
    x: float = 0.0
    y: float = 0.0

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def as_int_tuple(self) -> Tuple[int, int]:
        """Rounded pixel coordinates for pygame draw calls."""
        return (int(round(self.x)), int(round(self.y)))

    def magnitude(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance_to(self, other: Vector2) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def normalized(self) -> Vector2:
        """Return unit vector in same direction.

        A zero-length vector has no direction; the zero vector is returned.
        """
        mag = self.magnitude()
        if mag < EPSILON:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / mag, self.y / mag)

    def heading(self) -> float:
        """Return angle of vector (radians)."""
        return math.atan2(self.y, self.x)

    def perpendicular(self) -> Vector2:
        """Return perpendicular vector (90 degrees CCW)."""
        return Vector2(-self.y, self.x)

    def copy(self) -> Vector2:
        """Return a copy of this vector."""
        return Vector2(self.x, self.y)

    # Operator overloads
    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __iadd__(self, other: Vector2) -> Vector2:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2) -> Vector2:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: float) -> Vector2:
        self.x *= scalar
        self.y *= scalar
        return self

    def __repr__(self) -> str:
        return f"Vector2({self.x:.4f}, {self.y:.4f})"


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))
