"""Vector3D: a displacement or direction in 3D space."""

from __future__ import annotations

import math

from ._coords import Coords3
from .point import Point3D


class Vector3D(Coords3):
    """Displacement or direction in 3D space."""

    __slots__ = ()

    @classmethod
    def from_point3d(cls, point: Point3D) -> "Vector3D":
        """Copy a point's coordinates into a new vector."""
        if not isinstance(point, Point3D):
            raise TypeError(f"expected Point3D, got {type(point).__name__}")
        return cls(point.x, point.y, point.z)

    def length_squared(self) -> float:
        """Return x*x + y*y + z*z."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.length_squared())

    def unit(self) -> "Vector3D":
        """Return self / length; a zero vector gives nan components."""
        return self / self.length()

    def dot(self, other: "Vector3D") -> float:
        """Return the scalar (dot) product."""
        _require_vector(other)
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3D") -> "Vector3D":
        """Right-handed cross product; zero for parallel inputs."""
        _require_vector(other)
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


def _require_vector(other: object) -> None:
    if not isinstance(other, Vector3D):
        raise TypeError(f"expected Vector3D, got {type(other).__name__}")
