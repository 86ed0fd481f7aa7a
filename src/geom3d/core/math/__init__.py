"""Math namespace."""

from .point import Point3D  # noqa: F401
from .vector import Vector3D  # noqa: F401
