"""Point3D: a position in 3D space."""

from __future__ import annotations

from ._coords import Coords3


class Point3D(Coords3):
    """Position in 3D space.

    Supports component-wise + and - with other points, scaling by a real
    scalar (* and /) and negation. Mixing with Vector3D raises TypeError;
    use Vector3D.from_point3d for an explicit conversion.
    """

    __slots__ = ()
