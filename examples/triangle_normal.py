"""Unit normal and area of a triangle from three points."""

from __future__ import annotations

from geom3d import Point3D, Vector3D


if __name__ == "__main__":
    a = Point3D(0.0, 0.0, 0.0)
    b = Point3D(2.0, 0.0, 0.0)
    c = Point3D(0.0, 3.0, 0.0)

    ab = Vector3D.from_point3d(b - a)
    ac = Vector3D.from_point3d(c - a)
    n = ab.cross(ac)

    print("normal:", n.unit())
    print("area:  ", 0.5 * n.length())
    # Degenerate (collinear) input: cross is zero, unit() is nan.
    print("degenerate:", ab.cross(ab * 2.0).unit())
