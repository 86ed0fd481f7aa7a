"""Projectile under uniform gravity, integrated with symplectic Euler."""

from __future__ import annotations

from geom3d import Point3D, Vector3D


if __name__ == "__main__":
    start = Point3D(0.0, 0.0, 0.0)
    pos = Vector3D.from_point3d(start)
    vel = Vector3D(10.0, 10.0, 0.0)
    g = Vector3D(0.0, -9.81, 0.0)

    dt = 0.001
    t = 0.0
    while True:
        vel += g * dt
        pos += vel * dt
        t += dt
        if pos.y < 0.0:
            break

    # Analytic expectation: range = 2 * vx * vy / |g| ~= 20.39
    print(f"flight time: {t:.3f} s")
    print(f"landing x:   {pos.x:.3f} m")
    print(f"speed:       {vel.length():.3f} m/s")
