"""CLI entrypoint: print version and public types."""

from __future__ import annotations

from . import Point3D, Vector3D, __version__


def main() -> int:
    print(f"geom3d v{__version__}")
    print(f"types: {Point3D.__name__}, {Vector3D.__name__}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
