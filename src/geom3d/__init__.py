"""Immutable 3D point and vector value types."""

from __future__ import annotations

__version__ = "0.1.0"

from .core.math import Point3D, Vector3D  # noqa: E402,F401
