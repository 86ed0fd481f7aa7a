"""Shared storage and arithmetic for three-coordinate value types.

Conventions:
- Coordinates and scalars are real numbers (numbers.Real) stored as Python
  floats (IEEE 754 binary64); other types raise TypeError.
- Integers beyond the double range become +-inf rather than raising.
- No range validation: NaN and +-inf are accepted and propagate.
- Division follows IEEE 754, so x / 0.0 is +-inf and 0.0 / 0.0 is nan.
- Operands must be of the same concrete type; Point3D and Vector3D do not mix.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray


ArrayF = NDArray[np.float64]
C = TypeVar("C", bound="Coords3")


def to_float(value: Any) -> float:
    """Convert a real scalar to float, saturating huge integers to +-inf."""
    if not isinstance(value, Real):
        raise TypeError(f"expected a real number, got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


@dataclass(frozen=True, slots=True, eq=False)
class Coords3:
    x: float
    y: float
    z: float

    # Keep numpy scalars from broadcasting over us; `np.float64(2) * p`
    # falls through to __rmul__.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", to_float(self.x))
        object.__setattr__(self, "y", to_float(self.y))
        object.__setattr__(self, "z", to_float(self.z))

    @classmethod
    def zeroes(cls: type[C]) -> C:
        """Return the all-zero value (0, 0, 0)."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def ones(cls: type[C]) -> C:
        """Return the all-one value (1, 1, 1)."""
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def from_array(cls: type[C], arr: ArrayLike) -> C:
        """Build from an array-like of shape (3,)."""
        a = np.asarray(arr, dtype=np.float64)
        if a.shape != (3,):
            raise ValueError(f"{cls.__name__} array must have shape (3,)")
        return cls(a[0], a[1], a[2])

    def as_array(self) -> ArrayF:
        """Return the coordinates as a float64 array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def isclose(
        self, other: C, rel_tol: float = 1e-9, abs_tol: float = 0.0
    ) -> bool:
        """Component-wise math.isclose against a value of the same type."""
        if not isinstance(other, type(self)):
            raise TypeError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return (
            math.isclose(self.x, other.x, rel_tol=rel_tol, abs_tol=abs_tol)
            and math.isclose(self.y, other.y, rel_tol=rel_tol, abs_tol=abs_tol)
            and math.isclose(self.z, other.z, rel_tol=rel_tol, abs_tol=abs_tol)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.x, self.y, self.z))

    def __add__(self: C, other: Any) -> C:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self: C, other: Any) -> C:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self: C, s: Any) -> C:
        if not isinstance(s, Real):
            return NotImplemented
        s = to_float(s)
        return type(self)(self.x * s, self.y * s, self.z * s)

    def __rmul__(self: C, s: Any) -> C:
        return self.__mul__(s)

    def __truediv__(self: C, s: Any) -> C:
        if not isinstance(s, Real):
            return NotImplemented
        s = to_float(s)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            q = self.as_array() / s
        return type(self)(q[0], q[1], q[2])

    # In-place forms rebind the name to a new value; other references to the
    # previous value are left untouched.
    def __iadd__(self: C, other: Any) -> C:
        return self.__add__(other)

    def __isub__(self: C, other: Any) -> C:
        return self.__sub__(other)

    def __imul__(self: C, s: Any) -> C:
        return self.__mul__(s)

    def __itruediv__(self: C, s: Any) -> C:
        return self.__truediv__(s)

    def __neg__(self: C) -> C:
        return type(self)(-self.x, -self.y, -self.z)
