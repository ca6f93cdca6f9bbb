"""
geokernel geometry value types

Small immutable value aggregates shared by every kernel routine: a 3D vector
and the implicit-form plane ``n·p + d = 0``. Both are frozen dataclasses, so
they are hashable, freely copied and never mutated after construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from geokernel.geometry.tolerance import EPS_POS


class DegenerateGeometryError(ValueError):
    """Raised when an operation needs a non-degenerate vector and gets a zero-length one."""


# =============================================================================
# Vector and Point Classes
# =============================================================================

@dataclass(frozen=True)
class Vector3:
    """3D vector for positions, directions and normals."""
    x: float
    y: float
    z: float

    def __add__(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> 'Vector3':
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> 'Vector3':
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> 'Vector3':
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> 'Vector3':
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: 'Vector3') -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Vector3') -> 'Vector3':
        """Cross product."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def length_squared(self) -> float:
        """Squared length (faster when comparing distances)."""
        return self.x**2 + self.y**2 + self.z**2

    def try_normalize(self) -> Optional['Vector3']:
        """Return unit vector, or None when the length is effectively zero."""
        L = self.length()
        if L <= EPS_POS:
            return None
        return self / L

    def normalize(self) -> 'Vector3':
        """Return unit vector; raises DegenerateGeometryError for a zero-length vector."""
        unit = self.try_normalize()
        if unit is None:
            raise DegenerateGeometryError(f"cannot normalize zero-length vector {self.to_tuple()}")
        return unit

    def to_array(self) -> np.ndarray:
        """Convert to numpy array."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @staticmethod
    def from_array(arr: Union[np.ndarray, Sequence[float]]) -> 'Vector3':
        a = np.asarray(arr, dtype=float).reshape(-1)
        if a.shape != (3,):
            raise ValueError(f"Vector3 requires exactly 3 components, got shape {a.shape}")
        return Vector3(float(a[0]), float(a[1]), float(a[2]))

    @staticmethod
    def zero() -> 'Vector3':
        return Vector3(0.0, 0.0, 0.0)

    # Y is height: the XZ helpers project and drop along this axis.
    @staticmethod
    def up() -> 'Vector3':
        return Vector3(0.0, 1.0, 0.0)

    @staticmethod
    def down() -> 'Vector3':
        return Vector3(0.0, -1.0, 0.0)


# Alias for clarity
Point3 = Vector3

VectorLike = Union[Vector3, np.ndarray, Sequence[float]]


def as_vector3(value: VectorLike) -> Vector3:
    """Coerce a tuple, list or numpy array into a Vector3; Vector3 passes through."""
    if isinstance(value, Vector3):
        return value
    return Vector3.from_array(value)


# =============================================================================
# Plane
# =============================================================================

@dataclass(frozen=True)
class Plane:
    """
    Implicit plane ``nx*x + ny*y + nz*z + d = 0``.

    The normal is unit length when built by ``build_plane``. A plane assembled
    by hand keeps whatever normal it was given, so ``signed_distance`` is only
    a true distance if the caller normalized it.
    """
    nx: float
    ny: float
    nz: float
    d: float

    @property
    def normal(self) -> Vector3:
        return Vector3(self.nx, self.ny, self.nz)

    def signed_distance(self, point: Vector3) -> float:
        """Evaluate ``n·point + d``; positive on the side the normal points to."""
        return self.nx * point.x + self.ny * point.y + self.nz * point.z + self.d

    def to_array(self) -> np.ndarray:
        return np.array([self.nx, self.ny, self.nz, self.d], dtype=float)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.nx, self.ny, self.nz, self.d)

    @staticmethod
    def from_array(arr: Union[np.ndarray, Sequence[float]]) -> 'Plane':
        a = np.asarray(arr, dtype=float).reshape(-1)
        if a.shape != (4,):
            raise ValueError(f"Plane requires exactly 4 components, got shape {a.shape}")
        return Plane(float(a[0]), float(a[1]), float(a[2]), float(a[3]))
