from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geokernel.geometry.core import Vector3

# Near-zero tolerance shared by every equality/containment comparison.
NEAR_EPS = 1e-3

# Length below which a vector cannot be normalized.
EPS_POS = 1e-12


def is_near_equal_zero(value: float, *, eps: float = NEAR_EPS) -> bool:
    """True iff *value* lies strictly inside ``(-eps, +eps)``."""
    return -eps < value < eps


def is_near_equal(p1: "Vector3", p2: "Vector3", *, eps: float = NEAR_EPS) -> bool:
    """True iff the squared distance between *p1* and *p2* is near zero."""
    return is_near_equal_zero((p2 - p1).length_squared(), eps=eps)
