from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from geokernel.geometry.core import Vector3


@dataclass(frozen=True)
class RayHit:
    point: Vector3
    t: float


def _det3(c0: Vector3, c1: Vector3, c2: Vector3) -> float:
    # Determinant of the 3x3 matrix with columns c0, c1, c2 (scalar triple product).
    return c0.dot(c1.cross(c2))


def intersect_ray_with_triangle(
    origin: Vector3,
    direction: Vector3,
    p1: Vector3,
    p2: Vector3,
    p3: Vector3,
) -> Optional[RayHit]:
    """
    One-sided ray/triangle test solved with Cramer's rule.

    The system ``p1 + u*edge1 + v*edge2 = origin + t*direction`` is solved
    with ``det[edge1, edge2, -direction]`` as the common denominator. Only
    rays that see the triangle wound p1 -> p2 -> p3 counter-clockwise (a
    positive determinant) can hit; back faces and rays parallel to the
    triangle return None. Callers needing a two-sided test run it again with
    p2 and p3 swapped.

    ``t`` is not clamped, so a triangle behind the origin is still reported
    with a negative ``t``.
    """
    edge1 = p2 - p1
    edge2 = p3 - p1
    neg_dir = -direction
    det = _det3(edge1, edge2, neg_dir)
    if det <= 0.0:
        return None

    to_p1 = origin - p1
    u = _det3(to_p1, edge2, neg_dir) / det
    if u < 0.0 or u > 1.0:
        return None
    v = _det3(edge1, to_p1, neg_dir) / det
    if v < 0.0 or (u + v) > 1.0:
        return None

    t = _det3(edge1, edge2, to_p1) / det
    return RayHit(point=origin + direction * t, t=t)
