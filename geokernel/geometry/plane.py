from __future__ import annotations

import logging
from typing import Optional

from geokernel.geometry.core import Plane, Vector3
from geokernel.geometry.ray import RayHit
from geokernel.geometry.tolerance import NEAR_EPS, is_near_equal_zero

logger = logging.getLogger(__name__)


def build_plane(p1: Vector3, p2: Vector3, p3: Vector3) -> Optional[Plane]:
    """
    Plane through three points, normal oriented by the winding p1 -> p2 -> p3.

    Returns None when the points are collinear or coincident, since no unique
    normal exists.
    """
    n = (p2 - p1).cross(p3 - p1).try_normalize()
    if n is None:
        logger.debug("build_plane: collinear points %s %s %s", p1, p2, p3)
        return None
    return Plane(n.x, n.y, n.z, -n.dot(p1))


def is_point_on_plane(plane: Plane, point: Vector3, *, eps: float = NEAR_EPS) -> bool:
    return is_near_equal_zero(plane.signed_distance(point), eps=eps)


def intersect_ray_with_plane(
    plane: Plane,
    origin: Vector3,
    direction: Vector3,
    *,
    eps: float = NEAR_EPS,
) -> Optional[RayHit]:
    """
    Intersect the line ``origin + t*direction`` with *plane*.

    Hits behind the origin (t < 0) are returned as well; callers that only
    want forward hits check ``hit.t >= 0``. ``t`` is a distance only when
    *direction* is unit length. Returns None when the direction is parallel
    to the plane (or the plane normal is degenerate).
    """
    denom = plane.normal.dot(direction)
    if is_near_equal_zero(denom, eps=eps):
        return None
    t = -plane.signed_distance(origin) / denom
    return RayHit(point=origin + direction * t, t=t)


def intersect_ray_with_plane_xz(plane: Plane, origin: Vector3, *, eps: float = NEAR_EPS) -> Optional[Vector3]:
    """Point on *plane* straight above/below *origin* (same x and z)."""
    # ax + by + cz + d = 0  ->  y = -(ax + cz + d) / b
    if is_near_equal_zero(plane.ny, eps=eps):
        return None
    y = -(plane.nx * origin.x + plane.nz * origin.z + plane.d) / plane.ny
    return Vector3(origin.x, y, origin.z)
