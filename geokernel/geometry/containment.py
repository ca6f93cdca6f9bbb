"""
Point-in-triangle containment for points already known to lie in the
triangle's plane.

Both tests take, at every vertex, the cross product of the outgoing edge with
the vector from that vertex to the query point. Inside the triangle all three
products point the same way. Agreement is checked axis by axis with strict
signs: a component of exactly zero agrees with anything, so points on an edge
or vertex count as inside. No tolerance is applied.
"""

from __future__ import annotations

from typing import Tuple

from geokernel.geometry.core import Vector3


def _opposite_signs(a: float, b: float) -> bool:
    return (a > 0.0 and b < 0.0) or (a < 0.0 and b > 0.0)


def is_same_direction(a: Vector3, b: Vector3) -> bool:
    """False iff *a* and *b* have strictly opposite signs on some axis."""
    for ca, cb in zip(a, b):
        if _opposite_signs(ca, cb):
            return False
    return True


def is_point_in_triangle(src: Vector3, p1: Vector3, p2: Vector3, p3: Vector3) -> bool:
    """Containment of *src*, assumed coplanar with the triangle p1-p2-p3."""
    c1 = (p2 - p1).cross(src - p1)
    c2 = (p3 - p2).cross(src - p2)
    c3 = (p1 - p3).cross(src - p3)
    if not is_same_direction(c1, c2):
        return False
    if not is_same_direction(c2, c3):
        return False
    return is_same_direction(c3, c1)


def _cross_xz(origin: Vector3, edge_end: Vector3, src: Vector3) -> float:
    # 2D cross product in the (x, z) plane; y is dropped.
    ex, ez = edge_end.x - origin.x, edge_end.z - origin.z
    sx, sz = src.x - origin.x, src.z - origin.z
    return ex * sz - ez * sx


def _xz_crosses(src: Vector3, p1: Vector3, p2: Vector3, p3: Vector3) -> Tuple[float, float, float]:
    return (_cross_xz(p1, p2, src), _cross_xz(p2, p3, src), _cross_xz(p3, p1, src))


def is_point_in_triangle_xz(src: Vector3, p1: Vector3, p2: Vector3, p3: Vector3) -> bool:
    """Containment of *src* in the triangle's footprint on the XZ plane."""
    c1, c2, c3 = _xz_crosses(src, p1, p2, p3)
    if _opposite_signs(c1, c2):
        return False
    if _opposite_signs(c2, c3):
        return False
    return not _opposite_signs(c3, c1)
