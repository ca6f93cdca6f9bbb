from __future__ import annotations

import logging
from typing import Optional

from geokernel.geometry.core import Vector3

logger = logging.getLogger(__name__)


def nearest_point_on_unit_line(src: Vector3, origin: Vector3, unit_direction: Vector3) -> Vector3:
    """
    Project *src* onto the infinite line through *origin*.

    *unit_direction* must already be unit length; it is used as-is.
    """
    return origin + unit_direction * (src - origin).dot(unit_direction)


def nearest_point_on_line(src: Vector3, origin: Vector3, direction: Vector3) -> Optional[Vector3]:
    """Like ``nearest_point_on_unit_line`` but normalizes *direction* first.

    Returns None when *direction* has zero length.
    """
    unit = direction.try_normalize()
    if unit is None:
        logger.debug("nearest_point_on_line: zero-length direction %s", direction)
        return None
    return nearest_point_on_unit_line(src, origin, unit)


def nearest_point_on_segment(src: Vector3, p1: Vector3, p2: Vector3) -> Vector3:
    """Closest point to *src* on the segment p1-p2, clamped to its end points."""
    seg = p2 - p1
    seg_len_sq = seg.length_squared()
    unit = seg.try_normalize()
    if unit is None:
        logger.debug("nearest_point_on_segment: degenerate segment at %s", p1)
        return p1

    s = (src - p1).dot(unit)
    if s <= 0.0:
        return p1
    if s * s >= seg_len_sq:
        return p2
    return p1 + unit * s
