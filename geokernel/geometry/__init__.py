"""
geokernel Geometry Module

Stateless 3D primitives: plane construction and classification, ray/plane
and ray/triangle intersection, nearest points on lines and segments, and
point-in-triangle containment.
"""

from geokernel.geometry.tolerance import (
    EPS_POS,
    NEAR_EPS,
    is_near_equal,
    is_near_equal_zero,
)
from geokernel.geometry.core import (
    DegenerateGeometryError,
    Plane,
    Point3,
    Vector3,
    as_vector3,
)
from geokernel.geometry.ray import RayHit, intersect_ray_with_triangle
from geokernel.geometry.plane import (
    build_plane,
    intersect_ray_with_plane,
    intersect_ray_with_plane_xz,
    is_point_on_plane,
)
from geokernel.geometry.nearest import (
    nearest_point_on_line,
    nearest_point_on_segment,
    nearest_point_on_unit_line,
)
from geokernel.geometry.containment import (
    is_point_in_triangle,
    is_point_in_triangle_xz,
    is_same_direction,
)

__all__ = [
    "EPS_POS",
    "NEAR_EPS",
    "is_near_equal",
    "is_near_equal_zero",
    "DegenerateGeometryError",
    "Plane",
    "Point3",
    "Vector3",
    "as_vector3",
    "RayHit",
    "intersect_ray_with_triangle",
    "build_plane",
    "intersect_ray_with_plane",
    "intersect_ray_with_plane_xz",
    "is_point_on_plane",
    "nearest_point_on_line",
    "nearest_point_on_segment",
    "nearest_point_on_unit_line",
    "is_point_in_triangle",
    "is_point_in_triangle_xz",
    "is_same_direction",
]
