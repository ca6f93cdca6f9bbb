from __future__ import annotations

import pytest

from geokernel.geometry.core import Vector3
from geokernel.geometry.ray import intersect_ray_with_triangle

P1 = Vector3(0.0, 0.0, 0.0)
P2 = Vector3(1.0, 0.0, 0.0)
P3 = Vector3(0.0, 1.0, 0.0)
DOWN = Vector3(0.0, 0.0, -1.0)


def test_ray_hits_front_face() -> None:
    hit = intersect_ray_with_triangle(Vector3(0.25, 0.25, 1.0), DOWN, P1, P2, P3)
    assert hit is not None
    assert hit.point.to_tuple() == pytest.approx((0.25, 0.25, 0.0))
    assert hit.t == pytest.approx(1.0)


def test_ray_outside_triangle_misses() -> None:
    assert intersect_ray_with_triangle(Vector3(2.0, 2.0, 1.0), DOWN, P1, P2, P3) is None
    assert intersect_ray_with_triangle(Vector3(0.6, 0.6, 1.0), DOWN, P1, P2, P3) is None
    assert intersect_ray_with_triangle(Vector3(-0.1, 0.5, 1.0), DOWN, P1, P2, P3) is None


def test_back_face_is_culled() -> None:
    up = Vector3(0.0, 0.0, 1.0)
    assert intersect_ray_with_triangle(Vector3(0.25, 0.25, -1.0), up, P1, P2, P3) is None
    # Reversing the winding turns the same ray into a front-face hit.
    hit = intersect_ray_with_triangle(Vector3(0.25, 0.25, -1.0), up, P1, P3, P2)
    assert hit is not None
    assert hit.t == pytest.approx(1.0)


def test_parallel_ray_misses() -> None:
    assert intersect_ray_with_triangle(Vector3(-1.0, 0.25, 0.0), Vector3(1.0, 0.0, 0.0), P1, P2, P3) is None


def test_edges_and_vertices_count_as_hits() -> None:
    on_edge = intersect_ray_with_triangle(Vector3(0.5, 0.5, 2.0), DOWN, P1, P2, P3)
    assert on_edge is not None
    assert on_edge.point.to_tuple() == pytest.approx((0.5, 0.5, 0.0))
    at_vertex = intersect_ray_with_triangle(Vector3(0.0, 0.0, 2.0), DOWN, P1, P2, P3)
    assert at_vertex is not None
    assert at_vertex.t == pytest.approx(2.0)


def test_t_scales_with_direction_length_and_may_be_negative() -> None:
    hit = intersect_ray_with_triangle(Vector3(0.25, 0.25, 1.0), Vector3(0.0, 0.0, -2.0), P1, P2, P3)
    assert hit is not None
    assert hit.t == pytest.approx(0.5)
    assert hit.point.z == pytest.approx(0.0)

    behind = intersect_ray_with_triangle(Vector3(0.25, 0.25, -1.0), DOWN, P1, P2, P3)
    assert behind is not None
    assert behind.t == pytest.approx(-1.0)


def test_oblique_ray_on_tilted_triangle() -> None:
    a = Vector3(0.0, 0.0, 0.0)
    b = Vector3(2.0, 0.0, 1.0)
    c = Vector3(0.0, 2.0, 1.0)
    origin = Vector3(0.5, 0.5, 5.0)
    direction = Vector3(0.1, 0.1, -1.0)
    hit = intersect_ray_with_triangle(origin, direction, a, b, c)
    assert hit is not None
    # plane of the triangle: z = (x + y) / 2
    assert hit.point.z == pytest.approx((hit.point.x + hit.point.y) / 2.0)
