from __future__ import annotations

import random
import time

from geokernel.geometry import (
    Vector3,
    intersect_ray_with_triangle,
    nearest_point_on_line,
    nearest_point_on_unit_line,
)


def _random_vector(rng: random.Random) -> Vector3:
    return Vector3(rng.uniform(-10.0, 10.0), rng.uniform(-10.0, 10.0), rng.uniform(-10.0, 10.0))


def main() -> int:
    rng = random.Random(7)
    n = 200_000
    points = [_random_vector(rng) for _ in range(n)]
    origin = Vector3(1.0, 2.0, 3.0)
    direction = Vector3(0.3, -0.4, 1.2)
    unit = direction.normalize()
    p1, p2, p3 = Vector3(-5.0, -5.0, 0.0), Vector3(5.0, -5.0, 0.0), Vector3(0.0, 5.0, 0.0)
    down = Vector3(0.0, 0.0, -1.0)

    t0 = time.perf_counter()
    for p in points:
        nearest_point_on_line(p, origin, direction)
    t1 = time.perf_counter()
    for p in points:
        nearest_point_on_unit_line(p, origin, unit)
    t2 = time.perf_counter()
    hits = 0
    for p in points:
        if intersect_ray_with_triangle(p, down, p1, p2, p3) is not None:
            hits += 1
    t3 = time.perf_counter()

    print("bench_nearest_point")
    print(f"  calls: {n}")
    print(f"  nearest_point_on_line_s: {t1 - t0:.4f}")
    print(f"  nearest_point_on_unit_line_s: {t2 - t1:.4f}")
    print(f"  intersect_ray_with_triangle_s: {t3 - t2:.4f}")
    print(f"  triangle_hits: {hits}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
