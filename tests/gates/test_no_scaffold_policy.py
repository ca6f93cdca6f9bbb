from __future__ import annotations

from pathlib import Path

from scripts.no_scaffold_guard import SCAN_PATHS, run_guard


def test_guard_scans_the_geometry_package() -> None:
    root = Path(__file__).resolve().parents[2]
    assert "geokernel/geometry" in SCAN_PATHS
    assert (root / "geokernel" / "geometry" / "containment.py").is_file()


def test_guard_flags_unfinished_markers(tmp_path: Path) -> None:
    pkg = tmp_path / "geokernel" / "geometry"
    pkg.mkdir(parents=True)
    (pkg / "containment.py").write_text(
        "def is_point_in_triangle_xz(src, p1, p2, p3):\n    raise NotImplementedError\n",
        encoding="utf-8",
    )
    (pkg / "plane.py").write_text("def build_plane(p1, p2, p3):\n    return None\n", encoding="utf-8")
    violations = run_guard(tmp_path)
    assert len(violations) == 1
    assert "containment.py:2" in violations[0]


def test_no_scaffold_policy() -> None:
    root = Path(__file__).resolve().parents[2]
    violations = run_guard(root)
    assert not violations, "No-scaffold policy violations:\n" + "\n".join(violations)
