#!/usr/bin/env python3
"""
ex01_sphere_points

Generates points on the 4-sphere with SphereN and saves them, together with
the generator settings, to sphere_points.json in this folder.
"""
import sys
from pathlib import Path


def ensure_repo_on_path():
    here = Path(__file__).resolve().parent
    src = here.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


def main():
    ensure_repo_on_path()
    import numpy as np
    from lds import SequenceParams, generate_points, save_points_json

    params = SequenceParams(
        kind="sphere_n",
        dim=4,
        seed=0,
        count=2048,
        verbose=True,
    )
    pts = generate_points(params)
    norms = np.linalg.norm(pts, axis=1)
    print(f"Norm range: [{norms.min():.12f}, {norms.max():.12f}]")
    print(f"Mean point: {np.round(pts.mean(axis=0), 4)}")

    out = Path(__file__).resolve().parent / "sphere_points.json"
    save_path = save_points_json(pts, str(out), params)
    print(f"Saved points to: {save_path}")


if __name__ == "__main__":
    main()
