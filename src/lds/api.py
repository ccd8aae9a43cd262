from __future__ import annotations
import time
from dataclasses import replace
from typing import Optional, Sequence

import numpy as np

from .lds import VanDerCorput, Circle2D, Disk, Halton, Sphere3D, Hopf4D
from .lds_n import HaltonN, CylinN, SphereN, Sphere3
from .params import FIXED_BASES, KINDS, SequenceParams
from .utils.batch import halton_batch, vdc_batch


def _log(msg: str) -> None:
    print(f"[lds] {msg}")


def make_generator(kind: str, bases: Sequence[int]):
    """Construct the generator for ``kind`` from a list of bases.

    Scalar-base kinds (``vdc``, ``circle``) use ``bases[0]``. Extra bases
    given to a fixed-dimension kind are ignored.
    """
    k = (kind or "").lower()
    if k not in KINDS:
        raise ValueError(f"kind must be one of {KINDS} (got {kind!r})")
    bases = list(bases)
    need = FIXED_BASES.get(k, 1)
    if len(bases) < need:
        raise ValueError(f"kind {k!r} needs {need} bases (got {len(bases)})")
    if k == "vdc":
        return VanDerCorput(bases[0])
    if k == "circle":
        return Circle2D(bases[0])
    if k == "disk":
        return Disk(bases)
    if k == "halton":
        return Halton(bases)
    if k == "sphere":
        return Sphere3D(bases)
    if k == "sphere3_hopf":
        return Hopf4D(bases)
    if k == "sphere3":
        return Sphere3(bases)
    if k == "halton_n":
        return HaltonN(bases)
    if k == "cylin_n":
        if len(bases) < 2:
            raise ValueError(f"kind 'cylin_n' needs at least 2 bases (got {len(bases)})")
        return CylinN(bases)
    if len(bases) < 2:
        raise ValueError(f"kind 'sphere_n' needs at least 2 bases (got {len(bases)})")
    return SphereN(bases)


def sample(generator, count: int) -> np.ndarray:
    """Pop ``count`` points from ``generator`` into a float64 array.

    Scalar generators give shape ``(count,)``, point generators
    ``(count, dim)``.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative (got {count})")
    pts = [generator.pop() for _ in range(count)]
    return np.asarray(pts, dtype=np.float64)


def generate_points(params: Optional[SequenceParams] = None, **overrides) -> np.ndarray:
    """Generate ``params.count`` points starting after index ``params.seed``.

    Keyword arguments override fields of ``params`` (or of a default
    :class:`SequenceParams`). Halton-type kinds are evaluated with the numba
    batch kernels; all others pop a reseeded generator.
    """
    p = replace(params or SequenceParams(), **overrides)
    p.kind = (p.kind or "").lower()
    if p.count < 0:
        raise ValueError(f"count must be non-negative (got {p.count})")
    if p.seed < 0:
        raise ValueError(f"seed must be non-negative (got {p.seed})")
    bases = p.resolved_bases()

    t0 = time.time()
    if p.kind == "vdc":
        pts = vdc_batch(p.seed, p.count, bases[0])
    elif p.kind in ("halton", "halton_n"):
        pts = halton_batch(p.seed, p.count, bases)
    else:
        gen = make_generator(p.kind, bases)
        gen.reseed(p.seed)
        pts = sample(gen, p.count)
        if p.count == 0:
            pts = pts.reshape(0, _point_dim(p.kind, bases))
    if p.verbose:
        _log(f"{p.kind} bases={bases} seed={p.seed}: "
             f"{p.count} points in {time.time() - t0:.3f}s")
    return pts


def _point_dim(kind: str, bases: Sequence[int]) -> int:
    if kind in ("circle", "disk"):
        return 2
    if kind == "sphere":
        return 3
    if kind in ("sphere3_hopf", "sphere3"):
        return 4
    return len(bases) + 1


__all__ = ["make_generator", "sample", "generate_points"]
