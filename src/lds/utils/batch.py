from __future__ import annotations
import numpy as np
import numba as nb

from ..lds import vdc as _vdc


@nb.njit(parallel=True, cache=True)
def vdc_batch(start: int, count: int, base: int):
    """Return ``count`` Van der Corput values of base ``base``.

    Entry ``i`` is ``vdc(start + 1 + i, base)``, the same values a
    ``VanDerCorput(base)`` reseeded to ``start`` yields over ``count`` pops.
    """
    out = np.empty(count, np.float64)
    for i in nb.prange(count):
        out[i] = _vdc(start + 1 + i, base)
    return out


@nb.njit(parallel=True, cache=True)
def _halton_fill(start, bases, out):
    n, dim = out.shape
    for i in nb.prange(n):
        for j in range(dim):
            out[i, j] = _vdc(start + 1 + i, bases[j])


def halton_batch(start: int, count: int, bases) -> np.ndarray:
    """Pre-compute ``count`` Halton points, shape ``(count, len(bases))``.

    Row ``i`` equals the ``i+1``-th pop of ``HaltonN(bases)`` after
    ``reseed(start)``.
    """
    b = np.ascontiguousarray(bases, dtype=np.int64)
    out = np.empty((count, b.shape[0]), np.float64)
    _halton_fill(start, b, out)
    return out


__all__ = ["vdc_batch", "halton_batch"]
