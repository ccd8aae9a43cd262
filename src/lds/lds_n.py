from __future__ import annotations
import math
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple, Union
import numpy as np

from .lds import Circle2D, Sphere3D, VanDerCorput

# Grid on [0, pi] used to invert the polar-angle CDFs by interpolation
X = np.linspace(0.0, math.pi, 300)
NEG_COSINE = -np.cos(X)
SINE = np.sin(X)
HALF_PI = math.pi / 2.0


@lru_cache(maxsize=None)
def get_tp(n: int) -> np.ndarray:
    """Return the antiderivative of ``sin(x)**n`` sampled on :data:`X`.

    Uses the reduction formula
    ``tp(n) = ((n - 1) * tp(n - 2) - cos(x) * sin(x)**(n - 1)) / n``
    with ``tp(0) = x`` and ``tp(1) = -cos(x)``. The returned array is shared
    between callers and marked read-only.
    """
    if n == 0:
        tp = X
    elif n == 1:
        tp = NEG_COSINE
    else:
        tp = ((n - 1) * get_tp(n - 2) + NEG_COSINE * SINE ** (n - 1)) / n
    tp = np.array(tp, dtype=np.float64)
    tp.flags.writeable = False
    return tp


F2 = get_tp(2)  # (x - cos(x) sin(x)) / 2, spans [0, pi/2]


class HaltonN:
    """Halton sequence generator of arbitrary dimension.

    One independent :class:`VanDerCorput` stream per entry of ``bases``;
    every :meth:`pop` advances all of them by one step.
    """

    def __init__(self, bases: Sequence[int]) -> None:
        self.vdcs = [VanDerCorput(b) for b in bases]

    def pop(self) -> List[float]:
        return [vdc.pop() for vdc in self.vdcs]

    def reseed(self, seed: int) -> None:
        for vdc in self.vdcs:
            vdc.reseed(seed)


class CylinN:
    """Points on the n-sphere by the cylindrical coordinate method.

    Parameters
    ----------
    bases : sequence of int
        ``k >= 2`` bases. The generated points have ``k + 1`` coordinates.
        ``bases[0]`` drives the height ``cosphi`` uniformly in ``[-1, 1]``;
        the remaining bases drive a nested generator (a :class:`Circle2D`
        once two bases remain) whose point is scaled by ``sinphi``.
    """

    def __init__(self, bases: Sequence[int]) -> None:
        assert len(bases) >= 2, "CylinN needs at least two bases"
        self.vdc = VanDerCorput(bases[0])
        self.c_gen: Union[Circle2D, CylinN]
        if len(bases) == 2:
            self.c_gen = Circle2D(bases[1])
        else:
            self.c_gen = CylinN(bases[1:])

    def pop(self) -> List[float]:
        cosphi = 2.0 * self.vdc.pop() - 1.0  # map to [-1, 1]
        sinphi = math.sqrt(1.0 - cosphi * cosphi)
        return [sinphi * xi for xi in self.c_gen.pop()] + [cosphi]

    def reseed(self, seed: int) -> None:
        self.vdc.reseed(seed)
        self.c_gen.reseed(seed)


class SphereN:
    """Points on the n-sphere by recursive inverse-CDF composition.

    Parameters
    ----------
    bases : sequence of int
        ``k >= 2`` bases. The generated points have ``k + 1`` coordinates.

    With two bases the node is a leaf wrapping :class:`Sphere3D`. Otherwise
    it maps its Van der Corput value through the inverse of :func:`get_tp`
    for its own number of bases to get a polar angle ``xi``, scales the
    nested ``SphereN(bases[1:])`` point by ``sin(xi)`` and appends
    ``cos(xi)``.
    """

    def __init__(self, bases: Sequence[int]) -> None:
        n = len(bases)
        assert n >= 2, "SphereN needs at least two bases"
        self.n = n
        self.vdc: Optional[VanDerCorput] = None
        self.s_gen: Union[Sphere3D, SphereN]
        if n == 2:
            self.s_gen = Sphere3D(bases)
            return
        self.vdc = VanDerCorput(bases[0])
        self.s_gen = SphereN(bases[1:])
        self._tp = get_tp(n)
        self._t0 = float(self._tp[0])
        self._range_t = float(self._tp[-1] - self._tp[0])

    def pop(self) -> List[float]:
        if self.vdc is None:
            return list(self.s_gen.pop())
        ti = self._t0 + self._range_t * self.vdc.pop()  # map to [t0, tm-1]
        xi = float(np.interp(ti, self._tp, X))
        sinxi = math.sin(xi)
        return [sinxi * s for s in self.s_gen.pop()] + [math.cos(xi)]

    def reseed(self, seed: int) -> None:
        if self.vdc is not None:
            self.vdc.reseed(seed)
        self.s_gen.reseed(seed)


class Sphere3:
    """Points on the unit 3-sphere from one Van der Corput stream and a
    :class:`Sphere3D` (three bases, four coordinates).

    The polar angle inverts ``F2``, the ``sin(x)**2`` CDF. ``SphereN`` with
    the same three bases inverts ``get_tp(3)`` instead, so the two
    generators do not produce the same points.
    """

    def __init__(self, bases: Sequence[int]) -> None:
        self.vdc = VanDerCorput(bases[0])
        self.sphere2 = Sphere3D(bases[1:3])

    def pop(self) -> Tuple[float, float, float, float]:
        ti = HALF_PI * self.vdc.pop()  # map to [0, pi/2]
        xi = float(np.interp(ti, F2, X))
        cosxi = math.cos(xi)
        sinxi = math.sin(xi)
        s0, s1, s2 = self.sphere2.pop()
        return (sinxi * s0, sinxi * s1, sinxi * s2, cosxi)

    def reseed(self, seed: int) -> None:
        self.vdc.reseed(seed)
        self.sphere2.reseed(seed)


__all__ = [
    "X",
    "F2",
    "get_tp",
    "HaltonN",
    "CylinN",
    "SphereN",
    "Sphere3",
]
