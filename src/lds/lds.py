from __future__ import annotations
import math
from typing import Sequence, Tuple
import numba as nb

TWO_PI = 6.283185307179586


@nb.njit(cache=True)
def vdc(k: int, base: int = 2) -> float:
    """Return the k-th value of the base ``base`` Van der Corput sequence.

    The base-``base`` digits of ``k`` are reflected about the radix point,
    so the result lies in ``[0, 1)``. ``base`` must be at least 2; this is
    not checked.
    """
    res = 0.0
    denom = 1.0
    while k != 0:
        remainder = k % base
        denom *= base
        k //= base
        res += remainder / denom
    return res


class VanDerCorput:
    """Van der Corput sequence generator.

    Parameters
    ----------
    base : int
        Radix of the digit reversal, ``>= 2``.
    """

    def __init__(self, base: int = 2) -> None:
        self.count = 0
        self.base = base

    def pop(self) -> float:
        self.count += 1
        return vdc(self.count, self.base)

    def reseed(self, seed: int) -> None:
        self.count = seed


class Circle2D:
    """Points on the unit circle driven by one Van der Corput stream."""

    def __init__(self, base: int = 2) -> None:
        self.vdc = VanDerCorput(base)

    def pop(self) -> Tuple[float, float]:
        theta = self.vdc.pop() * TWO_PI  # map to [0, 2*pi]
        return (math.sin(theta), math.cos(theta))

    def reseed(self, seed: int) -> None:
        self.vdc.reseed(seed)


class Disk:
    """Points on the unit disk; the radius is square-root mapped so that
    the density is uniform in area."""

    def __init__(self, bases: Sequence[int]) -> None:
        self.vdc0 = VanDerCorput(bases[0])
        self.vdc1 = VanDerCorput(bases[1])

    def pop(self) -> Tuple[float, float]:
        theta = self.vdc0.pop() * TWO_PI
        radius = math.sqrt(self.vdc1.pop())
        return (radius * math.sin(theta), radius * math.cos(theta))

    def reseed(self, seed: int) -> None:
        self.vdc0.reseed(seed)
        self.vdc1.reseed(seed)


class Halton:
    """2-D Halton sequence generator (first two entries of ``bases``)."""

    def __init__(self, bases: Sequence[int]) -> None:
        self.vdc0 = VanDerCorput(bases[0])
        self.vdc1 = VanDerCorput(bases[1])

    def pop(self) -> Tuple[float, float]:
        return (self.vdc0.pop(), self.vdc1.pop())

    def reseed(self, seed: int) -> None:
        self.vdc0.reseed(seed)
        self.vdc1.reseed(seed)


class Sphere3D:
    """Points on the unit 2-sphere.

    The polar coordinate is drawn uniformly in cosine space from
    ``bases[0]`` and the azimuth comes from a :class:`Circle2D` on
    ``bases[1]``, which keeps the area element uniform.
    """

    def __init__(self, bases: Sequence[int]) -> None:
        self.vdc = VanDerCorput(bases[0])
        self.cirgen = Circle2D(bases[1])

    def pop(self) -> Tuple[float, float, float]:
        cosphi = 2.0 * self.vdc.pop() - 1.0  # map to [-1, 1]
        sinphi = math.sqrt(1.0 - cosphi * cosphi)
        s, c = self.cirgen.pop()
        return (sinphi * s, sinphi * c, cosphi)

    def reseed(self, seed: int) -> None:
        self.cirgen.reseed(seed)
        self.vdc.reseed(seed)


class Hopf4D:
    """Points on the unit 3-sphere via the Hopf fibration (three bases)."""

    def __init__(self, bases: Sequence[int]) -> None:
        self.vdc0 = VanDerCorput(bases[0])
        self.vdc1 = VanDerCorput(bases[1])
        self.vdc2 = VanDerCorput(bases[2])

    def pop(self) -> Tuple[float, float, float, float]:
        phi = self.vdc0.pop() * TWO_PI
        psy = self.vdc1.pop() * TWO_PI
        vd = self.vdc2.pop()
        cos_eta = math.sqrt(vd)
        sin_eta = math.sqrt(1.0 - vd)
        return (
            cos_eta * math.cos(psy),
            cos_eta * math.sin(psy),
            sin_eta * math.cos(phi + psy),
            sin_eta * math.sin(phi + psy),
        )

    def reseed(self, seed: int) -> None:
        self.vdc0.reseed(seed)
        self.vdc1.reseed(seed)
        self.vdc2.reseed(seed)


__all__ = [
    "TWO_PI",
    "vdc",
    "VanDerCorput",
    "Circle2D",
    "Disk",
    "Halton",
    "Sphere3D",
    "Hopf4D",
]
