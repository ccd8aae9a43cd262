from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from .utils.primes import first_primes

# Number of bases each fixed-dimension kind consumes
FIXED_BASES: Dict[str, int] = {
    "vdc": 1,
    "circle": 1,
    "disk": 2,
    "halton": 2,
    "sphere": 2,
    "sphere3_hopf": 3,
    "sphere3": 3,
}

# Minimum number of bases for the arbitrary-dimension kinds
MIN_BASES: Dict[str, int] = {
    "halton_n": 1,
    "cylin_n": 2,
    "sphere_n": 2,
}

KINDS = tuple(FIXED_BASES) + tuple(MIN_BASES)


@dataclass
class SequenceParams:
    """Configuration for a batch of low-discrepancy points.

    Parameters
    ----------
    kind : str
        Generator kind, one of :data:`KINDS`.
    dim : int
        Number of bases for ``halton_n``, ``cylin_n`` and ``sphere_n`` when
        ``bases`` is not given. Ignored by the fixed-dimension kinds. This
        is the point dimension only for ``halton_n``; ``cylin_n`` and
        ``sphere_n`` points have ``dim + 1`` coordinates.
    bases : list of int, optional
        Explicit bases, one per stream. Defaults to the first primes.
    seed : int
        Start index; the first point is the one at index ``seed + 1``.
    count : int
        Number of points to generate.
    verbose : bool
        Print progress lines.
    """
    kind: str = "halton"
    dim: int = 2
    bases: Optional[List[int]] = None
    seed: int = 0
    count: int = 128
    verbose: bool = False

    def num_bases(self) -> int:
        """Return how many bases ``kind`` consumes."""
        if self.kind in FIXED_BASES:
            return FIXED_BASES[self.kind]
        if self.kind in MIN_BASES:
            return len(self.bases) if self.bases is not None else self.dim
        raise ValueError(f"kind must be one of {KINDS} (got {self.kind!r})")

    def resolved_bases(self) -> List[int]:
        """Return ``bases`` or the first primes, validated for ``kind``."""
        n = self.num_bases()
        if self.kind in MIN_BASES and n < MIN_BASES[self.kind]:
            raise ValueError(
                f"kind {self.kind!r} needs at least {MIN_BASES[self.kind]} bases (got {n})")
        if self.bases is None:
            return first_primes(n)
        bases = [int(b) for b in self.bases]
        if len(bases) < n:
            raise ValueError(f"kind {self.kind!r} needs {n} bases (got {len(bases)})")
        for b in bases:
            if b < 2:
                raise ValueError(f"bases must be integers >= 2 (got {b})")
        return bases[:n]

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["SequenceParams", "KINDS", "FIXED_BASES", "MIN_BASES"]
