from __future__ import annotations
from typing import Iterator, List

# First primes, the conventional per-axis bases
PRIME_TABLE = [
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67,
    71, 73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149,
    151, 157, 163, 167, 173, 179, 181, 191, 193, 197, 199, 211, 223, 227, 229,
]


def prime_generator() -> Iterator[int]:
    """Yield the primes in increasing order (incremental sieve)."""
    composites = {}
    q = 2
    while True:
        if q not in composites:
            yield q
            composites[q * q] = [q]
        else:
            for p in composites[q]:
                composites.setdefault(p + q, []).append(p)
            del composites[q]
        q += 1


def first_primes(n: int) -> List[int]:
    """Return the first ``n`` primes, e.g. as bases for an n-D sequence."""
    if n < 0:
        raise ValueError(f"n must be non-negative (got {n})")
    if n <= len(PRIME_TABLE):
        return PRIME_TABLE[:n]
    out: List[int] = []
    for p in prime_generator():
        if len(out) == n:
            break
        out.append(p)
    return out


__all__ = ["PRIME_TABLE", "prime_generator", "first_primes"]
