from __future__ import annotations

"""Utility subpackage exports.

This module re-exports the helpers so callers can do:
    from lds.utils import first_primes, halton_batch, vdc_batch

The numba kernels in ``batch`` compile on first call, not on import.
"""

from .primes import PRIME_TABLE, first_primes, prime_generator  # noqa: F401
from .batch import halton_batch, vdc_batch  # noqa: F401

__all__ = [
    "PRIME_TABLE",
    "first_primes",
    "prime_generator",
    "halton_batch",
    "vdc_batch",
]
