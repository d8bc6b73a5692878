# cliffbasic: Symbolic Clifford Algebra Calculator
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Blade canonicalization.

A raw geometric product of generators ``e[i1] e[i2] ... e[ik]`` is reduced
to ``sign * e[j1,...,jm]`` with ``j1 < ... < jm``, or to zero. This is the
only place where the signature decides signs and annihilation; every
product in the package goes through :meth:`Canonicalizer.product`.

Blades are plain tuples of ints. The empty tuple is the scalar identity.
"""

from functools import lru_cache
from itertools import groupby
from typing import Optional, Sequence, Tuple

from cliffbasic.log import get_logger
from cliffbasic.signature import Signature
from cliffbasic.validation import check_indices

logger = get_logger(__name__)

Blade = Tuple[int, ...]
SignedBlade = Optional[Tuple[int, Blade]]

SCALAR: Blade = ()
DEFAULT_CACHE_SIZE = 4096


def _reduce(signature: Signature, indices: Blade) -> SignedBlade:
    """Sort by adjacent transpositions, then collapse runs of equal indices."""
    seq = list(indices)
    sign = 1

    # Insertion sort is a sequence of adjacent swaps. Equal neighbours are
    # never swapped, so e_i e_i pairs never pick up a sign.
    for i in range(1, len(seq)):
        j = i
        while j > 0 and seq[j - 1] > seq[j]:
            seq[j - 1], seq[j] = seq[j], seq[j - 1]
            sign = -sign
            j -= 1

    blade = []
    for v, run in groupby(seq):
        k = sum(1 for _ in run)
        if k >= 2:
            square = signature.square(v)
            if square == 0:
                return None
            # Each e_v e_v pair contributes e_v^2 = -1
            if square < 0 and (k // 2) % 2 == 1:
                sign = -sign
        if k % 2 == 1:
            blade.append(v)

    return sign, tuple(blade)


class Canonicalizer:
    """Memoized canonicalization for one signature.

    The cache is keyed by the raw index tuple and lives as long as the
    canonicalizer; the signature it closes over is immutable.

    Attributes:
        signature (Signature): The metric.
        cache_size (int | None): ``lru_cache`` size; ``None`` is unbounded.
    """

    def __init__(self, signature: Signature, cache_size: Optional[int] = DEFAULT_CACHE_SIZE):
        self.signature = signature
        self.cache_size = cache_size
        self._reduce = lru_cache(maxsize=cache_size)(self._reduce_uncached)
        logger.debug("Canonicalizer for %s, cache size %s", signature, cache_size)

    def _reduce_uncached(self, indices: Blade) -> SignedBlade:
        return _reduce(self.signature, indices)

    def canonicalize(self, indices: Sequence[int]) -> SignedBlade:
        """Validated, cached form of :func:`canonicalize`."""
        indices = tuple(indices)
        check_indices(indices)
        return self._reduce(indices)

    def product(self, a: Blade, b: Blade) -> SignedBlade:
        """Geometric product of two canonical blades (left then right)."""
        if not a:
            return 1, b
        if not b:
            return 1, a
        return self._reduce(a + b)

    def cache_info(self):
        return self._reduce.cache_info()

    def cache_clear(self) -> None:
        self._reduce.cache_clear()


def canonicalize(signature: Signature, indices: Sequence[int]) -> SignedBlade:
    """Reduce a raw product of generators to a signed canonical blade.

    Args:
        signature (Signature): Metric used to square repeated generators.
        indices (Sequence[int]): Generator indices in call order.

    Returns:
        ``(sign, blade)`` with ``sign`` in {+1, -1} and ``blade`` strictly
        increasing, or ``None`` when a generator beyond ``signature.n``
        appears twice.

    Raises:
        BladeIndexError: If an index is not a positive int.
    """
    indices = tuple(indices)
    check_indices(indices)
    return _reduce(signature, indices)


def reverse_sign(grade: int) -> int:
    """Sign picked up by a grade-r blade under reversion: (-1)^(r(r-1)/2)."""
    return -1 if (grade * (grade - 1) // 2) % 2 else 1


def involution_sign(grade: int) -> int:
    """Sign picked up by a grade-r blade under grade involution: (-1)^r."""
    return -1 if grade % 2 else 1


def format_blade(blade: Blade) -> str:
    """Render a blade as ``e[1,2,3]``; the scalar blade renders as ``1``."""
    if not blade:
        return "1"
    return "e[" + ",".join(str(i) for i in blade) + "]"


def blade_sort_key(blade: Blade):
    """Presentation order: by grade, then lexicographically."""
    return (len(blade), blade)
