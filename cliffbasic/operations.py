# cliffbasic: Symbolic Clifford Algebra Calculator
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Unary and compound operations.

Reversion, involution, magnitude and inverse, plus the pseudoscalar-based
constructions: dual, meet (Hestenes & Sobczyk, Eq. 2.28) and join (Dorst,
Fontijne & Mann, Eq. 5.5). All are built from the products of
:class:`~cliffbasic.algebra.CliffordAlgebra`; none of them touches signs
directly.

Meet and join are defined only up to scale and only for blades. The meet
is normalized to unit magnitude, which in turn fixes the scale of the join.
"""

from typing import Optional

from cliffbasic.blade import involution_sign, reverse_sign
from cliffbasic.errors import NonInvertibleError
from cliffbasic.log import get_logger
from cliffbasic.multivector import Multivector
from cliffbasic.validation import check_dimension, check_grade

logger = get_logger(__name__)


def reverse(algebra, mv) -> Multivector:
    """Reversion ~A: a grade-r blade picks up (-1)^(r(r-1)/2)."""
    return algebra._map_blades(mv, reverse_sign)


def involution(algebra, mv) -> Multivector:
    """Grade involution: a grade-r blade picks up (-1)^r."""
    return algebra._map_blades(mv, involution_sign)


def norm_squared(algebra, mv):
    """Scalar ``<A ~A>_0`` as a ring element (may be negative or symbolic)."""
    mv = algebra._operand(mv)
    product = algebra.geometric_product(mv, reverse(algebra, mv))
    return algebra.grade(product, 0).scalar_part


def magnitude(algebra, mv):
    """Magnitude ``sqrt(<A ~A>_0)``.

    Non-Euclidean signatures can make the radicand negative; the result is
    then whatever the ring's square root gives (an imaginary sympy
    expression, or a ``complex``). It is not simplified further.
    """
    return algebra.ring.sqrt(norm_squared(algebra, mv))


def inverse(algebra, mv) -> Multivector:
    """Inverse ``~A / |A|^2``.

    Exact for blades and versors. For a general multivector ``A * inverse(A)``
    need not be 1, since ``A ~A`` can carry higher-grade parts.

    Raises:
        NonInvertibleError: If the magnitude is zero.
    """
    mv = algebra._operand(mv)
    denominator = norm_squared(algebra, mv)
    if algebra.ring.is_zero(algebra.ring.normalize(denominator)):
        raise NonInvertibleError(f"Non invertible multivector: {mv}")
    return algebra._scale(reverse(algebra, mv), denominator)


def try_inverse(algebra, mv) -> Optional[Multivector]:
    """Like :func:`inverse`, but ``None`` for a non-invertible multivector."""
    try:
        return inverse(algebra, mv)
    except NonInvertibleError:
        return None


def power(algebra, mv, exponent: int) -> Multivector:
    """Integer power by repeated geometric product; negative powers invert first."""
    check_grade(exponent, "exponent")
    mv = algebra._operand(mv)
    if exponent < 0:
        mv = inverse(algebra, mv)
        exponent = -exponent
    result = algebra.scalar(1)
    for _ in range(exponent):
        result = algebra.geometric_product(result, mv)
    return result


def pseudoscalar(algebra, n: int) -> Multivector:
    """Unit pseudoscalar ``e[1,2,...,n]``.

    Raises:
        ValueError: If ``n`` is not a positive int.
    """
    check_dimension(n)
    return algebra.e(*range(1, n + 1))


def dual(algebra, mv, n: int) -> Multivector:
    """Dual ``A ~I_n``, mapping grade r to grade n - r."""
    return algebra.geometric_product(mv, reverse(algebra, pseudoscalar(algebra, n)))


def is_homogeneous(algebra, mv, r: int) -> bool:
    """True iff ``mv`` has no component outside grade ``r``.

    Raises:
        ValueError: If ``r`` is not a positive int.
    """
    check_grade(r, positive=True)
    mv = algebra._operand(mv)
    return algebra.grade(mv, r) == mv


def _check_blade_like(mv: Multivector, name: str) -> None:
    if len(mv.grades) > 1:
        raise ValueError(
            f"{name}: meet and join are defined for blades only, got grades {mv.grades}"
        )


def meet(algebra, a, b, n: int) -> Multivector:
    """Normalized meet ``(-1)^(n(n-1)/2) (A* ^ B*)*``, with * the dual in G^n.

    A zero unnormalized meet is returned as zero; there is no scale to fix.

    Raises:
        ValueError: If an operand has more than one grade.
        NonInvertibleError: If the meet is a non-zero null blade, which
            cannot be normalized.
    """
    check_dimension(n)
    a = algebra._operand(a)
    b = algebra._operand(b)
    _check_blade_like(a, "meet(A)")
    _check_blade_like(b, "meet(B)")

    wedge = algebra.outer_product(dual(algebra, a, n), dual(algebra, b, n))
    met = dual(algebra, wedge, n)
    if reverse_sign(n) < 0:
        met = -met
    if met.is_zero:
        logger.debug("meet of %s and %s in G^%d is zero", a, b, n)
        return met

    scale = magnitude(algebra, met)
    if algebra.ring.is_zero(algebra.ring.normalize(scale)):
        raise NonInvertibleError(f"meet {met} has zero magnitude and cannot be normalized")
    return algebra._scale(met, scale)


def join(algebra, a, b, n: int) -> Multivector:
    """Join ``A ^ (meet(A, B)^-1 . B)``.

    Raises:
        NonInvertibleError: If the meet is zero.
    """
    met = meet(algebra, a, b, n)
    return algebra.outer_product(a, algebra.inner_product(inverse(algebra, met), b))
