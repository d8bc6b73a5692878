# cliffbasic: Symbolic Clifford Algebra Calculator
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Coefficient rings.

A multivector stores one coefficient per blade. The ring decides what a
coefficient may be, how like terms are normalized after merging, and what
counts as zero. Term merging is exactly as reliable as :meth:`is_zero` on
the normalized sum: :class:`SymbolicRing` expands polynomials, so
``a*b - b*a`` cancels, but identities such as ``sin(x)**2 + cos(x)**2 - 1``
survive unless the caller simplifies them.
"""

import cmath
import math
from abc import ABC, abstractmethod
from fractions import Fraction
from numbers import Number

import sympy

from cliffbasic.errors import ConfigError


class CoefficientRing(ABC):
    """Commutative ring of multivector coefficients."""

    name = "abstract"

    @abstractmethod
    def coerce(self, value):
        """Convert a user value into a ring element, or raise ``TypeError``."""

    @abstractmethod
    def normalize(self, value):
        """Canonical form used after every sum."""

    @abstractmethod
    def is_zero(self, value) -> bool:
        """Structural zero test on a normalized value."""

    @abstractmethod
    def sqrt(self, value):
        """Square root; may leave the real numbers."""

    @abstractmethod
    def divide(self, numerator, denominator):
        """Exact division where the ring supports it."""

    @property
    def zero(self):
        return self.coerce(0)

    @property
    def one(self):
        return self.coerce(1)

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class SymbolicRing(CoefficientRing):
    """Coefficients are sympy expressions, expanded after every merge."""

    name = "symbolic"

    def coerce(self, value):
        if isinstance(value, sympy.Basic):
            return value
        if isinstance(value, float):
            return sympy.Float(value)
        try:
            return sympy.sympify(value, strict=True)
        except sympy.SympifyError as exc:
            raise TypeError(f"cannot use {value!r} as a coefficient") from exc

    def normalize(self, value):
        return sympy.expand(value)

    def is_zero(self, value) -> bool:
        return value == 0

    def sqrt(self, value):
        return sympy.sqrt(value)

    def divide(self, numerator, denominator):
        return numerator / denominator


class NumericRing(CoefficientRing):
    """Plain Python numbers. ``int`` and ``Fraction`` stay exact."""

    name = "numeric"

    def coerce(self, value):
        if isinstance(value, bool) or not isinstance(value, Number):
            raise TypeError(f"cannot use {value!r} as a numeric coefficient")
        return value

    def normalize(self, value):
        if isinstance(value, Fraction) and value.denominator == 1:
            return value.numerator
        return value

    def is_zero(self, value) -> bool:
        return value == 0

    def sqrt(self, value):
        if isinstance(value, complex):
            return cmath.sqrt(value)
        if value < 0:
            return cmath.sqrt(value)
        root = math.isqrt(value) if isinstance(value, int) else None
        if root is not None and root * root == value:
            return root
        return math.sqrt(value)

    def divide(self, numerator, denominator):
        if isinstance(numerator, (int, Fraction)) and isinstance(denominator, (int, Fraction)):
            return self.normalize(Fraction(numerator) / Fraction(denominator))
        return numerator / denominator


_RINGS = {
    SymbolicRing.name: SymbolicRing,
    NumericRing.name: NumericRing,
}


def get_ring(ring) -> CoefficientRing:
    """Resolve a ring name or instance.

    Args:
        ring: ``"symbolic"``, ``"numeric"``, or a :class:`CoefficientRing`.

    Raises:
        ConfigError: For unknown names.
    """
    if isinstance(ring, CoefficientRing):
        return ring
    try:
        return _RINGS[ring]()
    except (KeyError, TypeError):
        raise ConfigError(
            f"Unknown coefficient ring: {ring!r}. Available: {sorted(_RINGS)}"
        ) from None
