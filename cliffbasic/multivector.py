# cliffbasic: Symbolic Clifford Algebra Calculator
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Multivector Container Class.

A multivector is an immutable mapping from canonical blade to coefficient,
bound to the algebra that built it. Operator overloading gives the usual
geometric algebra notation:

    A * B    geometric product        A ^ B    outer product
    A | B    inner product            A << B   left contraction
    A >> B   right contraction        ~A       reversion
    A / c    division by a scalar     A ** k   integer power
"""

from typing import TYPE_CHECKING, Dict, Iterator, List, Tuple

from cliffbasic.blade import Blade, blade_sort_key, format_blade

if TYPE_CHECKING:
    from cliffbasic.algebra import CliffordAlgebra


class Multivector:
    """Object-oriented wrapper around a ``{blade: coefficient}`` mapping.

    Instances are normally produced by a :class:`CliffordAlgebra`
    (``algebra.e(1, 2)``, ``algebra.scalar(x)``) or by arithmetic. The
    mapping never holds a zero coefficient and every key is a strictly
    increasing tuple of generator indices.

    Attributes:
        algebra (CliffordAlgebra): The algebra whose signature products use.
    """

    # sympy expressions defer to operands with a higher priority
    _op_priority = 20.0

    def __init__(self, algebra: "CliffordAlgebra", terms: Dict[Blade, object]):
        """Wraps already-normalized terms. Use the algebra to build from raw data.

        Args:
            algebra (CliffordAlgebra): The algebra instance.
            terms (dict): Canonical blade -> non-zero coefficient.
        """
        self.algebra = algebra
        self._terms = dict(terms)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def terms(self) -> List[Tuple[Blade, object]]:
        """``(blade, coefficient)`` pairs in presentation order."""
        return sorted(self._terms.items(), key=lambda item: blade_sort_key(item[0]))

    @property
    def blades(self) -> List[Blade]:
        return [blade for blade, _ in self.terms()]

    @property
    def grades(self) -> List[int]:
        """Sorted grades that carry at least one non-zero term."""
        return sorted({len(blade) for blade in self._terms})

    @property
    def scalar_part(self):
        """Grade-0 coefficient (the ring's zero if absent)."""
        return self._terms.get((), self.algebra.ring.zero)

    @property
    def is_zero(self) -> bool:
        return not self._terms

    @property
    def is_scalar(self) -> bool:
        return all(not blade for blade in self._terms)

    @property
    def max_index(self) -> int:
        """Largest generator index present; 0 for a scalar."""
        return max((blade[-1] for blade in self._terms if blade), default=0)

    def coeff(self, *indices):
        """Coefficient of ``e(*indices)`` in this multivector.

        The indices are canonicalized first, so ``coeff(2, 1)`` is minus
        ``coeff(1, 2)``.
        """
        reduced = self.algebra.canonicalizer.canonicalize(indices)
        if reduced is None:
            return self.algebra.ring.zero
        sign, blade = reduced
        value = self._terms.get(blade, self.algebra.ring.zero)
        return value if sign > 0 else -value

    def __getitem__(self, blade):
        if isinstance(blade, int):
            blade = (blade,)
        return self.coeff(*blade)

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Tuple[Blade, object]]:
        return iter(self.terms())

    def __bool__(self) -> bool:
        return bool(self._terms)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _coerce_other(self, other):
        """Multivector operand for ``other``, or ``None`` if unsupported."""
        try:
            return self.algebra._operand(other)
        except TypeError:
            return None

    def __add__(self, other):
        """Term-wise addition; plain coefficients add to the scalar part."""
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self.algebra._build(list(self._terms.items()) + list(other._terms.items()))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return other + (-self)

    def __neg__(self):
        return Multivector(self.algebra, {b: -c for b, c in self._terms.items()})

    def __pos__(self):
        return self

    def __mul__(self, other):
        """Geometric Product (A * B)."""
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self.algebra.geometric_product(self, other)

    def __rmul__(self, other):
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self.algebra.geometric_product(other, self)

    def __truediv__(self, other):
        """Division by a coefficient, or right multiplication by an inverse."""
        if isinstance(other, Multivector):
            if other.is_scalar and not other.is_zero:
                other = other.scalar_part
            else:
                return self * self.algebra.inverse(other)
        try:
            divisor = self.algebra.ring.coerce(other)
        except TypeError:
            return NotImplemented
        return self.algebra._scale(self, divisor)

    def __rtruediv__(self, other):
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return other * self.algebra.inverse(self)

    def __xor__(self, other):
        """Outer Product (A ^ B)."""
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self.algebra.outer_product(self, other)

    def __rxor__(self, other):
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self.algebra.outer_product(other, self)

    def __or__(self, other):
        """Inner Product (A | B)."""
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self.algebra.inner_product(self, other)

    def __ror__(self, other):
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self.algebra.inner_product(other, self)

    def __lshift__(self, other):
        """Left Contraction (A << B)."""
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self.algebra.left_contraction(self, other)

    def __rlshift__(self, other):
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self.algebra.left_contraction(other, self)

    def __rshift__(self, other):
        """Right Contraction (A >> B)."""
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self.algebra.right_contraction(self, other)

    def __rrshift__(self, other):
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self.algebra.right_contraction(other, self)

    def __invert__(self):
        """Reversion (~A)."""
        return self.algebra.reverse(self)

    def __pow__(self, exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.algebra.power(self, exponent)

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def __eq__(self, other):
        """Structural equality of normalized terms."""
        if isinstance(other, Multivector):
            if self.algebra != other.algebra:
                return False
            return self._terms == other._terms
        other = self._coerce_other(other)
        if other is None:
            return NotImplemented
        return self._terms == other._terms

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        # Scalar multivectors compare equal to plain numbers, so hash alike
        if self.is_scalar:
            return hash(self.scalar_part)
        return hash(frozenset(self._terms.items()))

    # ------------------------------------------------------------------
    # Algebra shortcuts
    # ------------------------------------------------------------------

    def grade(self, r: int):
        """Projects to grade r."""
        return self.algebra.grade(self, r)

    def is_homogeneous(self, r: int) -> bool:
        return self.algebra.is_homogeneous(self, r)

    def reverse(self):
        return self.algebra.reverse(self)

    def involution(self):
        return self.algebra.involution(self)

    def magnitude(self):
        """sqrt(<A ~A>_0), left symbolic when the ring is."""
        return self.algebra.magnitude(self)

    def inverse(self):
        return self.algebra.inverse(self)

    def try_inverse(self):
        return self.algebra.try_inverse(self)

    def dual(self, n: int):
        return self.algebra.dual(self, n)

    def map(self, fn):
        """Apply ``fn`` to every coefficient and re-normalize."""
        ring = self.algebra.ring
        return self.algebra._build((b, ring.coerce(fn(c))) for b, c in self._terms.items())

    def subs(self, *args, **kwargs):
        """``sympy`` substitution on every coefficient (symbolic ring only)."""
        return self.map(lambda c: c.subs(*args, **kwargs))

    def simplify(self):
        """``sympy.simplify`` on every coefficient (symbolic ring only)."""
        import sympy
        return self.map(sympy.simplify)

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def __str__(self):
        if not self._terms:
            return "0"
        parts = []
        for blade, coeff in self.terms():
            parts.append(_format_term(blade, coeff))
        text = parts[0]
        for part in parts[1:]:
            if part.startswith("-"):
                text += " - " + part[1:]
            else:
                text += " + " + part
        return text

    def __repr__(self):
        return f"Multivector({self}, algebra={self.algebra.signature})"


def _format_term(blade: Blade, coeff) -> str:
    if not blade:
        return str(coeff)
    name = format_blade(blade)
    if coeff == 1:
        return name
    if coeff == -1:
        return "-" + name
    text = str(coeff)
    if _needs_parens(coeff, text):
        text = f"({text})"
    return f"{text}*{name}"


def _needs_parens(coeff, text: str) -> bool:
    if getattr(coeff, "is_Add", False):
        return True
    if isinstance(coeff, complex):
        return False
    # sympy and numeric coefficients print a sign only at the front
    return " + " in text or " - " in text[1:]
