# cliffbasic: Symbolic Clifford Algebra Calculator
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

from functools import partial, reduce
from itertools import combinations
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from cliffbasic.blade import DEFAULT_CACHE_SIZE, Blade, Canonicalizer
from cliffbasic.config import AlgebraConfig
from cliffbasic.log import get_logger
from cliffbasic.multivector import Multivector
from cliffbasic.ring import get_ring
from cliffbasic.signature import DEFAULT_P, DEFAULT_Q
from cliffbasic.validation import check_arity, check_grade, check_same_algebra

logger = get_logger(__name__)

# Target grade of a blade pair product, or None to drop the pair
GradeRule = Callable[[int, int], Optional[int]]


def _outer_grade(j: int, k: int) -> Optional[int]:
    return j + k


def _inner_grade(j: int, k: int) -> Optional[int]:
    # Hestenes inner product vanishes on scalars
    if j == 0 or k == 0:
        return None
    return abs(j - k)


def _left_contraction_grade(j: int, k: int) -> Optional[int]:
    return k - j if k >= j else None


def _right_contraction_grade(j: int, k: int) -> Optional[int]:
    return j - k if j >= k else None


def _scalar_grade(j: int, k: int) -> Optional[int]:
    return 0 if j == k else None


class CliffordAlgebra:
    """Symbolic Clifford algebra kernel.

    Handles the geometric product, grade projection, and the derived
    products. Unary and compound operations (reversion, magnitude, inverse,
    dual, meet, join) live in :mod:`cliffbasic.operations` and are exposed
    here as methods.

    Every product reduces blade pairs through one :class:`Canonicalizer`,
    so the signature below is the only place signs come from.

    Attributes:
        p (int): Positive signature dimensions.
        q (int): Negative signature dimensions.
        n (int): Total dimensions (p + q).
        signature (Signature): The immutable ``(p, q)`` pair.
        ring (CoefficientRing): Coefficient arithmetic.
        canonicalizer (Canonicalizer): Memoized blade reduction.
        config (AlgebraConfig): Settings the algebra was built from.
    """

    def __init__(self, p: int = DEFAULT_P, q: int = DEFAULT_Q, coefficients="symbolic",
                 cache_size: Optional[int] = DEFAULT_CACHE_SIZE, validate: bool = True):
        """Initialize the algebra.

        Args:
            p (int, optional): Positive dimensions (+1). Defaults to 20.
            q (int, optional): Negative dimensions (-1). Defaults to 0.
            coefficients (str | CoefficientRing, optional): ``"symbolic"``
                (sympy) or ``"numeric"``. Defaults to ``"symbolic"``.
            cache_size (int, optional): Canonicalization memo size.
            validate (bool, optional): Check operands belong to this algebra.

        Raises:
            SignatureError: If ``p`` or ``q`` is not a non-negative int.
            ConfigError: If the ring name or cache size is invalid.
        """
        self.config = AlgebraConfig(p=p, q=q, coefficients=coefficients,
                                    cache_size=cache_size, validate=validate)
        self.signature = self.config.signature
        self.p, self.q = p, q
        self.n = self.signature.n
        self.ring = get_ring(coefficients)
        self.canonicalizer = Canonicalizer(self.signature, cache_size)
        logger.debug("Initialized %s over the %s ring", self.signature, self.ring.name)

    @classmethod
    def from_config(cls, cfg) -> "CliffordAlgebra":
        """Build from an :class:`AlgebraConfig`, ``DictConfig``, dict, or YAML path."""
        if not isinstance(cfg, AlgebraConfig):
            cfg = AlgebraConfig.from_omegaconf(cfg)
        return cls(p=cfg.p, q=cfg.q, coefficients=cfg.coefficients,
                   cache_size=cfg.cache_size, validate=cfg.validate)

    def __eq__(self, other):
        if not isinstance(other, CliffordAlgebra):
            return NotImplemented
        return self.signature == other.signature and self.ring == other.ring

    def __hash__(self):
        return hash((self.signature, self.ring))

    def __repr__(self):
        return f"CliffordAlgebra(p={self.p}, q={self.q}, coefficients={self.ring.name!r})"

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _build(self, pairs: Iterable[Tuple[Blade, object]]) -> Multivector:
        """Merge like blades, normalize, and drop zero terms."""
        merged: Dict[Blade, object] = {}
        for blade, coeff in pairs:
            if blade in merged:
                merged[blade] = merged[blade] + coeff
            else:
                merged[blade] = coeff

        ring = self.ring
        terms = {}
        for blade, coeff in merged.items():
            coeff = ring.normalize(coeff)
            if not ring.is_zero(coeff):
                terms[blade] = coeff
        return Multivector(self, terms)

    def _operand(self, value) -> Multivector:
        """Multivector of this algebra, or a plain coefficient lifted to a scalar.

        Raises:
            TypeError: If ``value`` is not a valid coefficient.
            ValueError: If ``value`` belongs to another algebra.
        """
        if isinstance(value, Multivector):
            if self.config.validate:
                check_same_algebra(self, value, "operand")
            return value
        return self.scalar(value)

    def _scale(self, mv: Multivector, divisor) -> Multivector:
        """Divide every coefficient by a ring element."""
        if self.ring.is_zero(divisor):
            raise ZeroDivisionError(f"division of {mv} by zero")
        divide = self.ring.divide
        return self._build((b, divide(c, divisor)) for b, c in mv._terms.items())

    def _map_blades(self, mv: Multivector, sign: Callable[[int], int]) -> Multivector:
        """Linear map multiplying each term by ``sign(grade)``."""
        mv = self._operand(mv)
        return Multivector(self, {
            b: (c if sign(len(b)) > 0 else -c) for b, c in mv._terms.items()
        })

    def e(self, *indices: int) -> Multivector:
        """Raw generator product ``e[i1] e[i2] ...``, canonicalized.

        ``e()`` is the scalar 1, ``e(2, 1)`` is ``-e[1,2]``, and a repeated
        generator beyond ``n`` gives zero.

        Raises:
            BladeIndexError: If an index is not a positive int.
        """
        reduced = self.canonicalizer.canonicalize(indices)
        if reduced is None:
            return self.zero()
        sign, blade = reduced
        return Multivector(self, {blade: self.ring.coerce(sign)})

    def scalar(self, value) -> Multivector:
        """Grade-0 multivector ``value``."""
        return self._build([((), self.ring.coerce(value))])

    def zero(self) -> Multivector:
        return Multivector(self, {})

    def from_terms(self, terms) -> Multivector:
        """Build from ``{indices: coefficient}`` or ``(indices, coefficient)`` pairs.

        Index tuples may be unordered or repeat generators; each is
        canonicalized like :meth:`e`.
        """
        items = terms.items() if isinstance(terms, dict) else terms
        pairs = []
        for indices, coeff in items:
            if isinstance(indices, int):
                indices = (indices,)
            reduced = self.canonicalizer.canonicalize(indices)
            if reduced is None:
                continue
            sign, blade = reduced
            coeff = self.ring.coerce(coeff)
            pairs.append((blade, coeff if sign > 0 else -coeff))
        return self._build(pairs)

    def coerce(self, value) -> Multivector:
        """Rebind a multivector from any algebra (or a coefficient) to this one.

        Only the ``(blade, coefficient)`` pairs carry over; future products
        use this algebra's signature.
        """
        if isinstance(value, Multivector):
            return self._build((b, self.ring.coerce(c)) for b, c in value._terms.items())
        return self.scalar(value)

    def basis(self, grade: Optional[int] = None) -> List[Multivector]:
        """Canonical basis blades over ``e[1]..e[n]``, by grade then index.

        Args:
            grade (int, optional): Restrict to one grade.
        """
        grades = range(self.n + 1) if grade is None else [grade]
        one = self.ring.one
        return [
            Multivector(self, {blade: one})
            for k in grades
            for blade in combinations(range(1, self.n + 1), k)
        ]

    # ------------------------------------------------------------------
    # Geometric product engine
    # ------------------------------------------------------------------

    def _bilinear(self, x, y, rule: Optional[GradeRule] = None) -> Multivector:
        """Sum of blade-pair products, optionally filtered to a target grade.

        Args:
            x, y: Operands (multivectors or coefficients).
            rule (GradeRule, optional): Maps operand grades ``(j, k)`` to the
                grade kept from their geometric product; ``None`` keeps all.

        Returns:
            Multivector: The normalized sum.
        """
        x = self._operand(x)
        y = self._operand(y)
        product = self.canonicalizer.product

        pairs = []
        for a, ca in x._terms.items():
            for b, cb in y._terms.items():
                target = None
                if rule is not None:
                    target = rule(len(a), len(b))
                    if target is None:
                        continue
                reduced = product(a, b)
                if reduced is None:
                    continue
                sign, blade = reduced
                if target is not None and len(blade) != target:
                    continue
                coeff = ca * cb
                pairs.append((blade, coeff if sign > 0 else -coeff))
        return self._build(pairs)

    def geometric_product(self, *operands) -> Multivector:
        """Computes the Geometric Product, folding left to right.

        ``geometric_product(a, b, c) == geometric_product(geometric_product(a, b), c)``.

        Raises:
            ArityError: With fewer than two operands.
        """
        check_arity(operands, "geometric_product")
        return reduce(self._bilinear, operands[1:], self._operand(operands[0]))

    def grade(self, mv, r: int) -> Multivector:
        """Isolates grade ``r``; negative grades give zero.

        Args:
            mv (Multivector): Multivector (or coefficient).
            r (int): Target grade.

        Returns:
            Multivector: Projected multivector.
        """
        check_grade(r)
        mv = self._operand(mv)
        if r < 0:
            return self.zero()
        return Multivector(self, {b: c for b, c in mv._terms.items() if len(b) == r})

    # ------------------------------------------------------------------
    # Derived products
    # ------------------------------------------------------------------

    def outer_product(self, *operands) -> Multivector:
        """Computes the outer (wedge) product, folding left to right.

        Blade pair of grades ``j, k`` keeps ``<AB>_{j+k}``; a scalar operand
        simply scales.

        Raises:
            ArityError: With fewer than two operands.
        """
        check_arity(operands, "outer_product")
        wedge = partial(self._bilinear, rule=_outer_grade)
        return reduce(wedge, operands[1:], self._operand(operands[0]))

    def inner_product(self, *operands) -> Multivector:
        """Computes the Hestenes inner product ``<AB>_{|j-k|}``.

        Zero whenever either side of a term pair is a scalar.
        """
        check_arity(operands, "inner_product", exact=True)
        return self._bilinear(*operands, rule=_inner_grade)

    def left_contraction(self, *operands) -> Multivector:
        """Computes the left contraction ``A _| B = <AB>_{k-j}`` (zero if k < j)."""
        check_arity(operands, "left_contraction", exact=True)
        return self._bilinear(*operands, rule=_left_contraction_grade)

    def right_contraction(self, *operands) -> Multivector:
        """Computes the right contraction ``A |_ B = <AB>_{j-k}`` (zero if j < k)."""
        check_arity(operands, "right_contraction", exact=True)
        return self._bilinear(*operands, rule=_right_contraction_grade)

    def scalar_product(self, *operands) -> Multivector:
        """Computes the scalar product ``<AB>_0``.

        Only equal-grade term pairs can reach grade 0, so unequal pairs are
        skipped before multiplying.
        """
        check_arity(operands, "scalar_product", exact=True)
        return self._bilinear(*operands, rule=_scalar_grade)

    # ------------------------------------------------------------------
    # Unary and compound operations (see cliffbasic.operations)
    # ------------------------------------------------------------------

    def reverse(self, mv) -> Multivector:
        """Computes the reversion (Turn)."""
        from cliffbasic.operations import reverse
        return reverse(self, mv)

    def involution(self, mv) -> Multivector:
        from cliffbasic.operations import involution
        return involution(self, mv)

    def magnitude(self, mv):
        from cliffbasic.operations import magnitude
        return magnitude(self, mv)

    def inverse(self, mv) -> Multivector:
        from cliffbasic.operations import inverse
        return inverse(self, mv)

    def try_inverse(self, mv) -> Optional[Multivector]:
        from cliffbasic.operations import try_inverse
        return try_inverse(self, mv)

    def power(self, mv, exponent: int) -> Multivector:
        from cliffbasic.operations import power
        return power(self, mv, exponent)

    def pseudoscalar(self, n: int) -> Multivector:
        from cliffbasic.operations import pseudoscalar
        return pseudoscalar(self, n)

    def dual(self, mv, n: int) -> Multivector:
        from cliffbasic.operations import dual
        return dual(self, mv, n)

    def meet(self, a, b, n: int) -> Multivector:
        from cliffbasic.operations import meet
        return meet(self, a, b, n)

    def join(self, a, b, n: int) -> Multivector:
        from cliffbasic.operations import join
        return join(self, a, b, n)

    def is_homogeneous(self, mv, r: int) -> bool:
        from cliffbasic.operations import is_homogeneous
        return is_homogeneous(self, mv, r)
