"""Algebraic identities across signature types.

Verifies, for Euclidean, anti-Euclidean and mixed signatures:
- generator squares (+1, -1, and 0 beyond the declared dimension)
- anticommutativity of distinct generators
- associativity of the geometric product
- grade completeness, and reversion / involution being involutions
"""

import itertools

import pytest
import sympy

from cliffbasic.algebra import CliffordAlgebra


SIGNATURES = [(3, 0), (0, 3), (2, 1), (1, 3)]


# ── Helpers ────────────────────────────────────────────────────────────

def _general_multivector(algebra, prefix):
    """Sum over every basis blade with its own symbolic coefficient."""
    result = algebra.zero()
    for k, blade in enumerate(algebra.basis()):
        result = result + sympy.Symbol(f"{prefix}{k}") * blade
    return result


# ── Generators ─────────────────────────────────────────────────────────

class TestGenerators:

    @pytest.fixture(params=SIGNATURES)
    def algebra(self, request):
        p, q = request.param
        return CliffordAlgebra(p, q)

    def test_squares(self, algebra):
        for i in range(1, algebra.n + 1):
            expected = 1 if i <= algebra.p else -1
            assert algebra.e(i) * algebra.e(i) == expected

    def test_beyond_dimension_squares_to_zero(self, algebra):
        outside = algebra.e(algebra.n + 1)
        assert not outside.is_zero
        assert (outside * outside).is_zero

    def test_anticommute(self, algebra):
        e = algebra.e
        for i, j in itertools.permutations(range(1, algebra.n + 1), 2):
            assert e(i) * e(j) == -(e(j) * e(i))

    def test_outer_antisymmetry(self, algebra):
        e = algebra.e
        for i, j in itertools.permutations(range(1, algebra.n + 1), 2):
            assert (e(i) ^ e(j)) == -(e(j) ^ e(i))
        for i in range(1, algebra.n + 1):
            assert (e(i) ^ e(i)) == 0

    def test_signatures_coexist(self):
        euclid = CliffordAlgebra(3, 0)
        anti = CliffordAlgebra(0, 3)
        assert euclid.e(1) * euclid.e(1) == 1
        assert anti.e(1) * anti.e(1) == -1
        assert euclid.e(1) * euclid.e(1) == 1


# ── Identities on general multivectors ─────────────────────────────────

class TestIdentities:

    @pytest.fixture(params=[(2, 1), (1, 2)])
    def algebra(self, request):
        p, q = request.param
        return CliffordAlgebra(p, q)

    def test_associativity(self, algebra):
        A = _general_multivector(algebra, "a")
        B = _general_multivector(algebra, "b")
        C = _general_multivector(algebra, "c")
        assert (A * B) * C == A * (B * C)

    def test_outer_associativity(self, algebra):
        A = _general_multivector(algebra, "a")
        B = _general_multivector(algebra, "b")
        C = _general_multivector(algebra, "c")
        assert ((A ^ B) ^ C) == (A ^ (B ^ C))

    def test_grade_completeness(self, algebra):
        m = _general_multivector(algebra, "m")
        parts = [algebra.grade(m, r) for r in range(algebra.n + 1)]
        assert sum(parts, algebra.zero()) == m
        assert algebra.grade(m, -1) == 0
        assert algebra.grade(m, algebra.n + 1) == 0

    def test_reverse_is_involutive(self, algebra):
        m = _general_multivector(algebra, "m")
        assert ~~m == m
        assert algebra.involution(algebra.involution(m)) == m

    def test_reverse_is_anti_automorphism(self, algebra):
        A = _general_multivector(algebra, "a")
        B = _general_multivector(algebra, "b")
        assert ~(A * B) == ~B * ~A

    def test_involution_is_automorphism(self, algebra):
        A = _general_multivector(algebra, "a")
        B = _general_multivector(algebra, "b")
        inv = algebra.involution
        assert inv(A * B) == inv(A) * inv(B)

    def test_vector_product_splits_into_inner_and_outer(self, algebra):
        e = algebra.e
        x, y = sympy.symbols("x y")
        u = x * e(1) + e(2)
        v = e(1) + y * e(3)
        assert u * v == (u | v) + (u ^ v)
