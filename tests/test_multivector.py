"""Tests for the Multivector container: construction, queries, equality,
presentation, and cross-algebra rules."""

import pytest
import sympy

from cliffbasic.algebra import CliffordAlgebra
from cliffbasic.errors import BladeIndexError


@pytest.fixture
def alg():
    return CliffordAlgebra(3, 0)


@pytest.fixture
def e(alg):
    return alg.e


class TestConstruction:

    def test_raw_blades(self, alg, e):
        assert e() == 1
        assert e(1, 1) == 1
        assert e(2, 1) == -e(1, 2)
        assert e(5, 5).is_zero
        assert e(5).max_index == 5

    def test_bad_index(self, e):
        with pytest.raises(BladeIndexError):
            e(0)

    def test_from_terms_merges_like_blades(self, alg, e):
        m = alg.from_terms({(1, 2): 3, (2, 1): 1, (): 4, (3, 3): 2})
        # 3 e12 - e12 + 4 + 2
        assert m == 6 + 2 * e(1, 2)

    def test_zero_terms_are_dropped(self, alg, e):
        a = sympy.Symbol("a")
        m = a * e(1) + e(2) - a * e(1)
        assert m == e(2)
        assert len(m) == 1

    def test_basis(self, alg):
        assert len(alg.basis()) == 8
        assert [b.blades[0] for b in alg.basis(2)] == [(1, 2), (1, 3), (2, 3)]


class TestQueries:

    def test_coefficients(self, e):
        m = 3 * e(1, 2) + 5
        assert m.coeff(1, 2) == 3
        assert m.coeff(2, 1) == -3
        assert m[(1, 2)] == 3
        assert m[1] == 0
        assert m.scalar_part == 5

    def test_grades_and_flags(self, alg, e):
        m = 2 + e(1) + e(2, 3)
        assert m.grades == [0, 1, 2]
        assert not m.is_scalar
        assert alg.scalar(4).is_scalar
        assert alg.zero().is_zero
        assert not alg.zero()

    def test_grade_projection(self, e):
        m = 2 + e(1) + e(2, 3) + e(3)
        assert m.grade(1) == e(1) + e(3)
        assert m.grade(0) == 2
        assert m.grade(-1) == 0

    def test_subs_and_map(self, alg, e):
        a, b = sympy.symbols("a b")
        m = a * e(1) + b * e(2)
        assert m.subs(a, 2) == 2 * e(1) + b * e(2)
        assert m.subs({a: b, b: a}, simultaneous=True) == b * e(1) + a * e(2)
        assert m.map(lambda c: c * 0) == 0

    def test_simplify(self, e):
        x = sympy.Symbol("x")
        m = (sympy.sin(x) ** 2 + sympy.cos(x) ** 2) * e(1)
        assert m.simplify() == e(1)


class TestArithmetic:

    def test_scalar_mixing(self, e):
        assert e(1) + 1 == 1 + e(1)
        assert (1 - e(1)) + e(1) == 1
        assert -e(1) + e(1) == 0

    def test_division_by_scalar(self, e):
        assert (4 * e(1)) / 2 == 2 * e(1)
        with pytest.raises(ZeroDivisionError):
            e(1) / 0

    def test_unsupported_operand(self, e):
        with pytest.raises(TypeError):
            e(1) + "x"
        with pytest.raises(TypeError):
            e(1) * object()

    def test_mixing_algebras_raises(self):
        euclid = CliffordAlgebra(3, 0)
        anti = CliffordAlgebra(0, 3)
        with pytest.raises(ValueError):
            euclid.e(1) * anti.e(1)

    def test_coerce_rebinds(self):
        euclid = CliffordAlgebra(3, 0)
        anti = CliffordAlgebra(0, 3)
        v = anti.coerce(euclid.e(1))
        assert v * v == -1
        assert euclid.e(1) * euclid.e(1) == 1

    def test_same_signature_algebras_interoperate(self):
        a = CliffordAlgebra(2, 0)
        b = CliffordAlgebra(2, 0)
        assert a == b
        assert a.e(1) * b.e(2) == a.e(1, 2)


class TestPresentation:

    def test_str(self, alg, e):
        a = sympy.Symbol("a")
        assert str(a + 5 * e(1) + e(1, 2, 3)) == "a + 5*e[1] + e[1,2,3]"
        assert str(e(1) - e(2)) == "e[1] - e[2]"
        assert str(-2 * e(2, 3)) == "-2*e[2,3]"
        assert str(alg.zero()) == "0"

    def test_sum_coefficients_are_parenthesized(self, e):
        a, b = sympy.symbols("a b")
        assert str((a + b) * e(1)) == "(a + b)*e[1]"

    def test_repr_names_the_algebra(self, e):
        assert repr(e(1)) == "Multivector(e[1], algebra=Cl(3,0))"

    def test_hashable(self, e):
        seen = {e(1): "x", e(1, 2): "y"}
        assert seen[e(2, 1) * -1] == "y"
