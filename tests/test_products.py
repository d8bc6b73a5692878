"""Tests for the derived products.

Outer, inner, left/right contraction and scalar product on Cl(3,0), with
the scalar-operand boundary rules and bilinearity over sums.
"""

import pytest
import sympy

from cliffbasic.algebra import CliffordAlgebra
from cliffbasic.errors import ArityError


@pytest.fixture
def alg():
    return CliffordAlgebra(3, 0)


@pytest.fixture
def e(alg):
    return alg.e


class TestOuterProduct:

    def test_antisymmetric_on_generators(self, alg, e):
        assert alg.outer_product(e(1), e(2)) == e(1, 2)
        assert alg.outer_product(e(2), e(1)) == -e(1, 2)
        assert alg.outer_product(e(1), e(1)) == 0

    def test_scalars_scale(self, alg, e):
        assert alg.outer_product(2, e(1)) == 2 * e(1)
        assert alg.outer_product(e(1, 2), 3) == 3 * e(1, 2)
        assert alg.outer_product(2, 3) == 6

    def test_variadic(self, alg, e):
        assert alg.outer_product(e(1), e(2), e(3)) == e(1, 2, 3)
        assert alg.outer_product(e(1), e(2), e(1)) == 0

    def test_operator(self, e):
        assert (e(1) ^ e(3)) == e(1, 3)
        assert (2 ^ e(1)) == 2 * e(1)

    def test_bilinear(self, alg, e):
        a, b = sympy.symbols("a b")
        u = a * e(1) + b * e(2)
        v = e(1) + e(2)
        # (a e1 + b e2) ^ (e1 + e2) = (a - b) e12
        assert alg.outer_product(u, v) == (a - b) * e(1, 2)


class TestInnerProduct:

    def test_grade_difference(self, alg, e):
        assert alg.inner_product(e(1), e(1, 2)) == e(2)
        assert alg.inner_product(e(1, 2), e(1)) == -e(2)
        assert alg.inner_product(e(1), e(1)) == 1
        assert alg.inner_product(e(1, 2), e(1, 2)) == -1

    def test_vanishes_on_scalars(self, alg, e):
        assert alg.inner_product(3, e(1)) == 0
        assert alg.inner_product(e(1, 2), 3) == 0
        assert alg.inner_product(3, 4) == 0

    def test_distributes_over_sums(self, alg, e):
        assert alg.inner_product(e(1) + e(2), e(1, 2)) == e(2) - e(1)
        # the scalar part of the left operand drops out
        assert alg.inner_product(5 + e(1), e(1, 2)) == e(2)

    def test_operator(self, e):
        assert (e(1) | e(1, 2)) == e(2)


class TestContractions:

    def test_left_contraction(self, alg, e):
        assert alg.left_contraction(e(1), e(1, 2)) == e(2)
        assert alg.left_contraction(e(1, 2), e(1)) == 0
        assert alg.left_contraction(e(1, 2), e(1, 2, 3)) == -e(3)

    def test_left_contraction_scalars(self, alg, e):
        assert alg.left_contraction(2, e(1)) == 2 * e(1)
        assert alg.left_contraction(e(1), 2) == 0
        assert alg.left_contraction(2, 3) == 6

    def test_right_contraction(self, alg, e):
        assert alg.right_contraction(e(1, 2), e(2)) == e(1)
        assert alg.right_contraction(e(2), e(1, 2)) == 0

    def test_right_contraction_scalars(self, alg, e):
        assert alg.right_contraction(e(1), 2) == 2 * e(1)
        assert alg.right_contraction(2, e(1)) == 0
        assert alg.right_contraction(2, 3) == 6

    def test_operators(self, e):
        assert (e(1) << e(1, 2)) == e(2)
        assert (e(1, 2) >> e(2)) == e(1)


class TestScalarProduct:

    def test_grade_zero_part(self, alg, e):
        assert alg.scalar_product(e(1) + e(2), e(1)) == 1
        assert alg.scalar_product(e(1, 2), e(1, 2)) == -1
        assert alg.scalar_product(e(1), e(2)) == 0

    def test_scalar_rules(self, alg, e):
        assert alg.scalar_product(2, 3) == 6
        assert alg.scalar_product(2, e(1)) == 0
        assert alg.scalar_product(e(1), 2) == 0


class TestArity:

    @pytest.mark.parametrize("name", [
        "inner_product", "left_contraction", "right_contraction", "scalar_product",
    ])
    def test_binary_products_need_two_operands(self, alg, e, name):
        product = getattr(alg, name)
        with pytest.raises(ArityError):
            product(e(1))
        with pytest.raises(ArityError):
            product(e(1), e(2), e(3))

    def test_outer_product_needs_two(self, alg, e):
        with pytest.raises(ArityError):
            alg.outer_product(e(1))

    def test_arity_error_is_a_type_error(self, alg, e):
        with pytest.raises(TypeError):
            alg.outer_product()
