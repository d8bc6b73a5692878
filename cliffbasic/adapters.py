# cliffbasic: Symbolic Clifford Algebra Calculator
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Conversions between multivectors and arrays.

``to_basis`` / ``to_vector`` map coefficient lists to grade-1 multivectors
and back. ``to_dense`` / ``from_dense`` use the bitmask layout of the tensor
kernels: entry ``k`` of a length ``2**n`` tensor holds the blade whose
generators are the set bits of ``k`` (bit ``i - 1`` for ``e[i]``).
"""

from typing import List, Optional

import numpy as np
import torch

from cliffbasic.multivector import Multivector

# Dense tensors grow as 2**n
MAX_DENSE_DIM = 12


def _as_list(values) -> list:
    """Flatten a 1-D sequence, ``numpy`` array, or ``torch`` tensor to a list."""
    if isinstance(values, torch.Tensor):
        if values.ndim != 1:
            raise ValueError(f"expected a 1-D tensor, got shape {tuple(values.shape)}")
        return values.detach().cpu().tolist()
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValueError(f"expected a 1-D array, got shape {values.shape}")
        return values.tolist()
    return list(values)


def to_basis(algebra, values) -> Multivector:
    """Vector ``[a, b, ...]`` -> ``a e[1] + b e[2] + ...``.

    Args:
        algebra (CliffordAlgebra): Target algebra.
        values: 1-D sequence, ``numpy`` array, or ``torch`` tensor.

    Returns:
        Multivector: Grade-1 multivector.
    """
    coeffs = _as_list(values)
    return algebra.from_terms(((i + 1,), c) for i, c in enumerate(coeffs))


def to_vector(mv: Multivector, n: Optional[int] = None) -> List:
    """Grade-1 multivector -> list of its ``n`` coefficients.

    Args:
        mv (Multivector): A vector (or zero).
        n (int, optional): Length of the result. Defaults to the largest
            generator index present.

    Raises:
        ValueError: If ``mv`` has non-vector parts, or ``n`` would drop
            a component.
    """
    if any(len(blade) != 1 for blade in mv.blades):
        raise ValueError(f"to_vector expects a grade-1 multivector, got grades {mv.grades}")
    if n is None:
        n = mv.max_index
    if n < mv.max_index:
        raise ValueError(f"n={n} is smaller than the largest index {mv.max_index}")
    return [mv.coeff(i) for i in range(1, n + 1)]


def _blade_to_bitmask(blade) -> int:
    mask = 0
    for i in blade:
        mask |= 1 << (i - 1)
    return mask


def to_dense(mv: Multivector, n: Optional[int] = None, dtype=torch.float64) -> torch.Tensor:
    """Numeric multivector -> dense coefficient tensor ``[2**n]``.

    Args:
        mv (Multivector): Multivector with numeric coefficients.
        n (int, optional): Dimension. Defaults to the algebra's ``n``.
        dtype (torch.dtype, optional): Output dtype. Defaults to float64.

    Raises:
        ValueError: If ``n`` exceeds the dense limit or a blade does not fit.
        TypeError: If a coefficient is not a number.
    """
    if n is None:
        n = mv.algebra.n
    if n > MAX_DENSE_DIM:
        raise ValueError(f"dense layout limited to n <= {MAX_DENSE_DIM}, got {n}")
    if mv.max_index > n:
        raise ValueError(f"multivector uses e[{mv.max_index}], beyond n={n}")

    dense = torch.zeros(2 ** n, dtype=dtype)
    for blade, coeff in mv.terms():
        try:
            value = complex(coeff) if dtype.is_complex else float(coeff)
        except TypeError as exc:
            raise TypeError(f"coefficient {coeff} of {blade} is not numeric") from exc
        dense[_blade_to_bitmask(blade)] = value
    return dense


def from_dense(algebra, values) -> Multivector:
    """Dense coefficient tensor ``[2**n]`` -> multivector.

    Args:
        algebra (CliffordAlgebra): Target algebra.
        values: 1-D ``torch`` tensor or ``numpy`` array of length ``2**n``.
    """
    coeffs = _as_list(values)
    size = len(coeffs)
    if size == 0 or size & (size - 1):
        raise ValueError(f"dense length must be a power of two, got {size}")
    n = size.bit_length() - 1

    terms = []
    for index, coeff in enumerate(coeffs):
        if coeff == 0:
            continue
        blade = tuple(i + 1 for i in range(n) if index >> i & 1)
        terms.append((blade, coeff))
    return algebra.from_terms(terms)
