# cliffbasic: Symbolic Clifford Algebra Calculator
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Metric signature of a Clifford algebra."""

from dataclasses import dataclass

from cliffbasic.validation import check_signature

DEFAULT_P = 20
DEFAULT_Q = 0


@dataclass(frozen=True)
class Signature:
    """Immutable ``(p, q)`` pair.

    Generators ``e[1]..e[p]`` square to +1, ``e[p+1]..e[n]`` square to -1.
    Generators beyond ``n`` may appear singly but square to 0.

    Attributes:
        p (int): Positive signature dimensions.
        q (int): Negative signature dimensions.
    """

    p: int = DEFAULT_P
    q: int = DEFAULT_Q

    def __post_init__(self) -> None:
        check_signature(self.p, self.q)

    @property
    def n(self) -> int:
        """Total dimension p + q."""
        return self.p + self.q

    def square(self, i: int) -> int:
        """Scalar value of ``e[i] * e[i]``: +1, -1, or 0 beyond ``n``."""
        if i <= self.p:
            return 1
        if i <= self.n:
            return -1
        return 0

    def __str__(self) -> str:
        return f"Cl({self.p},{self.q})"
