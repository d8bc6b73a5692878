# cliffbasic: Symbolic Clifford Algebra Calculator
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Lightweight input validation for cliffbasic.

Signature and index checks always run: a bad signature or a non-positive
index is never a valid algebraic input. The operand checks (arity aside)
can be switched off with ``VALIDATE = False``.
"""

from cliffbasic.errors import ArityError, BladeIndexError, SignatureError

VALIDATE = True


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_signature(p, q) -> None:
    """Raise :class:`SignatureError` unless ``p`` and ``q`` are ints >= 0."""
    for label, value in (("p", p), ("q", q)):
        if not _is_int(value):
            raise SignatureError(
                f"{label} must be an int, got {type(value).__name__} ({value!r})"
            )
        if value < 0:
            raise SignatureError(f"{label} must be non-negative, got {value}")


def check_indices(indices) -> None:
    """Raise :class:`BladeIndexError` unless every index is an int >= 1."""
    for i in indices:
        if not _is_int(i):
            raise BladeIndexError(
                f"blade indices must be ints, got {type(i).__name__} ({i!r})"
            )
        if i <= 0:
            raise BladeIndexError(f"blade indices must be positive, got {i}")


def check_arity(operands, name: str, exact: bool = False) -> None:
    """Raise :class:`ArityError` for fewer than two (or, if exact, not two) operands."""
    count = len(operands)
    if count < 2 or (exact and count != 2):
        expected = "exactly 2" if exact else "at least 2"
        raise ArityError(f"{name}: expected {expected} operands, got {count}")


def check_same_algebra(algebra, mv, name: str = "x") -> None:
    """Raise ``ValueError`` if *mv* belongs to a different algebra."""
    if not VALIDATE:
        return
    if mv.algebra is not algebra and mv.algebra != algebra:
        raise ValueError(
            f"{name}: algebras must match, got {mv.algebra!r} and {algebra!r}; "
            f"use algebra.coerce() to rebind"
        )


def check_dimension(n, name: str = "n") -> None:
    """Raise ``ValueError`` unless ``n`` is a positive int."""
    if not _is_int(n) or n <= 0:
        raise ValueError(f"{name}: dimension must be a positive int, got {n!r}")


def check_grade(r, name: str = "r", positive: bool = False) -> None:
    """Raise ``ValueError`` unless ``r`` is an int (and positive, if asked)."""
    if not _is_int(r):
        raise ValueError(f"{name}: grade must be an int, got {r!r}")
    if positive and r <= 0:
        raise ValueError(f"{name}: grade must be positive, got {r}")
