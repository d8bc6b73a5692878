# cliffbasic: Symbolic Clifford Algebra Calculator
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Exception hierarchy for cliffbasic.

Every error raised by the package derives from :class:`CliffordError` and
from the closest builtin, so callers can catch either.
"""


class CliffordError(Exception):
    """Base class for all cliffbasic errors."""


class SignatureError(CliffordError, ValueError):
    """Invalid ``(p, q)`` signature."""


class ConfigError(CliffordError, ValueError):
    """Invalid algebra configuration (bad keys, types, or ring name)."""


class BladeIndexError(CliffordError, ValueError):
    """Blade index that is not a positive integer."""


class ArityError(CliffordError, TypeError):
    """Product called with the wrong number of operands."""


class NonInvertibleError(CliffordError, ArithmeticError):
    """Multivector with zero magnitude has no inverse."""
