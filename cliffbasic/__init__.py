# cliffbasic: Symbolic Clifford Algebra Calculator
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""cliffbasic: symbolic Clifford algebra calculator.

Provides the Clifford algebra Cl(p, q) over a pluggable coefficient ring,
the multivector container, blade canonicalization, and the array adapters.
"""

__version__ = "0.1.0"

from .signature import Signature
from .blade import Canonicalizer, canonicalize
from .ring import CoefficientRing, SymbolicRing, NumericRing, get_ring
from .multivector import Multivector
from .algebra import CliffordAlgebra
from .config import AlgebraConfig
from .adapters import to_basis, to_vector, to_dense, from_dense
from .errors import (
    CliffordError,
    SignatureError,
    ConfigError,
    BladeIndexError,
    ArityError,
    NonInvertibleError,
)

__all__ = [
    "__version__",
    # algebra
    "CliffordAlgebra",
    "Multivector",
    "Signature",
    "AlgebraConfig",
    # blades
    "Canonicalizer",
    "canonicalize",
    # rings
    "CoefficientRing",
    "SymbolicRing",
    "NumericRing",
    "get_ring",
    # adapters
    "to_basis",
    "to_vector",
    "to_dense",
    "from_dense",
    # errors
    "CliffordError",
    "SignatureError",
    "ConfigError",
    "BladeIndexError",
    "ArityError",
    "NonInvertibleError",
]
