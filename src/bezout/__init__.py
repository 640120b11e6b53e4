"""Bezout coefficients via the Extended Euclidean Algorithm, in fixed-width signed integers.

Provides the Extended Euclidean Algorithm computed in a chosen two's complement integer width, with checked arithmetic
by default and legacy wrapping arithmetic on request. Furthermore, provides a modular inverse built on top of it.

Typical usage example:

    g, x, y = solve(22, 15)
    assert 22 * x + 15 * y == g
    inv = mod_inverse(3, 11)
    r = solve(-128, -128, int_type=I8, wrapping=True, canonical=True)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from bezout.integers import from_bits
from bezout.integers import I128
from bezout.integers import I16
from bezout.integers import I32
from bezout.integers import I64
from bezout.integers import I8
from bezout.integers import IntType
from bezout.solver import BezoutResult
from bezout.solver import mod_inverse
from bezout.solver import solve

__version__ = "0.0.1"
__all__ = [
    "BezoutResult",
    "solve",
    "mod_inverse",
    "IntType",
    "from_bits",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
]
