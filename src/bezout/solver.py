"""Extended Euclidean Algorithm over fixed-width signed integers.

Computes the greatest common divisor of two integers together with their Bezout coefficients, such that
a*x + b*y = gcd(a, b), using the iterative textbook algorithm with truncating division. All arithmetic is carried out
in a chosen `IntType`, either checked or wrapping.

Typical usage example:

    g, x, y = solve(240, 46)  # (2, -9, 47)
    solve(-6, -4, canonical=True)  # BezoutResult(gcd=2, x=-1, y=1)
    mod_inverse(3, 11)  # 4
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import operator
import typing

from bezout import integers


class BezoutResult(typing.NamedTuple):
    """The outcome of `solve`.

    Attributes:
        gcd: The greatest common divisor, signed as the last non-zero truncating remainder unless canonicalized.
        x: Coefficient of the first input.
        y: Coefficient of the second input.
    """
    gcd: int
    x: int
    y: int


def solve(a: int,
          b: int,
          int_type: integers.IntType = integers.I32,
          wrapping: bool = False,
          canonical: bool = False) -> BezoutResult:
    """Runs the Extended Euclidean Algorithm.

    The larger input is taken as the first remainder and the smaller as the second, so that neither ordering is
    required of the caller. The coefficients are mapped back afterward: `x` always belongs to `a` and `y` to `b`.
    For explanation see https://en.wikipedia.org/wiki/Extended_Euclidean_algorithm

    Args:
        a: The first integer. Must fit `int_type`.
        b: The second integer. Must fit `int_type`.
        int_type: The integer width to compute in. Defaults to `I32`.
        wrapping: Whether out-of-range intermediates wrap around instead of raising. Defaults to False.
            Any wrap emits a RuntimeWarning, as the identity then only holds modulo 2**bits.
        canonical: Whether to flip all signs of the result if the gcd comes out negative. Defaults to False.

    Returns:
        A `BezoutResult` with a*x + b*y == gcd.

    Raises:
        ZeroDivisionError: If `min(a, b)` is zero, including `solve(0, 0)`.
        OverflowError: If an input, an intermediate or the canonical gcd is out of range and `wrapping` is False.
        TypeError: If an input is not an integer.
    """
    a = int_type.check(operator.index(a), "a")
    b = int_type.check(operator.index(b), "b")
    if min(a, b) == 0:
        raise ZeroDivisionError(f"Cannot solve ({a}, {b}): the smaller input is the first divisor and it is zero.")
    swapped = a < b
    r0, s0, t0 = max(a, b), 1, 0
    r1, s1, t1 = min(a, b), 0, 1

    while True:
        rk = int_type.rem(r0, r1)
        if rk == 0:
            break
        q = int_type.div(r0, r1, wrapping)
        sk = int_type.sub(s0, int_type.mul(q, s1, wrapping), wrapping)
        tk = int_type.sub(t0, int_type.mul(q, t1, wrapping), wrapping)
        r0, s0, t0 = r1, s1, t1
        r1, s1, t1 = rk, sk, tk

    # s tracks max(a, b) and t tracks min(a, b).
    if swapped:
        s1, t1 = t1, s1
    if canonical and r1 < 0:
        return BezoutResult(int_type.neg(r1, wrapping), int_type.neg(s1, wrapping), int_type.neg(t1, wrapping))
    return BezoutResult(r1, s1, t1)


def mod_inverse(a: int, m: int, int_type: integers.IntType = integers.I32) -> int:
    """Finds the inverse of `a` modulo `m`.

    Args:
        a: The element to invert. Any value fitting `int_type`, reduced modulo `m` first.
        m: The modulus. Must be positive and fit `int_type`.
        int_type: The integer width to compute in. Defaults to `I32`.

    Returns:
        The `x` in [0, m) with a*x congruent to 1 modulo m.

    Raises:
        ValueError: If `m` is not positive or `a` is not invertible modulo `m`.
        OverflowError: If `a` or `m` is out of range for `int_type`.
    """
    a = int_type.check(operator.index(a), "a")
    m = int_type.check(operator.index(m), "m")
    if m <= 0:
        raise ValueError("Modulus must be positive.")
    a %= m
    if a == 0:
        if m == 1:
            return 0
        raise ValueError("base is not invertible for the given modulus")
    g, x, _ = solve(a, m, int_type, canonical=True)
    if g != 1:
        raise ValueError("base is not invertible for the given modulus")
    return x % m
