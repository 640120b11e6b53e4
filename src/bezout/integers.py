"""Fixed-width signed integer arithmetic on top of Python's unbounded integers.

Python integers never overflow, so every operation here computes the exact result first and then settles it into the
chosen width: either by raising (checked, the default) or by reducing it modulo 2**bits into the signed range (wrapping,
the two's complement behavior of most native integer types). Division and remainder truncate toward zero, unlike
Python's `//` and `%` which floor.

Typical usage example:

    I32.mul(2**20, 2**20)  # OverflowError
    I32.mul(2**20, 2**20, wrapping=True)  # 0, with a RuntimeWarning
    I8.rem(-7, 2)  # -1
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing
import warnings


def trunc_divmod(n: int, d: int) -> tuple[int, int]:
    """Divides `n` by `d` with truncation toward zero.

    Args:
        n: The dividend.
        d: The divisor.

    Returns:
        Tuple of (quotient, remainder) such that `n == q * d + r`, `abs(r) < abs(d)` and `r` shares the sign of `n`.

    Raises:
        ZeroDivisionError: If `d` is zero.
    """
    if d == 0:
        raise ZeroDivisionError("integer division or modulo by zero")
    q = abs(n) // abs(d)
    if (n < 0) != (d < 0):
        q = -q
    return q, n - q * d


class IntType(typing.NamedTuple):
    """A signed two's complement integer type of a fixed bit width.

    Attributes:
        bits: The width in bits, including the sign bit.
    """
    bits: int

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1

    @property
    def name(self) -> str:
        return f"i{self.bits}"

    def fits(self, value: int) -> bool:
        return self.min <= value <= self.max

    def check(self, value: int, name: str = "value") -> int:
        """Returns `value` unchanged if it is representable, otherwise raises.

        Raises:
            OverflowError: If `value` is out of range for this type.
        """
        if not self.fits(value):
            raise OverflowError(f"{name} {value} out of range for {self.name} [{self.min}, {self.max}]")
        return value

    def wrap(self, value: int) -> int:
        """Reduces `value` modulo 2**bits into [min, max]."""
        return (value - self.min) % (1 << self.bits) + self.min

    def _settle(self, value: int, wrapping: bool, op: str) -> int:
        if self.fits(value):
            return value
        if not wrapping:
            raise OverflowError(f"attempt to {op} with overflow in {self.name}: exact result {value}")
        # stacklevel points past the public operation at its caller.
        warnings.warn(f"{self.name} {op} wrapped around: {value} became {self.wrap(value)}",
                      RuntimeWarning,
                      stacklevel=3)
        return self.wrap(value)

    def add(self, x: int, y: int, wrapping: bool = False) -> int:
        return self._settle(x + y, wrapping, "add")

    def sub(self, x: int, y: int, wrapping: bool = False) -> int:
        return self._settle(x - y, wrapping, "subtract")

    def mul(self, x: int, y: int, wrapping: bool = False) -> int:
        return self._settle(x * y, wrapping, "multiply")

    def neg(self, x: int, wrapping: bool = False) -> int:
        return self._settle(-x, wrapping, "negate")

    def div(self, n: int, d: int, wrapping: bool = False) -> int:
        """Truncating division. Only `min / -1` can overflow.

        Raises:
            ZeroDivisionError: If `d` is zero.
            OverflowError: If the quotient is out of range and `wrapping` is False.
        """
        q, _ = trunc_divmod(n, d)
        return self._settle(q, wrapping, "divide")

    def rem(self, n: int, d: int) -> int:
        """Truncating remainder, taking the sign of `n`. Always representable, `min % -1` is 0.

        Raises:
            ZeroDivisionError: If `d` is zero.
        """
        _, r = trunc_divmod(n, d)
        return r


I8 = IntType(8)
I16 = IntType(16)
I32 = IntType(32)
I64 = IntType(64)
I128 = IntType(128)

_KNOWN_TYPES = {t.bits: t for t in (I8, I16, I32, I64, I128)}


def from_bits(bits: int) -> IntType:
    """Gets the integer type of the given width.

    Args:
        bits: Width in bits. Must be a positive multiple of 8.

    Returns:
        The matching predefined type, or a new one for uncommon widths such as 24 or 256.

    Raises:
        ValueError: If `bits` is not a positive multiple of 8.
    """
    if bits <= 0 or bits % 8 != 0:
        raise ValueError("Width must be a positive multiple of 8.")
    return _KNOWN_TYPES.get(bits) or IntType(bits)
