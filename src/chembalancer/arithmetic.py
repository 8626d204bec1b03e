"""Checked integer helpers.

Every value produced here must satisfy ``-INT_LIMIT < value < INT_LIMIT``.
Anything outside raises :class:`ArithmeticOverflowError` instead of growing
without bound.
"""

from __future__ import annotations

from chembalancer.errors import ArithmeticOverflowError

INT_LIMIT = 2**53


def check_range(value: int) -> int:
    if value <= -INT_LIMIT or value >= INT_LIMIT:
        raise ArithmeticOverflowError()
    return value


def checked_parse_int(text: str) -> int:
    """Parse a decimal digit string."""
    if not text.isdigit():
        raise ValueError(f"Not a number: {text!r}")
    # Long digit strings would be slow to convert and are out of range anyway.
    if len(text.lstrip("0")) > len(str(INT_LIMIT)):
        raise ArithmeticOverflowError()
    return check_range(int(text))


def checked_add(x: int, y: int) -> int:
    return check_range(x + y)


def checked_multiply(x: int, y: int) -> int:
    return check_range(x * y)


def gcd(x: int, y: int) -> int:
    """Non-negative greatest common divisor; ``gcd(0, 0) == 0``."""
    x, y = abs(x), abs(y)
    while y != 0:
        x, y = y, x % y
    return x


def lcm(x: int, y: int) -> int:
    """Checked least common multiple of two non-zero integers."""
    return checked_multiply(abs(x) // gcd(x, y), abs(y))
