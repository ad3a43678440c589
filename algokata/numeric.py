"""String-to-integer conversion and integer powers of floats."""

from __future__ import annotations

import math

INT_MAX = 0x7FFFFFFF
INT_MIN = -0x80000000
_EPSILON = 0.0000001


def str_to_int(text: str) -> int:
    """Parse an optionally signed decimal string into a 32-bit integer.

    Raises ValueError for an empty string, a lone sign, any non-digit
    character or a value outside the 32-bit signed range.
    """
    if not text:
        raise ValueError("empty string")
    negative = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text
    if not digits:
        raise ValueError("sign without digits")
    sign = -1 if negative else 1
    number = 0
    for ch in digits:
        if not "0" <= ch <= "9":
            raise ValueError(f"invalid character {ch!r} in {text!r}")
        number = number * 10 + (ord(ch) - ord("0")) * sign
        if number > INT_MAX or number < INT_MIN:
            raise ValueError(f"{text!r} overflows a 32-bit integer")
    return number


def approx_equal(a: float, b: float) -> bool:
    """Return True if ``a`` and ``b`` differ by less than 1e-7."""
    return -_EPSILON < a - b < _EPSILON


def _power_unsigned(base: float, exponent: int) -> float:
    if exponent == 0:
        return 1.0
    result = _power_unsigned(base, exponent >> 1)
    result *= result
    if exponent & 1:
        result *= base
    return result


def power(base: float, exponent: int) -> float:
    """Raise ``base`` to an integer ``exponent`` by repeated squaring.

    Zero raised to a negative exponent raises ValueError.
    """
    if approx_equal(base, 0.0) and exponent < 0:
        raise ValueError("zero cannot be raised to a negative power")
    result = _power_unsigned(base, abs(exponent))
    if exponent < 0:
        if result == 0.0:
            return math.copysign(math.inf, result)
        result = 1.0 / result
    return result