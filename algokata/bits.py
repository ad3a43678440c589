"""Bit manipulation on 32-bit two's complement integers."""

from __future__ import annotations

from typing import Sequence, Tuple

_MASK = 0xFFFFFFFF
_INT_BITS = 32


def _to_signed(value: int) -> int:
    value &= _MASK
    return value - (1 << _INT_BITS) if value & 0x80000000 else value


def count_ones(n: int) -> int:
    """Count the 1 bits in the 32-bit two's complement form of ``n``."""
    n &= _MASK
    count = 0
    while n:
        count += 1
        n &= n - 1
    return count


def _first_set_bit(num: int) -> int:
    index = 0
    while num & 1 == 0 and index < _INT_BITS:
        num >>= 1
        index += 1
    return index


def find_nums_appear_once(data: Sequence[int]) -> Tuple[int, int]:
    """Find the two numbers that occur once when every other occurs twice.

    The first number returned is the one whose distinguishing bit is set.
    """
    if len(data) < 2:
        raise ValueError("at least two numbers are required")
    xor_all = 0
    for value in data:
        xor_all ^= value
    bit = _first_set_bit(_to_signed(xor_all))
    num1 = num2 = 0
    for value in data:
        if (value >> bit) & 1:
            num1 ^= value
        else:
            num2 ^= value
    return num1, num2


def add(num1: int, num2: int) -> int:
    """Add two 32-bit integers using only bitwise operations."""
    a, b = num1 & _MASK, num2 & _MASK
    while True:
        total = a ^ b
        carry = ((a & b) << 1) & _MASK
        a, b = total, carry
        if carry == 0:
            return _to_signed(total)


def add_recursive(num1: int, num2: int) -> int:
    """Recursive form of :func:`add`."""
    a, b = num1 & _MASK, num2 & _MASK
    total = a ^ b
    carry = ((a & b) << 1) & _MASK
    if carry == 0:
        return _to_signed(total)
    return add_recursive(total, carry)