"""Decimal numbers of arbitrary length held as digit strings."""

from __future__ import annotations

from typing import Iterator, List

_DIGITS = "0123456789"


def _increment(digits: List[int]) -> bool:
    """Add one to ``digits`` in place; return False when it overflows."""
    for i in range(len(digits) - 1, -1, -1):
        total = digits[i] + 1
        if total > 9:
            digits[i] = 0
            if i == 0:
                return False
        else:
            digits[i] = total
            return True
    return False


def count_to_max_digits(n: int) -> Iterator[str]:
    """Yield 1, 2, ... up to the largest ``n``-digit number, as strings."""
    if n < 0:
        raise ValueError("digit count must not be negative")
    digits = [0] * n
    while _increment(digits):
        yield "".join(str(d) for d in digits).lstrip("0")


def count_to_max_digits_recursive(n: int) -> Iterator[str]:
    """Yield the same numbers as :func:`count_to_max_digits`.

    Every digit position is set to 0..9 in turn; the all-zero string is
    skipped.
    """
    if n < 0:
        raise ValueError("digit count must not be negative")
    if n == 0:
        return
    chars = ["0"] * n

    def fill(index: int) -> Iterator[str]:
        if index == n:
            number = "".join(chars).lstrip("0")
            if number:
                yield number
            return
        for digit in _DIGITS:
            chars[index] = digit
            yield from fill(index + 1)

    yield from fill(0)


def _check_digits(text: str) -> None:
    if not text or any(ch not in _DIGITS for ch in text):
        raise ValueError(f"{text!r} is not a non-negative decimal number")


def add_big(a: str, b: str) -> str:
    """Add two non-negative decimal strings of any length."""
    _check_digits(a)
    _check_digits(b)
    width = max(len(a), len(b)) + 1
    left = a[::-1].ljust(width, "0")
    right = b[::-1].ljust(width, "0")
    carry = 0
    result: List[str] = []
    for x, y in zip(left, right):
        total = int(x) + int(y) + carry
        carry, digit = divmod(total, 10)
        result.append(str(digit))
    return "".join(reversed(result)).lstrip("0") or "0"