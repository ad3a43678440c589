"""Tiny regular expression matching and numeric string recognition."""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple


def match(text: str, pattern: str) -> bool:
    """Match all of ``text`` against ``pattern``.

    ``.`` matches any one character and ``*`` lets the character before
    it occur any number of times, including none.
    """

    @lru_cache(maxsize=None)
    def core(i: int, j: int) -> bool:
        if j == len(pattern):
            return i == len(text)
        head_ok = i < len(text) and pattern[j] in (".", text[i])
        if j + 1 < len(pattern) and pattern[j + 1] == "*":
            return core(i, j + 2) or (head_ok and (core(i + 1, j + 2) or core(i + 1, j)))
        return head_ok and core(i + 1, j + 1)

    return core(0, 0)


def _scan_digits(text: str, i: int) -> Tuple[int, bool]:
    start = i
    while i < len(text) and "0" <= text[i] <= "9":
        i += 1
    return i, i > start


def _is_exponent(text: str, i: int) -> bool:
    if i < len(text) and text[i] in "+-":
        i += 1
    if i == len(text):
        return False
    i, _ = _scan_digits(text, i)
    return i == len(text)


def is_numeric(text: str) -> bool:
    """Tell whether ``text`` is a decimal number.

    Accepted form: [sign] digits [. [digits]] [e|E [sign] digits], where
    the integer and fraction parts may not both be missing.
    """
    n = len(text)
    i = 0
    if i < n and text[i] in "+-":
        i += 1
    if i == n:
        return False
    i, has_integer = _scan_digits(text, i)
    if i == n:
        return True
    if text[i] == ".":
        i, has_fraction = _scan_digits(text, i + 1)
        if not has_fraction and not has_integer:
            return False
        if i < n and text[i] in "eE":
            return _is_exponent(text, i + 1)
        return i == n
    if text[i] in "eE" and has_integer:
        return _is_exponent(text, i + 1)
    return False