"""String puzzles: smallest concatenation, unique characters, rotations."""

from __future__ import annotations

from collections import Counter
from functools import cmp_to_key
from typing import Dict, Iterable, Optional

NO_UNIQUE_CHAR = "#"


def _concat_order(a: str, b: str) -> int:
    ab, ba = a + b, b + a
    if ab < ba:
        return -1
    if ab > ba:
        return 1
    return 0


def min_concatenation(numbers: Iterable[int]) -> str:
    """Join non-negative numbers into the smallest possible decimal string.

    Two numbers a and b are ordered by comparing ab with ba.
    An empty input gives an empty string.
    """
    texts = sorted((str(n) for n in numbers), key=cmp_to_key(_concat_order))
    return "".join(texts)


def first_unique_char(text: str) -> Optional[str]:
    """Return the first character that occurs exactly once, or None."""
    counts = Counter(text)
    return next((ch for ch in text if counts[ch] == 1), None)


def first_unique_index(text: str) -> int:
    """Return the index of the first character occurring once, or -1."""
    counts = Counter(text)
    return next((i for i, ch in enumerate(text) if counts[ch] == 1), -1)


def reverse_sentence(text: str) -> str:
    """Reverse the order of space-separated words, keeping each word intact.

    Every single space separates two (possibly empty) words, so runs of
    spaces are preserved.
    """
    return " ".join(reversed(text.split(" ")))


def left_rotate(text: str, n: int) -> str:
    """Move the first ``n`` characters of ``text`` to its end.

    Raises ValueError for an empty text or ``n`` outside 0..len(text).
    """
    if not text or n < 0 or n > len(text):
        raise ValueError(f"cannot rotate a string of length {len(text)} by {n}")
    return text[n:] + text[:n]


def replace_spaces(text: str) -> str:
    """Replace every space in ``text`` with ``%20``."""
    return text.replace(" ", "%20")


class CharStream:
    """Tracks a stream of characters and its first non-repeated one."""

    def __init__(self) -> None:
        # position of the character's only occurrence, or None once repeated
        self._positions: Dict[str, Optional[int]] = {}
        self._index = 0

    def insert(self, ch: str) -> None:
        """Read one more character from the stream."""
        if len(ch) != 1:
            raise ValueError("exactly one character must be inserted")
        if ch in self._positions:
            self._positions[ch] = None
        else:
            self._positions[ch] = self._index
        self._index += 1

    def first_appearing_once(self) -> str:
        """Return the earliest character seen once so far, or ``#``."""
        return next(
            (ch for ch, pos in self._positions.items() if pos is not None),
            NO_UNIQUE_CHAR,
        )