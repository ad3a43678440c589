"""Permutations, combinations, n queens, dice sums and the Josephus circle."""

from __future__ import annotations

import itertools
from collections import deque
from typing import Dict, List, Optional, Tuple

DICE_FACES = 6


def permutations(text: str) -> List[str]:
    """Return every distinct arrangement of ``text`` in lexicographic order.

    Each position is fixed in turn by swapping in every distinct later
    character; working on copies keeps the remaining suffix sorted.
    """
    if not text:
        return []
    result: List[str] = []

    def arrange(chars: List[str], index: int) -> None:
        if index == len(chars) - 1:
            result.append("".join(chars))
            return
        arrange(list(chars), index + 1)
        for i in range(index + 1, len(chars)):
            if chars[index] != chars[i]:
                chars[index], chars[i] = chars[i], chars[index]
                arrange(list(chars), index + 1)

    arrange(sorted(text), 0)
    return result


def next_permutation(text: str) -> Optional[str]:
    """Return the lexicographically next arrangement of ``text``.

    Returns None when ``text`` is already the last arrangement.
    """
    chars = list(text)
    pivot = len(chars) - 2
    while pivot >= 0 and chars[pivot + 1] <= chars[pivot]:
        pivot -= 1
    if pivot < 0:
        return None
    successor = len(chars) - 1
    while chars[successor] <= chars[pivot]:
        successor -= 1
    chars[pivot], chars[successor] = chars[successor], chars[pivot]
    chars[pivot + 1:] = reversed(chars[pivot + 1:])
    return "".join(chars)


def permutations_lexicographic(text: str) -> List[str]:
    """Return every distinct arrangement of ``text`` by repeated successors."""
    if not text:
        return []
    current: Optional[str] = "".join(sorted(text))
    result: List[str] = []
    while current is not None:
        result.append(current)
        current = next_permutation(current)
    return result


def combinations(text: str) -> List[str]:
    """Return every non-empty selection of characters of ``text``.

    The characters are sorted first; selections come shortest first and,
    within one length, in lexicographic order of positions.
    """
    if not text:
        return []
    chars = sorted(text)
    return [
        "".join(chosen)
        for size in range(1, len(chars) + 1)
        for chosen in itertools.combinations(chars, size)
    ]


def combinations_binary(text: str) -> List[str]:
    """Return every non-empty selection of ``text``, one per bit mask.

    Bit ``i`` of the mask picks the ``i``-th character of the sorted text,
    so the order follows the masks rather than the alphabet.
    """
    if not text:
        return []
    chars = sorted(text)
    return [
        "".join(ch for i, ch in enumerate(chars) if mask & (1 << i))
        for mask in range(1, 1 << len(chars))
    ]


def _queens_safe(columns: List[int]) -> bool:
    return all(
        abs(i - j) != abs(columns[i] - columns[j])
        for i, j in itertools.combinations(range(len(columns)), 2)
    )


def n_queens(n: int) -> List[Tuple[int, ...]]:
    """Return every placement of ``n`` non-attacking queens on an n×n board.

    A placement lists the column of the queen in each row. Boards smaller
    than three give no placements.
    """
    if n < 3:
        return []
    columns = list(range(n))
    solutions: List[Tuple[int, ...]] = []

    def place(index: int) -> None:
        if index == n:
            if _queens_safe(columns):
                solutions.append(tuple(columns))
            return
        for i in range(index, n):
            columns[index], columns[i] = columns[i], columns[index]
            place(index + 1)
            columns[index], columns[i] = columns[i], columns[index]

    place(0)
    return solutions


def _to_probabilities(n: int, counts: Dict[int, int]) -> Dict[int, float]:
    total = DICE_FACES ** n
    return {s: counts.get(s, 0) / total for s in range(n, n * DICE_FACES + 1)}


def dice_probabilities(n: int) -> Dict[int, float]:
    """Return the probability of each total when ``n`` dice are thrown.

    Counts are built one die at a time. Fewer than one die gives {}.
    """
    if n < 1:
        return {}
    counts = [0] + [1] * DICE_FACES
    for dice in range(2, n + 1):
        following = [0] * (dice * DICE_FACES + 1)
        for total in range(dice, dice * DICE_FACES + 1):
            following[total] = sum(
                counts[total - face]
                for face in range(1, DICE_FACES + 1)
                if 0 <= total - face < len(counts)
            )
        counts = following
    return _to_probabilities(n, dict(enumerate(counts)))


def dice_probabilities_recursive(n: int) -> Dict[int, float]:
    """Return the same table as :func:`dice_probabilities` by enumeration."""
    if n < 1:
        return {}
    counts: Dict[int, int] = {}

    def throw(remaining: int, total: int) -> None:
        if remaining == 0:
            counts[total] = counts.get(total, 0) + 1
            return
        for face in range(1, DICE_FACES + 1):
            throw(remaining - 1, total + face)

    throw(n, 0)
    return _to_probabilities(n, counts)


def _check_circle(n: int, m: int) -> None:
    if n < 1 or m < 1:
        raise ValueError("n and m must both be at least 1")


def last_remaining(n: int, m: int) -> int:
    """Return the survivor when every ``m``-th of 0..n-1 leaves the circle.

    Uses the recurrence f(i) = (f(i-1) + m) mod i.
    """
    _check_circle(n, m)
    survivor = 0
    for size in range(2, n + 1):
        survivor = (survivor + m) % size
    return survivor


def last_remaining_simulated(n: int, m: int) -> int:
    """Return the survivor of the circle by removing numbers one by one."""
    _check_circle(n, m)
    circle = deque(range(n))
    while len(circle) > 1:
        circle.rotate(-(m - 1))
        circle.popleft()
    return circle[0]