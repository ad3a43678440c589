"""Reorder a sequence so elements meeting a predicate come first."""

from __future__ import annotations

from typing import Callable, List, MutableSequence

Predicate = Callable[[int], bool]


def is_odd(num: int) -> bool:
    """Return True for odd numbers, negative ones included."""
    return (num & 1) == 1


def reorder(values: MutableSequence[int], predicate: Predicate = is_odd) -> None:
    """Move elements satisfying ``predicate`` to the front, in place.

    Two cursors sweep toward each other and swap misplaced pairs; the
    relative order within each part is not kept.
    """
    if not values:
        return
    left, right = 0, len(values) - 1
    while left < right:
        while left < right and predicate(values[left]):
            left += 1
        while left < right and not predicate(values[right]):
            right -= 1
        if left < right:
            values[left], values[right] = values[right], values[left]


def reorder_odd_even(values: MutableSequence[int]) -> None:
    """Put odd numbers before even ones, in place, without keeping order."""
    reorder(values, is_odd)


def reorder_stable_bubble(values: MutableSequence[int], predicate: Predicate = is_odd) -> None:
    """Stable reorder by bubbling matching elements leftwards."""
    length = len(values)
    for i in range(length - 1):
        swapped = False
        for j in range(length - 1, i, -1):
            if predicate(values[j]) and not predicate(values[j - 1]):
                values[j], values[j - 1] = values[j - 1], values[j]
                swapped = True
        if not swapped:
            return


def reorder_stable_insert(values: MutableSequence[int], predicate: Predicate = is_odd) -> None:
    """Stable reorder by inserting each matching element after the last match."""
    for i in range(1, len(values)):
        current = values[i]
        if predicate(current) and not predicate(values[i - 1]):
            j = i
            while j > 0 and not predicate(values[j - 1]):
                values[j] = values[j - 1]
                j -= 1
            values[j] = current


def _merge(values: MutableSequence[int], low: int, mid: int, high: int,
           predicate: Predicate) -> None:
    left = values[low:mid + 1]
    right = values[mid + 1:high + 1]
    merged: List[int] = []
    i = j = 0
    while i < len(left) and predicate(left[i]):
        merged.append(left[i])
        i += 1
    while j < len(right) and predicate(right[j]):
        merged.append(right[j])
        j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    values[low:high + 1] = merged


def reorder_stable_merge(values: MutableSequence[int], predicate: Predicate = is_odd) -> None:
    """Stable reorder by merge sort on the predicate, in O(n log n)."""

    def sort_range(low: int, high: int) -> None:
        if low < high:
            mid = (high - low) // 2 + low
            sort_range(low, mid)
            sort_range(mid + 1, high)
            _merge(values, low, mid, high, predicate)

    if values:
        sort_range(0, len(values) - 1)


def reorder_odd_even_stable(values: MutableSequence[int]) -> None:
    """Put odd numbers before even ones, in place, keeping relative order."""
    reorder_stable_merge(values, is_odd)