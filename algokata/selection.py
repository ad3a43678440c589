"""Majority element and the k smallest numbers of a sequence."""

from __future__ import annotations

import heapq
from typing import List, MutableSequence, Optional, Sequence


def _partition(values: MutableSequence[int], left: int, right: int) -> int:
    """Partition around the last element and return its final index."""
    pivot = values[right]
    while left < right:
        while left < right and values[left] <= pivot:
            left += 1
        values[right] = values[left]
        while left < right and values[right] >= pivot:
            right -= 1
        values[left] = values[right]
    values[left] = pivot
    return left


def _select(values: MutableSequence[int], k: int) -> None:
    """Rearrange so the element at index ``k`` is where sorting puts it."""
    left, right = 0, len(values) - 1
    pivot_at = _partition(values, left, right)
    while pivot_at != k:
        if pivot_at > k:
            right = pivot_at - 1
        else:
            left = pivot_at + 1
        pivot_at = _partition(values, left, right)


def _is_majority(numbers: Sequence[int], candidate: int) -> bool:
    return sum(1 for n in numbers if n == candidate) > len(numbers) // 2


def more_than_half_partition(numbers: Sequence[int]) -> Optional[int]:
    """Return the element occurring in more than half the positions.

    Found as the median by quickselect; None if there is no such element.
    """
    if not numbers:
        return None
    work = list(numbers)
    middle = len(work) // 2
    _select(work, middle)
    candidate = work[middle]
    return candidate if _is_majority(numbers, candidate) else None


def more_than_half_vote(numbers: Sequence[int]) -> Optional[int]:
    """Return the majority element by a running vote, or None."""
    if not numbers:
        return None
    candidate = numbers[0]
    times = 1
    for value in numbers[1:]:
        times += 1 if value == candidate else -1
        if times == -1:
            candidate = value
            times = 1
    return candidate if _is_majority(numbers, candidate) else None


def _k_is_valid(values: Sequence[int], k: int) -> bool:
    return bool(values) and 1 <= k <= len(values)


def least_k_partition(values: Sequence[int], k: int) -> List[int]:
    """Return the ``k`` smallest values, in no particular order.

    An empty list is returned when ``k`` is out of range.
    """
    if not _k_is_valid(values, k):
        return []
    work = list(values)
    if k != len(work):
        _select(work, k - 1)
    return work[:k]


def least_k_heap(values: Sequence[int], k: int) -> List[int]:
    """Return the ``k`` smallest values in ascending order.

    Keeps a bounded max-heap, so the input is read only once.
    An empty list is returned when ``k`` is out of range.
    """
    if not _k_is_valid(values, k):
        return []
    heap: List[int] = []
    for value in values:
        if len(heap) < k:
            heapq.heappush(heap, -value)
        elif value < -heap[0]:
            heapq.heapreplace(heap, -value)
    return sorted(-v for v in heap)


def least_k_sorted(values: Sequence[int], k: int) -> List[int]:
    """Return the ``k`` smallest values in ascending order by full sort.

    An empty list is returned when ``k`` is out of range.
    """
    if not _k_is_valid(values, k):
        return []
    return sorted(values)[:k]