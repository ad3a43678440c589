"""Searching in sorted sequences, sorted matrices and rotated arrays."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple


def binary_search(values: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the ascending ``values``, or -1."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if target < values[mid]:
            end = mid - 1
        elif target > values[mid]:
            start = mid + 1
        else:
            return mid
    return -1


def binary_search_recursive(values: Sequence[int], target: int) -> int:
    """Recursive form of :func:`binary_search`."""

    def search(start: int, end: int) -> int:
        if start > end:
            return -1
        mid = (start + end) // 2
        if target < values[mid]:
            return search(start, mid - 1)
        if target > values[mid]:
            return search(mid + 1, end)
        return mid

    return search(0, len(values) - 1)


def find_in_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows and columns ascend.

    The search starts in the bottom-left corner and moves up or right.
    """
    if not matrix or not matrix[0]:
        return False
    columns = len(matrix[0])
    row, col = len(matrix) - 1, 0
    while row >= 0 and col < columns:
        current = matrix[row][col]
        if target < current:
            row -= 1
        elif target > current:
            col += 1
        else:
            return True
    return False


def first_index_of(data: Sequence[int], k: int) -> int:
    """Return the index of the first ``k`` in the sorted ``data``, or -1."""
    left, right = 0, len(data) - 1
    while left <= right:
        mid = (left + right) // 2
        if data[mid] == k:
            if mid == 0 or data[mid - 1] != k:
                return mid
            right = mid - 1
        elif k > data[mid]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def last_index_of(data: Sequence[int], k: int) -> int:
    """Return the index of the last ``k`` in the sorted ``data``, or -1."""
    left, right = 0, len(data) - 1
    while left <= right:
        mid = (left + right) // 2
        if data[mid] == k:
            if mid == right or data[mid + 1] != k:
                return mid
            left = mid + 1
        elif k > data[mid]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def count_occurrences(data: Sequence[int], k: int) -> int:
    """Count how often ``k`` occurs in the sorted ``data``."""
    if not data:
        return 0
    first = first_index_of(data, k)
    last = last_index_of(data, k)
    if first > -1 and last > -1:
        return last - first + 1
    return 0


def min_in_rotated(values: Sequence[int]) -> int:
    """Return the smallest element of a rotated non-decreasing sequence.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("empty sequence")
    left, right = 0, len(values) - 1
    mid = left
    while values[left] >= values[right]:
        if left + 1 == right:
            mid = right
            break
        mid = (right - left) // 2 + left
        if values[left] == values[mid] == values[right]:
            return min(values[left:right + 1])
        if values[mid] >= values[left]:
            left = mid
        elif values[mid] <= values[right]:
            right = mid
    return values[mid]


def find_pair_with_sum(values: Sequence[int], total: int) -> Optional[Tuple[int, int]]:
    """Find two numbers of the ascending ``values`` that add up to ``total``.

    The pair found first is the one furthest apart, which for positive
    numbers has the smallest product. The smaller number comes first.
    Returns None when no pair exists.
    """
    if len(values) < 2 or total < values[0]:
        return None
    left, right = 0, len(values) - 1
    while left < right:
        current = values[left] + values[right]
        if current == total:
            return values[left], values[right]
        if current > total:
            right -= 1
        else:
            left += 1
    return None