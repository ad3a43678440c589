"""Classic in-place sorting algorithms on lists of integers.

Every sort rearranges the given list in place and returns None,
like :meth:`list.sort`.
"""

from __future__ import annotations

import random
from typing import List, MutableSequence, Optional


def insertion_sort(values: MutableSequence[int]) -> None:
    """Sort by straight insertion, scanning back from each element."""
    for i in range(1, len(values)):
        if values[i] < values[i - 1]:
            current = values[i]
            j = i - 1
            while j >= 0 and current < values[j]:
                values[j + 1] = values[j]
                j -= 1
            values[j + 1] = current


def binary_insertion_sort(values: MutableSequence[int]) -> None:
    """Sort by insertion, finding each insertion point by binary search.

    An element equal to one already placed goes right after it.
    """
    for i in range(1, len(values)):
        if values[i] < values[i - 1]:
            current = values[i]
            low, high = 0, i - 1
            insert_at: Optional[int] = None
            while low <= high:
                mid = (low + high) // 2
                if current == values[mid]:
                    insert_at = mid + 1
                    break
                if current < values[mid]:
                    high = mid - 1
                else:
                    low = mid + 1
            if insert_at is None:
                insert_at = high + 1
            values[insert_at + 1:i + 1] = values[insert_at:i]
            values[insert_at] = current


def shell_sort(values: MutableSequence[int]) -> None:
    """Sort by insertion over gaps that halve down to one."""
    length = len(values)
    gap = length // 2
    while gap >= 1:
        for i in range(gap, length):
            if values[i] < values[i - gap]:
                current = values[i]
                j = i - gap
                while j >= 0 and current < values[j]:
                    values[j + gap] = values[j]
                    j -= gap
                values[j + gap] = current
        gap //= 2


def bubble_sort(values: MutableSequence[int]) -> None:
    """Bubble the smallest remaining element to the front on each pass.

    Stops early after a pass without swaps.
    """
    length = len(values)
    for i in range(length - 1):
        swapped = False
        for j in range(length - 1, i, -1):
            if values[j - 1] > values[j]:
                values[j - 1], values[j] = values[j], values[j - 1]
                swapped = True
        if not swapped:
            return


def _quick_partition(values: MutableSequence[int], low: int, high: int,
                     rng: random.Random) -> int:
    pivot_index = rng.randint(low, high)
    values[pivot_index], values[low] = values[low], values[pivot_index]
    pivot = values[low]
    while low < high:
        while low < high and values[high] >= pivot:
            high -= 1
        values[low] = values[high]
        while low < high and values[low] <= pivot:
            low += 1
        values[high] = values[low]
    values[low] = pivot
    return low


def quick_sort(values: MutableSequence[int], rng: Optional[random.Random] = None) -> None:
    """Quicksort with a pivot chosen at random by ``rng``."""
    chooser = rng if rng is not None else random.Random()

    def sort_range(low: int, high: int) -> None:
        if low >= high:
            return
        pivot_at = _quick_partition(values, low, high, chooser)
        sort_range(low, pivot_at - 1)
        sort_range(pivot_at + 1, high)

    sort_range(0, len(values) - 1)


def selection_sort(values: MutableSequence[int]) -> None:
    """Move the smallest remaining element to the front on each pass."""
    length = len(values)
    for i in range(length - 1):
        smallest = i
        for j in range(i + 1, length):
            if values[j] < values[smallest]:
                smallest = j
        if smallest != i:
            values[smallest], values[i] = values[i], values[smallest]


def _sift_down(values: MutableSequence[int], k: int, length: int) -> None:
    while 2 * k + 1 < length:
        child = 2 * k + 1
        if child + 1 < length and values[child + 1] >= values[child]:
            child += 1
        if values[k] >= values[child]:
            return
        values[k], values[child] = values[child], values[k]
        k = child


def heap_sort(values: MutableSequence[int]) -> None:
    """Sort with a max-heap, moving the root to the end each round."""
    length = len(values)
    if length <= 0:
        return
    for i in range(length // 2 - 1, -1, -1):
        _sift_down(values, i, length)
    for end in range(length - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, 0, end)


def _merge(values: MutableSequence[int], low: int, mid: int, high: int) -> None:
    left: List[int] = list(values[low:mid + 1])
    right: List[int] = list(values[mid + 1:high + 1])
    i = j = 0
    k = low
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            values[k] = left[i]
            i += 1
        else:
            values[k] = right[j]
            j += 1
        k += 1
    rest = left[i:] + right[j:]
    values[k:k + len(rest)] = rest


def merge_sort(values: MutableSequence[int]) -> None:
    """Stable top-down two-way merge sort."""

    def sort_range(low: int, high: int) -> None:
        if low < high:
            mid = (low + high) // 2
            sort_range(low, mid)
            sort_range(mid + 1, high)
            _merge(values, low, mid, high)

    if len(values) > 0:
        sort_range(0, len(values) - 1)


def _trunc_div10(number: int) -> int:
    quotient = abs(number) // 10
    return -quotient if number < 0 else quotient


def nth_digit(number: int, index: int) -> int:
    """Return the decimal digit of ``number`` at ``index`` (0 is the units).

    The digit carries the sign of ``number``: nth_digit(-123, 1) is -2.
    """
    for _ in range(index):
        number = _trunc_div10(number)
    digit = abs(number) % 10
    return -digit if number < 0 else digit


def radix_sort(values: MutableSequence[int], max_digits: int) -> None:
    """Least-significant-digit radix sort over ``max_digits`` digits.

    Signed digits give nineteen buckets, so negative numbers sort too.
    """
    for index in range(max_digits):
        values[:] = sorted(values, key=lambda v: nth_digit(v, index))