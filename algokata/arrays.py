"""Array puzzles: spiral order, subarray sums, inversions and more."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple


def spiral_order(matrix: Sequence[Sequence[int]]) -> List[int]:
    """Return the elements of ``matrix`` read clockwise from the outside in.

    The matrix is read one ring at a time, starting at the top-left corner.
    An empty matrix, or one with empty rows, gives an empty list.
    """
    if not matrix or not matrix[0]:
        return []
    rows, columns = len(matrix), len(matrix[0])
    result: List[int] = []
    start = 0
    while start * 2 < rows and start * 2 < columns:
        end_col = columns - 1 - start
        end_row = rows - 1 - start
        result.extend(matrix[start][start:end_col + 1])
        if start < end_row:
            result.extend(matrix[r][end_col] for r in range(start + 1, end_row + 1))
        if start < end_row and start < end_col:
            result.extend(matrix[end_row][c] for c in range(end_col - 1, start - 1, -1))
        if start < end_row - 1 and start < end_col:
            result.extend(matrix[r][start] for r in range(end_row - 1, start, -1))
        start += 1
    return result


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty run of consecutive values.

    A running sum is dropped as soon as it stops being positive.
    An empty sequence gives 0.
    """
    if not values:
        return 0
    best = current = values[0]
    for value in values[1:]:
        current = value if current <= 0 else current + value
        best = max(best, current)
    return best


def _sort_and_count(values: List[int]) -> Tuple[List[int], int]:
    if len(values) <= 1:
        return values, 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])
    merged: List[int] = []
    crossing = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            crossing += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, left_count + right_count + crossing


def inverse_pairs(data: Sequence[int]) -> int:
    """Count the pairs i < j with data[i] > data[j], by merge sort."""
    _, count = _sort_and_count(list(data))
    return count


def continuous_sequences(total: int) -> List[List[int]]:
    """Return every run of two or more consecutive positive integers summing to ``total``.

    Runs are ascending and ordered by their first number.
    """
    result: List[List[int]] = []
    if total < 3:
        return result
    small, big = 1, 2
    current = small + big
    while small <= total // 2:
        if current == total:
            result.append(list(range(small, big + 1)))
            current -= small
            small += 1
        elif current < total:
            big += 1
            current += big
        else:
            current -= small
            small += 1
    return result


def is_continuous(numbers: Sequence[int]) -> bool:
    """Tell whether the cards in ``numbers`` can form a straight.

    Cards are 1 to 13 and jokers are 0; a joker can stand for any card.
    Two equal non-joker cards never form a straight. No cards gives False.
    """
    if not numbers:
        return False
    cards = sorted(numbers)
    jokers = sum(1 for card in cards if card == 0)
    gaps = 0
    for previous, card in zip(cards[jokers:], cards[jokers + 1:]):
        if card == previous:
            return False
        gaps += card - previous - 1
    return gaps <= jokers


def find_duplicate(numbers: Sequence[int]) -> Optional[int]:
    """Return one repeated number from values that all lie in 0..n-1.

    Each value is swapped into the slot of its own index until a slot is
    found already taken. Returns None when nothing repeats; raises
    ValueError when a value lies outside 0..n-1. The input is not changed.
    """
    if len(numbers) < 2:
        return None
    length = len(numbers)
    if any(n < 0 or n > length - 1 for n in numbers):
        raise ValueError(f"every number must lie in 0..{length - 1}")
    work = list(numbers)
    for i in range(length):
        while work[i] != i:
            value = work[i]
            if work[value] == value:
                return value
            work[i], work[value] = work[value], value
    return None


def construct_product_array(values: Sequence[float]) -> List[float]:
    """Return B where B[i] is the product of every value except values[i].

    No division is used: prefix and suffix products are multiplied.
    Raises ValueError for fewer than two values.
    """
    if len(values) <= 1:
        raise ValueError("at least two values are required")
    result = [1.0] * len(values)
    for i in range(1, len(values)):
        result[i] = result[i - 1] * values[i - 1]
    suffix = 1.0
    for j in range(len(values) - 2, -1, -1):
        suffix *= values[j + 1]
        result[j] *= suffix
    return result