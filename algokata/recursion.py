"""Fibonacci-style recurrences and sums of 1..n."""

from __future__ import annotations


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def fibonacci_recursive(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain recursion (slow)."""
    _check_non_negative(n)
    if n < 2:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, computed bottom up."""
    _check_non_negative(n)
    previous, current = 0, 1
    if n == 0:
        return 0
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def jump_floor(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    _check_non_negative(n)
    if n == 0:
        return 0
    if n < 3:
        return n
    two_back, one_back = 1, 2
    for _ in range(3, n + 1):
        two_back, one_back = one_back, two_back + one_back
    return one_back


def jump_floor_unbounded(n: int) -> int:
    """Count the ways to climb ``n`` steps taking any number at a time."""
    if n <= 0:
        return 0
    return 1 << (n - 1)


def rect_cover(n: int) -> int:
    """Count the tilings of a 2×n rectangle with 2×1 dominoes."""
    if n == 0:
        return 1
    return jump_floor(n)


def sum_formula(n: int) -> int:
    """Return 1 + 2 + ... + n by the closed formula."""
    _check_non_negative(n)
    return n * (n + 1) // 2


def sum_recursive(n: int) -> int:
    """Return 1 + 2 + ... + n by recursion."""
    _check_non_negative(n)
    if n == 0:
        return 0
    return sum_recursive(n - 1) + n


def sum_short_circuit(n: int) -> int:
    """Return 1 + 2 + ... + n, ending the recursion by short-circuit ``and``."""
    _check_non_negative(n)
    return n and n + sum_short_circuit(n - 1)