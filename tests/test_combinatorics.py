import itertools
import math

import pytest
from hypothesis import given, strategies as st

from algokata.combinatorics import (
    combinations,
    combinations_binary,
    dice_probabilities,
    dice_probabilities_recursive,
    last_remaining,
    last_remaining_simulated,
    n_queens,
    next_permutation,
    permutations,
    permutations_lexicographic,
)


def _distinct_sorted_perms(text):
    return sorted({"".join(p) for p in itertools.permutations(text)})


@pytest.mark.parametrize("text", ["a", "ab", "abc", "aab", "aabb", "cba", "abcd", "abca"])
def test_permutations_distinct_and_sorted(text):
    assert permutations(text) == _distinct_sorted_perms(text)


@given(st.text(alphabet="abc", min_size=1, max_size=5))
def test_permutations_methods_agree(text):
    assert permutations(text) == permutations_lexicographic(text)


def test_permutations_empty():
    assert permutations("") == []
    assert permutations_lexicographic("") == []


def test_next_permutation_worked_example():
    assert next_permutation("839647521") == "839651247"


def test_next_permutation_last_is_none():
    assert next_permutation("cba") is None


def test_combinations_example():
    assert combinations("abc") == ["a", "b", "c", "ab", "ac", "bc", "abc"]


def test_combinations_sorts_input():
    assert combinations("cab") == combinations("abc")


@pytest.mark.parametrize("text", ["a", "ab", "abcd", "dcbae"])
def test_combinations_binary_same_set(text):
    result = combinations_binary(text)
    assert len(result) == 2 ** len(text) - 1
    assert sorted(result) == sorted(combinations(text))


def test_combinations_empty():
    assert combinations("") == []
    assert combinations_binary("") == []


def test_n_queens_small_boards_empty():
    assert n_queens(2) == []


@pytest.mark.parametrize("n", [4, 5, 6])
def test_n_queens_solutions_are_valid(n):
    solutions = n_queens(n)
    assert solutions
    assert len(set(solutions)) == len(solutions)
    for cols in solutions:
        assert sorted(cols) == list(range(n))
        for i, j in itertools.combinations(range(n), 2):
            assert abs(i - j) != abs(cols[i] - cols[j])


def test_eight_queens_count():
    assert len(n_queens(8)) == 92


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_dice_methods_agree(n):
    fast = dice_probabilities(n)
    slow = dice_probabilities_recursive(n)
    assert list(fast) == list(slow)
    for key in fast:
        assert math.isclose(fast[key], slow[key])


@pytest.mark.parametrize("n", [1, 3, 5])
def test_dice_table_properties(n):
    table = dice_probabilities(n)
    assert min(table) == n
    assert max(table) == 6 * n
    assert math.isclose(sum(table.values()), 1.0)
    for total, p in table.items():
        assert math.isclose(p, table[7 * n - total])


def test_dice_no_dice():
    assert dice_probabilities(0) == {}
    assert dice_probabilities_recursive(0) == {}


@pytest.mark.parametrize("n", [1, 2, 5, 10, 41])
@pytest.mark.parametrize("m", [1, 2, 3, 7, 50])
def test_last_remaining_methods_agree(n, m):
    assert last_remaining(n, m) == last_remaining_simulated(n, m)


def test_last_remaining_with_step_one_is_last():
    assert last_remaining(9, 1) == 8


def test_last_remaining_classic_circle():
    assert last_remaining(5, 3) == 3


@pytest.mark.parametrize("n, m", [(0, 3), (3, 0)])
def test_last_remaining_invalid(n, m):
    with pytest.raises(ValueError):
        last_remaining(n, m)
    with pytest.raises(ValueError):
        last_remaining_simulated(n, m)