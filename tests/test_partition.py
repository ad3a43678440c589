from collections import Counter

import pytest
from hypothesis import given, strategies as st

from algokata.partition import (
    is_odd,
    reorder,
    reorder_odd_even,
    reorder_odd_even_stable,
    reorder_stable_bubble,
    reorder_stable_insert,
    reorder_stable_merge,
)

INTS = st.lists(st.integers(min_value=-100, max_value=100), max_size=40)


def large(num):
    return num > 5


def _is_split(values, predicate):
    flags = [predicate(v) for v in values]
    return flags == sorted(flags, reverse=True)


def test_is_odd_handles_negatives():
    assert is_odd(-3) is True
    assert is_odd(-4) is False
    assert is_odd(7) is True
    assert is_odd(0) is False


def test_stable_source_example():
    values = [1, 2, 3, 4, 5, 6, 7]
    reorder_odd_even_stable(values)
    assert values == [1, 3, 5, 7, 2, 4, 6]


@pytest.mark.parametrize("stable", [reorder_stable_bubble, reorder_stable_insert,
                                    reorder_stable_merge])
def test_stable_variants_agree_on_example(stable):
    values = [1, 2, 3, 4, 5, 6, 7]
    stable(values, is_odd)
    assert values == [1, 3, 5, 7, 2, 4, 6]


def test_unstable_source_example_is_split():
    data = [1, 2, 3, 4, 5, 6, 7]
    values = list(data)
    reorder_odd_even(values)
    assert _is_split(values, is_odd)
    assert Counter(values) == Counter(data)


def test_empty_sequences_stay_empty():
    for fn in (reorder_odd_even, reorder_odd_even_stable):
        values = []
        fn(values)
        assert values == []


@given(INTS)
def test_reorder_splits_and_keeps_elements(data):
    values = list(data)
    reorder(values, large)
    assert _is_split(values, large)
    assert Counter(values) == Counter(data)


@pytest.mark.parametrize("stable", [reorder_stable_bubble, reorder_stable_insert,
                                    reorder_stable_merge])
@given(data=INTS)
def test_stable_reorders_keep_relative_order(stable, data):
    values = list(data)
    stable(values, is_odd)
    assert _is_split(values, is_odd)
    assert [v for v in values if is_odd(v)] == [v for v in data if is_odd(v)]
    assert [v for v in values if not is_odd(v)] == [v for v in data if not is_odd(v)]


@given(INTS)
def test_stable_variants_agree(data):
    a, b, c = list(data), list(data), list(data)
    reorder_stable_bubble(a, large)
    reorder_stable_insert(b, large)
    reorder_stable_merge(c, large)
    assert a == b == c