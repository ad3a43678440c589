import pytest
from hypothesis import given, strategies as st

from algokata.linked_list import (
    LinkedList,
    ListNode,
    add_to_tail,
    build_list,
    connect_nodes,
    delete_node,
    format_list,
    iter_values,
    remove_node,
    values_from_tail,
    values_from_tail_recursive,
)


def _nodes(values):
    nodes = [ListNode(v) for v in values]
    for current, nxt in zip(nodes, nodes[1:]):
        connect_nodes(current, nxt)
    return nodes


def test_connect_nodes_links():
    first, second = ListNode(1), ListNode(2)
    connect_nodes(first, second)
    assert first.next is second


def test_connect_nodes_rejects_missing_current():
    with pytest.raises(ValueError):
        connect_nodes(None, ListNode(1))


@given(st.lists(st.integers()))
def test_build_and_iter_round_trip(values):
    assert list(iter_values(build_list(values))) == values


def test_build_empty_is_none():
    assert build_list([]) is None


def test_format_list():
    assert format_list(build_list([1, 2, 3])) == "1\t2\t3"
    assert format_list(None) == ""


def test_add_to_tail_on_empty_creates_head():
    head = add_to_tail(None, 7)
    assert list(iter_values(head)) == [7]


@given(st.lists(st.integers()), st.integers())
def test_add_to_tail_appends(values, extra):
    head = add_to_tail(build_list(values), extra)
    assert list(iter_values(head)) == values + [extra]


def test_remove_node_head_middle_tail_and_missing():
    head = build_list([1, 2, 3, 4])
    head = remove_node(head, 1)
    assert list(iter_values(head)) == [2, 3, 4]
    head = remove_node(head, 3)
    assert list(iter_values(head)) == [2, 4]
    head = remove_node(head, 4)
    assert list(iter_values(head)) == [2]
    head = remove_node(head, 9)
    assert list(iter_values(head)) == [2]
    assert remove_node(head, 2) is None
    assert remove_node(None, 2) is None


def test_remove_node_removes_only_first_match():
    head = remove_node(build_list([5, 1, 5]), 5)
    assert list(iter_values(head)) == [1, 5]


def test_delete_middle_node():
    nodes = _nodes([1, 2, 3, 4, 5])
    head = delete_node(nodes[0], nodes[2])
    assert head is nodes[0]
    assert list(iter_values(head)) == [1, 2, 4, 5]


def test_delete_tail_node():
    nodes = _nodes([1, 2, 3, 4, 5])
    head = delete_node(nodes[0], nodes[4])
    assert list(iter_values(head)) == [1, 2, 3, 4]


def test_delete_head_node():
    nodes = _nodes([1, 2, 3, 4, 5])
    head = delete_node(nodes[0], nodes[0])
    assert list(iter_values(head)) == [2, 3, 4, 5]


def test_delete_only_node():
    node = ListNode(1)
    assert delete_node(node, node) is None


def test_delete_from_empty_list():
    assert delete_node(None, None) is None


def test_delete_foreign_tail_raises():
    head = build_list([1, 2, 3])
    with pytest.raises(ValueError):
        delete_node(head, ListNode(3))


@given(st.lists(st.integers()))
def test_values_from_tail_reverses(values):
    head = build_list(values)
    assert values_from_tail(head) == values[::-1]
    assert values_from_tail_recursive(head) == values[::-1]


def test_linked_list_session():
    items = LinkedList()
    items.remove(2)
    assert list(items) == []
    items.add_to_tail(1)
    items.remove(1)
    assert len(items) == 0
    for value in [1, 2, 3, 4, 5, 6]:
        items.add_to_tail(value)
    assert list(items) == [1, 2, 3, 4, 5, 6]
    items.remove(1)
    items.remove(4)
    items.remove(6)
    assert list(items) == [2, 3, 5]
    assert items.reversed_values() == [5, 3, 2]
    assert len(items) == 3


@given(st.lists(st.integers()))
def test_linked_list_reversed_values(values):
    items = LinkedList(values)
    assert items.reversed_values() == list(reversed(list(items)))
    assert len(items) == len(values)