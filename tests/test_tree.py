import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokata.tree import TreeNode, inorder_values, preorder_values, reconstruct

VALID = [
    ([1, 2, 4, 5, 3, 6, 7], [4, 5, 2, 1, 6, 7, 3]),
    ([1, 2, 3, 4], [4, 3, 2, 1]),
    ([1, 2, 3, 4], [1, 2, 3, 4]),
    ([1, 2, 4, 7, 3, 5, 6, 8], [4, 7, 2, 1, 5, 3, 6, 8]),
    ([1], [1]),
]


@pytest.mark.parametrize("pre, ino", VALID)
def test_reconstruct_round_trip(pre, ino):
    root = reconstruct(pre, ino)
    assert preorder_values(root) == pre
    assert inorder_values(root) == ino


def test_only_left_children():
    root = reconstruct([1, 2, 3, 4], [4, 3, 2, 1])
    node = root
    depth = 0
    while node is not None:
        assert node.right is None
        node = node.left
        depth += 1
    assert depth == 4


def test_root_and_children():
    root = reconstruct([1, 2, 4, 7, 3, 5, 6, 8], [4, 7, 2, 1, 5, 3, 6, 8])
    assert root.value == 1
    assert root.left.value == 2
    assert root.right.value == 3


def test_invalid_sequences():
    with pytest.raises(ValueError):
        reconstruct([1, 2, 4, 7, 3, 5, 6, 8], [4, 7, 3, 1, 5, 2, 6, 8])


@pytest.mark.parametrize("pre, ino", [([], []), ([1, 2], [1]), ([1], [])])
def test_bad_lengths(pre, ino):
    with pytest.raises(ValueError):
        reconstruct(pre, ino)


def test_traversals_of_empty_tree():
    assert preorder_values(None) == []
    assert inorder_values(None) == []


def test_traversals_of_hand_built_tree():
    root = TreeNode(2, TreeNode(1), TreeNode(3))
    assert preorder_values(root) == [2, 1, 3]
    assert inorder_values(root) == [1, 2, 3]


@given(st.lists(st.integers(), unique=True, min_size=1, max_size=30))
def test_chains_round_trip(values):
    right_chain = reconstruct(values, values)
    assert preorder_values(right_chain) == values
    assert inorder_values(right_chain) == values
    left_chain = reconstruct(values, list(reversed(values)))
    assert inorder_values(left_chain) == list(reversed(values))
    assert preorder_values(left_chain) == values