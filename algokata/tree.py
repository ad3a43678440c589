"""Binary trees rebuilt from their preorder and inorder traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def reconstruct(preorder: Sequence[int], inorder: Sequence[int]) -> TreeNode:
    """Rebuild a binary tree from its preorder and inorder traversals.

    Raises ValueError if the sequences are empty, differ in length or
    do not describe one binary tree.
    """
    pre = list(preorder)
    ino = list(inorder)
    if not pre or not ino or len(pre) != len(ino):
        raise ValueError("sequences must be non-empty and of equal length")

    def build(pre_start: int, pre_end: int, in_start: int, in_end: int) -> Optional[TreeNode]:
        if pre_start == pre_end and in_start == in_end:
            return None
        if pre_start == pre_end or in_start == in_end:
            raise ValueError("sequences do not describe one binary tree")
        root_value = pre[pre_start]
        try:
            root_at = ino.index(root_value, in_start, in_end)
        except ValueError:
            raise ValueError("sequences do not describe one binary tree") from None
        left_size = root_at - in_start
        node = TreeNode(root_value)
        node.left = build(pre_start + 1, pre_start + 1 + left_size, in_start, root_at)
        node.right = build(pre_start + 1 + left_size, pre_end, root_at + 1, in_end)
        return node

    root = build(0, len(pre), 0, len(ino))
    assert root is not None
    return root


def _preorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: List[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def preorder_values(root: Optional[TreeNode]) -> List[int]:
    """Return the tree's values in preorder."""
    return list(_preorder(root))


def inorder_values(root: Optional[TreeNode]) -> List[int]:
    """Return the tree's values in inorder."""
    return list(_inorder(root))