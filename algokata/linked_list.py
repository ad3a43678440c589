"""Singly linked list nodes, helper functions and a small list class."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """One node of a singly linked list."""

    value: int
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


def connect_nodes(current: Optional[ListNode], next_node: Optional[ListNode]) -> None:
    """Make ``next_node`` follow ``current``."""
    if current is None:
        raise ValueError("cannot connect a node to a missing node")
    current.next = next_node


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list from ``values`` and return its head."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def iter_values(head: Optional[ListNode]) -> Iterator[int]:
    """Yield the values of the list starting at ``head``, front to back."""
    node = head
    while node is not None:
        yield node.value
        node = node.next


def format_list(head: Optional[ListNode]) -> str:
    """Return the list's values separated by tabs."""
    return "\t".join(str(value) for value in iter_values(head))


def add_to_tail(head: Optional[ListNode], value: int) -> ListNode:
    """Append ``value`` and return the (possibly new) head."""
    new_node = ListNode(value)
    if head is None:
        return new_node
    node = head
    while node.next is not None:
        node = node.next
    node.next = new_node
    return head


def remove_node(head: Optional[ListNode], value: int) -> Optional[ListNode]:
    """Unlink the first node holding ``value`` and return the head."""
    if head is None:
        return None
    if head.value == value:
        return head.next
    node = head
    while node.next is not None and node.next.value != value:
        node = node.next
    if node.next is not None:
        node.next = node.next.next
    return head


def delete_node(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Delete ``node`` from the list, in O(1) unless it is the tail.

    A node with a successor takes over the successor's value and link.
    Returns the head of the list afterwards.
    """
    if head is None or node is None:
        return head
    if node.next is not None:
        successor = node.next
        node.value = successor.value
        node.next = successor.next
        return head
    if head is node:
        return None
    current = head
    while current.next is not node:
        if current.next is None:
            raise ValueError("node is not part of the list")
        current = current.next
    current.next = None
    return head


def values_from_tail(head: Optional[ListNode]) -> List[int]:
    """Return the list's values from the last node to the first."""
    stack = list(iter_values(head))
    return [stack.pop() for _ in range(len(stack))]


def values_from_tail_recursive(head: Optional[ListNode]) -> List[int]:
    """Return the list's values from last to first, recursively."""
    if head is None:
        return []
    result = values_from_tail_recursive(head.next)
    result.append(head.value)
    return result


class LinkedList:
    """A singly linked list of integers that owns its head node."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[ListNode] = build_list(values)

    def add_to_tail(self, value: int) -> None:
        """Append ``value`` to the end of the list."""
        self._head = add_to_tail(self._head, value)

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``; do nothing if absent."""
        self._head = remove_node(self._head, value)

    def __iter__(self) -> Iterator[int]:
        return iter_values(self._head)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def reversed_values(self) -> List[int]:
        """Return the values from the last node to the first."""
        return values_from_tail(self._head)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"