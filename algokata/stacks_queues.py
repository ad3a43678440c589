"""Stacks and queues built from one another, and related problems."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, List, Sequence, TypeVar

T = TypeVar("T")


class MinStack(Generic[T]):
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._data: List[T] = []
        self._mins: List[T] = []

    def push(self, value: T) -> None:
        """Push ``value`` onto the stack."""
        self._data.append(value)
        if not self._mins or value < self._mins[-1]:
            self._mins.append(value)
        else:
            self._mins.append(self._mins[-1])

    def pop(self) -> T:
        """Remove and return the top element; IndexError if empty."""
        if not self._data:
            raise IndexError("pop from empty stack")
        self._mins.pop()
        return self._data.pop()

    def top(self) -> T:
        """Return the top element; IndexError if empty."""
        if not self._data:
            raise IndexError("top of empty stack")
        return self._data[-1]

    def min(self) -> T:
        """Return the smallest element; IndexError if empty."""
        if not self._mins:
            raise IndexError("min of empty stack")
        return self._mins[-1]

    def __len__(self) -> int:
        return len(self._data)


def is_pop_order(push_seq: Sequence[int], pop_seq: Sequence[int]) -> bool:
    """Tell whether ``pop_seq`` can come out of a stack fed with ``push_seq``."""
    if not push_seq or not pop_seq or len(push_seq) != len(pop_seq):
        return False
    stack: List[int] = []
    pending = iter(push_seq)
    for wanted in pop_seq:
        while not stack or stack[-1] != wanted:
            try:
                stack.append(next(pending))
            except StopIteration:
                return False
        stack.pop()
    return True


class QueueStack:
    """A LIFO stack built from two FIFO queues."""

    def __init__(self) -> None:
        self._main: Deque[int] = deque()
        self._spare: Deque[int] = deque()

    def push(self, value: int) -> None:
        """Push ``value`` onto the stack."""
        self._main.append(value)

    def pop(self) -> int:
        """Remove and return the most recently pushed value."""
        if not self._main:
            raise IndexError("pop from empty stack")
        while len(self._main) > 1:
            self._spare.append(self._main.popleft())
        top = self._main.popleft()
        self._main, self._spare = self._spare, self._main
        return top

    def __len__(self) -> int:
        return len(self._main)


class StackQueue:
    """A FIFO queue built from two LIFO stacks."""

    def __init__(self) -> None:
        self._inbox: List[int] = []
        self._outbox: List[int] = []

    def push(self, value: int) -> None:
        """Add ``value`` to the back of the queue."""
        self._inbox.append(value)

    def pop(self) -> int:
        """Remove and return the value at the front of the queue."""
        if not self._outbox:
            if not self._inbox:
                raise IndexError("pop from empty queue")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


def max_in_windows(nums: Sequence[int], size: int) -> List[int]:
    """Return the maximum of every window of ``size`` consecutive numbers.

    An empty list is returned when ``size`` is not positive or exceeds
    the length of ``nums``.
    """
    if size <= 0 or not nums or len(nums) < size:
        return []
    candidates: Deque[int] = deque()
    result: List[int] = []
    for i, value in enumerate(nums):
        if i >= size:
            result.append(nums[candidates[0]])
        while candidates and value >= nums[candidates[-1]]:
            candidates.pop()
        if candidates and candidates[0] <= i - size:
            candidates.popleft()
        candidates.append(i)
    result.append(nums[candidates[0]])
    return result