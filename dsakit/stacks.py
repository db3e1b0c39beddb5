"""Bounded stacks: a plain fixed-size stack and two stacks sharing one array."""

from __future__ import annotations

import enum
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_STACK_SIZE = 10
DEFAULT_DOUBLE_STACK_SIZE = 5


class StackOverflowError(Exception):
    """Raised when pushing onto a stack that is full."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking at an empty stack."""


class Stack(Generic[T]):
    """A LIFO stack holding at most ``size`` elements."""

    def __init__(self, size: int = DEFAULT_STACK_SIZE) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.size = size
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Push ``value``; raises StackOverflowError if the stack is full."""
        if self.is_full():
            raise StackOverflowError(f"stack overflow: cannot push {value!r}")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top element; raises StackUnderflowError if empty."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow: cannot pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top element without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow: empty stack has no top")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.size

    def __len__(self) -> int:
        return len(self._items)


class Side(enum.Enum):
    """Which of the two stacks in a DoubleStack to use."""

    LOW = "low"
    HIGH = "high"


class DoubleStack(Generic[T]):
    """Two stacks growing towards each other inside one array of ``size`` slots.

    The LOW stack grows up from the first slot, the HIGH stack grows down from
    the last; together they hold at most ``size`` elements.
    """

    def __init__(self, size: int = DEFAULT_DOUBLE_STACK_SIZE) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.size = size
        self._stacks: dict[Side, list[T]] = {Side.LOW: [], Side.HIGH: []}

    def push(self, side: Side, value: T) -> None:
        """Push ``value`` on ``side``; raises StackOverflowError when no slot is free."""
        if self.is_full():
            raise StackOverflowError(f"double stack overflow: cannot push {value!r}")
        self._stacks[Side(side)].append(value)

    def pop(self, side: Side) -> T:
        """Pop from ``side``; raises StackUnderflowError when that stack is empty."""
        stack = self._stacks[Side(side)]
        if not stack:
            raise StackUnderflowError(f"{Side(side).value} stack is empty")
        return stack.pop()

    def is_full(self) -> bool:
        return len(self) >= self.size

    def __len__(self) -> int:
        return sum(len(stack) for stack in self._stacks.values())