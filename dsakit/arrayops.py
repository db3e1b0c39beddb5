"""Basic array operations: positional insertion and deletion, searching and
maximum subarray sum.

All functions take any iterable or sequence and never modify their input;
operations that change contents return a new list.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class CapacityError(Exception):
    """Raised when inserting into an array that is already at its capacity."""


def insert_at(
    items: Iterable[T], element: T, index: int, capacity: int = DEFAULT_CAPACITY
) -> list[T]:
    """Return a copy of ``items`` with ``element`` inserted at ``index``.

    Raises CapacityError if the array already holds ``capacity`` elements and
    IndexError if ``index`` is not in ``0..len(items)``.
    """
    result = list(items)
    if len(result) >= capacity:
        raise CapacityError(
            f"cannot insert into an array of size {len(result)} with capacity {capacity}"
        )
    if not 0 <= index <= len(result):
        raise IndexError(f"insertion index {index} outside 0..{len(result)}")
    result.insert(index, element)
    return result


def delete_at(items: Iterable[T], index: int) -> list[T]:
    """Return a copy of ``items`` without the element at ``index``.

    Raises IndexError if ``index`` is not a valid position.
    """
    result = list(items)
    if not 0 <= index < len(result):
        raise IndexError(f"deletion index {index} outside 0..{len(result) - 1}")
    del result[index]
    return result


def linear_search(items: Iterable[Any], element: Any) -> int:
    """Return the index of the first occurrence of ``element``, or -1."""
    for position, value in enumerate(items):
        if value == element:
            return position
    return -1


def binary_search(items: Sequence[Any], element: Any) -> int:
    """Return an index of ``element`` in the ascending sequence ``items``, or -1."""
    low = 0
    high = len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == element:
            return mid
        if value < element:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def max_subarray_sum(items: Iterable[int]) -> int:
    """Return the largest sum of any non-empty contiguous run of ``items``.

    Raises ValueError for an empty input.
    """
    iterator = iter(items)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("max_subarray_sum() needs at least one element") from None
    best = current = first
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best