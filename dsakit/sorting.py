"""Classic comparison sorts and the heap and partition helpers behind them.

Every sort accepts any iterable of mutually comparable items and returns a new
list in ascending order; the input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs, always making n-1 passes."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def bubble_sort_adaptive(items: Iterable[T]) -> list[T]:
    """Bubble sort that stops as soon as a pass makes no swap."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def _bubble_pass(items: MutableSequence[Any], end: int) -> None:
    if end <= 1:
        return
    swapped = False
    for i in range(end - 1):
        if items[i] > items[i + 1]:
            items[i], items[i + 1] = items[i + 1], items[i]
            swapped = True
    if swapped:
        _bubble_pass(items, end - 1)


def bubble_sort_recursive(items: Iterable[T]) -> list[T]:
    """Bubble sort where each pass recurses on the unsorted prefix."""
    result = list(items)
    _bubble_pass(result, len(result))
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _insert_last(items: MutableSequence[Any], n: int) -> None:
    if n <= 1:
        return
    _insert_last(items, n - 1)
    last = items[n - 1]
    j = n - 2
    while j >= 0 and items[j] > last:
        items[j + 1] = items[j]
        j -= 1
    items[j + 1] = last


def insertion_sort_recursive(items: Iterable[T]) -> list[T]:
    """Insertion sort that first sorts the first n-1 items recursively."""
    result = list(items)
    _insert_last(result, len(result))
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Sort by moving the minimum of the unsorted suffix to its front on each pass."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _select_from(items: MutableSequence[Any], start: int) -> None:
    if start >= len(items) - 1:
        return
    for j in range(start + 1, len(items)):
        if items[start] > items[j]:
            items[start], items[j] = items[j], items[start]
    _select_from(items, start + 1)


def selection_sort_recursive(items: Iterable[T]) -> list[T]:
    """Exchange-style selection sort that recurses once per fixed position."""
    result = list(items)
    _select_from(result, 0)
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) + 1) // 2
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` in place around ``items[low]``.

    Afterwards everything left of the returned index is <= the pivot and
    everything right of it is > the pivot; the pivot sits at the index.
    """
    if not 0 <= low <= high < len(items):
        raise IndexError(f"invalid partition bounds {low}..{high} for length {len(items)}")
    pivot = items[low]
    i = low + 1
    j = high
    while True:
        while i <= high and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            break
    items[low], items[j] = items[j], items[low]
    return j


def _quick_sort(items: MutableSequence[Any], low: int, high: int) -> None:
    while low < high:
        p = partition(items, low, high)
        # Recurse into the smaller side to keep the stack shallow.
        if p - low < high - p:
            _quick_sort(items, low, p - 1)
            low = p + 1
        else:
            _quick_sort(items, p + 1, high)
            high = p - 1


def quick_sort(items: Iterable[T]) -> list[T]:
    """Quick sort using the first element of each range as the pivot."""
    result = list(items)
    _quick_sort(result, 0, len(result) - 1)
    return result


def heapify(items: MutableSequence[Any], size: int, root: int) -> None:
    """Sift ``items[root]`` down within the max-heap formed by ``items[:size]``."""
    if not 0 <= size <= len(items):
        raise ValueError(f"heap size {size} outside 0..{len(items)}")
    if not 0 <= root < max(size, 1):
        raise IndexError(f"root {root} outside heap of size {size}")
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(items: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    result = list(items)
    n = len(result)
    for i in range(n // 2 - 1, -1, -1):
        heapify(result, n, i)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        heapify(result, end, 0)
    return result