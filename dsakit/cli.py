"""Command-line front end for sorting a list of integers.

With numbers on the command line the chosen method sorts them and the result
is printed. Without numbers an interactive menu reads the array and the
choices from standard input.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from dsakit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)


def _reverse_selection_sort(items: Iterable[int]) -> list[int]:
    """Selection sort that moves the maximum of the unsorted prefix to its end."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        largest = max(range(end + 1), key=result.__getitem__)
        result[end], result[largest] = result[largest], result[end]
    return result


SORTERS: dict[str, Callable[[Iterable[int]], list[int]]] = {
    "bubble": bubble_sort,
    "selection": selection_sort,
    "reverse-selection": _reverse_selection_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "heap": heap_sort,
}

_MENU: dict[int, tuple[str, Callable[[Iterable[int]], list[int]]]] = {
    1: ("bubble method", bubble_sort),
    2: ("selection method", selection_sort),
    3: ("reverse selection method", _reverse_selection_sort),
    4: ("insertion sort", insertion_sort),
}
_EXIT_CHOICE = 5

_MENU_TEXT = (
    "Enter 1 for Bubble sort\n"
    "Enter 2 for Selection sort\n"
    "Enter 3 for Reversed Selection sort\n"
    "Enter 4 for Insertion sort\n"
    "Enter 5 for exit\n"
    "Enter your choice"
)


def format_array(items: Iterable[object]) -> str:
    """Join the items with single spaces."""
    return " ".join(str(item) for item in items)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def _run_menu(stdin: TextIO, out: TextIO) -> None:
    tokens = _tokens(stdin)
    print("Enter the size of the array:", file=out)
    size = _read_int(tokens)
    if size < 0:
        raise ValueError(f"array size must not be negative, got {size}")
    items = []
    for _ in range(size):
        print("Enter the elements of the array:", file=out)
        items.append(_read_int(tokens))

    while True:
        print(_MENU_TEXT, file=out)
        token = next(tokens, None)
        if token is None:
            return
        try:
            choice = int(token)
        except ValueError:
            choice = None
        if choice == _EXIT_CHOICE:
            return
        entry = _MENU.get(choice) if choice is not None else None
        if entry is None:
            print("Wrong choice!", file=out)
            continue
        label, sorter = entry
        items = sorter(items)
        print(f"The array is sorted by {label}", file=out)
        print(format_array(items), file=out)


def main(argv: list[str] | None = None) -> int:
    """Sort integers given as arguments, or run the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Sort a list of integers."
    )
    parser.add_argument(
        "--method",
        choices=sorted(SORTERS),
        default="bubble",
        help="sorting algorithm to use (default: bubble)",
    )
    parser.add_argument("numbers", nargs="*", type=int, help="integers to sort")
    args = parser.parse_args(argv)

    if args.numbers:
        print(format_array(SORTERS[args.method](args.numbers)))
        return 0

    try:
        _run_menu(sys.stdin, sys.stdout)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0