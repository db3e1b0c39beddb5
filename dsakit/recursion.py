"""Small recursive classics: factorial, Fibonacci numbers, greatest common
divisor, string reversal and the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache


def factorial(n: int) -> int:
    """Return ``n!``; raises ValueError for a negative ``n``."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers, got {n}")
    if n in (0, 1):
        return 1
    return n * factorial(n - 1)


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n in (0, 1):
        return n
    return _fib(n - 1) + _fib(n - 2)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError(f"fibonacci index must not be negative, got {n}")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting from 0."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    series: list[int] = []
    a, b = 0, 1
    for _ in range(count):
        series.append(a)
        a, b = b, a + b
    return series


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's algorithm.

    Raises ValueError when ``b`` is zero, since the first step divides by it.
    """
    if b == 0:
        raise ValueError("the second number must not be zero")
    a, b = abs(a), abs(b)
    if a % b == 0:
        return b
    return gcd(b, a % b)


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def tower_of_hanoi(
    n: int,
    source: str = "s",
    auxiliary: str = "a",
    destination: str = "d",
) -> Iterator[tuple[int, str, str]]:
    """Yield the moves ``(disk, from_peg, to_peg)`` that carry ``n`` disks
    from ``source`` to ``destination``, disk 1 being the smallest."""
    if n < 0:
        raise ValueError(f"number of disks must not be negative, got {n}")
    return _hanoi(n, source, auxiliary, destination)


def _hanoi(n: int, source: str, auxiliary: str, destination: str) -> Iterator[tuple[int, str, str]]:
    if n == 0:
        return
    yield from _hanoi(n - 1, source, destination, auxiliary)
    yield (n, source, destination)
    yield from _hanoi(n - 1, auxiliary, source, destination)