import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.recursion import (
    factorial,
    fibonacci,
    fibonacci_series,
    gcd,
    reverse_string,
    tower_of_hanoi,
)


def test_factorial_base_cases():
    assert factorial(0) == 1
    assert factorial(1) == 1


@given(st.integers(min_value=1, max_value=60))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


@given(st.integers(min_value=0, max_value=60))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@given(st.integers(min_value=2, max_value=200))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-3)


@given(st.integers(min_value=0, max_value=100))
def test_series_agrees_with_fibonacci(count):
    series = fibonacci_series(count)
    assert len(series) == count
    assert series == [fibonacci(i) for i in range(count)]


def test_series_negative():
    with pytest.raises(ValueError):
        fibonacci_series(-1)


@given(st.integers(min_value=0, max_value=10**6), st.integers(min_value=1, max_value=10**6))
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@given(st.integers(min_value=1, max_value=10**6), st.integers(min_value=1, max_value=10**6))
def test_gcd_divides_both(a, b):
    d = gcd(a, b)
    assert a % d == 0
    assert b % d == 0


def test_gcd_zero_divisor():
    with pytest.raises(ValueError):
        gcd(12, 0)


def test_reverse_string_example():
    assert reverse_string("abc") == "cba"


@given(st.text())
def test_reverse_string_round_trip(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)


def test_hanoi_single_disk():
    assert list(tower_of_hanoi(1, "s", "a", "d")) == [(1, "s", "d")]


def test_hanoi_zero_disks():
    assert list(tower_of_hanoi(0)) == []


def test_hanoi_negative():
    with pytest.raises(ValueError):
        tower_of_hanoi(-1)


@pytest.mark.parametrize("n", range(1, 9))
def test_hanoi_moves_are_legal_and_complete(n):
    pegs = {"s": list(range(n, 0, -1)), "a": [], "d": []}
    moves = list(tower_of_hanoi(n, "s", "a", "d"))
    assert len(moves) == 2**n - 1
    for disk, src, dst in moves:
        assert pegs[src][-1] == disk
        pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disk
        pegs[dst].append(disk)
    assert pegs["d"] == list(range(n, 0, -1))
    assert pegs["s"] == [] and pegs["a"] == []