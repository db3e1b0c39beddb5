"""Elementwise arithmetic, products, transposes and triangular parts of
integer matrices given as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    if rows == 0:
        return 0, 0
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("all rows of a matrix must have the same length")
    return rows, cols


def _require_same_shape(first: Matrix, second: Matrix) -> None:
    first_shape = _shape(first)
    second_shape = _shape(second)
    if first_shape != second_shape:
        raise ValueError(
            f"matrices must have the same order, got {first_shape} and {second_shape}"
        )


def _require_square(matrix: Matrix) -> None:
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ValueError("the matrix must be a square matrix")


def add(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the elementwise sum of two matrices of the same order."""
    _require_same_shape(first, second)
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def subtract(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the elementwise difference ``first - second``."""
    _require_same_shape(first, second)
    return [[a - b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def multiply(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the matrix product; the column count of ``first`` must equal the row count of ``second``."""
    _, inner = _shape(first)
    rows_second, cols_second = _shape(second)
    if inner != rows_second:
        raise ValueError(
            f"cannot multiply: first has {inner} columns, second has {rows_second} rows"
        )
    columns = list(zip(*second)) if rows_second else []
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        if cols_second
        else []
        for row in first
    ]


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return the transpose of ``matrix``."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def lower_triangular(matrix: Matrix) -> list[list[int]]:
    """Return the lower triangular part of a square matrix, zeros above the diagonal."""
    _require_square(matrix)
    return [
        [value if col <= row else 0 for col, value in enumerate(values)]
        for row, values in enumerate(matrix)
    ]


def upper_triangular(matrix: Matrix) -> list[list[int]]:
    """Return the upper triangular part of a square matrix, zeros below the diagonal."""
    _require_square(matrix)
    return [
        [value if col >= row else 0 for col, value in enumerate(values)]
        for row, values in enumerate(matrix)
    ]


def format_matrix(matrix: Matrix) -> str:
    """Render a matrix one row per line, each value followed by a tab."""
    _shape(matrix)
    return "".join("".join(f"{value}\t" for value in row) + "\n" for row in matrix)