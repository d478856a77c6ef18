"""Determinants, big factorials, matrix products and the fractional knapsack."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

__all__ = [
    "determinant",
    "factorial",
    "factorial_digits",
    "fractional_knapsack",
    "matrix_multiply",
    "sum_of_factorials",
]


def _check_rectangular(matrix: Sequence[Sequence[float]], name: str) -> int:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError(f"{name} rows differ in length")
    return widths.pop() if widths else 0


def determinant(matrix: Sequence[Sequence[int]]) -> int:
    """Determinant of a square matrix by cofactor expansion along the first row."""
    size = len(matrix)
    if size == 0:
        raise ValueError("matrix is empty")
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix is not square")
    if size == 1:
        return matrix[0][0]
    total = 0
    for column, value in enumerate(matrix[0]):
        minor = [row[:column] + row[column + 1 :] for row in (list(r) for r in matrix[1:])]
        sign = -1 if column % 2 else 1
        total += sign * value * determinant(minor)
    return total


def factorial(n: int) -> int:
    """Product of 1..n; 1 for n below one."""
    return math.prod(range(1, n + 1))


def factorial_digits(n: int) -> str:
    """Decimal digits of ``n!``."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")
    return str(factorial(n))


def sum_of_factorials(n: int) -> int:
    """Sum of ``k!`` for k from 1 to n; 0 for n below one."""
    return sum(factorial(k) for k in range(1, n + 1))


def matrix_multiply(
    first: Sequence[Sequence[float]], second: Sequence[Sequence[float]]
) -> list[list[float]]:
    """Product of two matrices given as lists of rows."""
    inner = _check_rectangular(first, "first matrix")
    width = _check_rectangular(second, "second matrix")
    if inner != len(second):
        raise ValueError("Multiplication of this matrix is not possible")
    columns = list(zip(*second)) if width else []
    return [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in first]


def fractional_knapsack(
    items: Iterable[tuple[float, float]], capacity: float
) -> float:
    """Greatest profit from ``(weight, profit)`` items when items may be split.

    Items are taken whole in order of falling profit per unit weight; the
    first one that does not fit is taken in part.
    """
    if capacity < 0:
        raise ValueError(f"capacity must not be negative: {capacity}")
    pairs = list(items)
    for weight, _ in pairs:
        if weight <= 0:
            raise ValueError(f"weights must be positive: {weight}")
    ranked = sorted(pairs, key=lambda pair: pair[1] / pair[0], reverse=True)
    remaining = float(capacity)
    total = 0.0
    for weight, profit in ranked:
        if weight > remaining:
            total += profit * remaining / weight
            break
        total += profit
        remaining -= weight
    return total