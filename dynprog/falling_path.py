"""Minimum falling path sum with non-zero shifts.

A falling path picks one cell per row, and cells in adjacent rows must lie
in different columns.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache

__all__ = [
    "min_falling_path_sum_recursive",
    "min_falling_path_sum_memo",
    "min_falling_path_sum_tabulation",
    "min_falling_path_sum_space_optimized",
    "min_falling_path_sum_fully_optimized",
    "min_falling_path_sum",
]

Matrix = Sequence[Sequence[int]]


def _dimensions(matrix: Matrix) -> tuple[int, int]:
    if not matrix or not matrix[0]:
        raise ValueError("matrix must have at least one row and one column")
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    if len(matrix) > 1 and width < 2:
        raise ValueError("a path over several rows needs at least two columns")
    return len(matrix), width


def _next_row(previous: Sequence[int], row: Sequence[int]) -> list[int]:
    return [
        value + min(best for k, best in enumerate(previous) if k != j)
        for j, value in enumerate(row)
    ]


def min_falling_path_sum_recursive(matrix: Matrix) -> int:
    """Plain recursion from every cell of the last row upwards."""
    rows, width = _dimensions(matrix)

    def best(i: int, j: int) -> int:
        if i == 0:
            return matrix[0][j]
        return matrix[i][j] + min(best(i - 1, k) for k in range(width) if k != j)

    return min(best(rows - 1, j) for j in range(width))


def min_falling_path_sum_memo(matrix: Matrix) -> int:
    """The same recursion with each cell's best path cached."""
    rows, width = _dimensions(matrix)

    @lru_cache(maxsize=None)
    def best(i: int, j: int) -> int:
        if i == 0:
            return matrix[0][j]
        return matrix[i][j] + min(best(i - 1, k) for k in range(width) if k != j)

    return min(best(rows - 1, j) for j in range(width))


def min_falling_path_sum_tabulation(matrix: Matrix) -> int:
    """Bottom-up table holding the best path ending at every cell."""
    _dimensions(matrix)
    table = [list(matrix[0])]
    for row in matrix[1:]:
        table.append(_next_row(table[-1], row))
    return min(table[-1])


def min_falling_path_sum_space_optimized(matrix: Matrix) -> int:
    """Bottom-up pass keeping only the previous row of best paths."""
    _dimensions(matrix)
    previous = list(matrix[0])
    for row in matrix[1:]:
        previous = _next_row(previous, row)
    return min(previous)


def min_falling_path_sum_fully_optimized(matrix: Matrix) -> int:
    """Linear-time pass using the two smallest entries of the previous row."""
    _dimensions(matrix)
    previous = list(matrix[0])
    for row in matrix[1:]:
        smallest: float = math.inf
        second: float = math.inf
        smallest_at = -1
        for j, value in enumerate(previous):
            if value < smallest:
                second, smallest, smallest_at = smallest, value, j
            elif value < second:
                second = value
        previous = [
            int(value + (second if j == smallest_at else smallest))
            for j, value in enumerate(row)
        ]
    return min(previous)


def min_falling_path_sum(matrix: Matrix) -> int:
    """Minimum falling path sum, computed with the linear-time method."""
    return min_falling_path_sum_fully_optimized(matrix)