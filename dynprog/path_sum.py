"""Minimum sum of a path from the top-left to the bottom-right of a grid.

Each step moves one cell right or one cell down.
"""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence
from functools import lru_cache

__all__ = [
    "min_path_sum_recursive",
    "min_path_sum_memo",
    "min_path_sum_tabulation",
    "min_path_sum_space_optimized",
    "min_path_sum_in_place",
]


def _dimensions(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")
    return len(grid), width


def min_path_sum_recursive(grid: Sequence[Sequence[int]]) -> int:
    """Plain recursion from the bottom-right cell back to the start."""
    rows, width = _dimensions(grid)

    def best(i: int, j: int) -> float:
        if i < 0 or j < 0:
            return math.inf
        if i == 0 and j == 0:
            return grid[0][0]
        return grid[i][j] + min(best(i - 1, j), best(i, j - 1))

    return int(best(rows - 1, width - 1))


def min_path_sum_memo(grid: Sequence[Sequence[int]]) -> int:
    """The same recursion with each cell's best sum cached."""
    rows, width = _dimensions(grid)

    @lru_cache(maxsize=None)
    def best(i: int, j: int) -> float:
        if i < 0 or j < 0:
            return math.inf
        if i == 0 and j == 0:
            return grid[0][0]
        return grid[i][j] + min(best(i - 1, j), best(i, j - 1))

    return int(best(rows - 1, width - 1))


def _next_row(previous: Sequence[float], row: Sequence[int]) -> list[float]:
    current: list[float] = []
    for j, value in enumerate(row):
        left = current[j - 1] if j > 0 else math.inf
        current.append(value + min(previous[j], left))
    return current


def min_path_sum_tabulation(grid: Sequence[Sequence[int]]) -> int:
    """Bottom-up table of the best sum reaching every cell."""
    _dimensions(grid)
    first: list[float] = []
    for value in grid[0]:
        first.append(value + (first[-1] if first else 0))
    table = [first]
    for row in grid[1:]:
        table.append(_next_row(table[-1], row))
    return int(table[-1][-1])


def min_path_sum_space_optimized(grid: Sequence[Sequence[int]]) -> int:
    """Bottom-up pass keeping only the previous row of best sums."""
    _, width = _dimensions(grid)
    previous: list[float] = [0] + [math.inf] * (width - 1)
    for row in grid:
        previous = _next_row(previous, row)
    return int(previous[-1])


def min_path_sum_in_place(grid: Sequence[MutableSequence[int]]) -> int:
    """Overwrite every cell of ``grid`` with its best sum and return the last one."""
    _dimensions(grid)
    for i, row in enumerate(grid):
        for j in range(len(row)):
            if i == 0 and j == 0:
                continue
            if i == 0:
                row[j] += row[j - 1]
            elif j == 0:
                row[j] += grid[i - 1][j]
            else:
                row[j] += min(grid[i - 1][j], row[j - 1])
    return grid[-1][-1]