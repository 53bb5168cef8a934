"""Number of distinct right/down paths across an ``n`` by ``m`` grid."""

from __future__ import annotations

from functools import lru_cache

__all__ = [
    "count_paths_recursive",
    "count_paths_memo",
    "count_paths_tabulation",
    "count_paths_space_optimized",
]


def _check_size(n: int, m: int) -> None:
    if n < 1 or m < 1:
        raise ValueError("grid dimensions must both be at least 1")


def count_paths_recursive(n: int, m: int) -> int:
    """Plain recursion from the bottom-right cell back to the start."""
    _check_size(n, m)

    def paths(i: int, j: int) -> int:
        if i == 0 and j == 0:
            return 1
        if i < 0 or j < 0:
            return 0
        return paths(i - 1, j) + paths(i, j - 1)

    return paths(n - 1, m - 1)


def count_paths_memo(n: int, m: int) -> int:
    """The same recursion with each cell's count cached."""
    _check_size(n, m)

    @lru_cache(maxsize=None)
    def paths(i: int, j: int) -> int:
        if i == 0 and j == 0:
            return 1
        if i < 0 or j < 0:
            return 0
        return paths(i - 1, j) + paths(i, j - 1)

    return paths(n - 1, m - 1)


def count_paths_tabulation(n: int, m: int) -> int:
    """Bottom-up table of path counts for every cell."""
    _check_size(n, m)
    table = [[0] * m for _ in range(n)]
    table[0][0] = 1
    for i in range(n):
        for j in range(m):
            if i == 0 and j == 0:
                continue
            up = table[i - 1][j] if i > 0 else 0
            left = table[i][j - 1] if j > 0 else 0
            table[i][j] = up + left
    return table[-1][-1]


def count_paths_space_optimized(n: int, m: int) -> int:
    """Bottom-up pass keeping only the previous row of counts."""
    _check_size(n, m)
    previous = [0] * m
    for i in range(n):
        current: list[int] = []
        for j in range(m):
            if i == 0 and j == 0:
                current.append(1)
            else:
                left = current[j - 1] if j > 0 else 0
                current.append(previous[j] + left)
        previous = current
    return previous[-1]