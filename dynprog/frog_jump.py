"""Minimum energy for a frog hopping to the last stone, one or two stones at a time.

Landing on stone ``i`` from stone ``j`` costs ``abs(heights[i] - heights[j])``.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

__all__ = ["min_cost_memo", "min_cost_tabulation", "min_cost_space_optimized"]


def _require_stones(heights: Sequence[int]) -> int:
    if not heights:
        raise ValueError("heights must contain at least one stone")
    return len(heights)


def min_cost_memo(heights: Sequence[int]) -> int:
    """Top-down search over the last jump, caching each stone's best cost."""
    count = _require_stones(heights)

    @lru_cache(maxsize=None)
    def cost(i: int) -> int:
        if i == 0:
            return 0
        best = cost(i - 1) + abs(heights[i] - heights[i - 1])
        if i > 1:
            best = min(best, cost(i - 2) + abs(heights[i] - heights[i - 2]))
        return best

    return cost(count - 1)


def min_cost_tabulation(heights: Sequence[int]) -> int:
    """Bottom-up table holding the best cost to reach every stone."""
    count = _require_stones(heights)
    table = [0] * count
    for i in range(1, count):
        best = table[i - 1] + abs(heights[i] - heights[i - 1])
        if i > 1:
            best = min(best, table[i - 2] + abs(heights[i] - heights[i - 2]))
        table[i] = best
    return table[-1]


def min_cost_space_optimized(heights: Sequence[int]) -> int:
    """Bottom-up pass keeping only the costs of the two previous stones."""
    _require_stones(heights)
    before_last: int | None = None
    last = heights[0]
    cost_before, cost_last = 0, 0
    for height in heights[1:]:
        current = cost_last + abs(height - last)
        if before_last is not None:
            current = min(current, cost_before + abs(height - before_last))
        cost_before, cost_last = cost_last, current
        before_last, last = last, height
    return cost_last