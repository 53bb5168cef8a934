"""Largest total that can be taken from a row of houses without taking two neighbours."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

__all__ = ["rob_brute_force", "rob_memoization", "rob_tabulation", "rob_optimized"]


def rob_brute_force(nums: Sequence[int]) -> int:
    """Plain recursion from the last house backwards: rob it or skip it."""

    def best(index: int) -> int:
        if index < 0:
            return 0
        return max(nums[index] + best(index - 2), best(index - 1))

    return best(len(nums) - 1)


def rob_memoization(nums: Sequence[int]) -> int:
    """The same backward recursion with each prefix's answer cached."""

    @lru_cache(maxsize=None)
    def best(index: int) -> int:
        if index < 0:
            return 0
        return max(nums[index] + best(index - 2), best(index - 1))

    return best(len(nums) - 1)


def rob_tabulation(nums: Sequence[int]) -> int:
    """Bottom-up table of the best total over each prefix."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    table = [nums[0], max(nums[0], nums[1])]
    for amount in nums[2:]:
        table.append(max(table[-1], amount + table[-2]))
    return table[-1]


def rob_optimized(nums: Sequence[int]) -> int:
    """Bottom-up pass keeping only the two previous prefix totals."""
    before, last = 0, 0
    for amount in nums:
        before, last = last, max(last, amount + before)
    return last