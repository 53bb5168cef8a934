"""Maximum alternating sum of a subsequence.

The alternating sum of a subsequence adds the elements at even positions and
subtracts those at odd positions (positions counted within the subsequence).
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

__all__ = [
    "max_alternating_sum_recursive",
    "max_alternating_sum_memo",
    "max_alternating_sum_tabulation",
    "max_alternating_sum_space_optimized",
]


def _signed(value: int, is_even: bool) -> int:
    return value if is_even else -value


def max_alternating_sum_recursive(nums: Sequence[int]) -> int:
    """Plain recursion: skip each element or take it with the current sign."""

    def best(index: int, is_even: bool) -> int:
        if index >= len(nums):
            return 0
        skip = best(index + 1, is_even)
        take = _signed(nums[index], is_even) + best(index + 1, not is_even)
        return max(skip, take)

    return best(0, True)


def max_alternating_sum_memo(nums: Sequence[int]) -> int:
    """The same recursion with each (index, parity) state cached."""

    @lru_cache(maxsize=None)
    def best(index: int, is_even: bool) -> int:
        if index >= len(nums):
            return 0
        skip = best(index + 1, is_even)
        take = _signed(nums[index], is_even) + best(index + 1, not is_even)
        return max(skip, take)

    return best(0, True)


def max_alternating_sum_tabulation(nums: Sequence[int]) -> int:
    """Bottom-up table over suffixes, one column per parity."""
    # table[i][parity]: best sum of nums[i:] when the next taken element has that parity
    table = [[0, 0] for _ in range(len(nums) + 1)]
    for index in range(len(nums) - 1, -1, -1):
        following = table[index + 1]
        for parity in (0, 1):
            skip = following[parity]
            take = _signed(nums[index], bool(parity)) + following[1 - parity]
            table[index][parity] = max(skip, take)
    return table[0][1]


def max_alternating_sum_space_optimized(nums: Sequence[int]) -> int:
    """Backward pass keeping only the two parity totals of the next suffix."""
    next_even, next_odd = 0, 0
    for value in reversed(nums):
        next_even, next_odd = (
            max(next_even, value + next_odd),
            max(next_odd, -value + next_even),
        )
    return next_even