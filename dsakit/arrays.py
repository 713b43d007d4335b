"""Array algorithms: three-sum, deduplication, rain water and friends."""

from __future__ import annotations

from itertools import accumulate, groupby
from typing import Sequence


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triple of values from ``nums`` that sums to zero.

    Each triple is sorted. Triples are ordered by their smallest value,
    then by their middle value. ``nums`` is not modified.
    """
    ordered = sorted(nums)
    triples: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        lo, hi = i + 1, len(ordered) - 1
        while lo < hi:
            total = first + ordered[lo] + ordered[hi]
            if total < 0:
                lo += 1
            elif total > 0:
                hi -= 1
            else:
                triples.append([first, ordered[lo], ordered[hi]])
                lo += 1
                hi -= 1
                while lo < hi and ordered[lo] == ordered[lo - 1]:
                    lo += 1
                while lo < hi and ordered[hi] == ordered[hi + 1]:
                    hi -= 1
    return triples


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list so its first k items are its distinct values; return k.

    The items after position k are left in an unspecified state.
    """
    if not nums:
        return 0
    write = 0
    for value in nums[1:]:
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def trap(height: Sequence[int]) -> int:
    """Return how much water the elevation profile ``height`` holds after rain."""
    if not height:
        return 0
    left_max = list(accumulate(height, max))
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(
        min(left, right) - level
        for left, right, level in zip(left_max, right_max, height)
    )


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s in ``nums``."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the first larger value after it in ``nums2``.

    A value with no larger successor, or absent from ``nums2``, maps to -1.
    """
    greater: dict[int, int] = {}
    pending: list[int] = []
    for value in nums2:
        while pending and value > pending[-1]:
            greater[pending.pop()] = value
        pending.append(value)
    return [greater.get(value, -1) for value in nums1]