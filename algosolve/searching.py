"""Binary-search puzzles."""

from __future__ import annotations

import math
from collections.abc import Sequence


def search_rotated(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted sequence that may hold duplicates."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        pivot = nums[mid]
        if pivot == target:
            return True
        if nums[lo] == pivot:
            while lo <= mid and nums[lo] == pivot:
                lo += 1
            continue
        if nums[hi] == pivot:
            while hi >= mid and nums[hi] == pivot:
                hi -= 1
            continue
        if nums[lo] <= pivot:
            if nums[lo] <= target < pivot:
                hi = mid - 1
            else:
                lo = mid + 1
        elif pivot < target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return False


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours."""
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[mid + 1] and (mid == 0 or nums[mid] > nums[mid - 1]):
            return mid
        if nums[mid] < nums[mid + 1]:
            lo = mid + 1
        else:
            hi = mid
    return lo


def h_index(citations: Sequence[int]) -> int:
    """Return the largest h such that at least h papers have h or more citations."""

    def qualifies(h: int) -> bool:
        return sum(1 for c in citations if c >= h) >= h

    lo, hi, best = 0, len(citations), 0
    while lo <= hi:
        mid = (lo + hi) // 2
        if qualifies(mid):
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return best


def _pieces_needed(nums: Sequence[int], limit: int) -> float:
    pieces, running = 1, 0
    for value in nums:
        if running + value <= limit:
            running += value
        elif value <= limit:
            pieces += 1
            running = value
        else:
            return math.inf
    return pieces


def split_array(nums: Sequence[int], k: int) -> int:
    """Return the smallest possible largest sum when splitting ``nums`` into at
    most ``k`` contiguous parts, or -1 when no split works."""
    lo, hi, best = 0, sum(nums), -1
    while lo <= hi:
        mid = (lo + hi) // 2
        if k >= _pieces_needed(nums, mid):
            best = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return best


def _finishes_in_time(piles: Sequence[int], speed: int, hours: int) -> bool:
    spent = 0
    for pile in piles:
        spent += -(-pile // speed)
        if spent > hours:
            return False
    return True


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating speed that finishes all ``piles`` within ``h`` hours."""
    lo, hi = 1, max(piles)
    best = hi
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if _finishes_in_time(piles, mid, h):
            best = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return best