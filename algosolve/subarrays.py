"""Counting subarrays and triplets with sliding windows and order statistics."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def _all_subarrays(size: int) -> int:
    return size * (size + 1) // 2


def count_subarrays_score_below(nums: Sequence[int], k: int) -> int:
    """Count subarrays whose sum times length is strictly below ``k``."""
    total = 0
    window_sum = 0
    start = 0
    for end, value in enumerate(nums):
        window_sum += value
        while start <= end and window_sum * (end - start + 1) >= k:
            window_sum -= nums[start]
            start += 1
        total += end - start + 1
    return total


def count_subarrays_fixed_bounds(nums: Sequence[int], min_k: int, max_k: int) -> int:
    """Count subarrays whose minimum is ``min_k`` and whose maximum is ``max_k``."""
    total = 0
    last_bad = last_min = last_max = -1
    for index, value in enumerate(nums):
        if value < min_k or value > max_k:
            last_bad = index
        if value == min_k:
            last_min = index
        if value == max_k:
            last_max = index
        total += max(0, min(last_min, last_max) - last_bad)
    return total


def count_good_subarrays(nums: Sequence[int], k: int) -> int:
    """Count subarrays holding at least ``k`` pairs of equal values."""
    seen: Counter[int] = Counter()
    pairs = 0
    start = 0
    below = 0
    for end, value in enumerate(nums):
        pairs += seen[value]
        seen[value] += 1
        while start <= end and pairs >= k:
            leaving = nums[start]
            seen[leaving] -= 1
            pairs -= seen[leaving]
            start += 1
        below += end - start + 1
    return _all_subarrays(len(nums)) - below


def _at_most_distinct(nums: Sequence[int], limit: int) -> int:
    seen: Counter[int] = Counter()
    start = 0
    total = 0
    for end, value in enumerate(nums):
        seen[value] += 1
        while len(seen) > limit:
            leaving = nums[start]
            seen[leaving] -= 1
            if not seen[leaving]:
                del seen[leaving]
            start += 1
        total += end - start + 1
    return total


def count_complete_subarrays(nums: Sequence[int]) -> int:
    """Count subarrays holding every distinct value of ``nums``."""
    distinct = len(set(nums))
    if not distinct:
        return 0
    return _at_most_distinct(nums, distinct) - _at_most_distinct(nums, distinct - 1)


def count_subarrays_max_at_least(nums: Sequence[int], k: int) -> int:
    """Count subarrays in which the overall maximum appears at least ``k`` times."""
    if not nums:
        raise ValueError("nums must not be empty")
    peak = max(nums)
    start = 0
    occurrences = 0
    fewer = 0
    for end, value in enumerate(nums):
        if value == peak:
            occurrences += 1
        while start <= end and occurrences >= k:
            if nums[start] == peak:
                occurrences -= 1
            start += 1
        fewer += end - start + 1
    return _all_subarrays(len(nums)) - fewer


class _Fenwick:
    """Counts of inserted positions, queried by prefix."""

    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def add(self, index: int) -> None:
        node = index + 1
        while node < len(self._tree):
            self._tree[node] += 1
            node += node & -node

    def count_below(self, index: int) -> int:
        node = index
        total = 0
        while node > 0:
            total += self._tree[node]
            node -= node & -node
        return total


def good_triplets(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Count value triplets that appear in the same order in both permutations."""
    if sorted(nums1) != sorted(nums2):
        raise ValueError("nums1 and nums2 must be permutations of the same values")
    size = len(nums1)
    position = {value: index for index, value in enumerate(nums1)}
    placed = _Fenwick(size)
    total = 0
    for seen_count, value in enumerate(nums2):
        where = position[value]
        before = placed.count_below(where)
        after = (size - 1 - where) - (seen_count - before)
        total += before * after
        placed.add(where)
    return total