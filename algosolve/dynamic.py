"""Dynamic-programming puzzles."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def largest_divisible_subset(nums: Sequence[int]) -> list[int]:
    """Return a largest subset in which every pair divides one way, largest first."""
    values = sorted(nums)
    if not values:
        return []
    length = [1] * len(values)
    parent = list(range(len(values)))
    best_length, last = 1, 0
    for i, value in enumerate(values):
        for j, smaller in enumerate(values[:i]):
            if value % smaller == 0 and length[i] < length[j] + 1:
                length[i] = length[j] + 1
                parent[i] = j
        if length[i] > best_length:
            best_length, last = length[i], i
    subset = [values[last]]
    while parent[last] != last:
        last = parent[last]
        subset.append(values[last])
    return subset


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two parts with equal sums."""
    total = sum(nums)
    if total % 2:
        return False
    half = total // 2
    mask = (1 << (half + 1)) - 1
    reachable = 1
    for value in nums:
        reachable = (reachable | (reachable << value)) & mask
    return bool(reachable >> half & 1)


def most_points(questions: Sequence[Sequence[int]]) -> int:
    """Return the most points from questions given as (points, brainpower) pairs,
    where solving one skips the next ``brainpower`` questions."""
    size = len(questions)
    best = [0] * (size + 1)
    for i in reversed(range(size)):
        points, skip = questions[i]
        best[i] = max(best[i + 1], points + best[min(size, i + skip + 1)])
    return best[0]


def minimum_cost(nums: Sequence[int], cost: Sequence[int], k: int) -> int:
    """Return the cheapest total cost of dividing ``nums`` into contiguous parts."""
    size = len(nums)
    num_prefix = [0, *accumulate(nums)]
    cost_prefix = [0, *accumulate(cost)]
    best = [0] * (size + 1)
    for i in reversed(range(size)):
        cost_after = cost_prefix[size] - cost_prefix[i]
        best[i] = min(
            cost_after * (num_prefix[j + 1] - num_prefix[i] + k) + best[j + 1]
            for j in range(i, size)
        )
    return best[0]


def max_topological_profit(n: int, edges: Sequence[Sequence[int]], score: Sequence[int]) -> int:
    """Return the largest sum of score times position over topological orders of
    the graph, or -1 if no order exists."""
    required = [0] * n
    for source, target in edges:
        required[target] |= 1 << source
    full = (1 << n) - 1
    best: list[int | None] = [None] * (full + 1)
    best[0] = 0
    for mask in range(full):
        current = best[mask]
        if current is None:
            continue
        position = mask.bit_count() + 1
        for node in range(n):
            bit = 1 << node
            if mask & bit or required[node] & mask != required[node]:
                continue
            candidate = current + score[node] * position
            following = best[mask | bit]
            if following is None or candidate > following:
                best[mask | bit] = candidate
    result = best[full]
    return -1 if result is None else result