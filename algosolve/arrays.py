"""Array puzzles solved by counting, sorting and scanning."""

from __future__ import annotations

from bisect import bisect_right
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, combinations


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end of ``nums`` in place, keeping the other order."""
    zeros = nums.count(0)
    nums[:] = [value for value in nums if value != 0] + [0] * zeros


def num_rabbits(answers: Sequence[int]) -> int:
    """Return the fewest rabbits consistent with each rabbit's answer."""
    total = 0
    for answer, count in Counter(answers).items():
        group = answer + 1
        total += -(-count // group) * group
    return total


def min_domino_rotations(tops: Sequence[int], bottoms: Sequence[int]) -> int:
    """Return the fewest rotations making one row uniform, or -1 if impossible."""
    if not tops:
        return -1
    candidates = {tops[0], bottoms[0]}
    for top, bottom in zip(tops, bottoms):
        candidates &= {top, bottom}
    if not candidates:
        return -1
    return min(
        min(sum(1 for t in tops if t != value), sum(1 for b in bottoms if b != value))
        for value in candidates
    )


def number_of_arrays(differences: Sequence[int], lower: int, upper: int) -> int:
    """Count the sequences with the given consecutive differences inside [lower, upper]."""
    low, high = lower, upper
    for step in differences:
        low = max(lower, low + step)
        high = min(upper, high + step)
        if low > high:
            return 0
    return high - low + 1


def maximum_triplet_value(nums: Sequence[int]) -> int:
    """Return the largest (nums[i] - nums[j]) * nums[k] for i < j < k, at least 0."""
    if len(nums) < 3:
        return 0
    suffix_max = list(accumulate(reversed(nums), max))[::-1]
    best = 0
    prefix_max = nums[0]
    for middle, after_max in zip(nums[1:-1], suffix_max[2:]):
        best = max(best, (prefix_max - middle) * after_max)
        prefix_max = max(prefix_max, middle)
    return best


def maximum_triplet_value_brute(nums: Sequence[int]) -> int:
    """Same value as :func:`maximum_triplet_value`, found by trying every triple."""
    return max((0, *((a - b) * c for a, b, c in combinations(nums, 3))))


def min_equal_sum(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Return the smallest equal sum reachable by replacing zeros with positive
    integers, or -1 when none is."""
    zeros1, sum1 = nums1.count(0), sum(nums1)
    zeros2, sum2 = nums2.count(0), sum(nums2)
    if zeros2 == 0 and sum1 + zeros1 > sum2:
        return -1
    if zeros1 == 0 and sum2 + zeros2 > sum1:
        return -1
    return max(sum1 + zeros1, sum2 + zeros2)


def min_operations(nums: Sequence[int], k: int) -> int:
    """Return how many lowering steps bring every value down to ``k``, or -1 if
    some value is already below it."""
    if any(value < k for value in nums):
        return -1
    distinct = set(nums)
    return len(distinct) - (k in distinct)


def count_covered_buildings(n: int, buildings: Sequence[Sequence[int]]) -> int:
    """Count buildings with another building on each of their four sides."""
    column_low: dict[int, int] = {}
    column_high: dict[int, int] = {}
    row_low: dict[int, int] = {}
    row_high: dict[int, int] = {}
    for x, y in buildings:
        column_low[x] = min(column_low.get(x, y), y)
        column_high[x] = max(column_high.get(x, y), y)
        row_low[y] = min(row_low.get(y, x), x)
        row_high[y] = max(row_high.get(y, x), x)
    return sum(
        1
        for x, y in buildings
        if column_low[x] < y < column_high[x] and row_low[y] < x < row_high[y]
    )


def unique_xor_triplets(nums: Sequence[int]) -> int:
    """Count the distinct values nums[i] ^ nums[j] ^ nums[k] with i <= j <= k."""
    pair_values = {a ^ b for i, a in enumerate(nums) for b in nums[i:]}
    return len({pair ^ value for value in nums for pair in pair_values})


def put_marbles(weights: Sequence[int], k: int) -> int:
    """Return the gap between the largest and smallest score of splitting
    ``weights`` into ``k`` bags."""
    if not 1 <= k <= len(weights):
        raise ValueError("k must be between 1 and the number of weights")
    pair_sums = sorted(a + b for a, b in zip(weights, weights[1:]))
    cuts = k - 1
    if cuts == 0:
        return 0
    return sum(pair_sums[-cuts:]) - sum(pair_sums[:cuts])


def count_fair_pairs(nums: Sequence[int], lower: int, upper: int) -> int:
    """Count pairs i < j with lower <= nums[i] + nums[j] <= upper."""
    values = sorted(nums)

    def pairs_at_most(limit: int) -> int:
        return sum(
            min(bisect_right(values, limit - value), index)
            for index, value in enumerate(values)
        )

    return pairs_at_most(upper) - pairs_at_most(lower - 1)


def longest_palindrome_from_pairs(words: Sequence[str]) -> int:
    """Return the longest palindrome built by concatenating two-letter ``words``."""
    counts = Counter(words)
    length = 0
    has_center = False
    for word, count in counts.items():
        reverse = word[::-1]
        if word[0] != word[1]:
            if word < reverse:
                length += 4 * min(count, counts.get(reverse, 0))
        else:
            length += 2 * (count // 2 * 2)
            if count % 2:
                has_center = True
    return length + (2 if has_center else 0)


def _pairs(total: int, largest_group: int) -> int:
    if total <= 1:
        return 0
    return min(total // 2, total - largest_group)


def card_game_score(cards: Sequence[str], x: str) -> int:
    """Return the most pairs of compatible two-letter cards that contain ``x``."""
    double = x * 2
    leading: Counter[str] = Counter()
    trailing: Counter[str] = Counter()
    doubles = 0
    for card in cards:
        if x not in card:
            continue
        if card == double:
            doubles += 1
        elif card[0] == x:
            leading[card[1]] += 1
        else:
            trailing[card[0]] += 1
    lead_total, lead_max = sum(leading.values()), max(leading.values(), default=0)
    trail_total, trail_max = sum(trailing.values()), max(trailing.values(), default=0)
    return max(
        _pairs(lead_total + i, max(lead_max, i))
        + _pairs(trail_total + doubles - i, max(trail_max, doubles - i))
        for i in range(doubles + 1)
    )