import math

import pytest

from algosolve.subarrays import (
    count_complete_subarrays,
    count_good_subarrays,
    count_subarrays_fixed_bounds,
    count_subarrays_max_at_least,
    count_subarrays_score_below,
    good_triplets,
)


def _total(size):
    return size * (size + 1) // 2


def test_score_below_example():
    assert count_subarrays_score_below([2, 1, 4, 3, 5], 10) == 6


@pytest.mark.parametrize("nums", [[2, 1, 4, 3, 5], [1, 1, 1], [7]])
def test_score_below_large_k_counts_every_subarray(nums):
    k = sum(nums) * len(nums) + 1
    assert count_subarrays_score_below(nums, k) == _total(len(nums))


def test_score_below_grows_with_k():
    nums = [2, 1, 4, 3, 5]
    results = [count_subarrays_score_below(nums, k) for k in range(1, 80)]
    assert results == sorted(results)
    assert results[-1] == _total(len(nums))


def test_fixed_bounds_example():
    assert count_subarrays_fixed_bounds([1, 3, 5, 2, 7, 5], 1, 5) == 2


def test_fixed_bounds_all_equal():
    nums = [3, 3, 3, 3]
    assert count_subarrays_fixed_bounds(nums, 3, 3) == _total(len(nums))


def test_fixed_bounds_out_of_range_value_splits_array():
    left = [1, 3, 5, 2]
    right = [5, 1, 4]
    joined = left + [9] + right
    assert count_subarrays_fixed_bounds(joined, 1, 5) == (
        count_subarrays_fixed_bounds(left, 1, 5) + count_subarrays_fixed_bounds(right, 1, 5)
    )


def test_good_subarrays_all_equal_with_one_pair():
    nums = [4] * 5
    assert count_good_subarrays(nums, 1) == _total(len(nums)) - len(nums)


def test_good_subarrays_zero_pairs_counts_everything():
    nums = [3, 1, 4, 3, 2, 2, 4]
    assert count_good_subarrays(nums, 0) == _total(len(nums))


def test_good_subarrays_shrinks_as_k_grows():
    nums = [3, 1, 4, 3, 2, 2, 4]
    results = [count_good_subarrays(nums, k) for k in range(0, 10)]
    assert results == sorted(results, reverse=True)


def test_complete_subarrays_all_equal():
    nums = [5, 5, 5, 5]
    assert count_complete_subarrays(nums) == _total(len(nums))


@pytest.mark.parametrize("nums", [[1, 3, 1, 2, 2], [1, 2, 3, 1], [4, 4, 2]])
def test_complete_subarrays_invariants(nums):
    result = count_complete_subarrays(nums)
    assert result == count_complete_subarrays(nums[::-1])
    assert 1 <= result <= _total(len(nums))


def test_max_at_least_single_peak():
    nums = [1, 2, 9, 3]
    peak = nums.index(9)
    assert count_subarrays_max_at_least(nums, 1) == (peak + 1) * (len(nums) - peak)


def test_max_at_least_all_equal():
    nums = [2, 2, 2, 2]
    assert count_subarrays_max_at_least(nums, 1) == _total(len(nums))


def test_max_at_least_shrinks_as_k_grows():
    nums = [1, 3, 2, 3, 3]
    results = [count_subarrays_max_at_least(nums, k) for k in range(1, 6)]
    assert results == sorted(results, reverse=True)
    assert results[0] > results[-1]


def test_max_at_least_empty_raises():
    with pytest.raises(ValueError):
        count_subarrays_max_at_least([], 1)


def test_good_triplets_identical_permutations():
    nums = list(range(6))
    assert good_triplets(nums, nums) == math.comb(len(nums), 3)


def test_good_triplets_reversed_permutation():
    nums = [2, 0, 4, 1, 3]
    assert good_triplets(nums, nums[::-1]) == 0


def test_good_triplets_symmetric():
    nums1 = [4, 0, 1, 3, 2]
    nums2 = [4, 1, 0, 2, 3]
    assert good_triplets(nums1, nums2) == good_triplets(nums2, nums1)


def test_good_triplets_mismatch_raises():
    with pytest.raises(ValueError):
        good_triplets([0, 1, 2], [0, 1, 3])