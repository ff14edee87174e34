# algosolve

Solutions to classic algorithm puzzles in plain Python, grouped by topic.
The package depends only on the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algosolve.strings`: `atoi`, `count_and_say`, `reverse_words`, `is_isomorphic`,
  `max_nesting_depth`, `max_substrings`, `letter_combinations`, `generate_parentheses`
- `algosolve.arithmetic`: `divide`, `count_good_numbers`, `count_symmetric_integers`
- `algosolve.linked_list`: `ListNode` (iterable over its values), `build_list`, `list_values`,
  `remove_nth_from_end`, `reverse_list`, `odd_even_list`
- `algosolve.trees`: `TreeNode`, `build_tree` (level order, `None` for a missing child),
  `subtree_with_all_deepest`, `lca_deepest_leaves`
- `algosolve.searching`: `search_rotated`, `find_peak_element`, `h_index`,
  `split_array`, `min_eating_speed`
- `algosolve.backtracking`: `three_sum`, `combination_sum`, `solve_n_queens`,
  `combination_sum3`, `subset_xor_sum`
- `algosolve.arrays`: `move_zeroes`, `num_rabbits`, `min_domino_rotations`,
  `number_of_arrays`, `maximum_triplet_value`, `maximum_triplet_value_brute`,
  `min_equal_sum`, `min_operations`, `count_covered_buildings`, `unique_xor_triplets`,
  `put_marbles`, `count_fair_pairs`, `longest_palindrome_from_pairs`, `card_game_score`
- `algosolve.dynamic`: `largest_divisible_subset`, `can_partition`, `most_points`,
  `minimum_cost`, `max_topological_profit`
- `algosolve.subarrays`: `count_subarrays_score_below`, `count_subarrays_fixed_bounds`,
  `count_good_subarrays`, `count_complete_subarrays`, `count_subarrays_max_at_least`,
  `good_triplets`
- `algosolve.digits`: `number_of_powerful_int`, `count_good_integers`, `beautiful_numbers`
- `algosolve.palindromes`: `longest_palindrome_concatenation`, `smallest_palindrome`
- `algosolve.h2o`: `H2O`, a thread synchroniser whose `hydrogen` and `oxygen` methods
  let releases through two hydrogens per oxygen

## Example

```python
from algosolve.strings import atoi, generate_parentheses
from algosolve.linked_list import build_list, reverse_list, list_values
from algosolve.backtracking import solve_n_queens

atoi("   -42abc")                                  # -42
generate_parentheses(2)                            # ['(())', '()()']
list_values(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
len(solve_n_queens(4))                             # 2
```

## Behaviour worth knowing

- `move_zeroes` changes the list passed in and returns `None`; `reverse_list`,
  `odd_even_list` and `remove_nth_from_end` relink the nodes they are given.
- Invalid input raises rather than returning a code: `divide` raises
  `ZeroDivisionError` for a zero divisor; `remove_nth_from_end`, `combination_sum`
  (non-positive candidates), `put_marbles`, `good_triplets`,
  `count_subarrays_max_at_least` (empty input), `count_good_integers` and
  `smallest_palindrome` raise `ValueError`.
- Some functions answer "impossible" with `-1`, as their docstrings say:
  `min_domino_rotations`, `split_array`, `min_equal_sum`, `min_operations` and
  `max_topological_profit`. `smallest_palindrome` returns an empty string when
  there are fewer than `k` rearrangements.

## What it does not do

This is a library only. It has no command-line tool, reads no input files and
prints nothing; call the functions from your own code.