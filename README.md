# solvekit

A small library of well-known algorithm solutions. Each one is a plain Python
function over lists, strings or simple node classes. The package uses only the
standard library.

## Installation

```
pip install .
```

## Modules

- `solvekit.arrays`: `two_sum`, `height_checker`, `three_consecutive_odds`,
  `number_of_subarrays`, `majority_element`, `rotate`, `remove_duplicates`,
  `next_permutation`, `intersect`, `trap`, `find_maximized_capital`,
  `check_subarray_sum`, `max_sub_array`, `sort_colors`,
  `max_profit_assignment`, `min_increment_for_unique` and
  `garbage_collection`.
- `solvekit.search`: binary-search problems: `search_range`, `search_insert`,
  `max_distance`, `special_array` and `judge_square_sum`.
- `solvekit.strings`: `remove_adjacent_duplicates`, `equal_substring`,
  `num_steps`, `maximum_gain`, `remove_occurrences`, `decode_message`,
  `is_anagram`, `append_characters`, `score_of_string`, `reverse_string`,
  `reverse_vowels`, `longest_palindrome`, `count_substrings`,
  `replace_words`, `valid_palindrome` and `reverse_only_letters`.
- `solvekit.combinatorics`: subset enumeration and backtracking:
  `max_score_words`, `subset_xor_sum`, `beautiful_subsets`, `count_triplets`
  and `word_break`. `word_break` never uses dictionary words longer than
  `MAX_WORD_LENGTH` (10).
- `solvekit.linked_list`: the `ListNode` class, the `from_values` and
  `to_list` helpers, and `has_cycle`, `add_two_numbers`, `reverse_list`,
  `merge_two_lists`, `merge_nodes`, `is_palindrome`, `reverse_k_group` and
  `middle_node`.
- `solvekit.trees`: the `TreeNode` class with `remove_leaf_nodes` and
  `evaluate_tree`.
- `solvekit.grids`: `get_maximum_gold`, `maximum_safeness_factor`,
  `matrix_score` and `row_and_maximum_ones`.
- `solvekit.graphs`: `get_ancestors` for DAGs and `maximum_value_sum`.

## Example

```python
from solvekit.arrays import two_sum, trap
from solvekit.linked_list import from_values, reverse_list, to_list
from solvekit.strings import reverse_vowels

two_sum([2, 7, 11, 15], 9)                       # [0, 1]
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])       # 6
to_list(reverse_list(from_values([1, 2, 3])))    # [3, 2, 1]
reverse_vowels("hello")                          # "holle"
```

## Things to know

- `rotate`, `remove_duplicates`, `next_permutation`, `sort_colors` and
  `reverse_string` change the list you pass in and return nothing but
  (for `remove_duplicates`) a count.
- Linked-list operations such as `reverse_list`, `merge_two_lists`,
  `merge_nodes` and `reverse_k_group` relink the nodes they are given.
  `is_palindrome` restores the list before it returns.
- Inputs that have no answer raise `ValueError`. Examples are an empty list
  for `max_sub_array`, `k == 0` for `check_subarray_sum`, `m < 2` for
  `max_distance` and a message character missing from the key in
  `decode_message`.

## What it does not do

The package is a library only. It has no command-line tool, and it reads no
input and writes no output of its own.

## Running the tests

```
pip install .[test]
pytest
```