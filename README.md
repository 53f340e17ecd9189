# algodaily

Solutions to well-known algorithm problems, written as plain Python functions.
The package uses nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algodaily.arrays` | `average_waiting_time`, `largest_rectangle_area`, `intersection`, `longest_consecutive`, `rotate`, `remove_duplicates`, `lemonade_change`, `max_area`, `missing_number`, `insert_interval`, `plus_one`, `remove_element`, `sort_colors`, `find_disappeared_numbers`, `find_content_children`, `find_relative_ranks`, `third_max`, `number_of_arithmetic_slices`, `max_profit` |
| `algodaily.text` | `reverse_parentheses`, `longest_valid_parentheses`, `group_anagrams`, `remove_stars`, `convert_zigzag`, `count_and_say`, `multiply`, `length_of_last_word`, `remove_k_digits`, `count_segments`, `decode_string`, `max_word_length_product`, `is_isomorphic`, `find_the_difference`, `str_str`, `longest_common_prefix`, `is_additive_number`, `add_binary`, `detect_capital_use`, `repeated_substring_pattern`, `find_min_difference`, `reverse_vowels`, `frequency_sort`, `add_strings` |
| `algodaily.trees` | `TreeNode`, `build_tree`, `inorder_traversal`, `sum_of_left_leaves`, `is_symmetric`, `zigzag_level_order`, `diameter_of_binary_tree`, `lowest_common_ancestor`, `invert_tree`, `is_balanced`, `sorted_array_to_bst`, `rob_tree` |
| `algodaily.linked_lists` | `ListNode`, `build_list`, `list_values`, `reverse_list`, `swap_pairs`, `reorder_list` |
| `algodaily.graphs` | course scheduling: `find_order`, `can_finish` |
| `algodaily.heaps` | `find_kth_largest`, `k_closest`, `top_k_frequent`, `find_closest_elements`, `max_average_ratio` |
| `algodaily.matrices` | `restore_matrix`, `num_magic_squares_inside`, `spiral_order` |
| `algodaily.search` | `smallest_distance_pair`, `guess_number`, `find_right_interval`, `first_bad_version` |
| `algodaily.numbers` | `count_numbers_with_unique_digits`, `min_steps`, `find_complement`, `is_happy`, `is_power_of_three`, `to_hex`, `read_binary_watch`, `last_remaining`, `count_primes`, `count_bits`, `range_bitwise_and`, `super_pow`, `integer_break`, `combine` |
| `algodaily.dp` | `climb_stairs`, `num_decodings`, `coin_change`, `word_break`, `rob` |

## Examples

```python
from algodaily.text import decode_string, multiply
from algodaily.dp import coin_change
from algodaily.trees import build_tree, zigzag_level_order
from algodaily.linked_lists import build_list, list_values, reverse_list

decode_string("3[a]2[bc]")          # "aaabcbc"
multiply("123", "456")              # "56088"
coin_change([1, 2, 5], 11)          # 3

root = build_tree([3, 9, 20, None, None, 15, 7])
zigzag_level_order(root)            # [[3], [20, 9], [15, 7]]

list_values(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
```

Trees are built from level-order lists in which `None` marks a missing child.
`TreeNode` and `ListNode` compare by identity, so `lowest_common_ancestor`
takes the node objects themselves. Linked lists are built from, and turned
back into, plain Python lists.

Some functions work in place: `rotate`, `sort_colors`, `invert_tree` and
`reorder_list` change what they are given, and `remove_duplicates` and
`remove_element` compact the sequence and return how many values to keep.

Problems that depend on an external oracle take it as an argument:

```python
from algodaily.search import first_bad_version, guess_number

first_bad_version(10, lambda version: version >= 4)          # 4
guess_number(10, lambda n: (6 > n) - (6 < n))                # 6
```

Input that a function cannot handle, such as a negative `k`, an empty list
where a value is needed, or a non-digit character in a digit string, raises
`ValueError`.

## What it does not do

This is a library only: it has no command-line program, and it does not read
or write files.