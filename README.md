# algokata

A collection of classic algorithm and data-structure exercises, written as a
plain Python library with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Contents

| Module | What it offers |
| --- | --- |
| `algokata.linked_list` | `ListNode`, `LinkedList`, `connect_nodes`, `build_list`, `iter_values`, `format_list`, `add_to_tail`, `remove_node`, `delete_node`, `values_from_tail`, `values_from_tail_recursive` |
| `algokata.bits` | `count_ones` (32-bit two's complement), `find_nums_appear_once`, `add` and `add_recursive` (bitwise addition) |
| `algokata.numeric` | `str_to_int` (32-bit, with overflow checks), `power`, `approx_equal` |
| `algokata.searching` | `binary_search`, `binary_search_recursive`, `find_in_matrix`, `first_index_of`, `last_index_of`, `count_occurrences`, `min_in_rotated`, `find_pair_with_sum` |
| `algokata.stacks_queues` | `MinStack`, `QueueStack`, `StackQueue`, `is_pop_order`, `max_in_windows` |
| `algokata.sorting` | in-place `insertion_sort`, `binary_insertion_sort`, `shell_sort`, `bubble_sort`, `quick_sort`, `selection_sort`, `heap_sort`, `merge_sort`, `radix_sort`; `nth_digit` |
| `algokata.partition` | `is_odd`, `reorder`, `reorder_odd_even`, `reorder_stable_bubble`, `reorder_stable_insert`, `reorder_stable_merge`, `reorder_odd_even_stable` |
| `algokata.selection` | `more_than_half_partition`, `more_than_half_vote`, `least_k_partition`, `least_k_heap`, `least_k_sorted` |
| `algokata.combinatorics` | `permutations`, `next_permutation`, `permutations_lexicographic`, `combinations`, `combinations_binary`, `n_queens`, `dice_probabilities`, `dice_probabilities_recursive`, `last_remaining`, `last_remaining_simulated` |
| `algokata.big_numbers` | `count_to_max_digits`, `count_to_max_digits_recursive` (generators of digit strings), `add_big` |
| `algokata.recursion` | `fibonacci`, `fibonacci_recursive`, `jump_floor`, `jump_floor_unbounded`, `rect_cover`, `sum_formula`, `sum_recursive`, `sum_short_circuit` |
| `algokata.strings` | `min_concatenation`, `first_unique_char`, `first_unique_index`, `reverse_sentence`, `left_rotate`, `replace_spaces`, `CharStream` |
| `algokata.patterns` | `match` for `.` and `*` patterns, `is_numeric` |
| `algokata.tree` | `TreeNode`, `reconstruct` from preorder and inorder traversals, `preorder_values`, `inorder_values` |
| `algokata.arrays` | `spiral_order`, `max_subarray_sum`, `inverse_pairs`, `continuous_sequences`, `is_continuous`, `find_duplicate`, `construct_product_array` |

The sorting and partition functions rearrange the list they are given and
return `None`, like `list.sort`. `quick_sort` takes an optional
`random.Random` for choosing pivots.

## Examples

```python
from algokata.stacks_queues import MinStack, max_in_windows
from algokata.patterns import match, is_numeric
from algokata.arrays import spiral_order
from algokata.sorting import heap_sort

stack = MinStack()
for value in (3, 5, 1):
    stack.push(value)
stack.min()          # 1

max_in_windows([2, 3, 4, 2, 6, 2, 5, 1], 3)   # [4, 4, 6, 6, 6, 5]

match("aaa", "ab*ac*a")   # True
is_numeric("-1E-16")      # True

spiral_order([[1, 2], [3, 4]])   # [1, 2, 4, 3]

values = [3, -176, 17, 9]
heap_sort(values)
values                    # [-176, 3, 9, 17]
```

Invalid input is reported by raising exceptions such as `ValueError` or
`IndexError` rather than through status flags.

## What it does not do

This is a library only. It has no command-line program and prints nothing:
every function returns its result (lists, strings, dictionaries or
generators) for the caller to use.