# algokit

Classic algorithm problems solved in plain Python: array scans, in-place matrix
transforms, dynamic programming, binary search on the answer, singly linked
lists, binary trees and graph traversal. It has no runtime dependencies and
needs Python 3.10 or later.

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
| `algokit.arrays` | `SubarraySum`, `sort_colors`, `repeated_number`, `merge_sorted`, `max_subarray`, `merge_intervals`, `pascal_triangle`, `next_permutation`, `count_inversions`, `max_profit`, `two_sum`, `four_sum`, `longest_zero_sum_subarray`, `find_triplet`, `trap_rain_water`, `remove_duplicates`, `max_consecutive_ones` |
| `algokit.matrix` | `set_zeroes`, `rotate`, `search_matrix`, `celebrity` |
| `algokit.numeric` | `power`, `unique_paths`, `longest_common_subsequence` |
| `algokit.strings` | `length_of_longest_substring` |
| `algokit.partition` | `allocate_books`, `aggressive_cows` |
| `algokit.linked` | `ListNode`, `FlatNode`, `LinkedList`, `from_iterable`, `to_list`, `reverse`, `middle_node`, `merge_sorted_lists`, `remove_nth_from_end`, `delete_node`, `add_two_numbers`, `intersection_point`, `has_cycle`, `reverse_k_group`, `detect_cycle`, `is_palindrome`, `flatten`, `rotate_right` |
| `algokit.trees` | `TreeNode`, `diameter`, `is_balanced`, `lowest_common_ancestor`, `is_same_tree`, `max_path_sum`, `is_symmetric` |
| `algokit.graphs` | `depth_first_search`, `breadth_first_search` |

## Things worth knowing

- In-place functions (`sort_colors`, `merge_sorted`, `next_permutation`,
  `remove_duplicates`, `set_zeroes`, `rotate`) change the list they are given
  and return `None`, except `remove_duplicates`, which returns how many values
  remain at the front.
- `max_subarray` returns a `SubarraySum(total, start, end)` with inclusive
  bounds; an empty sequence raises `ValueError`.
- `repeated_number` returns `(repeated, missing)` for a permutation of `1..n`
  with one value doubled.
- `two_sum`, `find_triplet` and `celebrity` return `None` when there is no
  answer.
- `remove_nth_from_end(head, n)` counts from the last node, which is `0`; a
  position outside the list raises `IndexError`.
- `delete_node` cannot remove the last node of a list and raises `ValueError`.
- `is_palindrome(None)` is `False`.
- `depth_first_search` returns the connected components, visiting neighbours
  in the order their edges were given; `breadth_first_search` returns a single
  order, visiting neighbours in ascending order.
- Tree and list nodes compare by identity, not by value.

## Examples

```python
from algokit.arrays import merge_intervals, trap_rain_water
from algokit.numeric import longest_common_subsequence
from algokit.linked import from_iterable, reverse, to_list
from algokit.graphs import breadth_first_search

merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]])
# [[1, 6], [8, 10], [15, 18]]

trap_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])
# 6

longest_common_subsequence("abcde", "ace")
# 3

to_list(reverse(from_iterable([1, 2, 3, 4])))
# [4, 3, 2, 1]

breadth_first_search(4, [(0, 1), (0, 3), (1, 2), (2, 3)])
# [0, 1, 3, 2]
```

## What it does not do

algokit is a library only: it has no command-line program and reads no input
of its own. Call its functions from your own code.