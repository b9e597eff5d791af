# algokit

Classic algorithms as small, plain Python functions: array exercises,
binary search, bit manipulation, binary and binary search trees, and a set of
dynamic-programming problems. It has no runtime dependencies and needs
Python 3.10 or later.

## Modules

### `algokit.arrays`

- `product_array(values)`: for each position, the product of all other
  elements, computed without division.
- `count_activities(activities)`: the most non-overlapping `(start, end)`
  activities one person can do; touching activities do not overlap.
- `max_subarray_sum(values)`: the largest contiguous sum, where the empty run
  counts as 0.
- `min_difference(a, b)`: the pair `(x, y)` with the smallest absolute
  difference.
- `min_swaps(values)` and `min_swaps_cycles(values)`: the fewest swaps that
  sort distinct values (a `ValueError` for repeated values).
- `subarray_sort(values)`: `(start, end)` of the smallest window whose sorting
  sorts the list; a sorted list gives `(0, len - 1)`.

### `algokit.binary_search`

- `can_place(nests, birds, dist)` and `max_minimum_distance(nests, birds)`:
  the largest minimum gap at which all birds fit in the nests, or -1.
- `frequency_count(values, key)`: occurrences of `key` in a sorted list.
- `min_pair(a, b)`: the closest pair across two lists, searching a sorted `b`.
- `find_pivot(values)`, `rotate_search_with_pivot(values, key)` and
  `rotate_search(values, key)`: searching a rotated sorted list; -1 when absent.
- `square_root(n, precision)`: the square root truncated to `precision`
  decimal places.
- `get_coins(values, k)`: the largest amount the poorest of `k` contiguous
  groups can get.
- `min_pages(books, students)`: the smallest page limit at which contiguous
  books can be shared among the students.

### `algokit.bits`

`is_odd`, `get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_low_bits`,
`replace_bits`, `two_to_power`, `count_bits`, `fast_count_bits`, `fast_power`,
`fast_power_iterative`, `decimal_to_binary`, `binary_to_decimal`,
`convert_base`, `is_power_of_two` and `earth_level`. The bit setters return a
new integer rather than changing their argument. `decimal_to_binary(5)` gives
`101`, a decimal number made of binary digits, and `binary_to_decimal(101)`
gives `5`.

### `algokit.bst`

A `Node` dataclass (`data`, `left`, `right`; equal values go left) and:
`insert`, `search`, `inorder`, `create_bst`, `levels`, `find_closest`
(returns `(value, distance)`), `find_closest_iterative`, `flatten`,
`flatten_optimized` (returns `(head, tail)`), `iter_flattened`,
`inorder_successor`, `min_height_bst`, `is_bst`, `lca`, `find_distance` and
`shortest_distance`.

### `algokit.parent_bst`

`ParentNode` with `set_left` and `set_right`, which also set the child's
`parent`, and `find_inorder_successor(target)`, which walks up through parent
links when needed.

### `algokit.binary_tree`

`TreeNode`, `build_tree_level(values)` (level-order input where -1 marks a
missing child), `level_order`, `left_view`, `left_view_recursive` and
`mirror_equal`, which compares two trees allowing any node's children to be
swapped.

### `algokit.tables`

`format_1d_cache(cache)` and `format_2d_cache(cache)` render DP tables as text
after a `Cache :` label.

### Dynamic programming

Most problems come in a top-down (memoised recursion) and a bottom-up (table)
form.

- `algokit.box_stacking`: `max_height_top_down` and `max_height_bottom_up`
  return a `StackingResult` with `height`, `index`, the sorted `boxes`, the
  `choice` table and a `stack` property listing the boxes base first;
  `can_stack` and `stack_choices` are the helpers behind them.
- `algokit.coins`: fewest coins (`min_coins`, `min_coins_top_down` which also
  returns the coins used, `min_coins_bottom_up`, `min_coins_bfs`; -1 when
  impossible) and the number of combinations (`count_ways_top_down`,
  `count_ways_bottom_up`).
- `algokit.counting`: distinct BST shapes (`count_trees_top_down`,
  `count_trees_bottom_up`) and ways to climb a ladder with steps of 1 to `k`
  (`count_ladder_ways`, `count_ladder_ways_memo`, `count_ladder_ways_window`,
  `count_ladder_ways_prefix`).
- `algokit.frog`: cheapest jumps over stones of given heights, with 1 or 2
  stones per jump (`frog_min_cost_top_down`, `frog_min_cost_bottom_up`, both
  returning `(cost, path)`) or up to `k` stones (`frog_min_cost_k_top_down`,
  `frog_min_cost_k_bottom_up`).
- `algokit.sequences`: increasing subsequences
  (`max_increasing_subseq_top_down`, `max_increasing_subseq_bottom_up`,
  `increasing_choices`), non-adjacent sums
  (`max_non_adjacent_sum_top_down`, `max_non_adjacent_sum_bottom_up`,
  `non_adjacent_choices`) and minimum jumps to the end (`min_jumps_recursive`,
  `min_jumps_iterative`, a `ValueError` when the end cannot be reached).
- `algokit.profit`: rod cutting (`rod_cutting_top_down`,
  `rod_cutting_bottom_up`), the 0/1 knapsack (`knapsack_top_down`,
  `knapsack_bottom_up`) and selling wines from either end of a row
  (`wines_top_down`, `wines_bottom_up`).
- `algokit.strings`: subsequence counts (`count_subsequences_top_down`,
  `count_subsequences_bottom_up`), longest common subsequence
  (`lcs_top_down` returning `(length, subsequence)`, `lcs_bottom_up`), a
  restricted edit distance (`edit_distance_top_down`,
  `edit_distance_bottom_up`), `is_palindrome` and palindrome partitioning
  (`min_palindrome_partition_top_down`, `min_palindrome_partition_bottom_up`).
- `algokit.wildcard`: `?` and `*` matching (`match_naive`, `match_top_down`,
  `match_bottom_up`). In `match_naive` a `*` never absorbs the last character
  of the text.
- `algokit.intervals`: the `O`/`H` letter-picking game (`game_winner`,
  returning `(winner, score)`) and mixing colours with the least smoke
  (`min_smoke_top_down`, `min_smoke_bottom_up`, returning
  `(final colour, smoke)`).

## Examples

```python
from algokit.binary_search import frequency_count, max_minimum_distance
from algokit.bst import create_bst, inorder, search
from algokit.coins import min_coins_bottom_up
from algokit.strings import lcs_bottom_up

frequency_count([0, 1, 1, 1, 1, 2, 2, 2, 3, 4, 4, 5, 10], 1)  # 4
max_minimum_distance([1, 2, 4, 8, 9], 3)                        # 3

root = create_bst([7, 6, 1, 10, 12, 11, 8, 2, 9])
inorder(root)      # [1, 2, 6, 7, 8, 9, 10, 11, 12]
search(root, 12)   # True

min_coins_bottom_up([1, 3, 7, 10], 15)  # 3
lcs_bottom_up("ABCD", "ABEDG")          # 3
```

## What it does not do

algokit is a library only: it has no command-line program and reads no input
of its own. Results are returned as values; nothing is printed.

## Running the tests

```
pip install -e .[test]
pytest
```