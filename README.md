# codingdrills

A collection of classic algorithm exercises, each written as a plain Python
function. You pass in Python data (integers, lists, tuples, strings) and get
back a Python value. The package has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To install the test requirements as well and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `codingdrills.prefix_sum` | `digit_sum`, `adjusted_average`, `range_sums`, `grid_range_sums`, `count_divisible_subarrays` |
| `codingdrills.two_pointer` | `count_consecutive_sums`, `count_pairs_with_sum`, `count_good_numbers`, `count_valid_passwords`, `sliding_window_minimums` |
| `codingdrills.stack_queue` | `stack_sequence`, `next_greater_elements`, `last_card`, `absolute_heap` |
| `codingdrills.sorting` | `bubble_sort`, `bubble_passes`, `sort_digits_descending`, `total_wait_time`, `kth_smallest`, `merge_sort`, `count_swaps`, `counting_sort` |
| `codingdrills.binary_search` | `contains_all`, `min_blu_ray_size`, `kth_in_multiplication_table` |
| `codingdrills.greedy` | `min_coins`, `min_card_merge_cost`, `max_grouped_sum`, `max_meetings`, `min_expression_value` |
| `codingdrills.graph_search` | `count_connected_components`, `amazing_primes`, `has_friend_chain`, `dfs_bfs_orders`, `maze_shortest_path`, `tree_diameter`, `cities_at_distance`, `most_hackable`, `is_bipartite`, `water_amounts` |
| `codingdrills.number_theory` | `primes_between`, `count_almost_primes`, `smallest_prime_palindrome`, `count_square_free`, `euler_phi`, `gcd`, `lcm`, `gcd_repunit`, `cocktail_ratios`, `extended_euclid`, `solve_linear_diophantine` |
| `codingdrills.union_find` | `UnionFind`, `process_set_queries`, `can_travel`, `count_lie_parties` |
| `codingdrills.topology` | `topological_order`, `build_times`, `critical_path` |
| `codingdrills.shortest_path` | `dijkstra_distances`, `min_bus_cost`, `kth_shortest_paths`, `time_machine`, `salesman_profit`, `floyd_warshall`, `reachability`, `kevin_bacon` |
| `codingdrills.spanning_tree` | `minimum_spanning_weight`, `donate_cables` |
| `codingdrills.trees` | `Trie`, `tree_parents`, `count_leaves_after_delete`, `count_known_words`, `traversals` |

## Examples

```python
from codingdrills.prefix_sum import range_sums
from codingdrills.sorting import merge_sort, count_swaps
from codingdrills.union_find import UnionFind
from codingdrills.trees import Trie

range_sums([5, 4, 3, 2, 1], [(1, 3), (2, 4), (5, 5)])   # [12, 9, 1]
merge_sort([5, 2, 3, 4, 1])                              # [1, 2, 3, 4, 5]
count_swaps([2, 1])                                      # 1

sets = UnionFind(5)
sets.union(1, 3)
sets.connected(1, 3)                                      # True

trie = Trie()
trie.insert("apple")
trie.contains("apple")                                    # True
trie.contains("app")                                      # False
```

## Conventions

- Graph functions take a vertex count and a list of edge tuples. Vertices
  are numbered from 1 unless a function's docstring says otherwise
  (for example `has_friend_chain`, `cocktail_ratios` and `salesman_profit`
  number them from 0).
- Range queries in `range_sums` and `grid_range_sums` are 1-based and
  inclusive; a query outside the data raises `IndexError`.
- Where there may be no answer, functions return `None` rather than a
  sentinel: `stack_sequence` when the sequence cannot be produced,
  `dijkstra_distances` and `time_machine` for unreachable vertices,
  `min_bus_cost` when the destination cannot be reached, `time_machine`
  when a negative cycle is reachable, `solve_linear_diophantine` when no
  integer solution exists, and `donate_cables` when the computers cannot
  all be connected. `salesman_profit` returns `None` for an unreachable
  destination and `math.inf` when the profit is unbounded.
- `floyd_warshall` reports 0 for pairs with no path, and
  `kth_shortest_paths` reports -1 where fewer than `k` walks exist.
- Invalid arguments (a non-positive count, a non-digit string, a window that
  does not fit) raise `ValueError`.

## What the package does not do

There is no command-line program: nothing reads from standard input or
writes to standard output. Each drill is called from Python code.