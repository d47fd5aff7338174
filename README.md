# algokit

A compact collection of classic algorithms and data structures in plain Python, with no runtime dependencies.

## Installation

```
pip install algokit
```

For the test suite:

```
pip install "algokit[test]"
pytest
```

## Modules

- `algokit.strings`: `lps_array`, `kmp_search`, `length_of_longest_substring`, `length_of_last_word`, `find_substring`, `postfix_to_infix`
- `algokit.numeric`: `factorial`, `ncr`, `is_prime`, `next_prime`, `knapsack`
- `algokit.arrays`: `sorted_squares`, `binary_search`, `max_subarray_sum`, `rotate_right`, `rotate_left`, `three_sum`, `max_profit`, `longest_mountain`, `minimum_abs_difference`, `find_median_sorted_arrays`, `longest_increasing_subsequence`
- `algokit.structures`: `DisjointSet`, `FenwickTree`, `SegmentTree`, `LRUCache`
- `algokit.graphs`: `bfs`, `dfs`, `dijkstra`, `kruskal_mst`, `topological_sort`, `floyd_warshall`, `count_provinces`, `flood_fill`, and the exceptions `CycleError` and `NegativeCycleError`
- `algokit.trees`: `TreeNode`, `inorder`, `preorder`, `postorder`, `level_order`, `vertical_traversal`
- `algokit.linked`: `ListNode`, `DoublyLinkedList`, `build_list`, `to_list`, `has_cycle`, `reverse_list`
- `algokit.backtracking`: `solve_n_queens`, `is_safe`

## Examples

```python
from algokit.strings import kmp_search, postfix_to_infix
from algokit.numeric import knapsack, next_prime
from algokit.arrays import binary_search, max_subarray_sum, three_sum
from algokit.structures import FenwickTree, LRUCache, SegmentTree
from algokit.graphs import bfs, dijkstra, kruskal_mst, topological_sort
from algokit.backtracking import solve_n_queens

kmp_search("abxabcabcaby", "abcaby")              # [6]
postfix_to_infix("ab+c*")                         # "((a+b)*c)"

knapsack(50, [10, 20, 30], [60, 100, 120])        # 220
next_prime(13)                                    # 17

binary_search([2, 4, 6, 8, 10, 12, 14], 10)       # 4 (None when absent)
max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])   # 7
three_sum([-1, 0, 1, 2, -1, -4])                  # [[-1, -1, 2], [-1, 0, 1]]

tree = FenwickTree(5)                             # positions 1..5
tree.add(1, 5)
tree.add(3, 2)
tree.add(5, 7)
tree.range_sum(1, 3)                              # 7

segments = SegmentTree([1, 3, 5, 7, 9, 11])       # positions 0..5
segments.query(1, 3)                              # 15
segments.update(2, 6)
segments.query(1, 3)                              # 16

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                                      # 1
cache.put(3, 3)                                   # evicts key 2
cache.get(2)                                      # None

adjacency = [[1, 2], [0, 3], [0, 4], [1], [2]]
bfs(0, adjacency)                                 # [0, 1, 2, 3, 4]

weighted = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2), (3, 5)], [(4, 3)], []]
dijkstra(0, weighted)                             # [0, 3, 1, 4, 7]

edges = [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)]
kruskal_mst(4, edges)                             # (19, [(2, 3, 4), (0, 3, 5), (0, 1, 10)])

topological_sort([[], [2, 3], [4], [4], [5], []]) # [0, 1, 2, 3, 4, 5]

len(solve_n_queens(4))                            # 2
```

## Conventions

- Functions return new values and leave their inputs unchanged, except where a docstring says otherwise (`reverse_list` relinks the nodes it is given; `DisjointSet`, `FenwickTree`, `SegmentTree`, `LRUCache` and `DoublyLinkedList` are mutable objects).
- Where an operation has no valid result, an exception is raised rather than a sentinel returned: `topological_sort` raises `CycleError` on a cyclic graph, `floyd_warshall` raises `NegativeCycleError` on a negative cycle, and bad sizes or out-of-range positions raise `ValueError` or `IndexError`.
- "Not found" is `None`: `binary_search`, `find_substring` and `LRUCache.get` return `None` when there is nothing to return.
- In `floyd_warshall`, an off-diagonal `0`, `None` or `math.inf` means "no edge"; unreachable pairs come back as `math.inf`, as do unreachable nodes in `dijkstra`.

## What is not included

The package has no sorting routines of its own; use Python's built-in `sorted` and `list.sort`. It is a library only: it has no command-line program and reads no input files.