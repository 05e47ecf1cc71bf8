# cpalgos

A small collection of classic algorithms and data structures of the kind used
in programming contests and algorithm courses, written as plain Python
functions and classes with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpalgos.backtracking` | `n_queens`, `subsets` (generators) |
| `cpalgos.dp` | `fibonacci`, `knapsack` (0/1) |
| `cpalgos.numeric` | `bisect_sqrt` |
| `cpalgos.dsu` | `DisjointSet`, `network_sizes` |
| `cpalgos.arrays` | `count_inversions`, `sliding_window_max` |
| `cpalgos.sorting` | `Record`, `sort_pairs_by_second`, `sort_records` |
| `cpalgos.strings` | `PalindromeQuery`, `rabin_karp`, `parse_ints` |
| `cpalgos.fenwick` | `FenwickTree` |
| `cpalgos.trie` | `Trie` |
| `cpalgos.segment_tree` | `SegmentTree`, `LazySegmentTree` |
| `cpalgos.traversal` | `undirected_graph`, `bfs`, `bfs_path`, `dfs`, `is_bipartite`, `BfsResult`, `DfsResult` |
| `cpalgos.articulation` | `articulation_points` |
| `cpalgos.shortest_paths` | `dijkstra`, `second_shortest_distance`, `lexicographic_shortest_path` |
| `cpalgos.mst` | `kruskal_cost`, `prim_cost` |
| `cpalgos.scc` | `strongly_connected_components` |
| `cpalgos.topsort` | `topological_sort_kahn`, `topological_sort_dfs` |

## Examples

```python
from cpalgos.dp import fibonacci, knapsack
from cpalgos.arrays import count_inversions
from cpalgos.segment_tree import SegmentTree
from cpalgos.strings import rabin_karp
from cpalgos.traversal import undirected_graph, bfs_path
from cpalgos.shortest_paths import dijkstra

fibonacci(10)                          # 55
knapsack([1, 3, 4], [15, 20, 30], 4)   # 35
count_inversions([2, 4, 1, 3, 5])      # 3

tree = SegmentTree([1, 2, 3, 4, 5])
tree.query(1, 3)                       # 9: positions 1..3, 0-based and inclusive
tree.update(2, 10)                     # set position 2 to 10
tree.query(1, 3)                       # 16

rabin_karp("hello world", "world")     # 6

graph = undirected_graph([(1, 2), (2, 3), (3, 4)])
bfs_path(graph, 1, 4)                  # [1, 2, 3, 4]

dijkstra(3, [(1, 2, 5)])               # {1: 0, 2: 5, 3: None}
```

## Conventions

- Weighted edges are `(u, v, weight)` triples; unweighted edges are `(u, v)` pairs.
- `articulation_points`, `dijkstra`, `second_shortest_distance`,
  `lexicographic_shortest_path`, `kruskal_cost` and
  `strongly_connected_components` work on nodes `1..n`; the topological sorts
  work on nodes `0..n-1`. A node outside that range raises `ValueError`.
- The functions in `cpalgos.traversal`, `prim_cost` and `DisjointSet` accept
  any hashable nodes.
- `SegmentTree`, `LazySegmentTree` and `PalindromeQuery` take 0-based inclusive
  ranges; `FenwickTree` uses 1-based positions.
- Errors are raised as exceptions: `ValueError` for bad arguments, unreachable
  targets and cyclic graphs in the topological sorts, `IndexError` for
  out-of-range positions.

## What this package does not do

It is a library only. It has no command-line program and reads nothing from
standard input; every routine is called from Python with its data passed as
arguments.