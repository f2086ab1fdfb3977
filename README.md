# algobox

Classic algorithms in plain Python, with no dependencies outside the standard
library: backtracking searches, union-find, graph traversal, rooted-tree
queries, the travelling salesman by bitmask DP, a set of dynamic-programming
problems and a few array and string scans.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `algobox.backtracking`

- `knights_tour(n)`: a knight's tour of an `n` x `n` board from the top-left
  corner, as a board of move numbers starting at 1, or `None` if there is none.
- `n_queens(n)`: a generator of every placement of `n` non-attacking queens as
  0/1 boards.
- `rat_in_maze_paths(maze)`: a generator of every simple path through a square
  0/1 maze from the top-left to the bottom-right cell, each as a 0/1 matrix of
  the cells walked (the destination cell is left unmarked).
- `format_board(board)`: a board as text, one row per line.

### `algobox.dsu`

- `DisjointSet(n)`: union-find over `0..n-1` with path compression; `find`,
  `union` (returns `False` when both are already in one set), `size` and
  `components`. Out-of-range elements raise `IndexError`.
- `has_cycle(n, edges)`: whether an undirected graph has a cycle.
- `unreachable_pairs(n, edges)`: the number of vertex pairs in different
  components.

### `algobox.graph`

- `Graph`: adjacency lists over any hashable nodes; `add_edge(x, y,
  bidirectional=True)`, `neighbours`, `bfs` (visit order), `shortest_distances`
  (hop counts from the source) and `format` (text, nodes in sorted order).
- `format_adjacency(n, edges)`: an undirected graph on `0..n-1` as text.
- `is_bipartite(n, edges)` and `has_cycle_undirected(n, edges)`: checks of the
  component holding vertex 0.
- `has_cycle_directed(n, edges)`: whether a directed cycle is reachable from
  vertex 0.
- `topological_sort(n, edges)`: an ordering of a DAG's vertices.

### `algobox.tree`

- `RootedTree(n, edges, root=1)`: a tree on nodes `1..n`. It offers
  `lca_naive`, `lca` (binary lifting), `distance`, `path_nodes`, `euler_tour`,
  `entry_exit_times`, `subtree_intervals`, `is_ancestor`, `subtree_minimum` and
  `subtree_sizes`.
- `tree_diameter`, `min_vertex_cover`, `holiday_accommodation` (weighted edges),
  `min_reachable_depth` (with at most one back edge) and `tree_difference`
  (least difference of two values on each queried path).

### `algobox.tsp`

- `shortest_tour(dist)`: cost of the cheapest round trip from city 0.
- `matrix_from_off_diagonal(n, costs)`: a distance matrix from row-major costs
  that leave out the zero diagonal.

### `algobox.dp`

`dice_combinations`, `frog_min_cost` (jumps of up to `k` stones, default 2),
`grid_paths` (rows of text, `#` for walls), `knapsack_max_value` and
`knapsack_max_value_light` (for small capacities and for small values),
`longest_path` (DAG on `1..n`, a cycle raises `ValueError`), `vacation`,
`not_alone`, `coin_change_ways`, `billiards_ways`,
`count_non_decreasing_subarrays` and `elevator_times`. Counts that can grow
large are taken modulo `MOD` (10**9 + 7) or, for `billiards_ways`,
`BILLIARDS_MOD` (10**9 + 9).

### `algobox.sequences`

`count_distinct`, `max_adjacent_difference`, `can_climb` and
`min_ladder_height`, `nearest_smaller_left`, `nearest_smaller_right`,
`largest_rectangle`, `sliding_window_max`, `matching_parentheses` and
`compress_runs`.

## Examples

```python
from algobox.graph import Graph, topological_sort
from algobox.dsu import DisjointSet
from algobox.tree import RootedTree, tree_diameter
from algobox.tsp import shortest_tour
from algobox.dp import dice_combinations, frog_min_cost
from algobox.sequences import largest_rectangle, sliding_window_max

g = Graph()
for a, b in [(0, 1), (1, 2), (2, 3)]:
    g.add_edge(a, b)
print(g.bfs(0))                   # [0, 1, 2, 3]
print(g.shortest_distances(0))    # {0: 0, 1: 1, 2: 2, 3: 3}
print(topological_sort(3, [(0, 1), (1, 2)]))   # [0, 1, 2]

dsu = DisjointSet(4)
dsu.union(0, 1)
print(dsu.components())           # 3

edges = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6), (3, 7)]
tree = RootedTree(7, edges)
print(tree.lca(4, 5), tree.lca(4, 6))   # 2 1
print(tree.distance(4, 6))              # 4
print(tree_diameter(7, edges))          # 4

print(shortest_tour([[0, 1], [1, 0]]))  # 2
print(dice_combinations(3))             # 4
print(frog_min_cost([10, 30, 40, 20]))  # 30
print(largest_rectangle([2, 1, 5, 6, 2, 3]))                  # 10
print(sliding_window_max([1, 3, -1, -3, 5, 3, 6, 7], 3))      # [3, 3, 5, 5, 6, 7]
```

## What it does not do

algobox is a library only. It has no command-line programs and reads no input
from files or standard input: every function takes Python values and returns
its result rather than printing it. Invalid input, such as an out-of-range
vertex or a malformed matrix, raises an exception (`ValueError` in most places).