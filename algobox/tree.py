"""Rooted-tree queries and tree dynamic programming on nodes labelled 1..n."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from itertools import pairwise

_NO_DIFFERENCE = 101
_PIGEONHOLE_LIMIT = 100


class _Event(Enum):
    ENTER = "enter"
    EXIT = "exit"


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} outside 1..{n}")


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError("a graph needs at least one node")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


class RootedTree:
    """A tree on nodes 1..n hung from a chosen root.

    Children are visited in the order their edges were given.
    """

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 1) -> None:
        edges = list(edges)
        if n >= 1 and len(edges) != n - 1:
            raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {len(edges)}")
        adjacency = _adjacency(n, edges)
        _check_node(root, n)
        self._n = n
        self._root = root
        self._parent = [0] * (n + 1)
        self._depth = [0] * (n + 1)
        self._children: list[list[int]] = [[] for _ in range(n + 1)]
        self._order = [root]
        seen = [False] * (n + 1)
        seen[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, nbrs = stack[-1]
            for nbr in nbrs:
                if not seen[nbr]:
                    seen[nbr] = True
                    self._parent[nbr] = node
                    self._depth[nbr] = self._depth[node] + 1
                    self._children[node].append(nbr)
                    self._order.append(nbr)
                    stack.append((nbr, iter(adjacency[nbr])))
                    break
            else:
                stack.pop()
        if len(self._order) != n:
            raise ValueError("edges do not connect all nodes into one tree")

        self._size = [0] * (n + 1)
        self._minimum = list(range(n + 1))
        for node in reversed(self._order):
            self._size[node] += 1
            parent = self._parent[node]
            if node != root:
                self._size[parent] += self._size[node]
                self._minimum[parent] = min(self._minimum[parent], self._minimum[node])

        self._tin = [0] * (n + 1)
        for index, node in enumerate(self._order, start=1):
            self._tin[node] = index

        first = list(self._parent)
        first[root] = root
        self._up = [first]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[prev[v]] for v in range(n + 1)])

    def __len__(self) -> int:
        return self._n

    def _check(self, *nodes: int) -> None:
        for node in nodes:
            _check_node(node, self._n)

    def lca_naive(self, u: int, v: int) -> int:
        """Lowest common ancestor found by walking parent links."""
        self._check(u, v)
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        while self._depth[u] > self._depth[v]:
            u = self._parent[u]
        while u != v:
            u, v = self._parent[u], self._parent[v]
        return u

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor found by binary lifting."""
        self._check(u, v)
        if self._depth[u] > self._depth[v]:
            u, v = v, u
        diff = self._depth[v] - self._depth[u]
        for level, jumps in enumerate(self._up):
            if diff >> level & 1:
                v = jumps[v]
        if u == v:
            return u
        for jumps in reversed(self._up):
            if jumps[u] != jumps[v]:
                u, v = jumps[u], jumps[v]
        return self._up[0][u]

    def distance(self, u: int, v: int) -> int:
        """Number of edges on the path between u and v."""
        ancestor = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[ancestor]

    def path_nodes(self, u: int, v: int) -> list[int]:
        """Nodes on the path from u to v, both ends included."""
        ancestor = self.lca(u, v)
        rising: list[int] = []
        while u != ancestor:
            rising.append(u)
            u = self._parent[u]
        falling: list[int] = []
        while v != ancestor:
            falling.append(v)
            v = self._parent[v]
        return rising + [ancestor] + falling[::-1]

    def _events(self) -> Iterator[tuple[_Event, int]]:
        yield _Event.ENTER, self._root
        stack = [(self._root, iter(self._children[self._root]))]
        while stack:
            node, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                yield _Event.EXIT, node
            else:
                yield _Event.ENTER, child
                stack.append((child, iter(self._children[child])))

    def euler_tour(self) -> list[int]:
        """Nodes listed on entry and again after returning from each child."""
        tour: list[int] = []
        for event, node in self._events():
            if event is _Event.ENTER:
                tour.append(node)
            elif node != self._root:
                tour.append(self._parent[node])
        return tour

    def entry_exit_times(self) -> dict[int, tuple[int, int]]:
        """Entry and exit stamps from one clock starting at 1 ticking on both."""
        stamps: dict[int, list[int]] = {}
        for tick, (event, node) in enumerate(self._events(), start=1):
            if event is _Event.ENTER:
                stamps[node] = [tick, 0]
            else:
                stamps[node][1] = tick
        return {node: (stamps[node][0], stamps[node][1]) for node in range(1, self._n + 1)}

    def subtree_intervals(self) -> dict[int, tuple[int, int]]:
        """Preorder entry number and the last entry number inside the subtree."""
        intervals: dict[int, tuple[int, int]] = {}
        entry: dict[int, int] = {}
        timer = 0
        for event, node in self._events():
            if event is _Event.ENTER:
                timer += 1
                entry[node] = timer
            else:
                intervals[node] = (entry[node], timer)
        return {node: intervals[node] for node in range(1, self._n + 1)}

    def is_ancestor(self, x: int, y: int) -> bool:
        """Tell whether x lies on the path from the root to y (x counts for itself)."""
        self._check(x, y)
        tout_x = self._tin[x] + self._size[x] - 1
        tout_y = self._tin[y] + self._size[y] - 1
        return self._tin[x] <= self._tin[y] and tout_x >= tout_y

    def subtree_minimum(self) -> dict[int, int]:
        """Smallest node label in each node's subtree."""
        return {node: self._minimum[node] for node in range(1, self._n + 1)}

    def subtree_sizes(self) -> dict[int, int]:
        """Number of nodes in each node's subtree."""
        return {node: self._size[node] for node in range(1, self._n + 1)}


def tree_diameter(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of edges on the longest path in a tree."""
    edges = list(edges)
    first = RootedTree(n, edges, 1)
    far = max(range(1, n + 1), key=lambda node: first._depth[node])
    second = RootedTree(n, edges, far)
    return max(second._depth[1:])


def min_vertex_cover(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Size of the smallest node set touching every edge of a tree."""
    tree = RootedTree(n, edges, 1)
    without = [0] * (n + 1)
    with_node = [1] * (n + 1)
    for node in reversed(tree._order):
        for child in tree._children[node]:
            without[node] += with_node[child]
            with_node[node] += min(without[child], with_node[child])
    return min(without[1], with_node[1])


def holiday_accommodation(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Largest total travel cost when every person moves to a distinct node.

    Each weighted edge is crossed twice for every person on its smaller side.
    """
    edges = list(edges)
    tree = RootedTree(n, ((u, v) for u, v, _ in edges), 1)
    total = 0
    for u, v, weight in edges:
        child = u if tree._parent[u] == v and u != tree._root else v
        below = tree._size[child]
        total += 2 * min(below, n - below) * weight
    return total


def min_reachable_depth(n: int, edges: Iterable[tuple[int, int]]) -> dict[int, int]:
    """For each node reached from node 1, the least depth its subtree reaches.

    The search tree is a depth-first tree from node 1; a subtree may climb
    through one back edge. Nodes not reached are left out.
    """
    adjacency = _adjacency(n, edges)
    visited = [False] * (n + 1)
    depth = [0] * (n + 1)
    best = [0] * (n + 1)
    visited[1] = True
    stack = [(1, 0, iter(adjacency[1]))]
    while stack:
        node, parent, nbrs = stack[-1]
        for nbr in nbrs:
            if not visited[nbr]:
                visited[nbr] = True
                depth[nbr] = best[nbr] = depth[node] + 1
                stack.append((nbr, node, iter(adjacency[nbr])))
                break
            if nbr != parent:
                best[node] = min(best[node], depth[nbr])
        else:
            stack.pop()
            if stack:
                above = stack[-1][0]
                best[above] = min(best[above], best[node])
    return {node: best[node] for node in range(1, n + 1) if visited[node]}


def tree_difference(
    values: Sequence[int],
    edges: Iterable[tuple[int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """Answer each query with the least difference of two values on its path.

    values[i] belongs to node i + 1. A path with no pair gives 101, and a path
    longer than 100 edges gives 0.
    """
    tree = RootedTree(len(values), edges, 1)
    answers: list[int] = []
    for a, b in queries:
        if tree.distance(a, b) > _PIGEONHOLE_LIMIT:
            answers.append(0)
            continue
        on_path = sorted(values[node - 1] for node in tree.path_nodes(a, b))
        answers.append(min([_NO_DIFFERENCE, *(hi - lo for lo, hi in pairwise(on_path))]))
    return answers