"""Adjacency-list graphs with traversal, cycle, bipartiteness and ordering checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator


class Graph:
    """A graph on arbitrary hashable, orderable nodes kept as adjacency lists."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, x: Hashable, y: Hashable, bidirectional: bool = True) -> None:
        """Add an edge from x to y, and back from y to x unless one-way."""
        self._adjacency.setdefault(x, []).append(y)
        if bidirectional:
            self._adjacency.setdefault(y, []).append(x)

    def neighbours(self, node: Hashable) -> list[Hashable]:
        """Return the neighbours of node in insertion order."""
        return list(self._adjacency.get(node, ()))

    def _breadth_first(self, source: Hashable) -> Iterator[tuple[Hashable, int]]:
        distance = {source: 0}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            yield node, distance[node]
            for nbr in self._adjacency.get(node, ()):
                if nbr not in distance:
                    distance[nbr] = distance[node] + 1
                    queue.append(nbr)

    def bfs(self, source: Hashable) -> list[Hashable]:
        """Return the nodes reachable from source in breadth-first order."""
        return [node for node, _ in self._breadth_first(source)]

    def shortest_distances(self, source: Hashable) -> dict[Hashable, int]:
        """Map each reachable node, in visiting order, to its edge count from source."""
        return dict(self._breadth_first(source))

    def format(self) -> str:
        """Render each node with outgoing edges, in sorted node order."""
        return "".join(
            f"Node :{node} -->" + "".join(f"{nbr} ," for nbr in self._adjacency[node]) + "\n"
            for node in sorted(self._adjacency)
        )


def _adjacency_lists(
    n: int, edges: Iterable[tuple[int, int]], *, directed: bool
) -> list[list[int]]:
    if n < 0:
        raise ValueError("number of vertices must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside 0..{n - 1}")
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def format_adjacency(n: int, edges: Iterable[tuple[int, int]]) -> str:
    """Render an undirected graph on vertices 0..n-1, one vertex per line."""
    adjacency = _adjacency_lists(n, edges, directed=False)
    return "".join(
        f"Vertex {vertex} -->" + "".join(f"{nbr} " for nbr in nbrs) + "\n"
        for vertex, nbrs in enumerate(adjacency)
    )


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the component of vertex 0 can be two-coloured."""
    adjacency = _adjacency_lists(n, edges, directed=False)
    if n == 0:
        return True
    colour = [0] * n
    colour[0] = 1
    stack = [(0, -1, iter(adjacency[0]))]
    while stack:
        node, parent, nbrs = stack[-1]
        for nbr in nbrs:
            if colour[nbr] == 0:
                colour[nbr] = 3 - colour[node]
                stack.append((nbr, node, iter(adjacency[nbr])))
                break
            if nbr != parent and colour[nbr] == colour[node]:
                return False
        else:
            stack.pop()
    return True


def has_cycle_directed(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether a directed cycle is reachable from vertex 0."""
    adjacency = _adjacency_lists(n, edges, directed=True)
    if n == 0:
        return False
    visited = [False] * n
    on_path = [False] * n
    visited[0] = on_path[0] = True
    stack = [(0, iter(adjacency[0]))]
    while stack:
        node, nbrs = stack[-1]
        for nbr in nbrs:
            if not visited[nbr]:
                visited[nbr] = on_path[nbr] = True
                stack.append((nbr, iter(adjacency[nbr])))
                break
            if on_path[nbr]:
                return True
        else:
            on_path[node] = False
            stack.pop()
    return False


def has_cycle_undirected(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the component of vertex 0 in an undirected graph has a cycle."""
    adjacency = _adjacency_lists(n, edges, directed=False)
    if n == 0:
        return False
    visited = [False] * n
    visited[0] = True
    stack = [(0, -1, iter(adjacency[0]))]
    while stack:
        node, parent, nbrs = stack[-1]
        for nbr in nbrs:
            if not visited[nbr]:
                visited[nbr] = True
                stack.append((nbr, node, iter(adjacency[nbr])))
                break
            if nbr != parent:
                return True
        else:
            stack.pop()
    return False


def topological_sort(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order the vertices of a directed acyclic graph so every edge points forward."""
    adjacency = _adjacency_lists(n, edges, directed=True)
    visited = [False] * n
    finished: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, nbrs = stack[-1]
            for nbr in nbrs:
                if not visited[nbr]:
                    visited[nbr] = True
                    stack.append((nbr, iter(adjacency[nbr])))
                    break
            else:
                finished.append(node)
                stack.pop()
    finished.reverse()
    return finished