"""Disjoint-set union with path compression and component sizes."""

from __future__ import annotations

from collections.abc import Iterable


class DisjointSet:
    """Union-find over the elements 0 .. n-1."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must not be negative")
        self._parent = list(range(n))
        self._size = [1] * n
        self._components = n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of x's set, compressing the path."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; return False if they were already one."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        self._parent[root_x] = root_y
        self._size[root_y] += self._size[root_x]
        self._size[root_x] = 0
        self._components -= 1
        return True

    def size(self, x: int) -> int:
        """Number of elements in the set containing x."""
        return self._size[self.find(x)]

    def components(self) -> int:
        """Number of disjoint sets."""
        return self._components


def has_cycle(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether an undirected graph on n vertices contains a cycle."""
    sets = DisjointSet(n)
    return any(not sets.union(x, y) for x, y in edges)


def unreachable_pairs(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count unordered vertex pairs that lie in different components."""
    sets = DisjointSet(n)
    for x, y in edges:
        sets.union(x, y)
    return sum(n - sets.size(i) for i in range(n)) // 2