"""Travelling-salesman tours by dynamic programming over visited-city masks."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def shortest_tour(dist: Sequence[Sequence[int]]) -> int:
    """Cost of the cheapest round trip from city 0 through every city and back."""
    n = len(dist)
    if n == 0:
        raise ValueError("at least one city is needed")
    if any(len(row) != n for row in dist):
        raise ValueError("distance matrix must be square")
    everything = (1 << n) - 1

    @lru_cache(maxsize=None)
    def best(mask: int, city: int) -> int:
        if mask == everything:
            return dist[city][0]
        return min(
            dist[city][nxt] + best(mask | 1 << nxt, nxt)
            for nxt in range(n)
            if not mask >> nxt & 1
        )

    return best(1, 0)


def matrix_from_off_diagonal(n: int, costs: Sequence[int]) -> list[list[int]]:
    """Build an n x n matrix from row-major costs that skip the zero diagonal."""
    if n < 1:
        raise ValueError("at least one city is needed")
    if len(costs) != n * n - n:
        raise ValueError(f"expected {n * n - n} costs, got {len(costs)}")
    remaining = iter(costs)
    return [[0 if i == j else next(remaining) for j in range(n)] for i in range(n)]