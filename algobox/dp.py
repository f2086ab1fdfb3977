"""Dynamic-programming counts and optimisations over sequences, grids and DAGs."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence

MOD = 1_000_000_007
BILLIARDS_MOD = 1_000_000_009

_DICE_FACES = 6
_BILLIARDS_START = (1, 0, 1, 1)


def dice_combinations(n: int) -> int:
    """Number of ordered dice-roll sequences summing to n, modulo 10**9 + 7."""
    if n < 0:
        raise ValueError("sum must not be negative")
    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(ways[total - face] for face in range(1, min(_DICE_FACES, total) + 1)) % MOD
    return ways[n]


def frog_min_cost(heights: Sequence[int], k: int = 2) -> int:
    """Least total height change for a frog jumping up to k stones at a time.

    The frog starts on the first stone and must reach the last one.
    """
    if not heights:
        raise ValueError("at least one stone is needed")
    if k < 1:
        raise ValueError("jump length must be at least 1")
    cost = [0] * len(heights)
    for i in range(1, len(heights)):
        cost[i] = min(
            cost[i - step] + abs(heights[i - step] - heights[i])
            for step in range(1, min(k, i) + 1)
        )
    return cost[-1]


def grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths from the top-left to the bottom-right cell.

    Cells marked '#' are walls. The destination counts as reached whatever it
    holds. The count is taken modulo 10**9 + 7.
    """
    rows = len(grid)
    if rows == 0 or len(grid[0]) == 0:
        raise ValueError("grid must not be empty")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    below = [0] * (cols + 1)
    for r in reversed(range(rows)):
        current = [0] * (cols + 1)
        for c in reversed(range(cols)):
            if r == rows - 1 and c == cols - 1:
                current[c] = 1
            elif grid[r][c] != "#":
                current[c] = (below[c] + current[c + 1]) % MOD
        below = current
    return below[0]


def _check_items(items: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    items = list(items)
    if any(weight < 0 or value < 0 for weight, value in items):
        raise ValueError("weights and values must not be negative")
    return items


def knapsack_max_value(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Greatest total value of (weight, value) items fitting in capacity.

    Suited to small capacities: the table grows with the capacity.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in _check_items(items):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def knapsack_max_value_light(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Greatest total value of (weight, value) items fitting in capacity.

    Suited to large capacities and small values: the table grows with the
    total of the values and holds the least weight reaching each value.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    items = _check_items(items)
    total = sum(value for _, value in items)
    lightest = [0] + [math.inf] * total
    for weight, value in items:
        for reached in range(total, value - 1, -1):
            lightest[reached] = min(lightest[reached], lightest[reached - value] + weight)
    return max(value for value, weight in enumerate(lightest) if weight <= capacity)


def longest_path(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of edges on the longest path of a DAG on vertices 1..n."""
    if n < 0:
        raise ValueError("number of vertices must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside 1..{n}")
        adjacency[u].append(v)
        indegree[v] += 1
    length = [0] * (n + 1)
    ready = deque(node for node in range(1, n + 1) if indegree[node] == 0)
    processed = 0
    while ready:
        node = ready.popleft()
        processed += 1
        for nbr in adjacency[node]:
            length[nbr] = max(length[nbr], length[node] + 1)
            indegree[nbr] -= 1
            if indegree[nbr] == 0:
                ready.append(nbr)
    if processed != n:
        raise ValueError("graph has a cycle")
    return max(length)


def vacation(activities: Iterable[Sequence[int]]) -> int:
    """Greatest happiness from one of three activities a day, never twice running."""
    best = (0, 0, 0)
    for day in activities:
        if len(day) != 3:
            raise ValueError("each day must offer exactly three activities")
        best = tuple(
            gain + max(score for other, score in enumerate(best) if other != choice)
            for choice, gain in enumerate(day)
        )
    return max(best)


def _block_cost(block: Sequence[int]) -> int:
    return max(block) - min(block)


def _not_alone_linear(values: Sequence[int]) -> float:
    best = [math.inf] * len(values)
    best[1] = abs(values[1] - values[0])
    for i in range(2, len(values)):
        best[i] = best[i - 2] + abs(values[i] - values[i - 1])
        before = best[i - 3] if i >= 3 else 0
        best[i] = min(best[i], before + _block_cost(values[i - 2 : i + 1]))
    return best[-1]


def not_alone(values: Sequence[int]) -> int:
    """Least cost to make a circular array into equal blocks of two or three.

    A block's cost is the change needed to make all its values equal.
    """
    if len(values) < 2:
        raise ValueError("at least two values are needed")
    values = list(values)
    return int(min(_not_alone_linear(values[shift:] + values[:shift]) for shift in range(3)))


def coin_change_ways(total: int, coins: Iterable[int]) -> int:
    """Number of unordered ways to make total from unlimited coins."""
    if total < 0:
        raise ValueError("total must not be negative")
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * total
    for coin in coins:
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def billiards_ways(x: int) -> int:
    """Ways to sum to x with steps of 2 and 3, modulo 10**9 + 9."""
    if x < 0:
        raise ValueError("target must not be negative")
    if x < len(_BILLIARDS_START):
        return _BILLIARDS_START[x]
    back3, back2, back1 = _BILLIARDS_START[1:]
    for _ in range(x - 3):
        back3, back2, back1 = back2, back1, (back2 + back3) % BILLIARDS_MOD
    return back1


def count_non_decreasing_subarrays(values: Iterable[int]) -> int:
    """Number of contiguous subarrays whose values never decrease."""
    total = 0
    run = 0
    previous = None
    for value in values:
        run = run + 1 if previous is not None and value >= previous else 1
        total += run
        previous = value
    return total


def elevator_times(stairs: Sequence[int], elevator: Sequence[int], overhead: int) -> list[int]:
    """Least time to reach each floor from the ground floor.

    stairs[i] and elevator[i] are the times to climb from floor i to floor i+1;
    entering the elevator costs overhead once per ride.
    """
    if len(stairs) != len(elevator):
        raise ValueError("stairs and elevator must cover the same floors")
    on_foot, in_lift = 0, overhead
    times = [0]
    for step, ride in zip(stairs, elevator):
        on_foot, in_lift = min(on_foot, in_lift) + step, min(on_foot + overhead, in_lift) + ride
        times.append(min(on_foot, in_lift))
    return times