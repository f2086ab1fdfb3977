"""Array and string scans: distinct counts, monotonic stacks, windows and runs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise

RUN_FILLER = "@"


def count_distinct(values: Iterable[int]) -> int:
    """Number of distinct values."""
    ordered = sorted(values)
    if not ordered:
        return 0
    return 1 + sum(1 for low, high in pairwise(ordered) if high > low)


def max_adjacent_difference(values: Sequence[int]) -> int:
    """Largest absolute difference between neighbours, 0 with fewer than two."""
    return max((abs(a - b) for a, b in pairwise(values)), default=0)


def can_climb(heights: Sequence[int], ladder: int) -> bool:
    """Tell whether every stack can be reached with a ladder of this height.

    A stack no higher than the ladder can be climbed from the ground; from a
    stack one may step to a neighbour differing by at most the ladder.
    """
    segment: list[int] = []
    segments = [segment]
    for index, height in enumerate(heights):
        if index and abs(height - heights[index - 1]) > ladder:
            segment = []
            segments.append(segment)
        segment.append(height)
    return all(not part or min(part) <= ladder for part in segments)


def min_ladder_height(heights: Sequence[int]) -> int:
    """Shortest ladder from which every stack can be reached."""
    if not heights:
        raise ValueError("at least one stack is needed")
    low, high = min(heights), max(0, max(heights))
    answer = 0
    while low <= high:
        mid = (low + high) // 2
        if can_climb(heights, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def nearest_smaller_left(values: Sequence[int]) -> list[int]:
    """Index of the nearest strictly smaller value to the left, or -1."""
    result: list[int] = []
    stack: list[int] = []
    for index, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(index)
    return result


def nearest_smaller_right(values: Sequence[int]) -> list[int]:
    """Index of the nearest strictly smaller value to the right, or len(values)."""
    n = len(values)
    result = [n] * n
    stack: list[int] = []
    for index, value in enumerate(values):
        while stack and value < values[stack[-1]]:
            result[stack.pop()] = index
        stack.append(index)
    return result


def largest_rectangle(heights: Sequence[int]) -> int:
    """Area of the largest rectangle under a histogram."""
    lefts = nearest_smaller_left(heights)
    rights = nearest_smaller_right(heights)
    return max(
        ((right - left - 1) * height for left, right, height in zip(lefts, rights, heights)),
        default=0,
    )


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of k consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError("window size must be between 1 and the number of values")
    window: deque[int] = deque()
    maxima: list[int] = []
    for index, value in enumerate(values):
        while window and values[window[-1]] <= value:
            window.pop()
        window.append(index)
        if window[0] <= index - k:
            window.popleft()
        if index >= k - 1:
            maxima.append(values[window[0]])
    return maxima


def matching_parentheses(text: str) -> list[int]:
    """For each opening position, the index of its closing ')'; 0 elsewhere.

    Any character other than ')' opens a pair. The list is never empty.
    """
    closing = [0] * max(len(text), 1)
    opened: list[int] = []
    for index, char in enumerate(text):
        if char == ")":
            if not opened:
                raise ValueError(f"unmatched ')' at position {index}")
            closing[opened.pop()] = index
        else:
            opened.append(index)
    return closing


def compress_runs(items: Iterable[str]) -> list[str]:
    """Replace each run by its item, its length if above one, then filler.

    The result is as long as the input.
    """
    compressed: list[str] = []
    for item, group in groupby(items):
        count = sum(1 for _ in group)
        compressed.append(item)
        if count > 1:
            compressed.append(str(count))
            compressed.extend([RUN_FILLER] * (count - 2))
    return compressed