"""Counting problems: binary search tree shapes and ways to climb a ladder."""

from __future__ import annotations

from collections import deque
from functools import lru_cache


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def count_trees_top_down(n: int) -> int:
    """Count structurally distinct binary search trees on ``n`` keys, recursively."""
    _require_non_negative(n)

    @lru_cache(maxsize=None)
    def count(keys: int) -> int:
        if keys <= 1:
            return 1
        return sum(count(root - 1) * count(keys - root) for root in range(1, keys + 1))

    return count(n)


def count_trees_bottom_up(n: int) -> int:
    """Count structurally distinct binary search trees on ``n`` keys with a table."""
    _require_non_negative(n)
    table = [1, 1]
    for keys in range(2, n + 1):
        table.append(sum(table[root - 1] * table[keys - root] for root in range(1, keys + 1)))
    return table[n]


def _require_step(k: int) -> None:
    if k < 1:
        raise ValueError("the largest step must be at least 1")


def count_ladder_ways(n: int, k: int) -> int:
    """Count the ways to climb ``n`` rungs taking 1 to ``k`` at a time, by plain recursion."""
    _require_step(k)

    def ways(remaining: int) -> int:
        if remaining < 0:
            return 0
        if remaining == 0:
            return 1
        return sum(ways(remaining - step) for step in range(1, k + 1))

    return ways(n)


def count_ladder_ways_memo(n: int, k: int) -> int:
    """Count the ladder climbs with memoised recursion."""
    _require_step(k)

    @lru_cache(maxsize=None)
    def ways(remaining: int) -> int:
        if remaining < 0:
            return 0
        if remaining == 0:
            return 1
        return sum(ways(remaining - step) for step in range(1, k + 1))

    return ways(n)


def count_ladder_ways_window(n: int, k: int) -> int:
    """Count the ladder climbs keeping only the last ``k`` counts and their running sum."""
    _require_step(k)
    if n < 0:
        return 0
    window: deque[int] = deque([1], maxlen=k)
    total = 1
    for _ in range(n):
        ways = total
        if len(window) == k:
            total -= window[0]
        window.append(ways)
        total += ways
    return window[-1]


def count_ladder_ways_prefix(n: int, k: int) -> int:
    """Count the ladder climbs with a full table and a sliding sum over it."""
    _require_step(k)
    if n < 0:
        return 0
    ways = [1]
    running = 1
    for rung in range(1, n + 1):
        ways.append(running)
        running += ways[rung]
        if rung - k >= 0:
            running -= ways[rung - k]
    return ways[n]