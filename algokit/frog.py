"""Frog jumping across stones, paying the height difference of every jump."""

from __future__ import annotations

from typing import Mapping, Sequence


def _require_stones(heights: Sequence[int]) -> None:
    if not heights:
        raise ValueError("there must be at least one stone")


def _trace(choice: Sequence[int] | Mapping[int, int], last: int) -> list[int]:
    path = [last]
    while path[-1] != 0:
        path.append(choice[path[-1]])
    path.reverse()
    return path


def frog_min_cost_top_down(heights: Sequence[int]) -> tuple[int, list[int]]:
    """Return (cheapest cost, stone indices visited) jumping 1 or 2 stones, recursively.

    On equal costs the two-stone jump is preferred.
    """
    _require_stones(heights)
    n = len(heights)
    cost: dict[int, int] = {0: 0}
    choice: dict[int, int] = {}
    if n > 1:
        cost[1] = abs(heights[1] - heights[0])
        choice[1] = 0

    def solve(i: int) -> int:
        if i in cost:
            return cost[i]
        one = abs(heights[i] - heights[i - 1]) + solve(i - 1)
        two = abs(heights[i] - heights[i - 2]) + solve(i - 2)
        if one < two:
            cost[i], choice[i] = one, i - 1
        else:
            cost[i], choice[i] = two, i - 2
        return cost[i]

    return solve(n - 1), _trace(choice, n - 1)


def frog_min_cost_bottom_up(heights: Sequence[int]) -> tuple[int, list[int]]:
    """Return (cheapest cost, stone indices visited) jumping 1 or 2 stones, with a table."""
    _require_stones(heights)
    n = len(heights)
    cost = [0] * n
    choice = [0] * n
    if n > 1:
        cost[1] = abs(heights[1] - heights[0])
    for i in range(2, n):
        one = abs(heights[i] - heights[i - 1]) + cost[i - 1]
        two = abs(heights[i] - heights[i - 2]) + cost[i - 2]
        if one < two:
            cost[i], choice[i] = one, i - 1
        else:
            cost[i], choice[i] = two, i - 2
    return cost[n - 1], _trace(choice, n - 1)


def _require_reach(k: int) -> None:
    if k < 1:
        raise ValueError("the frog must be able to jump at least one stone")


def frog_min_cost_k_top_down(heights: Sequence[int], k: int) -> int:
    """Return the cheapest cost to the last stone jumping up to ``k`` stones, recursively."""
    _require_stones(heights)
    _require_reach(k)
    cost: dict[int, int] = {0: 0}

    def solve(i: int) -> int:
        if i not in cost:
            cost[i] = min(
                abs(heights[i] - heights[i - step]) + solve(i - step)
                for step in range(1, min(k, i) + 1)
            )
        return cost[i]

    return solve(len(heights) - 1)


def frog_min_cost_k_bottom_up(heights: Sequence[int], k: int) -> int:
    """Return the cheapest cost to the last stone jumping up to ``k`` stones, with a table."""
    _require_stones(heights)
    _require_reach(k)
    cost = [0]
    for i in range(1, len(heights)):
        cost.append(
            min(
                abs(heights[i] - heights[i - step]) + cost[i - step]
                for step in range(1, min(k, i) + 1)
            )
        )
    return cost[-1]