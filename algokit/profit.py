"""Profit maximisation: rod cutting, the 0/1 knapsack and selling wines over the years."""

from __future__ import annotations

from typing import Sequence


def _require_length(length: int) -> None:
    if length < 0:
        raise ValueError("the rod length must not be negative")


def rod_cutting_top_down(
    prices: Sequence[int], length: int
) -> tuple[int, list[tuple[int, int]]]:
    """Return (best profit, cuts as (length, price)) for a rod, recursively.

    ``prices[i]`` is the price of a piece of length ``i``; index 0 is unused.
    The profit is -1, with no cuts, when the rod cannot be cut up.
    """
    _require_length(length)
    memo: dict[int, int | None] = {0: 0}
    choice: dict[int, int] = {}

    def solve(n: int) -> int | None:
        if n < 0:
            return None
        if n in memo:
            return memo[n]
        best: int | None = None
        for piece in range(1, len(prices)):
            rest = solve(n - piece)
            if rest is not None and (best is None or prices[piece] + rest > best):
                best = prices[piece] + rest
                choice[n] = piece
        memo[n] = best
        return best

    profit = solve(length)
    if profit is None:
        return -1, []
    cuts: list[tuple[int, int]] = []
    remaining = length
    while remaining > 0:
        piece = choice[remaining]
        cuts.append((piece, prices[piece]))
        remaining -= piece
    return profit, cuts


def rod_cutting_bottom_up(prices: Sequence[int], length: int) -> int:
    """Return the best profit for a rod with a table, or -1 if it cannot be cut up."""
    _require_length(length)
    table: list[int | None] = [0]
    for n in range(1, length + 1):
        best: int | None = None
        for piece in range(1, len(prices)):
            if n - piece < 0:
                continue
            rest = table[n - piece]
            if rest is not None and (best is None or prices[piece] + rest > best):
                best = prices[piece] + rest
        table.append(best)
    result = table[length]
    return -1 if result is None else result


def _check_knapsack(prices: Sequence[int], weights: Sequence[int], capacity: int) -> None:
    if len(prices) != len(weights):
        raise ValueError("every item needs both a price and a weight")
    if capacity < 0:
        raise ValueError("the capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")


def knapsack_top_down(
    prices: Sequence[int], weights: Sequence[int], capacity: int
) -> tuple[int, list[int]]:
    """Return (best profit, indices of items taken) for the 0/1 knapsack, recursively."""
    _check_knapsack(prices, weights, capacity)
    memo: dict[tuple[int, int], int] = {}

    def best(n: int, w: int) -> int:
        if n == 0 or w == 0:
            return 0
        key = (n, w)
        if key not in memo:
            value = best(n - 1, w)
            if w - weights[n - 1] >= 0:
                value = max(prices[n - 1] + best(n - 1, w - weights[n - 1]), value)
            memo[key] = value
        return memo[key]

    profit = best(len(prices), capacity)
    taken: list[int] = []
    n, w = len(prices), capacity
    while n > 0 and w > 0:
        if best(n, w) != best(n - 1, w):
            taken.append(n - 1)
            w -= weights[n - 1]
        n -= 1
    taken.reverse()
    return profit, taken


def knapsack_bottom_up(prices: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the best profit for the 0/1 knapsack with a table."""
    _check_knapsack(prices, weights, capacity)
    previous = [0] * (capacity + 1)
    for price, weight in zip(prices, weights):
        current = [0] * (capacity + 1)
        for w in range(1, capacity + 1):
            current[w] = previous[w]
            if w - weight >= 0:
                current[w] = max(price + previous[w - weight], current[w])
        previous = current
    return previous[capacity]


def wines_top_down(prices: Sequence[int]) -> tuple[int, list[int]]:
    """Return (best profit, prices in the order sold) selling one bottle a year.

    Each year a bottle from either end of the row is sold for its price times
    the year number, counting from 1. On equal outcomes the right end is sold.
    """
    n = len(prices)
    memo: dict[tuple[int, int], int] = {}

    def best(s: int, e: int) -> int:
        if s > e:
            return 0
        if (s, e) not in memo:
            year = n - (e - s)
            memo[(s, e)] = max(
                year * prices[s] + best(s + 1, e),
                year * prices[e] + best(s, e - 1),
            )
        return memo[(s, e)]

    profit = best(0, n - 1)
    sold: list[int] = []
    s, e = 0, n - 1
    while s <= e:
        year = n - (e - s)
        if year * prices[s] + best(s + 1, e) > year * prices[e] + best(s, e - 1):
            sold.append(prices[s])
            s += 1
        else:
            sold.append(prices[e])
            e -= 1
    return profit, sold


def wines_bottom_up(prices: Sequence[int]) -> int:
    """Return the best profit selling one bottle a year from either end, with a table."""
    n = len(prices)
    if n == 0:
        return 0
    cache = [[0] * n for _ in range(n)]
    for s in range(n):
        cache[s][s] = n * prices[s]
    for s in range(n - 2, -1, -1):
        for e in range(s + 1, n):
            year = n - (e - s)
            cache[s][e] = max(
                year * prices[s] + cache[s + 1][e],
                year * prices[e] + cache[s][e - 1],
            )
    return cache[0][n - 1]