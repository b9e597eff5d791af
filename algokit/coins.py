"""Coin change: fewest coins for an amount, and the number of ways to make it."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable


def _validated(coins: Iterable[int]) -> tuple[int, ...]:
    values = tuple(coins)
    if any(coin <= 0 for coin in values):
        raise ValueError("coin values must be positive")
    return values


def min_coins(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount`` by plain recursion, or -1."""
    values = _validated(coins)

    def solve(remaining: int) -> int:
        if remaining == 0:
            return 0
        if remaining < 0:
            return -1
        results = [r for coin in values if (r := solve(remaining - coin)) != -1]
        return 1 + min(results) if results else -1

    return solve(amount)


def min_coins_top_down(coins: Iterable[int], amount: int) -> tuple[int, list[int]]:
    """Return (fewest coins, coins used) with memoised recursion; (-1, []) if impossible."""
    values = _validated(coins)
    memo: dict[int, int] = {}
    picked: dict[int, int] = {}

    def solve(remaining: int) -> int:
        if remaining == 0:
            return 0
        if remaining < 0:
            return -1
        if remaining in memo:
            return memo[remaining]
        best: int | None = None
        for coin in values:
            result = solve(remaining - coin)
            if result != -1 and (best is None or result < best):
                best = result
                picked[remaining] = coin
        memo[remaining] = -1 if best is None else best + 1
        return memo[remaining]

    count = solve(amount)
    used: list[int] = []
    if count > 0:
        remaining = amount
        while remaining > 0:
            coin = picked[remaining]
            used.append(coin)
            remaining -= coin
    return count, used


def min_coins_bottom_up(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount`` by filling a table, or -1."""
    values = _validated(coins)
    if amount < 0:
        return -1
    table = [0]
    for target in range(1, amount + 1):
        options = [
            table[target - coin]
            for coin in values
            if target - coin >= 0 and table[target - coin] != -1
        ]
        table.append(1 + min(options) if options else -1)
    return table[amount]


def min_coins_bfs(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount`` by breadth-first search, or -1."""
    values = _validated(coins)
    if amount == 0:
        return 0
    if amount < 0:
        return -1
    seen = {amount}
    frontier = [amount]
    steps = 0
    while frontier:
        steps += 1
        following: list[int] = []
        for current in frontier:
            for coin in values:
                rest = current - coin
                if rest == 0:
                    return steps
                if rest > 0 and rest not in seen:
                    seen.add(rest)
                    following.append(rest)
        frontier = following
    return -1


def count_ways_top_down(coins: Iterable[int], amount: int) -> int:
    """Count the coin combinations (order ignored) summing to ``amount``, recursively."""
    values = _validated(coins)
    if amount < 0:
        return 0

    @lru_cache(maxsize=None)
    def ways(n: int, remaining: int) -> int:
        if remaining == 0:
            return 1
        if n == 0:
            return 0
        coin = values[n - 1]
        total = ways(n - 1, remaining)
        if remaining - coin >= 0:
            total += ways(n, remaining - coin)
        return total

    return ways(len(values), amount)


def count_ways_bottom_up(coins: Iterable[int], amount: int) -> int:
    """Count the coin combinations (order ignored) summing to ``amount`` with a table."""
    values = _validated(coins)
    if amount < 0:
        return 0
    table = [1] + [0] * amount
    for coin in values:
        for target in range(coin, amount + 1):
            table[target] += table[target - coin]
    return table[amount]