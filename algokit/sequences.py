"""Sequence problems: increasing subsequences, non-adjacent sums and minimum jumps."""

from __future__ import annotations

from typing import Mapping, Sequence


def _require_values(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("values must not be empty")


def max_increasing_subseq_top_down(values: Sequence[int]) -> tuple[int, list[int]]:
    """Return (length, table) of the longest increasing subsequence, recursively.

    Entry ``i`` of the table is the best length found among the first ``i + 1``
    values, where a value extends the best of any earlier prefix it exceeds
    the last value of.
    """
    _require_values(values)
    cache: dict[int, int] = {0: 1}

    def best(n: int) -> int:
        if n not in cache:
            cache[n] = max(
                best(idx) + (1 if values[n] > values[idx] else 0) for idx in range(n)
            )
        return cache[n]

    length = best(len(values) - 1)
    return length, [cache[i] for i in range(len(values))]


def max_increasing_subseq_bottom_up(values: Sequence[int]) -> tuple[int, list[int]]:
    """Return (length, table) of the longest increasing subsequence with a table."""
    _require_values(values)
    cache = [1]
    for i in range(1, len(values)):
        cache.append(
            max(
                cache[j] + (1 if values[i] > values[j] else 0) for j in range(i)
            )
        )
    return cache[-1], cache


def increasing_choices(values: Sequence[int], cache: Sequence[int]) -> list[int]:
    """Recover the values of the increasing subsequence from its table, in order."""
    _require_values(values)
    if len(cache) != len(values):
        raise ValueError("the table must have one entry per value")
    picked: list[int] = []
    i = len(values) - 1
    while i >= 0 and cache[i] > 1:
        if cache[i] - cache[i - 1] == 1:
            picked.append(values[i])
        i -= 1
    if picked:
        smaller = next(
            (values[j] for j in range(i, -1, -1) if values[j] < picked[-1]), None
        )
        if smaller is not None:
            picked.append(smaller)
    else:
        picked.append(values[-1])
    picked.reverse()
    return picked


def max_non_adjacent_sum_top_down(values: Sequence[int]) -> tuple[int, list[int]]:
    """Return (best sum, table) of values with no two neighbours taken, recursively.

    Entry ``k`` of the table is the best sum over the first ``k`` values; taking
    nothing is allowed, so the sum is never negative.
    """
    n = len(values)
    cache: dict[int, int] = {0: 0}
    if n >= 1:
        cache[1] = max(0, values[0])
    if n >= 2:
        cache[2] = max(0, values[0], values[1])

    def best(k: int) -> int:
        if k not in cache:
            cache[k] = max(values[k - 1] + best(k - 2), best(k - 1))
        return cache[k]

    total = best(n)
    return total, [cache[k] for k in range(n + 1)]


def max_non_adjacent_sum_bottom_up(values: Sequence[int]) -> tuple[int, list[int]]:
    """Return (best sum, table) of values with no two neighbours taken, with a table."""
    n = len(values)
    cache = [0]
    if n >= 1:
        cache.append(max(0, values[0]))
    if n >= 2:
        cache.append(max(0, values[0], values[1]))
    for k in range(3, n + 1):
        cache.append(max(values[k - 1] + cache[k - 2], cache[k - 1]))
    return cache[n], cache


def non_adjacent_choices(values: Sequence[int], cache: Sequence[int]) -> list[int]:
    """Recover the values taken for the best non-adjacent sum, in order."""
    if len(cache) != len(values) + 1:
        raise ValueError("the table must have one entry more than there are values")
    picked: list[int] = []
    i = len(values)
    while i > 0:
        if cache[i] > cache[i - 1]:
            picked.append(values[i - 1])
            i -= 2
        else:
            i -= 1
    picked.reverse()
    return picked


def _path(choice: Sequence[int] | Mapping[int, int], n: int) -> list[int]:
    position = 0
    path = [0]
    while position != n - 1:
        position += choice[position]
        path.append(position)
    return path


def _unreachable() -> ValueError:
    return ValueError("the last position cannot be reached")


def min_jumps_recursive(values: Sequence[int]) -> tuple[int, list[int]]:
    """Return (fewest jumps, indices visited) from the first to the last position.

    Each value is the longest jump allowed from its position.
    """
    _require_values(values)
    n = len(values)
    memo: dict[int, int | None] = {n - 1: 0}
    choice: dict[int, int] = {}

    def solve(i: int) -> int | None:
        if i in memo:
            return memo[i]
        best: int | None = None
        for step in range(1, min(values[i], n - 1 - i) + 1):
            result = solve(i + step)
            if result is not None and (best is None or result < best):
                best = result
                choice[i] = step
        memo[i] = None if best is None else best + 1
        return memo[i]

    jumps = solve(0)
    if jumps is None:
        raise _unreachable()
    return jumps, _path(choice, n)


def min_jumps_iterative(values: Sequence[int]) -> tuple[int, list[int]]:
    """Return (fewest jumps, indices visited), filling the table from the end."""
    _require_values(values)
    n = len(values)
    cache: list[int | None] = [None] * n
    choice = [0] * n
    cache[n - 1] = 0
    for i in range(n - 2, -1, -1):
        best: int | None = None
        for step in range(1, min(values[i], n - 1 - i) + 1):
            result = cache[i + step]
            if result is not None and (best is None or result < best):
                best = result
                choice[i] = step
        cache[i] = None if best is None else best + 1
    jumps = cache[0]
    if jumps is None:
        raise _unreachable()
    return jumps, _path(choice, n)