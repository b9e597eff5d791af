"""Array exercises: products, activity selection, sub-array sums and sorting."""

from __future__ import annotations

from itertools import accumulate, pairwise
from operator import mul
from typing import Iterable, Sequence


def product_array(values: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element.

    Runs in linear time without division, so zeros are handled correctly.
    """
    if not values:
        raise ValueError("product_array needs at least one value")
    prefix = [1, *accumulate(values[:-1], mul)]
    suffix = [*accumulate(reversed(values[1:]), mul)][::-1] + [1]
    return [before * after for before, after in zip(prefix, suffix)]


def _overlaps(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return not (a[0] >= b[1] or a[1] <= b[0])


def count_activities(activities: Iterable[tuple[int, int]]) -> int:
    """Count the most non-overlapping (start, end) activities one person can do.

    Activities that merely touch (one ends when the next starts) do not overlap.
    """
    by_end = sorted(activities, key=lambda activity: activity[1])
    if not by_end:
        return 0
    picked = by_end[0]
    count = 1
    for activity in by_end[1:]:
        if not _overlaps(activity, picked):
            picked = activity
            count += 1
    return count


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a contiguous run, where the empty run counts as 0."""
    if not values:
        raise ValueError("max_subarray_sum needs at least one value")
    best = None
    running = 0
    for value in values:
        running = max(running + value, 0)
        best = running if best is None else max(best, running)
    return best


def min_difference(a: Iterable[int], b: Iterable[int]) -> tuple[int, int]:
    """Return the pair (x from a, y from b) with the smallest absolute difference."""
    first = sorted(a)
    second = sorted(b)
    if not first or not second:
        raise ValueError("min_difference needs two non-empty sequences")
    i = j = 0
    best: tuple[int, int] | None = None
    best_diff = None
    while i < len(first) and j < len(second):
        diff = first[i] - second[j]
        if best_diff is None or abs(diff) < best_diff:
            best_diff = abs(diff)
            best = (first[i], second[j])
        if best_diff == 0:
            break
        if diff < 0:
            i += 1
        else:
            j += 1
    return best


def _sorted_positions(values: Sequence[int]) -> dict[int, int]:
    positions = {value: index for index, value in enumerate(sorted(values))}
    if len(positions) != len(values):
        raise ValueError("values must be distinct")
    return positions


def min_swaps(values: Sequence[int]) -> int:
    """Return the fewest swaps that sort distinct values, by swapping into place."""
    target = _sorted_positions(values)
    items = list(values)
    swaps = 0
    for index in range(len(items)):
        while (destination := target[items[index]]) != index:
            items[index], items[destination] = items[destination], items[index]
            swaps += 1
    return swaps


def min_swaps_cycles(values: Sequence[int]) -> int:
    """Return the fewest swaps that sort distinct values, by counting permutation cycles."""
    target = _sorted_positions(values)
    seen: set[int] = set()
    swaps = 0
    for start in range(len(values)):
        length = 0
        index = start
        while index not in seen:
            seen.add(index)
            index = target[values[index]]
            length += 1
        if length:
            swaps += length - 1
    return swaps


def subarray_sort(values: Sequence[int]) -> tuple[int, int]:
    """Return the (start, end) indices of the smallest window whose sorting sorts the list.

    An already sorted list gives the whole range (0, len - 1).
    """
    n = len(values)
    if n == 0:
        raise ValueError("subarray_sort needs at least one value")
    smallest: int | None = None
    largest: int | None = None
    for index, value in enumerate(values):
        if index < n - 1 and value > values[index + 1]:
            largest = value if largest is None else max(largest, value)
        elif index > 0 and value < values[index - 1]:
            smallest = value if smallest is None else min(smallest, value)
    if smallest is None or largest is None:
        return (0, n - 1)
    pairs = list(pairwise(values))
    start = max(
        (index + 1 for index, (x, y) in enumerate(pairs) if x < smallest < y),
        default=0,
    )
    end = min(
        (index for index, (x, y) in enumerate(pairs) if x < largest < y),
        default=n - 1,
    )
    return (start, end)