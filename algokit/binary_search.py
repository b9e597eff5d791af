"""Binary-search exercises: placements, counts, rotated arrays, roots and partitions."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from typing import Iterable, Sequence


def can_place(nests: Sequence[int], birds: int, dist: int) -> bool:
    """Tell whether ``birds`` fit in sorted ``nests`` at least ``dist`` apart.

    The first bird always goes in the first nest.
    """
    if not nests:
        raise ValueError("there must be at least one nest")
    remaining = birds - 1
    last = nests[0]
    for nest in nests[1:]:
        if remaining <= 0:
            break
        if nest - last >= dist:
            remaining -= 1
            last = nest
    return remaining == 0


def max_minimum_distance(nests: Iterable[int], birds: int) -> int:
    """Return the largest minimum gap at which all birds can be placed, or -1."""
    ordered = sorted(nests)
    if not ordered:
        raise ValueError("there must be at least one nest")
    low, high = 0, ordered[-1] - ordered[0]
    best = -1
    while low <= high:
        mid = (low + high) // 2
        if can_place(ordered, birds, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def frequency_count(values: Sequence[int], key: int) -> int:
    """Count occurrences of ``key`` in sorted ``values``."""
    return bisect_right(values, key) - bisect_left(values, key)


def min_pair(a: Iterable[int], b: Iterable[int]) -> tuple[int, int]:
    """Return (x from a, y from b) with the smallest gap, searching a sorted ``b``.

    Ties between a smaller and a larger neighbour go to the larger one; ties
    between elements of ``a`` go to the earliest.
    """
    candidates = sorted(b)
    if not candidates:
        raise ValueError("b must not be empty")
    best: tuple[int, int] | None = None
    best_diff = None
    for x in a:
        index = bisect_left(candidates, x)
        if index < len(candidates) and candidates[index] == x:
            nearest = x
        else:
            lower = candidates[index - 1] if index > 0 else None
            upper = candidates[index] if index < len(candidates) else None
            if lower is not None and (upper is None or x - lower < upper - x):
                nearest = lower
            else:
                nearest = upper
        diff = abs(x - nearest)
        if best_diff is None or diff < best_diff:
            best_diff = diff
            best = (x, nearest)
    if best is None:
        raise ValueError("a must not be empty")
    return best


def find_pivot(values: Sequence[int]) -> int:
    """Return the index of the interior local minimum of a rotated sorted list, or -1."""
    n = len(values)
    low, high = 0, n - 1
    while low <= high:
        mid = (low + high) // 2
        if 0 < mid < n - 1 and values[mid] < values[mid - 1] and values[mid] < values[mid + 1]:
            return mid
        if values[mid] < values[low]:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def rotate_search_with_pivot(values: Sequence[int], key: int) -> int:
    """Find ``key`` in a rotated sorted list by locating the pivot first; -1 if absent."""
    pivot = find_pivot(values)
    if pivot == -1:
        return rotate_search(values, key)
    if key == values[pivot]:
        return pivot
    if key <= values[-1]:
        low, high = pivot + 1, len(values) - 1
    else:
        low, high = 0, pivot - 1
    index = bisect_left(values, key, low, high + 1)
    if index <= high and values[index] == key:
        return index
    return -1


def rotate_search(values: Sequence[int], key: int) -> int:
    """Find ``key`` in a rotated sorted list in one pass; -1 if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= key <= values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] <= values[high]:
            if values[mid] <= key <= values[high]:
                low = mid + 1
            else:
                high = mid - 1
        else:
            break
    return -1


def square_root(n: float, precision: int) -> float:
    """Return the square root of ``n`` truncated to ``precision`` decimal places."""
    if n < 0:
        raise ValueError("cannot take the square root of a negative number")
    if precision < 0:
        raise ValueError("precision must not be negative")
    root = math.isqrt(int(n))
    scale = 1
    for _ in range(precision):
        scale *= 10
        root *= 10
        while (root + 1) ** 2 <= n * scale * scale:
            root += 1
    return root / scale


def _can_split(values: Sequence[int], groups: int, target: int) -> bool:
    remaining = groups
    current = 0
    for value in values:
        if remaining <= 0:
            break
        current += value
        if current >= target:
            remaining -= 1
            current = 0
    return remaining == 0


def get_coins(values: Sequence[int], k: int) -> int:
    """Return the largest amount the poorest of ``k`` contiguous groups can get, or 0."""
    if not values:
        raise ValueError("values must not be empty")
    low, high = values[0], sum(values)
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if _can_split(values, k, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def _fits(books: Sequence[int], students: int, limit: int) -> bool:
    remaining = students
    current = 0
    for pages in books:
        current += pages
        if current > limit:
            remaining -= 1
            current = pages
    return remaining > 0


def min_pages(books: Sequence[int], students: int) -> int:
    """Return the smallest page limit at which contiguous books go to ``students`` readers."""
    if not books:
        raise ValueError("books must not be empty")
    if students < 1:
        raise ValueError("there must be at least one student")
    low, high = max(books), sum(books)
    best = high
    while low <= high:
        mid = (low + high) // 2
        if _fits(books, students, mid):
            best = min(best, mid)
            high = mid - 1
        else:
            low = mid + 1
    return best