"""Plain-text rendering of dynamic-programming tables."""

from __future__ import annotations

from typing import Iterable


def format_1d_cache(cache: Iterable[int]) -> str:
    """Render a one-dimensional table on a single line after a ``Cache :`` label."""
    return " ".join(["Cache :", *map(str, cache)])


def format_2d_cache(cache: Iterable[Iterable[int]]) -> str:
    """Render a two-dimensional table as a ``Cache :`` line followed by one line per row."""
    rows = [" ".join(map(str, row)) for row in cache]
    return "\n".join(["Cache :", *rows])