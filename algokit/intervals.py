"""Interval dynamic programming: a two-player end-picking game and mixing colours."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence

PLAYER_ONE = "O"
PLAYER_TWO = "H"


def game_winner(text: str) -> tuple[str, int]:
    """Return (winner, score) of the letter-picking game on ``text``.

    Players ``O`` (moving first) and ``H`` take turns removing a character
    equal to their own letter from either end; a player who cannot move loses.
    """
    if not text:
        raise ValueError("text must not be empty")
    n = len(text)

    @lru_cache(maxsize=None)
    def play(s: int, e: int) -> tuple[str, int]:
        remaining = e - s + 1
        current = PLAYER_ONE if (n - remaining) % 2 == 0 else PLAYER_TWO
        other = PLAYER_TWO if current == PLAYER_ONE else PLAYER_ONE

        if s == e:
            return (current, 1) if text[s] == current else (other, 2)

        left_ok = text[s] == current
        right_ok = text[e] == current
        if left_ok and right_ok:
            left = play(s + 1, e)
            right = play(s, e - 1)
            if left[0] == right[0]:
                if left[0] == current:
                    return (current, max(left[1], right[1]))
                return (other, min(left[1], right[1]))
            return left if left[1] > right[1] else right
        if left_ok:
            return play(s + 1, e)
        if right_ok:
            return play(s, e - 1)
        return (other, 1 + remaining)

    return play(0, n - 1)


def _require_colors(colors: Sequence[int]) -> None:
    if not colors:
        raise ValueError("there must be at least one colour")


def _combine(left: tuple[int, int], right: tuple[int, int]) -> tuple[int, int]:
    return (left[0] + right[0]) % 100, left[1] + right[1] + left[0] * right[0]


def min_smoke_top_down(colors: Sequence[int]) -> tuple[int, int]:
    """Return (final colour, least smoke) mixing neighbouring colours, recursively.

    Mixing ``a`` and ``b`` gives colour ``(a + b) % 100`` and ``a * b`` smoke.
    """
    _require_colors(colors)

    @lru_cache(maxsize=None)
    def best(s: int, e: int) -> tuple[int, int]:
        if s == e:
            return (colors[s], 0)
        result: tuple[int, int] | None = None
        for p in range(s, e):
            candidate = _combine(best(s, p), best(p + 1, e))
            if result is None or candidate[1] < result[1]:
                result = candidate
        return result

    return best(0, len(colors) - 1)


def min_smoke_bottom_up(colors: Sequence[int]) -> tuple[int, int]:
    """Return (final colour, least smoke) mixing neighbouring colours, with a table."""
    _require_colors(colors)
    n = len(colors)
    cache: list[list[tuple[int, int]]] = [[(0, 0)] * n for _ in range(n)]
    for s in range(n):
        cache[s][s] = (colors[s], 0)
    for s in range(n - 2, -1, -1):
        for e in range(s + 1, n):
            result: tuple[int, int] | None = None
            for p in range(s, e):
                candidate = _combine(cache[s][p], cache[p + 1][e])
                if result is None or candidate[1] < result[1]:
                    result = candidate
            cache[s][e] = result
    return cache[0][n - 1]