"""Wildcard matching where ``?`` stands for one character and ``*`` for any run."""

from __future__ import annotations

from functools import lru_cache


def _only_stars(pattern: str, start: int) -> bool:
    return all(ch == "*" for ch in pattern[start:])


def match_naive(text: str, pattern: str) -> bool:
    """Match by trying every run length for each ``*``.

    A ``*`` here may absorb nothing, or any run that leaves at least one
    character of the text after it; it never absorbs the text's last character.
    """
    slen, plen = len(text), len(pattern)

    @lru_cache(maxsize=None)
    def matches(i: int, j: int) -> bool:
        if i == slen and j == plen:
            return True
        if j == plen:
            return False
        if i == slen:
            return _only_stars(pattern, j)
        if pattern[j] == "*":
            if matches(i, j + 1):
                return True
            return any(matches(i + k, j + 1) for k in range(1, slen - i))
        if pattern[j] == "?" or pattern[j] == text[i]:
            return matches(i + 1, j + 1)
        return False

    return matches(0, 0)


def match_top_down(text: str, pattern: str) -> bool:
    """Match with memoised recursion, letting ``*`` absorb one character at a time."""
    slen, plen = len(text), len(pattern)

    @lru_cache(maxsize=None)
    def matches(i: int, j: int) -> bool:
        if i == slen and j == plen:
            return True
        if j == plen:
            return False
        if i == slen:
            return _only_stars(pattern, j)
        if pattern[j] == "*":
            return matches(i, j + 1) or matches(i + 1, j)
        if pattern[j] == "?" or pattern[j] == text[i]:
            return matches(i + 1, j + 1)
        return False

    return matches(0, 0)


def match_bottom_up(text: str, pattern: str) -> bool:
    """Match by filling a table from the ends of the text and the pattern."""
    slen, plen = len(text), len(pattern)
    cache = [[False] * (plen + 1) for _ in range(slen + 1)]
    cache[slen][plen] = True
    for j in range(plen):
        cache[slen][j] = _only_stars(pattern, j)
    for i in range(slen - 1, -1, -1):
        for j in range(plen - 1, -1, -1):
            if pattern[j] == "*":
                cache[i][j] = cache[i][j + 1] or cache[i + 1][j]
            elif pattern[j] == "?" or pattern[j] == text[i]:
                cache[i][j] = cache[i + 1][j + 1]
    return cache[0][0]