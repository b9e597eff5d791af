"""String dynamic programming: subsequence counts, LCS, edit distance and palindromes."""

from __future__ import annotations

from functools import lru_cache


def count_subsequences_top_down(text: str, pattern: str) -> int:
    """Count the ways ``pattern`` occurs as a subsequence of ``text``, recursively."""

    @lru_cache(maxsize=None)
    def count(i: int, j: int) -> int:
        if j == len(pattern):
            return 1
        if i == len(text):
            return 0
        total = count(i + 1, j)
        if text[i] == pattern[j]:
            total += count(i + 1, j + 1)
        return total

    return count(0, 0)


def count_subsequences_bottom_up(text: str, pattern: str) -> int:
    """Count the ways ``pattern`` occurs as a subsequence of ``text`` with a table."""
    n1, n2 = len(text), len(pattern)
    cache = [[0] * (n2 + 1) for _ in range(n1 + 1)]
    for row in cache:
        row[n2] = 1
    for i in range(n1 - 1, -1, -1):
        for j in range(n2 - 1, -1, -1):
            cache[i][j] = cache[i + 1][j]
            if text[i] == pattern[j]:
                cache[i][j] += cache[i + 1][j + 1]
    return cache[0][0]


def lcs_top_down(a: str, b: str) -> tuple[int, str]:
    """Return (length, subsequence) of the longest common subsequence, recursively.

    When both ways of skipping a character tie, the character of ``b`` is skipped.
    """

    @lru_cache(maxsize=None)
    def best(i: int, j: int) -> int:
        if i == len(a) or j == len(b):
            return 0
        if a[i] == b[j]:
            return 1 + best(i + 1, j + 1)
        return max(best(i + 1, j), best(i, j + 1))

    length = best(0, 0)
    chars: list[str] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] == b[j]:
            chars.append(a[i])
            i += 1
            j += 1
        elif best(i + 1, j) > best(i, j + 1):
            i += 1
        else:
            j += 1
    return length, "".join(chars)


def lcs_bottom_up(a: str, b: str) -> int:
    """Return the length of the longest common subsequence with a table."""
    m, n = len(a), len(b)
    cache = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m - 1, -1, -1):
        for j in range(n - 1, -1, -1):
            if a[i] == b[j]:
                cache[i][j] = 1 + cache[i + 1][j + 1]
            else:
                cache[i][j] = max(cache[i + 1][j], cache[i][j + 1])
    return cache[0][0]


def edit_distance_top_down(a: str, b: str) -> int:
    """Return the edit distance from ``a`` to ``b`` under a restricted set of moves.

    Where ``a`` has fewer characters left, a character is inserted or replaced;
    where it has more, one is deleted or replaced; where both have as many, one
    is replaced. Running out of one string costs one more than the number of
    characters left in the other.
    """
    la, lb = len(a), len(b)

    @lru_cache(maxsize=None)
    def dist(i: int, j: int) -> int:
        if i == la and j == lb:
            return 0
        if i == la:
            return lb - j + 1
        if j == lb:
            return la - i + 1
        if a[i] == b[j]:
            return dist(i + 1, j + 1)
        left_a, left_b = la - i, lb - j
        if left_a < left_b:
            return 1 + min(dist(i, j + 1), dist(i + 1, j + 1))
        if left_a > left_b:
            return 1 + min(dist(i + 1, j), dist(i + 1, j + 1))
        return 1 + dist(i + 1, j + 1)

    return dist(0, 0)


def edit_distance_bottom_up(a: str, b: str) -> int:
    """Return the same restricted edit distance as the top-down version, with a table."""
    la, lb = len(a), len(b)
    cache = [[0] * (lb + 1) for _ in range(la + 1)]
    for j in range(lb):
        cache[la][j] = lb - j + 1
    for i in range(la):
        cache[i][lb] = la - i + 1
    cache[la][lb] = 0
    for i in range(la - 1, -1, -1):
        for j in range(lb - 1, -1, -1):
            left_a, left_b = la - i, lb - j
            if a[i] == b[j]:
                cache[i][j] = cache[i + 1][j + 1]
            elif left_a < left_b:
                cache[i][j] = 1 + min(cache[i][j + 1], cache[i + 1][j + 1])
            elif left_a > left_b:
                cache[i][j] = 1 + min(cache[i + 1][j], cache[i + 1][j + 1])
            else:
                cache[i][j] = 1 + cache[i + 1][j + 1]
    return cache[0][0]


def is_palindrome(text: str, start: int, end: int) -> bool:
    """Tell whether ``text[start..end]`` (both ends included) reads the same backwards."""
    if start >= end:
        return True
    segment = text[start : end + 1]
    return segment == segment[::-1]


def _require_text(text: str) -> None:
    if not text:
        raise ValueError("text must not be empty")


def min_palindrome_partition_top_down(text: str) -> int:
    """Return the fewest cuts that split ``text`` into palindromes, recursively."""
    _require_text(text)

    @lru_cache(maxsize=None)
    def cuts(s: int, e: int) -> int:
        if is_palindrome(text, s, e):
            return 0
        return min(cuts(s, k) + cuts(k + 1, e) + 1 for k in range(s, e))

    return cuts(0, len(text) - 1)


def min_palindrome_partition_bottom_up(text: str) -> int:
    """Return the fewest cuts that split ``text`` into palindromes, with a table."""
    _require_text(text)
    n = len(text)
    cache = [[0] * n for _ in range(n)]
    for s in range(n - 2, -1, -1):
        for e in range(s + 1, n):
            if not is_palindrome(text, s, e):
                cache[s][e] = min(
                    cache[s][k] + cache[k + 1][e] + 1 for k in range(s, e)
                )
    return cache[0][n - 1]