import pytest

from algokit.strings import (
    count_subsequences_bottom_up,
    count_subsequences_top_down,
    edit_distance_bottom_up,
    edit_distance_top_down,
    is_palindrome,
    lcs_bottom_up,
    lcs_top_down,
    min_palindrome_partition_bottom_up,
    min_palindrome_partition_top_down,
)

PAIRS = [
    ("ABCDCE", "ABC"),
    ("ABCD", "ABEDG"),
    ("food", "money"),
    ("aaaa", "aa"),
    ("", "abc"),
    ("abc", ""),
    ("", ""),
    ("kitten", "sitting"),
]


def _is_subsequence(small, big):
    it = iter(big)
    return all(ch in it for ch in small)


def test_count_subsequences_source_example():
    assert count_subsequences_top_down("ABCDCE", "ABC") == 2
    assert count_subsequences_bottom_up("ABCDCE", "ABC") == 2


@pytest.mark.parametrize("text, pattern", PAIRS)
def test_count_subsequences_methods_agree(text, pattern):
    assert count_subsequences_top_down(text, pattern) == count_subsequences_bottom_up(
        text, pattern
    )


@pytest.mark.parametrize("text", ["", "A", "ABCDCE"])
def test_count_subsequences_empty_pattern_and_self(text):
    assert count_subsequences_top_down(text, "") == 1
    assert count_subsequences_bottom_up(text, text) == 1


def test_count_subsequences_pattern_longer_than_text():
    assert count_subsequences_top_down("AB", "ABC") == 0
    assert count_subsequences_bottom_up("AB", "ABC") == 0


def test_lcs_source_example():
    length, solution = lcs_top_down("ABCD", "ABEDG")
    assert length == 3
    assert solution == "ABD"
    assert lcs_bottom_up("ABCD", "ABEDG") == length


@pytest.mark.parametrize("a, b", PAIRS)
def test_lcs_solution_is_common_subsequence(a, b):
    length, solution = lcs_top_down(a, b)
    assert len(solution) == length
    assert _is_subsequence(solution, a)
    assert _is_subsequence(solution, b)
    assert lcs_bottom_up(a, b) == length


@pytest.mark.parametrize("text", ["", "x", "ABCD"])
def test_lcs_with_itself(text):
    assert lcs_top_down(text, text) == (len(text), text)


@pytest.mark.parametrize("a, b", PAIRS)
def test_edit_distance_methods_agree(a, b):
    assert edit_distance_top_down(a, b) == edit_distance_bottom_up(a, b)


@pytest.mark.parametrize("text", ["", "food", "money"])
def test_edit_distance_identical_is_zero(text):
    assert edit_distance_top_down(text, text) == 0
    assert edit_distance_bottom_up(text, text) == 0


@pytest.mark.parametrize("a, b", [("abc", "abd"), ("food", "good"), ("abcd", "dcba")])
def test_edit_distance_equal_length_counts_mismatches(a, b):
    mismatches = sum(x != y for x, y in zip(a, b))
    assert edit_distance_top_down(a, b) == mismatches
    assert edit_distance_bottom_up(a, b) == mismatches


def test_edit_distance_from_empty():
    assert edit_distance_top_down("", "ab") == 3
    assert edit_distance_bottom_up("ab", "") == 3


@pytest.mark.parametrize(
    "text, start, end, expected",
    [("racecar", 0, 6, True), ("abcba", 1, 3, True), ("abcde", 0, 1, False), ("a", 0, 0, True)],
)
def test_is_palindrome(text, start, end, expected):
    assert is_palindrome(text, start, end) is expected


@pytest.mark.parametrize("text", ["abcde", "xyz", "q"])
def test_partition_of_distinct_letters(text):
    assert min_palindrome_partition_top_down(text) == len(text) - 1
    assert min_palindrome_partition_bottom_up(text) == len(text) - 1


@pytest.mark.parametrize("text", ["racecar", "aa", "abba"])
def test_partition_of_palindrome_is_zero(text):
    assert min_palindrome_partition_top_down(text) == 0
    assert min_palindrome_partition_bottom_up(text) == 0


@pytest.mark.parametrize("text", ["aab", "ababbbabbababa", "banana", "noonabbad"])
def test_partition_methods_agree(text):
    assert min_palindrome_partition_top_down(text) == min_palindrome_partition_bottom_up(text)


def test_partition_rejects_empty_text():
    with pytest.raises(ValueError):
        min_palindrome_partition_top_down("")
    with pytest.raises(ValueError):
        min_palindrome_partition_bottom_up("")