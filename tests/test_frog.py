import pytest

from algokit.frog import (
    frog_min_cost_bottom_up,
    frog_min_cost_k_bottom_up,
    frog_min_cost_k_top_down,
    frog_min_cost_top_down,
)

HEIGHTS = [30, 10, 60, 10, 60, 50]
STONES = [40, 10, 20, 70, 80, 10, 20, 70, 80, 60]


def test_sample_cost():
    assert frog_min_cost_top_down(HEIGHTS)[0] == 40
    assert frog_min_cost_bottom_up(HEIGHTS)[0] == 40


@pytest.mark.parametrize("heights", [HEIGHTS, STONES, [10, 30, 40, 20], [5, 5, 5, 5, 5]])
def test_path_is_valid_and_matches_cost(heights):
    for cost, path in (frog_min_cost_top_down(heights), frog_min_cost_bottom_up(heights)):
        assert path[0] == 0
        assert path[-1] == len(heights) - 1
        assert all(b - a in (1, 2) for a, b in zip(path, path[1:]))
        assert sum(abs(heights[b] - heights[a]) for a, b in zip(path, path[1:])) == cost


@pytest.mark.parametrize("heights", [HEIGHTS, STONES, [10, 30, 40, 20], [7, 1]])
def test_two_step_approaches_agree(heights):
    assert frog_min_cost_top_down(heights) == frog_min_cost_bottom_up(heights)


def test_single_stone():
    assert frog_min_cost_top_down([42]) == (0, [0])
    assert frog_min_cost_bottom_up([42]) == (0, [0])


def test_k_sample_cost():
    assert frog_min_cost_k_top_down(STONES, 5) == 40
    assert frog_min_cost_k_bottom_up(STONES, 5) == 40


@pytest.mark.parametrize("heights", [HEIGHTS, STONES, [10, 30, 40, 20]])
def test_k_two_matches_two_step(heights):
    expected = frog_min_cost_bottom_up(heights)[0]
    assert frog_min_cost_k_top_down(heights, 2) == expected
    assert frog_min_cost_k_bottom_up(heights, 2) == expected


@pytest.mark.parametrize("k", [1, 2, 3, 4, 9])
def test_k_approaches_agree(k):
    assert frog_min_cost_k_top_down(STONES, k) == frog_min_cost_k_bottom_up(STONES, k)


def test_k_one_visits_every_stone():
    expected = sum(abs(b - a) for a, b in zip(STONES, STONES[1:]))
    assert frog_min_cost_k_top_down(STONES, 1) == expected
    assert frog_min_cost_k_bottom_up(STONES, 1) == expected


def test_longer_reach_never_costs_more():
    reaches = range(1, len(STONES) + 1)
    top_costs = [frog_min_cost_k_top_down(STONES, k) for k in reaches]
    bottom_costs = [frog_min_cost_k_bottom_up(STONES, k) for k in reaches]
    assert top_costs == sorted(top_costs, reverse=True)
    assert bottom_costs == sorted(bottom_costs, reverse=True)


def test_empty_rejected():
    with pytest.raises(ValueError):
        frog_min_cost_top_down([])
    with pytest.raises(ValueError):
        frog_min_cost_bottom_up([])


def test_k_must_be_positive():
    with pytest.raises(ValueError):
        frog_min_cost_k_top_down(STONES, 0)
    with pytest.raises(ValueError):
        frog_min_cost_k_bottom_up(STONES, 0)


def test_k_empty_rejected():
    with pytest.raises(ValueError):
        frog_min_cost_k_top_down([], 3)
    with pytest.raises(ValueError):
        frog_min_cost_k_bottom_up([], 3)