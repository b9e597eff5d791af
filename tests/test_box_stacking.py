import pytest

from algokit.box_stacking import (
    can_stack,
    max_height_bottom_up,
    max_height_top_down,
    stack_choices,
)

BOXES = [(2, 1, 2), (3, 2, 3), (2, 2, 8), (2, 3, 4), (2, 2, 1), (4, 4, 5)]


def test_can_stack_requires_every_dimension_smaller():
    assert can_stack((1, 1, 1), (2, 2, 2)) is True
    assert can_stack((2, 1, 1), (2, 2, 2)) is False
    assert can_stack((1, 1, 3), (2, 2, 2)) is False


def test_sample_height():
    assert max_height_top_down(BOXES).height == 10
    assert max_height_bottom_up(BOXES).height == 10


def test_both_approaches_agree():
    top = max_height_top_down(BOXES)
    bottom = max_height_bottom_up(BOXES)
    assert top.height == bottom.height
    assert top.stack == bottom.stack


def test_stack_is_consistent():
    for result in (max_height_top_down(BOXES), max_height_bottom_up(BOXES)):
        stack = result.stack
        assert sum(box[2] for box in stack) == result.height
        for lower, upper in zip(stack, stack[1:]):
            assert can_stack(upper, lower)
        assert all(box in BOXES for box in stack)


def test_boxes_are_sorted_by_height():
    for result in (max_height_top_down(BOXES), max_height_bottom_up(BOXES)):
        heights = [box[2] for box in result.boxes]
        assert heights == sorted(heights)
        assert sorted(result.boxes) == sorted(BOXES)


def test_single_box():
    for result in (max_height_top_down([(3, 4, 7)]), max_height_bottom_up([(3, 4, 7)])):
        assert result.height == 7
        assert result.stack == [(3, 4, 7)]


def test_identical_boxes_cannot_stack():
    boxes = [(2, 2, 5), (2, 2, 5)]
    for result in (max_height_top_down(boxes), max_height_bottom_up(boxes)):
        assert result.height == 5
        assert len(result.stack) == 1


def test_stack_choices_follows_choice_links():
    boxes = [(1, 1, 1), (2, 2, 2), (3, 3, 3)]
    choice = [0, 0, 1]
    assert stack_choices(boxes, choice, 2, 6) == [(3, 3, 3), (2, 2, 2), (1, 1, 1)]


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        max_height_top_down([])
    with pytest.raises(ValueError):
        max_height_bottom_up([])


def test_wrong_dimension_count_rejected():
    with pytest.raises(ValueError):
        max_height_top_down([(1, 2)])
    with pytest.raises(ValueError):
        max_height_bottom_up([(1, 2)])