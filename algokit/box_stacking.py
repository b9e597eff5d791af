"""Tallest stack of boxes where each box must be strictly smaller than the one below."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

Box = tuple[int, int, int]


def can_stack(smaller: Sequence[int], larger: Sequence[int]) -> bool:
    """Tell whether ``smaller`` is strictly smaller than ``larger`` in width, depth and height."""
    return smaller[0] < larger[0] and smaller[1] < larger[1] and smaller[2] < larger[2]


def stack_choices(
    boxes: Sequence[Box], choice: Sequence[int], index: int, height: int
) -> list[Box]:
    """Return the boxes of the stack whose base is ``boxes[index]``, base first."""
    result: list[Box] = []
    remaining = height
    current = index
    while remaining > 0:
        box = boxes[current]
        result.append(box)
        remaining -= box[2]
        if choice[current] == current:
            break
        current = choice[current]
    return result


@dataclass(frozen=True)
class StackingResult:
    """The tallest stack found: its height, the base index and the tables behind it."""

    height: int
    index: int
    boxes: tuple[Box, ...]
    choice: tuple[int, ...]

    @property
    def stack(self) -> list[Box]:
        """The boxes of the tallest stack, base first."""
        return stack_choices(self.boxes, self.choice, self.index, self.height)


def _sorted_boxes(boxes: Iterable[Sequence[int]]) -> list[Box]:
    ordered: list[Box] = []
    for box in boxes:
        if len(box) != 3:
            raise ValueError("every box needs exactly three dimensions")
        ordered.append((box[0], box[1], box[2]))
    if not ordered:
        raise ValueError("there must be at least one box")
    ordered.sort(key=lambda box: box[2])
    return ordered


def max_height_top_down(boxes: Iterable[Sequence[int]]) -> StackingResult:
    """Find the tallest stack with memoised recursion over the boxes sorted by height."""
    ordered = _sorted_boxes(boxes)
    heights: dict[int, int] = {}
    choice = [-1] * len(ordered)

    def best(idx: int) -> int:
        if idx in heights:
            return heights[idx]
        below: int | None = None
        for j in range(idx):
            if can_stack(ordered[j], ordered[idx]):
                candidate = best(j)
                if below is None or candidate > below:
                    below = candidate
                    choice[idx] = j
        if below is None:
            choice[idx] = idx
            heights[idx] = ordered[idx][2]
        else:
            heights[idx] = ordered[idx][2] + below
        return heights[idx]

    top_height: int | None = None
    top_index = -1
    for index in range(len(ordered)):
        height = best(index)
        if top_height is None or height > top_height:
            top_height, top_index = height, index
    return StackingResult(top_height, top_index, tuple(ordered), tuple(choice))


def max_height_bottom_up(boxes: Iterable[Sequence[int]]) -> StackingResult:
    """Find the tallest stack by filling the table from the lowest box upwards."""
    ordered = _sorted_boxes(boxes)
    n = len(ordered)
    heights = [0] * n
    choice = [-1] * n
    heights[0] = ordered[0][2]
    choice[0] = 0
    if n == 1:
        return StackingResult(heights[0], 0, tuple(ordered), tuple(choice))

    top_height: int | None = None
    top_index = -1
    for i in range(1, n):
        below: int | None = None
        for j in range(i):
            if can_stack(ordered[j], ordered[i]) and (below is None or heights[j] > below):
                below = heights[j]
                choice[i] = j
        if below is None:
            heights[i] = ordered[i][2]
            choice[i] = i
        else:
            heights[i] = ordered[i][2] + below
        if top_height is None or heights[i] > top_height:
            top_height, top_index = heights[i], i
    return StackingResult(top_height, top_index, tuple(ordered), tuple(choice))