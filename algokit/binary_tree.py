"""General binary trees: level-order building, views and mirror comparison."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")

_EMPTY = -1


@dataclass(eq=False)
class TreeNode(Generic[T]):
    """A node of a binary tree."""

    data: T
    left: TreeNode[T] | None = None
    right: TreeNode[T] | None = None


def build_tree_level(values: Iterable[int]) -> TreeNode[int]:
    """Build a tree from values in level order, where -1 marks a missing child.

    The first value is always the root; each node then takes a left and a
    right value in turn.
    """
    stream = iter(values)

    def take() -> int:
        try:
            return next(stream)
        except StopIteration:
            raise ValueError("ran out of values while building the tree") from None

    root = TreeNode(take())
    pending: deque[TreeNode[int]] = deque([root])
    while pending:
        current = pending.popleft()
        left = take()
        if left != _EMPTY:
            current.left = TreeNode(left)
            pending.append(current.left)
        right = take()
        if right != _EMPTY:
            current.right = TreeNode(right)
            pending.append(current.right)
    return root


def level_order(root: TreeNode[T] | None) -> list[list[T]]:
    """Return the values level by level, left to right."""
    result: list[list[T]] = []
    frontier = [root] if root is not None else []
    while frontier:
        result.append([node.data for node in frontier])
        frontier = [
            child
            for node in frontier
            for child in (node.left, node.right)
            if child is not None
        ]
    return result


def left_view(root: TreeNode[T] | None) -> list[T]:
    """Return the first value seen on each level, using a breadth-first walk."""
    return [level[0] for level in level_order(root)]


def left_view_recursive(root: TreeNode[T] | None) -> list[T]:
    """Return the first value seen on each level, using a depth-first walk."""
    first: dict[int, T] = {}

    def visit(node: TreeNode[T] | None, depth: int) -> None:
        if node is None:
            return
        first.setdefault(depth, node.data)
        visit(node.left, depth + 1)
        visit(node.right, depth + 1)

    visit(root, 0)
    return [first[depth] for depth in sorted(first)]


def mirror_equal(root1: TreeNode[T] | None, root2: TreeNode[T] | None) -> bool:
    """Tell whether the trees match when any node's children may be swapped."""
    if root1 is None or root2 is None:
        return root1 is None and root2 is None
    if root1.data != root2.data:
        return False
    return (
        mirror_equal(root1.left, root2.right) and mirror_equal(root1.right, root2.left)
    ) or (
        mirror_equal(root1.left, root2.left) and mirror_equal(root1.right, root2.right)
    )