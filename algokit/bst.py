"""Binary search trees: building, searching, flattening and path queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False)
class Node:
    """A node of a binary search tree; equal values go to the left."""

    data: int
    left: Node | None = None
    right: Node | None = None


def insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` and return the (possibly new) root."""
    node = Node(value)
    if root is None:
        return node
    current = root
    while True:
        if value <= current.data:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def search(root: Node | None, key: int) -> bool:
    """Tell whether ``key`` is stored in the tree."""
    current = root
    while current is not None:
        if key == current.data:
            return True
        current = current.left if key < current.data else current.right
    return False


def inorder(root: Node | None) -> list[int]:
    """Return the values of the tree in sorted (in-order) order."""
    result: list[int] = []
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.data)
        current = current.right
    return result


def create_bst(values: Iterable[int]) -> Node | None:
    """Build a tree by inserting ``values`` in order."""
    root: Node | None = None
    for value in values:
        root = insert(root, value)
    return root


def levels(root: Node | None) -> list[list[int]]:
    """Return the values level by level, left to right."""
    result: list[list[int]] = []
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


def find_closest(root: Node | None, target: int) -> tuple[int, int]:
    """Return (value, distance) of the stored value nearest ``target``.

    On a tie the node nearer the root wins.
    """
    if root is None:
        raise ValueError("the tree is empty")
    own = (root.data, abs(target - root.data))
    if own[1] == 0:
        return own
    child = root.left if target < root.data else root.right
    if child is None:
        return own
    other = find_closest(child, target)
    return other if other[1] < own[1] else own


def find_closest_iterative(root: Node | None, target: int) -> int:
    """Return the stored value nearest ``target``, walking down without recursion."""
    if root is None:
        raise ValueError("the tree is empty")
    best = root.data
    best_diff = abs(target - root.data)
    current: Node | None = root
    while current is not None:
        diff = abs(target - current.data)
        if diff < best_diff:
            best, best_diff = current.data, diff
        if target == current.data:
            return current.data
        current = current.right if target > current.data else current.left
    return best


def _rightmost(node: Node | None) -> Node | None:
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def flatten(root: Node | None) -> Node | None:
    """Relink the tree into a sorted list along ``right`` pointers; return its head."""
    if root is None:
        return None
    head = flatten(root.left)
    predecessor = _rightmost(root.left)
    if predecessor is not None:
        predecessor.right = root
    root.right = flatten(root.right)
    return head if head is not None else root


def flatten_optimized(root: Node | None) -> tuple[Node | None, Node | None]:
    """Flatten like :func:`flatten`, returning (head, tail) to avoid rescanning."""
    if root is None:
        return None, None
    left_head, left_tail = flatten_optimized(root.left)
    if left_tail is not None:
        left_tail.right = root
    right_head, right_tail = flatten_optimized(root.right)
    root.right = right_head
    head = left_head if left_head is not None else root
    tail = right_tail if right_tail is not None else root
    return head, tail


def iter_flattened(head: Node | None) -> Iterator[int]:
    """Yield the values of a flattened tree by following ``right`` pointers."""
    current = head
    while current is not None:
        yield current.data
        current = current.right


def inorder_successor(root: Node | None, key: int) -> Node | None:
    """Return the node that follows ``key`` in sorted order, or None."""
    successor: Node | None = None
    current = root
    while current is not None:
        if current.data == key:
            if current.right is not None:
                node = current.right
                while node.left is not None:
                    node = node.left
                return node
            return successor
        if current.data < key:
            current = current.right
        else:
            successor = current
            current = current.left
    return None


def min_height_bst(values: Iterable[int]) -> Node | None:
    """Build a tree of minimum height from ``values``."""
    ordered = sorted(values)

    def build(start: int, end: int) -> Node | None:
        if start > end:
            return None
        mid = (start + end) // 2
        return Node(ordered[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(ordered) - 1)


def _check(node: Node | None) -> tuple[bool, int | None, int | None]:
    if node is None:
        return True, None, None
    left_ok, left_min, left_max = _check(node.left)
    right_ok, right_min, right_max = _check(node.right)
    ok = (
        left_ok
        and right_ok
        and (left_max is None or left_max <= node.data)
        and (right_min is None or right_min > node.data)
    )
    low = min(v for v in (node.data, left_min, right_min) if v is not None)
    high = max(v for v in (node.data, left_max, right_max) if v is not None)
    return ok, low, high


def is_bst(root: Node | None) -> bool:
    """Tell whether the tree keeps the search order (equal values on the left)."""
    return _check(root)[0]


def lca(root: Node | None, a: int, b: int) -> Node | None:
    """Return the lowest common ancestor of values ``a`` and ``b``."""
    current = root
    while current is not None:
        if current.data < a and current.data < b:
            current = current.right
        elif current.data > a and current.data > b:
            current = current.left
        else:
            return current
    return None


def find_distance(root: Node | None, key: int) -> int:
    """Return the number of edges from ``root`` down towards ``key``."""
    steps = 0
    current = root
    while current is not None and current.data != key:
        current = current.left if key < current.data else current.right
        steps += 1
    return steps


def shortest_distance(root: Node | None, a: int, b: int) -> int:
    """Return the number of edges on the path between values ``a`` and ``b``."""
    ancestor = lca(root, a, b)
    return find_distance(ancestor, a) + find_distance(ancestor, b)