"""Binary search tree nodes that know their parent, and in-order successors."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class ParentNode:
    """A search-tree node with a link back to its parent."""

    key: int
    left: ParentNode | None = field(default=None, repr=False)
    right: ParentNode | None = field(default=None, repr=False)
    parent: ParentNode | None = field(default=None, repr=False)

    def set_left(self, node: ParentNode) -> None:
        """Attach ``node`` as the left child."""
        self.left = node
        node.parent = self

    def set_right(self, node: ParentNode) -> None:
        """Attach ``node`` as the right child."""
        self.right = node
        node.parent = self


def find_inorder_successor(target: ParentNode | None) -> ParentNode | None:
    """Return the node after ``target`` in sorted order, or None."""
    if target is None:
        return None
    if target.right is not None:
        current = target.right
        while current.left is not None:
            current = current.left
        return current
    current = target.parent
    while current is not None and current.key <= target.key:
        current = current.parent
    return current