"""General binary tree built by joining subtrees."""

from __future__ import annotations

from typing import Any, Optional

from abbtrees.binarynode import BinaryNode


class BinaryTree:
    """A binary tree whose root starts as a single node holding ``data``."""

    def __init__(self, data: Any) -> None:
        self.root: Optional[BinaryNode] = BinaryNode(data)

    def _attach(self, tree: BinaryTree, side: str) -> None:
        if self.root is None:
            self.root = tree.root
        else:
            setattr(self.root, side, tree.root)

    def insert_left(self, tree: BinaryTree) -> None:
        """Attach ``tree`` as the left subtree of the root, or as the root if empty."""
        self._attach(tree, "left")

    def insert_right(self, tree: BinaryTree) -> None:
        """Attach ``tree`` as the right subtree of the root, or as the root if empty."""
        self._attach(tree, "right")

    def clear(self) -> None:
        """Drop every node."""
        self.root = None

    def is_empty(self) -> bool:
        """Tell whether the tree has no nodes."""
        return self.root is None

    def size(self) -> int:
        """Number of nodes in the tree."""
        return 0 if self.root is None else self.root.size()

    def height(self) -> int:
        """Distance from the root to the deepest node; -1 for an empty tree."""
        return -1 if self.root is None else self.root.height()