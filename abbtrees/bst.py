"""Binary search tree without duplicate keys."""

from __future__ import annotations

from typing import Any, Optional

from abbtrees.binarynode import BinaryNode


class EmptyTreeError(LookupError):
    """Raised when a query needs at least one element but the tree is empty."""

    def __init__(self, message: str = "árbol vacío") -> None:
        super().__init__(message)


class BinarySearchTree:
    """An unbalanced binary search tree; inserting an existing key does nothing."""

    def __init__(self) -> None:
        self.root: Optional[BinaryNode] = None

    def insert(self, key: Any) -> None:
        """Add ``key`` unless it is already present."""
        if self.root is None:
            self.root = BinaryNode(key)
            return
        node = self.root
        while True:
            if key < node.data:
                if node.left is None:
                    node.left = BinaryNode(key)
                    return
                node = node.left
            elif key > node.data:
                if node.right is None:
                    node.right = BinaryNode(key)
                    return
                node = node.right
            else:
                return

    def search(self, key: Any) -> bool:
        """Tell whether ``key`` is in the tree."""
        node = self.root
        while node is not None:
            if key < node.data:
                node = node.left
            elif key > node.data:
                node = node.right
            else:
                return True
        return False

    def find_min(self) -> Any:
        """Return the smallest key."""
        if self.root is None:
            raise EmptyTreeError()
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def find_max(self) -> Any:
        """Return the largest key."""
        if self.root is None:
            raise EmptyTreeError()
        node = self.root
        while node.right is not None:
            node = node.right
        return node.data

    def remove(self, key: Any) -> None:
        """Delete ``key`` if present; a node with two children takes its in-order predecessor."""
        self.root = self._remove(self.root, key)

    def _remove(self, node: Optional[BinaryNode], key: Any) -> Optional[BinaryNode]:
        if node is None:
            return None
        if key > node.data:
            node.right = self._remove(node.right, key)
        elif key < node.data:
            node.left = self._remove(node.left, key)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            predecessor = node.left
            while predecessor.right is not None:
                predecessor = predecessor.right
            node.data = predecessor.data
            node.left = self._remove(node.left, predecessor.data)
        return node

    def clear(self) -> None:
        """Drop every node."""
        self.root = None

    def is_empty(self) -> bool:
        """Tell whether the tree has no nodes."""
        return self.size() == 0

    def size(self) -> int:
        """Number of keys in the tree."""
        return 0 if self.root is None else self.root.size()