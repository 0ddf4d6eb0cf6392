"""Lazy traversals of a binary search tree in in-, pre-, post- and level order."""

from __future__ import annotations

from collections import deque
from typing import Any, Optional

from abbtrees.binarynode import BinaryNode
from abbtrees.bst import BinarySearchTree
from abbtrees.stack import Stack


class InOrderIterator:
    """Yields keys in ascending order."""

    def __init__(self, bst: BinarySearchTree) -> None:
        self._pending: Stack = Stack()
        self._push_left_path(bst.root)

    def _push_left_path(self, node: Optional[BinaryNode]) -> None:
        while node is not None:
            self._pending.push(node)
            node = node.left

    def has_next(self) -> bool:
        """Tell whether another key remains."""
        return not self._pending.is_empty()

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        node = self._pending.pop()
        self._push_left_path(node.right)
        return node.data

    def __iter__(self) -> InOrderIterator:
        return self


class PreOrderIterator:
    """Yields each node before its left and then right subtree."""

    def __init__(self, bst: BinarySearchTree) -> None:
        self._pending: Stack = Stack()
        if bst.root is not None:
            self._pending.push(bst.root)

    def has_next(self) -> bool:
        """Tell whether another key remains."""
        return not self._pending.is_empty()

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        node = self._pending.pop()
        for child in (node.right, node.left):
            if child is not None:
                self._pending.push(child)
        return node.data

    def __iter__(self) -> PreOrderIterator:
        return self


class PostOrderIterator:
    """Yields each node after its left and then right subtree."""

    def __init__(self, bst: BinarySearchTree) -> None:
        self._pending: Stack = Stack()
        self._descend(bst.root)

    def _descend(self, node: Optional[BinaryNode]) -> None:
        while node is not None:
            self._pending.push(node)
            node = node.left if node.left is not None else node.right

    def has_next(self) -> bool:
        """Tell whether another key remains."""
        return not self._pending.is_empty()

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        node = self._pending.pop()
        if not self._pending.is_empty():
            parent = self._pending.top()
            if parent.left is node and parent.right is not None:
                self._descend(parent.right)
        return node.data

    def __iter__(self) -> PostOrderIterator:
        return self


class LevelOrderIterator:
    """Yields keys level by level, left to right."""

    def __init__(self, bst: BinarySearchTree) -> None:
        self._pending: deque = deque([bst.root] if bst.root is not None else [])

    def has_next(self) -> bool:
        """Tell whether another key remains."""
        return len(self._pending) > 0

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        node = self._pending.popleft()
        self._pending.extend(child for child in (node.left, node.right) if child is not None)
        return node.data

    def __iter__(self) -> LevelOrderIterator:
        return self