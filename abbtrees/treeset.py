"""Ordered set of unique elements backed by a binary search tree."""

from __future__ import annotations

from typing import Any, Iterator

from abbtrees.bst import BinarySearchTree
from abbtrees.iterators import InOrderIterator


class TreeSet:
    """A set that keeps its elements in ascending order."""

    def __init__(self, *args: Any) -> None:
        self._tree = BinarySearchTree()
        self.add(*args)

    def add(self, *args: Any) -> None:
        """Add every given element; elements already present are ignored."""
        for element in args:
            self._tree.insert(element)

    def __len__(self) -> int:
        return self._tree.size()

    def __contains__(self, element: Any) -> bool:
        return self._tree.search(element)

    def remove(self, element: Any) -> None:
        """Remove ``element`` if present."""
        self._tree.remove(element)

    def values(self) -> list[Any]:
        """Elements in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        return InOrderIterator(self._tree)

    def __str__(self) -> str:
        return "Set: {" + " ".join(str(value) for value in self) + "}"

    def __repr__(self) -> str:
        return f"TreeSet({', '.join(repr(value) for value in self)})"