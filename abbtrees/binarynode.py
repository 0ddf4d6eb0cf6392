"""Node of a binary tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class BinaryNode:
    """A node holding a value and optional left and right children."""

    data: Any
    left: Optional[BinaryNode] = None
    right: Optional[BinaryNode] = None

    def size(self) -> int:
        """Number of nodes in the subtree rooted here."""
        count = 0
        pending = [self]
        while pending:
            node = pending.pop()
            count += 1
            pending.extend(child for child in (node.left, node.right) if child is not None)
        return count

    def height(self) -> int:
        """Number of edges on the longest path from this node down to a leaf."""
        height = -1
        level = [self]
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height