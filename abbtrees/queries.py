"""Queries over binary trees: second largest key, in-order predecessor, BST check."""

from __future__ import annotations

from typing import Any, Optional

from abbtrees.binarynode import BinaryNode
from abbtrees.binarytree import BinaryTree
from abbtrees.bst import BinarySearchTree


class NoValuesError(LookupError):
    """Raised when a tree lacks the values a query needs."""

    def __init__(self, message: str = "No hay valores") -> None:
        super().__init__(message)


class NoPredecessorError(LookupError):
    """Raised when no key smaller than the requested one exists."""

    def __init__(self, message: str = "No hay predecesores") -> None:
        super().__init__(message)


def _right_spine(node: BinaryNode) -> list[BinaryNode]:
    """Nodes from ``node`` down its chain of right children."""
    spine = [node]
    while spine[-1].right is not None:
        spine.append(spine[-1].right)
    return spine


def second_largest_element(bst: BinarySearchTree) -> Any:
    """Return the second largest key; raise NoValuesError if there are fewer than two."""
    if bst.root is None:
        raise NoValuesError()
    spine = _right_spine(bst.root)
    largest = spine[-1]
    if largest.left is not None:
        return _right_spine(largest.left)[-1].data
    if len(spine) < 2:
        raise NoValuesError()
    return spine[-2].data


def predecessor_in_order(bst: BinarySearchTree, key: Any) -> Any:
    """Return the largest key strictly smaller than ``key``."""
    node = bst.root
    if node is None:
        raise NoPredecessorError()
    best: Optional[BinaryNode] = None
    while node is not None:
        if node.data < key:
            best, node = node, node.right
        else:
            node = node.left
    if best is None:
        raise NoPredecessorError("No hay predecesores menores que el mínimo")
    return best.data


_UNBOUNDED = object()


def is_bst(tree: BinaryTree) -> bool:
    """Tell whether every node's key lies strictly between its ancestors' bounds."""
    pending = [(tree.root, _UNBOUNDED, _UNBOUNDED)] if tree.root is not None else []
    while pending:
        node, low, high = pending.pop()
        if low is not _UNBOUNDED and not node.data > low:
            return False
        if high is not _UNBOUNDED and not node.data < high:
            return False
        for child, bounds in ((node.left, (low, node.data)), (node.right, (node.data, high))):
            if child is not None:
                pending.append((child, *bounds))
    return True