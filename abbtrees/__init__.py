"""Binary trees, binary search trees, a tree-backed set, traversal iterators and tree queries."""

__version__ = "0.1.0"

__all__ = ["binarynode", "binarytree", "bst", "iterators", "queries", "stack", "treeset"]