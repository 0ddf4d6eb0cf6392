# abbtrees

Small binary tree structures in plain Python, with no third-party dependencies.

## Contents

- `abbtrees.stack`
  - `Stack`: a last-in, first-out stack with `push`, `pop`, `top`, `is_empty` and `len()`.
  - `EmptyStackError`: raised by `pop` and `top` on an empty stack (message `"pila vacía"`). It is an `IndexError`.
- `abbtrees.binarynode`
  - `BinaryNode`: a dataclass with `data`, `left` and `right`. `size()` counts the nodes of the subtree; `height()` is the number of edges on the longest path down to a leaf (0 for a single node).
- `abbtrees.binarytree`
  - `BinaryTree(data)`: a general binary tree whose `root` starts as one node holding `data`. `insert_left(tree)` and `insert_right(tree)` attach another tree's root as the left or right child of the root, or make it the root when this tree is empty. Also `clear()`, `is_empty()`, `size()` and `height()` (`-1` for an empty tree).
- `abbtrees.bst`
  - `BinarySearchTree()`: an unbalanced binary search tree with `insert`, `search`, `remove`, `find_min`, `find_max`, `clear`, `is_empty` and `size`. Inserting a key that is already present does nothing; removing a missing key does nothing. When a node with two children is removed, its in-order predecessor takes its place.
  - `EmptyTreeError`: raised by `find_min` and `find_max` on an empty tree (message `"árbol vacío"`). It is a `LookupError`.
- `abbtrees.treeset`
  - `TreeSet(*elements)`: a set of unique elements kept in ascending order. `add(*elements)`, `remove(element)`, `in`, `len()`, iteration in ascending order, `values()` (a sorted list) and `str()` in the form `Set: {1 2 3}`.
- `abbtrees.iterators`
  - `InOrderIterator`, `PreOrderIterator`, `PostOrderIterator` and `LevelOrderIterator`: lazy traversals of a `BinarySearchTree`. Each is a Python iterator (raising `StopIteration` when done) and also offers `has_next()`.
- `abbtrees.queries`
  - `second_largest_element(bst)`: the second largest key; raises `NoValuesError` when the tree has fewer than two keys.
  - `predecessor_in_order(bst, key)`: the largest key strictly smaller than `key`; raises `NoPredecessorError` with `"No hay predecesores"` on an empty tree and with `"No hay predecesores menores que el mínimo"` when no smaller key exists.
  - `is_bst(tree)`: whether a `BinaryTree` satisfies the search-tree property (an empty tree does).

## Installation

```
pip install .
```

## Usage

```python
from abbtrees.bst import BinarySearchTree
from abbtrees.iterators import InOrderIterator, LevelOrderIterator
from abbtrees.queries import predecessor_in_order, second_largest_element
from abbtrees.treeset import TreeSet

bst = BinarySearchTree()
for value in (15, 10, 20, 8, 12, 16, 25):
    bst.insert(value)

list(InOrderIterator(bst))     # [8, 10, 12, 15, 16, 20, 25]
list(LevelOrderIterator(bst))  # [15, 10, 20, 8, 12, 16, 25]
second_largest_element(bst)    # 20
predecessor_in_order(bst, 15)  # 12

s = TreeSet(2, 1)
s.add(3, 1)
len(s)      # 3
3 in s      # True
str(s)      # "Set: {1 2 3}"
```

Building a general tree and checking the search-tree property:

```python
from abbtrees.binarytree import BinaryTree
from abbtrees.queries import is_bst

root = BinaryTree(4)
root.insert_left(BinaryTree(2))
root.insert_right(BinaryTree(5))
root.size()    # 3
root.height()  # 1
is_bst(root)   # True
```

## What it does not do

The search tree is not self-balancing, so sorted insertions produce a degenerate, list-shaped tree. The package is a library only: it has no command-line tool and does not persist trees.

## Running the tests

```
pip install ".[test]"
pytest
```