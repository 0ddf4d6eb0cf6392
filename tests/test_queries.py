import pytest

from abbtrees.binarytree import BinaryTree
from abbtrees.bst import BinarySearchTree
from abbtrees.queries import (
    NoPredecessorError,
    NoValuesError,
    is_bst,
    predecessor_in_order,
    second_largest_element,
)


def _sample_bst():
    bst = BinarySearchTree()
    for value in (15, 10, 20, 8, 12, 16, 25):
        bst.insert(value)
    return bst


def test_second_largest_element():
    assert second_largest_element(_sample_bst()) == 20


def test_second_largest_element_empty():
    with pytest.raises(NoValuesError, match="No hay valores"):
        second_largest_element(BinarySearchTree())


def test_second_largest_element_single():
    bst = BinarySearchTree()
    bst.insert(7)
    with pytest.raises(NoValuesError):
        second_largest_element(bst)


def test_second_largest_element_max_has_left_subtree():
    bst = BinarySearchTree()
    for value in (10, 30, 20, 25):
        bst.insert(value)
    assert second_largest_element(bst) == 25


@pytest.mark.parametrize(
    "key, expected",
    [(10, 8), (12, 10), (15, 12), (16, 15), (20, 16), (25, 20)],
)
def test_predecessor_in_order(key, expected):
    assert predecessor_in_order(_sample_bst(), key) == expected


def test_predecessor_of_minimum():
    with pytest.raises(NoPredecessorError) as info:
        predecessor_in_order(_sample_bst(), 8)
    assert str(info.value) == "No hay predecesores menores que el mínimo"


def test_predecessor_empty_tree():
    with pytest.raises(NoPredecessorError) as info:
        predecessor_in_order(BinarySearchTree(), 16)
    assert str(info.value) == "No hay predecesores"


def test_predecessor_single_larger_element():
    bst = BinarySearchTree()
    bst.insert(100)
    with pytest.raises(NoPredecessorError) as info:
        predecessor_in_order(bst, 16)
    assert str(info.value) == "No hay predecesores menores que el mínimo"


def _build(values):
    return {value: BinaryTree(value) for value in values}


def test_is_not_bst():
    t = _build((1, 3, 2, 5, 4, 6, 7, 8))
    t[2].insert_left(t[1])
    t[2].insert_right(t[3])
    t[4].insert_left(t[2])
    t[4].insert_right(t[5])
    t[6].insert_right(t[7])
    t[6].insert_left(t[8])
    t[5].insert_right(t[6])
    assert is_bst(t[4]) is False


def _right_chain_tree(left_leaf, deepest):
    t1 = BinaryTree(left_leaf)
    t3 = BinaryTree(3)
    t2 = BinaryTree(2)
    t15 = BinaryTree(15)
    t4 = BinaryTree(4)
    t17 = BinaryTree(17)
    t18 = BinaryTree(deepest)
    t2.insert_left(t1)
    t2.insert_right(t3)
    t4.insert_left(t2)
    t4.insert_right(t15)
    t15.insert_right(t17)
    t17.insert_right(t18)
    return t4


def test_is_bst():
    assert is_bst(_right_chain_tree(1, 18)) is True


def test_empty_is_bst():
    tree = BinaryTree(1)
    tree.clear()
    assert is_bst(tree) is True


def test_single_node_is_bst():
    assert is_bst(BinaryTree(1)) is True


def test_wrong_min_is_not_bst():
    assert is_bst(_right_chain_tree(14, 18)) is False


def test_wrong_max_is_not_bst():
    assert is_bst(_right_chain_tree(1, -18)) is False