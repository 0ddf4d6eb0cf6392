import pytest

from abbtrees.treeset import TreeSet


@pytest.mark.parametrize(
    "additions, expected_size",
    [
        ([], 0),
        ([(1,)], 1),
        ([(1, 2, 3)], 3),
        ([(1,), (1,)], 1),
        ([(1,), (2,)], 2),
    ],
)
def test_add_and_size(additions, expected_size):
    s = TreeSet()
    for args in additions:
        s.add(*args)
    assert len(s) == expected_size


def test_contains():
    s = TreeSet(1)
    assert 1 in s
    assert 2 not in s


def test_remove():
    s = TreeSet(1, 2)
    assert 1 in s
    assert len(s) == 2
    s.remove(1)
    assert 1 not in s
    assert len(s) == 1


def test_remove_non_existent():
    s = TreeSet(1)
    s.remove(2)
    assert len(s) == 1


@pytest.mark.parametrize(
    "elements, expected",
    [((), []), ((1, 2), [1, 2]), ((5, 3, 9, 1, 3), [1, 3, 5, 9])],
)
def test_values_are_ordered(elements, expected):
    assert TreeSet(*elements).values() == expected


def test_iteration_matches_values():
    assert list(TreeSet(4, 2, 6)) == [2, 4, 6]


@pytest.mark.parametrize("elements, expected", [((), "Set: {}"), ((1, 2), "Set: {1 2}")])
def test_str(elements, expected):
    assert str(TreeSet(*elements)) == expected