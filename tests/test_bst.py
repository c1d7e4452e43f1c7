import pytest
from hypothesis import given, strategies as st

from dsalgo.bst import BinarySearchTree

keys = st.lists(st.integers(min_value=-50, max_value=50), max_size=40)
modes = st.booleans()


def test_sorted_insertions_example():
    tree = BinarySearchTree(range(1, 8))
    assert list(tree) == [1, 2, 3, 4, 5, 6, 7]
    assert list(reversed(tree)) == [7, 6, 5, 4, 3, 2, 1]
    assert tree.median() == 4
    tree.invert()
    assert list(tree) == [7, 6, 5, 4, 3, 2, 1]


def test_median_of_even_count():
    assert BinarySearchTree([4, 1, 3, 2]).median() == 3


def test_find_after_delete_example():
    tree = BinarySearchTree(range(1, 8))
    assert 7 in tree
    tree.delete(3)
    assert 3 not in tree
    assert list(tree) == [1, 2, 4, 5, 6, 7]


@given(keys, modes)
def test_iteration_is_sorted(values, dup_right):
    tree = BinarySearchTree(values, duplicates_right=dup_right)
    assert list(tree) == sorted(values)
    assert list(reversed(tree)) == sorted(values, reverse=True)
    assert len(tree) == len(values)


@given(keys, modes, st.integers(min_value=-60, max_value=60))
def test_contains(values, dup_right, probe):
    tree = BinarySearchTree(values, duplicates_right=dup_right)
    assert (probe in tree) == (probe in values)


@given(keys.filter(bool), modes)
def test_min_max_median(values, dup_right):
    tree = BinarySearchTree(values, duplicates_right=dup_right)
    ordered = sorted(values)
    assert tree.min() == ordered[0]
    assert tree.max() == ordered[-1]
    assert tree.median() == ordered[len(ordered) // 2]


@pytest.mark.parametrize("method", ["min", "max", "median"])
def test_empty_tree_raises(method):
    with pytest.raises(ValueError):
        getattr(BinarySearchTree(), method)()


@given(keys, modes, st.randoms(use_true_random=False))
def test_delete_everything(values, dup_right, rnd):
    tree = BinarySearchTree(values, duplicates_right=dup_right)
    remaining = list(values)
    order = list(values)
    rnd.shuffle(order)
    for value in order:
        tree.delete(value)
        remaining.remove(value)
        assert list(tree) == sorted(remaining)
        assert len(tree) == len(remaining)
    assert list(tree) == []


def test_delete_missing_raises():
    tree = BinarySearchTree([5, 3, 8])
    with pytest.raises(KeyError):
        tree.delete(4)
    with pytest.raises(KeyError):
        BinarySearchTree().delete(1)
    assert list(tree) == [3, 5, 8]


@given(keys, modes)
def test_invert_reverses_and_keeps_search(values, dup_right):
    tree = BinarySearchTree(values, duplicates_right=dup_right)
    tree.invert()
    assert list(tree) == sorted(values, reverse=True)
    for value in values:
        assert value in tree
    if values:
        assert tree.min() == min(values)
        assert tree.max() == max(values)


@given(keys, keys, modes)
def test_inverted_tree_stays_consistent(values, extra, dup_right):
    tree = BinarySearchTree(values, duplicates_right=dup_right)
    tree.invert()
    for value in extra:
        tree.insert(value)
    combined = values + extra
    assert list(tree) == sorted(combined, reverse=True)
    for value in values:
        tree.delete(value)
        combined.remove(value)
    assert list(tree) == sorted(combined, reverse=True)


@given(keys, modes)
def test_double_invert_restores(values, dup_right):
    tree = BinarySearchTree(values, duplicates_right=dup_right)
    tree.invert()
    tree.invert()
    assert list(tree) == sorted(values)


@given(keys, keys, modes)
def test_merge(first, second, dup_right):
    a = BinarySearchTree(first, duplicates_right=dup_right)
    b = BinarySearchTree(second)
    a.merge(b)
    assert list(a) == sorted(first + second)
    assert list(b) == sorted(second)
    assert len(a) == len(first) + len(second)


def test_merge_with_itself_doubles():
    tree = BinarySearchTree([2, 1, 3])
    tree.merge(tree)
    assert list(tree) == [1, 1, 2, 2, 3, 3]


def test_deep_tree_operations():
    size = 3000
    tree = BinarySearchTree(range(size))
    assert list(tree) == list(range(size))
    assert tree.max() == size - 1
    tree.delete(size - 1)
    assert tree.max() == size - 2
    tree.invert()
    assert next(iter(tree)) == size - 2