from hypothesis import given, strategies as st

from dsalgo.sorting import merge, merge_sort


def test_empty_and_single():
    assert merge_sort([]) == []
    assert merge_sort([4]) == [4]


def test_does_not_modify_input():
    data = [3, 1, 2]
    result = merge_sort(data)
    assert data == [3, 1, 2]
    assert result == sorted(data)


def test_accepts_any_iterable():
    assert merge_sort(iter([5, -1, 5, 0])) == sorted([5, -1, 5, 0])


def test_merge_with_empty_side():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([1, 2], []) == [1, 2]


@given(st.lists(st.integers()))
def test_sorts_like_sorted(values):
    assert merge_sort(values) == sorted(values)


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_merge_of_sorted_lists(a, b):
    a.sort()
    b.sort()
    assert merge(a, b) == sorted(a + b)


@given(st.lists(st.integers()))
def test_idempotent(values):
    once = merge_sort(values)
    assert merge_sort(once) == once