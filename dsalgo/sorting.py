"""Merge sort."""


def merge(left, right):
    """Merge two sorted sequences into a new sorted list, ties from ``left`` first."""
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items):
    """Return a new list holding ``items`` in ascending order."""
    items = list(items)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return merge(merge_sort(items[:mid]), merge_sort(items[mid:]))