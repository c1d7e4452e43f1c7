"""Array-backed binary max-heap and min-heap."""

import operator


def _sift_up(items, i, rises):
    """Move ``items[i]`` towards the root while ``rises(child, parent)``."""
    while i > 0:
        parent = (i - 1) // 2
        if not rises(items[i], items[parent]):
            break
        items[i], items[parent] = items[parent], items[i]
        i = parent


def _sift_down(items, i, prior):
    """Move ``items[i]`` towards the leaves while a child has priority."""
    last = len(items) - 1
    while True:
        left, right = 2 * i + 1, 2 * i + 2
        if left > last:
            break
        if right > last or prior(items[left], items[right]):
            best = left
        else:
            best = right
        if not prior(items[best], items[i]):
            break
        items[i], items[best] = items[best], items[i]
        i = best


def _pop_top(items, prior, name):
    if not items:
        raise IndexError(f"pop from empty {name}")
    top = items[0]
    last = items.pop()
    if items:
        items[0] = last
        _sift_down(items, 0, prior)
    return top


def _peek_top(items, name):
    if not items:
        raise IndexError(f"peek from empty {name}")
    return items[0]


class MaxHeap:
    """Heap whose top is its largest element."""

    def __init__(self):
        self._items = []

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"MaxHeap({self._items!r})"

    def push(self, x):
        """Add ``x`` to the heap."""
        self._items.append(x)
        _sift_up(self._items, len(self._items) - 1, operator.gt)

    def peek(self):
        """Return the largest element without removing it."""
        return _peek_top(self._items, "MaxHeap")

    def pop(self):
        """Remove and return the largest element."""
        return _pop_top(self._items, operator.gt, "MaxHeap")


class MinHeap:
    """Heap whose top is its smallest element."""

    def __init__(self):
        self._items = []

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"MinHeap({self._items!r})"

    def push(self, x):
        """Add ``x`` to the heap."""
        self._items.append(x)
        _sift_up(self._items, len(self._items) - 1, operator.le)

    def peek(self):
        """Return the smallest element without removing it."""
        return _peek_top(self._items, "MinHeap")

    def pop(self):
        """Remove and return the smallest element."""
        return _pop_top(self._items, operator.lt, "MinHeap")