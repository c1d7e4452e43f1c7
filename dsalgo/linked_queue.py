"""First-in, first-out queue."""

from collections import deque


class Queue:
    """A FIFO queue; iteration runs from front to rear."""

    def __init__(self):
        self._items = deque()

    def enqueue(self, item):
        """Add ``item`` at the rear."""
        self._items.append(item)

    def dequeue(self):
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"Queue({list(self)!r})"