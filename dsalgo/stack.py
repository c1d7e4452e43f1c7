"""Last-in, first-out stack."""


class Stack:
    """A LIFO stack; iteration runs from top to bottom."""

    def __init__(self):
        self._items = []

    def push(self, item):
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self):
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self):
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return reversed(self._items)

    def __repr__(self):
        return f"Stack({list(self)!r})"