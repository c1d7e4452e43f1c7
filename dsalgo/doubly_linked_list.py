"""Doubly linked list with operations at both ends."""


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value):
        self.value = value
        self.prev = None
        self.next = None


class DoublyLinkedList:
    """A doubly linked list; iteration runs from head to tail."""

    def __init__(self):
        self._head = None
        self._tail = None
        self._length = 0

    def __len__(self):
        return self._length

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self):
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self):
        return f"DoublyLinkedList({list(self)!r})"

    def insert_first(self, x):
        """Put ``x`` at the head."""
        node = _Node(x)
        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
        self._head = node
        self._length += 1

    def insert_last(self, x):
        """Put ``x`` at the tail."""
        node = _Node(x)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._length += 1

    def delete_first(self):
        """Remove and return the head element."""
        if self._head is None:
            raise IndexError("delete from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._length -= 1
        return node.value

    def delete_last(self):
        """Remove and return the tail element."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._length -= 1
        return node.value