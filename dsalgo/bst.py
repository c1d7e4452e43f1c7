"""Binary search tree with deletion, mirroring and merging."""


class _Node:
    __slots__ = ("value", "kids")

    def __init__(self, value):
        self.value = value
        self.kids = [None, None]


class BinarySearchTree:
    """A binary search tree.

    Equal keys go to the small side unless ``duplicates_right`` is set.
    Iteration is in-order over the tree as it stands: ascending, or
    descending after :meth:`invert`. Searches keep working after inversion.
    """

    def __init__(self, values=(), duplicates_right=False):
        self._root = None
        self._size = 0
        self._flip = 0
        self._duplicates_right = duplicates_right
        for value in values:
            self.insert(value)

    @property
    def _lo(self):
        return self._flip

    @property
    def _hi(self):
        return 1 - self._flip

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"BinarySearchTree({list(self)!r})"

    def _goes_high(self, key, value):
        return key >= value if self._duplicates_right else key > value

    def insert(self, key):
        """Add ``key`` to the tree."""
        new = _Node(key)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            side = self._hi if self._goes_high(key, node.value) else self._lo
            child = node.kids[side]
            if child is None:
                node.kids[side] = new
                return
            node = child

    def __contains__(self, key):
        node = self._root
        while node is not None:
            if node.value == key:
                return True
            node = node.kids[self._lo if key < node.value else self._hi]
        return False

    def _extreme(self, side):
        if self._root is None:
            raise ValueError("empty tree")
        node = self._root
        while node.kids[side] is not None:
            node = node.kids[side]
        return node.value

    def min(self):
        """Return the smallest key."""
        return self._extreme(self._lo)

    def max(self):
        """Return the largest key."""
        return self._extreme(self._hi)

    def _walk(self, first, second):
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.kids[first]
            node = stack.pop()
            yield node.value
            node = node.kids[second]

    def __iter__(self):
        return self._walk(0, 1)

    def __reversed__(self):
        return self._walk(1, 0)

    def median(self):
        """Return the key at position ``len(self) // 2`` in iteration order."""
        if self._root is None:
            raise ValueError("median of empty tree")
        values = list(self)
        return values[len(values) // 2]

    def invert(self):
        """Mirror the tree, swapping every node's children."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            node.kids.reverse()
            stack.extend(kid for kid in node.kids if kid is not None)
        self._flip ^= 1

    def delete(self, key):
        """Remove one occurrence of ``key``; raise KeyError if it is absent."""
        lo, hi = self._lo, self._hi
        parent, side, node = None, None, self._root
        while node is not None and node.value != key:
            parent = node
            side = lo if key < node.value else hi
            node = node.kids[side]
        if node is None:
            raise KeyError(key)
        small, large = node.kids[lo], node.kids[hi]
        if small is not None and large is not None:
            pred_parent, pred_side, pred = node, lo, small
            while pred.kids[hi] is not None:
                pred_parent, pred_side, pred = pred, hi, pred.kids[hi]
            node.value = pred.value
            pred_parent.kids[pred_side] = pred.kids[lo]
        else:
            replacement = small if small is not None else large
            if parent is None:
                self._root = replacement
            else:
                parent.kids[side] = replacement
        self._size -= 1

    def merge(self, other):
        """Insert every key of ``other`` into this tree, in its iteration order."""
        for value in list(other):
            self.insert(value)