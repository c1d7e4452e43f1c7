"""Disjoint-set forest with several union strategies."""


class DisjointSet:
    """A forest of disjoint sets over hashable elements.

    Every union method joins the sets holding ``a`` and ``b``. They differ
    only in which root ends up on top.
    """

    def __init__(self):
        self._parent = {}
        self._size = {}
        self._rank = {}

    def make_set(self, v):
        """Put ``v`` into a set of its own, resetting any earlier state."""
        self._parent[v] = v
        self._size[v] = 1
        self._rank[v] = 0

    def __contains__(self, v):
        return v in self._parent

    def find(self, v):
        """Return the representative of the set holding ``v``."""
        if v not in self._parent:
            raise KeyError(v)
        while self._parent[v] != v:
            v = self._parent[v]
        return v

    def size_of(self, v):
        """Return the number of elements in the set holding ``v``."""
        return self._size[self.find(v)]

    def _roots(self, a, b):
        return self.find(a), self.find(b)

    def _attach(self, child, root):
        self._parent[child] = root
        self._size[root] += self._size[child]

    def union_naive(self, a, b):
        """Hang the root of ``a`` under the root of ``b``."""
        a, b = self._roots(a, b)
        if a != b:
            self._attach(a, b)

    def union_by_size(self, a, b):
        """Hang the smaller tree under the larger; ties go under ``b``."""
        a, b = self._roots(a, b)
        if a == b:
            return
        if self._size[a] > self._size[b]:
            self._attach(b, a)
        else:
            self._attach(a, b)

    def union_by_rank(self, a, b):
        """Union by rank, breaking rank ties by size."""
        a, b = self._roots(a, b)
        if a == b:
            return
        if self._rank[a] > self._rank[b]:
            self._attach(b, a)
        elif self._rank[a] < self._rank[b]:
            self._attach(a, b)
        elif self._size[a] > self._size[b]:
            self._attach(b, a)
            self._rank[a] += 1
        else:
            self._attach(a, b)
            self._rank[b] += 1

    def union_by_rank_simple(self, a, b):
        """Union by rank; on a rank tie the root of ``a`` stays on top."""
        a, b = self._roots(a, b)
        if a == b:
            return
        if self._rank[a] > self._rank[b]:
            self._attach(b, a)
        elif self._rank[a] < self._rank[b]:
            self._attach(a, b)
        else:
            self._attach(b, a)
            self._rank[a] += 1