"""Undirected graph stored as adjacency lists."""

from collections import deque


class Graph:
    """An undirected graph on vertices ``0 .. n - 1``."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self._adj = [[] for _ in range(n)]

    def __len__(self):
        return len(self._adj)

    def __repr__(self):
        return f"Graph({len(self)})"

    def _check(self, u):
        if not 0 <= u < len(self._adj):
            raise IndexError(f"vertex {u} out of range")

    def add_edge(self, u, v):
        """Join ``u`` and ``v`` by an undirected edge."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._adj[v].append(u)

    def neighbours(self, u):
        """Return the neighbours of ``u`` in the order their edges were added."""
        self._check(u)
        return list(self._adj[u])

    def bfs(self, s):
        """Return the vertices reachable from ``s`` in breadth-first order."""
        self._check(s)
        visited = {s}
        order = []
        queue = deque([s])
        while queue:
            current = queue.popleft()
            order.append(current)
            for nxt in self._adj[current]:
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
        return order

    def format(self):
        """Return one ``u -> neighbours`` line per vertex."""
        return "\n".join(
            f"{u} -> {' '.join(map(str, adj))}".rstrip()
            for u, adj in enumerate(self._adj)
        )