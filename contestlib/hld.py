"""Heavy-light decomposition of a rooted tree."""

from __future__ import annotations

from collections.abc import Iterable


class HeavyLightDecomposition:
    """Maps tree paths onto a few contiguous ranges of positions.

    Positions are assigned so that every heavy chain is contiguous; the
    ranges returned by the path queries can be fed to any range structure.
    """

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 0) -> None:
        if not 0 <= root < n:
            raise ValueError(f"root {root} out of range for {n} vertices")
        adj: list[list[int]] = [[] for _ in range(n)]
        for u, v in edges:
            adj[u].append(v)
            adj[v].append(u)
        self.root = root

        parent = [root] * n
        depth = [0] * n
        tin = [0] * n
        tout = [0] * n
        size = [1] * n
        heavy = [-1] * n
        timer = 1
        seen = 1
        stack = [(root, iter(adj[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if v == parent[u]:
                    continue
                parent[v] = u
                depth[v] = depth[u] + 1
                tin[v] = timer
                timer += 1
                seen += 1
                stack.append((v, iter(adj[v])))
                break
            else:
                stack.pop()
                tout[u] = timer
                timer += 1
                if stack:
                    p = stack[-1][0]
                    size[p] += size[u]
                    if heavy[p] == -1 or size[u] > size[heavy[p]]:
                        heavy[p] = u
        if seen != n:
            raise ValueError("edges do not form a tree on all vertices")

        up = [parent]
        for _ in range(1, max(1, n.bit_length())):
            prev = up[-1]
            up.append([prev[prev[u]] for u in range(n)])

        position = [0] * n
        head = list(range(n))
        order = [root]
        index = 0
        while order:
            u = order.pop()
            position[u] = index
            index += 1
            light = [v for v in adj[u] if v != parent[u] and v != heavy[u]]
            order.extend(reversed(light))
            if heavy[u] != -1:
                head[heavy[u]] = head[u]
                order.append(heavy[u])

        self._parent = parent
        self._depth = depth
        self._tin = tin
        self._tout = tout
        self._up = up
        self._position = position
        self._head = head

    def is_ancestor(self, u: int, v: int) -> bool:
        """True when ``u`` lies on the path from ``v`` to the root."""
        return self._tin[u] <= self._tin[v] and self._tout[v] <= self._tout[u]

    def lca(self, u: int, v: int) -> int:
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for jump in reversed(self._up):
            if not self.is_ancestor(jump[u], v):
                u = jump[u]
        return self._parent[u]

    def position(self, u: int) -> int:
        return self._position[u]

    def path_ranges(self, u: int, v: int) -> list[tuple[int, int]]:
        """Inclusive position ranges covering the path from ``u`` to ``v``.

        The last range starts at the lowest common ancestor.
        """
        head, depth, pos, parent = self._head, self._depth, self._position, self._parent
        ranges = []
        while head[u] != head[v]:
            if depth[head[u]] > depth[head[v]]:
                u, v = v, u
            ranges.append((pos[head[v]], pos[v]))
            v = parent[head[v]]
        if depth[u] > depth[v]:
            u, v = v, u
        ranges.append((pos[u], pos[v]))
        return ranges

    def root_ranges(self, u: int) -> list[tuple[int, int]]:
        """Inclusive position ranges covering the path from ``u`` to the root."""
        head, pos, parent = self._head, self._position, self._parent
        ranges = []
        while True:
            ranges.append((pos[head[u]], pos[u]))
            if head[u] == self.root:
                return ranges
            u = parent[head[u]]