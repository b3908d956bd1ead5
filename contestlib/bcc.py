"""Two-edge-connected components of an undirected graph."""

from __future__ import annotations


class BridgeGraph:
    """Undirected graph whose components are separated by bridges.

    As in the classic routine, the edge back to the DFS parent is recognised
    by its endpoint, so parallel edges to the parent do not join components.
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int) -> None:
        if not (0 <= u < self.n and 0 <= v < self.n):
            raise IndexError(f"edge ({u}, {v}) out of range for {self.n} vertices")
        self._adj[u].append(v)
        self._adj[v].append(u)

    def components(self) -> list[int]:
        """Return the component id of every vertex."""
        n = self.n
        tin = [0] * n
        low = [0] * n
        comp = [0] * n
        timer = 0
        count = 0
        pending: list[int] = []

        for root in range(n):
            if tin[root]:
                continue
            timer += 1
            tin[root] = low[root] = timer
            pending.append(root)
            calls = [(root, -1, iter(self._adj[root]))]
            while calls:
                v, parent, neighbours = calls[-1]
                descended = False
                for u in neighbours:
                    if u == parent:
                        continue
                    if not tin[u]:
                        timer += 1
                        tin[u] = low[u] = timer
                        pending.append(u)
                        calls.append((u, v, iter(self._adj[u])))
                        descended = True
                        break
                    low[v] = min(low[v], tin[u])
                if descended:
                    continue
                calls.pop()
                if low[v] == tin[v]:
                    while True:
                        w = pending.pop()
                        comp[w] = count
                        if w == v:
                            break
                    count += 1
                if calls:
                    up = calls[-1][0]
                    low[up] = min(low[up], low[v])
        return comp