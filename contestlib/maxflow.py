"""Maximum flow with Dinic's algorithm."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(slots=True)
class _Edge:
    to: int
    rev: int
    cap: int
    flow: int = 0


def _build(edges: Iterable[tuple[int, int, int]], n: int) -> list[list[_Edge]]:
    adj: list[list[_Edge]] = [[] for _ in range(n)]
    for u, v, c in edges:
        forward_rev = len(adj[v]) + (1 if u == v else 0)
        adj[u].append(_Edge(v, forward_rev, c))
        adj[v].append(_Edge(u, len(adj[u]) - 1, 0))
    return adj


def _levels(adj: list[list[_Edge]], source: int) -> list[int]:
    level = [-1] * len(adj)
    level[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for e in adj[u]:
            if level[e.to] == -1 and e.cap > e.flow:
                level[e.to] = level[u] + 1
                queue.append(e.to)
    return level


def _augment(adj, level, nxt, source, sink) -> int:
    path: list[_Edge] = []
    u = source
    while True:
        if u == sink:
            pushed = min(e.cap - e.flow for e in path)
            for e in path:
                e.flow += pushed
                adj[e.to][e.rev].flow -= pushed
            return pushed
        edges = adj[u]
        while nxt[u] < len(edges):
            e = edges[nxt[u]]
            if e.cap > e.flow and level[e.to] == level[u] + 1:
                path.append(e)
                u = e.to
                break
            nxt[u] += 1
        else:
            if not path:
                return 0
            dead = path.pop()
            u = adj[dead.to][dead.rev].to
            nxt[u] += 1


def max_flow(edges: Iterable[tuple[int, int, int]], n: int, source: int, sink: int) -> int:
    """Return the value of a maximum flow from ``source`` to ``sink``.

    ``edges`` holds directed ``(u, v, capacity)`` triples on vertices 0..n-1.
    """
    if source == sink:
        raise ValueError("source and sink must differ")
    adj = _build(edges, n)
    total = 0
    while True:
        level = _levels(adj, source)
        if level[sink] == -1:
            return total
        nxt = [0] * n
        while pushed := _augment(adj, level, nxt, source, sink):
            total += pushed