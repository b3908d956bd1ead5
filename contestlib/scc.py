"""Strongly connected components (Kosaraju's algorithm)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _finish_order(n: int, adj: Sequence[Iterable[int]]) -> list[int]:
    visited = [False] * n
    order: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, iter(adj[v])))
                    break
            else:
                stack.pop()
                order.append(u)
    return order


def strongly_connected_components(n: int, adj: Sequence[Iterable[int]]) -> list[list[int]]:
    """Return the SCCs of a directed graph in topological order of its condensation.

    ``adj[u]`` lists the heads of the edges leaving ``u``.
    """
    if len(adj) != n:
        raise ValueError(f"adjacency has {len(adj)} lists, expected {n}")
    order = _finish_order(n, adj)

    reverse_adj: list[list[int]] = [[] for _ in range(n)]
    for u in range(n):
        for v in adj[u]:
            reverse_adj[v].append(u)

    visited = [False] * n
    components: list[list[int]] = []
    for start in reversed(order):
        if visited[start]:
            continue
        component = [start]
        visited[start] = True
        stack = [iter(reverse_adj[start])]
        while stack:
            for v in stack[-1]:
                if not visited[v]:
                    visited[v] = True
                    component.append(v)
                    stack.append(iter(reverse_adj[v]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


def component_ids(n: int, adj: Sequence[Iterable[int]]) -> list[int]:
    """Return, for every vertex, the index of its SCC in topological order."""
    ids = [0] * n
    for index, component in enumerate(strongly_connected_components(n, adj)):
        for u in component:
            ids[u] = index
    return ids