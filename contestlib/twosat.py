"""2-SAT solver on top of strongly connected components."""

from __future__ import annotations

from collections.abc import Iterable

from contestlib.scc import component_ids


def _node(literal: int, n: int) -> int:
    if literal == 0 or abs(literal) > n:
        raise ValueError(f"literal {literal} out of range for {n} variables")
    return 2 * literal - 2 if literal > 0 else -2 * literal - 1


def two_sat(n: int, clauses: Iterable[tuple[int, int]]) -> str | None:
    """Solve a 2-CNF formula over variables 1..n.

    Each clause ``(a, b)`` means ``a or b``; a negative number is a negated
    variable. Returns a string with ``'+'`` (true) or ``'-'`` (false) per
    variable, or ``None`` when the formula is unsatisfiable.
    """
    adj: list[list[int]] = [[] for _ in range(2 * n)]
    for a, b in clauses:
        x, y = _node(a, n), _node(b, n)
        adj[x ^ 1].append(y)
        adj[y ^ 1].append(x)

    ids = component_ids(2 * n, adj)
    assignment = []
    for u in range(n):
        positive, negative = ids[2 * u], ids[2 * u + 1]
        if positive == negative:
            return None
        assignment.append("-" if positive < negative else "+")
    return "".join(assignment)