import pytest

from contestlib.bcc import BridgeGraph


def _graph(n, edges):
    g = BridgeGraph(n)
    for u, v in edges:
        g.add_edge(u, v)
    return g


def test_two_triangles_joined_by_bridge():
    g = _graph(6, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)])
    comp = g.components()
    assert comp[0] == comp[1] == comp[2]
    assert comp[3] == comp[4] == comp[5]
    assert comp[0] != comp[3]
    assert len(set(comp)) == 2


def test_path_has_one_component_per_vertex():
    comp = _graph(4, [(0, 1), (1, 2), (2, 3)]).components()
    assert sorted(comp) == list(range(4))


def test_cycle_is_one_component():
    comp = _graph(5, [(i, (i + 1) % 5) for i in range(5)]).components()
    assert len(set(comp)) == 1


def test_parallel_edge_to_parent_is_still_a_bridge():
    comp = _graph(2, [(0, 1), (0, 1)]).components()
    assert comp[0] != comp[1]
    assert sorted(comp) == [0, 1]


def test_disconnected_vertices():
    comp = _graph(3, []).components()
    assert sorted(comp) == [0, 1, 2]


def test_edge_out_of_range():
    g = BridgeGraph(2)
    with pytest.raises(IndexError):
        g.add_edge(0, 2)