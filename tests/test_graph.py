import pytest

from algobox.graph import (
    Graph,
    format_adjacency,
    has_cycle_directed,
    has_cycle_undirected,
    is_bipartite,
    topological_sort,
)


def _path_graph():
    g = Graph()
    for a, b in [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5)]:
        g.add_edge(a, b)
    return g


def test_bfs_on_path():
    assert _path_graph().bfs(0) == [0, 1, 2, 3, 4, 5]


def test_shortest_distances_on_path():
    distances = _path_graph().shortest_distances(0)
    assert list(distances) == [0, 1, 2, 3, 4, 5]
    assert all(distances[node] == node for node in distances)


def test_bfs_from_middle_visits_everything_once():
    order = _path_graph().bfs(3)
    assert order[0] == 3
    assert sorted(order) == list(range(6))


def test_distances_are_consistent_with_edges():
    g = Graph()
    for a, b in [("a", "b"), ("a", "c"), ("b", "d"), ("c", "d"), ("d", "e")]:
        g.add_edge(a, b)
    distances = g.shortest_distances("a")
    for node, dist in distances.items():
        for nbr in g.neighbours(node):
            assert abs(distances[nbr] - dist) <= 1


def test_directed_edges_are_one_way():
    g = Graph()
    g.add_edge(1, 2, bidirectional=False)
    assert g.neighbours(1) == [2]
    assert g.neighbours(2) == []
    assert g.bfs(2) == [2]


def test_unreachable_nodes_missing_from_distances():
    g = Graph()
    g.add_edge(0, 1)
    g.add_edge(5, 6)
    assert set(g.shortest_distances(0)) == {0, 1}


def test_format_sorted_nodes():
    g = Graph()
    g.add_edge(2, 1)
    g.add_edge(1, 0)
    assert g.format() == "Node :0 -->1 ,\nNode :1 -->2 ,0 ,\nNode :2 -->1 ,\n"


def test_format_adjacency_example():
    text = format_adjacency(4, [(0, 1), (0, 2), (2, 3), (1, 2)])
    assert text == "Vertex 0 -->1 2 \nVertex 1 -->0 2 \nVertex 2 -->0 3 1 \nVertex 3 -->2 \n"


def test_format_adjacency_rejects_bad_vertex():
    with pytest.raises(ValueError):
        format_adjacency(2, [(0, 2)])


def test_even_cycle_is_bipartite():
    assert is_bipartite(4, [(0, 1), (1, 2), (2, 3), (3, 0)]) is True


def test_odd_cycle_is_not_bipartite():
    assert is_bipartite(3, [(0, 1), (1, 2), (2, 0)]) is False


def test_bipartite_only_checks_component_of_zero():
    assert is_bipartite(5, [(0, 1), (2, 3), (3, 4), (4, 2)]) is True


def test_directed_cycle_detected():
    assert has_cycle_directed(3, [(0, 1), (1, 2), (2, 0)]) is True


def test_directed_acyclic():
    assert has_cycle_directed(4, [(0, 1), (0, 2), (1, 3), (2, 3)]) is False


def test_directed_cycle_unreachable_from_zero():
    assert has_cycle_directed(3, [(1, 2), (2, 1)]) is False


def test_undirected_cycle_detected():
    assert has_cycle_undirected(4, [(0, 1), (1, 2), (2, 3), (3, 1)]) is True


def test_undirected_tree_has_no_cycle():
    assert has_cycle_undirected(4, [(0, 1), (0, 2), (2, 3)]) is False


def test_undirected_self_loop_is_cycle():
    assert has_cycle_undirected(2, [(0, 1), (1, 1)]) is True


@pytest.mark.parametrize(
    "n, edges",
    [
        (6, [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]),
        (4, []),
        (5, [(0, 1), (1, 2), (2, 3), (3, 4)]),
        (5, [(4, 3), (3, 2), (2, 1), (1, 0)]),
    ],
)
def test_topological_sort_orders_edges(n, edges):
    order = topological_sort(n, edges)
    assert sorted(order) == list(range(n))
    position = {node: i for i, node in enumerate(order)}
    for u, v in edges:
        assert position[u] < position[v]


def test_topological_sort_without_edges_is_reverse():
    assert topological_sort(3, []) == [2, 1, 0]


def test_cycle_functions_reject_bad_vertex():
    with pytest.raises(ValueError):
        has_cycle_directed(2, [(0, -1)])
    with pytest.raises(ValueError):
        topological_sort(2, [(3, 0)])