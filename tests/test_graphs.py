import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.graphs import (
    DisjointSet,
    Edge,
    EdgeKind,
    classify_edges,
    cycle_lengths,
    dijkstra,
    kruskal_mst,
    prim_mst,
)

SAMPLE = [
    [0, 4, 0, 0, 0, 0],
    [4, 0, 8, 0, 0, 0],
    [0, 8, 0, 7, 0, 4],
    [0, 0, 7, 0, 9, 14],
    [0, 0, 0, 9, 0, 10],
    [0, 0, 4, 14, 10, 0],
]


def _edges_of(matrix):
    n = len(matrix)
    return [Edge(u, v, matrix[u][v]) for u in range(n) for v in range(u + 1, n) if matrix[u][v]]


def _is_spanning_tree(n, tree):
    sets = DisjointSet(n)
    if len(tree) != n - 1:
        return False
    for edge in tree:
        if not sets.union(edge.src, edge.dest):
            return False
    return True


@st.composite
def connected_graphs(draw):
    n = draw(st.integers(min_value=1, max_value=7))
    matrix = [[0] * n for _ in range(n)]
    for v in range(1, n):
        u = draw(st.integers(min_value=0, max_value=v - 1))
        w = draw(st.integers(min_value=1, max_value=20))
        matrix[u][v] = matrix[v][u] = w
    for u in range(n):
        for v in range(u + 1, n):
            if draw(st.booleans()):
                w = draw(st.integers(min_value=1, max_value=20))
                matrix[u][v] = matrix[v][u] = w
    return matrix


def test_dijkstra_sample():
    assert dijkstra(SAMPLE, 0) == [0, 4, 12, 19, 26, 16]


def test_dijkstra_unreachable_is_inf():
    graph = [[0, 2, 0], [2, 0, 0], [0, 0, 0]]
    dist = dijkstra(graph, 0)
    assert dist[:2] == [0, 2]
    assert dist[2] == math.inf


def test_dijkstra_bad_source():
    with pytest.raises(IndexError):
        dijkstra(SAMPLE, 6)


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)


@given(connected_graphs())
def test_dijkstra_distances_are_certified(matrix):
    n = len(matrix)
    dist = dijkstra(matrix, 0)
    assert dist[0] == 0
    for u in range(n):
        for v in range(n):
            if matrix[u][v]:
                assert dist[v] <= dist[u] + matrix[u][v]
    for v in range(1, n):
        assert any(matrix[u][v] and dist[v] == dist[u] + matrix[u][v] for u in range(n))


def test_prim_sample_is_spanning_and_matches_kruskal():
    tree = prim_mst(SAMPLE)
    assert _is_spanning_tree(6, tree)
    assert [e.dest for e in tree] == [1, 2, 3, 4, 5]
    kruskal = kruskal_mst(6, _edges_of(SAMPLE))
    assert sum(e.weight for e in tree) == sum(e.weight for e in kruskal)


def test_prim_weights_come_from_graph():
    for edge in prim_mst(SAMPLE):
        assert SAMPLE[edge.src][edge.dest] == edge.weight


def test_prim_disconnected_raises():
    with pytest.raises(ValueError):
        prim_mst([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_prim_empty_graph():
    assert prim_mst([]) == []


@given(connected_graphs())
def test_prim_and_kruskal_agree(matrix):
    n = len(matrix)
    prim = prim_mst(matrix)
    kruskal = kruskal_mst(n, _edges_of(matrix))
    assert _is_spanning_tree(n, prim)
    assert _is_spanning_tree(n, kruskal)
    assert sum(e.weight for e in prim) == sum(e.weight for e in kruskal)


def test_kruskal_triangle_drops_heaviest():
    tree = kruskal_mst(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])
    assert tree == [Edge(0, 1, 1), Edge(1, 2, 2)]


def test_kruskal_forest_for_disconnected_graph():
    tree = kruskal_mst(4, [(0, 1, 5), (2, 3, 1)])
    assert tree == [Edge(2, 3, 1), Edge(0, 1, 5)]


def test_kruskal_rejects_bad_vertex():
    with pytest.raises(ValueError):
        kruskal_mst(2, [(0, 2, 1)])


def test_disjoint_set_union_and_find():
    sets = DisjointSet(4)
    assert sets.union(0, 1) is True
    assert sets.union(1, 0) is False
    assert sets.find(0) == sets.find(1)
    assert sets.find(2) != sets.find(0)
    assert sets.union(2, 3) is True
    assert sets.union(0, 3) is True
    assert len({sets.find(i) for i in range(4)}) == 1


def test_classify_tree_back_forward():
    adj = [[0, 1, 1], [0, 0, 1], [1, 0, 0]]
    assert classify_edges(adj) == [
        (0, 1, EdgeKind.TREE),
        (1, 2, EdgeKind.TREE),
        (2, 0, EdgeKind.BACK),
        (0, 2, EdgeKind.FORWARD),
    ]


def test_classify_cross_edge():
    adj = [[0, 1, 1], [0, 0, 0], [0, 1, 0]]
    assert classify_edges(adj) == [
        (0, 1, EdgeKind.TREE),
        (0, 2, EdgeKind.TREE),
        (2, 1, EdgeKind.CROSS),
    ]


def test_classify_self_loop_is_back_edge():
    assert classify_edges([[1]]) == [(0, 0, EdgeKind.BACK)]


def test_classify_reports_every_edge_once():
    adj = [[0, 1, 0, 1], [0, 0, 1, 0], [1, 0, 0, 1], [0, 1, 0, 0]]
    edges = classify_edges(adj)
    expected = {(u, v) for u in range(4) for v in range(4) if adj[u][v]}
    assert sorted((u, v) for u, v, _ in edges) == sorted(expected)
    tree_targets = [v for _, v, kind in edges if kind is EdgeKind.TREE]
    assert len(tree_targets) == len(set(tree_targets)) == 3


def test_cycles_directed_triangle():
    adj = [[0, 1, 0], [0, 0, 1], [1, 0, 0]]
    assert cycle_lengths(adj) == (3, 3)


def test_cycles_acyclic():
    adj = [[0, 1, 1], [0, 0, 1], [0, 0, 0]]
    assert cycle_lengths(adj) is None


def test_cycles_self_loop():
    assert cycle_lengths([[1]]) == (1, 1)


def test_cycles_undirected_edge_counts_as_two():
    assert cycle_lengths([[0, 1], [1, 0]]) == (2, 2)


def test_cycles_mixed_lengths():
    adj = [[0, 1, 0], [1, 0, 1], [1, 0, 0]]
    assert cycle_lengths(adj) == (2, 3)


def test_cycles_empty_graph():
    assert cycle_lengths([]) is None