import pytest

from graph.errors import InvalidEdge
from graph.model import ColoringGraph, node_views


def test_add_node_hands_out_consecutive_ids():
    G = ColoringGraph()
    assert [G.add_node() for _ in range(4)] == [0, 1, 2, 3]
    assert G.add_node(element="H") == 4
    assert G.nodes[4]["element"] == "H"


def test_self_loop_rejected():
    G = ColoringGraph()
    a = G.add_node()
    with pytest.raises(InvalidEdge) as ei:
        G.add_edge(a, a)
    assert ei.value.reason == "self loop"
    assert G.number_of_edges() == 0


def test_duplicate_edge_rejected_in_both_directions():
    G = ColoringGraph()
    a, b = G.add_node(), G.add_node()
    G.add_edge(a, b)
    with pytest.raises(InvalidEdge):
        G.add_edge(a, b)
    with pytest.raises(InvalidEdge):
        G.add_edge(b, a)
    assert G.number_of_edges() == 1


def test_neighbors_and_degree():
    G = ColoringGraph()
    for u, v in [(0, 1), (0, 2), (0, 3), (2, 3)]:
        G.add_edge(u, v)
    assert G.neighbor_set(0) == {1, 2, 3}
    assert G.neighbor_set(1) == {0}
    assert G.degree(0) == 3
    assert G.max_degree() == 3
    assert ColoringGraph().max_degree() == 0


def test_copy_keeps_structure():
    G = ColoringGraph()
    G.add_edge(0, 1, bond="double")
    G.add_edge(1, 2)
    H = G.copy()
    assert isinstance(H, ColoringGraph)
    assert sorted(H.edges()) == sorted(G.edges())
    assert H.edges[0, 1]["bond"] == "double"
    with pytest.raises(InvalidEdge):
        H.add_edge(1, 0)


def test_node_views_are_sorted_and_symmetric():
    G = ColoringGraph()
    G.add_edge(2, 0)
    G.add_edge(0, 1)
    views = node_views(G, {0: 1, 1: 0})
    assert [v.node for v in views] == [0, 1, 2]
    assert views[0].neighbors == (1, 2)
    assert views[2].color is None
    for view in views:
        for w in view.neighbors:
            assert view.node in views[w].neighbors


def test_add_edges_from_rejects_self_loop():
    G = ColoringGraph()
    with pytest.raises(InvalidEdge) as ei:
        G.add_edges_from([(0, 1), (2, 2)])
    assert ei.value.reason == "self loop"
    assert not G.has_edge(2, 2)


def test_add_edges_from_rejects_reversed_duplicate():
    G = ColoringGraph()
    G.add_edge(0, 1)
    with pytest.raises(InvalidEdge) as ei:
        G.add_edges_from([(1, 0)])
    assert ei.value.reason == "duplicate edge"
    assert G.number_of_edges() == 1


def test_edge_list_constructor_is_checked():
    G = ColoringGraph([(0, 1), (1, 2)], name="path")
    assert G.number_of_edges() == 2
    with pytest.raises(InvalidEdge):
        ColoringGraph([(0, 1), (1, 0)])
    with pytest.raises(InvalidEdge):
        ColoringGraph([(3, 3)])


def test_add_edges_from_keeps_edge_attributes():
    G = ColoringGraph()
    G.add_edges_from([(0, 1, {"bond": "single"}), (1, 2)], weight=2)
    assert G.edges[0, 1] == {"bond": "single", "weight": 2}
    assert G.edges[1, 2] == {"weight": 2}
