import networkx as nx
import pytest

from graph.generators import build_graph, chain, complete_graph, hydrocarbon


def test_complete_graph():
    G = complete_graph(7)
    assert G.number_of_nodes() == 7
    assert G.number_of_edges() == 7 * 6 // 2
    assert G.max_degree() == 6
    assert nx.number_of_selfloops(G) == 0


def test_chain():
    G = chain(10)
    assert G.number_of_edges() == 9
    assert G.max_degree() == 2
    assert nx.is_connected(G)
    assert chain(1).number_of_edges() == 0


@pytest.mark.parametrize("carbons", [1, 2, 6])
def test_hydrocarbon_is_an_alkane(carbons):
    G = hydrocarbon(carbons)
    elements = nx.get_node_attributes(G, "element")
    assert sum(1 for e in elements.values() if e == "C") == carbons
    assert sum(1 for e in elements.values() if e == "H") == 2 * carbons + 2
    assert nx.is_tree(G)
    for v, e in elements.items():
        assert G.degree(v) == (4 if e == "C" else 1), f"bad valence at {v} ({e})"


def test_build_graph_dispatch_and_errors():
    assert build_graph("chain", 5).number_of_nodes() == 5
    assert build_graph("hydrocarbon", 2).number_of_nodes() == 8
    with pytest.raises(ValueError):
        build_graph("star", 5)
    with pytest.raises(ValueError):
        build_graph("chain", 0)
