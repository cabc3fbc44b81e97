# graph/generators.py
# Graph families for the coloring runs. Every generator returns a fully built
# ColoringGraph with nodes 0..n-1; edges go through ColoringGraph.add_edge so
# malformed construction raises InvalidEdge right here.
from typing import Callable, Dict

from graph.model import ColoringGraph

CARBON_VALENCE = 4


def complete_graph(num_nodes: int) -> ColoringGraph:
    """Every node adjacent to every other node; max degree num_nodes-1."""
    G = ColoringGraph()
    nodes = [G.add_node() for _ in range(num_nodes)]
    for i, u in enumerate(nodes):
        for v in nodes[i + 1:]:
            G.add_edge(u, v)
    return G


def chain(num_nodes: int) -> ColoringGraph:
    """Path 0-1-...-(n-1); max degree 2."""
    G = ColoringGraph()
    nodes = [G.add_node() for _ in range(num_nodes)]
    for u, v in zip(nodes, nodes[1:]):
        G.add_edge(u, v)
    return G


def hydrocarbon(carbons: int) -> ColoringGraph:
    """
    Straight-chain alkane C_nH_(2n+2): carbon backbone first (ids 0..n-1),
    then hydrogens filling every carbon up to valence 4. Node attribute
    'element' is "C" or "H". Max degree 4.
    """
    G = ColoringGraph()
    backbone = [G.add_node(element="C") for _ in range(carbons)]
    for u, v in zip(backbone, backbone[1:]):
        G.add_edge(u, v)
    for c in backbone:
        for _ in range(CARBON_VALENCE - G.degree(c)):
            h = G.add_node(element="H")
            G.add_edge(c, h)
    return G


GENERATORS: Dict[str, Callable[[int], ColoringGraph]] = {
    "complete-graph": complete_graph,
    "chain": chain,
    "hydrocarbon": hydrocarbon,
}


def build_graph(kind: str, num: int) -> ColoringGraph:
    if kind not in GENERATORS:
        raise ValueError(f"Unknown graph kind: {kind} (choose from {sorted(GENERATORS)})")
    if num < 1:
        raise ValueError(f"graph size must be >= 1, got {num}")
    return GENERATORS[kind](num)
