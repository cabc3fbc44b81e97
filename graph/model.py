# graph/model.py
from typing import Dict, List, NamedTuple, Optional, Set
import networkx as nx

from graph.errors import InvalidEdge


class NodeView(NamedTuple):
    node: int
    color: Optional[int]
    neighbors: tuple


class ColoringGraph(nx.Graph):
    """
    Undirected simple graph for the coloring engine.
    Rejects self loops and duplicate edges instead of silently ignoring them
    the way networkx does; nodes are consecutive integers when created with
    add_node() and no argument. add_edges_from and the edge-list
    constructor go through the same check.
    """

    def __init__(self, incoming_graph_data=None, **attr):
        if isinstance(incoming_graph_data, (list, tuple)):
            # networkx would wrap InvalidEdge in its own "not a valid edge list" error
            super().__init__(None, **attr)
            self.add_edges_from(incoming_graph_data)
        else:
            super().__init__(incoming_graph_data, **attr)

    def add_node(self, node_for_adding=None, **attr) -> int:
        if node_for_adding is None:
            node_for_adding = self.number_of_nodes()
            while node_for_adding in self:
                node_for_adding += 1
        super().add_node(node_for_adding, **attr)
        return node_for_adding

    def add_edge(self, u_of_edge, v_of_edge, **attr) -> None:
        if u_of_edge == v_of_edge:
            raise InvalidEdge(u_of_edge, v_of_edge, "self loop")
        if self.has_edge(u_of_edge, v_of_edge):
            raise InvalidEdge(u_of_edge, v_of_edge, "duplicate edge")
        super().add_edge(u_of_edge, v_of_edge, **attr)

    def add_edges_from(self, ebunch_to_add, **attr) -> None:
        for e in ebunch_to_add:
            if len(e) == 3:
                u, v, dd = e
                self.add_edge(u, v, **{**attr, **dd})
            elif len(e) == 2:
                u, v = e
                self.add_edge(u, v, **attr)
            else:
                raise nx.NetworkXError(f"Edge tuple {e} must be a 2-tuple or 3-tuple.")

    def copy(self, as_view=False):
        if as_view:
            return super().copy(as_view=True)
        # networkx copies the adjacency from both ends; feed each edge once
        H = self.__class__()
        H.graph.update(self.graph)
        H.add_nodes_from((n, d.copy()) for n, d in self._node.items())
        H.add_edges_from((u, v, d.copy()) for u, v, d in self.edges(data=True))
        return H

    def neighbor_set(self, node) -> Set[int]:
        return set(self._adj[node])

    def max_degree(self) -> int:
        return max_degree(self)


def max_degree(G) -> int:
    """Max degree of any networkx-like graph (0 for graphs without nodes)."""
    return max((d for _, d in G.degree()), default=0)


def node_views(G, coloring: Dict[int, int]) -> List[NodeView]:
    """Read-only (node, color, neighbors) rows sorted by node id, for exporters."""
    return [
        NodeView(v, coloring.get(v), tuple(sorted(G.neighbors(v))))
        for v in sorted(G.nodes())
    ]
