# visualisierung/draw.py
from __future__ import annotations
import os, re
from typing import Dict, Tuple, List, Optional
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

from graph.verify import find_conflicts
from visualisierung.dot import UNCOLORED_FILL, random_palette

# layout cache per graph signature, so snapshots of the same graph line up
_POS_CACHE: Dict[int, Dict] = {}


def _graph_signature(G: nx.Graph) -> int:
    nodes_sig = tuple(sorted(G.nodes()))
    edges_sig = tuple(sorted(tuple(sorted(e)) for e in G.edges()))
    return hash((nodes_sig, edges_sig))


def _sanitize_step(step: str) -> str:
    s = step.strip().lower()
    s = re.sub(r"[^a-z0-9\-_]+", "-", s)
    s = re.sub(r"-+", "-", s).strip("-")
    return s or "step"


def _get_layout(G: nx.Graph, seed: int = 42) -> Dict:
    sig = _graph_signature(G)
    if sig not in _POS_CACHE:
        # chains and molecules read better laid out along their backbone
        if G.number_of_nodes() > 1 and nx.is_tree(G) and max(d for _, d in G.degree()) <= 2:
            _POS_CACHE[sig] = {v: (float(i), 0.0) for i, v in enumerate(nx.dfs_preorder_nodes(G, _chain_end(G)))}
        elif nx.density(G) == 1.0:
            _POS_CACHE[sig] = nx.circular_layout(G)
        else:
            _POS_CACHE[sig] = nx.spring_layout(G, seed=seed)
    return _POS_CACHE[sig]


def _chain_end(G: nx.Graph):
    return min(v for v, d in G.degree() if d <= 1)


def visualize_coloring(
    G: nx.Graph,
    coloring: Dict[int, Optional[int]],
    step: str = "final",
    round_id: int = 0,
    out_dir: str = "visualisierung/picture",
    layout_seed: int = 42,
    palette_seed: Optional[int] = None,
    show_labels: bool = True,
    figure_size: Tuple[float, float] = (8.0, 6.0),
    dpi: int = 160,
) -> str:
    """
    Render a (possibly partial) coloring to PNG and return the file path.
      - edges between same-colored neighbors are drawn black, their endpoints filled black
      - uncolored nodes are light grey
      - all other nodes use a random palette indexed by color (same seed as the DOT export)
    """
    os.makedirs(out_dir, exist_ok=True)
    step_clean = _sanitize_step(step)

    conflict_edges: List[Tuple[int, int]] = [(u, v) for u, v, _ in find_conflicts(G, coloring)]
    conflict_nodes = {x for e in conflict_edges for x in e}
    conflict_set = set(conflict_edges)
    plain_edges = [e for e in G.edges() if e not in conflict_set]

    used = [c for c in coloring.values() if c is not None]
    palette = random_palette(max(used) + 1 if used else 0, seed=palette_seed)

    pos = _get_layout(G, seed=layout_seed)
    plt.figure(figsize=figure_size, dpi=dpi)

    if plain_edges:
        nx.draw_networkx_edges(G, pos, edgelist=plain_edges, width=0.6, alpha=0.35, edge_color="#999999")
    if conflict_edges:
        nx.draw_networkx_edges(G, pos, edgelist=conflict_edges, width=1.6, alpha=0.95, edge_color="black")

    nodes_sorted = sorted(G.nodes())
    fills = []
    for v in nodes_sorted:
        c = coloring.get(v)
        if v in conflict_nodes:
            fills.append("black")
        elif c is None:
            fills.append(UNCOLORED_FILL)
        else:
            fills.append(palette[c])
    if nodes_sorted:
        nx.draw_networkx_nodes(G, pos, nodelist=nodes_sorted, node_color=fills,
                               edgecolors="#555555", linewidths=0.8, node_size=220)
    if show_labels:
        labels = {v: str(coloring[v]) for v in nodes_sorted if coloring.get(v) is not None}
        nx.draw_networkx_labels(G, pos, labels=labels, font_size=7)

    colored = sum(1 for c in coloring.values() if c is not None)
    plt.title(f"{step} - round {round_id} - colors={len(set(used))} - "
              f"conflicts={len(conflict_edges)} (colored {colored}/{G.number_of_nodes()})")
    plt.axis("off")
    plt.tight_layout()

    fpath = os.path.join(out_dir, f"step-{step_clean}_round-{round_id:03d}_conflicts-{len(conflict_edges):03d}.png")
    plt.savefig(fpath, bbox_inches="tight")
    plt.close()
    return fpath
