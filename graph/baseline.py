# graph/baseline.py
import networkx as nx
from typing import Dict

STRATEGIES = ("DSATUR", "smallest_last", "largest_first")


def greedy_coloring(G, strategy: str = "DSATUR") -> Dict[int, int]:
    """
    Centralized greedy coloring from networkx, as a reference point for the
    number of colors the randomized rounds end up using.
    Color ids are compacted to 0..k-1.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown greedy strategy: {strategy}")
    raw = nx.coloring.greedy_color(G, strategy=strategy)
    remap = {c: i for i, c in enumerate(sorted(set(raw.values())))}
    return {v: remap[c] for v, c in raw.items()}
