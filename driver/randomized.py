# driver/randomized.py
from __future__ import annotations
import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

import networkx as nx

from graph.errors import InvalidEdge, PaletteExhausted, RoundLimitExceeded
from graph.model import max_degree


@dataclass
class RoundRecord:
    round_id: int
    active: int
    proposals: Dict[int, int] = field(default_factory=dict)
    finalized: Dict[int, int] = field(default_factory=dict)
    conflicted: List[int] = field(default_factory=list)


def node_rng(seed: int, node) -> random.Random:
    """Independent, reproducible random stream for one node."""
    return random.Random(f"{seed}/{node}")


def _propose(
    active: List[int],
    forbidden: Dict[int, Set[int]],
    palette: range,
    rngs: Dict[int, random.Random],
) -> Dict[int, int]:
    proposals: Dict[int, int] = {}
    for v in active:
        available = [c for c in palette if c not in forbidden[v]]
        if not available:
            raise PaletteExhausted(v, len(palette))
        proposals[v] = rngs[v].choice(available)
    return proposals


def _resolve(G, proposals: Dict[int, int]) -> Set[int]:
    """
    Nodes whose proposal clashes with an active neighbor's proposal this round.
    Reads only the proposals dict, so every decision sees the same snapshot.
    """
    clashing: Set[int] = set()
    for v, c in proposals.items():
        for u in G.neighbors(v):
            if proposals.get(u) == c:
                clashing.add(v)
                break
    return clashing


def run_randomized_coloring(
    G,
    palette_size: Optional[int] = None,
    seed: Optional[int] = None,
    verbose: bool = False,
    max_rounds: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Simulated synchronous randomized (Delta+1)-coloring.

    Every round each uncolored node draws a color uniformly from the palette
    minus the colors of its finalized neighbors. A node keeps its draw for good
    if no uncolored neighbor drew the same color in that round; otherwise all
    nodes of the clash retry next round. All draws of a round happen before any
    clash is resolved.

    palette_size defaults to max_degree+1, which guarantees every uncolored node
    at least one available color. seed=None picks a fresh seed; the seed used
    is returned so the run can be replayed exactly.
    """
    t0 = time.time()
    if nx.number_of_selfloops(G) > 0:
        u = next(iter(nx.nodes_with_selfloops(G)))
        raise InvalidEdge(u, u, "self loop")

    delta = max_degree(G)
    K = delta + 1 if palette_size is None else int(palette_size)
    if K < 1 and G.number_of_nodes() > 0:
        raise PaletteExhausted(next(iter(G.nodes())), K)
    if seed is None:
        seed = random.SystemRandom().randrange(2**32)
    palette = range(K)

    nodes = sorted(G.nodes())
    rngs = {v: node_rng(seed, v) for v in nodes}
    forbidden: Dict[int, Set[int]] = {v: set() for v in nodes}
    coloring: Dict[int, Optional[int]] = {v: None for v in nodes}
    active = list(nodes)
    trace: List[RoundRecord] = []

    if verbose:
        print(f"[Init] |V|={G.number_of_nodes()} |E|={G.number_of_edges()} "
              f"max_degree={delta} palette={K} seed={seed}")
        if K < delta + 1:
            print(f"[Init] palette={K} is below max_degree+1={delta + 1}; coloring may fail")

    round_id = 0
    while active:
        if max_rounds is not None and round_id >= max_rounds:
            raise RoundLimitExceeded(round_id, len(active))
        round_id += 1

        # phase (a): every active node draws independently
        proposals = _propose(active, forbidden, palette, rngs)
        # phase (b): resolve against the complete set of proposals
        clashing = _resolve(G, proposals)

        rec = RoundRecord(round_id=round_id, active=len(active), proposals=proposals)
        still_active: List[int] = []
        for v in active:
            c = proposals[v]
            if v in clashing:
                still_active.append(v)
                rec.conflicted.append(v)
                continue
            coloring[v] = c
            rec.finalized[v] = c
            for u in G.neighbors(v):
                forbidden[u].add(c)
        active = still_active
        trace.append(rec)

        if verbose:
            print(f"[Round {round_id}] active={rec.active} finalized={len(rec.finalized)} "
                  f"conflicted={len(rec.conflicted)} remaining={len(active)}")
            for v in sorted(proposals):
                if v in rec.finalized:
                    print(f"  node {str(v):>3}: color {proposals[v]:3} is used by no active neighbor, going permanent")
                else:
                    print(f"  node {str(v):>3}: color {proposals[v]:3} clashes with a neighbor, retrying")

    num_colors = len({c for c in coloring.values() if c is not None})
    runtime = time.time() - t0
    if verbose:
        print(f"[Done] finished after {round_id} rounds | colors={num_colors} | t={runtime:.4f}s")

    return dict(
        coloring=coloring,
        rounds=round_id,
        palette_size=K,
        max_degree=delta,
        seed=seed,
        num_colors=num_colors,
        trace=trace,
        runtime_sec=runtime,
    )
