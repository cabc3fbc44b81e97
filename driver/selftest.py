# driver/selftest.py
from typing import Any, Dict, Optional

from driver.config import DEFAULT_SELFTEST_NODES
from driver.randomized import run_randomized_coloring
from graph.generators import complete_graph
from graph.verify import verify, assert_all_distinct


def run_selftest(num_nodes: int = DEFAULT_SELFTEST_NODES, seed: Optional[int] = None,
                 verbose: bool = False) -> Dict[str, Any]:
    """
    Built-in correctness check: in a complete graph every color may be used
    only once, so the run must end with num_nodes distinct colors.
    Raises ConflictDetected otherwise.
    """
    G = complete_graph(num_nodes)
    res = run_randomized_coloring(G, seed=seed, verbose=verbose)
    col = res["coloring"]

    print("\n\n[SelfTest] algorithm finished:")
    for v in sorted(col):
        print(f"node {v:3} has permanent color {col[v]:3}")

    print("\n[SelfTest] sorting by color:")
    for v in sorted(col, key=lambda v: col[v]):
        print(f"node {v:3} has permanent color {col[v]:3}")

    verify(G, col)
    assert_all_distinct(G, col)
    print(f"[SelfTest] PASS | nodes={num_nodes} colors={res['num_colors']} "
          f"rounds={res['rounds']} seed={res['seed']}")
    res["graph"] = G
    return res
