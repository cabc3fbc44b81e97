from typing import Dict, Any, List, Tuple, Optional, Iterable

from graph.errors import ConflictDetected


def find_conflicts(G, coloring: Dict[int, Optional[int]]) -> List[Tuple[int, int, int]]:
    """
    Scan every edge once; (u, v, color) for each edge whose endpoints share a color.
    Uncolored endpoints are not conflicts here (see verify_coloring for completeness).
    """
    conflicts: List[Tuple[int, int, int]] = []
    for u, v in G.edges():
        cu = coloring.get(u, None)
        if cu is not None and cu == coloring.get(v, None):
            conflicts.append((u, v, cu))
    return conflicts


def verify(G, coloring: Dict[int, Optional[int]]) -> None:
    conflicts = find_conflicts(G, coloring)
    if conflicts:
        raise ConflictDetected(conflicts)


def assert_all_distinct(G, coloring: Dict[int, Optional[int]]) -> None:
    """Complete-graph check: every node must hold its own color."""
    colors = [coloring.get(v, None) for v in G.nodes()]
    if any(c is None for c in colors) or len(set(colors)) != len(colors):
        # report which nodes share a color, adjacent or not
        by_color: Dict[Any, List[int]] = {}
        for v in G.nodes():
            by_color.setdefault(coloring.get(v, None), []).append(v)
        clashes = [
            (nodes[0], w, c)
            for c, nodes in sorted(by_color.items(), key=lambda kv: (kv[0] is None, kv[0] or 0))
            if len(nodes) > 1
            for w in nodes[1:]
        ]
        raise ConflictDetected(
            clashes,
            f"expected {len(colors)} distinct colors, got {len(set(colors))}; sample={clashes[:10]}",
        )


def verify_coloring(
    G,
    coloring: Dict[int, Optional[int]],
    allowed_colors: Optional[Iterable[int]] = None,
    sample_conflicts: int = 10,
) -> Dict[str, Any]:
    """
    Full report for exploratory runs; never raises. 'feasible' is True only if
    every node holds a non-negative int color inside allowed_colors (when given)
    and no edge joins two nodes of the same color.
    """
    palette = None if allowed_colors is None else set(allowed_colors)
    uncolored, invalid, outside = [], [], []
    for v in sorted(G.nodes()):
        c = coloring.get(v)
        if c is None:
            uncolored.append(v)
        elif not isinstance(c, int) or c < 0:
            invalid.append(v)
        elif palette is not None and c not in palette:
            outside.append(v)

    conflicts = find_conflicts(G, coloring)
    colors = sorted({c for c in coloring.values() if c is not None})
    return {
        "missing_nodes": uncolored,
        "bad_nodes": invalid,
        "out_of_range_nodes": outside,
        "used_colors": colors,
        "num_used_colors": len(colors),
        "conflicts": conflicts,
        "num_conflicts": len(conflicts),
        "conflicts_sample": conflicts[:sample_conflicts],
        "feasible": not (uncolored or invalid or outside or conflicts),
    }


def print_check_summary(report: Dict[str, Any], prefix: str = "[Check] ") -> None:
    print(f"{prefix}feasible={report['feasible']} | colors={report['num_used_colors']} "
          f"| conflicts={report['num_conflicts']}")
    if report["feasible"]:
        return
    for key, what in (("missing_nodes", "uncolored"),
                      ("bad_nodes", "invalid color"),
                      ("out_of_range_nodes", "outside palette")):
        if report[key]:
            print(f"{prefix}{what}: {len(report[key])} node(s), first {report[key][:10]}")
    if report["num_conflicts"]:
        print(f"{prefix}same-color edges (u, v, color): {report['conflicts_sample']}")
