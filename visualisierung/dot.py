# visualisierung/dot.py
"""
Graphviz DOT export of a finished coloring.

Each color index gets a fill color from a randomly generated palette (seeded,
so the same seed renders the same picture); every undirected edge is written
once. Render with e.g. `dot -Tpng coloring.dot -o coloring.png`.
"""
from __future__ import annotations
import os
import random
import re
from typing import Dict, List, Optional

from graph.model import node_views

_ESCAPE = re.compile(r"[\n\t\"]")
_LUT = {"\n": r"\n", "\t": r"\t", '"': r"\""}

UNCOLORED_FILL = "#DDDDDD"


def escape_field(s) -> str:
    return _ESCAPE.sub(lambda m: _LUT[m.group()], str(s))


def random_palette(k: int, seed: Optional[int] = None) -> List[str]:
    """k random '#rrggbb' colors, pairwise distinct."""
    rnd = random.Random(seed)
    out: List[str] = []
    seen = set()
    while len(out) < k:
        value = rnd.randrange(0x1000000)
        if value in seen:
            continue
        seen.add(value)
        out.append(f"#{value:06X}")
    return out


def to_dot(G, coloring: Dict[int, Optional[int]], seed: Optional[int] = None,
           name: str = "coloring") -> str:
    views = node_views(G, coloring)
    used = [c for c in coloring.values() if c is not None]
    palette = random_palette(max(used) + 1 if used else 0, seed=seed)

    lines = [f'graph "{escape_field(name)}" {{', "  node [style=filled];"]
    for view in views:
        label = str(view.node)
        element = G.nodes[view.node].get("element")
        if element:
            label = f"{element}{view.node}"
        fill = palette[view.color] if view.color is not None else UNCOLORED_FILL
        lines.append(
            f'  "{escape_field(view.node)}" [label="{escape_field(label)}", '
            f'fillcolor="{fill}"];'
        )
    for view in views:
        for w in view.neighbors:
            # each undirected edge once, from its smaller endpoint
            if view.node < w:
                lines.append(f'  "{escape_field(view.node)}" -- "{escape_field(w)}";')
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(G, coloring: Dict[int, Optional[int]], path: str,
              seed: Optional[int] = None, verbose: bool = False) -> str:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(to_dot(G, coloring, seed=seed, name=os.path.splitext(os.path.basename(path))[0]))
    if verbose:
        print(f"[Export] wrote {path}")
    return path
