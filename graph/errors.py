# graph/errors.py
from typing import List, Tuple


class InvalidEdge(ValueError):
    """Self loop or duplicate edge while building a graph."""

    def __init__(self, u, v, reason: str):
        super().__init__(f"invalid edge ({u}, {v}): {reason}")
        self.u = u
        self.v = v
        self.reason = reason


class ConflictDetected(AssertionError):
    """
    The verifier found adjacent nodes with the same color.
    `conflicts` holds (u, v, color) triples.
    """

    def __init__(self, conflicts: List[Tuple[int, int, int]], message: str = ""):
        if not message:
            sample = conflicts[:10]
            message = f"{len(conflicts)} conflicting edge(s), sample={sample}"
        super().__init__(message)
        self.conflicts = conflicts


class PaletteExhausted(RuntimeError):
    def __init__(self, node, palette_size: int):
        super().__init__(
            f"node {node} has no available color with palette_size={palette_size} "
            f"(palette must hold at least max_degree+1 colors)"
        )
        self.node = node
        self.palette_size = palette_size


class RoundLimitExceeded(RuntimeError):
    def __init__(self, rounds: int, active: int):
        super().__init__(f"stopped after {rounds} rounds with {active} node(s) still uncolored")
        self.rounds = rounds
        self.active = active
