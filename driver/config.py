# driver/config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

DEFAULT_SELFTEST_NODES = 200
DEFAULT_NUM_NODES = 1
MODES = ("testcase", "complete-graph", "chain", "hydrocarbon")


@dataclass(frozen=True)
class RunConfig:
    mode: str = "testcase"
    num: int = DEFAULT_NUM_NODES
    verbose: bool = False
    seed: Optional[int] = None
    palette_size: Optional[int] = None
    max_rounds: Optional[int] = None
    dot_out: Optional[str] = None
    viz_out: Optional[str] = None
    compare: bool = False

    @classmethod
    def from_args(cls, args) -> "RunConfig":
        return cls(
            mode=args.mode,
            num=args.num,
            verbose=args.verbose,
            seed=args.seed,
            palette_size=args.palette_size,
            max_rounds=args.max_rounds,
            dot_out=args.dot_out,
            viz_out=args.viz_out,
            compare=args.compare,
        )
