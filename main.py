# main.py
import argparse
import sys
from typing import List, Optional

from driver.config import DEFAULT_NUM_NODES, DEFAULT_SELFTEST_NODES, MODES, RunConfig
from driver.randomized import run_randomized_coloring
from driver.selftest import run_selftest
from graph.baseline import greedy_coloring
from graph.errors import ConflictDetected, PaletteExhausted, RoundLimitExceeded
from graph.generators import build_graph
from graph.verify import verify_coloring, print_check_summary
from visualisierung.dot import write_dot


def _positive_int(s: str) -> int:
    v = int(s)
    if v < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {v}")
    return v


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Distributed randomized graph coloring (simulated rounds)")
    ap.add_argument("mode", nargs="?", default="testcase", choices=MODES,
                    help="run mode; 'testcase' colors a complete graph of %d nodes and checks it"
                         % DEFAULT_SELFTEST_NODES)
    ap.add_argument("num", nargs="?", type=_positive_int, default=DEFAULT_NUM_NODES,
                    help="number of nodes (carbon atoms for hydrocarbon); ignored by testcase")
    ap.add_argument("-v", "--verbose", action="store_true", help="print the round-by-round trace")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--palette-size", type=_positive_int, default=None,
                    help="number of colors (default: max degree + 1); exploratory modes only, "
                         "the self-test always uses max degree + 1")
    ap.add_argument("--max-rounds", type=_positive_int, default=None,
                    help="give up after this many rounds; exploratory modes only")
    ap.add_argument("--dot-out", default=None, help="write the colored graph as graphviz dot (all modes)")
    ap.add_argument("--viz-out", default=None, help="directory for a PNG rendering (all modes)")
    ap.add_argument("--compare", action="store_true", help="also report a DSATUR greedy baseline")
    return ap


def _export(cfg: RunConfig, G, res, step: str) -> None:
    if cfg.dot_out:
        write_dot(G, res["coloring"], cfg.dot_out, seed=res["seed"], verbose=True)
    if cfg.viz_out:
        from visualisierung.draw import visualize_coloring
        path = visualize_coloring(G, res["coloring"], step=step, round_id=res["rounds"],
                                  out_dir=cfg.viz_out, palette_seed=res["seed"])
        print(f"[Export] wrote {path}")


def run(cfg: RunConfig) -> int:
    if cfg.mode == "testcase":
        try:
            res = run_selftest(DEFAULT_SELFTEST_NODES, seed=cfg.seed, verbose=cfg.verbose)
        except ConflictDetected as e:
            print(f"[SelfTest] FAIL: {e}", file=sys.stderr)
            return 1
        if cfg.palette_size is not None or cfg.max_rounds is not None:
            print("[SelfTest] --palette-size/--max-rounds ignored: the self-test needs the full max degree + 1 palette")
        _export(cfg, res["graph"], res, step="selftest")
        return 0

    G = build_graph(cfg.mode, cfg.num)
    print(f"Running in {cfg.mode} mode with {G.number_of_nodes()} vertices")
    try:
        res = run_randomized_coloring(G, palette_size=cfg.palette_size, seed=cfg.seed,
                                      verbose=cfg.verbose, max_rounds=cfg.max_rounds)
    except (PaletteExhausted, RoundLimitExceeded) as e:
        print(f"[Main] aborted: {e}", file=sys.stderr)
        return 2
    col = res["coloring"]
    for v in sorted(col):
        print(f"node {v:3} has permanent color {col[v]:3}")

    rep = verify_coloring(G, col, allowed_colors=range(res["palette_size"]))
    print(f"[Main] rounds={res['rounds']} | colors={res['num_colors']} | palette={res['palette_size']} "
          f"| seed={res['seed']} | time={res['runtime_sec']:.4f}s")
    print_check_summary(rep, prefix="[Check] ")

    if cfg.compare:
        ds = greedy_coloring(G, "DSATUR")
        print(f"[Compare] randomized colors={res['num_colors']} vs DSATUR colors={len(set(ds.values()))}")
    _export(cfg, G, res, step=f"final-{cfg.mode}")

    # exploratory runs report an improper coloring instead of crashing
    return 0 if rep["feasible"] else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return run(RunConfig.from_args(args))


if __name__ == "__main__":
    sys.exit(main())
