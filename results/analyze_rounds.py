#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Analysis of the round-count sweep written by experiments/runner_basic.py.

Checks the empirical claim that the number of rounds grows logarithmically
with the node count: per family, mean rounds are fitted against ln(n).

Run:
  python3 -m experiments.runner_basic --out results_rounds.csv
  python3 results/analyze_rounds.py results_rounds.csv --out-dir results/_analysis_out
"""

from __future__ import annotations
import argparse
from pathlib import Path
import pandas as pd
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

NUMERIC_COLS = ["num", "n", "m", "max_degree", "palette_size", "seed",
                "rounds", "colors", "conflicts", "runtime_sec", "dsatur_colors"]


def to_bool_series(s: pd.Series) -> pd.Series:
    if s.dtype == bool:
        return s
    return s.astype(str).str.strip().str.lower().isin(["true", "1", "yes"])


def load_runs(path) -> pd.DataFrame:
    df = pd.read_csv(path)
    for c in NUMERIC_COLS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    if "feasible" in df.columns:
        df["feasible"] = to_bool_series(df["feasible"])
    return df


def summarize_rounds(df: pd.DataFrame) -> pd.DataFrame:
    """One row per (family, n): run count, mean/max rounds, mean colors, feasibility rate."""
    g = df.groupby(["family", "n"], as_index=False)
    out = g.agg(
        runs=("rounds", "size"),
        rounds_mean=("rounds", "mean"),
        rounds_max=("rounds", "max"),
        colors_mean=("colors", "mean"),
        dsatur_colors=("dsatur_colors", "mean"),
        feasible_rate=("feasible", "mean"),
        runtime_mean=("runtime_sec", "mean"),
    )
    return out.sort_values(["family", "n"]).reset_index(drop=True)


def fit_log_rounds(summary: pd.DataFrame) -> pd.DataFrame:
    """
    Least-squares fit rounds_mean ~ slope * ln(n) + intercept per family.
    Families with fewer than two distinct sizes get NaN coefficients.
    """
    rows = []
    for family, sub in summary.groupby("family"):
        x = np.log(sub["n"].to_numpy(dtype=float))
        y = sub["rounds_mean"].to_numpy(dtype=float)
        if len(np.unique(x)) < 2:
            slope, intercept, r2 = np.nan, np.nan, np.nan
        else:
            slope, intercept = np.polyfit(x, y, 1)
            pred = slope * x + intercept
            ss_res = float(np.sum((y - pred) ** 2))
            ss_tot = float(np.sum((y - y.mean()) ** 2))
            r2 = 1.0 - ss_res / ss_tot if ss_tot > 0 else 1.0
        rows.append({"family": family, "slope": slope, "intercept": intercept, "r2": r2,
                     "sizes": int(len(sub))})
    return pd.DataFrame(rows, columns=["family", "slope", "intercept", "r2", "sizes"])


def plot_rounds(summary: pd.DataFrame, out_path) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(7, 4.5))
    for family, sub in summary.groupby("family"):
        ax.plot(sub["n"], sub["rounds_mean"], marker="o", label=family)
    ax.set_xscale("log")
    ax.set_xlabel("nodes (log scale)")
    ax.set_ylabel("mean rounds")
    ax.set_title("Rounds until every node is colored")
    ax.legend()
    fig.tight_layout()
    fig.savefig(out_path)
    plt.close(fig)
    return out_path


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("csv", nargs="?", default="results_rounds.csv")
    ap.add_argument("--out-dir", default=str(Path(__file__).resolve().parent / "_analysis_out"))
    args = ap.parse_args()

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    df = load_runs(args.csv)
    infeasible = int((~df["feasible"]).sum())
    if infeasible:
        print(f"[Analysis] WARNING: {infeasible} run(s) ended with an improper coloring")

    summary = summarize_rounds(df)
    fits = fit_log_rounds(summary)
    summary.to_csv(out_dir / "rounds_summary.csv", index=False)
    fits.to_csv(out_dir / "rounds_logfit.csv", index=False)
    fig = plot_rounds(summary, out_dir / "rounds_vs_n.png")

    print(summary.to_string(index=False))
    print()
    print(fits.to_string(index=False))
    print(f"[Analysis] wrote {out_dir / 'rounds_summary.csv'}, {out_dir / 'rounds_logfit.csv'}, {fig}")


if __name__ == "__main__":
    main()
