import math

import numpy as np
import pandas as pd
import pytest

from experiments.runner_basic import sweep, write_rows
from results.analyze_rounds import fit_log_rounds, load_runs, plot_rounds, summarize_rounds


def _synthetic_runs():
    rows = []
    for n in (10, 100, 1000):
        for seed in range(3):
            rows.append({"family": "chain", "n": n, "rounds": 2 * math.log(n) + 1 + (seed - 1) * 0.5,
                         "colors": 3, "dsatur_colors": 2, "feasible": True, "runtime_sec": 0.01})
    rows.append({"family": "single", "n": 5, "rounds": 1, "colors": 1, "dsatur_colors": 1,
                 "feasible": True, "runtime_sec": 0.0})
    return pd.DataFrame(rows)


def test_summary_and_log_fit():
    summary = summarize_rounds(_synthetic_runs())
    chain = summary[summary["family"] == "chain"]
    assert list(chain["n"]) == [10, 100, 1000]
    assert list(chain["runs"]) == [3, 3, 3]
    assert np.allclose(chain["rounds_mean"], [2 * math.log(n) + 1 for n in (10, 100, 1000)])

    fits = fit_log_rounds(summary).set_index("family")
    assert fits.loc["chain", "slope"] == pytest.approx(2.0)
    assert fits.loc["chain", "intercept"] == pytest.approx(1.0)
    assert fits.loc["chain", "r2"] == pytest.approx(1.0)
    assert math.isnan(fits.loc["single", "slope"])


def test_sweep_csv_round_trip(tmp_path):
    rows = sweep(["chain", "hydrocarbon"], seeds=[0, 1],
                 sizes={"chain": (10, 40), "hydrocarbon": (3,)}, verbose=False)
    assert len(rows) == 6
    assert all(r["feasible"] for r in rows)
    path = tmp_path / "runs.csv"
    write_rows(rows, str(path))

    df = load_runs(path)
    assert df["feasible"].dtype == bool
    summary = summarize_rounds(df)
    assert set(summary["family"]) == {"chain", "hydrocarbon"}
    assert (summary["feasible_rate"] == 1.0).all()
    assert plot_rounds(summary, tmp_path / "fig" / "rounds.png").is_file()
