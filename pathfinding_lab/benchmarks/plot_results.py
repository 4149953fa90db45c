# pathfinding_lab/benchmarks/plot_results.py
from __future__ import annotations
import io
import json
import math
from pathlib import Path
from statistics import mean

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .. import config

RESULTS_JSON = config.RESULTS_DIR / "results.json"
OUT_DIR = config.RESULTS_DIR

def _load_rows(path: Path = RESULTS_JSON):
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m pathfinding_lab.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = data.get("results", [])
    if not rows:
        raise SystemExit("No rows to plot.")
    return rows

def _mean(values):
    values = [v for v in values if v is not None]
    return mean(values) if values else None

def summarize(rows):
    """One summary per algorithm, in first-seen order. Means are over successful runs only."""
    by_algo = {}
    for r in rows:
        by_algo.setdefault(r["algo"], []).append(r)
    out = []
    for algo, runs in by_algo.items():
        ok = [r for r in runs if r.get("success")]
        optimal = [r for r in ok if r.get("reference_cost") is not None and r.get("cost") == r["reference_cost"]]
        out.append({
            "algo": algo,
            "runs": len(runs),
            "found": len(ok),
            "optimal": len(optimal),
            "mean_cost": _mean(r.get("cost") for r in ok),
            "mean_nodes_expanded": _mean(r.get("nodes_expanded") for r in runs),
            "mean_time_s": _mean(r.get("time_s") for r in runs),
        })
    return out

def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) for r in rows]

    x = list(range(len(algos)))
    ax.bar(x, [0 if v is None else v for v in vals])
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")

    top = max([v for v in vals if v is not None] or [1]) or 1
    for xi, v in zip(x, vals):
        if v is None:
            label, y = "n/a", 0
        elif isinstance(v, float) and v < 0.01:
            label, y = f"{v:.4f}", v
        elif isinstance(v, float):
            label, y = f"{v:.3f}", v
        else:
            label, y = f"{v}", v
        ax.text(xi, y + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def _fmt_table(summary):
    lines = [
        "| Algorithm | Found | Optimal | Mean Cost | Mean Expanded | Mean Time (s) |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, float) and math.isfinite(x):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"
    for s in summary:
        lines.append(
            f"| {s['algo']} | {s['found']}/{s['runs']} | {s['optimal']} | {fnum(s['mean_cost'])} | "
            f"{fnum(s['mean_nodes_expanded'])} | {fnum(s['mean_time_s'])} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig):
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

CHARTS = (
    ("mean_nodes_expanded", "Mean Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
    ("mean_time_s", "Mean Wall Time (lower is better)", "seconds", "time.png"),
    ("mean_cost", "Mean Path Length (lower is better)", "edges", "cost.png"),
)

def main(results_json: Path = RESULTS_JSON, out_dir: Path = OUT_DIR):
    summary = summarize(_load_rows(results_json))
    out_dir.mkdir(parents=True, exist_ok=True)

    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(summary))
    print(f"Wrote {md_path}")

    written = [md_path]
    for metric, title, ylabel, filename in CHARTS:
        fig, ax = plt.subplots(figsize=(6, 4))
        _bar(ax, summary, metric, title, ylabel)
        fig.tight_layout()
        png = out_dir / filename
        png.write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        print(f"Wrote {png}")
        written.append(png)
    return written

if __name__ == "__main__":
    main()
