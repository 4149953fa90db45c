# pathfinding_lab/benchmarks/run_all.py
from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import List, Optional

from .. import config
from ..algorithms.registry import make_strategy, strategy_names
from ..core.driver import solve
from ..problems.checks import shortest_path_length
from ..problems.grid import Grid

logger = logging.getLogger(__name__)

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _trial_seed(base: Optional[int], trial: int) -> Optional[int]:
    return None if base is None else base + trial

def run_trials(
    trials: int = config.BENCH_TRIALS,
    width: int = config.GRID_WIDTH,
    height: int = config.GRID_HEIGHT,
    floor_probability: float = config.FLOOR_PROBABILITY,
    seed: Optional[int] = config.SEED,
    names: Optional[List[str]] = None,
) -> List[dict]:
    """
    Every strategy runs on the same random grids; the grid is reloaded between strategies so
    each one starts from a clean wall layout. Failures are recorded in the row, not raised.
    """
    names = names or strategy_names()
    rows = []
    for trial in range(trials):
        grid = Grid(width, height, floor_probability=floor_probability, seed=_trial_seed(seed, trial))
        reference = shortest_path_length(grid)
        for name in names:
            grid.reload()
            try:
                strategy = make_strategy(name, grid)
                # BFS may need one extra step beyond width*height expansions to report exhaustion
                r = solve(strategy, max_steps=grid.width * grid.height + 1)
                row = {"trial": trial, **r.as_row(), "reference_cost": reference}
                print(
                    f"  [{trial}] {r.algo}: "
                    f"{'OK' if r.success else 'FAIL'} "
                    f"cost={row['cost']} ref={reference} "
                    f"expanded={r.nodes_expanded}, "
                    f"time={_fmt_time(r.time_s)}s"
                )
            except Exception as e:
                logger.exception("%s failed on trial %d", name, trial)
                print(f"  [{trial}] {name}: ERROR {repr(e)}")
                row = {
                    "trial": trial,
                    "algo": name,
                    "success": False,
                    "error": repr(e),
                    "cost": None,
                    "reference_cost": reference,
                    "nodes_expanded": None,
                    "steps": None,
                    "time_s": None,
                    "peak_kb": None,
                }
            rows.append(row)
    return rows

def write_results(rows: List[dict], out_dir: Path = config.RESULTS_DIR) -> Path:
    out = {"results": rows, "ts": time.time()}
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "results.json"
    out_path.write_text(json.dumps(out, indent=2))
    return out_path

def main():
    config.configure_logging()
    print(
        f"→ Running {', '.join(strategy_names())} on {config.BENCH_TRIALS} "
        f"{config.GRID_WIDTH}x{config.GRID_HEIGHT} grids (seed={config.SEED})"
    )
    rows = run_trials()
    out_path = write_results(rows)
    print(f"Wrote {out_path}")

if __name__ == "__main__":
    main()
