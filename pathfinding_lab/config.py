"""
Configuration constants for pathfinding_lab.

Every tunable is read from an environment variable with a default, so the
benchmark scripts can be steered without editing code.
"""

import logging
import os
from pathlib import Path
from typing import Optional

# =============================================================================
# Paths
# =============================================================================

PACKAGE_ROOT = Path(__file__).parent

# results.json, results.md and the PNG charts land here
RESULTS_DIR = Path(os.getenv("RESULTS_DIR", str(PACKAGE_ROOT / "benchmarks")))

# =============================================================================
# Grid generation
# =============================================================================

# Bounds applied to user-supplied grid dimensions
MIN_GRID_SIZE = 4
MAX_GRID_SIZE = 100


def clamp_grid_size(value: int) -> int:
    """Clamp one grid dimension into [MIN_GRID_SIZE, MAX_GRID_SIZE]."""
    return min(max(int(value), MIN_GRID_SIZE), MAX_GRID_SIZE)


GRID_WIDTH = clamp_grid_size(os.getenv("GRID_WIDTH", "40"))
GRID_HEIGHT = clamp_grid_size(os.getenv("GRID_HEIGHT", "20"))

# Chance that a generated cell is floor rather than wall
FLOOR_PROBABILITY = float(os.getenv("FLOOR_PROBABILITY", "0.6"))


def _optional_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


# Unset means a fresh random layout every run
SEED = _optional_int(os.getenv("SEED"))

# =============================================================================
# Benchmarks
# =============================================================================

# Number of random grids each strategy is run on
BENCH_TRIALS = int(os.getenv("BENCH_TRIALS", "20"))

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging for the command-line entry points."""
    logging.basicConfig(level=(level or LOG_LEVEL), format=LOG_FORMAT)
