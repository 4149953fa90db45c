# pathfinding_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import time, tracemalloc
from .problem import Coordinate


@dataclass
class SearchResult:
    algo: str
    success: bool
    path: List[Coordinate] = field(default_factory=list)
    cost: float = float("inf")      # edges on the path; inf when no path
    nodes_expanded: int = 0
    steps: int = 0
    time_s: float = 0.0
    peak_kb: int = 0
    error: Optional[str] = None

    def as_row(self) -> dict:
        return {
            "algo": self.algo,
            "success": self.success,
            "cost": None if self.cost == float("inf") else self.cost,
            "nodes_expanded": self.nodes_expanded,
            "steps": self.steps,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "error": self.error,
        }


class MeasuredRun:
    """
    Context manager for wall time and (approximate) peak traced memory of a solve.
    .elapsed and .peak_kb can be read inside the with-block as well as after it.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._owns_tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        # an outer tracemalloc session (e.g. a profiler) is left running on exit
        if not tracemalloc.is_tracing():
            tracemalloc.start()
            self._owns_tracing = True
        tracemalloc.reset_peak()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        _, peak = tracemalloc.get_traced_memory()
        if self._owns_tracing:
            tracemalloc.stop()
            self._owns_tracing = False
        self._peak_kb = max(self._peak_kb, peak // 1024)
        return False

    @property
    def elapsed(self) -> float:
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        if self.t0 is not None and self.t1 is None and tracemalloc.is_tracing():
            _, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
