# pathfinding_lab/core/driver.py
# Synchronous driver: calls step() back to back until the run ends and measures it.
from __future__ import annotations
import logging
from typing import Callable, Optional
from .metrics import MeasuredRun, SearchResult
from .problem import SearchStrategy, StepOutcome

logger = logging.getLogger(__name__)

StepCallback = Callable[[SearchStrategy, StepOutcome], None]


def solve(strategy: SearchStrategy, max_steps: Optional[int] = None,
          on_step: Optional[StepCallback] = None) -> SearchResult:
    """
    Runs `strategy` to FOUND or EXHAUSTED. on_step(strategy, outcome) is called after each step.
    With max_steps set, a run still going after that many steps comes back unsuccessful with
    error="step limit reached" (the strategy is left resumable).
    """
    steps = 0
    outcome = StepOutcome.CONTINUED
    with MeasuredRun() as meter:
        while not outcome.is_terminal:
            if max_steps is not None and steps >= max_steps:
                break
            outcome = strategy.step()
            steps += 1
            if on_step is not None:
                on_step(strategy, outcome)

    path = strategy.path() if outcome is StepOutcome.FOUND else None
    result = SearchResult(
        algo=strategy.name,
        success=path is not None,
        path=path or [],
        cost=float(len(path) - 1) if path else float("inf"),
        nodes_expanded=strategy.expansions,
        steps=steps,
        time_s=meter.elapsed,
        peak_kb=meter.peak_kb,
        error=None if outcome.is_terminal else "step limit reached",
    )
    logger.info(
        "%s: %s after %d steps (%d expanded, cost=%s)",
        result.algo, outcome.value, steps, result.nodes_expanded, result.cost,
    )
    return result
