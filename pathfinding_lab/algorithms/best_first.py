from __future__ import annotations
from typing import List, Optional
from ..core.frontiers import PriorityFn, SortedFrontier
from ..core.node import SearchNode
from ..core.problem import Coordinate, GridLike, StepOutcome
from .expansion import RunState, expand_node


class BestFirstSearch:
    """
    Stepwise best-first search over a SortedFrontier ordered by `priority`.
    Greedy best-first and A* are this class with different priority functions.
    Each step() pops the lowest-priority entry and expands it; the run ends when the goal
    is reached or when the expansion leaves the frontier empty.
    """
    def __init__(self, grid: GridLike, priority: PriorityFn, name: str = "BestFirst"):
        self.grid = grid
        self.name = name
        self.frontier = SortedFrontier(priority)
        self.frontier.push(SearchNode(grid.start))
        self._run = RunState(name, grid.generation)

    @property
    def ended(self) -> bool: return self._run.ended
    @property
    def found_node(self) -> Optional[SearchNode]: return self._run.found_node
    @property
    def expansions(self) -> int: return self._run.expansions
    @property
    def steps(self) -> int: return self._run.steps

    def step(self) -> StepOutcome:
        self._run.begin_step(self.grid)
        entry = self.frontier.pop()
        self._run.expansions += 1

        found = expand_node(self.grid, entry.node, lambda child: self.frontier.push(child, parent=entry))
        if found is not None:
            self._run.found_node = found
            return self._run.finish(StepOutcome.FOUND)
        if not self.frontier:
            return self._run.finish(StepOutcome.EXHAUSTED)
        return StepOutcome.CONTINUED

    def path(self) -> Optional[List[Coordinate]]:
        return self._run.path()
