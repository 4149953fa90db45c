from __future__ import annotations
from typing import List, Optional
from ..core.frontiers import LayeredQueue
from ..core.node import SearchNode
from ..core.problem import Coordinate, GridLike, StepOutcome
from .expansion import RunState, expand_node


class BreadthFirstSearch:
    """
    Stepwise breadth-first search. Each step() expands one node of the current layer;
    cells are visited in non-decreasing step distance from start, so the path found is a
    shortest one. The run reports EXHAUSTED on the step that finds both layers empty.
    """
    name = "BFS"

    def __init__(self, grid: GridLike):
        self.grid = grid
        self.frontier = LayeredQueue(SearchNode(grid.start))
        self._run = RunState(self.name, grid.generation)

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
        node = self.frontier.pop()
        if node is None:
            return self._run.finish(StepOutcome.EXHAUSTED)

        self._run.expansions += 1
        found = expand_node(self.grid, node, self.frontier.push)
        if found is not None:
            self._run.found_node = found
            return self._run.finish(StepOutcome.FOUND)
        return StepOutcome.CONTINUED

    def path(self) -> Optional[List[Coordinate]]:
        return self._run.path()
