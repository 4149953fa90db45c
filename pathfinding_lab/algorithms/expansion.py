# pathfinding_lab/algorithms/expansion.py
# Expansion rules shared by every strategy, plus the run bookkeeping they all carry.
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..core.node import SearchNode
from ..core.problem import CellState, Coordinate, GridLike, SearchEndedError, StaleGridError, StepOutcome
from ..core.utils import reconstruct_path

logger = logging.getLogger(__name__)


@dataclass
class RunState:
    name: str
    generation: int
    ended: bool = False
    found_node: Optional[SearchNode] = None
    expansions: int = 0
    steps: int = 0

    def begin_step(self, grid: GridLike) -> None:
        """Refuses to advance a finished run or one whose grid changed underneath it."""
        if self.ended:
            logger.warning("%s: step() called after the run ended", self.name)
            raise SearchEndedError(f"{self.name} run already ended; build a new strategy to search again")
        if grid.generation != self.generation:
            logger.warning("%s: grid changed since the strategy was created", self.name)
            raise StaleGridError(f"{self.name} is bound to a grid that was regenerated, reloaded or edited")
        self.steps += 1

    def finish(self, outcome: StepOutcome) -> StepOutcome:
        self.ended = True
        if outcome is StepOutcome.FOUND:
            logger.debug("%s: found end after %d expansions", self.name, self.expansions)
        else:
            logger.debug("%s: could not find end (%d expansions)", self.name, self.expansions)
        return outcome

    def path(self) -> Optional[List[Coordinate]]:
        if self.found_node is None:
            return None
        return reconstruct_path(self.found_node)


def expand_node(grid: GridLike, node: SearchNode, enqueue: Callable[[SearchNode], None]) -> Optional[SearchNode]:
    """
    Expands one frontier node and returns the goal node if this expansion reached it.

    - The node's cell becomes EXPLORED.
    - A node standing on the end cell is itself the goal (only the start node can, when start == end).
    - Neighbours are scanned in grid order; the end cell stops the scan and yields a goal node
      linked to this one; FLOOR cells become ACTIVE and are handed to enqueue() as children.
    - When the goal was reached, ACTIVE neighbours of this node go back to FLOOR.
    """
    grid.set_cell(node.coordinate, CellState.EXPLORED)
    if node.coordinate == grid.end:
        return node

    found = None
    for adjacent in grid.neighbors_of(node.coordinate):
        if adjacent == grid.end:
            found = node.child(adjacent)
            break
        if grid.cell_at(adjacent) is CellState.FLOOR:
            grid.set_cell(adjacent, CellState.ACTIVE)
            enqueue(node.child(adjacent))

    if found is not None:
        for adjacent in grid.neighbors_of(node.coordinate):
            if grid.cell_at(adjacent) is CellState.ACTIVE:
                grid.set_cell(adjacent, CellState.FLOOR)
    return found
