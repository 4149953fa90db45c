# Defines the shared vocabulary of the grid search engine (coordinates, cell states, step outcomes)
# and the interface every stepwise search strategy implements.
# pathfinding_lab/core/problem.py
from __future__ import annotations
from enum import Enum
from typing import List, NamedTuple, Optional, Protocol, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import SearchNode


class Coordinate(NamedTuple):
    """(x, y) cell position; x is the column, y the row."""
    x: int
    y: int


class CellState(Enum):
    FLOOR = 0
    WALL = 1
    ACTIVE = 2     # enqueued in a frontier, not yet expanded
    EXPLORED = 3   # already expanded


class StepOutcome(Enum):
    CONTINUED = "continued"
    FOUND = "found"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self is not StepOutcome.CONTINUED


class SearchError(RuntimeError):
    """Misuse of a search strategy (a programmer error, not a search outcome)."""


class SearchEndedError(SearchError):
    """step() was called on a strategy whose run already ended."""


class StaleGridError(SearchError):
    """The grid was regenerated, reloaded or edited after the strategy was built."""


class GridLike(Protocol):
    """What a strategy needs from the grid it explores."""
    start: Coordinate
    end: Coordinate
    generation: int
    def cell_at(self, coord: Coordinate) -> CellState: ...
    def set_cell(self, coord: Coordinate, state: CellState) -> None: ...
    def neighbors_of(self, coord: Coordinate) -> Sequence[Coordinate]: ...


class SearchStrategy(Protocol):
    """
    Canonical stepwise search interface.
    Each call to step() performs one unit of work (at most one expansion) and reports
    whether the run continues or has reached one of its two terminal outcomes.
    """
    name: str
    grid: GridLike
    def step(self) -> StepOutcome: ...
    @property
    def ended(self) -> bool: ...
    @property
    def found_node(self) -> Optional["SearchNode"]: ...
    @property
    def expansions(self) -> int: ...
    def path(self) -> Optional[List[Coordinate]]: ...
