# pathfinding_lab/algorithms/greedy.py
from __future__ import annotations
from typing import Optional
from .best_first import BestFirstSearch
from .heuristics import euclidean_distance
from ..core.frontiers import FrontierEntry
from ..core.problem import Coordinate, GridLike


def greedy_best_first_search(grid: GridLike) -> BestFirstSearch:
    # greedy: f = h, straight-line distance to end; fast but not guaranteed shortest
    def h(parent: Optional[FrontierEntry], cell: Coordinate) -> float:
        return euclidean_distance(cell, grid.end)
    return BestFirstSearch(grid, priority=h, name="GBFS")
