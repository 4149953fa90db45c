# pathfinding_lab/algorithms/astar.py
from __future__ import annotations
from typing import Optional
from .best_first import BestFirstSearch
from .heuristics import euclidean_distance
from ..core.frontiers import FrontierEntry
from ..core.problem import Coordinate, GridLike


def a_star_search(grid: GridLike) -> BestFirstSearch:
    # f = g + h, g = steps from start (parent's + 1), h = straight-line distance to end
    def f(parent: Optional[FrontierEntry], cell: Coordinate) -> float:
        g = 0 if parent is None else parent.path_length + 1
        return g + euclidean_distance(cell, grid.end)
    return BestFirstSearch(grid, priority=f, name="A*")
