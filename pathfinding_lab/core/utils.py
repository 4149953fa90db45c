# pathfinding_lab/core/utils.py
#This code rebuilds the start-to-end path from the node that reached the goal.
from __future__ import annotations
from typing import List, Sequence
from .node import SearchNode
from .problem import Coordinate


def reconstruct_path(node: SearchNode) -> List[Coordinate]:
    path = [n.coordinate for n in node.lineage()]
    path.reverse()
    return path


def is_adjacent(a: Coordinate, b: Coordinate) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def is_connected_path(path: Sequence[Coordinate]) -> bool:
    """True when every consecutive pair of cells is 4-adjacent."""
    return all(is_adjacent(a, b) for a, b in zip(path, path[1:]))
