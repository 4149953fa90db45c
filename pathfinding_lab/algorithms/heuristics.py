# pathfinding_lab/algorithms/heuristics.py
# Distance estimates between cells. Straight-line (euclidean) distance is what the informed
# strategies rank their frontier by; it never exceeds the 4-neighbour step count, so it is admissible.
from __future__ import annotations
import math
from typing import Tuple

Cell = Tuple[int, int]


def euclidean_distance(a: Cell, b: Cell) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def manhattan_distance(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
