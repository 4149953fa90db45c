# pathfinding_lab/core/node.py
# A SearchNode records one discovered cell and a link back to the node that discovered it.
# Following the links from any node back to the root (the start cell) yields the path found.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Optional
from .problem import Coordinate


@dataclass(frozen=True, slots=True, eq=False)
class SearchNode:
    coordinate: Coordinate
    predecessor: Optional[SearchNode] = None
    depth: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "coordinate", Coordinate(*self.coordinate))
        object.__setattr__(self, "depth", 0 if self.predecessor is None else self.predecessor.depth + 1)

    def child(self, coordinate: Coordinate) -> SearchNode:
        """New node for a neighbouring cell, discovered from this one."""
        return SearchNode(coordinate, predecessor=self)

    def lineage(self) -> Iterator[SearchNode]:
        """Yields this node, then its predecessor, and so on down to the root."""
        cur: Optional[SearchNode] = self
        while cur is not None:
            yield cur
            cur = cur.predecessor

    def __repr__(self) -> str:
        return f"SearchNode({tuple(self.coordinate)}, depth={self.depth})"
