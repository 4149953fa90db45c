# pathfinding_lab/core/frontiers.py
from __future__ import annotations
from bisect import insort_right
from dataclasses import dataclass
from typing import Callable, List, Optional
from .node import SearchNode
from .problem import Coordinate


class LayeredQueue:
    """
    FIFO split into the layer being expanded and the layer being discovered.
    pop() walks the current layer with a cursor; when it runs out, the next layer is
    swapped in and its first element is returned in the same call.
    """
    def __init__(self, root: SearchNode):
        self.current: List[SearchNode] = [root]
        self.next: List[SearchNode] = []
        self.cursor = 0
    def push(self, node: SearchNode): self.next.append(node)
    def __len__(self): return len(self.current) - self.cursor + len(self.next)

    def pop(self) -> Optional[SearchNode]:
        if self.cursor >= len(self.current):
            if not self.next:
                return None
            self.current, self.next = self.next, []
            self.cursor = 0
        node = self.current[self.cursor]
        self.cursor += 1
        return node


@dataclass(frozen=True)
class FrontierEntry:
    node: SearchNode
    priority: float
    path_length: int = 0


# priority(parent_entry, candidate_cell) -> priority of the candidate
PriorityFn = Callable[[Optional[FrontierEntry], Coordinate], float]


class SortedFrontier:
    """List kept ascending by priority; equal priorities keep discovery order."""
    def __init__(self, priority: PriorityFn):
        self.priority = priority
        self.entries: List[FrontierEntry] = []

    def push(self, node: SearchNode, parent: Optional[FrontierEntry] = None) -> FrontierEntry:
        """Scores the node once, now, and inserts it after every entry with priority <= its own."""
        entry = FrontierEntry(
            node=node,
            priority=float(self.priority(parent, node.coordinate)),
            path_length=0 if parent is None else parent.path_length + 1,
        )
        insort_right(self.entries, entry, key=lambda e: e.priority)
        return entry

    def pop(self) -> FrontierEntry: return self.entries.pop(0)
    def peek(self) -> FrontierEntry: return self.entries[0]
    def __len__(self): return len(self.entries)
