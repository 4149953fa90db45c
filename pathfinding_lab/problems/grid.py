# pathfinding_lab/problems/grid.py
from __future__ import annotations
import logging
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..core.problem import CellState, Coordinate

logger = logging.getLogger(__name__)

# (dx, dy) in the order neighbours are reported: +x, +y, -x, -y
_MOVES: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))

_CHARS = {
    CellState.FLOOR: ".",
    CellState.WALL: "#",
    CellState.ACTIVE: "+",
    CellState.EXPLORED: "x",
}
_PARSE = {".": CellState.FLOOR, "#": CellState.WALL, "+": CellState.ACTIVE, "x": CellState.EXPLORED}

CellListener = Callable[[Coordinate, CellState, CellState], None]


class Grid:
    """
    width x height matrix of CellState with a start and an end marker.

    - Cells live in a numpy array indexed [y, x] (row-major, like an image).
    - neighbors_of(c): in-bounds 4-neighbours, ordered +x, +y, -x, -y
    - Random layout: each cell is floor with probability floor_probability, else wall;
      start and end are drawn independently and uniformly (they may coincide and
      nothing guarantees a path between them).
    - generation is bumped by every change that invalidates a running search
      (regenerate, reload, moving a marker, toggling a wall).
    """
    def __init__(self, width: int, height: int, floor_probability: float = 0.6, seed: Optional[int] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        if not 0.0 <= floor_probability <= 1.0:
            raise ValueError(f"floor_probability must be within [0, 1], got {floor_probability}")
        self.width = int(width)
        self.height = int(height)
        self.floor_probability = float(floor_probability)
        self.rng = np.random.default_rng(seed)
        self.cells = np.full((self.height, self.width), CellState.FLOOR.value, dtype=np.uint8)
        self._start = Coordinate(0, 0)
        self._end = Coordinate(0, 0)
        self.generation = 0
        self._listeners: List[CellListener] = []
        self.regenerate()

    @classmethod
    def from_rows(cls, rows: Sequence[str], start: Optional[Tuple[int, int]] = None,
                  end: Optional[Tuple[int, int]] = None) -> Grid:
        """
        Builds a grid from a text layout, one string per row (y), one char per column (x):
        '.' floor, '#' wall, 'S' start, 'G' or 'E' end. Explicit start/end override the letters.
        """
        if isinstance(rows, str):
            raise ValueError("Layout must be a sequence of row strings, not a single string")
        if not rows or not rows[0]:
            raise ValueError("Layout must have at least one non-empty row")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("All layout rows must have the same length")
        grid = cls(width, len(rows), floor_probability=1.0)
        found_start = found_end = None
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch == "S":
                    found_start = Coordinate(x, y)
                    state = CellState.FLOOR
                elif ch in "GE":
                    found_end = Coordinate(x, y)
                    state = CellState.FLOOR
                elif ch in _PARSE:
                    state = _PARSE[ch]
                else:
                    raise ValueError(f"Unknown layout character {ch!r} at ({x}, {y})")
                grid.cells[y, x] = state.value
        start = start if start is not None else found_start
        end = end if end is not None else found_end
        if start is None or end is None:
            raise ValueError("Layout needs a start ('S') and an end ('G'/'E') or explicit coordinates")
        grid.start = start
        grid.end = end
        return grid

    # --- markers -----------------------------------------------------------------

    @property
    def start(self) -> Coordinate:
        return self._start

    @start.setter
    def start(self, coord: Tuple[int, int]) -> None:
        self._start = self._place_marker(coord)
        self.generation += 1

    @property
    def end(self) -> Coordinate:
        return self._end

    @end.setter
    def end(self, coord: Tuple[int, int]) -> None:
        self._end = self._place_marker(coord)
        self.generation += 1

    def _place_marker(self, coord: Tuple[int, int]) -> Coordinate:
        # marker cells are always floor
        coord = self._checked(coord)
        self.set_cell(coord, CellState.FLOOR)
        return coord

    # --- cell access -------------------------------------------------------------

    def in_bounds(self, coord: Tuple[int, int]) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def _checked(self, coord: Tuple[int, int]) -> Coordinate:
        coord = Coordinate(*coord)
        if not self.in_bounds(coord):
            raise IndexError(f"Coordinate {tuple(coord)} outside {self.width}x{self.height} grid")
        return coord

    def cell_at(self, coord: Tuple[int, int]) -> CellState:
        x, y = self._checked(coord)
        return CellState(int(self.cells[y, x]))

    def set_cell(self, coord: Tuple[int, int], state: CellState) -> None:
        x, y = coord = self._checked(coord)
        state = CellState(state)
        old = CellState(int(self.cells[y, x]))
        if old is state:
            return
        self.cells[y, x] = state.value
        for listener in self._listeners:
            listener(coord, old, state)

    def neighbors_of(self, coord: Tuple[int, int]) -> List[Coordinate]:
        x, y = self._checked(coord)
        out = []
        for dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                out.append(Coordinate(nx, ny))
        return out

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.cells == state.value))

    def add_listener(self, listener: CellListener) -> None:
        """listener(coord, old_state, new_state) runs after every set_cell that changes a cell."""
        self._listeners.append(listener)

    def remove_listener(self, listener: CellListener) -> None:
        self._listeners.remove(listener)

    # --- whole-grid operations ---------------------------------------------------

    def regenerate(self) -> None:
        """New random walls, start and end; any search bound to this grid becomes stale."""
        floor = self.rng.random((self.height, self.width)) < self.floor_probability
        self.cells[...] = np.where(floor, CellState.FLOOR.value, CellState.WALL.value)
        self._start = Coordinate(int(self.rng.integers(self.width)), int(self.rng.integers(self.height)))
        self._end = Coordinate(int(self.rng.integers(self.width)), int(self.rng.integers(self.height)))
        self.cells[self._start.y, self._start.x] = CellState.FLOOR.value
        self.cells[self._end.y, self._end.x] = CellState.FLOOR.value
        self.generation += 1
        logger.debug(
            "Regenerated %dx%d grid: %d walls, start=%s end=%s",
            self.width, self.height, self.count(CellState.WALL), tuple(self._start), tuple(self._end),
        )

    def reload(self) -> None:
        """Clears search marks (active/explored back to floor), keeping walls and markers."""
        searched = (self.cells == CellState.ACTIVE.value) | (self.cells == CellState.EXPLORED.value)
        self.cells[searched] = CellState.FLOOR.value
        self.generation += 1

    # --- editing (between runs) --------------------------------------------------

    def move_start(self, coord: Tuple[int, int]) -> None:
        """Moves the start marker; its old cell takes whatever type the destination had."""
        self.start = self._swap_marker(self._start, coord)

    def move_end(self, coord: Tuple[int, int]) -> None:
        """Moves the end marker; its old cell takes whatever type the destination had."""
        self.end = self._swap_marker(self._end, coord)

    def _swap_marker(self, old: Coordinate, new: Tuple[int, int]) -> Coordinate:
        new = self._checked(new)
        displaced = self.cell_at(new)
        self.set_cell(new, CellState.FLOOR)
        self.set_cell(old, displaced)
        return new

    def toggle_wall(self, coord: Tuple[int, int]) -> CellState:
        """Floor becomes wall; any other state becomes floor. Returns the new state.
        The start and end cells cannot be walled; move them instead."""
        coord = self._checked(coord)
        if coord in (self._start, self._end):
            raise ValueError(f"Cannot toggle a wall on marker cell {tuple(coord)}")
        new = CellState.WALL if self.cell_at(coord) is CellState.FLOOR else CellState.FLOOR
        self.set_cell(coord, new)
        self.generation += 1
        return new

    # --- text form ---------------------------------------------------------------

    def to_text(self, path: Optional[Iterable[Tuple[int, int]]] = None) -> str:
        on_path = {Coordinate(*c) for c in path} if path is not None else set()
        lines = []
        for y in range(self.height):
            chars = []
            for x in range(self.width):
                c = Coordinate(x, y)
                if c == self._start:
                    chars.append("S")
                elif c == self._end:
                    chars.append("G")
                elif c in on_path:
                    chars.append("o")
                else:
                    chars.append(_CHARS[CellState(int(self.cells[y, x]))])
            lines.append("".join(chars))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, start={tuple(self._start)}, end={tuple(self._end)})"
