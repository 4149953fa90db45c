from collections import deque

from ..core.problem import CellState


def shortest_path_length(grid):
    """
    Reference breadth-first search over every non-wall cell, independent of the stepwise
    strategies and of their cell marks. The end cell counts as reachable whatever its state.
    Returns the number of edges on a shortest start-to-end path, or None if there is none.
    """
    start, end = grid.start, grid.end
    if start == end:
        return 0
    dist = {start: 0}
    q = deque([start])
    while q:
        c = q.popleft()
        for n in grid.neighbors_of(c):
            if n in dist:
                continue
            if n == end:
                return dist[c] + 1
            if grid.cell_at(n) is CellState.WALL:
                continue
            dist[n] = dist[c] + 1
            q.append(n)
    return None


def sanity_check_grid(grid):
    """Checks dimensions, marker bounds and stored cell values; raises AssertionError on the first problem."""
    if grid.cells.shape != (grid.height, grid.width):
        raise AssertionError(f"cells shape {grid.cells.shape} != ({grid.height}, {grid.width})")
    for name, c in (("start", grid.start), ("end", grid.end)):
        if not grid.in_bounds(c):
            raise AssertionError(f"{name} {tuple(c)} is outside the grid")
    valid = {s.value for s in CellState}
    bad = set(int(v) for v in set(grid.cells.ravel().tolist())) - valid
    if bad:
        raise AssertionError(f"cells hold values that are not CellStates: {sorted(bad)}")
    return f"OK: {grid.width}x{grid.height}, {grid.count(CellState.WALL)} walls, start={tuple(grid.start)}, end={tuple(grid.end)}"
