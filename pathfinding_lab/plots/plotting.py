# pathfinding_lab/plots/plotting.py
# Static matplotlib figures: a 2x2 bar comparison of solve results, and a snapshot of a grid's
# cell states with start, end and (optionally) the path drawn on top.
from __future__ import annotations
import math

import matplotlib.pyplot as plt
import numpy as np

from ..core.problem import CellState

# RGB per cell state; start/end/path are painted over these
COLORS = {
    CellState.FLOOR: (1.0, 1.0, 1.0),
    CellState.WALL: (0.0, 0.0, 0.0),
    CellState.ACTIVE: (1.0, 0.85, 0.1),
    CellState.EXPLORED: (0.6, 0.6, 0.6),
}
START_COLOR = (0.2, 0.7, 0.2)
END_COLOR = (0.85, 0.15, 0.15)
PATH_COLOR = (0.5, 0.1, 0.6)


def bar_compare(results, title="Search Comparison"):
    names = [r.algo for r in results]
    nodes = [r.nodes_expanded for r in results]
    costs = [r.cost if math.isfinite(r.cost) else 0 for r in results]
    times = [r.time_s for r in results]
    mems  = [r.peak_kb or 0 for r in results]

    fig, axs = plt.subplots(2, 2, figsize=(11,8))
    axs = axs.ravel()
    axs[0].bar(names, nodes); axs[0].set_title("Nodes Expanded")
    axs[1].bar(names, costs); axs[1].set_title("Path Length (0 = no path)")
    axs[2].bar(names, times); axs[2].set_title("Time (s)")
    axs[3].bar(names, mems); axs[3].set_title("Peak Memory (KB)")
    fig.suptitle(title)
    fig.tight_layout(rect=[0,0,1,0.95])
    return fig


def grid_image(grid, path=None):
    """(height, width, 3) float image of the grid, indexed [y, x]."""
    img = np.zeros((grid.height, grid.width, 3), dtype=float)
    for state, rgb in COLORS.items():
        img[grid.cells == state.value] = rgb
    for x, y in path or []:
        img[y, x] = PATH_COLOR
    sx, sy = grid.start
    ex, ey = grid.end
    img[sy, sx] = START_COLOR
    img[ey, ex] = END_COLOR
    return img


def draw_grid(grid, path=None, title="", ax=None):
    if ax is None:
        fig, ax = plt.subplots(figsize=(max(4, grid.width / 4), max(3, grid.height / 4)))
    else:
        fig = ax.figure
    ax.imshow(grid_image(grid, path), interpolation="nearest")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title)
    return fig
