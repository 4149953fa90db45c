"""
Pytest configuration and shared fixtures.

Layouts are written one string per row: '.' floor, '#' wall, 'S' start, 'G' end.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from pathfinding_lab.algorithms.registry import make_strategy
from pathfinding_lab.problems.grid import Grid

# Greedy runs down the corridor next to the goal and has to wind around it (9 steps);
# the shortest route goes over the top (7 steps).
GREEDY_TRAP = [
    ".....",
    "S###.",
    "...#G",
    "##.#.",
    ".....",
]

# Only one route from S to G, 11 steps long.
CORRIDOR = [
    "S.#...",
    "#.#.#.",
    "#...#G",
]

# Middle row walled off: no route from the top row to the bottom row.
DISCONNECTED = [
    "S..",
    "###",
    "G..",
]


@pytest.fixture
def greedy_trap_grid() -> Grid:
    return Grid.from_rows(GREEDY_TRAP)


@pytest.fixture
def corridor_grid() -> Grid:
    return Grid.from_rows(CORRIDOR)


@pytest.fixture
def disconnected_grid() -> Grid:
    return Grid.from_rows(DISCONNECTED)


@pytest.fixture
def open_grid() -> Grid:
    """4x4 without walls, start top-left, end bottom-right."""
    return Grid.from_rows(["S...", "....", "....", "...G"])


@pytest.fixture(params=["bfs", "gbfs", "astar"])
def strategy_name(request) -> str:
    """Runs the test once per strategy."""
    return request.param


@pytest.fixture
def run_to_end():
    """Steps a strategy until it ends; returns the list of outcomes, one per step."""
    def _run(strategy, limit=10_000):
        outcomes = []
        while not strategy.ended:
            outcomes.append(strategy.step())
            assert len(outcomes) <= limit, "strategy did not terminate"
        return outcomes
    return _run


@pytest.fixture
def solve_named(run_to_end):
    """Builds the named strategy on a grid and runs it to the end."""
    def _solve(name, grid):
        strategy = make_strategy(name, grid)
        outcomes = run_to_end(strategy)
        return strategy, outcomes
    return _solve
