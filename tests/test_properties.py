"""
Properties checked over many seeded random grids, square and not.
"""

from collections import Counter

import pytest

from pathfinding_lab.algorithms.registry import make_strategy
from pathfinding_lab.core.problem import CellState, StepOutcome
from pathfinding_lab.core.utils import is_connected_path
from pathfinding_lab.problems.checks import shortest_path_length
from pathfinding_lab.problems.grid import Grid

SHAPES = [(8, 8), (12, 5), (5, 12), (20, 10)]
SEEDS = range(30)


def _random_grids():
    for width, height in SHAPES:
        for seed in SEEDS:
            yield Grid(width, height, floor_probability=0.6, seed=seed)


class _Recorder:
    """Listener that tags every cell change with the step it happened in."""

    def __init__(self):
        self.step = 0
        self.changes = []

    def __call__(self, coord, old, new):
        self.changes.append((self.step, coord, old, new))


def _run(name, grid):
    recorder = _Recorder()
    grid.add_listener(recorder)
    strategy = make_strategy(name, grid)
    outcomes = []
    while not strategy.ended:
        recorder.step += 1
        outcomes.append(strategy.step())
        assert len(outcomes) <= grid.width * grid.height + 1, "strategy did not terminate"
    grid.remove_listener(recorder)
    return strategy, outcomes, recorder.changes


@pytest.mark.parametrize("name", ["bfs", "gbfs", "astar"])
class TestRandomGrids:

    def test_terminates_within_grid_size(self, name):
        for grid in _random_grids():
            strategy, outcomes, _ = _run(name, grid)
            assert strategy.expansions <= grid.width * grid.height
            assert outcomes[-1].is_terminal
            assert all(o is StepOutcome.CONTINUED for o in outcomes[:-1])

    def test_found_exactly_when_reachable(self, name):
        for grid in _random_grids():
            reference = shortest_path_length(grid)
            strategy, outcomes, _ = _run(name, grid)
            if reference is None:
                assert outcomes[-1] is StepOutcome.EXHAUSTED, repr(grid)
                assert strategy.path() is None
            else:
                assert outcomes[-1] is StepOutcome.FOUND, repr(grid)
                assert len(strategy.path()) - 1 >= reference

    def test_path_is_walkable(self, name):
        for grid in _random_grids():
            strategy, _, _ = _run(name, grid)
            path = strategy.path()
            if path is None:
                continue
            assert path[0] == grid.start
            assert path[-1] == grid.end
            assert is_connected_path(path)
            assert len(set(path)) == len(path)
            for c in path[1:-1]:
                assert grid.cell_at(c) is not CellState.WALL

    def test_cell_marks_only_move_forward(self, name):
        """
        floor -> active -> explored, plus the start going straight to explored; the only
        way back is active -> floor next to the goal on the final, successful step.
        """
        for grid in _random_grids():
            strategy, outcomes, changes = _run(name, grid)
            last_step = len(outcomes)
            reverted = Counter()
            for step, coord, old, new in changes:
                assert old is not CellState.EXPLORED
                assert CellState.WALL not in (old, new)
                if (old, new) == (CellState.FLOOR, CellState.EXPLORED):
                    assert coord == grid.start and step == 1
                elif (old, new) == (CellState.ACTIVE, CellState.FLOOR):
                    assert outcomes[-1] is StepOutcome.FOUND
                    assert step == last_step
                    discoverer = strategy.found_node.predecessor
                    assert coord in grid.neighbors_of(discoverer.coordinate)
                    reverted[coord] += 1
                else:
                    assert (old, new) in {
                        (CellState.FLOOR, CellState.ACTIVE),
                        (CellState.ACTIVE, CellState.EXPLORED),
                    }
            assert all(n == 1 for n in reverted.values())


class TestBreadthFirstOptimal:

    def test_bfs_matches_reference(self):
        for grid in _random_grids():
            reference = shortest_path_length(grid)
            strategy, _, _ = _run("bfs", grid)
            if reference is None:
                assert strategy.path() is None
            else:
                assert len(strategy.path()) - 1 == reference, repr(grid)

    def test_best_first_steps_equal_expansions(self):
        for grid in _random_grids():
            for name in ("gbfs", "astar"):
                grid.reload()
                strategy, outcomes, _ = _run(name, grid)
                assert strategy.expansions == len(outcomes) == strategy.steps

    def test_strategies_agree_on_reachability(self):
        for grid in _random_grids():
            results = []
            for name in ("bfs", "gbfs", "astar"):
                grid.reload()
                _, outcomes, _ = _run(name, grid)
                results.append(outcomes[-1])
            assert len(set(results)) == 1, repr(grid)
