"""
Tests for the benchmark runner, the report writer and the grid figures.
"""

import json

import matplotlib.pyplot as plt
import numpy as np
import pytest

from pathfinding_lab.algorithms.registry import make_strategy
from pathfinding_lab.benchmarks import plot_results, run_all
from pathfinding_lab.core.driver import solve
from pathfinding_lab.core.problem import CellState
from pathfinding_lab.plots.plotting import (
    COLORS,
    END_COLOR,
    PATH_COLOR,
    START_COLOR,
    bar_compare,
    draw_grid,
    grid_image,
)
from pathfinding_lab.problems.grid import Grid


@pytest.fixture
def rows():
    return run_all.run_trials(trials=3, width=8, height=6, floor_probability=0.7, seed=5)


class TestRunTrials:

    def test_one_row_per_strategy_and_trial(self, rows):
        assert len(rows) == 3 * 3
        assert {r["algo"] for r in rows} == {"BFS", "GBFS", "A*"}
        assert sorted({r["trial"] for r in rows}) == [0, 1, 2]

    def test_rows_agree_with_reference(self, rows):
        for r in rows:
            assert r["error"] is None
            assert r["success"] == (r["reference_cost"] is not None)
            if r["algo"] == "BFS" and r["success"]:
                assert r["cost"] == r["reference_cost"]

    def test_seeded_runs_repeat(self, rows):
        again = run_all.run_trials(trials=3, width=8, height=6, floor_probability=0.7, seed=5)
        key = lambda r: (r["trial"], r["algo"], r["cost"], r["nodes_expanded"])  # noqa: E731
        assert [key(r) for r in rows] == [key(r) for r in again]

    def test_unknown_strategy_recorded_not_raised(self):
        rows = run_all.run_trials(trials=1, width=5, height=5, seed=0, names=["bfs", "dijkstra"])
        bad = [r for r in rows if r["algo"] == "dijkstra"]
        assert len(bad) == 1
        assert not bad[0]["success"]
        assert "Unknown strategy" in bad[0]["error"]

    def test_write_results(self, rows, tmp_path):
        path = run_all.write_results(rows, tmp_path / "out")
        data = json.loads(path.read_text())
        assert path.name == "results.json"
        assert len(data["results"]) == len(rows)
        assert "ts" in data


class TestReport:

    def test_summarize(self):
        rows = [
            {"algo": "BFS", "success": True, "cost": 7, "reference_cost": 7, "nodes_expanded": 20, "time_s": 0.1},
            {"algo": "BFS", "success": False, "cost": None, "reference_cost": None, "nodes_expanded": 10, "time_s": 0.3},
            {"algo": "GBFS", "success": True, "cost": 9, "reference_cost": 7, "nodes_expanded": 9, "time_s": 0.05},
        ]
        summary = {s["algo"]: s for s in plot_results.summarize(rows)}
        assert summary["BFS"]["runs"] == 2
        assert summary["BFS"]["found"] == 1
        assert summary["BFS"]["optimal"] == 1
        assert summary["BFS"]["mean_cost"] == 7
        assert summary["BFS"]["mean_nodes_expanded"] == 15
        assert summary["GBFS"]["optimal"] == 0

    def test_summarize_no_successes(self):
        rows = [{"algo": "A*", "success": False, "cost": None, "nodes_expanded": None, "time_s": None}]
        (s,) = plot_results.summarize(rows)
        assert s["mean_cost"] is None
        assert s["mean_nodes_expanded"] is None

    def test_main_writes_table_and_charts(self, rows, tmp_path):
        results = run_all.write_results(rows, tmp_path)
        written = plot_results.main(results, tmp_path / "report")
        names = {p.name for p in written}
        assert names == {"results.md", "nodes_expanded.png", "time.png", "cost.png"}
        table = (tmp_path / "report" / "results.md").read_text()
        assert "| BFS |" in table and "| A* |" in table
        assert (tmp_path / "report" / "cost.png").read_bytes().startswith(b"\x89PNG")

    def test_missing_results(self, tmp_path):
        with pytest.raises(SystemExit):
            plot_results.main(tmp_path / "nope.json", tmp_path)


class TestFigures:

    def test_grid_image_colours(self):
        grid = Grid.from_rows(["S#.", "..G"])
        img = grid_image(grid)
        assert img.shape == (2, 3, 3)
        assert tuple(img[0, 1]) == COLORS[CellState.WALL]
        assert tuple(img[0, 0]) == START_COLOR
        assert tuple(img[1, 2]) == END_COLOR

    def test_grid_image_path_under_markers(self):
        grid = Grid.from_rows(["S..", "..G"])
        img = grid_image(grid, path=[(0, 0), (1, 0), (2, 0), (2, 1)])
        assert tuple(img[0, 1]) == PATH_COLOR
        assert tuple(img[0, 0]) == START_COLOR
        assert np.allclose(img[1, 0], COLORS[CellState.FLOOR])

    def test_draw_grid_after_search(self, greedy_trap_grid):
        strategy = make_strategy("astar", greedy_trap_grid)
        result = solve(strategy)
        fig = draw_grid(greedy_trap_grid, result.path, title="A*")
        assert fig.axes[0].get_title() == "A*"
        plt.close(fig)

    def test_bar_compare(self, corridor_grid, disconnected_grid):
        results = [solve(make_strategy("bfs", corridor_grid)), solve(make_strategy("gbfs", disconnected_grid))]
        fig = bar_compare(results, title="cmp")
        assert len(fig.axes) == 4
        plt.close(fig)
