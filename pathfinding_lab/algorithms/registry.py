# pathfinding_lab/algorithms/registry.py
# Maps strategy tags to constructors so callers can pick a search by name.
from __future__ import annotations
from typing import Callable, Dict, List
from ..core.problem import GridLike, SearchStrategy
from .astar import a_star_search
from .bfs import BreadthFirstSearch
from .greedy import greedy_best_first_search

StrategyFactory = Callable[[GridLike], SearchStrategy]

STRATEGIES: Dict[str, StrategyFactory] = {
    "bfs": BreadthFirstSearch,
    "gbfs": greedy_best_first_search,
    "astar": a_star_search,
}

_ALIASES = {"greedy": "gbfs", "a*": "astar", "a_star": "astar", "breadth_first": "bfs"}


def strategy_names() -> List[str]:
    return list(STRATEGIES)


def make_strategy(name: str, grid: GridLike) -> SearchStrategy:
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        factory = STRATEGIES[key]
    except KeyError:
        raise ValueError(f"Unknown strategy {name!r}; choose one of {', '.join(STRATEGIES)}") from None
    return factory(grid)
