"""
Tests for running several strategies over one maze concurrently.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from labyrinth.solver import (
    Maze,
    MazeFrozen,
    SolveContext,
    create_strategy,
    get_strategy_names,
    solve_all,
)


def corridor_maze() -> Maze:
    maze = Maze.open_grid(12, 12, entry=(0, 0), exit=(11, 11))
    for r in range(11):
        maze.close_wall((r, 5), (r, 6))
    return maze


def test_solve_all_matches_sequential_results():
    maze = corridor_maze()
    sequential = {
        name: create_strategy(name).solve(maze.copy())
        for name in get_strategy_names()
    }

    results = solve_all(maze)

    assert list(results) == get_strategy_names()
    for name, result in results.items():
        assert result.found
        assert result.path == sequential[name].path
        assert result.trace == sequential[name].trace


def test_solve_all_freezes_maze():
    maze = corridor_maze()
    solve_all(maze, ["bfs"])

    assert maze.frozen
    with pytest.raises(MazeFrozen):
        maze.open_wall((0, 5), (0, 6))


def test_solve_all_selected_names_in_order():
    results = solve_all(corridor_maze(), ["astar", "bfs"], max_workers=1)
    assert list(results) == ["astar", "bfs"]
    assert results["astar"].path_length == results["bfs"].path_length


def test_solve_all_with_contexts():
    contexts = {}

    def make_context(name):
        contexts[name] = SolveContext()
        if name == "dfs":
            contexts[name].cancel()
        return contexts[name]

    results = solve_all(corridor_maze(), ["bfs", "dfs"],
                        context_factory=make_context)

    assert set(contexts) == {"bfs", "dfs"}
    assert results["bfs"].found
    assert not results["dfs"].found


def test_solve_all_unknown_name():
    maze = corridor_maze()
    with pytest.raises(ValueError):
        solve_all(maze, ["bfs", "nope"])
    assert not maze.frozen
