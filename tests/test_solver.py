"""
Tests for the solver strategies.

Covers:
1. Strategy registry and factory
2. Reference scenarios for every strategy
3. Neighbor-order tie-breaks for breadth-first and depth-first search
4. Weighted search
5. Traversal state injection, cancellation and progress reporting
6. Result model and path reconstruction
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from labyrinth.solver import (
    Maze,
    MazeNotReady,
    Outcome,
    PathUnavailable,
    PriorityFrontier,
    SolveContext,
    SolveResult,
    TraversalState,
    create_strategy,
    get_default_strategy_name,
    get_strategy_class,
    get_strategy_info,
    get_strategy_names,
    reconstruct_path,
    register_strategy,
    resolve_strategy_name,
)

ALL_STRATEGIES = ["bfs", "dfs", "dijkstra", "astar"]


def blocked_center_maze() -> Maze:
    """3x3 grid, every wall open except (1,1)-(1,2)."""
    maze = Maze.open_grid(3, 3, entry=(0, 0), exit=(2, 2))
    maze.close_wall((1, 1), (1, 2))
    return maze


def test_registry():
    names = get_strategy_names()
    for name in ALL_STRATEGIES:
        assert name in names
    assert get_default_strategy_name() == "bfs"

    info = {item["name"]: item["description"] for item in get_strategy_info()}
    assert set(ALL_STRATEGIES) <= set(info)
    assert all(info[name] for name in ALL_STRATEGIES)


def test_unknown_strategy():
    with pytest.raises(ValueError, match="Unknown strategy"):
        create_strategy("teleport")


@pytest.mark.parametrize("alias,name", [
    ("BFS", "bfs"),
    (" bfs ", "bfs"),
    ("breadth-first", "bfs"),
    ("breath-first", "bfs"),
    ("Depth-First", "dfs"),
    ("uniform-cost", "dijkstra"),
    ("A*", "astar"),
    ("a-star", "astar"),
])
def test_strategy_aliases(alias, name):
    assert resolve_strategy_name(alias) == name
    assert get_strategy_class(alias) is get_strategy_class(name)
    assert create_strategy(alias).name == name


def test_aliases_are_not_listed_as_names():
    names = get_strategy_names()
    assert "a*" not in names
    assert "breadth-first" not in names

    info = {item["name"]: item for item in get_strategy_info()}
    assert "a*" in info["astar"]["aliases"]
    assert info["dijkstra"]["weighted"]
    assert info["astar"]["weighted"]
    assert not info["bfs"]["weighted"]
    assert not info["dfs"]["weighted"]


def test_duplicate_registration_is_rejected():
    bfs_class = get_strategy_class("bfs")

    with pytest.raises(ValueError, match="already used"):
        @register_strategy
        class Impostor(bfs_class):
            name = "impostor"
            aliases = ("Breadth-First",)

    with pytest.raises(ValueError):
        resolve_strategy_name("impostor")
    assert get_strategy_class("breadth-first") is bfs_class


def test_bfs_avoids_closed_wall():
    maze = blocked_center_maze()
    result = create_strategy("bfs").solve(maze)

    assert result.outcome is Outcome.FOUND
    assert len(result.path) == 5
    assert result.path_length == 4
    assert result.path[0] == (0, 0)
    assert result.path[-1] == (2, 2)
    assert maze.is_valid_path(result.path)

    steps = set(zip(result.path, result.path[1:]))
    assert ((1, 1), (1, 2)) not in steps
    assert ((1, 2), (1, 1)) not in steps


@pytest.mark.parametrize("name", ALL_STRATEGIES)
def test_reference_scenario_every_strategy(name):
    maze = blocked_center_maze()
    result = create_strategy(name).solve(maze)

    assert result.found
    assert maze.is_valid_path(result.path)
    assert result.path[0] == maze.entry
    assert result.path[-1] == maze.exit
    assert result.trace[0] == maze.entry
    assert result.trace[-1] == maze.exit
    assert result.metrics.strategy_name == name


@pytest.mark.parametrize("name", ALL_STRATEGIES)
def test_no_walls_means_no_path(name):
    maze = Maze(2, 2)
    maze.set_entry((0, 0))
    maze.set_exit((1, 1))

    result = create_strategy(name).solve(maze)

    assert result.outcome is Outcome.NO_PATH
    assert not result.found
    assert result.path == ()
    assert result.path_length == 0
    assert result.trace == ((0, 0),)
    with pytest.raises(PathUnavailable):
        result.require_path()


def test_bfs_tie_break_follows_neighbor_order():
    maze = Maze.open_grid(2, 2, entry=(0, 0), exit=(1, 1))
    result = create_strategy("bfs").solve(maze)

    # East is enumerated before South, so (0, 1) discovers the exit first
    assert result.path == ((0, 0), (0, 1), (1, 1))
    assert result.trace == ((0, 0), (0, 1), (1, 0), (1, 1))
    assert result.steps == 4


def test_dfs_explores_north_first():
    maze = Maze.open_grid(3, 3, entry=(1, 1), exit=(2, 1))
    result = create_strategy("dfs").solve(maze)

    assert result.trace[:2] == ((1, 1), (0, 1))
    assert maze.is_valid_path(result.path)
    assert result.path[-1] == (2, 1)


def test_dfs_handles_long_corridor():
    # Far deeper than the default recursion limit
    length = 5000
    maze = Maze.open_grid(length, 1, entry=(0, 0), exit=(0, length - 1))

    result = create_strategy("dfs").solve(maze)

    assert result.found
    assert result.path_length == length - 1
    assert result.steps == length


@pytest.mark.parametrize("name", ["dijkstra", "astar"])
def test_weighted_search_prefers_cheap_passages(name):
    maze = Maze.open_grid(2, 2, entry=(0, 0), exit=(1, 1))
    maze.close_wall((0, 0), (0, 1))
    maze.open_wall((0, 0), (0, 1), weight=5)

    result = create_strategy(name).solve(maze)

    assert result.path == ((0, 0), (1, 0), (1, 1))
    assert result.path_cost == 2.0


def test_bfs_ignores_weights():
    maze = Maze.open_grid(2, 2, entry=(0, 0), exit=(1, 1))
    maze.open_wall((0, 0), (0, 1), weight=5)

    result = create_strategy("bfs").solve(maze)

    assert result.path == ((0, 0), (0, 1), (1, 1))
    assert result.path_cost == 6.0
    assert result.path_length == 2


def test_astar_expands_no_more_than_dijkstra():
    maze = Maze.open_grid(15, 15, entry=(0, 0), exit=(14, 14))
    dijkstra = create_strategy("dijkstra").solve(maze)
    astar = create_strategy("astar").solve(maze)

    assert dijkstra.path_cost == astar.path_cost == 28
    assert astar.steps <= dijkstra.steps


@pytest.mark.parametrize("name", ALL_STRATEGIES)
def test_solve_does_not_mutate_maze(name):
    maze = blocked_center_maze()
    snapshot = maze.copy()

    create_strategy(name).solve(maze)

    assert maze == snapshot


def test_solve_requires_entry_and_exit():
    maze = Maze.open_grid(2, 2)
    with pytest.raises(MazeNotReady):
        create_strategy("bfs").solve(maze)

    maze.set_entry((0, 0))
    with pytest.raises(MazeNotReady):
        create_strategy("bfs").solve(maze)


def test_injected_state_is_used():
    maze = blocked_center_maze()
    strategy = create_strategy("bfs")
    state = strategy.create_state()

    result = strategy.solve(maze, state=state)

    assert tuple(state.trace) == result.trace
    assert state.parents[maze.entry] is None
    assert set(result.path) <= set(state.parents)


def test_used_state_is_rejected():
    maze = blocked_center_maze()
    strategy = create_strategy("bfs")
    state = strategy.create_state()
    strategy.solve(maze, state=state)

    with pytest.raises(ValueError):
        strategy.solve(maze, state=state)


@pytest.mark.parametrize("name", ["dfs", "dijkstra", "astar"])
def test_state_with_wrong_frontier_is_rejected(name):
    maze = blocked_center_maze()
    state = TraversalState()

    with pytest.raises(ValueError, match="FifoFrontier"):
        create_strategy(name).solve(maze, state=state)
    assert state.is_fresh


def test_state_with_matching_frontier_is_accepted():
    maze = Maze(3, 2)
    maze.set_entry((0, 0))
    maze.set_exit((0, 2))
    maze.open_wall((0, 0), (0, 1), weight=5)
    maze.open_wall((0, 1), (0, 2), weight=5)
    maze.open_wall((0, 0), (1, 0))
    maze.open_wall((1, 0), (1, 1))
    maze.open_wall((1, 1), (1, 2))
    maze.open_wall((1, 2), (0, 2))
    state = TraversalState(frontier=PriorityFrontier())

    result = create_strategy("dijkstra").solve(maze, state=state)

    assert result.path == ((0, 0), (1, 0), (1, 1), (1, 2), (0, 2))
    assert result.path_cost == 4


def test_traversal_state_first_discovery_wins():
    state = TraversalState()
    assert state.is_fresh
    assert state.record_parent((1, 1), (0, 1))
    assert not state.record_parent((1, 1), (1, 0))
    assert state.parents[(1, 1)] == (0, 1)

    assert state.mark_visited((1, 1))
    assert not state.mark_visited((1, 1))
    assert state.trace == [(1, 1)]
    assert not state.is_fresh


@pytest.mark.parametrize("name", ALL_STRATEGIES)
def test_cancelled_solve(name):
    maze = Maze.open_grid(10, 10, entry=(0, 0), exit=(9, 9))
    context = SolveContext()
    context.cancel()

    result = create_strategy(name).solve(maze, context=context)

    assert result.outcome is Outcome.CANCELLED
    assert result.path == ()
    assert result.steps == 0


def test_cancel_from_progress_callback():
    maze = Maze.open_grid(10, 10, entry=(0, 0), exit=(9, 9))
    context = SolveContext()

    def stop_after_five(percent, message):
        if len(seen) == 4:
            context.cancel()
        seen.append(percent)

    seen = []
    context.progress_callback = stop_after_five

    result = create_strategy("bfs").solve(maze, context=context)

    assert result.outcome is Outcome.CANCELLED
    assert result.steps == 5


def test_progress_reports():
    maze = Maze.open_grid(4, 4, entry=(0, 0), exit=(3, 3))
    updates = []
    context = SolveContext(progress_callback=lambda p, m: updates.append((p, m)))

    result = create_strategy("bfs").solve(maze, context=context)

    assert len(updates) == result.steps
    fractions = [p for p, _ in updates]
    assert fractions == sorted(fractions)
    assert 0 < fractions[-1] <= 1.0
    assert updates[0][1] == "1 cells expanded"


def test_context_timeout():
    context = SolveContext(timeout_sec=0.0, start_time=0.0)
    assert context.is_cancelled()
    assert not SolveContext().is_cancelled()


def test_metrics():
    maze = blocked_center_maze()
    result = create_strategy("bfs").solve(maze)

    metrics = result.metrics
    assert metrics.cells_expanded == result.steps
    assert metrics.cells_discovered >= metrics.cells_expanded
    assert metrics.max_frontier_size >= 1
    assert metrics.computation_time_ms >= 0
    assert "bfs: path of 4 steps" in result.summary()


@pytest.mark.parametrize("name", ALL_STRATEGIES)
def test_discovered_counts_frontier_cells(name):
    maze = Maze.open_grid(5, 5, entry=(0, 0), exit=(4, 4))
    strategy = create_strategy(name)
    state = strategy.create_state()

    result = strategy.solve(maze, state=state)

    assert result.metrics.cells_discovered == len(state.discovered)
    assert result.metrics.cells_discovered >= result.metrics.cells_expanded
    assert set(result.trace) <= state.discovered


def test_dijkstra_discovers_more_than_it_expands():
    # The exit is expanded while (1, 0) is still waiting on the frontier
    maze = Maze.open_grid(4, 4, entry=(0, 0), exit=(0, 1))
    result = create_strategy("dijkstra").solve(maze)

    assert result.trace == ((0, 0), (0, 1))
    assert result.metrics.cells_discovered > result.metrics.cells_expanded
    assert result.metrics.cells_discovered == 3


def test_reconstruct_path():
    parents = {(0, 0): None, (0, 1): (0, 0), (1, 1): (0, 1)}
    assert reconstruct_path(parents, (0, 0), (1, 1)) == ((0, 0), (0, 1), (1, 1))

    with pytest.raises(PathUnavailable):
        reconstruct_path(parents, (0, 0), (2, 2))


def test_result_is_immutable():
    result = SolveResult(outcome=Outcome.NO_PATH)
    with pytest.raises(AttributeError):
        result.path = ((0, 0),)
