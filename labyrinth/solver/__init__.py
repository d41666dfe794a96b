"""
Solver Package - Maze model and pluggable pathfinding strategies.

This package provides the grid model of a maze and a strategy framework for
finding a path from its entry to its exit. Strategies are selected by name
and never modify the maze, so one maze can be solved by many strategies at
once.

Public API:
    - Maze: Grid model with symmetric wall openings
    - Direction: Neighbor directions in enumeration order
    - TraversalState: Per-solve frontier, visited set and parent links
    - SolveResult: Outcome, path, expansion trace and metrics
    - SolveMetrics: Performance statistics
    - SolveContext: Cancellation and progress hooks
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata
    - solve_all(): Run several strategies concurrently

Usage:
    from labyrinth.solver import Maze, create_strategy

    maze = Maze.open_grid(3, 3, entry=(0, 0), exit=(2, 2))
    maze.close_wall((1, 1), (1, 2))

    strategy = create_strategy("bfs")
    result = strategy.solve(maze)

    if result.found:
        print(f"{result.path_length} steps: {result.path}")
"""

# Core data structures
from .errors import (
    MazeError,
    InvalidDimensions,
    OutOfBounds,
    NotAdjacent,
    EntryExitCollision,
    MazeFrozen,
    MazeNotReady,
    MazeParseError,
    PathUnavailable,
)
from .maze import Cell, Direction, Maze
from .state import (
    Frontier,
    FifoFrontier,
    LifoFrontier,
    PriorityFrontier,
    TraversalState,
)
from .result import Outcome, SolveMetrics, SolveResult, reconstruct_path
from .context import SolveContext

# Strategy framework
from .base import SolverStrategy, FrontierSearch
from .factory import (
    create_strategy,
    get_strategy_class,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
    resolve_strategy_name,
)
from .runner import solve_all

# Import strategies to register them
from . import strategies

__all__ = [
    # Errors
    "MazeError",
    "InvalidDimensions",
    "OutOfBounds",
    "NotAdjacent",
    "EntryExitCollision",
    "MazeFrozen",
    "MazeNotReady",
    "MazeParseError",
    "PathUnavailable",
    # Data structures
    "Cell",
    "Direction",
    "Maze",
    "Frontier",
    "FifoFrontier",
    "LifoFrontier",
    "PriorityFrontier",
    "TraversalState",
    "Outcome",
    "SolveMetrics",
    "SolveResult",
    "reconstruct_path",
    "SolveContext",
    # Strategy framework
    "SolverStrategy",
    "FrontierSearch",
    "create_strategy",
    "get_strategy_class",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "resolve_strategy_name",
    "solve_all",
]
