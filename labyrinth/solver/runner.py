"""
Runner Module - Solve one maze with several strategies in parallel.

The maze is frozen before any worker starts, so all threads share it
read-only. Each strategy instance creates its own traversal state.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Optional

from .context import SolveContext
from .factory import create_strategy, get_strategy_names
from .maze import Maze
from .result import SolveResult

logger = logging.getLogger(__name__)


def solve_all(
    maze: Maze,
    names: Optional[List[str]] = None,
    max_workers: Optional[int] = None,
    context_factory: Optional[Callable[[str], SolveContext]] = None,
) -> Dict[str, SolveResult]:
    """
    Run several strategies over the same maze concurrently.

    Args:
        maze: Maze to solve; frozen by this call
        names: Strategy names (default: every registered strategy)
        max_workers: Thread pool size (default: one per strategy)
        context_factory: Optional callable building a context per strategy

    Returns:
        Dict of strategy name -> SolveResult, in the order of names

    Raises:
        ValueError: If a strategy name is unknown
    """
    if names is None:
        names = get_strategy_names()
    strategies = {name: create_strategy(name) for name in names}
    maze.freeze()

    if not strategies:
        return {}

    logger.debug(f"Solving {maze!r} with {', '.join(strategies)}")
    workers = max_workers or len(strategies)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {
            name: pool.submit(
                strategy.solve,
                maze,
                context_factory(name) if context_factory else None,
            )
            for name, strategy in strategies.items()
        }
        return {name: future.result() for name, future in futures.items()}
