"""
Base Strategy Module - Abstract base class for maze solving strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Tuple

from .context import SolveContext
from .errors import MazeNotReady
from .maze import Cell, Maze
from .result import Outcome, SolveMetrics, SolveResult, reconstruct_path
from .state import FifoFrontier, Frontier, TraversalState

logger = logging.getLogger(__name__)


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    solve() is the public entry point: it validates the maze, sets up a
    fresh TraversalState, runs _search() and packages the outcome. The maze
    is only read. Subclasses implement _search() and pick the frontier.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for listings
        weighted: True if the strategy honours passage weights
        aliases: Other names the factory accepts for this strategy
    """
    name: str = "base"
    description: str = "Base strategy"
    weighted: bool = False
    aliases: Tuple[str, ...] = ()

    def solve(self, maze: Maze, context: Optional[SolveContext] = None,
              state: Optional[TraversalState] = None) -> SolveResult:
        """
        Search a path from the maze entry to its exit.

        Args:
            maze: Maze to solve, with entry and exit set
            context: Optional cancellation/progress hooks
            state: Optional fresh traversal state (injected for tests)

        Returns:
            SolveResult describing the outcome

        Raises:
            MazeNotReady: If entry or exit is missing
            ValueError: If an injected state was already used or its
                frontier does not match this strategy
        """
        if maze.entry is None or maze.exit is None:
            raise MazeNotReady("Maze entry and exit must be set before solving")
        if state is None:
            state = self.create_state()
        elif not state.is_fresh:
            raise ValueError("Traversal state must be fresh for each solve")
        else:
            expected = type(self.create_frontier())
            if not isinstance(state.frontier, expected):
                raise ValueError(
                    f"{self.name} needs a {expected.__name__}, "
                    f"got {type(state.frontier).__name__}"
                )

        start_time = time.perf_counter()
        outcome = self._search(maze, state, context)

        path = ()
        path_cost = 0.0
        if outcome is Outcome.FOUND:
            path = reconstruct_path(state.parents, maze.entry, maze.exit)
            path_cost = sum(maze.weight(a, b) for a, b in zip(path, path[1:]))

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        result = SolveResult(
            outcome=outcome,
            path=path,
            trace=tuple(state.trace),
            path_cost=path_cost,
            metrics=SolveMetrics(
                computation_time_ms=elapsed_ms,
                cells_expanded=len(state.visited),
                cells_discovered=len(state.discovered),
                max_frontier_size=state.max_frontier,
                strategy_name=self.name,
            ),
        )
        logger.debug(result.summary())
        return result

    def create_state(self) -> TraversalState:
        """Create a fresh traversal state using this strategy's frontier."""
        return TraversalState(frontier=self.create_frontier())

    @abstractmethod
    def create_frontier(self) -> Frontier:
        """Create the frontier that defines the expansion order."""
        pass

    @abstractmethod
    def _search(self, maze: Maze, state: TraversalState,
                context: Optional[SolveContext]) -> Outcome:
        """
        Expand cells until the exit is expanded or the frontier is empty.

        Must poll _check_cancelled() between expansions.

        Returns:
            Outcome of the search
        """
        pass

    def _check_cancelled(self, context: Optional[SolveContext]) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Solve context, may be None

        Returns:
            True if strategy should stop
        """
        return context is not None and context.is_cancelled()

    def _report(self, context: Optional[SolveContext], maze: Maze,
                state: TraversalState) -> None:
        if context is None:
            return
        context.report_progress(
            len(state.visited) / maze.cell_count,
            f"{len(state.visited)} cells expanded"
        )


class FrontierSearch(SolverStrategy):
    """
    Uninformed graph search driven by the frontier discipline.

    Loop: pop frontier -> mark visited -> check goal -> enqueue
    undiscovered neighbors. Every cell receives a parent link at most once
    and is expanded at most once, so the loop terminates on any maze,
    including mazes whose open walls form cycles.
    """
    name = "frontier"
    description = "Generic frontier search"

    def create_frontier(self) -> Frontier:
        return FifoFrontier()

    def order_neighbors(self, neighbors: Iterable[Cell]) -> Iterable[Cell]:
        """Order in which discovered neighbors are pushed on the frontier."""
        return neighbors

    def _search(self, maze: Maze, state: TraversalState,
                context: Optional[SolveContext]) -> Outcome:
        state.record_parent(maze.entry, None)
        state.enqueue(maze.entry)

        while state.frontier:
            if self._check_cancelled(context):
                return Outcome.CANCELLED

            cell, _ = state.frontier.pop()
            if not state.mark_visited(cell):
                continue
            self._report(context, maze, state)

            if cell == maze.exit:
                return Outcome.FOUND

            for neighbor in self.order_neighbors(maze.neighbors(cell)):
                if neighbor in state.visited:
                    continue
                if state.record_parent(neighbor, cell):
                    state.enqueue(neighbor)

        return Outcome.NO_PATH
