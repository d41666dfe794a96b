"""
Result Module - Outcome of a solve, independent of the algorithm used.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from .errors import PathUnavailable
from .maze import Cell


class Outcome(Enum):
    """How a solve ended."""
    FOUND = "found"
    NO_PATH = "no_path"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class SolveMetrics:
    """
    Performance metrics for a solve.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        cells_expanded: Number of cells expanded
        cells_discovered: Number of distinct cells placed on the frontier
        max_frontier_size: Peak number of cells waiting in the frontier
        strategy_name: Name of strategy that produced the result
    """
    computation_time_ms: float = 0.0
    cells_expanded: int = 0
    cells_discovered: int = 0
    max_frontier_size: int = 0
    strategy_name: str = ""


@dataclass(frozen=True)
class SolveResult:
    """
    Result of a strategy computation.

    Attributes:
        outcome: FOUND, NO_PATH or CANCELLED
        path: Cells from entry to exit inclusive (empty unless FOUND)
        trace: Cells in the order they were expanded
        path_cost: Sum of passage weights along the path
        metrics: Performance statistics
    """
    outcome: Outcome
    path: Tuple[Cell, ...] = ()
    trace: Tuple[Cell, ...] = ()
    path_cost: float = 0.0
    metrics: SolveMetrics = field(default_factory=SolveMetrics)

    @property
    def found(self) -> bool:
        return self.outcome is Outcome.FOUND

    @property
    def steps(self) -> int:
        """Number of cells expanded."""
        return len(self.trace)

    @property
    def path_length(self) -> int:
        """Number of moves along the path (0 if no path)."""
        return max(0, len(self.path) - 1)

    def require_path(self) -> Tuple[Cell, ...]:
        """
        Get the path, insisting that one was found.

        Raises:
            PathUnavailable: If the outcome is not FOUND
        """
        if not self.found:
            raise PathUnavailable(
                f"No path available, solve outcome was {self.outcome.value}"
            )
        return self.path

    def summary(self) -> str:
        """One-line human readable summary."""
        name = self.metrics.strategy_name or "solver"
        if self.found:
            return (f"{name}: path of {self.path_length} steps, "
                    f"{self.steps} cells expanded in "
                    f"{self.metrics.computation_time_ms:.2f}ms")
        return (f"{name}: {self.outcome.value}, {self.steps} cells expanded in "
                f"{self.metrics.computation_time_ms:.2f}ms")


def reconstruct_path(parents: Dict[Cell, Optional[Cell]],
                     entry: Cell, exit: Cell) -> Tuple[Cell, ...]:
    """
    Walk the parent map backward from exit to entry and reverse it.

    Args:
        parents: Parent links recorded during the search
        entry: Entry cell (its parent is None)
        exit: Exit cell

    Returns:
        Tuple of cells from entry to exit inclusive

    Raises:
        PathUnavailable: If the exit was never reached
    """
    if exit not in parents:
        raise PathUnavailable(f"Exit {exit} was never reached")

    path = [exit]
    cell = exit
    while cell != entry:
        cell = parents[cell]
        if cell is None:
            raise PathUnavailable(f"Parent chain from {exit} does not reach {entry}")
        path.append(cell)
    path.reverse()
    return tuple(path)
