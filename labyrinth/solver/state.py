"""
Traversal State Module - Per-solve bookkeeping kept apart from the maze.

Each solve owns one TraversalState: the frontier of discovered cells, the
set of expanded cells, the parent links used for path reconstruction and the
expansion trace. The frontier discipline is what tells search strategies
apart: FIFO for breadth-first, LIFO for depth-first, priority for weighted.
"""

import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, List, Optional, Set, Tuple

from .maze import Cell


class Frontier(ABC):
    """Collection of cells awaiting expansion."""

    @abstractmethod
    def push(self, cell: Cell, priority: float = 0.0,
             payload: Any = None) -> None:
        """Add a cell. Priority and payload are ignored by unordered frontiers."""
        pass

    @abstractmethod
    def pop(self) -> Tuple[Cell, Any]:
        """Remove the next cell to expand. Returns (cell, payload)."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __bool__(self) -> bool:
        return len(self) > 0


class FifoFrontier(Frontier):
    """First-in first-out queue (breadth-first)."""

    def __init__(self):
        self._items: Deque[Tuple[Cell, Any]] = deque()

    def push(self, cell: Cell, priority: float = 0.0,
             payload: Any = None) -> None:
        self._items.append((cell, payload))

    def pop(self) -> Tuple[Cell, Any]:
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class LifoFrontier(Frontier):
    """Explicit stack (depth-first)."""

    def __init__(self):
        self._items: List[Tuple[Cell, Any]] = []

    def push(self, cell: Cell, priority: float = 0.0,
             payload: Any = None) -> None:
        self._items.append((cell, payload))

    def pop(self) -> Tuple[Cell, Any]:
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class PriorityFrontier(Frontier):
    """
    Min-heap ordered by priority.

    Equal priorities pop in insertion order, which keeps weighted searches
    deterministic.
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, Cell, Any]] = []
        self._counter = itertools.count()

    def push(self, cell: Cell, priority: float = 0.0,
             payload: Any = None) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), cell, payload))

    def pop(self) -> Tuple[Cell, Any]:
        _, _, cell, payload = heapq.heappop(self._heap)
        return cell, payload

    def __len__(self) -> int:
        return len(self._heap)


@dataclass
class TraversalState:
    """
    Mutable state of a single solve.

    Attributes:
        frontier: Cells discovered but not yet expanded
        visited: Cells already expanded (only grows)
        parents: Cell -> cell it was reached from (entry maps to None)
        discovered: Cells ever placed on the frontier
        trace: Expanded cells in expansion order
        max_frontier: Largest frontier size seen
    """
    frontier: Frontier = field(default_factory=FifoFrontier)
    visited: Set[Cell] = field(default_factory=set)
    parents: Dict[Cell, Optional[Cell]] = field(default_factory=dict)
    discovered: Set[Cell] = field(default_factory=set)
    trace: List[Cell] = field(default_factory=list)
    max_frontier: int = 0

    @property
    def is_fresh(self) -> bool:
        """True if nothing has been discovered or expanded yet."""
        return (not self.frontier and not self.visited and not self.discovered
                and not self.parents and not self.trace)

    def record_parent(self, cell: Cell, parent: Optional[Cell]) -> bool:
        """
        Record where a cell was discovered from. First discovery wins.

        Returns:
            True if the link was recorded, False if the cell already had one
        """
        if cell in self.parents:
            return False
        self.parents[cell] = parent
        return True

    def mark_visited(self, cell: Cell) -> bool:
        """
        Mark a cell as expanded and append it to the trace.

        Returns:
            False if the cell was already expanded
        """
        if cell in self.visited:
            return False
        self.visited.add(cell)
        self.trace.append(cell)
        return True

    def enqueue(self, cell: Cell, priority: float = 0.0,
                payload: Any = None) -> None:
        """Push onto the frontier and track its peak size."""
        self.frontier.push(cell, priority, payload)
        self.discovered.add(cell)
        if len(self.frontier) > self.max_frontier:
            self.max_frontier = len(self.frontier)
