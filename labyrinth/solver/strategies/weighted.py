"""
Weighted Strategies - Dijkstra and A* over passage weights.

Both share one loop: the frontier is a priority queue ordered by
accumulated cost plus a heuristic estimate of the remaining cost. Dijkstra
uses a zero heuristic. A cell's parent is recorded the first time it is
expanded, which is when its cheapest cost is final.
"""

import logging
from typing import Dict, Optional

from ..base import SolverStrategy
from ..context import SolveContext
from ..factory import register_strategy
from ..maze import Cell, Maze
from ..result import Outcome
from ..state import Frontier, PriorityFrontier, TraversalState

logger = logging.getLogger(__name__)


@register_strategy
class DijkstraStrategy(SolverStrategy):
    """
    Uniform-cost search. Returns a path of minimum total weight.

    With every passage at weight 1 this expands cells in the same layers as
    breadth-first search.
    """
    name = "dijkstra"
    description = "Dijkstra - cheapest path by passage weight"
    aliases = ("uniform-cost",)
    weighted = True

    def create_frontier(self) -> Frontier:
        return PriorityFrontier()

    def heuristic(self, cell: Cell, goal: Cell, scale: float) -> float:
        """Estimate of the remaining cost from cell to goal."""
        return 0.0

    def _search(self, maze: Maze, state: TraversalState,
                context: Optional[SolveContext]) -> Outcome:
        entry, goal = maze.entry, maze.exit
        scale = maze.min_weight
        best: Dict[Cell, float] = {entry: 0.0}
        state.enqueue(entry, self.heuristic(entry, goal, scale), (0.0, None))

        while state.frontier:
            if self._check_cancelled(context):
                return Outcome.CANCELLED

            cell, (cost, parent) = state.frontier.pop()
            if not state.mark_visited(cell):
                # Stale entry superseded by a cheaper one
                continue
            state.record_parent(cell, parent)
            self._report(context, maze, state)

            if cell == goal:
                logger.debug(f"{self.name}: reached {goal} at cost {cost}")
                return Outcome.FOUND

            for neighbor in maze.neighbors(cell):
                if neighbor in state.visited:
                    continue
                new_cost = cost + maze.weight(cell, neighbor)
                if new_cost < best.get(neighbor, float("inf")):
                    best[neighbor] = new_cost
                    priority = new_cost + self.heuristic(neighbor, goal, scale)
                    state.enqueue(neighbor, priority, (new_cost, cell))

        return Outcome.NO_PATH


@register_strategy
class AStarStrategy(DijkstraStrategy):
    """
    A* search with a Manhattan distance heuristic.

    The distance is scaled by the cheapest passage in the maze, so the
    estimate never exceeds the true remaining cost and the returned path
    is of minimum total weight.
    """
    name = "astar"
    description = "A* - cheapest path, Manhattan heuristic"
    aliases = ("a*", "a-star")

    def heuristic(self, cell: Cell, goal: Cell, scale: float) -> float:
        return (abs(cell[0] - goal[0]) + abs(cell[1] - goal[1])) * scale
