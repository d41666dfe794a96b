"""
Breadth-First Strategy - Shortest path in number of steps.
"""

from ..base import FrontierSearch
from ..factory import register_strategy
from ..state import FifoFrontier, Frontier


@register_strategy
class BreadthFirstStrategy(FrontierSearch):
    """
    Breadth-first search over the open-wall graph.

    Cells are expanded in order of their distance from the entry, so the
    first time the exit is expanded its parent chain is a shortest walk.
    Among equally short walks the one found first in North, East, South,
    West neighbor order wins.
    """
    name = "bfs"
    description = "Breadth-first - shortest path in steps"
    aliases = ("breadth-first", "breath-first")

    def create_frontier(self) -> Frontier:
        return FifoFrontier()
