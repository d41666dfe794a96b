"""
Depth-First Strategy - Any path, explored with an explicit stack.
"""

from typing import Iterable

from ..base import FrontierSearch
from ..factory import register_strategy
from ..maze import Cell
from ..state import Frontier, LifoFrontier


@register_strategy
class DepthFirstStrategy(FrontierSearch):
    """
    Depth-first search using a LIFO frontier instead of recursion.

    Neighbors are pushed in reverse enumeration order so the North branch
    is explored first, then East, South and West. The returned path is
    valid but not necessarily the shortest.
    """
    name = "dfs"
    description = "Depth-first - any path, explicit stack"
    aliases = ("depth-first",)

    def create_frontier(self) -> Frontier:
        return LifoFrontier()

    def order_neighbors(self, neighbors: Iterable[Cell]) -> Iterable[Cell]:
        return reversed(tuple(neighbors))
