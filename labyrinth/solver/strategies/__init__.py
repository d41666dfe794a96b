"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .breadth_first import BreadthFirstStrategy
from .depth_first import DepthFirstStrategy
from .weighted import DijkstraStrategy, AStarStrategy

__all__ = [
    "BreadthFirstStrategy",
    "DepthFirstStrategy",
    "DijkstraStrategy",
    "AStarStrategy",
]
