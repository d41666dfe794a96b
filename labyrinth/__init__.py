"""
Labyrinth - Maze model and pathfinding strategies.

Subpackages:
    solver: Grid model, traversal state, strategies and results
Modules:
    textmaze: Text maze loader and renderer
    debug: Debug image output
    settings: Persistent user preferences
    cli: Command line entry point
"""

__version__ = "0.1.0"
