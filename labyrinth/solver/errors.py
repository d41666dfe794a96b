"""
Errors Module - Exceptions raised while configuring or solving a maze.

Construction errors derive from MazeError (a ValueError) and are raised
before any change is applied, so a failed call leaves the maze untouched.
A maze without a path is not an error: it is reported by SolveResult.
"""


class MazeError(ValueError):
    """Base class for maze configuration errors."""
    pass


class InvalidDimensions(MazeError):
    """Width or height is smaller than 1."""
    pass


class OutOfBounds(MazeError):
    """A cell lies outside the grid."""

    def __init__(self, cell, width: int, height: int):
        self.cell = cell
        super().__init__(
            f"Cell {cell} is outside the {width}x{height} grid"
        )


class NotAdjacent(MazeError):
    """Two cells are not orthogonal neighbors."""

    def __init__(self, a, b):
        self.cells = (a, b)
        super().__init__(f"Cells {a} and {b} are not orthogonally adjacent")


class EntryExitCollision(MazeError):
    """Entry and exit would be the same cell."""

    def __init__(self, cell):
        self.cell = cell
        super().__init__(f"Entry and exit cannot both be {cell}")


class MazeFrozen(MazeError):
    """The maze was frozen and can no longer be configured."""
    pass


class MazeNotReady(MazeError):
    """Entry or exit has not been set."""
    pass


class MazeParseError(MazeError):
    """Text input could not be turned into a maze."""
    pass


class PathUnavailable(RuntimeError):
    """A path was requested from a search that never reached the exit."""
    pass
