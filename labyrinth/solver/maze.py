"""
Maze Module - Grid model of a rectangular labyrinth.

A maze is a width x height grid of cells. Each cell is identified by its
(row, col) coordinate; rows grow towards the south, columns towards the east.
Openings between orthogonal neighbors are stored in two numpy arrays, so the
adjacency relation is symmetric by construction:

    east[r, c]   passage cost between (r, c) and (r, c + 1)
    south[r, c]  passage cost between (r, c) and (r + 1, c)

A cost of 0 means the wall is closed.
"""

import math
import numbers
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from .errors import (
    EntryExitCollision,
    InvalidDimensions,
    MazeFrozen,
    NotAdjacent,
    OutOfBounds,
)

Cell = Tuple[int, int]  # (row, col)


class Direction(Enum):
    """Orthogonal directions, declared in neighbor enumeration order."""
    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def delta(self) -> Tuple[int, int]:
        """Get (drow, dcol) for this direction."""
        return self.value

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def step(self, cell: Cell) -> Cell:
        """Return the cell one step away in this direction."""
        dr, dc = self.value
        return (cell[0] + dr, cell[1] + dc)

    @classmethod
    def between(cls, a: Cell, b: Cell) -> Optional["Direction"]:
        """Direction leading from a to b, or None if they are not neighbors."""
        delta = (b[0] - a[0], b[1] - a[1])
        for direction in cls:
            if direction.value == delta:
                return direction
        return None


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


class Maze:
    """
    Rectangular maze with symmetric wall openings and entry/exit markers.

    The maze is configured through open_wall/set_entry/set_exit and then
    handed to any number of solvers, which only read it. Calling freeze()
    turns further configuration into a MazeFrozen error.

    Attributes:
        width: Number of columns
        height: Number of rows
        entry: Entry cell or None
        exit: Exit cell or None
    """

    def __init__(self, width: int, height: int):
        """
        Create a maze with every wall closed.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)

        Raises:
            InvalidDimensions: If width or height is below 1
        """
        if width < 1 or height < 1:
            raise InvalidDimensions(
                f"Maze dimensions must be at least 1x1, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.entry: Optional[Cell] = None
        self.exit: Optional[Cell] = None
        self._east = np.zeros((height, width), dtype=np.float64)
        self._south = np.zeros((height, width), dtype=np.float64)
        self._frozen = False

    @classmethod
    def open_grid(cls, width: int, height: int,
                  entry: Optional[Cell] = None,
                  exit: Optional[Cell] = None) -> "Maze":
        """
        Create a maze with every interior wall open.

        Args:
            width: Number of columns
            height: Number of rows
            entry: Optional entry cell
            exit: Optional exit cell

        Returns:
            Maze instance
        """
        maze = cls(width, height)
        maze._east[:, :-1] = 1.0
        maze._south[:-1, :] = 1.0
        if entry is not None:
            maze.set_entry(entry)
        if exit is not None:
            maze.set_exit(exit)
        return maze

    # Configuration

    def open_wall(self, a: Cell, b: Cell, weight: float = 1.0) -> None:
        """
        Open the wall between two orthogonally adjacent cells.

        Args:
            a: First cell
            b: Second cell
            weight: Passage cost used by weighted strategies (> 0)

        Raises:
            OutOfBounds: If either cell lies outside the grid
            NotAdjacent: If the cells are not orthogonal neighbors
            ValueError: If weight is not a positive finite number
        """
        if not math.isfinite(weight) or weight <= 0:
            raise ValueError(
                f"Passage weight must be positive and finite, got {weight}"
            )
        self._set_passage(a, b, float(weight))

    def close_wall(self, a: Cell, b: Cell) -> None:
        """Close the wall between two orthogonally adjacent cells."""
        self._set_passage(a, b, 0.0)

    def set_entry(self, cell: Cell) -> None:
        """
        Mark the entry cell.

        Raises:
            OutOfBounds: If the cell lies outside the grid
            EntryExitCollision: If the cell is already the exit
        """
        self._check_configurable()
        cell = self._validate(cell)
        if cell == self.exit:
            raise EntryExitCollision(cell)
        self.entry = cell

    def set_exit(self, cell: Cell) -> None:
        """
        Mark the exit cell.

        Raises:
            OutOfBounds: If the cell lies outside the grid
            EntryExitCollision: If the cell is already the entry
        """
        self._check_configurable()
        cell = self._validate(cell)
        if cell == self.entry:
            raise EntryExitCollision(cell)
        self.exit = cell

    def freeze(self) -> "Maze":
        """Lock the maze against further configuration. Returns self."""
        self._frozen = True
        self._east.flags.writeable = False
        self._south.flags.writeable = False
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def copy(self) -> "Maze":
        """Return an unfrozen copy with the same walls and markers."""
        other = Maze(self.width, self.height)
        other._east = self._east.copy()
        other._south = self._south.copy()
        other.entry = self.entry
        other.exit = self.exit
        return other

    # Queries

    def in_bounds(self, cell: Cell) -> bool:
        """Check if a cell lies inside the grid."""
        row, col = cell
        return 0 <= row < self.height and 0 <= col < self.width

    def neighbors(self, cell: Cell) -> Tuple[Cell, ...]:
        """
        Get cells reachable from a cell through an open wall.

        Neighbors are always listed in North, East, South, West order.

        Args:
            cell: Cell to query

        Returns:
            Tuple of 0 to 4 reachable cells

        Raises:
            OutOfBounds: If the cell lies outside the grid
        """
        row, col = self._validate(cell)
        result = []
        if row > 0 and self._south[row - 1, col]:
            result.append((row - 1, col))
        if self._east[row, col]:
            result.append((row, col + 1))
        if self._south[row, col]:
            result.append((row + 1, col))
        if col > 0 and self._east[row, col - 1]:
            result.append((row, col - 1))
        return tuple(result)

    def is_open(self, a: Cell, b: Cell) -> bool:
        """Check if two cells are connected by an open wall."""
        return self.weight(a, b) > 0

    def weight(self, a: Cell, b: Cell) -> float:
        """
        Get the passage cost between two cells.

        Returns:
            Cost of the opening, or 0.0 if the cells are not connected
        """
        if not (self.in_bounds(a) and self.in_bounds(b)):
            return 0.0
        slot = self._slot(a, b)
        if slot is None:
            return 0.0
        array, index = slot
        return float(array[index])

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield (row, col)

    def is_valid_path(self, path: Sequence[Cell]) -> bool:
        """
        Check that a path stays inside the grid, only crosses open walls
        and never repeats a cell.
        """
        if not path:
            return False
        if any(not self.in_bounds(cell) for cell in path):
            return False
        if len(set(path)) != len(path):
            return False
        return all(self.is_open(a, b) for a, b in zip(path, path[1:]))

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) of the maze."""
        return (self.width, self.height)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def open_wall_count(self) -> int:
        return int(np.count_nonzero(self._east) + np.count_nonzero(self._south))

    @property
    def min_weight(self) -> float:
        """Smallest passage cost in the maze (1.0 if no wall is open)."""
        weights = np.concatenate((self._east[self._east > 0],
                                  self._south[self._south > 0]))
        if weights.size == 0:
            return 1.0
        return float(weights.min())

    @property
    def is_weighted(self) -> bool:
        """True if any open passage costs something other than 1."""
        for array in (self._east, self._south):
            opened = array[array > 0]
            if opened.size and not np.all(opened == 1.0):
                return True
        return False

    # Internals

    def _validate(self, cell: Cell) -> Cell:
        if (len(cell) != 2
                or not all(isinstance(v, numbers.Integral) for v in cell)
                or any(isinstance(v, bool) for v in cell)):
            raise TypeError(f"Cell must be a (row, col) pair of integers, got {cell!r}")
        cell = (int(cell[0]), int(cell[1]))
        if not self.in_bounds(cell):
            raise OutOfBounds(cell, self.width, self.height)
        return cell

    def _check_configurable(self) -> None:
        if self._frozen:
            raise MazeFrozen("Maze is frozen and cannot be modified")

    def _slot(self, a: Cell, b: Cell) -> Optional[Tuple[np.ndarray, Cell]]:
        """Locate the array entry storing the wall between a and b."""
        direction = Direction.between(a, b)
        if direction is Direction.EAST:
            return self._east, a
        if direction is Direction.WEST:
            return self._east, b
        if direction is Direction.SOUTH:
            return self._south, a
        if direction is Direction.NORTH:
            return self._south, b
        return None

    def _set_passage(self, a: Cell, b: Cell, value: float) -> None:
        self._check_configurable()
        a = self._validate(a)
        b = self._validate(b)
        slot = self._slot(a, b)
        if slot is None:
            raise NotAdjacent(a, b)
        array, index = slot
        array[index] = value

    def __eq__(self, other):
        if not isinstance(other, Maze):
            return False
        return (self.size == other.size
                and self.entry == other.entry
                and self.exit == other.exit
                and np.array_equal(self._east, other._east)
                and np.array_equal(self._south, other._south))

    def __repr__(self) -> str:
        return (f"Maze({self.width}x{self.height}, entry={self.entry}, "
                f"exit={self.exit}, open_walls={self.open_wall_count})")
