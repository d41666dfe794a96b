"""
Text Maze Module - Load mazes from text and render them back.

Maze Format:
    A maze of w x h cells is drawn on 2h+1 lines of 2w+1 characters.
    Cell (r, c) sits at line 2r+1, column 2c+1; the characters between
    cells are walls and the remaining ones are corners.

    + = Corner
    - = Horizontal wall (between a cell and the one below it)
    | = Vertical wall (between a cell and the one to its right)
    1-9 = Open passage with that weight (in a wall slot)
    S = Entry cell
    E = Exit cell
    (space) = Open cell, or open passage of weight 1 in a wall slot

    Rendering may also draw * for path cells and . for expanded cells;
    the parser reads both as open cells.

Example:
    +-+-+-+
    |S    |
    + +-+ +
    |   | |
    +-+ + +
    |    E|
    +-+-+-+
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .solver.errors import MazeError, MazeParseError
from .solver.maze import Cell, Maze
from .solver.result import SolveResult

logger = logging.getLogger(__name__)

CORNER = "+"
HORIZONTAL_WALL = "-"
VERTICAL_WALL = "|"
OPEN = " "
ENTRY = "S"
EXIT = "E"
PATH = "*"
VISITED = "."

CELL_CHARS = {OPEN, ENTRY, EXIT, PATH, VISITED}
WEIGHT_CHARS = set("123456789")


def parse_maze_text(maze_text: str) -> Maze:
    """
    Parse maze text into a Maze.

    Args:
        maze_text: Multi-line string in the format described above

    Returns:
        Maze with walls, entry and exit configured

    Raises:
        MazeParseError: If the text is malformed
    """
    lines = _normalize(maze_text)

    rows = len(lines)
    cols = len(lines[0])
    if rows < 3 or cols < 3 or rows % 2 == 0 or cols % 2 == 0:
        raise MazeParseError(
            f"Maze drawing must be an odd number of lines and columns "
            f"(at least 3x3), got {cols}x{rows}"
        )

    height = rows // 2
    width = cols // 2
    maze = Maze(width, height)

    _check_frame(lines)

    markers: Dict[str, Cell] = {}
    for r in range(height):
        for c in range(width):
            char = lines[2 * r + 1][2 * c + 1]
            if char not in CELL_CHARS:
                raise MazeParseError(
                    f"Invalid cell character {char!r} at line {2 * r + 2}, "
                    f"column {2 * c + 2}"
                )
            if char in (ENTRY, EXIT):
                if char in markers:
                    raise MazeParseError(
                        f"Multiple {char} markers found: first at "
                        f"{markers[char]}, second at {(r, c)}"
                    )
                markers[char] = (r, c)

            if c < width - 1:
                weight = _passage(lines, 2 * r + 1, 2 * c + 2, VERTICAL_WALL)
                if weight:
                    maze.open_wall((r, c), (r, c + 1), weight)
            if r < height - 1:
                weight = _passage(lines, 2 * r + 2, 2 * c + 1, HORIZONTAL_WALL)
                if weight:
                    maze.open_wall((r, c), (r + 1, c), weight)

    if ENTRY not in markers:
        raise MazeParseError("Maze must have an entry cell (S)")
    if EXIT not in markers:
        raise MazeParseError("Maze must have an exit cell (E)")

    maze.set_entry(markers[ENTRY])
    maze.set_exit(markers[EXIT])
    logger.debug(f"Parsed {maze!r}")
    return maze


def load_maze_file(file_path: Path | str) -> Maze:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file

    Returns:
        Parsed Maze

    Raises:
        FileNotFoundError: If the file doesn't exist
        MazeParseError: If the maze cannot be parsed
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeParseError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file: {e}") from e

    return parse_maze_text(maze_text)


def validate_maze_text(maze_text: str) -> Tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text)
        return True, None
    except MazeError as e:
        return False, str(e)


def render_maze(maze: Maze, result: Optional[SolveResult] = None,
                show_trace: bool = False) -> str:
    """
    Draw a maze as text, optionally with a solve result on top.

    Args:
        maze: Maze to draw
        result: Optional result whose path is drawn with *
        show_trace: Also mark expanded cells with .

    Returns:
        Multi-line string; parse_maze_text() reads it back
    """
    out = [[OPEN] * (2 * maze.width + 1) for _ in range(2 * maze.height + 1)]

    for y in range(0, 2 * maze.height + 1, 2):
        for x in range(0, 2 * maze.width + 1, 2):
            out[y][x] = CORNER

    for r in range(maze.height):
        for c in range(maze.width):
            out[2 * r + 1][2 * c + 2] = _wall_char(
                maze.weight((r, c), (r, c + 1)), VERTICAL_WALL)
            out[2 * r + 2][2 * c + 1] = _wall_char(
                maze.weight((r, c), (r + 1, c)), HORIZONTAL_WALL)
        out[2 * r + 1][0] = VERTICAL_WALL
    for c in range(maze.width):
        out[0][2 * c + 1] = HORIZONTAL_WALL

    overlay: Dict[Cell, str] = {}
    if result is not None:
        if show_trace:
            for cell in result.trace:
                overlay[cell] = VISITED
        for cell in result.path:
            overlay[cell] = PATH
    if maze.entry is not None:
        overlay[maze.entry] = ENTRY
    if maze.exit is not None:
        overlay[maze.exit] = EXIT

    for (r, c), char in overlay.items():
        out[2 * r + 1][2 * c + 1] = char

    return "\n".join("".join(line) for line in out)


def _normalize(maze_text: str) -> List[str]:
    """Drop surrounding blank lines and trailing whitespace, pad to equal width."""
    if not maze_text or not maze_text.strip():
        raise MazeParseError("Maze text is empty")

    lines = [line.rstrip() for line in maze_text.split("\n")]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    width = max(len(line) for line in lines)
    return [line.ljust(width) for line in lines]


def _check_frame(lines: List[str]) -> None:
    """Corners must be + and the outer boundary fully walled."""
    last_row = len(lines) - 1
    last_col = len(lines[0]) - 1
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if y % 2 == 0 and x % 2 == 0:
                expected = CORNER
            elif y in (0, last_row) and x % 2 == 1:
                expected = HORIZONTAL_WALL
            elif x in (0, last_col) and y % 2 == 1:
                expected = VERTICAL_WALL
            else:
                continue
            if char != expected:
                raise MazeParseError(
                    f"Expected {expected!r} at line {y + 1}, column {x + 1}, "
                    f"found {char!r}"
                )


def _passage(lines: List[str], y: int, x: int, wall: str) -> int:
    """Weight of the passage drawn at (y, x); 0 for a wall."""
    char = lines[y][x]
    if char == wall:
        return 0
    if char == OPEN:
        return 1
    if char in WEIGHT_CHARS:
        return int(char)
    raise MazeParseError(
        f"Invalid wall character {char!r} at line {y + 1}, column {x + 1}"
    )


def _wall_char(weight: float, wall: str) -> str:
    if weight <= 0:
        return wall
    if weight == 1:
        return OPEN
    if float(weight).is_integer() and 2 <= weight <= 9:
        return str(int(weight))
    logger.warning(f"Passage weight {weight} cannot be drawn, shown as open")
    return OPEN
