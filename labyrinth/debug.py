"""
Debug Image Utilities

Functions for saving a picture of a maze and a solve result, and managing
debug output.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from .solver.maze import Maze
from .solver.result import SolveResult

logger = logging.getLogger(__name__)

# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

# Colors
BACKGROUND = "white"
WALL_COLOR = "black"
VISITED_COLOR = "#BBDEFB"
PATH_COLOR = "#4CAF50"
ENTRY_COLOR = "#1976D2"
EXIT_COLOR = "#d32f2f"

HEADER_PX = 20


def save_debug_image(
    maze: Maze,
    result: Optional[SolveResult] = None,
    path: Optional[Path | str] = None,
    cell_px: int = 16,
) -> Path:
    """
    Save an image of the maze with the solve result drawn on top.

    Annotations include:
    - Expanded cells shaded light blue
    - Path cells in green
    - Entry and exit in blue and red
    - Summary line with strategy, path length and cells expanded

    Args:
        maze: Maze to draw
        result: Optional solve result
        path: Output file path (default: timestamped file in DEBUG_DIR)
        cell_px: Size of one cell in pixels

    Returns:
        Path of the saved image
    """
    if path is None:
        DEBUG_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
        path = DEBUG_DIR / f"debug_{timestamp}.png"
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    size = (maze.width * cell_px + 1, maze.height * cell_px + 1 + HEADER_PX)
    image = Image.new("RGB", size, BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    def box(cell, inset=1):
        r, c = cell
        x0 = c * cell_px + inset
        y0 = r * cell_px + HEADER_PX + inset
        return [x0, y0, x0 + cell_px - 2 * inset, y0 + cell_px - 2 * inset]

    if result is not None:
        for cell in result.trace:
            draw.rectangle(box(cell), fill=VISITED_COLOR)
        for cell in result.path:
            draw.rectangle(box(cell, inset=3), fill=PATH_COLOR)

    if maze.entry is not None:
        draw.rectangle(box(maze.entry, inset=2), fill=ENTRY_COLOR)
    if maze.exit is not None:
        draw.rectangle(box(maze.exit, inset=2), fill=EXIT_COLOR)

    _draw_walls(draw, maze, cell_px)

    if result is not None:
        draw.text((2, 4), result.summary(), fill=WALL_COLOR, font=font)

    image.save(path, "PNG")
    logger.debug(f"Debug image saved: {path}")

    if path.parent.resolve() == DEBUG_DIR.resolve():
        _cleanup_debug_images()
    return path


def _draw_walls(draw: ImageDraw.ImageDraw, maze: Maze, cell_px: int) -> None:
    """Draw the outer frame and every closed wall."""
    top = HEADER_PX
    right = maze.width * cell_px
    bottom = top + maze.height * cell_px
    draw.rectangle([0, top, right, bottom], outline=WALL_COLOR)

    for r in range(maze.height):
        for c in range(maze.width):
            x = (c + 1) * cell_px
            y = top + (r + 1) * cell_px
            if c < maze.width - 1 and not maze.is_open((r, c), (r, c + 1)):
                draw.line([x, y - cell_px, x, y], fill=WALL_COLOR)
            if r < maze.height - 1 and not maze.is_open((r, c), (r + 1, c)):
                draw.line([x - cell_px, y, x, y], fill=WALL_COLOR)


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    # Get all debug images sorted by modification time
    debug_files = sorted(
        DEBUG_DIR.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    # Remove old files
    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.warning(f"Failed to remove old debug image {old_file}: {e}")
