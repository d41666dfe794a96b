"""
Labyrinth Solver - Command line entry point

Loads a text maze, solves it with one or all strategies and reports the
result. Exit status is 0 when a path was found, 1 when there is none and 2
for malformed input.

Example:
    labyrinth mazes/tutorial.txt
    labyrinth mazes/tutorial.txt --strategy astar --render
    labyrinth mazes/tutorial.txt --all --debug
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from .debug import save_debug_image
from .settings import load_settings, save_settings
from .solver import (
    MazeError,
    SolveResult,
    create_strategy,
    get_strategy_info,
    solve_all,
)
from .textmaze import load_maze_file, render_maze

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="labyrinth",
        description="Labyrinth Solver - find a path from S to E in a text maze"
    )
    parser.add_argument(
        "maze",
        nargs="?",
        help="Path to the maze text file"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--strategy", "-s",
        help="Strategy to use (default: saved setting, else bfs)"
    )
    group.add_argument(
        "--all", "-a",
        action="store_true",
        help="Run every registered strategy concurrently"
    )
    parser.add_argument(
        "--render", "-r",
        action="store_true",
        help="Print the maze with the solution path"
    )
    parser.add_argument(
        "--trace", "-t",
        action="store_true",
        help="Also mark expanded cells when rendering"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging and save a debug image per solve"
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Settings file (default: config.json)"
    )
    parser.add_argument(
        "--remember",
        action="store_true",
        help="Save the chosen strategy as the new default"
    )
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List available strategies and exit"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the solver from the command line. Returns the exit status."""
    args = parse_args(argv)

    # Configure logging before reading settings so load problems are shown
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler()],
    )
    settings = load_settings(args.config)

    # CLI flag overrides saved setting
    debug_mode = args.debug or bool(settings.get("debug_enabled", False))
    show_trace = args.trace or bool(settings.get("show_trace", False))
    if debug_mode:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list:
        for info in get_strategy_info():
            aliases = ", ".join(info["aliases"])
            line = f"{info['name']:<10} {info['description']}"
            print(f"{line} (also: {aliases})" if aliases else line)
        return EXIT_FOUND

    if not args.maze:
        logger.error("No maze file given")
        return EXIT_BAD_INPUT

    try:
        maze = load_maze_file(args.maze)
    except (FileNotFoundError, MazeError) as e:
        logger.error(f"Cannot load maze: {e}")
        return EXIT_BAD_INPUT

    logger.info(f"Loaded {args.maze}: {maze.width}x{maze.height}, "
                f"entry={maze.entry}, exit={maze.exit}")

    if args.all:
        results = solve_all(maze)
    else:
        strategy_name = args.strategy or settings.get("strategy_name", "bfs")
        try:
            strategy = create_strategy(strategy_name)
        except ValueError as e:
            logger.error(str(e))
            return EXIT_BAD_INPUT
        maze.freeze()
        results = {strategy.name: strategy.solve(maze)}

        if args.remember and args.strategy:
            settings["strategy_name"] = strategy.name
            save_settings(settings, args.config)

    _report(maze, results, args.render, show_trace, debug_mode)

    if all(result.found for result in results.values()):
        return EXIT_FOUND
    return EXIT_NO_PATH


def _report(maze, results: Dict[str, SolveResult], render: bool,
            show_trace: bool, debug_mode: bool) -> None:
    """Print a summary line per result, plus optional drawings."""
    for name, result in results.items():
        print(result.summary())
        if render:
            print(render_maze(maze, result, show_trace=show_trace))
            print()
        if debug_mode:
            path = save_debug_image(maze, result)
            logger.info(f"Debug image for {name} saved: {path}")


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
