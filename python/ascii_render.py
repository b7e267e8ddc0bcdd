"""
ASCII rendering for roverpath structures.

Provides two renderings:
1. Grid rendering - obstacles, explored cells, a path and the rover on a grid
2. History rendering - a one-line view of a traversal result
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid import Grid
from rover import Rover
from search_types import CardinalDirection, Coord, Found, NotFound

__all__ = ["render_grid", "render_history", "ROVER_GLYPHS"]

logger = logging.getLogger(__name__)

ROVER_GLYPHS: dict[CardinalDirection, str] = {
    CardinalDirection.N: "^",
    CardinalDirection.E: ">",
    CardinalDirection.S: "v",
    CardinalDirection.W: "<",
}


def render_grid(
    grid: Grid,
    rover: Rover | None = None,
    path: Iterable[Coord] = (),
    explored: Iterable[Coord] = (),
    target: Coord | None = None,
) -> str:
    """
    Render a grid to an ASCII string with colors.

    The top line is the highest y, so North points up the screen. Layers are
    drawn in increasing priority: explored cells, path, target, obstacles and
    finally the rover.

    Args:
        grid: The grid to render
        rover: Optional rover, drawn as an arrow showing its heading
        path: Cells drawn as '*'
        explored: Cells drawn as '+'
        target: Optional cell drawn as 'X'

    Returns:
        Rendered ASCII string with ANSI color codes
    """
    buffer: list[list[str]] = [["." for _ in range(grid.width)] for _ in range(grid.height)]

    def plot(coord: Coord, char: str, colorize: Callable[[str], str]) -> None:
        # Obstacles need not lie on the grid; anything outside is skipped
        if 0 <= coord.x < grid.width and 0 <= coord.y < grid.height:
            buffer[grid.height - 1 - coord.y][coord.x] = colorize(char)

    for coord in explored:
        plot(coord, "+", chalk.blue)
    for coord in path:
        plot(coord, "*", chalk.green)
    if target is not None:
        plot(target, "X", chalk.yellow)
    for coord in grid.obstacles:
        plot(coord, "#", chalk.red)
    if rover is not None:
        plot(rover.position, ROVER_GLYPHS[rover.direction], chalk.white)

    logger.debug("render_grid: %dx%d, %d obstacles", grid.width, grid.height, len(grid.obstacles))
    return "\n".join("".join(row) for row in buffer)


def render_history(result: Found | NotFound) -> str:
    """Render a traversal result as 'a -> b -> c', or a not-found summary."""
    match result:
        case Found(history=history):
            return " -> ".join(str(state) for state in history)
        case NotFound(explored=explored):
            visited = ", ".join(str(state) for state in explored)
            return f"not found (explored: {visited})"
        case _:
            raise ValueError(f"Unknown traversal result: {result}")
