"""
Autopilot: pathfinding for a rover on a grid with obstacles.

Search is the plain breadth-first traversal over the grid's implicit
adjacency. Its raw visitation history is then filtered down to a contiguous
route, which can in turn be converted into rover commands.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from grid import Grid
from rover import Rover, run_commands
from search_types import (
    AntiClockwise,
    CardinalDirection,
    Clockwise,
    Command,
    Coord,
    DriveRules,
    Forward,
    NotFound,
    PathFound,
    TurnStrategy,
)
from traversal import bfs

__all__ = [
    "Journey",
    "auto_pilot",
    "drive",
    "heading_between",
    "plan_commands",
    "reconstruct_path",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Journey:
    """A route, the commands that follow it, and the rover after each command."""

    path: tuple[Coord, ...]
    commands: tuple[Command, ...]
    states: tuple[Rover, ...]  # states[0] is the starting rover

    @property
    def final(self) -> Rover:
        return self.states[-1]


def reconstruct_path(history: Sequence[Coord], grid: Grid) -> tuple[Coord, ...]:
    """
    Reduce a visitation history to a contiguous path ending at its last entry.

    Walks the history newest to oldest. The last entry seeds the path; every
    earlier entry is kept only if it is a grid neighbour of the path's current
    front, otherwise it is discarded.
    """
    path: list[Coord] = []
    for coord in reversed(history):
        if not path or grid.is_neighbour(path[0], coord):
            path.insert(0, coord)
    return tuple(path)


def auto_pilot(grid: Grid, rover: Rover, target: Coord) -> PathFound | NotFound[Coord]:
    """
    Find a route from the rover's position to `target`.

    Returns:
        PathFound with the reconstructed path and the raw BFS history, or
        NotFound if the target cannot be reached around the obstacles
    """
    result = bfs(grid, rover.position, target)
    if isinstance(result, NotFound):
        logger.info(
            "auto_pilot: no route from %s to %s (%d cells explored)",
            rover.position,
            target,
            len(result.explored),
        )
        return result

    path = reconstruct_path(result.history, grid)
    logger.info(
        "auto_pilot: %s -> %s in %d cells (%d explored)",
        rover.position,
        target,
        len(path),
        len(result.history),
    )
    return PathFound(path, result.history)


def heading_between(grid: Grid, a: Coord, b: Coord) -> CardinalDirection | None:
    """First direction (N, E, S, W order) whose single step from a lands on b."""
    for direction in CardinalDirection:
        if a != b and grid.step(direction, a, 1) == b:
            return direction
    return None


def _turns(current: CardinalDirection, wanted: CardinalDirection, strategy: TurnStrategy) -> list[Command]:
    if current == wanted:
        return []
    if strategy == TurnStrategy.SHORTEST:
        if current.clockwise() == wanted:
            return [Clockwise()]
        if current.anticlockwise() == wanted:
            return [AntiClockwise()]
        return [Clockwise(), Clockwise()]

    turns: list[Command] = []
    while current != wanted:
        current = current.clockwise()
        turns.append(Clockwise())
    return turns


def plan_commands(
    path: Sequence[Coord],
    heading: CardinalDirection,
    grid: Grid,
    rules: DriveRules = DriveRules(),
) -> list[Command]:
    """
    Convert a contiguous path into rover commands.

    Args:
        path: Cells to visit, starting with the rover's own cell
        heading: Direction the rover faces at the start
        grid: Grid the path lies on
        rules: Turning and forward-merging behaviour

    Raises:
        ValueError: If two consecutive cells are not one clear step apart
    """
    commands: list[Command] = []
    for index, (here, there) in enumerate(zip(path, path[1:])):
        wanted = heading_between(grid, here, there)
        if wanted is None:
            raise ValueError(
                f"Path is not contiguous\n"
                f"  Step {index}: {here} -> {there}\n"
                f"  Consecutive cells must be one clear step apart"
            )

        commands.extend(_turns(heading, wanted, rules.turn_strategy))
        heading = wanted

        last = commands[-1] if commands else None
        if rules.merge_forward and isinstance(last, Forward):
            commands[-1] = Forward(last.steps + 1)
        else:
            commands.append(Forward(1))
    return commands


def drive(
    grid: Grid,
    rover: Rover,
    target: Coord,
    rules: DriveRules = DriveRules(),
) -> Journey | NotFound[Coord]:
    """Plan a route to `target` and drive the rover along it."""
    found = auto_pilot(grid, rover, target)
    if isinstance(found, NotFound):
        return found

    route = found.path
    if route[0] != rover.position:
        # A rover parked on an obstacle cell is not a neighbour of anything
        route = (rover.position, *route)

    commands = plan_commands(route, rover.direction, grid, rules)
    states = run_commands(rover, commands, grid)
    logger.info("drive: %d commands, rover ends at %s", len(commands), states[-1].position)
    return Journey(route, tuple(commands), tuple(states))
