"""
Rover state machine.

A rover is a position plus a heading. Commands never modify a rover; each
one produces the next rover value. Keeping the chain of values is up to the
caller (see run_commands).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from grid import Grid
from search_types import AntiClockwise, CardinalDirection, Clockwise, Command, Coord, Forward

__all__ = ["Rover", "apply", "run_commands"]


@dataclass(frozen=True)
class Rover:
    """A rover's position on a grid and the direction it faces."""

    position: Coord
    direction: CardinalDirection

    def execute(self, command: Command, grid: Grid) -> Rover:
        return apply(self, command, grid)


def apply(rover: Rover, command: Command, grid: Grid) -> Rover:
    """Apply one command and return the resulting rover."""
    match command:
        case Forward(steps=steps):
            return replace(rover, position=grid.step(rover.direction, rover.position, steps))
        case Clockwise():
            return replace(rover, direction=rover.direction.clockwise())
        case AntiClockwise():
            return replace(rover, direction=rover.direction.anticlockwise())
        case _:
            raise ValueError(f"Unknown command: {command}")


def run_commands(rover: Rover, commands: Iterable[Command], grid: Grid) -> list[Rover]:
    """
    Apply commands in order, returning every intermediate rover.

    The first element is `rover` itself; there is one further element per
    command.
    """
    states = [rover]
    for command in commands:
        states.append(apply(states[-1], command, grid))
    return states
