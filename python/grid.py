"""
Toroidal grid with obstacles.

Moving off one edge re-enters at the opposite edge. Obstacles truncate
movement: a walk stops on the last clear cell before the obstacle.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterable, Iterator

from search_types import CardinalDirection, Coord

__all__ = ["Grid"]


@dataclass(frozen=True)
class Grid:
    """A width x height toroidal grid and the set of blocked cells."""

    width: int
    height: int
    obstacles: frozenset[Coord] = frozenset()

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        object.__setattr__(self, "obstacles", frozenset(self.obstacles))

    def with_terrain(self, obstacles: Iterable[Coord]) -> Grid:
        """Return a copy of this grid with `obstacles` as its blocked cells."""
        return dataclasses.replace(self, obstacles=frozenset(obstacles))

    def is_clear(self, coord: Coord) -> bool:
        return coord not in self.obstacles

    def cells(self) -> Iterator[Coord]:
        """Every coordinate on the grid, row by row from y=0."""
        for y in range(self.height):
            for x in range(self.width):
                yield Coord(x, y)

    def _advance(self, direction: CardinalDirection, location: Coord) -> Coord:
        if direction.axis == "x":
            return Coord((location.x + direction.sign) % self.width, location.y)
        return Coord(location.x, (location.y + direction.sign) % self.height)

    def step(self, direction: CardinalDirection, location: Coord, count: int) -> Coord:
        """
        Walk `count` unit moves in `direction`, one cell at a time.

        Each move wraps around the grid edges. If the next cell is an obstacle
        the walk stops and the last clear cell is returned, so partial progress
        is kept.
        """
        current = location
        for _ in range(count):
            candidate = self._advance(direction, current)
            if candidate in self.obstacles:
                break
            current = candidate
        return current

    def cord_neighbours(self, position: Coord) -> list[Coord]:
        """Cells one clear step away, in N, E, S, W order (blocked ones omitted)."""
        result: list[Coord] = []
        for direction in CardinalDirection:
            moved = self.step(direction, position, 1)
            if moved != position:
                result.append(moved)
        return result

    def neighbours(self, position: Coord) -> list[Coord]:
        return self.cord_neighbours(position)

    def is_neighbour(self, a: Coord, b: Coord) -> bool:
        return b in self.cord_neighbours(a)
