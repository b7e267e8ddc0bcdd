"""
Shared type definitions for the roverpath system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Hashable, Protocol, Sequence, TypeVar


class CardinalDirection(Enum):
    """Cardinal direction a rover can face or move in."""

    N = "N"  # Up (increasing y)
    E = "E"  # Right (increasing x)
    S = "S"  # Down (decreasing y)
    W = "W"  # Left (decreasing x)

    @property
    def sign(self) -> int:
        """Signed unit displacement along this direction's axis."""
        return 1 if self in (CardinalDirection.N, CardinalDirection.E) else -1

    @property
    def axis(self) -> str:
        return "y" if self in (CardinalDirection.N, CardinalDirection.S) else "x"

    def clockwise(self) -> CardinalDirection:
        order = _CLOCKWISE
        return order[(order.index(self) + 1) % len(order)]

    def anticlockwise(self) -> CardinalDirection:
        order = _CLOCKWISE
        return order[(order.index(self) - 1) % len(order)]


_CLOCKWISE = (CardinalDirection.N, CardinalDirection.E, CardinalDirection.S, CardinalDirection.W)


class TurnStrategy(Enum):
    """How the journey planner turns the rover towards a new heading."""

    SHORTEST = "shortest"  # One turn either way, two clockwise turns to reverse
    CLOCKWISE_ONLY = "clockwise_only"  # Always rotate clockwise


@dataclass(frozen=True)
class DriveRules:
    """Rules governing how a path is turned into rover commands."""

    turn_strategy: TurnStrategy = TurnStrategy.SHORTEST
    merge_forward: bool = True  # Collapse consecutive Forward(1) into Forward(n)


# =============================================================================
# Graph Definition Types
# =============================================================================

Vertex = int


class InvalidGraphError(ValueError):
    """Raised when a graph's vertex set and edge list are inconsistent."""


@dataclass(frozen=True)
class Edge:
    """A directed edge between two vertices."""

    source: Vertex
    target: Vertex

    @classmethod
    def from_pair(cls, pair: tuple[Vertex, Vertex]) -> Edge:
        return cls(pair[0], pair[1])

    def __str__(self) -> str:
        return f"(From={self.source}, To={self.target})"


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class Coord:
    """A cell address on a grid."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Coordinates must be non-negative, got ({self.x}, {self.y})")

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Forward:
    """Move forward the given number of unit steps."""

    steps: int = 1

    def __post_init__(self) -> None:
        if self.steps < 1:
            raise ValueError(f"Forward needs a positive step count, got {self.steps}")


@dataclass(frozen=True)
class Clockwise:
    """Rotate a quarter turn clockwise."""

    pass


@dataclass(frozen=True)
class AntiClockwise:
    """Rotate a quarter turn anticlockwise."""

    pass


Command = Forward | Clockwise | AntiClockwise


# =============================================================================
# Search Capability and Results
# =============================================================================

S = TypeVar("S", bound=Hashable)


class NeighbourSource(Protocol[S]):
    """Anything that can list the states adjacent to a state, in a fixed order."""

    def neighbours(self, state: S) -> Sequence[S]: ...


@dataclass(frozen=True)
class Found(Generic[S]):
    """Search reached its target; history is the visitation order."""

    history: tuple[S, ...]


@dataclass(frozen=True)
class NotFound(Generic[S]):
    """Search exhausted everything reachable without meeting the target."""

    explored: tuple[S, ...] = ()


@dataclass(frozen=True)
class PathFound:
    """Grid search reached its target; path is contiguous, history is raw."""

    path: tuple[Coord, ...]
    history: tuple[Coord, ...]
