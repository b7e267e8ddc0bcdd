"""
Explicit directed graph of integer vertices.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from search_types import Edge, InvalidGraphError, Vertex

__all__ = ["Graph"]


@dataclass(frozen=True)
class Graph:
    """
    An immutable vertex set plus edge list.

    Every edge endpoint must be a member of the vertex set. This is checked on
    construction, so a Graph that exists is always consistent.
    """

    vertices: tuple[Vertex, ...]
    edges: tuple[Edge, ...]

    def __post_init__(self) -> None:
        # Accept any iterable but store tuples so the graph stays hashable
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "edges", tuple(self.edges))
        self._validate()

    @classmethod
    def from_pairs(
        cls, vertices: Iterable[Vertex], pairs: Iterable[tuple[Vertex, Vertex]]
    ) -> Graph:
        """Build a graph from plain (source, target) tuples."""
        return cls(tuple(vertices), tuple(Edge.from_pair(p) for p in pairs))

    def _validate(self) -> None:
        negative = [v for v in self.vertices if v < 0]
        if negative:
            raise InvalidGraphError(
                f"Vertex identifiers must be non-negative\n"
                f"  Offending vertices: {', '.join(str(v) for v in negative)}"
            )

        seen: set[Vertex] = set()
        duplicates: list[Vertex] = []
        for v in self.vertices:
            if v in seen:
                duplicates.append(v)
            seen.add(v)
        if duplicates:
            raise InvalidGraphError(
                f"Vertex identifiers must be unique\n"
                f"  Repeated vertices: {', '.join(str(v) for v in duplicates)}"
            )

        dangling = [e for e in self.edges if e.source not in seen or e.target not in seen]
        if dangling:
            error_msg = (
                f"Edges reference vertices outside the vertex set\n"
                f"  Vertices: {sorted(seen)}\n"
                f"  Offending edges:\n"
            )
            for edge in dangling:
                error_msg += f"    {edge}\n"
            raise InvalidGraphError(error_msg.rstrip("\n"))

    def neighbours(self, vertex: Vertex) -> list[Vertex]:
        """Targets of every edge leaving `vertex`, in edge-list order."""
        return [e.target for e in self.edges if e.source == vertex]
