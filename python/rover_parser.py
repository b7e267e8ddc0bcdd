"""
Parsing utilities for roverpath.

Provides compact string formats for:
1. Grids with obstacles
2. Graphs (vertices and directed edges)
3. Rover command sequences
"""

from __future__ import annotations

import re

from graph import Graph
from grid import Grid
from search_types import AntiClockwise, Clockwise, Command, Coord, Edge, Forward

__all__ = ["format_commands", "parse_commands", "parse_graph", "parse_grid"]

_COMMAND_TOKEN = re.compile(r"F([0-9]*)|R|L")
_VERTEX_TOKEN = re.compile(r"[0-9]+")


def parse_grid(definition: str) -> Grid:
    """
    Parse a grid from a compact string format.

    Format:
    - Rows separated by |
    - The FIRST row is the top of the grid (highest y), the last row is y=0
    - One character per cell:
      * '.': Clear cell
      * '#': Obstacle

    Example:
        "....|####|...."
        Creates a 4x3 grid with every cell of row y=1 blocked.

    Args:
        definition: Grid definition string

    Returns:
        Grid with the parsed dimensions and obstacles
    """
    row_strings = definition.strip().split("|")
    width = len(row_strings[0])
    height = len(row_strings)

    mismatched = [(i, len(row)) for i, row in enumerate(row_strings) if len(row) != width]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in grid definition\n"
            f"  Expected: {width} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += f"  All rows must have the same number of cells"
        raise ValueError(error_msg)

    obstacles: set[Coord] = set()
    for row_idx, row_str in enumerate(row_strings):
        y = height - 1 - row_idx
        for x, char in enumerate(row_str):
            if char == "#":
                obstacles.add(Coord(x, y))
            elif char != ".":
                raise ValueError(
                    f"Invalid character '{char}' in grid definition\n"
                    f"  Row {row_idx}, column {x}\n"
                    f"  Valid characters: '.' (clear), '#' (obstacle)"
                )

    return Grid(width, height, frozenset(obstacles))


def parse_graph(definition: str) -> Graph:
    """
    Parse a graph from whitespace-separated tokens.

    Format:
    - An integer token is a vertex: "0", "12"
    - "a>b" is a directed edge from a to b: "0>1"

    Edge endpoints must also be listed as vertices.

    Example:
        "0 1 2 0>1 1>2"

    Raises:
        ValueError: On a malformed token
        InvalidGraphError: If an edge references an unlisted vertex
    """
    vertices: list[int] = []
    edges: list[Edge] = []

    for token in definition.split():
        if _VERTEX_TOKEN.fullmatch(token):
            vertices.append(int(token))
            continue

        source, sep, target = token.partition(">")
        if sep and _VERTEX_TOKEN.fullmatch(source) and _VERTEX_TOKEN.fullmatch(target):
            edges.append(Edge(int(source), int(target)))
        else:
            raise ValueError(
                f"Invalid graph token: '{token}'\n"
                f"  Valid formats:\n"
                f"    - Vertex: non-negative integer (e.g., '3')\n"
                f"    - Edge: 'source>target' (e.g., '0>1')"
            )

    return Graph(tuple(vertices), tuple(edges))


def parse_commands(text: str) -> list[Command]:
    """
    Parse a rover command sequence.

    Format (spaces optional):
    - F<n>: Forward n steps (bare F means one step)
    - R: Rotate clockwise
    - L: Rotate anticlockwise

    Example:
        "F3 R F L F2" or "F3RFLF2"
    """
    compact = "".join(text.split()).upper()
    commands: list[Command] = []
    pos = 0

    while pos < len(compact):
        token_match = _COMMAND_TOKEN.match(compact, pos)
        if token_match is None:
            raise ValueError(
                f"Invalid command at position {pos}: '{compact[pos:]}'\n"
                f"  Valid commands: F<n> (forward), R (clockwise), L (anticlockwise)"
            )

        token = token_match.group(0)
        if token == "R":
            commands.append(Clockwise())
        elif token == "L":
            commands.append(AntiClockwise())
        else:
            commands.append(Forward(int(token_match.group(1)) if token_match.group(1) else 1))
        pos = token_match.end()

    return commands


def format_commands(commands: list[Command]) -> str:
    """Inverse of parse_commands, space separated."""
    parts: list[str] = []
    for command in commands:
        match command:
            case Forward(steps=steps):
                parts.append(f"F{steps}")
            case Clockwise():
                parts.append("R")
            case AntiClockwise():
                parts.append("L")
            case _:
                raise ValueError(f"Unknown command: {command}")
    return " ".join(parts)
