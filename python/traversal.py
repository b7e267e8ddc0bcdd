"""
Breadth-first and depth-first search over any neighbour source.

Both searches report the order in which states were visited (the history),
not a reconstructed path. Consecutive history entries need not be adjacent.
"""

from __future__ import annotations

import logging
from collections import deque

from search_types import Found, NeighbourSource, NotFound, S

__all__ = ["bfs", "dfs"]

logger = logging.getLogger(__name__)


def bfs(source: NeighbourSource[S], start: S, target: S) -> Found[S] | NotFound[S]:
    """
    Breadth First Search from `start` until `target` is visited.

    Uses a FIFO queue, so states are visited level by level. A state is marked
    visited when it is discovered and is never queued twice.

    Args:
        source: Graph-like object providing neighbours(state)
        start: State to begin from
        target: State to search for

    Returns:
        Found with the visitation history (start first, target last), or
        NotFound with everything visited before the queue ran dry
    """
    visited: set[S] = {start}
    history: list[S] = []
    queue: deque[S] = deque([start])

    while queue:
        current = queue.popleft()
        history.append(current)

        if current == target:
            logger.debug("bfs: reached %s after %d visits", target, len(history))
            return Found(tuple(history))

        for neighbour in source.neighbours(current):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)

    logger.debug("bfs: %s unreachable from %s (%d visited)", target, start, len(history))
    return NotFound(tuple(history))


def dfs(source: NeighbourSource[S], start: S, target: S) -> Found[S] | NotFound[S]:
    """
    Depth First Search from `start` until `target` is visited.

    Work list is a deque used as a stack: neighbours are pushed onto the front
    in reverse order, so the first neighbour is explored first. Neighbours are
    marked visited on discovery. The start itself is not pre-marked, so a cycle
    leading back to it visits it a second time.

    Returns:
        Found with the visitation history, or NotFound with everything visited
    """
    visited: set[S] = set()
    history: list[S] = []
    queue: deque[S] = deque([start])

    while queue:
        current = queue.popleft()
        history.append(current)

        if current == target:
            logger.debug("dfs: reached %s after %d visits", target, len(history))
            return Found(tuple(history))

        for neighbour in reversed(source.neighbours(current)):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.appendleft(neighbour)

    logger.debug("dfs: %s unreachable from %s (%d visited)", target, start, len(history))
    return NotFound(tuple(history))
