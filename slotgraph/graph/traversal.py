"""
Unweighted traversals over a vertex store.

All functions read the store and never mutate it. Neighbors are visited in
adjacency order (most recently inserted edge first) and inactive
destinations are skipped.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable

from slotgraph.graph.results import LevelVisit, Suggestion
from slotgraph.store import VertexStore

logger = logging.getLogger(__name__)


def breadth_first(store: VertexStore, source: int) -> list[LevelVisit]:
    """
    Breadth-first search with hop levels.

    A vertex is marked and gets its level the moment it is first
    discovered, so each vertex appears exactly once.

    Returns:
        LevelVisit records in visitation order; the source is level 0

    Raises:
        InvalidVertex: If source is out of range or inactive
    """
    store.require_active(source)

    visited = {source}
    queue = deque([(source, 0)])
    order = [LevelVisit(source, 0)]

    while queue:
        current, level = queue.popleft()
        for neighbor in store.neighbors(current):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            order.append(LevelVisit(neighbor, level + 1))
            queue.append((neighbor, level + 1))

    logger.debug(f"BFS from {source} reached {len(order)} vertices")
    return order


def depth_first(
    store: VertexStore,
    source: int,
    visit: Callable[[int], None],
) -> None:
    """
    Recursive pre-order depth-first search.

    Recursion depth is bounded by the store capacity.

    Args:
        store: Store to traverse
        source: Handle to start from
        visit: Called once per reached vertex, in pre-order

    Raises:
        InvalidVertex: If source is out of range or inactive
    """
    store.require_active(source)
    visited: set[int] = set()

    def _explore(handle: int) -> None:
        visited.add(handle)
        visit(handle)
        for neighbor in store.neighbors(handle):
            if neighbor not in visited:
                _explore(neighbor)

    _explore(source)


def depth_first_order(store: VertexStore, source: int) -> list[int]:
    """Collect the vertices reachable from source in DFS pre-order."""
    order: list[int] = []
    depth_first(store, source, order.append)
    return order


def is_connected(store: VertexStore, origin: int, target: int) -> bool:
    """
    Check whether target is reachable from origin.

    Iterative DFS with an explicit stack; vertices are marked when pushed.
    A vertex is always connected to itself.

    Raises:
        InvalidVertex: If either handle is out of range or inactive
    """
    store.require_active(origin)
    store.require_active(target)

    if origin == target:
        return True

    visited = {origin}
    stack = [origin]

    while stack:
        current = stack.pop()
        if current == target:
            return True
        for neighbor in store.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append(neighbor)

    return False


def second_degree(store: VertexStore, user: int) -> list[Suggestion]:
    """
    Find neighbors of neighbors that are not yet direct neighbors.

    The user and its direct neighbors are excluded up front; every emitted
    candidate is excluded immediately, so a vertex reachable through several
    first-degree neighbors is suggested once, via the first one walked.

    Returns:
        Suggestions in (first-degree, then second-degree) adjacency order

    Raises:
        InvalidVertex: If user is out of range or inactive
    """
    store.require_active(user)

    excluded = {user}
    excluded.update(edge.destination for edge in store.adjacency(user))

    suggestions = []
    for friend in store.neighbors(user):
        for candidate in store.neighbors(friend):
            if candidate in excluded:
                continue
            excluded.add(candidate)
            suggestions.append(Suggestion(handle=candidate, via=friend))

    logger.debug(f"{len(suggestions)} suggestions for {user}")
    return suggestions
