"""
Undirected, unweighted social network.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from slotgraph.config import SOCIAL_CAPACITY
from slotgraph.graph import (
    LevelVisit,
    Suggestion,
    breadth_first,
    depth_first,
    depth_first_order,
    is_connected,
    second_degree,
)
from slotgraph.networks.base import Graph
from slotgraph.store import Edge, InvalidVertex, SelfLoop

logger = logging.getLogger(__name__)


class SocialNetwork(Graph):
    """
    Friendship graph.

    A friendship is stored as two directed edges, one in each user's list.
    Adding an existing friendship again is a no-op.
    """

    def __init__(self, capacity: int = SOCIAL_CAPACITY) -> None:
        super().__init__(capacity)

    @property
    def kind(self) -> str:
        return "social"

    def add_edge(self, origin: int, destination: int) -> bool:
        """
        Connect two users in both directions.

        Returns:
            True if at least one direction was new, False if already friends

        Raises:
            InvalidVertex: If either user is unknown
            SelfLoop: If both handles are the same user
        """
        for handle in (origin, destination):
            if not self._store.is_active(handle):
                logger.warning(f"Friendship rejected: invalid user {handle}")
                raise InvalidVertex(handle)

        if origin == destination:
            logger.warning(f"Friendship rejected: {origin} cannot befriend itself")
            raise SelfLoop(origin)

        inserted = False
        for a, b in ((origin, destination), (destination, origin)):
            adjacency = self._store.adjacency(a)
            if not adjacency.points_to(b):
                adjacency.prepend(Edge(destination=b))
                inserted = True

        if inserted:
            logger.debug(f"Connected {self.label(origin)} ({origin}) and {self.label(destination)} ({destination})")
        return inserted

    connect = add_edge

    def friends(self, user: int) -> list[int]:
        """Direct friends of a user, most recent first."""
        return [edge.destination for edge in self._store.edges(user)]

    # =========================================================================
    # Traversals
    # =========================================================================

    def bfs(self, source: int) -> list[LevelVisit]:
        """Users reachable from source with their hop distance."""
        return breadth_first(self._store, source)

    def dfs_report(
        self, source: int, on_visit: Callable[[int], None] | None = None
    ) -> list[int]:
        """
        Explore depth-first from source.

        Args:
            source: User to start from
            on_visit: Optional callback invoked as each user is reached

        Returns:
            Users in visitation order
        """
        order: list[int] = []

        def _report(handle: int) -> None:
            order.append(handle)
            if on_visit is not None:
                on_visit(handle)
            else:
                logger.debug(f"Visiting {self.label(handle)} ({handle})")

        depth_first(self._store, source, _report)
        return order

    def component(self, source: int) -> list[int]:
        """Members of the social group containing source, in DFS order."""
        return depth_first_order(self._store, source)

    def connected(self, a: int, b: int) -> bool:
        """Whether a chain of friendships links a and b."""
        return is_connected(self._store, a, b)

    def suggest(self, user: int) -> list[int]:
        """Friends of friends who are not yet friends of user."""
        return [s.handle for s in second_degree(self._store, user)]

    def suggest_with_mutuals(self, user: int) -> list[Suggestion]:
        """Like suggest(), also naming the friend each suggestion came through."""
        return second_degree(self._store, user)
