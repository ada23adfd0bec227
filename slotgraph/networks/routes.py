"""
Weighted directed route map between cities.
"""

from __future__ import annotations

import logging

from slotgraph.config import MAX_EDGE_WEIGHT, ROUTE_CAPACITY
from slotgraph.graph import PathResult, shortest_path
from slotgraph.networks.base import Graph
from slotgraph.store import Edge, InvalidVertex, InvalidWeight

logger = logging.getLogger(__name__)


class RouteMap(Graph):
    """
    Directed graph with non-negative integer route costs.

    Routes are one-way and parallel routes between the same pair of cities
    accumulate; a return trip needs its own route.
    """

    def __init__(self, capacity: int = ROUTE_CAPACITY) -> None:
        super().__init__(capacity)

    @property
    def kind(self) -> str:
        return "routes"

    def add_edge(self, origin: int, destination: int, weight: int) -> bool:
        """
        Add a one-way route.

        Args:
            origin: Handle of the departure city
            destination: Handle of the arrival city
            weight: Non-negative integer cost

        Returns:
            Always True (duplicates are kept as parallel routes)

        Raises:
            InvalidVertex: If either city is unknown
            InvalidWeight: If weight is negative or not an integer
        """
        for handle in (origin, destination):
            if not self._store.is_active(handle):
                logger.warning(f"Route rejected: invalid city {handle}")
                raise InvalidVertex(handle)

        if isinstance(weight, bool) or not isinstance(weight, int) or not 0 <= weight <= MAX_EDGE_WEIGHT:
            logger.warning(f"Route {origin} -> {destination} rejected: weight {weight!r}")
            raise InvalidWeight(weight)

        self._store.adjacency(origin).prepend(Edge(destination=destination, weight=weight))
        logger.debug(
            f"Route {self.label(origin)} ({origin}) -> "
            f"{self.label(destination)} ({destination}) cost {weight}"
        )
        return True

    add_route = add_edge

    def routes_from(self, city: int) -> list[Edge]:
        """Outgoing routes of a city, newest first."""
        return self._store.edges(city)

    def shortest_path(self, source: int, destination: int) -> PathResult:
        """
        Cheapest route between two cities (Dijkstra).

        Raises:
            InvalidVertex: If either city is unknown
        """
        return shortest_path(self._store, source, destination)
