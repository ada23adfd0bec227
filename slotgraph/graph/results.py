"""
Result dataclasses returned by the graph algorithms.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PathResult:
    """
    Outcome of a shortest-path query.

    An unreachable destination is a valid result, not an error: distance is
    None and path is empty.

    Attributes:
        source: Handle the search started from
        destination: Handle the search was looking for
        distance: Total weight of the shortest path, or None if unreachable
        path: Handles from source to destination (inclusive)
        settled: Handles in the order their distance was finalized
        distances: Finite tentative distances known when the search stopped
    """

    source: int
    destination: int
    distance: int | None
    path: list[int] = field(default_factory=list)
    settled: list[int] = field(default_factory=list)
    distances: dict[int, int] = field(default_factory=dict)

    @property
    def reachable(self) -> bool:
        return self.distance is not None

    @property
    def hops(self) -> int | None:
        """Number of edges on the path, or None if unreachable."""
        if not self.reachable:
            return None
        return len(self.path) - 1


@dataclass(frozen=True)
class LevelVisit:
    """A vertex reached by breadth-first search and its hop distance."""

    handle: int
    level: int


@dataclass(frozen=True)
class Suggestion:
    """
    A second-degree neighbor.

    Attributes:
        handle: The suggested vertex
        via: First-degree neighbor through which it was first found
    """

    handle: int
    via: int
