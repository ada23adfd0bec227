"""
Per-vertex adjacency lists.

Edges are kept in an owned Python list. New edges are pushed to the end and
iteration walks the list backwards, so the most recently inserted edge is
always visited first. Traversal order everywhere depends on this.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """
    A directed edge stored in its source vertex's adjacency list.

    Attributes:
        destination: Handle of the vertex this edge points at
        weight: Non-negative cost (route maps), or None (social networks)
    """

    destination: int
    weight: int | None = None


class AdjacencyList:
    """Edges leaving one vertex, iterated newest first."""

    def __init__(self) -> None:
        self._edges: list[Edge] = []

    def prepend(self, edge: Edge) -> None:
        """Insert an edge at the head of the list (O(1), no duplicate scan)."""
        self._edges.append(edge)

    def points_to(self, destination: int) -> bool:
        """Check whether any edge in the list targets `destination`."""
        return any(edge.destination == destination for edge in self._edges)

    def clear(self) -> None:
        self._edges.clear()

    def __iter__(self) -> Iterator[Edge]:
        return reversed(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"AdjacencyList({list(self)!r})"
