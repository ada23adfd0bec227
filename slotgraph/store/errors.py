"""
Exceptions raised by the vertex store and the graph operations built on it.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all graph errors."""


class CapacityExceeded(GraphError):
    """Raised when registering a vertex into a store with no free slot."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Vertex limit ({capacity}) reached")


class InvalidVertex(GraphError, IndexError):
    """Raised when a handle is out of range or refers to an inactive slot."""

    def __init__(self, handle: int) -> None:
        self.handle = handle
        super().__init__(f"Invalid or inactive vertex handle: {handle}")


class InvalidWeight(GraphError, ValueError):
    """Raised when an edge weight is negative or not an integer."""

    def __init__(self, weight: object) -> None:
        self.weight = weight
        super().__init__(f"Edge weight must be a non-negative integer, got {weight!r}")


class SelfLoop(GraphError, ValueError):
    """Raised when connecting a vertex to itself in an undirected network."""

    def __init__(self, handle: int) -> None:
        self.handle = handle
        super().__init__(f"Vertex {handle} cannot be connected to itself")
