"""
Graph base class shared by route maps and social networks.

Subclasses decide how an edge is inserted (directed or symmetric,
weighted or not); registration, lookup and teardown live here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from slotgraph.store import Vertex, VertexStore


class Graph(ABC):
    """
    Abstract graph over a bounded VertexStore.

    The graph owns its store. Algorithms read the store but never mutate it.
    """

    def __init__(self, capacity: int) -> None:
        """
        Initialize an empty graph.

        Args:
            capacity: Maximum number of vertices
        """
        self._store = VertexStore(capacity)

    @property
    @abstractmethod
    def kind(self) -> str:
        """Short identifier for the graph variant (e.g., 'routes', 'social')."""
        ...

    @property
    def store(self) -> VertexStore:
        return self._store

    @property
    def capacity(self) -> int:
        return self._store.capacity

    def register(self, label: str) -> int:
        """
        Add a vertex in the lowest free slot.

        Returns:
            Handle of the new vertex

        Raises:
            CapacityExceeded: If the graph is full
        """
        return self._store.register(label)

    @abstractmethod
    def add_edge(self, origin: int, destination: int, *args) -> bool:
        """
        Connect two registered vertices.

        Returns:
            True if an edge was inserted, False if the call was a no-op

        Raises:
            InvalidVertex: If either handle is out of range or inactive
        """
        ...

    def vertices(self) -> list[Vertex]:
        """Active vertices in handle order."""
        return self._store.active_vertices()

    def label(self, handle: int) -> str:
        return self._store.label(handle)

    def find(self, label: str) -> int | None:
        """Get the lowest active handle carrying this label, or None."""
        return self._store.find(label)

    def close(self) -> None:
        self._store.close()

    def __len__(self) -> int:
        return len(self._store)

    def __enter__(self) -> Graph:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind!r}, capacity={self.capacity}, vertices={len(self)})"
