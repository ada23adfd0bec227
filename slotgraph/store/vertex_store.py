"""
Bounded slot table of vertex records.

Usage:
    from slotgraph.store import VertexStore

    with VertexStore(capacity=10) as store:
        a = store.register("A")   # 0
        b = store.register("B")   # 1
        store.adjacency(a).prepend(Edge(destination=b, weight=3))
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from slotgraph.config import MAX_CAPACITY, MAX_LABEL_LENGTH
from slotgraph.store.adjacency import AdjacencyList, Edge
from slotgraph.store.errors import CapacityExceeded, GraphError, InvalidVertex

logger = logging.getLogger(__name__)


@dataclass
class Vertex:
    """
    One slot of the store.

    Attributes:
        id: Slot index, doubles as the vertex handle
        label: Display label (truncated to MAX_LABEL_LENGTH)
        active: False while the slot is free
        adjacency: Outgoing edges, owned by this slot
    """

    id: int
    label: str = ""
    active: bool = False
    adjacency: AdjacencyList = field(default_factory=AdjacencyList)


class VertexStore:
    """
    Fixed-capacity table of vertex slots.

    Registration always takes the lowest free slot, so handles are reused
    by lowest index rather than handed out monotonically. The store owns
    every slot and, through them, every adjacency list.
    """

    def __init__(self, capacity: int) -> None:
        """
        Initialize a store with every slot inactive.

        Args:
            capacity: Number of slots (1..MAX_CAPACITY)

        Raises:
            ValueError: If capacity is outside the supported range
        """
        if not 1 <= capacity <= MAX_CAPACITY:
            raise ValueError(f"Capacity must be in [1, {MAX_CAPACITY}], got {capacity}")

        self._capacity = capacity
        self._slots = [Vertex(id=i) for i in range(capacity)]
        self._active_count = 0
        self._closed = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def active_count(self) -> int:
        """Number of slots currently active."""
        return self._active_count

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise GraphError("Vertex store has been closed")

    # =========================================================================
    # Registration
    # =========================================================================

    def register(self, label: str) -> int:
        """
        Activate the first free slot with the given label.

        Labels longer than MAX_LABEL_LENGTH are truncated without error.

        Returns:
            Handle (slot index) of the new vertex

        Raises:
            CapacityExceeded: If every slot is already active
        """
        self._ensure_open()
        if self._active_count >= self._capacity:
            logger.warning(f"Vertex limit ({self._capacity}) reached, '{label}' not registered")
            raise CapacityExceeded(self._capacity)

        for vertex in self._slots:
            if not vertex.active:
                vertex.active = True
                vertex.label = label[:MAX_LABEL_LENGTH]
                vertex.adjacency.clear()
                self._active_count += 1
                logger.info(f"Registered '{vertex.label}' (handle {vertex.id})")
                return vertex.id

        # active_count < capacity guarantees a free slot
        raise CapacityExceeded(self._capacity)

    # =========================================================================
    # Accessors
    # =========================================================================

    def is_active(self, handle: int) -> bool:
        """Check that a handle is in range and refers to an active slot."""
        return (
            isinstance(handle, int)
            and 0 <= handle < self._capacity
            and self._slots[handle].active
        )

    def require_active(self, handle: int) -> Vertex:
        """
        Get the vertex for a handle, validating it first.

        Raises:
            InvalidVertex: If the handle is out of range or inactive
        """
        self._ensure_open()
        if not self.is_active(handle):
            raise InvalidVertex(handle)
        return self._slots[handle]

    def label(self, handle: int) -> str:
        return self.require_active(handle).label

    def adjacency(self, handle: int) -> AdjacencyList:
        """Get the adjacency list of an active vertex."""
        return self.require_active(handle).adjacency

    def edges(self, handle: int) -> list[Edge]:
        """Outgoing edges of a vertex in adjacency order (newest first)."""
        return list(self.require_active(handle).adjacency)

    def neighbors(self, handle: int) -> Iterator[int]:
        """
        Yield active destinations of a vertex's edges in adjacency order.

        Edges are never retracted, so destinations that are no longer active
        are skipped here rather than removed from the list.
        """
        for edge in self._slots[handle].adjacency:
            if self._slots[edge.destination].active:
                yield edge.destination

    def active_vertices(self) -> list[Vertex]:
        """All active vertices in handle order."""
        self._ensure_open()
        return [vertex for vertex in self._slots if vertex.active]

    def active_flags(self) -> list[bool]:
        """Per-slot active flag, indexed by handle."""
        return [vertex.active for vertex in self._slots]

    def find(self, label: str) -> int | None:
        """Get the lowest active handle with this label, or None if not found."""
        self._ensure_open()
        label = label[:MAX_LABEL_LENGTH]
        for vertex in self._slots:
            if vertex.active and vertex.label == label:
                return vertex.id
        return None

    # =========================================================================
    # Teardown
    # =========================================================================

    def close(self) -> None:
        """Release every adjacency list. The store is unusable afterwards."""
        if self._closed:
            return
        released = 0
        for vertex in self._slots:
            released += len(vertex.adjacency)
            vertex.adjacency.clear()
        self._closed = True
        logger.info(f"Vertex store released ({released} edges)")

    def __len__(self) -> int:
        return self._active_count

    def __enter__(self) -> VertexStore:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"VertexStore(capacity={self._capacity}, active={self._active_count})"
