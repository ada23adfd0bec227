"""
Vertex storage module.

Provides the bounded slot table and the adjacency lists it owns:
- VertexStore: Fixed-capacity vertex slots with lowest-free-slot registration
- Vertex: One slot record
- AdjacencyList / Edge: Outgoing edges, iterated newest first
"""

from slotgraph.store.adjacency import AdjacencyList, Edge
from slotgraph.store.errors import (
    CapacityExceeded,
    GraphError,
    InvalidVertex,
    InvalidWeight,
    SelfLoop,
)
from slotgraph.store.vertex_store import Vertex, VertexStore

__all__ = [
    "AdjacencyList",
    "Edge",
    "Vertex",
    "VertexStore",
    "GraphError",
    "CapacityExceeded",
    "InvalidVertex",
    "InvalidWeight",
    "SelfLoop",
]
