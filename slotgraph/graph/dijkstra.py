"""
Single-source shortest paths on a weighted vertex store.

Array-based Dijkstra: every selection step scans the slot table for the
closest unsettled active vertex. With a bounded universe this is simpler
and just as fast as a heap.
"""

from __future__ import annotations

import logging

import numpy as np

from slotgraph.graph.results import PathResult
from slotgraph.store import VertexStore

logger = logging.getLogger(__name__)

# Distance sentinel for vertices not reached yet
INFINITY = np.iinfo(np.int64).max

NO_PREDECESSOR = -1


def _closest_unsettled(
    distance: np.ndarray, settled: np.ndarray, active: np.ndarray
) -> int | None:
    """
    Pick the active, unsettled vertex with the smallest finite distance.

    Ties go to the lowest handle (argmin returns the first occurrence).
    Returns None when every remaining vertex is unreached.
    """
    candidates = np.flatnonzero(active & ~settled & (distance < INFINITY))
    if candidates.size == 0:
        return None
    return int(candidates[np.argmin(distance[candidates])])


def _reconstruct(predecessor: np.ndarray, destination: int) -> list[int]:
    """Walk predecessor links back from destination; the source has none."""
    path = []
    node = destination
    while node != NO_PREDECESSOR:
        path.append(node)
        node = int(predecessor[node])
    return list(reversed(path))


def shortest_path(store: VertexStore, source: int, destination: int) -> PathResult:
    """
    Find the cheapest path between two vertices.

    Args:
        store: Store whose edges all carry non-negative integer weights
        source: Handle to start from
        destination: Handle to reach

    Returns:
        PathResult with distance and path, or an unreachable result

    Raises:
        InvalidVertex: If either handle is out of range or inactive
    """
    store.require_active(source)
    store.require_active(destination)

    capacity = store.capacity
    active = np.array(store.active_flags(), dtype=bool)
    distance = np.full(capacity, INFINITY, dtype=np.int64)
    settled = np.zeros(capacity, dtype=bool)
    predecessor = np.full(capacity, NO_PREDECESSOR, dtype=np.int64)
    distance[source] = 0

    settle_order: list[int] = []

    for _ in range(store.active_count - 1):
        u = _closest_unsettled(distance, settled, active)
        if u is None:
            break

        settled[u] = True
        settle_order.append(u)
        logger.debug(f"Settled {u} at distance {distance[u]}")

        # Only finite vertices are ever selected
        if u == destination:
            break

        for edge in store.adjacency(u):
            v = edge.destination
            candidate = distance[u] + edge.weight
            if active[v] and not settled[v] and candidate < distance[v]:
                distance[v] = candidate
                predecessor[v] = u

    known = {int(h): int(distance[h]) for h in np.flatnonzero(distance < INFINITY)}

    if distance[destination] == INFINITY:
        logger.info(f"No path from {source} to {destination}")
        return PathResult(
            source=source,
            destination=destination,
            distance=None,
            settled=settle_order,
            distances=known,
        )

    path = _reconstruct(predecessor, destination)
    logger.info(
        f"Shortest path {source} -> {destination}: cost {int(distance[destination])}, "
        f"{' -> '.join(str(h) for h in path)}"
    )
    return PathResult(
        source=source,
        destination=destination,
        distance=int(distance[destination]),
        path=path,
        settled=settle_order,
        distances=known,
    )
