"""Heap-accelerated Dijkstra in O((V + E) log V).

Every vertex is inserted into a `PairingHeap` up front; relaxations lower
keys in place through the vertex's handle instead of pushing duplicates.
A vertex leaves the active map the moment it is extracted, which marks it
settled for the rest of the search.
"""

from __future__ import annotations

from typing import Dict

from transitnet.algorithms.base import UNREACHABLE, Distance, PathResult
from transitnet.algorithms.paths import build_path_result, check_endpoints
from transitnet.config import SEARCH_CONFIG
from transitnet.graph.network import WEIGHT_ATTR, Network, VertexID
from transitnet.heap.pairing import HeapHandle, PairingHeap
from transitnet.logging import get_logger

logger = get_logger(__name__)


def dijkstra_heap(
    network: Network, origin: VertexID, destination: VertexID
) -> PathResult:
    """Compute a shortest path with a pairing-heap driven Dijkstra.

    Non-origin vertices start with ``SEARCH_CONFIG.heap_initial_key``. A
    vertex counts as reached only once it has a recorded predecessor (or is
    the origin); extracting an unreached vertex ends the search.

    Args:
        network: Graph to search; arc weights must be non-negative.
        origin: Source vertex.
        destination: Target vertex.

    Returns:
        PathResult: Distance and vertex sequence, or ``(UNREACHABLE, ())``.

    Raises:
        VertexNotFoundError: If either endpoint is not in the network.
    """
    check_endpoints(network, origin, destination, "dijkstra_heap")
    outgoing_adjacencies = network._succ

    heap = PairingHeap()
    initial_key = SEARCH_CONFIG.heap_initial_key
    active: Dict[VertexID, HeapHandle] = {
        vertex: heap.insert(initial_key, vertex) for vertex in network
    }
    heap.decrease_key(active[origin], 0)

    pred: Dict[VertexID, VertexID] = {}
    distance: Distance = UNREACHABLE
    settled = 0
    negative_seen = False

    for _ in range(network.vertex_count()):
        handle = heap.find_min()
        node = heap.payload(handle)
        if node != origin and node not in pred:
            break
        node_distance, _ = heap.delete_min()
        del active[node]
        settled += 1

        if node == destination:
            distance = node_distance
            break

        for neighbor, attr in outgoing_adjacencies[node].items():
            neighbor_handle = active.get(neighbor)
            if neighbor_handle is None:
                continue
            weight = attr[WEIGHT_ATTR]
            if weight < 0:
                negative_seen = True
            candidate = node_distance + weight
            if candidate < heap.key(neighbor_handle):
                heap.decrease_key(neighbor_handle, candidate)
                pred[neighbor] = node

    if negative_seen:
        logger.warning(
            "dijkstra_heap relaxed a negative arc weight; result is not guaranteed"
        )

    result = build_path_result(
        pred, origin, destination, distance, network.vertex_count()
    )
    logger.debug(
        "dijkstra_heap %s->%s: distance=%s hops=%d settled=%d",
        origin,
        destination,
        result.distance,
        result.hops,
        settled,
    )
    return result
