"""Dense label-setting Dijkstra in O(V^2).

Each iteration scans the whole working set for the vertex with the smallest
tentative distance. No priority queue is involved, so the cost does not
depend on the number of arcs beyond the relaxations themselves.
"""

from __future__ import annotations

from typing import Dict, Optional

from transitnet.algorithms.base import UNREACHABLE, Distance, PathResult
from transitnet.algorithms.paths import build_path_result, check_endpoints
from transitnet.graph.network import WEIGHT_ATTR, Network, VertexID
from transitnet.logging import get_logger

logger = get_logger(__name__)


def dijkstra_dense(
    network: Network, origin: VertexID, destination: VertexID
) -> PathResult:
    """Compute a shortest path with the quadratic Dijkstra variant.

    Ties on the minimum tentative distance go to the vertex added to the
    network first. The search stops once the destination is settled, or once
    every remaining vertex is unreachable.

    Args:
        network: Graph to search; arc weights must be non-negative.
        origin: Source vertex.
        destination: Target vertex.

    Returns:
        PathResult: Distance and vertex sequence, or ``(UNREACHABLE, ())``.

    Raises:
        VertexNotFoundError: If either endpoint is not in the network.
    """
    check_endpoints(network, origin, destination, "dijkstra_dense")
    outgoing_adjacencies = network._succ

    distances: Dict[VertexID, Distance] = dict.fromkeys(network, UNREACHABLE)
    distances[origin] = 0
    pred: Dict[VertexID, VertexID] = {}
    # dict as an insertion-ordered set
    working = dict.fromkeys(network)

    settled = 0
    negative_seen = False
    for _ in range(network.vertex_count()):
        node_min: Optional[VertexID] = None
        for node in working:
            if node_min is None or distances[node] < distances[node_min]:
                node_min = node
        if node_min is None or distances[node_min] == UNREACHABLE:
            break

        del working[node_min]
        settled += 1
        if node_min == destination:
            break

        node_distance = distances[node_min]
        for neighbor, attr in outgoing_adjacencies[node_min].items():
            if neighbor not in working:
                continue
            weight = attr[WEIGHT_ATTR]
            if weight < 0:
                negative_seen = True
            candidate = node_distance + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                pred[neighbor] = node_min

    if negative_seen:
        logger.warning(
            "dijkstra_dense relaxed a negative arc weight; result is not guaranteed"
        )

    result = build_path_result(
        pred, origin, destination, distances[destination], network.vertex_count()
    )
    logger.debug(
        "dijkstra_dense %s->%s: distance=%s hops=%d settled=%d",
        origin,
        destination,
        result.distance,
        result.hops,
        settled,
    )
    return result
