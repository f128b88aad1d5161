"""Bellman-Ford shortest path in O(V * E).

Unlike the Dijkstra variants this tolerates negative arc weights. Passes
stop early once a full pass improves nothing. Negative cycles are only
reported when detection is requested. By default the pass bound caps the
work, the distances it leaves behind are not meaningful, and a destination
whose predecessor chain runs into the cycle raises `NegativeCycleError` at
path reconstruction instead of looping forever.
"""

from __future__ import annotations

from typing import Dict, Optional

from transitnet.algorithms.base import UNREACHABLE, Distance, PathResult
from transitnet.algorithms.paths import build_path_result, check_endpoints
from transitnet.config import SEARCH_CONFIG
from transitnet.exceptions import NegativeCycleError
from transitnet.graph.network import WEIGHT_ATTR, Network, VertexID
from transitnet.logging import get_logger

logger = get_logger(__name__)


def _relax_pass(
    network: Network,
    distances: Dict[VertexID, Distance],
    pred: Dict[VertexID, VertexID],
) -> bool:
    """Relax every arc leaving a vertex with a finite distance.

    Returns:
        bool: True if at least one distance improved.
    """
    improved = False
    for node, neighbors in network._succ.items():
        node_distance = distances[node]
        if node_distance == UNREACHABLE:
            continue
        for neighbor, attr in neighbors.items():
            candidate = node_distance + attr[WEIGHT_ATTR]
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                pred[neighbor] = node
                improved = True
    return improved


def bellman_ford(
    network: Network,
    origin: VertexID,
    destination: VertexID,
    detect_negative_cycles: Optional[bool] = None,
) -> PathResult:
    """Compute a shortest path by repeated relaxation of all arcs.

    Args:
        network: Graph to search; negative weights are allowed.
        origin: Source vertex.
        destination: Target vertex.
        detect_negative_cycles: Run one extra pass after the ``V - 1`` bound
            and raise if it still improves a distance. ``None`` uses
            ``SEARCH_CONFIG.detect_negative_cycles``. With detection off, a
            negative cycle goes unreported unless the walk back from
            ``destination`` enters it; that walk is capped at the vertex
            count and raises ``NegativeCycleError`` when the cap is hit.

    Returns:
        PathResult: Distance and vertex sequence, or ``(UNREACHABLE, ())``.

    Raises:
        VertexNotFoundError: If either endpoint is not in the network.
        NegativeCycleError: If detection is on and a negative cycle is
            reachable from ``origin``, or if path reconstruction runs into a
            predecessor loop.
    """
    check_endpoints(network, origin, destination, "bellman_ford")
    if detect_negative_cycles is None:
        detect_negative_cycles = SEARCH_CONFIG.detect_negative_cycles

    distances: Dict[VertexID, Distance] = dict.fromkeys(network, UNREACHABLE)
    distances[origin] = 0
    pred: Dict[VertexID, VertexID] = {}

    max_passes = network.vertex_count() - 1
    passes = 0
    improved = True
    while improved and passes < max_passes:
        improved = _relax_pass(network, distances, pred)
        passes += 1

    if improved:
        if detect_negative_cycles and _relax_pass(network, distances, pred):
            raise NegativeCycleError(
                f"bellman_ford: negative cycle reachable from vertex {origin}"
            )
        logger.debug("bellman_ford stopped at the pass bound (%d passes)", passes)

    result = build_path_result(
        pred, origin, destination, distances[destination], network.vertex_count()
    )
    logger.debug(
        "bellman_ford %s->%s: distance=%s hops=%d passes=%d",
        origin,
        destination,
        result.distance,
        result.hops,
        passes,
    )
    return result
