"""Path reconstruction helpers shared by the shortest-path algorithms."""

from __future__ import annotations

from typing import Dict

from transitnet.algorithms.base import UNREACHABLE, Distance, PathResult
from transitnet.exceptions import NegativeCycleError, VertexNotFoundError
from transitnet.graph.network import Network, VertexID


def check_endpoints(
    network: Network, origin: VertexID, destination: VertexID, op: str
) -> None:
    """Raise ``VertexNotFoundError`` unless both endpoints exist."""
    for vertex in (origin, destination):
        if not network.has_vertex(vertex):
            raise VertexNotFoundError(f"{op}: vertex {vertex} does not exist")


def build_path_result(
    pred: Dict[VertexID, VertexID],
    origin: VertexID,
    destination: VertexID,
    distance: Distance,
    max_vertices: int,
) -> PathResult:
    """Turn a predecessor map into a PathResult.

    A vertex absent from ``pred`` was never reached. The walk goes backward
    from ``destination`` until it meets ``origin``.

    Args:
        pred: Predecessor of every reached vertex except the origin.
        origin: Query origin.
        destination: Query destination.
        distance: Distance computed for ``destination``.
        max_vertices: Upper bound on the path length in vertices.

    Returns:
        PathResult: ``(UNREACHABLE, ())`` if the destination was never reached.

    Raises:
        NegativeCycleError: If the predecessor chain loops without reaching
            the origin, which only a negative cycle can cause.
    """
    if destination == origin:
        return PathResult(distance, (origin,))
    if destination not in pred:
        return PathResult(UNREACHABLE, ())

    reverse_path = [destination]
    node = destination
    while node != origin:
        node = pred[node]
        reverse_path.append(node)
        if len(reverse_path) > max_vertices:
            raise NegativeCycleError(
                f"predecessor chain from {destination} loops before reaching {origin}"
            )
    reverse_path.reverse()
    return PathResult(distance, tuple(reverse_path))
