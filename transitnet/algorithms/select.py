"""Selection of a shortest-path strategy by enum value."""

from __future__ import annotations

from typing import Callable, Optional

from transitnet.algorithms.base import PathAlgorithm, PathResult
from transitnet.algorithms.bellman_ford import bellman_ford
from transitnet.algorithms.dense import dijkstra_dense
from transitnet.algorithms.heap import dijkstra_heap
from transitnet.config import SEARCH_CONFIG
from transitnet.graph.network import Network, VertexID

PathFunc = Callable[[Network, VertexID, VertexID], PathResult]


def path_algorithm_fabric(algorithm: PathAlgorithm) -> PathFunc:
    """Return the path function implementing ``algorithm``.

    Args:
        algorithm: A ``PathAlgorithm`` member or its integer value.

    Raises:
        ValueError: If ``algorithm`` is not a known strategy.
    """
    try:
        algorithm = PathAlgorithm(algorithm)
    except ValueError:
        raise ValueError(f"Unknown path algorithm: {algorithm!r}") from None
    if algorithm == PathAlgorithm.DENSE:
        return dijkstra_dense
    elif algorithm == PathAlgorithm.HEAP:
        return dijkstra_heap
    return bellman_ford


def shortest_path(
    network: Network,
    origin: VertexID,
    destination: VertexID,
    algorithm: Optional[PathAlgorithm] = None,
) -> PathResult:
    """Run the selected strategy; defaults to ``SEARCH_CONFIG.default_algorithm``."""
    if algorithm is None:
        algorithm = SEARCH_CONFIG.default_algorithm
    return path_algorithm_fabric(algorithm)(network, origin, destination)
