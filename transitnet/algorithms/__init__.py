"""Shortest-path algorithms over a `Network`.

Three strategies share the ``(network, origin, destination) -> PathResult``
signature:

- `dijkstra_dense`: O(V^2) label setting with a linear minimum scan.
- `dijkstra_heap`: Dijkstra driven by a pairing heap with decrease-key.
- `bellman_ford`: O(V * E) relaxation, tolerant of negative weights.
"""

from transitnet.algorithms.base import UNREACHABLE, PathAlgorithm, PathResult
from transitnet.algorithms.bellman_ford import bellman_ford
from transitnet.algorithms.dense import dijkstra_dense
from transitnet.algorithms.heap import dijkstra_heap
from transitnet.algorithms.select import path_algorithm_fabric, shortest_path

__all__ = [
    "UNREACHABLE",
    "PathAlgorithm",
    "PathResult",
    "dijkstra_dense",
    "dijkstra_heap",
    "bellman_ford",
    "path_algorithm_fabric",
    "shortest_path",
]
