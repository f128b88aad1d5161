"""transitnet: shortest paths over directed, typed-arc transit networks.

Primary API:
    Network - strict directed graph of integer vertices and weighted, typed arcs
    dijkstra_dense() - O(V^2) Dijkstra
    dijkstra_heap() - Dijkstra over a pairing heap
    bellman_ford() - relaxation-based search tolerant of negative weights
    shortest_path() - dispatch by PathAlgorithm

Example:
    from transitnet import Network, dijkstra_heap

    net = Network()
    for vertex in (1, 2, 3):
        net.add_vertex(vertex)
    net.add_arc(1, 2, weight=4)
    net.add_arc(2, 3, weight=1)

    distance, path = dijkstra_heap(net, 1, 3)  # 5, (1, 2, 3)
"""

from __future__ import annotations

from transitnet import logging
from transitnet._version import __version__
from transitnet.algorithms import (
    UNREACHABLE,
    PathAlgorithm,
    PathResult,
    bellman_ford,
    dijkstra_dense,
    dijkstra_heap,
    path_algorithm_fabric,
    shortest_path,
)
from transitnet.config import SEARCH_CONFIG, PathSearchConfig
from transitnet.exceptions import (
    AlreadyExistsError,
    ArcExistsError,
    ArcNotFoundError,
    EmptyHeapError,
    InvalidHandleError,
    InvalidVertexError,
    NegativeCycleError,
    NotFoundError,
    TransitNetError,
    VertexExistsError,
    VertexNotFoundError,
)
from transitnet.graph import Network, from_networkx, to_digraph
from transitnet.heap import HeapHandle, PairingHeap

__all__ = [
    # Version
    "__version__",
    # Model
    "Network",
    "from_networkx",
    "to_digraph",
    # Algorithms
    "dijkstra_dense",
    "dijkstra_heap",
    "bellman_ford",
    "shortest_path",
    "path_algorithm_fabric",
    "PathAlgorithm",
    "PathResult",
    "UNREACHABLE",
    # Heap
    "PairingHeap",
    "HeapHandle",
    # Configuration
    "PathSearchConfig",
    "SEARCH_CONFIG",
    # Errors
    "TransitNetError",
    "NotFoundError",
    "VertexNotFoundError",
    "ArcNotFoundError",
    "AlreadyExistsError",
    "VertexExistsError",
    "ArcExistsError",
    "InvalidVertexError",
    "EmptyHeapError",
    "InvalidHandleError",
    "NegativeCycleError",
    # Utilities
    "logging",
]
