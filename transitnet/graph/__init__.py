"""Graph primitives and helpers.

This package provides the strict directed network type `Network` and the
conversion helpers in `convert`.
"""

from transitnet.graph.convert import from_networkx, to_digraph
from transitnet.graph.network import ArcTuple, ArcType, Network, VertexID, Weight

__all__ = [
    "Network",
    "VertexID",
    "Weight",
    "ArcType",
    "ArcTuple",
    "from_networkx",
    "to_digraph",
]
