"""Conversion utilities between Network and plain NetworkX graphs.

``from_networkx`` builds a Network from any NetworkX graph, for example one
assembled by a dataset loader. ``to_digraph`` hands a Network to code that
expects a vanilla ``networkx.DiGraph``.
"""

from typing import Any

import networkx as nx

from transitnet.graph.network import TYPE_ATTR, WEIGHT_ATTR, Network


def from_networkx(
    nx_graph: nx.Graph,
    weight_attr: str = WEIGHT_ATTR,
    type_attr: str = TYPE_ATTR,
    default_weight: Any = 1,
    default_type: int = 0,
) -> Network:
    """Build a Network from a NetworkX graph.

    Undirected edges become a pair of opposite arcs. Node identifiers must be
    non-negative integers.

    Args:
        nx_graph: Source graph (directed or undirected, not a multigraph).
        weight_attr: Edge attribute holding the arc weight.
        type_attr: Edge attribute holding the arc type.
        default_weight: Weight used when ``weight_attr`` is missing.
        default_type: Type used when ``type_attr`` is missing.

    Returns:
        A new Network with the same vertices and arcs.

    Raises:
        ValueError: If ``nx_graph`` is a multigraph.
    """
    if nx_graph.is_multigraph():
        raise ValueError("from_networkx: multigraphs are not supported")

    network = Network()
    for node in nx_graph.nodes:
        network.add_vertex(node)

    for u, v, data in nx_graph.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        arc_type = data.get(type_attr, default_type)
        network.add_arc(u, v, weight, arc_type)
        if not nx_graph.is_directed() and u != v:
            network.add_arc(v, u, weight, arc_type)
    return network


def to_digraph(network: Network) -> nx.DiGraph:
    """Copy a Network into a plain ``networkx.DiGraph``.

    The result carries ``weight`` and ``type`` edge attributes and has none of
    the Network's strictness, so it can be mutated freely.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(network.vertices())
    for origin, destination, weight, arc_type in network.arcs():
        nx_graph.add_edge(
            origin, destination, **{WEIGHT_ATTR: weight, TYPE_ATTR: arc_type}
        )
    return nx_graph
