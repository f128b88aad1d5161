"""Directed, weighted, typed-arc network.

`Network` extends `networkx.DiGraph` with a strict contract: vertices are
non-negative integer ids that must be added explicitly, at most one arc joins
an ordered vertex pair, and referencing a missing vertex or arc raises instead
of returning a default. Each arc stores two attributes, ``weight`` and
``type``. Vertex and arc counts are kept as O(1) counters.
"""

from __future__ import annotations

from copy import deepcopy
from pickle import dumps, loads
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Union,
)

import networkx as nx

from transitnet.exceptions import (
    ArcExistsError,
    ArcNotFoundError,
    InvalidVertexError,
    VertexExistsError,
    VertexNotFoundError,
)
from transitnet.logging import get_logger

if TYPE_CHECKING:
    from transitnet.algorithms.base import PathResult

VertexID = int
Weight = Union[int, float]
ArcType = int
ArcTuple = Tuple[VertexID, VertexID, Weight, ArcType]

WEIGHT_ATTR = "weight"
TYPE_ATTR = "type"

logger = get_logger(__name__)


class Network(nx.DiGraph):
    """A strict directed graph of integer vertices and typed, weighted arcs.

    This class enforces:
      - Vertex ids are non-negative integers (``InvalidVertexError`` otherwise).
      - No automatic creation of missing vertices when adding an arc.
      - No duplicate vertices or arcs (``AlreadyExistsError`` subclasses).
      - Querying or removing missing vertices or arcs raises ``NotFoundError``
        subclasses.
      - ``copy()`` performs a pickle-based deep copy.

    The networkx mutators (``add_node``, ``add_edge``, ``remove_node``, ...)
    are routed through the strict methods so the arc counter stays exact.

    Inherits from:
        networkx.DiGraph
    """

    def __init__(self, **attr: Any) -> None:
        """Initialize an empty Network.

        Args:
            **attr: Graph-level attributes forwarded to ``networkx.DiGraph``.
        """
        super().__init__(**attr)
        self._arc_count: int = 0

    def copy(self, as_view: bool = False) -> Network:  # type: ignore[override]
        """Return an independent copy of this network.

        Copying a view (``subgraph``, ``reverse(copy=False)``, ...) rebuilds a
        mutable Network from the vertices and arcs the view exposes.

        Args:
            as_view: If True, return a read-only networkx view instead.
        """
        if as_view:
            return super().copy(as_view=True)  # type: ignore[return-value]
        if nx.is_frozen(self):
            # Views carry filter closures that cannot be pickled
            clone = self.__class__()
            clone.graph.update(deepcopy(self.graph))
            for vertex in self._node:
                clone.add_vertex(vertex)
            for origin, destination, weight, arc_type in self.arcs():
                clone.add_arc(origin, destination, weight, arc_type)
            return clone
        return loads(dumps(self))

    #
    # Counters and membership
    #
    def vertex_count(self) -> int:
        return len(self._node)

    def arc_count(self) -> int:
        if nx.is_frozen(self):
            # A view shares (and may filter) another graph's adjacency
            return self.number_of_edges()
        return self._arc_count

    def is_empty(self) -> bool:
        return not self._node

    def has_vertex(self, vertex: VertexID) -> bool:
        return vertex in self._node

    def has_arc(self, origin: VertexID, destination: VertexID) -> bool:
        """Return True if the arc ``origin -> destination`` exists.

        Raises:
            VertexNotFoundError: If either vertex is absent.
        """
        self._require_vertices(origin, destination, "has_arc")
        return destination in self._succ[origin]

    #
    # Vertex management
    #
    def add_vertex(self, vertex: VertexID) -> None:
        """Add a vertex with an empty adjacency set.

        Raises:
            InvalidVertexError: If ``vertex`` is not a non-negative integer.
            VertexExistsError: If the vertex already exists.
        """
        self._require_mutable("add_vertex")
        if isinstance(vertex, bool) or not isinstance(vertex, int) or vertex < 0:
            raise InvalidVertexError(
                f"add_vertex: vertex id must be a non-negative integer, got {vertex!r}"
            )
        if vertex in self._node:
            raise VertexExistsError(f"add_vertex: vertex {vertex} already exists")
        super().add_node(vertex)

    def remove_vertex(self, vertex: VertexID) -> None:
        """Remove a vertex together with every incoming and outgoing arc.

        Incoming arcs are found through the reverse adjacency networkx keeps
        for directed graphs, so the cost is proportional to the degree.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        self._require_mutable("remove_vertex")
        if vertex not in self._node:
            raise VertexNotFoundError(f"remove_vertex: vertex {vertex} does not exist")
        incident = len(self._pred[vertex]) + len(self._succ[vertex])
        if vertex in self._succ[vertex]:
            incident -= 1  # self-loop is in both maps
        super().remove_node(vertex)
        self._arc_count -= incident
        logger.debug("Removed vertex %s and %d incident arcs", vertex, incident)

    #
    # Arc management
    #
    def add_arc(
        self,
        origin: VertexID,
        destination: VertexID,
        weight: Weight,
        arc_type: ArcType = 0,
    ) -> None:
        """Add the directed arc ``origin -> destination``.

        Args:
            origin: Tail vertex; must exist.
            destination: Head vertex; must exist.
            weight: Arc cost. The Dijkstra variants require it non-negative.
            arc_type: Integer tag stored with the arc.

        Raises:
            VertexNotFoundError: If either vertex is absent.
            ArcExistsError: If the arc already exists.
        """
        self._require_mutable("add_arc")
        if self.has_arc(origin, destination):
            raise ArcExistsError(
                f"add_arc: arc {origin}->{destination} already exists"
            )
        super().add_edge(
            origin, destination, **{WEIGHT_ATTR: weight, TYPE_ATTR: arc_type}
        )
        self._arc_count += 1
        logger.debug("Added arc %s->%s weight=%s", origin, destination, weight)

    def remove_arc(self, origin: VertexID, destination: VertexID) -> None:
        """Remove the arc ``origin -> destination``.

        Raises:
            VertexNotFoundError: If either vertex is absent.
            ArcNotFoundError: If the arc does not exist.
        """
        self._require_mutable("remove_arc")
        self._arc_attr(origin, destination, "remove_arc")
        super().remove_edge(origin, destination)
        self._arc_count -= 1

    def update_arc_weight(
        self, origin: VertexID, destination: VertexID, weight: Weight
    ) -> None:
        """Replace the weight of an existing arc; its type is left untouched.

        Raises:
            ArcNotFoundError: If the arc does not exist.
        """
        self._arc_attr(origin, destination, "update_arc_weight")[WEIGHT_ATTR] = weight

    def arc_weight(self, origin: VertexID, destination: VertexID) -> Weight:
        return self._arc_attr(origin, destination, "arc_weight")[WEIGHT_ATTR]

    def arc_type(self, origin: VertexID, destination: VertexID) -> ArcType:
        return self._arc_attr(origin, destination, "arc_type")[TYPE_ATTR]

    #
    # Iteration helpers
    #
    def vertices(self) -> List[VertexID]:
        """Return vertex ids in insertion order."""
        return list(self._node)

    def arcs(self) -> Iterator[ArcTuple]:
        """Yield ``(origin, destination, weight, type)`` for every arc."""
        for origin, neighbors in self._succ.items():
            for destination, attr in neighbors.items():
                yield origin, destination, attr[WEIGHT_ATTR], attr[TYPE_ATTR]

    def successors_of(self, vertex: VertexID) -> Dict[VertexID, Weight]:
        """Map each out-neighbour of ``vertex`` to the weight of the arc to it.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        if vertex not in self._node:
            raise VertexNotFoundError(f"successors_of: vertex {vertex} does not exist")
        return {
            neighbor: attr[WEIGHT_ATTR] for neighbor, attr in self._succ[vertex].items()
        }

    #
    # Path queries
    #
    def dijkstra_dense(self, origin: VertexID, destination: VertexID) -> PathResult:
        """See ``transitnet.algorithms.dense.dijkstra_dense``."""
        # Import here to avoid circular import
        from transitnet.algorithms.dense import dijkstra_dense

        return dijkstra_dense(self, origin, destination)

    def dijkstra_heap(self, origin: VertexID, destination: VertexID) -> PathResult:
        """See ``transitnet.algorithms.heap.dijkstra_heap``."""
        from transitnet.algorithms.heap import dijkstra_heap

        return dijkstra_heap(self, origin, destination)

    def bellman_ford(
        self,
        origin: VertexID,
        destination: VertexID,
        detect_negative_cycles: Optional[bool] = None,
    ) -> PathResult:
        """See ``transitnet.algorithms.bellman_ford.bellman_ford``."""
        from transitnet.algorithms.bellman_ford import bellman_ford

        return bellman_ford(self, origin, destination, detect_negative_cycles)

    def shortest_path(
        self, origin: VertexID, destination: VertexID, algorithm: Optional[int] = None
    ) -> PathResult:
        """See ``transitnet.algorithms.select.shortest_path``."""
        from transitnet.algorithms.select import shortest_path

        return shortest_path(self, origin, destination, algorithm)

    #
    # networkx mutators, kept strict
    #
    def add_node(self, node_for_adding: VertexID, **attr: Any) -> None:
        if attr:
            raise TypeError(f"add_node: vertices carry no attributes, got {sorted(attr)}")
        self.add_vertex(node_for_adding)

    def add_nodes_from(self, nodes_for_adding: Iterable[Any], **attr: Any) -> None:
        """Add vertices given as bare ids or networkx ``(id, attrdict)`` pairs.

        Raises:
            TypeError: If any attributes are supplied.
        """
        for node in nodes_for_adding:
            if isinstance(node, tuple) and len(node) == 2:
                node, data = node
                self.add_node(node, **{**attr, **data})
            else:
                self.add_node(node, **attr)

    def remove_node(self, n: VertexID) -> None:
        self.remove_vertex(n)

    def remove_nodes_from(self, nodes: Iterable[VertexID]) -> None:
        for node in list(nodes):
            self.remove_vertex(node)

    def add_edge(self, u_of_edge: VertexID, v_of_edge: VertexID, **attr: Any) -> None:
        """Add an arc; ``weight`` defaults to 1 and ``type`` to 0.

        Raises:
            TypeError: If attributes other than ``weight`` and ``type`` are given.
        """
        weight = attr.pop(WEIGHT_ATTR, 1)
        arc_type = attr.pop(TYPE_ATTR, 0)
        if attr:
            raise TypeError(f"add_edge: unsupported arc attributes {sorted(attr)}")
        self.add_arc(u_of_edge, v_of_edge, weight, arc_type)

    def add_edges_from(self, ebunch_to_add: Iterable[tuple], **attr: Any) -> None:
        for edge in ebunch_to_add:
            if len(edge) == 3:
                u, v, data = edge
                self.add_edge(u, v, **{**attr, **data})
            else:
                u, v = edge
                self.add_edge(u, v, **attr)

    def remove_edge(self, u: VertexID, v: VertexID) -> None:
        self.remove_arc(u, v)

    def remove_edges_from(self, ebunch: Iterable[tuple]) -> None:
        for edge in list(ebunch):
            self.remove_arc(edge[0], edge[1])

    def clear(self) -> None:
        super().clear()
        self._arc_count = 0

    def clear_edges(self) -> None:
        super().clear_edges()
        self._arc_count = 0

    #
    # Internals
    #
    def _require_mutable(self, op: str) -> None:
        if nx.is_frozen(self):
            raise nx.NetworkXError(f"{op}: frozen graph can't be modified")

    def _require_vertices(self, origin: VertexID, destination: VertexID, op: str) -> None:
        if origin not in self._node:
            raise VertexNotFoundError(f"{op}: vertex {origin} does not exist")
        if destination not in self._node:
            raise VertexNotFoundError(f"{op}: vertex {destination} does not exist")

    def _arc_attr(self, origin: VertexID, destination: VertexID, op: str) -> Dict[str, Any]:
        if not self.has_arc(origin, destination):
            raise ArcNotFoundError(f"{op}: arc {origin}->{destination} does not exist")
        return self._succ[origin][destination]
