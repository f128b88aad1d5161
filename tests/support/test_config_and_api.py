import math

import transitnet
from transitnet.algorithms import PathResult, dijkstra_heap
from transitnet.config import SEARCH_CONFIG, PathSearchConfig
from transitnet.exceptions import (
    EmptyHeapError,
    InvalidHandleError,
    NegativeCycleError,
    NotFoundError,
    TransitNetError,
    VertexNotFoundError,
)


def test_default_config_values():
    config = PathSearchConfig()
    assert config.heap_initial_key == math.inf
    assert config.detect_negative_cycles is False
    assert config.default_algorithm is transitnet.PathAlgorithm.HEAP


def test_finite_heap_initial_key(diamond_with_isolated, monkeypatch):
    # Reachability comes from recorded predecessors, not from the key value
    monkeypatch.setattr(SEARCH_CONFIG, "heap_initial_key", 10**9)
    assert dijkstra_heap(diamond_with_isolated, 1, 4) == PathResult(4, (1, 2, 3, 4))
    assert dijkstra_heap(diamond_with_isolated, 1, 5).path == ()


def test_exception_hierarchy():
    for exc in (EmptyHeapError, InvalidHandleError, NegativeCycleError, NotFoundError):
        assert issubclass(exc, TransitNetError)
    assert issubclass(VertexNotFoundError, KeyError)
    assert issubclass(NegativeCycleError, RuntimeError)


def test_public_api_exports():
    for name in transitnet.__all__:
        assert hasattr(transitnet, name), name
    assert isinstance(transitnet.__version__, str)


def test_readme_example():
    net = transitnet.Network()
    for vertex in (1, 2, 3, 4):
        net.add_vertex(vertex)
    net.add_arc(1, 2, weight=1)
    net.add_arc(2, 3, weight=2)
    net.add_arc(1, 3, weight=5)
    net.add_arc(3, 4, weight=1, arc_type=2)

    result = transitnet.shortest_path(net, 1, 4, transitnet.PathAlgorithm.DENSE)
    assert result.distance == 4
    assert result.path == (1, 2, 3, 4)
