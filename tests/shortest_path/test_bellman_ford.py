import random

import networkx as nx
import pytest

from transitnet.algorithms import UNREACHABLE, PathResult, bellman_ford
from transitnet.config import SEARCH_CONFIG
from transitnet.exceptions import NegativeCycleError
from transitnet.graph.network import Network


def negative_dag(seed: int, n_vertices: int = 10) -> Network:
    """Acyclic network (arcs only go to higher ids) with mixed-sign weights."""
    rng = random.Random(seed)
    net = Network()
    for vertex in range(n_vertices):
        net.add_vertex(vertex)
    for origin in range(n_vertices):
        for destination in range(origin + 1, n_vertices):
            if rng.random() < 0.4:
                net.add_arc(origin, destination, rng.randint(-8, 12))
    return net


def test_detection_raises_on_reachable_cycle(negative_cycle):
    with pytest.raises(NegativeCycleError, match="reachable from vertex 0"):
        bellman_ford(negative_cycle, 0, 3, detect_negative_cycles=True)


def test_detection_ignores_unreachable_cycle(negative_cycle):
    # Vertex 3 reaches nothing, so the cycle 1<->2 never gets a finite distance
    result = bellman_ford(negative_cycle, 3, 2, detect_negative_cycles=True)
    assert result == PathResult(UNREACHABLE, ())


def test_detection_does_not_flag_negative_arcs_without_cycle(negative_detour):
    result = bellman_ford(negative_detour, 1, 4, detect_negative_cycles=True)
    assert result == PathResult(-4, (1, 2, 3, 4))


def test_undetected_cycle_unrelated_destination_still_answers(negative_cycle):
    assert bellman_ford(negative_cycle, 0, 3) == PathResult(UNREACHABLE, ())
    assert bellman_ford(negative_cycle, 0, 0) == PathResult(0, (0,))


def test_undetected_cycle_on_path_does_not_loop_forever(negative_cycle):
    with pytest.raises(NegativeCycleError, match="loops"):
        bellman_ford(negative_cycle, 0, 2)


def test_config_enables_detection(negative_cycle, monkeypatch):
    monkeypatch.setattr(SEARCH_CONFIG, "detect_negative_cycles", True)
    with pytest.raises(NegativeCycleError, match="bellman_ford"):
        bellman_ford(negative_cycle, 0, 3)
    # An explicit argument wins over the configured default
    assert bellman_ford(negative_cycle, 0, 3, detect_negative_cycles=False).path == ()


def test_network_method_forwards_detection_flag(negative_cycle):
    with pytest.raises(NegativeCycleError):
        negative_cycle.bellman_ford(0, 1, detect_negative_cycles=True)


@pytest.mark.parametrize("seed", range(6))
def test_matches_networkx_with_negative_weights(seed):
    net = negative_dag(seed)
    for origin in net:
        lengths = nx.single_source_bellman_ford_path_length(net, origin)
        for destination in net:
            result = bellman_ford(net, origin, destination)
            if destination in lengths:
                assert result.distance == lengths[destination]
                assert result.path[0] == origin and result.path[-1] == destination
            else:
                assert result == PathResult(UNREACHABLE, ())


def test_stops_early_once_stable(diamond, caplog):
    caplog.set_level("DEBUG", logger="transitnet")
    bellman_ford(diamond, 1, 4)
    # Four vertices allow three passes; the diamond settles after two.
    assert "passes=2" in caplog.text
