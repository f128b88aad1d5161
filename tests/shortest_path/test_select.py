import pytest

from transitnet.algorithms import (
    PathAlgorithm,
    PathResult,
    bellman_ford,
    dijkstra_dense,
    dijkstra_heap,
    path_algorithm_fabric,
    shortest_path,
)
from transitnet.config import SEARCH_CONFIG


@pytest.mark.parametrize(
    "algorithm, expected",
    [
        (PathAlgorithm.DENSE, dijkstra_dense),
        (PathAlgorithm.HEAP, dijkstra_heap),
        (PathAlgorithm.BELLMAN_FORD, bellman_ford),
        (3, bellman_ford),
    ],
)
def test_fabric_returns_matching_function(algorithm, expected):
    assert path_algorithm_fabric(algorithm) is expected


def test_fabric_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown path algorithm: 99"):
        path_algorithm_fabric(99)


@pytest.mark.parametrize("algorithm", list(PathAlgorithm))
def test_shortest_path_dispatch(diamond, algorithm):
    assert shortest_path(diamond, 1, 4, algorithm) == PathResult(4, (1, 2, 3, 4))


def test_shortest_path_uses_configured_default(negative_detour, monkeypatch):
    assert shortest_path(negative_detour, 1, 4).distance == 2
    monkeypatch.setattr(SEARCH_CONFIG, "default_algorithm", PathAlgorithm.BELLMAN_FORD)
    assert shortest_path(negative_detour, 1, 4).distance == -4


def test_network_convenience_methods(diamond):
    expected = PathResult(4, (1, 2, 3, 4))
    assert diamond.dijkstra_dense(1, 4) == expected
    assert diamond.dijkstra_heap(1, 4) == expected
    assert diamond.bellman_ford(1, 4) == expected
    assert diamond.shortest_path(1, 4) == expected
    assert diamond.shortest_path(1, 4, PathAlgorithm.DENSE) == expected
