"""Shared network fixtures.

Diagrams show arc weights in brackets.
"""

from __future__ import annotations

import random

import pytest

from transitnet.graph.network import Network


def build_network(vertices, arcs) -> Network:
    """Build a Network from vertex ids and ``(origin, destination, weight[, type])`` arcs."""
    net = Network()
    for vertex in vertices:
        net.add_vertex(vertex)
    for arc in arcs:
        net.add_arc(*arc)
    return net


def random_network(seed: int, n_vertices: int = 12, density: float = 0.3) -> Network:
    """Random network with non-negative integer weights, reproducible by seed."""
    rng = random.Random(seed)
    net = Network()
    for vertex in range(n_vertices):
        net.add_vertex(vertex)
    for origin in range(n_vertices):
        for destination in range(n_vertices):
            if origin != destination and rng.random() < density:
                net.add_arc(origin, destination, rng.randint(0, 20), rng.randint(0, 3))
    return net


@pytest.fixture
def diamond():
    #      [1]       [2]       [1]
    #  1 ──────► 2 ──────► 3 ──────► 4
    #  │                   ▲
    #  └───────────────────┘
    #           [5]
    return build_network(
        [1, 2, 3, 4],
        [(1, 2, 1, 0), (2, 3, 2, 0), (1, 3, 5, 1), (3, 4, 1, 2)],
    )


@pytest.fixture
def diamond_with_isolated(diamond):
    # Vertex 5 has no arcs at all
    diamond.add_vertex(5)
    return diamond


@pytest.fixture
def negative_detour():
    #      [5]      [-10]      [1]
    #  1 ──────► 2 ──────► 3 ──────► 4
    #  │                   ▲
    #  └───────────────────┘
    #           [1]
    # Dijkstra settles 3 at distance 1 before seeing the -10 arc.
    return build_network(
        [1, 2, 3, 4],
        [(1, 2, 5), (2, 3, -10), (1, 3, 1), (3, 4, 1)],
    )


@pytest.fixture
def negative_cycle():
    #      [1]       [1]
    #  0 ──────► 1 ──────► 2
    #            ▲         │
    #            └─────────┘
    #               [-3]
    return build_network([0, 1, 2, 3], [(0, 1, 1), (1, 2, 1), (2, 1, -3)])


@pytest.fixture
def zero_rooted():
    # Vertex 0 is a real vertex and a real predecessor.
    #      [2]       [3]
    #  0 ──────► 1 ──────► 2       3 (isolated)
    return build_network([0, 1, 2, 3], [(0, 1, 2), (1, 2, 3)])


@pytest.fixture
def ties():
    # Two equal-cost routes from 1 to 4.
    #      [1]       [1]
    #  1 ──────► 2 ──────► 4
    #  │                   ▲
    #  └──────► 3 ─────────┘
    #      [1]       [1]
    return build_network(
        [1, 2, 3, 4], [(1, 2, 1), (2, 4, 1), (1, 3, 1), (3, 4, 1)]
    )


@pytest.fixture
def make_random_network():
    """Factory fixture returning ``random_network``."""
    return random_network


@pytest.fixture
def make_network():
    """Factory fixture returning ``build_network``."""
    return build_network
