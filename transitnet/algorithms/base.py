"""Shared types for the shortest-path algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Tuple, Union

from transitnet.graph.network import VertexID

Distance = Union[int, float]

# Distance reported for an unreachable destination
UNREACHABLE: float = math.inf


class PathAlgorithm(IntEnum):
    """
    Shortest-path strategies
    """

    DENSE = 1
    HEAP = 2
    BELLMAN_FORD = 3


@dataclass(frozen=True)
class PathResult:
    """Outcome of one origin-destination query.

    Attributes:
        distance: Total weight of the path, or ``UNREACHABLE``.
        path: Vertex ids from origin to destination inclusive; empty iff the
            destination is unreachable.
    """

    distance: Distance
    path: Tuple[VertexID, ...]

    @property
    def reachable(self) -> bool:
        return bool(self.path)

    @property
    def hops(self) -> int:
        """Number of arcs on the path (0 when unreachable or trivial)."""
        return max(len(self.path) - 1, 0)

    def __iter__(self) -> Iterator:
        # Allows ``distance, path = result``
        yield self.distance
        yield self.path
